"""Response Mapping — tests for status codes and bodies per outcome.

Tests cover:
    - 404 for RouteNotFound, 400 for decode / validation / transport failures
    - Decode failures embed the path in the message, no structured errors
    - Transport failures without a cause use the generic message
    - Unknown outcomes become 500 without leaking the error
"""

from request_guard.core.outcomes import (
    DecodeFailure, RouteNotFound, RoutingFailure, TransportFailure,
    Unclassified, ValidationFailure,
)
from request_guard.core.response_mapping import (
    BAD_REQUEST_MESSAGE, FIELD_ERRORS_MESSAGE, INTERNAL_ERROR_MESSAGE, map_outcome,
)
from request_guard.core.validate import validate
from request_guard.schemas.create import CreateRequest


def test_route_not_found():
    status_code, body = map_outcome(RouteNotFound())
    assert status_code == 404
    assert body.to_response() == {"message": "Not Found", "errors": None}


def test_decode_failure():
    status_code, body = map_outcome(DecodeFailure(path=("address", "street_no"), message="bad"))
    assert status_code == 400
    assert body.message == "JSON path error: address.street_no: bad"
    assert body.errors is None


def test_validation_failure(invalid_payload):
    tree = validate(CreateRequest.model_validate(invalid_payload))
    status_code, body = map_outcome(ValidationFailure(tree=tree))
    assert status_code == 400
    assert body.message == FIELD_ERRORS_MESSAGE
    assert [e.field for e in body.errors] == [
        "email", "address.street", "address.street_no", "pets[0]", "pets[0].name",
    ]


def test_validation_failure_without_list_summaries(invalid_payload):
    tree = validate(CreateRequest.model_validate(invalid_payload))
    _, body = map_outcome(ValidationFailure(tree=tree), list_summaries=False)
    assert len(body.errors) == 4


def test_transport_failure_with_cause():
    status_code, body = map_outcome(TransportFailure(cause="email: Field required"))
    assert status_code == 400
    assert body.message == "email: Field required"
    assert body.errors is None


def test_transport_failure_without_cause():
    _, body = map_outcome(TransportFailure())
    assert body.message == BAD_REQUEST_MESSAGE


def test_routing_failure_keeps_status():
    status_code, body = map_outcome(RoutingFailure(status_code=405, message="Method Not Allowed"))
    assert status_code == 405
    assert body.message == "Method Not Allowed"


def test_unclassified_hides_error():
    status_code, body = map_outcome(Unclassified(error=RuntimeError("db password leaked")))
    assert status_code == 500
    assert body.to_response() == {"message": INTERNAL_ERROR_MESSAGE, "errors": None}


def test_unknown_object_is_internal_error():
    status_code, _ = map_outcome(object())
    assert status_code == 500
