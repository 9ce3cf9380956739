"""Create Routes — three ways to accept a CreateRequest, from naive to fully validated.

Invariants:
    - POST /create-basic: body decoded by FastAPI; failures surface as
      TransportFailure (400, cause text) via api/error_handlers.py
    - POST /create-path: raw body → path-tracking decoder only
    - POST /create-validator: raw body → decoder → validation engine
    - Success is 200 with the decoded request echoed back

Design Decisions:
    - Raw-body routes read request.body() themselves so the decoder, not the
      framework, owns decoding and can report the full failing path
"""

from fastapi import APIRouter, Request

from request_guard.api.error_handlers import error_response
from request_guard.core.outcomes import DecodeFailure, ValidationFailure
from request_guard.schemas.create import CreateAccepted, CreateRequest
from request_guard.schemas.errors import ErrorResponseBody
from request_guard.services.request_pipeline import decode_and_validate, decode_only

router = APIRouter(tags=["create"])

_ERROR_RESPONSES = {400: {"model": ErrorResponseBody}}


@router.post("/create-basic", response_model=CreateAccepted, responses=_ERROR_RESPONSES)
async def create_basic(body: CreateRequest):
    """Framework decoding only: no path tracking, no rules."""
    return CreateAccepted(data=body.model_dump())


@router.post("/create-path", response_model=CreateAccepted, responses=_ERROR_RESPONSES)
async def create_path(request: Request):
    """Path-tracking decode; rules are not applied."""
    raw = await request.body()
    result = decode_only(raw, CreateRequest)
    if isinstance(result, DecodeFailure):
        return error_response(result, request.url.path)
    return CreateAccepted(data=result.model_dump())


@router.post("/create-validator", response_model=CreateAccepted, responses=_ERROR_RESPONSES)
async def create_validator(request: Request):
    """Path-tracking decode, then every declared rule."""
    raw = await request.body()
    result = decode_and_validate(raw, CreateRequest)
    if isinstance(result, (DecodeFailure, ValidationFailure)):
        return error_response(result, request.url.path)
    return CreateAccepted(data=result.model_dump())
