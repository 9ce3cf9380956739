"""Pydantic Schemas — request records and response envelopes for API endpoints.

Invariants:
    - Request records declare their rule tables next to their fields
    - Response schemas mirror core/outcomes.py for OpenAPI docs

Design Decisions:
    - Separate from core: schemas are API contracts, core is the pipeline
"""
