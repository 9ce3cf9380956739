"""API Layer — FastAPI routes and error handlers.

Invariants:
    - Routes registered explicitly in main.py (no auto-discovery)
    - Every error response has the {message, errors} shape

Design Decisions:
    - Thin routes delegate to services/request_pipeline
"""
