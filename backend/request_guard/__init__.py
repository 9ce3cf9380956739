"""Request Guard — path-aware decoding, rule validation and error flattening for JSON APIs.

Invariants:
    - Package root contains no executable code (import side-effects prohibited)

Design Decisions:
    - Empty __init__.py: explicit imports only, no star exports
"""
