"""Core Layer — pure request-validation logic, no IO, no async.

Invariants:
    - No module in core/ imports from services/, api/, or infrastructure/
    - No module in core/ writes log records; ErrorSeverity only names levels
    - All functions are pure and deterministic

Design Decisions:
    - Functional core separated from imperative shell: routes and handlers
      own IO and logging, core only computes outcomes
"""
