"""Services Layer — request pipeline orchestration around the pure core.

Invariants:
    - Services may log; core/ never does
    - Services return outcomes, they never raise for client input

Design Decisions:
    - One orchestration module: decode → validate, matched by the route
"""
