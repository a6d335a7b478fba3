"""Core Layer: the Person store, its value types and pure predicates.

Invariants:
    - No module in core/ imports from services/, api/ or infrastructure/
    - No IO, no async: every operation is a synchronous in-memory computation

Design Decisions:
    - Functional core separated from the exposure shell (routes, tool dispatch)
"""
