"""Services Layer: tool handlers and tool dispatch over the Person store.

Invariants:
    - Handlers never touch store internals: public PersonStore methods only
    - Tool dispatch uses explicit dict mapping (no auto-discovery, no reflection)
"""
