"""Domain Types: constants and enums shared across the core.

Invariants:
    - Allocator output is always >= FIRST_PERSON_ID
    - Store lifecycle states encoded as Enum: no raw string matching

Design Decisions:
    - str Enum: serializes to JSON without custom encoders (tool results are JSON)
"""

from enum import Enum


FIRST_PERSON_ID = 1  # allocator start for an empty dataset


class StoreStatus(str, Enum):
    """Store lifecycle states: initialize() moves UNINITIALIZED -> READY once."""
    UNINITIALIZED = "uninitialized"
    READY = "ready"
