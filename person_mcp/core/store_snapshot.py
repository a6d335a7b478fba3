"""Store Snapshot: rebuild a PersonStore from PersonStore.snapshot() output.

Invariants:
    - Snapshot dict is JSON-safe: {"next_id": int, "persons": [dict, ...]}
    - Records and allocator counter restored as one unit: no id reuse after restore
    - Malformed snapshots raise InvalidArgumentError (never a half-built store)

Design Decisions:
    - Capture lives on PersonStore (needs the lock), restore lives here:
      a fresh store is built and initialized in one call
"""

from collections.abc import Mapping

from person_mcp.core.errors import ErrorContext, InvalidArgumentError
from person_mcp.core.person import Person
from person_mcp.core.person_store import PersonStore


def store_from_snapshot(snapshot: Mapping[str, object]) -> PersonStore:
    """Build an initialized store from a snapshot dict."""
    persons = _persons_from_snapshot(snapshot.get("persons", []))
    next_id = snapshot.get("next_id")
    if next_id is not None and not isinstance(next_id, int):
        raise InvalidArgumentError(
            "Snapshot next_id must be an integer.", "next_id",
            ErrorContext(operation="restore"),
        )
    store = PersonStore()
    store.initialize(persons, next_id=next_id)
    return store


def _persons_from_snapshot(raw: object) -> list[Person]:
    if not isinstance(raw, list):
        raise InvalidArgumentError(
            "Snapshot persons must be a list.", "persons",
            ErrorContext(operation="restore"),
        )
    persons = []
    for index, item in enumerate(raw):
        if not isinstance(item, Mapping):
            raise InvalidArgumentError(
                f"Snapshot person #{index} is not an object.", "persons",
                ErrorContext(operation="restore"),
            )
        try:
            persons.append(Person.from_mapping(item))
        except (KeyError, TypeError, ValueError) as e:
            raise InvalidArgumentError(
                f"Snapshot person #{index} is malformed: {e}", "persons",
                ErrorContext(operation="restore"),
            ) from e
    return persons
