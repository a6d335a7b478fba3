"""Person Store: in-memory CRUD + query engine with a monotonic id allocator.

Invariants:
    - Every held record has a unique id
    - _next_id is strictly greater than every id ever assigned (deleted ids never reused)
    - initialize() runs exactly once; a second call raises LifecycleError
    - Every other operation before initialize() raises LifecycleError
    - Query results are tuples: callers cannot mutate store state through them
    - Not-found is None / False, never an exception

Design Decisions:
    - One coarse RLock around every operation, reads included: data volume is
      small, and a reader never observes a half-applied mutation
    - Updates swap in a freshly built frozen Person instead of mutating fields
    - dict keeps insertion order: get_all() is stable without a separate index
    - Store is injected explicitly (create_app() -> app.state -> Depends), never a
      module-level singleton
"""

import logging
import threading
from collections.abc import Iterable

from person_mcp.core.domain_types import FIRST_PERSON_ID, StoreStatus
from person_mcp.core.errors import ErrorContext, InvalidArgumentError, LifecycleError
from person_mcp.core.person import Person
from person_mcp.core import person_filters

logger = logging.getLogger(__name__)


class PersonStore:
    """Thread-safe in-memory store of Person records."""

    def __init__(self) -> None:
        self._lock = threading.RLock()
        self._persons: dict[int, Person] = {}
        self._next_id = FIRST_PERSON_ID
        self._status = StoreStatus.UNINITIALIZED

    # --- Lifecycle ------------------------------------------------------------

    @property
    def is_initialized(self) -> bool:
        return self._status == StoreStatus.READY

    def initialize(
        self, records: Iterable[Person], next_id: int | None = None,
    ) -> None:
        """Seed the store once. Ids are kept as given.

        The allocator starts at max(id) + 1, or FIRST_PERSON_ID for an empty
        dataset. next_id overrides that start (restore from snapshot) and must
        exceed every loaded id.
        """
        with self._lock:
            if self._status == StoreStatus.READY:
                raise LifecycleError(
                    "PersonStore is already initialized.",
                    ErrorContext(operation="initialize"),
                )
            seeded = _index_by_id(records)
            floor = max(seeded, default=FIRST_PERSON_ID - 1) + 1
            if next_id is None:
                next_id = floor
            elif next_id < floor:
                raise InvalidArgumentError(
                    f"next_id {next_id} must be greater than every loaded id "
                    f"(minimum {floor}).",
                    "next_id",
                    ErrorContext(operation="initialize"),
                )
            self._persons = seeded
            self._next_id = next_id
            self._status = StoreStatus.READY
        logger.info(
            f"PersonStore initialized with {len(seeded)} records "
            f"(next id {next_id})",
            extra={"operation": "initialize"},
        )

    def _require_ready(self, operation: str) -> None:
        if self._status != StoreStatus.READY:
            raise LifecycleError(
                f"PersonStore.{operation} called before initialize().",
                ErrorContext(operation=operation),
            )

    # --- Reads ----------------------------------------------------------------

    def get_all(self) -> tuple[Person, ...]:
        with self._lock:
            self._require_ready("get_all")
            return tuple(self._persons.values())

    def get_by_id(self, person_id: int) -> Person | None:
        with self._lock:
            self._require_ready("get_by_id")
            return self._persons.get(person_id)

    def count(self) -> int:
        with self._lock:
            self._require_ready("count")
            return len(self._persons)

    # --- Mutations ------------------------------------------------------------

    def create(self, data: Person | None) -> Person:
        """Store a copy of data under a freshly allocated id. data.id is ignored."""
        if data is None:
            raise InvalidArgumentError(
                "Person data must not be null.", "data",
                ErrorContext(operation="create"),
            )
        with self._lock:
            self._require_ready("create")
            person = data.with_id(self._next_id)
            self._persons[person.id] = person
            self._next_id += 1
        logger.info(
            f"Created person {person.id}",
            extra={"operation": "create", "person_id": person.id},
        )
        return person

    def update(self, person_id: int, data: Person | None) -> bool:
        """Replace every field but id. False when person_id is unknown."""
        if data is None:
            raise InvalidArgumentError(
                "Person data must not be null.", "data",
                ErrorContext(operation="update", person_id=person_id),
            )
        with self._lock:
            self._require_ready("update")
            current = self._persons.get(person_id)
            if current is None:
                logger.debug(
                    f"Update skipped: person {person_id} not found",
                    extra={"operation": "update", "person_id": person_id},
                )
                return False
            self._persons[person_id] = current.with_fields_of(data)
        logger.info(
            f"Updated person {person_id}",
            extra={"operation": "update", "person_id": person_id},
        )
        return True

    def delete(self, person_id: int) -> bool:
        """Remove the record. Its id is never handed out again."""
        with self._lock:
            self._require_ready("delete")
            if self._persons.pop(person_id, None) is None:
                logger.debug(
                    f"Delete skipped: person {person_id} not found",
                    extra={"operation": "delete", "person_id": person_id},
                )
                return False
        logger.info(
            f"Deleted person {person_id}",
            extra={"operation": "delete", "person_id": person_id},
        )
        return True

    # --- Queries --------------------------------------------------------------

    def search_by_job_title(self, query: str | None) -> tuple[Person, ...]:
        """Case-insensitive substring search. None/blank query matches nothing."""
        with self._lock:
            self._require_ready("search_by_job_title")
            if person_filters.is_blank(query):
                return ()
            return person_filters.select(
                self._persons.values(), person_filters.job_title_contains(query),
            )

    def filter_by_sex(self, value: str | None) -> tuple[Person, ...]:
        """Case-insensitive exact match. None/blank value matches nothing."""
        with self._lock:
            self._require_ready("filter_by_sex")
            if person_filters.is_blank(value):
                return ()
            return person_filters.select(
                self._persons.values(), person_filters.sex_equals(value),
            )

    def filter_by_age(self, age: int) -> tuple[Person, ...]:
        with self._lock:
            self._require_ready("filter_by_age")
            return person_filters.select(
                self._persons.values(), person_filters.age_equals(age),
            )

    # --- Snapshot -------------------------------------------------------------

    def snapshot(self) -> dict:
        """Records and allocator position, captured atomically."""
        with self._lock:
            self._require_ready("snapshot")
            return {
                "next_id": self._next_id,
                "persons": [p.to_dict() for p in self._persons.values()],
            }


def _index_by_id(records: Iterable[Person]) -> dict[int, Person]:
    """Index records by id, rejecting negative or duplicate ids."""
    indexed: dict[int, Person] = {}
    for person in records:
        if person is None:
            raise InvalidArgumentError(
                "Initial dataset contains a null record.", "records",
                ErrorContext(operation="initialize"),
            )
        if person.id < 0:
            raise InvalidArgumentError(
                f"Initial dataset contains negative id {person.id}.", "records",
                ErrorContext(operation="initialize", person_id=person.id),
            )
        if person.id in indexed:
            raise InvalidArgumentError(
                f"Initial dataset contains duplicate id {person.id}.", "records",
                ErrorContext(operation="initialize", person_id=person.id),
            )
        indexed[person.id] = person
    return indexed
