"""Person Filters: pure predicates behind the store's search/filter operations.

Invariants:
    - All functions are PURE: no IO, no locking, no side effects
    - None or whitespace-only text queries match nothing (never "match everything")
    - Text comparison is case-insensitive via casefold(); age comparison is exact

Design Decisions:
    - Predicates separated from PersonStore: store owns locking + state,
      this module owns matching rules (responsibility separation)
    - select() returns a tuple: callers get an immutable snapshot by construction
"""

from collections.abc import Callable, Iterable

from person_mcp.core.person import Person

PersonPredicate = Callable[[Person], bool]


def is_blank(text: str | None) -> bool:
    """True for None, empty, or whitespace-only input."""
    return text is None or not text.strip()


def job_title_contains(query: str) -> PersonPredicate:
    """Case-insensitive substring match on job_title."""
    needle = query.casefold()
    return lambda person: needle in person.job_title.casefold()


def sex_equals(value: str) -> PersonPredicate:
    """Case-insensitive exact match on sex."""
    wanted = value.casefold()
    return lambda person: person.sex.casefold() == wanted


def age_equals(age: int) -> PersonPredicate:
    return lambda person: person.age == age


def select(persons: Iterable[Person], predicate: PersonPredicate) -> tuple[Person, ...]:
    """Filter preserving input order."""
    return tuple(p for p in persons if predicate(p))
