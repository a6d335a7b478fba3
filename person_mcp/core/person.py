"""Person: immutable value type for the single entity held by the store.

Invariants:
    - Person is frozen: every change produces a new value (no in-place mutation)
    - with_id() / with_fields_of() are the only ways the store derives new values
    - to_dict() output is JSON-safe and round-trips through from_mapping()

Design Decisions:
    - Frozen dataclass over Pydantic model: core stays free of validation
      framework, schemas/ owns boundary validation
    - slots=True: small fixed field set, cheaper copies for snapshot tuples
"""

from collections.abc import Mapping
from dataclasses import asdict, dataclass, replace

PERSON_FIELDS: tuple[str, ...] = (
    "id", "first_name", "last_name", "email",
    "sex", "ip_address", "job_title", "age",
)


@dataclass(frozen=True, slots=True)
class Person:
    """One Person record. Text fields are free-form, age may be negative."""

    id: int
    first_name: str
    last_name: str
    email: str
    sex: str
    ip_address: str
    job_title: str
    age: int

    def with_id(self, person_id: int) -> "Person":
        return replace(self, id=person_id)

    def with_fields_of(self, other: "Person") -> "Person":
        """Full replacement of every field except id (no merge)."""
        return replace(other, id=self.id)

    def to_dict(self) -> dict:
        return asdict(self)

    @classmethod
    def from_mapping(cls, data: Mapping[str, object]) -> "Person":
        """Build from a dict with all PERSON_FIELDS. Raises KeyError/ValueError."""
        return cls(
            id=int(data["id"]),  # type: ignore[call-overload]
            first_name=str(data["first_name"]),
            last_name=str(data["last_name"]),
            email=str(data["email"]),
            sex=str(data["sex"]),
            ip_address=str(data["ip_address"]),
            job_title=str(data["job_title"]),
            age=int(data["age"]),  # type: ignore[call-overload]
        )
