"""Person Schemas: Pydantic models for the REST and tool-call boundaries.

Invariants:
    - PersonPayload.id is optional and ignored by the store (allocator owns ids)
    - Every text field is required on create and update: update is full replacement
    - Text fields are free-form: no length or format limits beyond the core Person
    - PersonResponse mirrors core.person.Person one-to-one

Design Decisions:
    - Separate payload/response models: the payload id is advisory, the response id is real
    - to_person() is the single conversion point from boundary model to core value
"""

from pydantic import BaseModel, ConfigDict

from person_mcp.core.person import Person


class PersonPayload(BaseModel):
    """Create/update body. Any id supplied here is ignored."""
    model_config = ConfigDict(extra="ignore")

    id: int | None = None
    first_name: str
    last_name: str
    email: str
    sex: str
    ip_address: str
    job_title: str
    age: int

    def to_person(self) -> Person:
        return Person(
            id=self.id or 0,
            first_name=self.first_name,
            last_name=self.last_name,
            email=self.email,
            sex=self.sex,
            ip_address=self.ip_address,
            job_title=self.job_title,
            age=self.age,
        )


class PersonResponse(BaseModel):
    """Public-facing Person record."""
    id: int
    first_name: str
    last_name: str
    email: str
    sex: str
    ip_address: str
    job_title: str
    age: int

    @classmethod
    def from_person(cls, person: Person) -> "PersonResponse":
        return cls(**person.to_dict())


# --- Tool inputs --------------------------------------------------------------

class PersonIdInput(BaseModel):
    id: int


class CreatePersonInput(BaseModel):
    person: PersonPayload | None = None


class UpdatePersonInput(BaseModel):
    id: int
    person: PersonPayload | None = None


class JobTitleQueryInput(BaseModel):
    query: str | None = None


class SexFilterInput(BaseModel):
    sex: str | None = None


class AgeFilterInput(BaseModel):
    age: int
