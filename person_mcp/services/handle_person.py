"""Person Handlers: tool implementations over PersonStore (8 methods).

Invariants:
    - Input validated by Pydantic schemas before touching the store
    - Results are JSON-safe dicts with status "ok"
    - Not-found reported as found/updated/deleted = False, never as an error
    - Missing create/update payload reaches the store as None -> INVALID_ARGUMENT

Design Decisions:
    - Handlers are sync: every store operation is an in-memory computation
    - Error mapping lives in ToolDispatch, handlers let domain errors propagate
"""

from person_mcp.core.person import Person
from person_mcp.core.person_store import PersonStore
from person_mcp.schemas.person import (
    AgeFilterInput,
    CreatePersonInput,
    JobTitleQueryInput,
    PersonIdInput,
    SexFilterInput,
    UpdatePersonInput,
)


def _persons_result(persons: tuple[Person, ...]) -> dict:
    return {
        "status": "ok",
        "count": len(persons),
        "persons": [p.to_dict() for p in persons],
    }


class PersonHandlers:
    """CRUD + query tools backed by a single injected PersonStore."""

    def __init__(self, store: PersonStore):
        self.store = store

    def get_all_persons(self, input_data: dict) -> dict:
        return _persons_result(self.store.get_all())

    def get_person_by_id(self, input_data: dict) -> dict:
        params = PersonIdInput.model_validate(input_data)
        person = self.store.get_by_id(params.id)
        return {
            "status": "ok",
            "found": person is not None,
            "person": person.to_dict() if person else None,
        }

    def create_person(self, input_data: dict) -> dict:
        params = CreatePersonInput.model_validate(input_data)
        data = params.person.to_person() if params.person else None
        person = self.store.create(data)
        return {"status": "ok", "person": person.to_dict()}

    def update_person(self, input_data: dict) -> dict:
        params = UpdatePersonInput.model_validate(input_data)
        data = params.person.to_person() if params.person else None
        updated = self.store.update(params.id, data)
        return {"status": "ok", "id": params.id, "updated": updated}

    def delete_person(self, input_data: dict) -> dict:
        params = PersonIdInput.model_validate(input_data)
        deleted = self.store.delete(params.id)
        return {"status": "ok", "id": params.id, "deleted": deleted}

    def search_by_job_title(self, input_data: dict) -> dict:
        params = JobTitleQueryInput.model_validate(input_data)
        return _persons_result(self.store.search_by_job_title(params.query))

    def filter_by_sex(self, input_data: dict) -> dict:
        params = SexFilterInput.model_validate(input_data)
        return _persons_result(self.store.filter_by_sex(params.sex))

    def filter_by_age(self, input_data: dict) -> dict:
        params = AgeFilterInput.model_validate(input_data)
        return _persons_result(self.store.filter_by_age(params.age))
