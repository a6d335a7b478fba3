"""Person Routes: REST CRUD and query endpoints over the injected PersonStore.

Invariants:
    - Request bodies validated by Pydantic before reaching the store
    - Unknown ids map to ResourceNotFoundError (404) at this layer only
    - List filters: at most one applied, precedence job_title > sex > age

Design Decisions:
    - Sync route functions: store calls are in-memory, FastAPI runs them in
      its threadpool and the store's lock serializes mutations
"""

from fastapi import APIRouter, Depends, Query, Response, status

from person_mcp.api.dependencies import get_person_store
from person_mcp.core.errors import ErrorContext, ResourceNotFoundError
from person_mcp.core.person_store import PersonStore
from person_mcp.schemas.person import PersonPayload, PersonResponse

router = APIRouter(prefix="/api/v1/persons", tags=["persons"])


def _not_found(person_id: int, operation: str) -> ResourceNotFoundError:
    return ResourceNotFoundError(
        "Person", str(person_id),
        ErrorContext(operation=operation, person_id=person_id),
    )


@router.get("", response_model=list[PersonResponse])
def list_persons(
    job_title: str | None = Query(None),
    sex: str | None = Query(None),
    age: int | None = Query(None),
    store: PersonStore = Depends(get_person_store),
):
    """List persons, optionally narrowed by one filter."""
    if job_title is not None:
        persons = store.search_by_job_title(job_title)
    elif sex is not None:
        persons = store.filter_by_sex(sex)
    elif age is not None:
        persons = store.filter_by_age(age)
    else:
        persons = store.get_all()
    return [PersonResponse.from_person(p) for p in persons]


@router.get("/{person_id}", response_model=PersonResponse)
def get_person(person_id: int, store: PersonStore = Depends(get_person_store)):
    person = store.get_by_id(person_id)
    if person is None:
        raise _not_found(person_id, "get_by_id")
    return PersonResponse.from_person(person)


@router.post(
    "", response_model=PersonResponse,
    status_code=status.HTTP_201_CREATED,
)
def create_person(
    body: PersonPayload, store: PersonStore = Depends(get_person_store),
):
    """Create a person. Any id in the body is ignored."""
    person = store.create(body.to_person())
    return PersonResponse.from_person(person)


@router.put("/{person_id}", response_model=PersonResponse)
def update_person(
    person_id: int, body: PersonPayload,
    store: PersonStore = Depends(get_person_store),
):
    """Replace every field except id."""
    if not store.update(person_id, body.to_person()):
        raise _not_found(person_id, "update")
    person = store.get_by_id(person_id)
    if person is None:
        # deleted concurrently between update and read
        raise _not_found(person_id, "update")
    return PersonResponse.from_person(person)


@router.delete("/{person_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_person(person_id: int, store: PersonStore = Depends(get_person_store)):
    if not store.delete(person_id):
        raise _not_found(person_id, "delete")
    return Response(status_code=status.HTTP_204_NO_CONTENT)
