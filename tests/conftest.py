"""Root conftest: shared test configuration and Person fixtures."""

import os

import pytest

from person_mcp.core.person import Person
from person_mcp.core.person_store import PersonStore
from tests.factories import DATASET_PATH, make_person

# Ensure tests never pick up a developer's .env dataset
os.environ.setdefault("DATASET_PATH", str(DATASET_PATH))
os.environ.setdefault("LOG_FORMAT", "text")


@pytest.fixture
def seed_persons() -> list[Person]:
    """Small fixed dataset: mixed-case values, gaps in ids, one negative age."""
    return [
        make_person(id=1, first_name="Fons", sex="Male", job_title="Senior Developer", age=40),
        make_person(id=2, first_name="Alethea", sex="Female", job_title="Accountant I", age=29),
        make_person(id=5, first_name="Brendin", sex="male", job_title="Web DEVELOPER III", age=35),
        make_person(id=7, first_name="Corissa", sex="FEMALE", job_title="Project Manager", age=40),
        make_person(id=9, first_name="Jaime", sex="Non-binary", job_title="", age=-3),
    ]


@pytest.fixture
def store(seed_persons) -> PersonStore:
    s = PersonStore()
    s.initialize(seed_persons)
    return s
