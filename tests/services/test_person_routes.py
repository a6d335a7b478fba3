"""Person + tool routes: HTTP surface over the injected store.

Tests cover:
    - GET list with and without filters (job_title > sex > age precedence)
    - GET/PUT/DELETE on unknown ids return 404 envelope
    - POST returns 201 with allocator id, invalid body returns 400
    - Tool listing and tool execution endpoints
    - Health and readiness probes
    - Lifespan seeds an uninitialized store from the configured dataset
"""

from httpx import ASGITransport, AsyncClient

from person_mcp.config import Settings
from person_mcp.core.person_store import PersonStore
from person_mcp.main import create_app
from tests.factories import DATASET_PATH

NEW_PERSON = {
    "first_name": "Test",
    "last_name": "User",
    "email": "test.user@example.com",
    "sex": "Other",
    "ip_address": "127.0.0.1",
    "job_title": "Tester",
    "age": 25,
}


# --- /persons -----------------------------------------------------------------

async def test_list_persons(client):
    res = await client.get("/api/v1/persons")
    assert res.status_code == 200
    assert [p["id"] for p in res.json()] == [1, 2, 5, 7, 9]


async def test_list_persons_filters(client):
    by_title = await client.get("/api/v1/persons", params={"job_title": "developer"})
    assert [p["id"] for p in by_title.json()] == [1, 5]
    by_sex = await client.get("/api/v1/persons", params={"sex": "female"})
    assert [p["id"] for p in by_sex.json()] == [2, 7]
    by_age = await client.get("/api/v1/persons", params={"age": 40})
    assert [p["id"] for p in by_age.json()] == [1, 7]


async def test_list_persons_blank_job_title_returns_empty(client):
    res = await client.get("/api/v1/persons", params={"job_title": "  "})
    assert res.json() == []


async def test_list_persons_job_title_takes_precedence(client):
    res = await client.get(
        "/api/v1/persons", params={"job_title": "manager", "sex": "male"},
    )
    assert [p["id"] for p in res.json()] == [7]


async def test_get_person(client):
    res = await client.get("/api/v1/persons/1")
    assert res.status_code == 200
    assert res.json()["first_name"] == "Fons"


async def test_get_missing_person_returns_404(client):
    res = await client.get("/api/v1/persons/9999")
    assert res.status_code == 404
    assert res.json()["error"]["code"] == "RESOURCE_NOT_FOUND"


async def test_create_person(client, store):
    res = await client.post("/api/v1/persons", json={**NEW_PERSON, "id": 1})
    assert res.status_code == 201
    body = res.json()
    assert body["id"] == 10
    assert store.get_by_id(10).email == NEW_PERSON["email"]


async def test_create_person_invalid_body_returns_400(client, store):
    res = await client.post("/api/v1/persons", json={"first_name": "Only"})
    assert res.status_code == 400
    error = res.json()["error"]
    assert error["code"] == "VALIDATION_ERROR"
    assert error["category"] == "validation"
    assert {d["field"] for d in error["details"]} >= {"body.last_name", "body.age"}
    assert store.count() == 5


async def test_update_person(client):
    res = await client.put(
        "/api/v1/persons/2", json={**NEW_PERSON, "id": 77, "age": 26},
    )
    assert res.status_code == 200
    assert res.json()["id"] == 2
    assert res.json()["age"] == 26


async def test_update_accepts_long_free_form_values(client, store):
    long_values = {
        **NEW_PERSON,
        "sex": "Prefers not to say, self-described as " + "x" * 40,
        "ip_address": "2001:0db8:85a3:0000:0000:8a2e:0370:7334 via proxy 10.0.0.1",
    }
    res = await client.put("/api/v1/persons/2", json=long_values)
    assert res.status_code == 200
    assert store.get_by_id(2).sex == long_values["sex"]
    assert store.get_by_id(2).ip_address == long_values["ip_address"]


async def test_update_missing_person_returns_404(client, store):
    res = await client.put("/api/v1/persons/9998", json=NEW_PERSON)
    assert res.status_code == 404
    assert store.count() == 5


async def test_delete_person(client, store):
    res = await client.delete("/api/v1/persons/5")
    assert res.status_code == 204
    assert store.get_by_id(5) is None
    again = await client.delete("/api/v1/persons/5")
    assert again.status_code == 404


# --- /tools -------------------------------------------------------------------

async def test_list_tools(client):
    res = await client.get("/api/v1/tools")
    names = {t["name"] for t in res.json()["tools"]}
    assert "create_person" in names
    assert len(names) == 8


async def test_call_tool(client):
    res = await client.post(
        "/api/v1/tools/search_by_job_title", json={"query": "DEVELOPER"},
    )
    assert res.status_code == 200
    assert res.json()["count"] == 2


async def test_call_unknown_tool_is_in_band_error(client):
    res = await client.post("/api/v1/tools/drop_everything", json={})
    assert res.status_code == 200
    assert res.json()["error_code"] == "UNKNOWN_TOOL"


async def test_tool_mutation_visible_over_rest(client):
    await client.post("/api/v1/tools/delete_person", json={"id": 1})
    res = await client.get("/api/v1/persons/1")
    assert res.status_code == 404


# --- /health ------------------------------------------------------------------

async def test_health_check(client):
    res = await client.get("/api/v1/health/")
    assert res.status_code == 200
    assert res.json()["status"] == "healthy"


async def test_readiness_with_initialized_store(client):
    res = await client.get("/api/v1/health/ready")
    assert res.status_code == 200
    assert res.json()["checks"]["person_store"] == 5


async def test_readiness_before_initialize_returns_503():
    app = create_app(store=PersonStore())
    async with AsyncClient(
        transport=ASGITransport(app=app), base_url="http://test",
    ) as c:
        res = await c.get("/api/v1/health/ready")
    assert res.status_code == 503


async def test_store_used_before_initialize_returns_409():
    app = create_app(store=PersonStore())
    async with AsyncClient(
        transport=ASGITransport(app=app), base_url="http://test",
    ) as c:
        res = await c.get("/api/v1/persons")
    assert res.status_code == 409
    assert res.json()["error"]["code"] == "LIFECYCLE_ERROR"


# --- lifespan -----------------------------------------------------------------

async def test_lifespan_loads_dataset_into_empty_store():
    store = PersonStore()
    settings = Settings(dataset_path=str(DATASET_PATH), log_format="text")
    app = create_app(store=store, settings=settings)
    async with app.router.lifespan_context(app):
        assert store.is_initialized
        assert store.get_by_id(1).first_name == "Fons"
        assert store.count() == 20


async def test_lifespan_keeps_preseeded_store(store):
    settings = Settings(dataset_path="does/not/exist.csv", log_format="text")
    app = create_app(store=store, settings=settings)
    async with app.router.lifespan_context(app):
        assert store.count() == 5


# --- Unexpected failures ------------------------------------------------------

class _FailingStore(PersonStore):
    def get_all(self):
        raise RuntimeError("internal detail that must stay server-side")


async def test_unexpected_exception_returns_internal_error_envelope():
    store = _FailingStore()
    store.initialize([])
    app = create_app(store=store, settings=Settings(log_format="text"))
    transport = ASGITransport(app=app, raise_app_exceptions=False)
    async with AsyncClient(transport=transport, base_url="http://test") as c:
        res = await c.get("/api/v1/persons")
    assert res.status_code == 500
    error = res.json()["error"]
    assert error["code"] == "INTERNAL_ERROR"
    assert error["category"] == "internal"
    assert error["context"]["operation"] == "GET /api/v1/persons"
    assert "internal detail" not in res.text
