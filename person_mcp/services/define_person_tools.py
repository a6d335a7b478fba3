"""Person Tool Schemas: Anthropic Tool Use format for the Person store tools.

Invariants:
    - One entry per ToolDispatch handler, same names
    - create_person / update_person / delete_person are the only tools with side effects
    - search_by_job_title / filter_by_sex accept empty input and return no matches

Design Decisions:
    - Person object schema shared by create/update: update is full replacement,
      so both require every field
"""

_PERSON_SCHEMA = {
    "type": "object",
    "properties": {
        "first_name": {"type": "string"},
        "last_name": {"type": "string"},
        "email": {"type": "string"},
        "sex": {"type": "string"},
        "ip_address": {"type": "string"},
        "job_title": {"type": "string"},
        "age": {"type": "integer"},
    },
    "required": [
        "first_name", "last_name", "email", "sex",
        "ip_address", "job_title", "age",
    ],
}

TOOLS_PERSON = [
    {
        "name": "get_all_persons",
        "description": "Returns every person currently stored, in stable order.",
        "input_schema": {
            "type": "object",
            "properties": {},
            "required": [],
        },
    },
    {
        "name": "get_person_by_id",
        "description": (
            "Returns the person with the given id. "
            "found is false when no such person exists."
        ),
        "input_schema": {
            "type": "object",
            "properties": {"id": {"type": "integer"}},
            "required": ["id"],
        },
    },
    {
        "name": "create_person",
        "description": (
            "Creates a new person. The id is assigned by the store; "
            "returns the stored person with its id."
        ),
        "input_schema": {
            "type": "object",
            "properties": {"person": _PERSON_SCHEMA},
            "required": ["person"],
        },
    },
    {
        "name": "update_person",
        "description": (
            "Replaces every field of an existing person except its id. "
            "updated is false when no such person exists."
        ),
        "input_schema": {
            "type": "object",
            "properties": {
                "id": {"type": "integer"},
                "person": _PERSON_SCHEMA,
            },
            "required": ["id", "person"],
        },
    },
    {
        "name": "delete_person",
        "description": (
            "Deletes the person with the given id. "
            "deleted is false when no such person exists."
        ),
        "input_schema": {
            "type": "object",
            "properties": {"id": {"type": "integer"}},
            "required": ["id"],
        },
    },
    {
        "name": "search_by_job_title",
        "description": (
            "Returns persons whose job title contains the query "
            "(case-insensitive). A blank query returns no persons."
        ),
        "input_schema": {
            "type": "object",
            "properties": {"query": {"type": "string"}},
            "required": ["query"],
        },
    },
    {
        "name": "filter_by_sex",
        "description": (
            "Returns persons whose sex equals the value (case-insensitive). "
            "A blank value returns no persons."
        ),
        "input_schema": {
            "type": "object",
            "properties": {"sex": {"type": "string"}},
            "required": ["sex"],
        },
    },
    {
        "name": "filter_by_age",
        "description": "Returns persons whose age equals the given age exactly.",
        "input_schema": {
            "type": "object",
            "properties": {"age": {"type": "integer"}},
            "required": ["age"],
        },
    },
]
