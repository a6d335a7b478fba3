"""Route Dependencies: resolve the injected PersonStore from application state.

Invariants:
    - The store lives on app.state, set by create_app() / lifespan: no module global
    - get_tool_dispatch builds a dispatch per request over the same store
"""

from fastapi import Depends, Request

from person_mcp.core.person_store import PersonStore
from person_mcp.services.tool_dispatch import ToolDispatch


def get_person_store(request: Request) -> PersonStore:
    return request.app.state.person_store


def get_tool_dispatch(
    store: PersonStore = Depends(get_person_store),
) -> ToolDispatch:
    return ToolDispatch(store)
