"""Tool Dispatch: explicit routing from tool_name to handler function.

Invariants:
    - Every tool->handler mapping is visible: no getattr magic, no auto-discovery
    - Unknown tools return UNKNOWN_TOOL error (never raises)
    - Pydantic failures return VALIDATION_ERROR with field details (never raises)
    - PersonStoreError subclasses return their own code via to_tool_result()
    - Every tool call logged with tool_name and outcome

Design Decisions:
    - Explicit dict over reflection: every exposed operation visible in one place,
      adding a tool requires editing this dict and define_person_tools.py
    - Store injected via constructor: dispatch never reaches for a global
"""

import logging

from pydantic import ValidationError

from person_mcp.core.errors import (
    ErrorContext,
    PayloadValidationError,
    PersonStoreError,
)
from person_mcp.core.person_store import PersonStore
from person_mcp.services.define_person_tools import TOOLS_PERSON
from person_mcp.services.handle_person import PersonHandlers

logger = logging.getLogger(__name__)


class ToolDispatch:
    """Routes tool_name -> handler. Explicit registration, no auto-discovery."""

    def __init__(self, store: PersonStore):
        persons = PersonHandlers(store)

        # every mapping explicit: must match TOOLS_PERSON names
        self._handlers = {
            # Queries (5 tools)
            "get_all_persons": persons.get_all_persons,
            "get_person_by_id": persons.get_person_by_id,
            "search_by_job_title": persons.search_by_job_title,
            "filter_by_sex": persons.filter_by_sex,
            "filter_by_age": persons.filter_by_age,

            # Mutations (3 tools)
            "create_person": persons.create_person,
            "update_person": persons.update_person,
            "delete_person": persons.delete_person,
        }

    @property
    def tool_names(self) -> list[str]:
        return list(self._handlers)

    @staticmethod
    def tool_definitions() -> list[dict]:
        return list(TOOLS_PERSON)

    async def execute(self, tool_name: str, input_data: dict | None) -> dict:
        """Route tool_name to handler. Returns result dict. Logs every call."""
        handler = self._handlers.get(tool_name)
        if not handler:
            result = {
                "status": "error",
                "error_code": "UNKNOWN_TOOL",
                "message": f"Tool '{tool_name}' does not exist.",
            }
            self._log_tool_call(tool_name, result)
            return result
        try:
            result = handler(input_data or {})
        except ValidationError as e:
            result = PayloadValidationError.from_errors(
                e.errors(), "Invalid tool input", ErrorContext(tool_name=tool_name),
            ).to_tool_result()
        except PersonStoreError as e:
            e.context.tool_name = tool_name
            result = e.to_tool_result()
        self._log_tool_call(tool_name, result)
        return result

    def _log_tool_call(self, tool_name: str, result: dict) -> None:
        if result.get("status") == "error":
            logger.warning(
                f"Tool '{tool_name}' failed: {result.get('message')}",
                extra={"tool_name": tool_name, "error_code": result.get("error_code")},
            )
        else:
            logger.info(f"Tool '{tool_name}' ok", extra={"tool_name": tool_name})

