"""Error Hierarchy: typed, categorized exceptions for all Person store failure modes.

Invariants:
    - Every error has a code (str), category (ErrorCategory), severity (ErrorSeverity)
    - Not-found inside the store is a normal outcome (None / False), never an exception
    - to_response() produces REST envelope; to_tool_result() produces tool-call envelope
    - No internal details leaked in user-facing messages

Design Decisions:
    - Single hierarchy with PersonStoreError base: FastAPI global handler catches all
    - ErrorContext as dataclass: rich observability without coupling to logging framework
"""

from dataclasses import dataclass, field
from enum import Enum
from datetime import datetime, timezone


class ErrorSeverity(str, Enum):
    """Error severity for observability and client handling."""
    WARNING = "warning"
    ERROR = "error"
    CRITICAL = "critical"


class ErrorCategory(str, Enum):
    """High-level error categories for routing and handling."""
    VALIDATION = "validation"
    BUSINESS_RULE = "business_rule"
    RESOURCE_NOT_FOUND = "resource_not_found"
    INTERNAL = "internal"


@dataclass
class ErrorContext:
    """Rich context for error observability and debugging."""
    timestamp: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    operation: str | None = None
    tool_name: str | None = None
    person_id: int | None = None


class PersonStoreError(Exception):
    """Base exception for all Person store errors."""

    def __init__(
        self,
        message: str,
        code: str,
        category: ErrorCategory,
        severity: ErrorSeverity = ErrorSeverity.ERROR,
        context: ErrorContext | None = None,
        http_status: int = 500,
    ):
        super().__init__(message)
        self.message = message
        self.code = code
        self.category = category
        self.severity = severity
        self.context = context or ErrorContext()
        self.http_status = http_status

    def to_response(self) -> dict:
        """Convert to standardized REST error response."""
        return {
            "error": {
                "code": self.code,
                "message": self.message,
                "category": self.category.value,
                "severity": self.severity.value,
                "timestamp": self.context.timestamp.isoformat(),
                "context": {
                    "operation": self.context.operation,
                    "tool_name": self.context.tool_name,
                    "person_id": self.context.person_id,
                },
            }
        }

    def to_tool_result(self) -> dict:
        """Convert to the error shape returned by tool handlers."""
        return {
            "status": "error",
            "error_code": self.code,
            "message": self.message,
        }


# ─── Domain Errors (400-level) ──────────────────────────────────

class InvalidArgumentError(PersonStoreError):
    """Required payload missing or malformed."""
    def __init__(self, message: str, argument: str, context: ErrorContext | None = None):
        super().__init__(
            message, "INVALID_ARGUMENT", ErrorCategory.VALIDATION,
            ErrorSeverity.ERROR, context, 400,
        )
        self.argument = argument


class LifecycleError(PersonStoreError):
    """Store used before initialize(), or initialize() called twice."""
    def __init__(self, message: str, context: ErrorContext | None = None):
        super().__init__(
            message, "LIFECYCLE_ERROR", ErrorCategory.BUSINESS_RULE,
            ErrorSeverity.ERROR, context, 409,
        )


class ResourceNotFoundError(PersonStoreError):
    """Requested resource does not exist (exposure layer only)."""
    def __init__(
        self, resource_type: str, resource_id: str, context: ErrorContext | None = None,
    ):
        super().__init__(
            f"{resource_type} '{resource_id}' not found",
            "RESOURCE_NOT_FOUND", ErrorCategory.RESOURCE_NOT_FOUND,
            ErrorSeverity.WARNING, context, 404,
        )


# ─── Infrastructure Errors (500-level) ──────────────────────────

class DatasetLoadError(PersonStoreError):
    """Initial dataset could not be read or parsed."""
    def __init__(self, message: str, source: str, context: ErrorContext | None = None):
        super().__init__(
            f"Failed to load dataset '{source}': {message}",
            "DATASET_LOAD_ERROR", ErrorCategory.INTERNAL,
            ErrorSeverity.CRITICAL, context, 500,
        )
        self.source = source


# ─── Boundary Errors (400-level) ────────────────────────────────

class PayloadValidationError(PersonStoreError):
    """Person payload or tool input rejected at the boundary by Pydantic."""
    def __init__(
        self, details: list[dict], message: str = "Invalid person data",
        context: ErrorContext | None = None,
    ):
        super().__init__(
            message, "VALIDATION_ERROR", ErrorCategory.VALIDATION,
            ErrorSeverity.ERROR, context, 400,
        )
        self.details = details

    @classmethod
    def from_errors(
        cls, errors, message: str = "Invalid person data",
        context: ErrorContext | None = None,
    ) -> "PayloadValidationError":
        """Build from pydantic's errors() list: one detail per failing field."""
        details = [
            {
                "field": ".".join(str(loc) for loc in e["loc"]),
                "message": e["msg"],
                "type": e["type"],
            }
            for e in errors
        ]
        return cls(details, message, context)

    def to_response(self) -> dict:
        response = super().to_response()
        response["error"]["details"] = self.details
        return response

    def to_tool_result(self) -> dict:
        result = super().to_tool_result()
        result["details"] = self.details
        return result


# ─── Unexpected Errors (500-level) ──────────────────────────────

class UnexpectedError(PersonStoreError):
    """Any exception outside the hierarchy. The message never carries its text."""
    def __init__(self, context: ErrorContext | None = None):
        super().__init__(
            "An unexpected error occurred", "INTERNAL_ERROR",
            ErrorCategory.INTERNAL, ErrorSeverity.CRITICAL, context, 500,
        )
