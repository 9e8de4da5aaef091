"""Error Hierarchy — typed, categorized exceptions for all maze API failure modes.

Invariants:
    - Every error has a code (str), category (ErrorCategory), severity (ErrorSeverity)
    - Validation/not-found errors are 400-level; store errors are 500-level
    - to_response() produces the REST envelope
    - No internal details leaked in user-facing messages (store detail is logged only)

Design Decisions:
    - Single hierarchy with MazeApiError base: FastAPI global handler catches all (ADR: uniform error shape)
    - MalformedIdentifierError subclasses StoreError: the adapter reports bad key syntax
      as a store failure, the API layer decides it reads as "not found"
"""

from dataclasses import dataclass, field
from enum import Enum
from datetime import datetime, timezone


class ErrorSeverity(str, Enum):
    """Error severity for observability and client handling."""
    INFO = "info"
    WARNING = "warning"
    ERROR = "error"
    CRITICAL = "critical"


class ErrorCategory(str, Enum):
    """High-level error categories for routing and handling."""
    VALIDATION = "validation"
    RESOURCE_NOT_FOUND = "resource_not_found"
    DATABASE = "database"
    INTERNAL = "internal"


@dataclass
class ErrorContext:
    """Context for error observability and debugging."""
    timestamp: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    maze_id: str | None = None


class MazeApiError(Exception):
    """Base exception for all maze API errors."""

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
            }
        }


# ─── Domain Errors (400-level) ──────────────────────────────────

class ValidationError(MazeApiError):
    """Maze payload is missing a field or has the wrong shape."""
    def __init__(self, message: str, field: str, context: ErrorContext | None = None):
        super().__init__(
            message, "VALIDATION_ERROR", ErrorCategory.VALIDATION,
            ErrorSeverity.ERROR, context, 400,
        )
        self.field = field


class NotFoundError(MazeApiError):
    """No maze for the given identifier (missing or malformed)."""
    def __init__(self, maze_id: str, context: ErrorContext | None = None):
        ctx = context or ErrorContext()
        ctx.maze_id = maze_id
        super().__init__(
            "Maze not found with this ID.",
            "MAZE_NOT_FOUND", ErrorCategory.RESOURCE_NOT_FOUND,
            ErrorSeverity.WARNING, ctx, 404,
        )


# ─── Infrastructure Errors (500-level) ──────────────────────────

class StoreError(MazeApiError):
    """Database unreachable or rejected the operation.

    `detail` is kept for logs; the client only ever sees `message`.
    """
    def __init__(
        self,
        detail: str,
        operation: str,
        message: str = "Server error while accessing maze storage.",
        context: ErrorContext | None = None,
    ):
        super().__init__(
            message, "STORE_ERROR", ErrorCategory.DATABASE,
            ErrorSeverity.CRITICAL, context, 500,
        )
        self.detail = detail
        self.operation = operation


class MalformedIdentifierError(StoreError):
    """Identifier does not fit the store's key syntax."""
    def __init__(self, maze_id: str, context: ErrorContext | None = None):
        ctx = context or ErrorContext()
        ctx.maze_id = maze_id
        super().__init__(
            f"Malformed maze identifier {maze_id!r}", "find_by_id",
            context=ctx,
        )
        self.maze_id = maze_id
