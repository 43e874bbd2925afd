"""Error Hierarchy — typed, categorized exceptions for all roster failure modes.

Invariants:
    - Every error has a code (str), category (ErrorCategory), severity (ErrorSeverity)
    - User input errors (400-level) never modify the roster; they become denial messages
    - Infrastructure errors (500-level) are logged and surfaced generically
    - No internal details leaked in user-facing messages

Design Decisions:
    - Single hierarchy with RosterError base: FastAPI global handler catches all (ADR: uniform error shape)
    - ErrorContext as dataclass: rich observability without coupling to logging framework
    - Errors carry the offending name/position so format_messages can build denials
      without re-deriving them from strings
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any
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
    CONFLICT = "conflict"
    DATABASE = "database"
    INTERNAL = "internal"


@dataclass
class ErrorContext:
    """Rich context for error observability and debugging."""
    timestamp: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    group_id: str | None = None
    command: str | None = None
    custom_id: str | None = None
    debug_info: dict[str, Any] | None = None


class RosterError(Exception):
    """Base exception for all roster errors."""

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

    @property
    def is_user_error(self) -> bool:
        """True for input errors that are reported back as denials."""
        return self.http_status < 500

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
                    "group_id": self.context.group_id,
                    "command": self.context.command,
                    "custom_id": self.context.custom_id,
                },
            }
        }


# ─── User Input Errors (400-level) ──────────────────────────────

class DuplicateEntryError(RosterError):
    """Add of a name that is already in the roster."""
    def __init__(self, name: str, context: ErrorContext | None = None):
        super().__init__(
            f"Entry '{name}' already exists",
            "DUPLICATE", ErrorCategory.CONFLICT,
            ErrorSeverity.INFO, context, 409,
        )
        self.name = name


class EntryNotFoundError(RosterError):
    """Operation referenced a name that is not in the roster."""
    def __init__(self, name: str, context: ErrorContext | None = None):
        super().__init__(
            f"Entry '{name}' not found",
            "NOT_FOUND", ErrorCategory.RESOURCE_NOT_FOUND,
            ErrorSeverity.INFO, context, 404,
        )
        self.name = name


class InvalidPositionError(RosterError):
    """Move target outside [1, length]."""
    def __init__(
        self, position: int, length: int, context: ErrorContext | None = None,
    ):
        super().__init__(
            f"Position {position} outside 1..{length}",
            "INVALID_POSITION", ErrorCategory.VALIDATION,
            ErrorSeverity.INFO, context, 400,
        )
        self.position = position
        self.length = length


class BadAddressError(RosterError):
    """Control identifier could not be decoded."""
    def __init__(self, custom_id: str, reason: str, context: ErrorContext | None = None):
        ctx = context or ErrorContext()
        ctx.custom_id = custom_id
        super().__init__(
            f"Malformed control identifier '{custom_id}': {reason}",
            "BAD_ADDRESS", ErrorCategory.VALIDATION,
            ErrorSeverity.WARNING, ctx, 400,
        )
        self.custom_id = custom_id
        self.reason = reason


# ─── Infrastructure Errors (500-level) ──────────────────────────

class StorageError(RosterError):
    """Loading or saving roster state failed."""
    def __init__(self, message: str, operation: str, context: ErrorContext | None = None):
        super().__init__(
            f"Storage {operation} failed: {message}",
            "UNEXPECTED", ErrorCategory.DATABASE,
            ErrorSeverity.CRITICAL, context, 503,
        )
        self.operation = operation
