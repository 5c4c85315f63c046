"""Error Hierarchy: typed, categorized exceptions for all game platform failure modes.

Invariants:
    - Every error has a code (str), category (ErrorCategory), severity (ErrorSeverity)
    - Data access wrappers keep the original exception as `cause` (and __cause__ via `raise from`)
    - to_response() produces the REST envelope
    - No internal details leaked in user-facing messages beyond the cause message

Design Decisions:
    - Single hierarchy with GamePlatformError base: FastAPI global handler catches all
    - One subclass per service operation: callers match on type, not on message text
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
    DATABASE = "database"
    EXTERNAL_API = "external_api"
    INTERNAL = "internal"
    SEED_IMPORT = "seed_import"


@dataclass
class ErrorContext:
    """Rich context for error observability and debugging."""
    timestamp: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    game_id: int | None = None
    operation: str | None = None
    debug_info: dict[str, Any] | None = None


class GamePlatformError(Exception):
    """Base exception for all game platform errors."""

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
                    "game_id": self.context.game_id,
                    "operation": self.context.operation,
                },
            }
        }


# ─── Domain Errors (400-level) ──────────────────────────────────

class ResourceNotFoundError(GamePlatformError):
    """Requested resource does not exist."""
    def __init__(
        self, resource_type: str, resource_id: str, context: ErrorContext | None = None,
    ):
        super().__init__(
            f"{resource_type} '{resource_id}' not found",
            "RESOURCE_NOT_FOUND", ErrorCategory.RESOURCE_NOT_FOUND,
            ErrorSeverity.ERROR, context, 404,
        )
        self.resource_type = resource_type
        self.resource_id = resource_id


# ─── Infrastructure Errors (500-level) ──────────────────────────

class DatabaseError(GamePlatformError):
    """Database operation failed."""
    def __init__(self, message: str, operation: str, context: ErrorContext | None = None):
        super().__init__(
            f"Database {operation} failed: {message}",
            "DATABASE_ERROR", ErrorCategory.DATABASE,
            ErrorSeverity.CRITICAL, context, 503,
        )
        self.operation = operation


class GatewayUnavailableError(GamePlatformError):
    """Game server did not hand out a session endpoint."""
    def __init__(self, message: str, context: ErrorContext | None = None):
        super().__init__(
            message, "GATEWAY_UNAVAILABLE", ErrorCategory.EXTERNAL_API,
            ErrorSeverity.CRITICAL, context, 503,
        )


class SeedImportError(GamePlatformError):
    """CSV seed import could not complete."""
    def __init__(self, message: str, table: str, context: ErrorContext | None = None):
        super().__init__(
            f"Import into '{table}' failed: {message}",
            "SEED_IMPORT_ERROR", ErrorCategory.SEED_IMPORT,
            ErrorSeverity.ERROR, context, 500,
        )
        self.table = table


# ─── Data Access Wrappers ───────────────────────────────────────

class DataAccessError(GamePlatformError):
    """Operation-scoped wrapper around an underlying failure.

    The wrapped exception stays reachable as `cause`. When the cause is itself a
    GamePlatformError its HTTP status is kept, so a gateway outage surfaces as 503
    even after being wrapped by the creation error.
    """

    code = "DATA_ACCESS_ERROR"
    summary = "Data access failed"

    def __init__(self, cause: BaseException, context: ErrorContext | None = None):
        http_status = cause.http_status if isinstance(cause, GamePlatformError) else 500
        cause_message = cause.message if isinstance(cause, GamePlatformError) else str(cause)
        super().__init__(
            f"{self.summary}: {cause_message}",
            self.code, ErrorCategory.DATABASE,
            ErrorSeverity.CRITICAL, context, http_status,
        )
        self.cause = cause


class PrivateGameCreationError(DataAccessError):
    code = "PRIVATE_GAME_CREATION_ERROR"
    summary = "Error creating private game"


class PrivateGameQueryError(DataAccessError):
    code = "PRIVATE_GAME_QUERY_ERROR"
    summary = "Error fetching private games"


class PrivateGameJoinError(DataAccessError):
    code = "PRIVATE_GAME_JOIN_ERROR"
    summary = "Error joining private game"


class PrivateGameDeletionError(DataAccessError):
    code = "PRIVATE_GAME_DELETION_ERROR"
    summary = "Error deleting private game"


class PrivateGamePlayerCountError(DataAccessError):
    code = "PRIVATE_GAME_PLAYER_COUNT_ERROR"
    summary = "Error fetching private game players"


class MessageQueryError(DataAccessError):
    code = "MESSAGE_QUERY_ERROR"
    summary = "Error fetching messages"


class MessageCreationError(DataAccessError):
    code = "MESSAGE_CREATION_ERROR"
    summary = "Error adding message"
