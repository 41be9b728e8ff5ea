"""Error Hierarchy — typed, categorized exceptions for every API failure mode.

Invariants:
    - Every error has a code (str), category (ErrorCategory), severity (ErrorSeverity)
    - Request errors (400-level) carry only a message, never partial entity data
    - to_response() produces the REST envelope used by the global handlers

Design Decisions:
    - Single hierarchy with BookBrainzError base: one FastAPI handler catches all
    - 406 for malformed identifiers and ambiguous browse queries, 404 for missing entities
"""

from enum import Enum


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


class BookBrainzError(Exception):
    """Base exception for all API errors."""

    def __init__(
        self,
        message: str,
        code: str,
        category: ErrorCategory,
        severity: ErrorSeverity = ErrorSeverity.ERROR,
        http_status: int = 500,
    ):
        super().__init__(message)
        self.message = message
        self.code = code
        self.category = category
        self.severity = severity
        self.http_status = http_status

    def to_response(self) -> dict:
        """Convert to standardized REST error response."""
        return {
            "error": {
                "code": self.code,
                "message": self.message,
                "category": self.category.value,
                "severity": self.severity.value,
            }
        }


# ─── Request Errors (400-level) ─────────────────────────────────

class InvalidBBIDError(BookBrainzError):
    """Path or query BBID is not a syntactically valid UUID."""
    def __init__(self, bbid: str | None):
        super().__init__(
            "BBID is not valid uuid", "INVALID_BBID",
            ErrorCategory.VALIDATION, ErrorSeverity.WARNING, 406,
        )
        self.bbid = bbid


class InvalidBrowseRequestError(BookBrainzError):
    """Browse query names zero or several linked entity parameters."""
    def __init__(self, found: list[str], allowed: list[str]):
        if found:
            message = (
                f"Only one of {', '.join(allowed)} may be passed, "
                f"got {', '.join(found)}"
            )
        else:
            message = f"One of {', '.join(allowed)} is required"
        super().__init__(
            message, "INVALID_BROWSE_REQUEST",
            ErrorCategory.VALIDATION, ErrorSeverity.WARNING, 406,
        )
        self.found = found


class EntityNotFoundError(BookBrainzError):
    """No entity of the requested type carries the requested BBID."""
    def __init__(self, message: str, bbid: str, entity_type: str | None = None):
        super().__init__(
            message, "ENTITY_NOT_FOUND", ErrorCategory.RESOURCE_NOT_FOUND,
            ErrorSeverity.INFO, 404,
        )
        self.bbid = bbid
        self.entity_type = entity_type


# ─── Infrastructure Errors (500-level) ──────────────────────────

class DatabaseError(BookBrainzError):
    """Database operation failed."""
    def __init__(self, message: str, operation: str):
        super().__init__(
            f"Database {operation} failed: {message}",
            "DATABASE_ERROR", ErrorCategory.DATABASE,
            ErrorSeverity.CRITICAL, 503,
        )
        self.operation = operation
