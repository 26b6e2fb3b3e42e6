"""Error Hierarchy — typed, categorized exceptions for all forum failure modes.

Invariants:
    - Every ForumError has a code (str), category (ErrorCategory), severity and http_status
    - to_response() produces the REST envelope {"status": "fail"|"error", "message": ...}
    - No internal details leaked in user-facing messages
    - EntityError is raised by entities only; the API layer translates it to ValidationError

Design Decisions:
    - Single hierarchy with ForumError base: FastAPI global handler catches all
    - EntityError kept outside ForumError: entities know which field broke,
      not how the failure is worded for HTTP clients (see api/error_translation.py)
"""

from dataclasses import dataclass
from enum import Enum


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
    AUTHENTICATION = "authentication"
    AUTHORIZATION = "authorization"
    DATABASE = "database"
    CONFLICT = "conflict"


@dataclass
class ErrorContext:
    """Who hit the error and on what; surfaced in the error log line."""
    user_id: str | None = None
    resource_id: str | None = None


class ForumError(Exception):
    """Base exception for all forum errors."""

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
        """Convert to the REST envelope. 5xx never expose the message."""
        if self.http_status >= 500:
            return {
                "status": "error",
                "message": "An unexpected error occurred on our server",
            }
        return {"status": "fail", "message": self.message}


# ─── Client Errors (400-level) ──────────────────────────────────

class ValidationError(ForumError):
    """Request payload is malformed: missing field, wrong type, bad format."""
    def __init__(
        self, message: str, field: str | None = None,
        context: ErrorContext | None = None,
    ):
        super().__init__(
            message, "VALIDATION_ERROR", ErrorCategory.VALIDATION,
            ErrorSeverity.WARNING, context, 400,
        )
        self.field = field


class DomainError(ForumError):
    """Business rule violated (username taken, refresh token revoked...)."""
    def __init__(
        self, message: str, code: str, context: ErrorContext | None = None,
    ):
        super().__init__(
            message, code, ErrorCategory.BUSINESS_RULE,
            ErrorSeverity.WARNING, context, 400,
        )


class AuthenticationError(ForumError):
    """Credentials missing, wrong, or expired."""
    def __init__(self, message: str, context: ErrorContext | None = None):
        super().__init__(
            message, "AUTHENTICATION_ERROR", ErrorCategory.AUTHENTICATION,
            ErrorSeverity.WARNING, context, 401,
        )


class AuthorizationError(ForumError):
    """Actor is authenticated but does not own the resource."""
    def __init__(self, message: str, context: ErrorContext | None = None):
        super().__init__(
            message, "AUTHORIZATION_ERROR", ErrorCategory.AUTHORIZATION,
            ErrorSeverity.WARNING, context, 403,
        )


class NotFoundError(ForumError):
    """Requested resource does not exist."""
    def __init__(
        self, resource_type: str, resource_id: str,
        context: ErrorContext | None = None,
    ):
        ctx = context or ErrorContext()
        ctx.resource_id = resource_id
        super().__init__(
            f"{resource_type} not found",
            "RESOURCE_NOT_FOUND", ErrorCategory.RESOURCE_NOT_FOUND,
            ErrorSeverity.WARNING, ctx, 404,
        )
        self.resource_type = resource_type
        self.resource_id = resource_id


class ConflictError(ForumError):
    """Concurrent write hit a unique constraint."""
    def __init__(self, message: str, context: ErrorContext | None = None):
        super().__init__(
            message, "CONFLICT", ErrorCategory.CONFLICT,
            ErrorSeverity.ERROR, context, 409,
        )


# ─── Infrastructure Errors (500-level) ──────────────────────────

class DatabaseError(ForumError):
    """Database operation failed."""
    def __init__(self, message: str, operation: str, context: ErrorContext | None = None):
        super().__init__(
            f"Database {operation} failed: {message}",
            "DATABASE_ERROR", ErrorCategory.DATABASE,
            ErrorSeverity.CRITICAL, context, 503,
        )
        self.operation = operation


# ─── Entity Errors ──────────────────────────────────────────────

class EntityErrorKind(str, Enum):
    """Why an entity refused its payload."""
    NOT_CONTAIN_NEEDED_PROPERTY = "NOT_CONTAIN_NEEDED_PROPERTY"
    NOT_MEET_DATA_TYPE_SPECIFICATION = "NOT_MEET_DATA_TYPE_SPECIFICATION"
    USERNAME_LIMIT_CHAR = "USERNAME_LIMIT_CHAR"
    USERNAME_CONTAIN_RESTRICTED_CHARACTER = "USERNAME_CONTAIN_RESTRICTED_CHARACTER"
    PASSWORD_LIMIT_CHAR = "PASSWORD_LIMIT_CHAR"


class EntityError(Exception):
    """Raised by Entity.parse. code is '<ENTITY>.<KIND>', e.g. 'NEW_THREAD.NOT_CONTAIN_NEEDED_PROPERTY'."""

    def __init__(self, entity: str, kind: EntityErrorKind, field: str):
        self.entity = entity
        self.kind = kind
        self.field = field
        super().__init__(self.code)

    @property
    def code(self) -> str:
        return f"{self.entity}.{self.kind.value}"
