"""Error Hierarchy: typed exceptions and the repository error wrapper.

Invariants:
    - Every domain error has a code (str), category (ErrorCategory), severity (ErrorSeverity)
    - RepositoryError renders "repository error during {operation} on {entity}: {cause}"
    - RepositoryError.unwrap() returns the cause unchanged; __cause__ is set as well
    - error_kind() sees through any number of nested RepositoryError layers
    - RepositoryError.kind == error_kind(err); a wrapped TimeoutError is STORAGE_UNAVAILABLE
    - Errors survive copy and pickle with their constructor arguments
    - No internal details leaked by to_response()

Design Decisions:
    - Single hierarchy with ResumeStoreError base so a handler layer can catch one type
    - Integrity violations (unique email, duplicate skill) classify as VALIDATION:
      they are caused by caller-supplied data
    - asyncio.CancelledError is never wrapped; it classifies as CANCELLED
"""

import asyncio
from dataclasses import dataclass, field, replace
from datetime import datetime, timezone
from enum import Enum
from typing import Any, TypeVar

from sqlalchemy.exc import IntegrityError

E = TypeVar("E", bound=BaseException)


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
    CANCELLED = "cancelled"


class ErrorKind(str, Enum):
    """What a caller can branch on after unwrapping a repository failure."""
    NOT_FOUND = "not_found"
    VALIDATION = "validation"
    STORAGE_UNAVAILABLE = "storage_unavailable"
    CANCELLED = "cancelled"

    @property
    def http_status(self) -> int:
        return _KIND_HTTP_STATUS[self]


_KIND_HTTP_STATUS = {
    ErrorKind.NOT_FOUND: 404,
    ErrorKind.VALIDATION: 400,
    ErrorKind.STORAGE_UNAVAILABLE: 500,
    ErrorKind.CANCELLED: 500,
}

_KIND_CATEGORY = {
    ErrorKind.NOT_FOUND: ErrorCategory.RESOURCE_NOT_FOUND,
    ErrorKind.VALIDATION: ErrorCategory.VALIDATION,
    ErrorKind.STORAGE_UNAVAILABLE: ErrorCategory.DATABASE,
    ErrorKind.CANCELLED: ErrorCategory.CANCELLED,
}


@dataclass
class ErrorContext:
    """Extra detail attached to an error for observability."""
    timestamp: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    entity_id: int | None = None
    debug_info: dict[str, Any] | None = None


class ResumeStoreError(Exception):
    """Base exception for all resume store errors."""

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

class NotFoundError(ResumeStoreError):
    """Requested identity does not exist."""
    def __init__(
        self, entity: str, entity_id: int | None = None,
        context: ErrorContext | None = None,
    ):
        ctx = replace(context or ErrorContext(), entity_id=entity_id)
        message = (
            f"{entity} with id {entity_id} not found"
            if entity_id is not None else f"{entity} not found"
        )
        super().__init__(
            message, "NOT_FOUND", ErrorCategory.RESOURCE_NOT_FOUND,
            ErrorSeverity.ERROR, ctx, 404,
        )
        self.entity = entity
        self.entity_id = entity_id

    def __reduce__(self):
        return (
            self.__class__, (self.entity, self.entity_id, self.context), self.__dict__,
        )


class EntityValidationError(ResumeStoreError):
    """Caller-supplied entity failed a required-field check."""
    def __init__(
        self, entity: str, field: str, message: str,
        context: ErrorContext | None = None,
    ):
        super().__init__(
            f"invalid {entity}: {field} {message}",
            "VALIDATION_FAILED", ErrorCategory.VALIDATION,
            ErrorSeverity.ERROR, context, 400,
        )
        self.entity = entity
        self.field = field
        self.reason = message

    def __reduce__(self):
        return (
            self.__class__,
            (self.entity, self.field, self.reason, self.context),
            self.__dict__,
        )


# ─── Repository wrapper ─────────────────────────────────────────

class RepositoryError(ResumeStoreError):
    """Uniform wrapper for every failure raised by a repository.

    Carries the operation name, the entity name and the original cause.
    Code, category and HTTP status are derived from the innermost cause,
    so a handler can map the wrapper directly.
    """

    def __init__(self, operation: str, entity: str, cause: BaseException):
        self.operation = operation
        self.entity = entity
        self.cause = cause
        kind = error_kind(self)
        inner = root_cause(cause)
        code = inner.code if isinstance(inner, ResumeStoreError) else "REPOSITORY_ERROR"
        severity = (
            ErrorSeverity.CRITICAL
            if kind is ErrorKind.STORAGE_UNAVAILABLE else ErrorSeverity.ERROR
        )
        super().__init__(
            f"repository error during {operation} on {entity}: {cause}",
            code, _KIND_CATEGORY[kind], severity, None, kind.http_status,
        )
        self.__cause__ = cause

    def __reduce__(self):
        return (
            self.__class__, (self.operation, self.entity, self.cause), self.__dict__,
        )

    @property
    def kind(self) -> ErrorKind:
        return error_kind(self)

    def unwrap(self) -> BaseException:
        return self.cause


def unwrap(exc: BaseException) -> BaseException | None:
    """Return the next error in a RepositoryError chain, or None."""
    if isinstance(exc, RepositoryError):
        return exc.cause
    return None


def root_cause(exc: BaseException) -> BaseException:
    """Peel off every RepositoryError layer."""
    while isinstance(exc, RepositoryError):
        exc = exc.cause
    return exc


def find_cause(exc: BaseException, kind: type[E]) -> E | None:
    """First error in the wrapper chain that is an instance of kind."""
    current: BaseException | None = exc
    while current is not None:
        if isinstance(current, kind):
            return current
        current = unwrap(current)
    return None


def error_kind(exc: BaseException) -> ErrorKind:
    """Classify an error into the repository taxonomy.

    A bare TimeoutError means a caller deadline expired; once wrapped by a
    repository it came from the storage driver and counts as unavailable.
    """
    inner = root_cause(exc)
    if isinstance(inner, asyncio.CancelledError):
        return ErrorKind.CANCELLED
    if isinstance(inner, NotFoundError):
        return ErrorKind.NOT_FOUND
    if isinstance(inner, (EntityValidationError, IntegrityError)):
        return ErrorKind.VALIDATION
    if isinstance(inner, TimeoutError) and inner is exc:
        return ErrorKind.CANCELLED
    return ErrorKind.STORAGE_UNAVAILABLE


def is_not_found(exc: BaseException) -> bool:
    return error_kind(exc) is ErrorKind.NOT_FOUND
