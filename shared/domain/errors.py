"""
Domain Errors

Error taxonomy shared by every bounded context. Each error carries a
machine readable code and a user-safe message; the HTTP layer maps the
error class onto a status code (see shared.infrastructure.exception_handler).

- BadRequestError: malformed or invalid input (dates, missing fields, enums)
- UnauthorizedError: session invalid or actor mismatch
- ForbiddenError: authenticated actor may not perform this domain action
- NotFoundError: entity missing or soft-deleted
- ConflictError: state machine guard failure or occupied dates
- InternalError: collaborator failure (storage, messaging)
"""

from dataclasses import dataclass
from datetime import date
from enum import Enum


class ErrorCode(Enum):
    """Domain error codes."""

    BAD_REQUEST = "BAD_REQUEST"
    INVALID_RANGE = "INVALID_RANGE"
    PAST_DATE = "PAST_DATE"
    DATES_UNAVAILABLE = "DATES_UNAVAILABLE"
    UNAUTHORIZED = "UNAUTHORIZED"
    FORBIDDEN = "FORBIDDEN"
    NOT_FOUND = "NOT_FOUND"
    CONFLICT = "CONFLICT"
    ILLEGAL_TRANSITION = "ILLEGAL_TRANSITION"
    INTERNAL = "INTERNAL"


@dataclass(eq=False)
class DomainError(Exception):
    """Base domain error with code and user-safe message."""

    code: ErrorCode
    message: str

    def __str__(self) -> str:
        return f"{self.code.value}: {self.message}"


class BadRequestError(DomainError):
    """Raised when input is malformed or violates a validation rule."""

    def __init__(self, message: str, code: ErrorCode = ErrorCode.BAD_REQUEST) -> None:
        super().__init__(code=code, message=message)


class InvalidRangeError(BadRequestError):
    """Raised when a date range ends before it starts."""

    def __init__(self, from_date: date, to_date: date) -> None:
        super().__init__(
            f"Date range is invalid: {from_date} is after {to_date}",
            code=ErrorCode.INVALID_RANGE,
        )


class PastDateError(BadRequestError):
    """Raised when a date range touches a day before today."""

    def __init__(self, day: date) -> None:
        super().__init__(f"Date {day} lies in the past", code=ErrorCode.PAST_DATE)


class DatesUnavailableError(BadRequestError):
    """Raised when a booking overlaps blocked dates of the offer."""

    def __init__(self) -> None:
        super().__init__(
            "Offer is not available for the requested dates",
            code=ErrorCode.DATES_UNAVAILABLE,
        )


class UnauthorizedError(DomainError):
    """Raised when a session cannot be validated."""

    def __init__(self, message: str = "Unauthorized") -> None:
        super().__init__(code=ErrorCode.UNAUTHORIZED, message=message)


class ForbiddenError(DomainError):
    """Raised when the actor is known but not allowed to act."""

    def __init__(self, message: str) -> None:
        super().__init__(code=ErrorCode.FORBIDDEN, message=message)


class NotFoundError(DomainError):
    """Raised when an entity does not exist or was soft-deleted."""

    def __init__(self, resource: str, identifier: object = None) -> None:
        super().__init__(code=ErrorCode.NOT_FOUND, message=f"{resource} not found")
        self.resource = resource
        self.identifier = identifier


class ConflictError(DomainError):
    """Raised when the current state does not allow the operation."""

    def __init__(self, message: str, code: ErrorCode = ErrorCode.CONFLICT) -> None:
        super().__init__(code=code, message=message)


class IllegalTransitionError(ConflictError):
    """Raised when a request status change violates the transition table."""

    def __init__(self, current: object, desired: object, reason: str = "") -> None:
        message = f"Cannot move request from {current} to {desired}"
        if reason:
            message = f"{message}: {reason}"
        super().__init__(message, code=ErrorCode.ILLEGAL_TRANSITION)
        self.current = current
        self.desired = desired


class InternalError(DomainError):
    """Raised when a collaborator (storage, messaging) fails."""

    def __init__(self, message: str = "Internal error") -> None:
        super().__init__(code=ErrorCode.INTERNAL, message=message)
