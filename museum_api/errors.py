"""Domain errors raised by the service layer.

Each error carries a code and a user-safe message; the HTTP status they map
to is decided in main.py, never by the services themselves.
"""

from dataclasses import dataclass
from enum import Enum


class ErrorCode(Enum):
    """Domain error codes."""

    VALIDATION_ERROR = "VALIDATION_ERROR"
    NOT_FOUND = "NOT_FOUND"
    BUSINESS_RULE_VIOLATION = "BUSINESS_RULE_VIOLATION"
    CONFLICT = "CONFLICT"


@dataclass(frozen=True)
class DomainError(Exception):
    """Base domain error with code and user-safe message."""

    code: ErrorCode
    message: str

    def __str__(self) -> str:
        return f"{self.code.value}: {self.message}"


class ValidationError(DomainError):
    """Raised when input is malformed or out of range."""

    def __init__(self, message: str) -> None:
        super().__init__(code=ErrorCode.VALIDATION_ERROR, message=message)


class NotFoundError(DomainError):
    """Raised when a referenced entity does not exist."""

    def __init__(self, message: str) -> None:
        super().__init__(code=ErrorCode.NOT_FOUND, message=message)


class EventNotFoundError(NotFoundError):
    def __init__(self, event_id) -> None:
        super().__init__(f"Special event with ID {event_id} not found")
        object.__setattr__(self, "event_id", event_id)


class PurchaseNotFoundError(NotFoundError):
    def __init__(self, purchase_id) -> None:
        super().__init__(f"Ticket purchase with ID {purchase_id} not found")
        object.__setattr__(self, "purchase_id", purchase_id)


class BusinessRuleViolation(DomainError):
    """Raised when a well-formed request breaks a scheduling or availability rule."""

    def __init__(self, message: str, code: ErrorCode = ErrorCode.BUSINESS_RULE_VIOLATION) -> None:
        super().__init__(code=code, message=message)


class ConflictError(BusinessRuleViolation):
    """Raised on uniqueness or state violations (duplicate date, missing date)."""

    def __init__(self, message: str) -> None:
        super().__init__(message, code=ErrorCode.CONFLICT)
