"""Domain error codes for the purchases module."""

from dataclasses import dataclass
from enum import Enum


class ErrorCode(Enum):
    """Domain error codes."""

    INVALID_ACCOUNT = "INVALID_ACCOUNT"
    NO_TICKETS_SELECTED = "NO_TICKETS_SELECTED"
    NO_TICKETS_BOOKED = "NO_TICKETS_BOOKED"
    MAX_TICKETS_EXCEEDED = "MAX_TICKETS_EXCEEDED"
    ADULT_REQUIRED = "ADULT_REQUIRED"


@dataclass(frozen=True)
class DomainError(Exception):
    """Base domain error with code and user-safe message."""

    code: ErrorCode
    message: str

    def __str__(self) -> str:
        return f"{self.code.value}: {self.message}"


class InvalidPurchaseError(DomainError):
    """Raised when a purchase request is rejected by the booking rules."""


class InvalidAccountError(InvalidPurchaseError):
    """Raised when the account ID is missing or not a positive integer."""

    def __init__(self) -> None:
        super().__init__(
            code=ErrorCode.INVALID_ACCOUNT,
            message="Invalid account ID",
        )


class NoTicketsSelectedError(InvalidPurchaseError):
    """Raised when no ticket requests were supplied."""

    def __init__(self) -> None:
        super().__init__(
            code=ErrorCode.NO_TICKETS_SELECTED,
            message="No tickets selected for the booking",
        )


class NoTicketsBookedError(InvalidPurchaseError):
    """Raised when the ticket requests add up to zero tickets."""

    def __init__(self) -> None:
        super().__init__(
            code=ErrorCode.NO_TICKETS_BOOKED,
            message="No tickets booked",
        )


class MaxTicketsExceededError(InvalidPurchaseError):
    """Raised when a booking asks for more tickets than allowed."""

    def __init__(self, limit: int) -> None:
        super().__init__(
            code=ErrorCode.MAX_TICKETS_EXCEEDED,
            message=f"Booking exceeds maximum tickets per booking ({limit})",
        )


class AdultRequiredError(InvalidPurchaseError):
    """Raised when child or infant tickets are booked without an adult."""

    def __init__(self) -> None:
        super().__init__(
            code=ErrorCode.ADULT_REQUIRED,
            message="Child/infant requires accompanying adult ticket",
        )
