"""Domain primitives that enforce validity at creation time."""

from dataclasses import dataclass
from enum import Enum


class TicketCategory(Enum):
    """Ticket categories sold per booking."""

    ADULT = "ADULT"
    CHILD = "CHILD"
    INFANT = "INFANT"


def _is_int(value: object) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


@dataclass(frozen=True)
class AccountId:
    """Identifier of the purchasing account."""

    value: int

    def __post_init__(self) -> None:
        if not _is_int(self.value) or self.value <= 0:
            raise ValueError("Account ID must be a positive integer")

    def __int__(self) -> int:
        return self.value


@dataclass(frozen=True)
class Money:
    """Amount payable in whole currency units."""

    amount: int

    def __post_init__(self) -> None:
        if not _is_int(self.amount):
            raise ValueError("Money amount must be an integer")
        if self.amount < 0:
            raise ValueError("Money amount cannot be negative")

    def __str__(self) -> str:
        return str(self.amount)


@dataclass(frozen=True)
class SeatCount:
    """Non-negative number of seats to reserve."""

    value: int

    def __post_init__(self) -> None:
        if not _is_int(self.value):
            raise ValueError("Seat count must be an integer")
        if self.value < 0:
            raise ValueError("Seat count cannot be negative")
