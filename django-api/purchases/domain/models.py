"""Domain models for a single ticket purchase.

These are pure domain objects with no API input rules.
Request parsing lives in purchases/handlers/serializers.py.
"""

from collections.abc import Iterable
from dataclasses import dataclass
from typing import Self

from purchases.domain.value_objects import Money, SeatCount, TicketCategory


@dataclass(frozen=True)
class TicketTypeRequest:
    """A quantity of tickets of one category."""

    category: TicketCategory
    quantity: int

    def __post_init__(self) -> None:
        if not isinstance(self.category, TicketCategory):
            raise ValueError("Ticket category must be a TicketCategory")
        if not isinstance(self.quantity, int) or isinstance(self.quantity, bool):
            raise ValueError("Ticket quantity must be an integer")
        if self.quantity < 0:
            raise ValueError("Ticket quantity cannot be negative")


@dataclass(frozen=True)
class TicketCounts:
    """Ticket totals per category for one purchase."""

    adults: int = 0
    children: int = 0
    infants: int = 0

    @classmethod
    def from_requests(cls, requests: Iterable[TicketTypeRequest]) -> Self:
        totals = dict.fromkeys(TicketCategory, 0)
        for request in requests:
            totals[request.category] += request.quantity
        return cls(
            adults=totals[TicketCategory.ADULT],
            children=totals[TicketCategory.CHILD],
            infants=totals[TicketCategory.INFANT],
        )

    def __getitem__(self, category: TicketCategory) -> int:
        return {
            TicketCategory.ADULT: self.adults,
            TicketCategory.CHILD: self.children,
            TicketCategory.INFANT: self.infants,
        }[category]

    @property
    def total(self) -> int:
        return self.adults + self.children + self.infants


@dataclass(frozen=True)
class PurchaseIntent:
    """Amount to charge and seats to reserve for a validated purchase."""

    total_amount: Money
    total_seats: SeatCount
