"""Booking rules and pricing.

Both functions are pure: they read aggregated counts and either raise a
domain error or return a value. Nothing here talks to a collaborator.
"""

from purchases.domain.errors import (
    AdultRequiredError,
    MaxTicketsExceededError,
    NoTicketsBookedError,
)
from purchases.domain.models import PurchaseIntent, TicketCounts
from purchases.domain.value_objects import Money, SeatCount, TicketCategory

MAX_TICKETS_PER_BOOKING = 25

TICKET_PRICES: dict[TicketCategory, int] = {
    TicketCategory.ADULT: 25,
    TicketCategory.CHILD: 15,
    TicketCategory.INFANT: 0,
}

# Infants sit on an adult's lap.
SEATED_CATEGORIES: frozenset[TicketCategory] = frozenset(
    {TicketCategory.ADULT, TicketCategory.CHILD}
)


def validate_ticket_rules(counts: TicketCounts) -> None:
    """Check aggregated counts against the booking rules.

    Raises:
        NoTicketsBookedError: If the counts add up to zero.
        MaxTicketsExceededError: If more than MAX_TICKETS_PER_BOOKING are booked.
        AdultRequiredError: If child or infant tickets have no adult ticket.
    """
    if counts.total == 0:
        raise NoTicketsBookedError()

    if counts.total > MAX_TICKETS_PER_BOOKING:
        raise MaxTicketsExceededError(MAX_TICKETS_PER_BOOKING)

    if (counts.children > 0 or counts.infants > 0) and counts.adults == 0:
        raise AdultRequiredError()


def price_tickets(counts: TicketCounts) -> PurchaseIntent:
    """Return the amount payable and seats required for validated counts."""
    amount = sum(TICKET_PRICES[category] * counts[category] for category in TicketCategory)
    seats = sum(counts[category] for category in SEATED_CATEGORIES)
    return PurchaseIntent(total_amount=Money(amount), total_seats=SeatCount(seats))
