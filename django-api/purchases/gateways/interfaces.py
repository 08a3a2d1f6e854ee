"""Collaborator interfaces (gateway pattern).

Gateways must be swappable. The purchase service only ever calls them
after a purchase has passed every booking rule.
"""

from abc import ABC, abstractmethod


class TicketPaymentService(ABC):
    """Interface for the payment provider."""

    @abstractmethod
    def make_payment(self, account_id: int, total_amount_to_pay: int) -> None:
        """Charge the account the given amount."""
        ...


class SeatReservationService(ABC):
    """Interface for the seat booking provider."""

    @abstractmethod
    def reserve_seat(self, account_id: int, total_seats_to_allocate: int) -> None:
        """Reserve the given number of seats for the account."""
        ...
