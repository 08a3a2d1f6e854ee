"""Default gateways that record calls in the log.

The real payment and seat booking providers are external; these stand in
for them in development and are selected through settings.TICKETS.
"""

import logging

from purchases.gateways.interfaces import SeatReservationService, TicketPaymentService

logger = logging.getLogger(__name__)


def _check_arguments(account_id: int, quantity: int, name: str) -> None:
    if account_id <= 0:
        raise ValueError("account_id must be greater than zero")
    if quantity < 0:
        raise ValueError(f"{name} cannot be negative")


class LoggingTicketPaymentService(TicketPaymentService):
    """Payment gateway that logs each charge."""

    def make_payment(self, account_id: int, total_amount_to_pay: int) -> None:
        _check_arguments(account_id, total_amount_to_pay, "total_amount_to_pay")
        logger.info(
            "Payment taken",
            extra={"account_id": account_id, "amount": total_amount_to_pay},
        )


class LoggingSeatReservationService(SeatReservationService):
    """Seat reservation gateway that logs each reservation."""

    def reserve_seat(self, account_id: int, total_seats_to_allocate: int) -> None:
        _check_arguments(account_id, total_seats_to_allocate, "total_seats_to_allocate")
        logger.info(
            "Seats reserved",
            extra={"account_id": account_id, "seats": total_seats_to_allocate},
        )
