"""Ticket service - all purchase business logic lives here.

Services:
- Depend only on interfaces (gateways)
- Validate domain invariants
- Perform orchestration and error mapping
- Return domain models or domain errors
"""

import logging

from purchases.domain.errors import (
    InvalidAccountError,
    InvalidPurchaseError,
    NoTicketsSelectedError,
)
from purchases.domain.models import PurchaseIntent, TicketCounts, TicketTypeRequest
from purchases.domain.rules import price_tickets, validate_ticket_rules
from purchases.domain.value_objects import AccountId
from purchases.gateways.interfaces import SeatReservationService, TicketPaymentService

logger = logging.getLogger(__name__)


class TicketService:
    """Service for cinema ticket purchases."""

    def __init__(
        self,
        payment_service: TicketPaymentService,
        seat_reservation_service: SeatReservationService,
    ) -> None:
        self._payment_service = payment_service
        self._seat_reservation_service = seat_reservation_service

    def purchase_tickets(
        self, account_id: int | None, *ticket_type_requests: TicketTypeRequest
    ) -> PurchaseIntent:
        """Validate, price and pay for a booking, then reserve its seats.

        Payment and reservation errors are not caught; a reservation failure
        after a successful payment is not compensated.

        Raises:
            InvalidAccountError: If account_id is missing or not positive.
            NoTicketsSelectedError: If no ticket requests were given.
            NoTicketsBookedError: If the requests add up to zero tickets.
            MaxTicketsExceededError: If the booking is over the ticket limit.
            AdultRequiredError: If child or infant tickets have no adult.
        """
        try:
            intent = self.quote(account_id, *ticket_type_requests)
        except InvalidPurchaseError as exc:
            logger.warning(
                "Purchase rejected",
                extra={"account_id": account_id, "code": exc.code.value},
            )
            raise

        amount = intent.total_amount.amount
        seats = intent.total_seats.value
        self._payment_service.make_payment(account_id, amount)
        self._seat_reservation_service.reserve_seat(account_id, seats)

        logger.info(
            "Purchase completed",
            extra={"account_id": account_id, "amount": amount, "seats": seats},
        )
        return intent

    def quote(
        self, account_id: int | None, *ticket_type_requests: TicketTypeRequest
    ) -> PurchaseIntent:
        """Return the purchase intent for a booking without calling any gateway.

        Raises the same errors as purchase_tickets.
        """
        try:
            AccountId(account_id)
        except ValueError:
            raise InvalidAccountError() from None

        if not ticket_type_requests:
            raise NoTicketsSelectedError()

        counts = TicketCounts.from_requests(ticket_type_requests)
        validate_ticket_rules(counts)
        return price_tickets(counts)
