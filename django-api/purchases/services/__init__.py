from django.conf import settings
from django.utils.module_loading import import_string

from purchases.services.ticket_service import TicketService

__all__ = ["TicketService", "build_ticket_service"]


def build_ticket_service() -> TicketService:
    """Build a TicketService with the gateways named in settings.TICKETS."""
    config = settings.TICKETS
    payment_service = import_string(config["PAYMENT_SERVICE"])()
    seat_reservation_service = import_string(config["SEAT_RESERVATION_SERVICE"])()
    return TicketService(payment_service, seat_reservation_service)
