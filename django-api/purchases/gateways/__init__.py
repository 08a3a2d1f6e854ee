from purchases.gateways.interfaces import SeatReservationService, TicketPaymentService

__all__ = ["TicketPaymentService", "SeatReservationService"]
