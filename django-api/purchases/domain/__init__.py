from purchases.domain.models import PurchaseIntent, TicketCounts, TicketTypeRequest
from purchases.domain.value_objects import AccountId, Money, SeatCount, TicketCategory

__all__ = [
    "TicketTypeRequest",
    "TicketCounts",
    "PurchaseIntent",
    "TicketCategory",
    "AccountId",
    "Money",
    "SeatCount",
]
