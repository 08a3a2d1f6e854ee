"""Serializers for purchase requests and responses."""

from rest_framework import serializers

from purchases.domain import PurchaseIntent, TicketCategory, TicketTypeRequest


class TicketTypeRequestSerializer(serializers.Serializer):
    """Serializer for one ticket request line."""

    type = serializers.ChoiceField(choices=[category.value for category in TicketCategory])
    quantity = serializers.IntegerField(min_value=0)


class PurchaseRequestSerializer(serializers.Serializer):
    """Serializer for a purchase request body.

    Only the format is checked here; account and booking rules belong to
    the service.
    """

    account_id = serializers.IntegerField(allow_null=True, default=None)
    tickets = TicketTypeRequestSerializer(many=True, default=list)

    def to_domain(self) -> tuple[int | None, list[TicketTypeRequest]]:
        tickets = [
            TicketTypeRequest(
                category=TicketCategory(line["type"]),
                quantity=line["quantity"],
            )
            for line in self.validated_data["tickets"]
        ]
        return self.validated_data["account_id"], tickets


class PurchaseResultSerializer(serializers.Serializer):
    """Serializer for a completed purchase."""

    account_id = serializers.IntegerField()
    total_amount = serializers.IntegerField(source="intent.total_amount.amount")
    total_seats = serializers.IntegerField(source="intent.total_seats.value")

    @classmethod
    def from_intent(cls, account_id: int, intent: PurchaseIntent) -> "PurchaseResultSerializer":
        return cls({"account_id": account_id, "intent": intent})
