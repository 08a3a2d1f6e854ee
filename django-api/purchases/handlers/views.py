"""HTTP handlers (views) - handle HTTP concerns only.

Handlers:
- Parse requests and validate input format
- Call services for business logic
- Map domain errors to HTTP responses
- Never contain business logic
- Never expose internal error details
"""

from rest_framework import status
from rest_framework.request import Request
from rest_framework.response import Response
from rest_framework.views import APIView

from purchases.domain.errors import DomainError
from purchases.handlers.serializers import PurchaseRequestSerializer, PurchaseResultSerializer
from purchases.services import build_ticket_service


def domain_error_response(error: DomainError) -> Response:
    return Response(
        {"code": error.code.value, "message": error.message},
        status=status.HTTP_400_BAD_REQUEST,
    )


class PurchaseView(APIView):
    """Handler for POST /api/purchases"""

    def post(self, request: Request) -> Response:
        serializer = PurchaseRequestSerializer(data=request.data)
        if not serializer.is_valid():
            return Response(
                {
                    "code": "INVALID_REQUEST",
                    "message": "Malformed purchase request",
                    "errors": serializer.errors,
                },
                status=status.HTTP_400_BAD_REQUEST,
            )

        account_id, tickets = serializer.to_domain()
        service = build_ticket_service()
        try:
            intent = service.purchase_tickets(account_id, *tickets)
        except DomainError as exc:
            return domain_error_response(exc)

        result = PurchaseResultSerializer.from_intent(account_id, intent)
        return Response(result.data, status=status.HTTP_201_CREATED)
