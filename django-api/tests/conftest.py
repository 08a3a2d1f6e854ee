"""Pytest configuration and shared fixtures."""

from unittest.mock import create_autospec

import pytest
from rest_framework.test import APIClient

from purchases.gateways import SeatReservationService, TicketPaymentService
from purchases.services import TicketService


@pytest.fixture
def api_client() -> APIClient:
    return APIClient()


@pytest.fixture
def payment_service():
    return create_autospec(TicketPaymentService, instance=True)


@pytest.fixture
def seat_reservation_service():
    return create_autospec(SeatReservationService, instance=True)


@pytest.fixture
def ticket_service(payment_service, seat_reservation_service) -> TicketService:
    return TicketService(payment_service, seat_reservation_service)
