"""Unit tests for the logging gateways.

Run with: pytest tests/test_gateways.py -v
"""

import logging

import pytest

from purchases.gateways.logging_gateway import (
    LoggingSeatReservationService,
    LoggingTicketPaymentService,
)


class TestLoggingTicketPaymentService:
    """Tests for LoggingTicketPaymentService."""

    def test_logs_payment(self, caplog):
        """make_payment logs the account and amount."""
        caplog.set_level(logging.INFO, logger="purchases")

        LoggingTicketPaymentService().make_payment(3, 65)

        record = caplog.records[-1]
        assert record.getMessage() == "Payment taken"
        assert (record.account_id, record.amount) == (3, 65)

    @pytest.mark.parametrize(("account_id", "amount"), [(0, 10), (1, -5)])
    def test_rejects_invalid_arguments(self, account_id, amount):
        """make_payment raises ValueError for a bad account or amount."""
        with pytest.raises(ValueError):
            LoggingTicketPaymentService().make_payment(account_id, amount)


class TestLoggingSeatReservationService:
    """Tests for LoggingSeatReservationService."""

    def test_logs_reservation(self, caplog):
        """reserve_seat logs the account and seat count."""
        caplog.set_level(logging.INFO, logger="purchases")

        LoggingSeatReservationService().reserve_seat(3, 2)

        record = caplog.records[-1]
        assert record.getMessage() == "Seats reserved"
        assert (record.account_id, record.seats) == (3, 2)

    def test_zero_seats_allowed(self):
        """Reserving zero seats is accepted."""
        LoggingSeatReservationService().reserve_seat(1, 0)

    def test_rejects_negative_seats(self):
        """reserve_seat raises ValueError for a negative seat count."""
        with pytest.raises(ValueError):
            LoggingSeatReservationService().reserve_seat(1, -1)
