"""Unit tests for the hotel entitlement rule.

Run with: pytest tests/test_entitlement.py -v
"""

import logging

import pytest

from hotels.domain import TicketStatus, UserId
from hotels.domain.errors import PaymentRequiredError, TicketNotFoundError
from hotels.services import EntitlementService, ensure_hotel_entitlement
from tests.fakes import InMemoryTicketStore, make_ticket

FLAGS = [(False, False), (False, True), (True, False), (True, True)]


class TestEnsureHotelEntitlement:
    """Tests for the three-flag entitlement gate."""

    @pytest.mark.parametrize(
        "status", [TicketStatus.RESERVED, TicketStatus.CANCELLED, TicketStatus.UNKNOWN]
    )
    @pytest.mark.parametrize("is_remote,includes_hotel", FLAGS)
    def test_unpaid_ticket_requires_payment(self, status, is_remote, includes_hotel):
        """Tickets that are not paid are denied whatever the ticket type."""
        ticket = make_ticket(status=status, is_remote=is_remote, includes_hotel=includes_hotel)
        with pytest.raises(PaymentRequiredError):
            ensure_hotel_entitlement(ticket)

    @pytest.mark.parametrize("includes_hotel", [False, True])
    def test_remote_ticket_requires_payment(self, includes_hotel):
        """Paid remote tickets are denied even when a hotel is included."""
        ticket = make_ticket(is_remote=True, includes_hotel=includes_hotel)
        with pytest.raises(PaymentRequiredError):
            ensure_hotel_entitlement(ticket)

    def test_ticket_without_hotel_requires_payment(self):
        ticket = make_ticket(is_remote=False, includes_hotel=False)
        with pytest.raises(PaymentRequiredError):
            ensure_hotel_entitlement(ticket)

    def test_paid_in_person_ticket_with_hotel_is_entitled(self):
        ensure_hotel_entitlement(make_ticket(is_remote=False, includes_hotel=True))

    def test_denial_is_logged(self, caplog):
        caplog.set_level(logging.INFO, logger="hotels.services.entitlement_service")
        with pytest.raises(PaymentRequiredError):
            ensure_hotel_entitlement(make_ticket(user_id=7, is_remote=True))
        assert "user 7" in caplog.text


class TestEntitlementService:
    """Tests for EntitlementService."""

    def test_missing_ticket_raises_not_found(self):
        service = EntitlementService(InMemoryTicketStore())
        with pytest.raises(TicketNotFoundError):
            service.verify_entitlement(UserId(1))

    def test_returns_ticket_when_entitled(self):
        ticket = make_ticket(user_id=3)
        service = EntitlementService(InMemoryTicketStore(ticket))
        assert service.verify_entitlement(UserId(3)) == ticket

    def test_looks_up_only_the_given_user(self):
        store = InMemoryTicketStore(make_ticket(user_id=3))
        with pytest.raises(TicketNotFoundError):
            EntitlementService(store).verify_entitlement(UserId(4))
        assert store.lookups == [UserId(4)]
