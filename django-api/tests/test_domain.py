"""Unit tests for domain primitives.

These test invariants that must hold at construction time.
Run with: pytest tests/test_domain.py -v
"""

import pytest

from hotels.domain import Capacity, HotelId, TicketStatus, UserId
from hotels.domain.errors import (
    DomainError,
    ErrorCode,
    HotelNotFoundError,
    HotelsNotFoundError,
    NotFoundError,
    PaymentRequiredError,
    TicketNotFoundError,
)
from tests.fakes import make_ticket


class TestIdentifiers:
    """Tests for UserId and HotelId value objects."""

    @pytest.mark.parametrize("id_type", [UserId, HotelId])
    def test_from_string_parses_numeric_text(self, id_type):
        """from_string turns decimal text into an integer id."""
        assert id_type.from_string("42").value == 42

    @pytest.mark.parametrize("id_type", [UserId, HotelId])
    @pytest.mark.parametrize("raw,expected", [("0", 0), ("-3", -3), ("+4", 4)])
    def test_from_string_accepts_signed_integers(self, id_type, raw, expected):
        """Zero and negative ids are well-formed; they simply match nothing."""
        assert id_type.from_string(raw).value == expected

    @pytest.mark.parametrize("id_type", [UserId, HotelId])
    @pytest.mark.parametrize("raw", ["abc", "", "1.5", "--3", "+", " 7", "1e3", "٣", "12a"])
    def test_from_string_rejects_malformed_text(self, id_type, raw):
        """from_string raises ValueError for anything but integer text."""
        with pytest.raises(ValueError):
            id_type.from_string(raw)

    def test_ids_compare_by_value(self):
        assert HotelId(3) == HotelId.from_string("3")


class TestCapacity:
    """Tests for Capacity value object."""

    def test_capacity_accepts_zero(self):
        assert Capacity(0).value == 0

    def test_capacity_rejects_negative_value(self):
        """Capacity raises ValueError for negative value."""
        with pytest.raises(ValueError):
            Capacity(-1)


class TestTicket:
    def test_paid_ticket_is_paid(self):
        assert make_ticket(status=TicketStatus.PAID).is_paid

    def test_reserved_ticket_is_not_paid(self):
        assert not make_ticket(status=TicketStatus.RESERVED).is_paid

    def test_cancelled_ticket_is_not_paid(self):
        assert not make_ticket(status=TicketStatus.CANCELLED).is_paid

    def test_unrecognised_status_reads_as_unknown(self):
        status = TicketStatus("REFUNDED")
        assert status is TicketStatus.UNKNOWN
        assert not make_ticket(status=status).is_paid


class TestErrors:
    """Tests for the domain error hierarchy."""

    @pytest.mark.parametrize(
        "error",
        [TicketNotFoundError(1), HotelNotFoundError(2), HotelsNotFoundError()],
    )
    def test_not_found_errors_share_a_base(self, error):
        assert isinstance(error, NotFoundError)

    def test_payment_required_is_not_a_not_found_error(self):
        error = PaymentRequiredError(1)
        assert isinstance(error, DomainError)
        assert not isinstance(error, NotFoundError)

    def test_str_includes_code(self):
        assert str(HotelNotFoundError(5)) == "HOTEL_NOT_FOUND: Hotel not found"

    def test_error_keeps_context(self):
        error = HotelNotFoundError(5)
        assert error.code is ErrorCode.HOTEL_NOT_FOUND
        assert error.hotel_id == 5

    def test_errors_can_be_raised(self):
        with pytest.raises(NotFoundError) as excinfo:
            raise TicketNotFoundError(9)
        assert excinfo.value.user_id == 9
