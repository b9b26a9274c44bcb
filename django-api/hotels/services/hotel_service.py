"""Hotel service - all business logic lives here.

Services:
- Depend only on interfaces (stores)
- Validate domain invariants
- Perform orchestration and error mapping
- Return domain models or domain errors
"""

from hotels.domain import Hotel, HotelId, UserId
from hotels.domain.errors import (
    HotelNotFoundError,
    HotelsNotFoundError,
    InvalidHotelIdError,
    InvalidUserIdError,
)
from hotels.services.entitlement_service import EntitlementService
from hotels.stores.interfaces import HotelStore, TicketStore


def _parse_user_id(user_id: str) -> UserId:
    try:
        return UserId.from_string(user_id)
    except ValueError as exc:
        raise InvalidUserIdError() from exc


def _parse_hotel_id(hotel_id: str) -> HotelId:
    try:
        return HotelId.from_string(hotel_id)
    except ValueError as exc:
        raise InvalidHotelIdError() from exc


class HotelService:
    """Service for entitlement-gated hotel lookups."""

    def __init__(self, ticket_store: TicketStore, hotel_store: HotelStore) -> None:
        self._entitlements = EntitlementService(ticket_store)
        self._hotel_store = hotel_store

    def list_hotels(self, user_id: str) -> list[Hotel]:
        """Return all hotels, without rooms, for an entitled user.

        Raises:
            InvalidUserIdError: If user_id is not numeric.
            TicketNotFoundError: If the user has no ticket.
            PaymentRequiredError: If the ticket does not grant hotel access.
            HotelsNotFoundError: If the store returned no collection.
        """
        self._entitlements.verify_entitlement(_parse_user_id(user_id))
        hotels = self._hotel_store.find_all_hotels()
        if hotels is None:
            raise HotelsNotFoundError()
        return hotels

    def get_hotel(self, hotel_id: str, user_id: str) -> Hotel:
        """Return a hotel with its rooms for an entitled user.

        Raises:
            InvalidHotelIdError: If hotel_id is not numeric.
            InvalidUserIdError: If user_id is not numeric.
            TicketNotFoundError: If the user has no ticket.
            PaymentRequiredError: If the ticket does not grant hotel access.
            HotelNotFoundError: If the hotel does not exist.
        """
        parsed_hotel_id = _parse_hotel_id(hotel_id)
        self._entitlements.verify_entitlement(_parse_user_id(user_id))
        hotel = self._hotel_store.find_hotel_by_id(parsed_hotel_id)
        if hotel is None:
            raise HotelNotFoundError(parsed_hotel_id.value)
        return hotel
