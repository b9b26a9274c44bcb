"""Store interfaces (repository pattern).

Stores must be swappable and return domain models.
"""

from abc import ABC, abstractmethod

from hotels.domain import Hotel, HotelId, Ticket, UserId


class TicketStore(ABC):
    """Interface for ticket lookups."""

    @abstractmethod
    def find_ticket_by_user_id(self, user_id: UserId) -> Ticket | None:
        """Return the ticket of the user's enrollment, or None if absent.

        The returned ticket carries its enrollment and ticket type.
        """
        ...


class HotelStore(ABC):
    """Interface for hotel persistence operations."""

    @abstractmethod
    def find_all_hotels(self) -> list[Hotel] | None:
        """Return all hotels without their rooms.

        An empty list means there are no hotels; None means the store
        could not produce a collection.
        """
        ...

    @abstractmethod
    def find_hotel_by_id(self, hotel_id: HotelId) -> Hotel | None:
        """Return a hotel with its rooms, or None if not found."""
        ...
