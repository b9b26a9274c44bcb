"""Domain models representing persisted state.

These are pure domain objects with no API input rules.
Django ORM models are in hotels/models.py (persistence layer).
"""

from dataclasses import dataclass
from datetime import datetime
from decimal import Decimal

from hotels.domain.value_objects import Capacity, HotelId, TicketStatus, UserId


@dataclass(frozen=True)
class TicketType:
    """Domain representation of a TicketType."""

    id: int
    name: str
    price: Decimal
    is_remote: bool
    includes_hotel: bool


@dataclass(frozen=True)
class Enrollment:
    """Domain representation of a user's Enrollment."""

    id: int
    user_id: UserId
    name: str


@dataclass(frozen=True)
class Ticket:
    """Domain representation of a Ticket with its enrollment and type."""

    id: int
    status: TicketStatus
    enrollment: Enrollment
    ticket_type: TicketType

    @property
    def is_paid(self) -> bool:
        return self.status is TicketStatus.PAID


@dataclass(frozen=True)
class Room:
    """Domain representation of a Room."""

    id: int
    hotel_id: HotelId
    name: str
    capacity: Capacity
    created_at: datetime
    updated_at: datetime


@dataclass(frozen=True)
class Hotel:
    """Domain representation of a Hotel.

    ``rooms`` is None when the hotel was loaded without its rooms (list
    queries) and a tuple, possibly empty, when they were fetched.
    """

    id: HotelId
    name: str
    image: str
    created_at: datetime
    updated_at: datetime
    rooms: tuple[Room, ...] | None = None
