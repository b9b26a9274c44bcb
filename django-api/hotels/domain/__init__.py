from hotels.domain.models import Enrollment, Hotel, Room, Ticket, TicketType
from hotels.domain.value_objects import Capacity, HotelId, TicketStatus, UserId

__all__ = [
    "Enrollment",
    "Hotel",
    "Room",
    "Ticket",
    "TicketType",
    "HotelId",
    "UserId",
    "Capacity",
    "TicketStatus",
]
