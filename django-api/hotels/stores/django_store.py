"""Django ORM implementation of the ticket and hotel stores."""

import logging

from django.db import DatabaseError

from hotels import models
from hotels.domain import (
    Capacity,
    Enrollment,
    Hotel,
    HotelId,
    Room,
    Ticket,
    TicketStatus,
    TicketType,
    UserId,
)
from hotels.domain.errors import StoreUnavailableError
from hotels.stores.interfaces import HotelStore, TicketStore

logger = logging.getLogger(__name__)

_MAX_PK = 2**63 - 1


def _can_match_pk(value: int) -> bool:
    return 0 < value <= _MAX_PK


def _to_ticket(row: models.Ticket) -> Ticket:
    enrollment = row.enrollment
    ticket_type = row.ticket_type
    status = TicketStatus(row.status)
    if status is TicketStatus.UNKNOWN:
        logger.warning("Ticket %s has unrecognised status %r", row.pk, row.status)
    return Ticket(
        id=row.pk,
        status=status,
        enrollment=Enrollment(
            id=enrollment.pk,
            user_id=UserId(enrollment.user_id),
            name=enrollment.name,
        ),
        ticket_type=TicketType(
            id=ticket_type.pk,
            name=ticket_type.name,
            price=ticket_type.price,
            is_remote=ticket_type.is_remote,
            includes_hotel=ticket_type.includes_hotel,
        ),
    )


def _to_room(row: models.Room) -> Room:
    return Room(
        id=row.pk,
        hotel_id=HotelId(row.hotel_id),
        name=row.name,
        capacity=Capacity(row.capacity),
        created_at=row.created_at,
        updated_at=row.updated_at,
    )


def _to_hotel(row: models.Hotel, rooms: tuple[Room, ...] | None = None) -> Hotel:
    return Hotel(
        id=HotelId(row.pk),
        name=row.name,
        image=row.image,
        created_at=row.created_at,
        updated_at=row.updated_at,
        rooms=rooms,
    )


class DjangoTicketStore(TicketStore):
    """Ticket store backed by the Django ORM."""

    def find_ticket_by_user_id(self, user_id: UserId) -> Ticket | None:
        if not _can_match_pk(user_id.value):
            return None
        try:
            row = (
                models.Ticket.objects.select_related("enrollment", "ticket_type")
                .filter(enrollment__user_id=user_id.value)
                .first()
            )
        except DatabaseError as exc:
            logger.exception("Ticket lookup failed for user %s", user_id.value)
            raise StoreUnavailableError() from exc
        if row is None:
            return None
        return _to_ticket(row)


class DjangoHotelStore(HotelStore):
    """Hotel store backed by the Django ORM."""

    def find_all_hotels(self) -> list[Hotel] | None:
        try:
            rows = list(models.Hotel.objects.all())
        except DatabaseError as exc:
            logger.exception("Hotel listing failed")
            raise StoreUnavailableError() from exc
        return [_to_hotel(row) for row in rows]

    def find_hotel_by_id(self, hotel_id: HotelId) -> Hotel | None:
        if not _can_match_pk(hotel_id.value):
            return None
        try:
            row = (
                models.Hotel.objects.prefetch_related("rooms")
                .filter(pk=hotel_id.value)
                .first()
            )
        except DatabaseError as exc:
            logger.exception("Hotel lookup failed for hotel %s", hotel_id.value)
            raise StoreUnavailableError() from exc
        if row is None:
            return None
        rooms = tuple(_to_room(room) for room in row.rooms.all())
        return _to_hotel(row, rooms=rooms)
