"""Ticket entitlement rules for hotel access."""

import logging

from hotels.domain import Ticket, UserId
from hotels.domain.errors import PaymentRequiredError, TicketNotFoundError
from hotels.stores.interfaces import TicketStore

logger = logging.getLogger(__name__)


def ensure_hotel_entitlement(ticket: Ticket) -> None:
    """Raise PaymentRequiredError unless the ticket grants hotel access.

    Access requires a paid, in-person ticket whose type includes a hotel.
    """
    user_id = ticket.enrollment.user_id.value
    if not ticket.is_paid:
        logger.info("Hotel access denied for user %s: ticket is %s", user_id, ticket.status.value)
        raise PaymentRequiredError(user_id)
    if ticket.ticket_type.is_remote:
        logger.info("Hotel access denied for user %s: remote ticket", user_id)
        raise PaymentRequiredError(user_id)
    if not ticket.ticket_type.includes_hotel:
        logger.info("Hotel access denied for user %s: hotel not included", user_id)
        raise PaymentRequiredError(user_id)


class EntitlementService:
    """Checks whether a user's ticket entitles them to hotel data."""

    def __init__(self, ticket_store: TicketStore) -> None:
        self._ticket_store = ticket_store

    def verify_entitlement(self, user_id: UserId) -> Ticket:
        """Return the user's ticket if it grants hotel access.

        Raises:
            TicketNotFoundError: If the user has no ticket.
            PaymentRequiredError: If the ticket does not grant hotel access.
        """
        ticket = self._ticket_store.find_ticket_by_user_id(user_id)
        if ticket is None:
            raise TicketNotFoundError(user_id.value)
        ensure_hotel_entitlement(ticket)
        return ticket
