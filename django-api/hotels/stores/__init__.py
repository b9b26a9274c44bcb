from hotels.stores.django_store import DjangoHotelStore, DjangoTicketStore
from hotels.stores.interfaces import HotelStore, TicketStore

__all__ = [
    "HotelStore",
    "TicketStore",
    "DjangoHotelStore",
    "DjangoTicketStore",
]
