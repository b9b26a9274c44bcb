from hotels.services.entitlement_service import EntitlementService, ensure_hotel_entitlement
from hotels.services.hotel_service import HotelService

__all__ = [
    "EntitlementService",
    "HotelService",
    "ensure_hotel_entitlement",
]
