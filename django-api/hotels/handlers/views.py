"""HTTP handlers (views) - handle HTTP concerns only.

Handlers:
- Parse requests and validate input format
- Call services for business logic
- Map domain errors to HTTP responses
- Never contain business logic
- Never expose internal error details
"""

import logging

from rest_framework import status
from rest_framework.request import Request
from rest_framework.response import Response
from rest_framework.views import APIView

from hotels.domain.errors import DomainError, NotFoundError, PaymentRequiredError
from hotels.handlers.serializers import HotelSerializer, HotelWithRoomsSerializer
from hotels.services import HotelService
from hotels.stores import DjangoHotelStore, DjangoTicketStore

logger = logging.getLogger(__name__)


def error_response(error: DomainError) -> Response:
    """Map a domain error to a status code with a user-safe body."""
    if isinstance(error, NotFoundError):
        status_code = status.HTTP_404_NOT_FOUND
    elif isinstance(error, PaymentRequiredError):
        status_code = status.HTTP_402_PAYMENT_REQUIRED
    else:
        logger.warning("Request rejected: %s", error)
        status_code = status.HTTP_400_BAD_REQUEST
    return Response({"code": error.code.value}, status=status_code)


class HotelView(APIView):
    """Base handler wiring a HotelService to the Django stores."""

    def get_service(self) -> HotelService:
        return HotelService(DjangoTicketStore(), DjangoHotelStore())


class HotelListView(HotelView):
    """Handler for GET /hotels"""

    def get(self, request: Request) -> Response:
        try:
            hotels = self.get_service().list_hotels(str(request.user.pk))
        except DomainError as error:
            return error_response(error)
        return Response(HotelSerializer(hotels, many=True).data)


class HotelDetailView(HotelView):
    """Handler for GET /hotels/{hotel_id}"""

    def get(self, request: Request, hotel_id: str) -> Response:
        try:
            hotel = self.get_service().get_hotel(hotel_id, str(request.user.pk))
        except DomainError as error:
            return error_response(error)
        return Response(HotelWithRoomsSerializer(hotel).data)
