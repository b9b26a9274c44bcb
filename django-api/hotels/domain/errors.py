"""Domain error codes for the hotels module."""

from dataclasses import dataclass
from enum import Enum


class ErrorCode(Enum):
    """Domain error codes."""

    TICKET_NOT_FOUND = "TICKET_NOT_FOUND"
    HOTEL_NOT_FOUND = "HOTEL_NOT_FOUND"
    HOTELS_NOT_FOUND = "HOTELS_NOT_FOUND"
    PAYMENT_REQUIRED = "PAYMENT_REQUIRED"
    INVALID_HOTEL_ID = "INVALID_HOTEL_ID"
    INVALID_USER_ID = "INVALID_USER_ID"
    STORE_UNAVAILABLE = "STORE_UNAVAILABLE"


@dataclass(frozen=True)
class DomainError(Exception):
    """Base domain error with code and user-safe message."""

    code: ErrorCode
    message: str

    def __str__(self) -> str:
        return f"{self.code.value}: {self.message}"


class NotFoundError(DomainError):
    """Base for errors raised when a requested record does not exist."""


class TicketNotFoundError(NotFoundError):
    """Raised when the user has no ticket."""

    def __init__(self, user_id: int) -> None:
        super().__init__(
            code=ErrorCode.TICKET_NOT_FOUND,
            message="Ticket not found",
        )
        self.user_id = user_id


class HotelNotFoundError(NotFoundError):
    """Raised when a hotel is not found."""

    def __init__(self, hotel_id: int) -> None:
        super().__init__(
            code=ErrorCode.HOTEL_NOT_FOUND,
            message="Hotel not found",
        )
        self.hotel_id = hotel_id


class HotelsNotFoundError(NotFoundError):
    """Raised when the hotel store returns no collection at all."""

    def __init__(self) -> None:
        super().__init__(
            code=ErrorCode.HOTELS_NOT_FOUND,
            message="Hotels not found",
        )


class PaymentRequiredError(DomainError):
    """Raised when the user's ticket does not entitle them to hotels."""

    def __init__(self, user_id: int) -> None:
        super().__init__(
            code=ErrorCode.PAYMENT_REQUIRED,
            message="Ticket does not include hotel access",
        )
        self.user_id = user_id


class InvalidHotelIdError(DomainError):
    """Raised when a hotel ID is invalid."""

    def __init__(self) -> None:
        super().__init__(
            code=ErrorCode.INVALID_HOTEL_ID,
            message="Invalid hotel ID format",
        )


class InvalidUserIdError(DomainError):
    """Raised when a user ID is invalid."""

    def __init__(self) -> None:
        super().__init__(
            code=ErrorCode.INVALID_USER_ID,
            message="Invalid user ID format",
        )


class StoreUnavailableError(DomainError):
    """Raised by stores when the backing database fails."""

    def __init__(self) -> None:
        super().__init__(
            code=ErrorCode.STORE_UNAVAILABLE,
            message="Store unavailable",
        )
