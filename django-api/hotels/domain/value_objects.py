"""Domain primitives that enforce validity at creation time."""

import re
from dataclasses import dataclass
from enum import Enum
from typing import Self

_INTEGER = re.compile(r"[+-]?[0-9]+")


def _parse_integer(value: str) -> int:
    if not _INTEGER.fullmatch(value):
        raise ValueError(f"Not a numeric identifier: {value!r}")
    return int(value)


@dataclass(frozen=True)
class UserId:
    """Identifier of a User.

    Any integer is well-formed; ids that match no record are the stores'
    concern.
    """

    value: int

    @classmethod
    def from_string(cls, value: str) -> Self:
        return cls(value=_parse_integer(value))


@dataclass(frozen=True)
class HotelId:
    """Identifier of a Hotel.

    Any integer is well-formed; ids that match no record are the stores'
    concern.
    """

    value: int

    @classmethod
    def from_string(cls, value: str) -> Self:
        return cls(value=_parse_integer(value))


@dataclass(frozen=True)
class Capacity:
    """Non-negative integer representing capacity."""

    value: int

    def __post_init__(self) -> None:
        if self.value < 0:
            raise ValueError("Capacity cannot be negative")


class TicketStatus(Enum):
    """Lifecycle status of a ticket.

    Stored values outside the known statuses read as UNKNOWN, which is
    never paid.
    """

    RESERVED = "RESERVED"
    PAID = "PAID"
    CANCELLED = "CANCELLED"
    UNKNOWN = "UNKNOWN"

    @classmethod
    def _missing_(cls, value: object) -> "TicketStatus":
        return cls.UNKNOWN
