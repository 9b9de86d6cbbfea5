from __future__ import annotations
from dataclasses import dataclass
from decimal import Decimal, InvalidOperation
from enum import Enum
from typing import Any, Dict


class RoomType(str, Enum):
    STANDARD = "STANDARD"
    DELUXE = "DELUXE"
    SUITE = "SUITE"

    @classmethod
    def parse(cls, value: Any) -> RoomType:
        """Accepts a RoomType or a case-insensitive name such as 'deluxe'."""
        if isinstance(value, cls):
            return value
        try:
            return cls(str(value).strip().upper())
        except ValueError:
            choices = ", ".join(t.value for t in cls)
            raise ValueError(f"Unknown room type '{value}'. Expected one of: {choices}")


@dataclass(frozen=True)
class Room:
    """Hotel room catalog entry. Availability is never stored here."""

    room_number: int
    room_type: RoomType
    price_per_night: Decimal
    max_occupancy: int

    def __post_init__(self) -> None:
        # frozen: normalise through object.__setattr__
        object.__setattr__(self, "room_type", RoomType.parse(self.room_type))
        try:
            price = Decimal(str(self.price_per_night))
        except InvalidOperation as e:
            raise ValueError(f"Invalid nightly rate for room {self.room_number}: {self.price_per_night}") from e
        object.__setattr__(self, "price_per_night", price)

        if price <= 0:
            raise ValueError(f"Nightly rate must be positive, got {price}")
        if self.max_occupancy <= 0:
            raise ValueError(f"Max occupancy must be positive, got {self.max_occupancy}")

    def describe(self) -> str:
        return (
            f"Room {self.room_number} - {self.room_type.value} "
            f"(Max: {self.max_occupancy} people) - ${self.price_per_night:.2f}/night"
        )

    def to_dict(self) -> Dict[str, Any]:
        return {
            "room_number": self.room_number,
            "room_type": self.room_type.value,
            "price_per_night": str(self.price_per_night),
            "max_occupancy": self.max_occupancy,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> Room:
        return cls(
            room_number=int(data["room_number"]),
            room_type=RoomType.parse(data["room_type"]),
            price_per_night=Decimal(str(data["price_per_night"])),
            max_occupancy=int(data["max_occupancy"]),
        )
