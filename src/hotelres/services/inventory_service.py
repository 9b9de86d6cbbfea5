from __future__ import annotations

import logging
from decimal import Decimal
from typing import Dict, Iterable, List, Optional, Tuple

from hotelres.models import Room, RoomType

logger = logging.getLogger(__name__)


# (type, count, first room number, nightly rate, max occupancy)
DEFAULT_CATALOG: Tuple[Tuple[RoomType, int, int, str, int], ...] = (
    (RoomType.STANDARD, 10, 101, "99.99", 2),
    (RoomType.DELUXE, 5, 201, "159.99", 4),
    (RoomType.SUITE, 3, 301, "249.99", 6),
)


def build_catalog(rows: Iterable[Tuple[RoomType, int, int, str, int]]) -> List[Room]:
    """Expands (type, count, start, rate, occupancy) rows into consecutive rooms."""
    rooms: List[Room] = []
    for room_type, count, start, rate, occupancy in rows:
        for offset in range(count):
            rooms.append(Room(start + offset, room_type, Decimal(rate), occupancy))
    return rooms


def default_catalog() -> List[Room]:
    return build_catalog(DEFAULT_CATALOG)


class InventoryService:
    """
    Immutable room catalog. Rooms are created once, either loaded from the
    store or seeded on first run, and never deleted.
    """

    def __init__(self, rooms: Iterable[Room]):
        self._rooms: List[Room] = []
        self._by_number: Dict[int, Room] = {}
        for room in rooms:
            if room.room_number in self._by_number:
                raise ValueError(f"Duplicate room number in catalog: {room.room_number}")
            self._rooms.append(room)
            self._by_number[room.room_number] = room

    @classmethod
    def load_or_seed(cls, stored_rooms: List[Room], seed_rooms: Optional[List[Room]] = None) -> Tuple[InventoryService, bool]:
        """
        Uses the stored catalog verbatim when there is one. Otherwise seeds
        from ``seed_rooms`` (default catalog when None). Returns the inventory
        and whether seeding happened.
        """
        if stored_rooms:
            return cls(stored_rooms), False

        rooms = seed_rooms if seed_rooms is not None else default_catalog()
        logger.info(f"Seeding room catalog with {len(rooms)} rooms")
        return cls(rooms), True

    def list_rooms(self) -> List[Room]:
        return list(self._rooms)

    def get_room(self, room_number: int) -> Optional[Room]:
        return self._by_number.get(room_number)

    def __contains__(self, room_number: object) -> bool:
        return room_number in self._by_number

    def __len__(self) -> int:
        return len(self._rooms)

    def room_types(self) -> List[RoomType]:
        """Room types present in the catalog, in first-seen order."""
        seen: List[RoomType] = []
        for room in self._rooms:
            if room.room_type not in seen:
                seen.append(room.room_type)
        return seen
