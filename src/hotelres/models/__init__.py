from .room import Room, RoomType
from .reservation import Reservation

__all__ = [
    "Room",
    "RoomType",
    "Reservation",
]
