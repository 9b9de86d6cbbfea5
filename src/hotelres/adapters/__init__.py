from .base import HotelStore
from .sqlite_adapter import SQLiteHotelStore
from .memory_adapter import InMemoryHotelStore

__all__ = [
    "HotelStore",
    "SQLiteHotelStore",
    "InMemoryHotelStore",
]
