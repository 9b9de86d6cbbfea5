"""hotelres - hotel room inventory and reservation engine"""

__version__ = "0.1.0"

# Core abstractions
from .base_config import HotelResConfig

# Exceptions
from .exceptions import (
    HotelResError,
    ConfigurationError,
    PersistenceError,
    ReservationError,
    NotFoundError,
    ReservationNotFoundError,
    RoomNotFoundError,
    RoomUnavailableError,
    AlreadyCancelledError,
    AlreadyPaidError,
    CancelledConflictError,
    InvalidDateRangeError,
)

# Config management
from .config import get_config, set_config

# Models
from .models import Room, RoomType, Reservation

# Stores
from .adapters.base import HotelStore
from .adapters.sqlite_adapter import SQLiteHotelStore
from .adapters.memory_adapter import InMemoryHotelStore

# Engine
from .services import InventoryService, ReservationService, dates_overlap

# Tools
from .tools import get_engine, set_engine

__all__ = [
    # Version
    "__version__",

    # Core
    "HotelResConfig",

    # Exceptions
    "HotelResError",
    "ConfigurationError",
    "PersistenceError",
    "ReservationError",
    "NotFoundError",
    "ReservationNotFoundError",
    "RoomNotFoundError",
    "RoomUnavailableError",
    "AlreadyCancelledError",
    "AlreadyPaidError",
    "CancelledConflictError",
    "InvalidDateRangeError",

    # Config
    "get_config",
    "set_config",

    # Models
    "Room",
    "RoomType",
    "Reservation",

    # Stores
    "HotelStore",
    "SQLiteHotelStore",
    "InMemoryHotelStore",

    # Engine
    "InventoryService",
    "ReservationService",
    "dates_overlap",

    # Tool Utilities
    "get_engine",
    "set_engine",
]
