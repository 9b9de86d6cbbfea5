from .inventory_service import InventoryService, default_catalog
from .reservation_service import ReservationService, dates_overlap

__all__ = [
    "InventoryService",
    "ReservationService",
    "default_catalog",
    "dates_overlap",
]
