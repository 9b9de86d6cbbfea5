"""
Base configuration abstractions for hotelres.
"""
from __future__ import annotations

from abc import ABC, abstractmethod
from typing import List, Optional

from hotelres.adapters.base import HotelStore
from hotelres.models import Room
from hotelres.services import ReservationService


class HotelResConfig(ABC):
    """Abstract configuration contract for stores and the reservation engine."""

    @abstractmethod
    def get_database_url(self) -> str:
        """Return database URL used by the persistence layer."""

    @abstractmethod
    def create_store(self) -> HotelStore:
        """
        Create and return the store for this hotel. The engine calls
        ``init()`` on it, so implementations should not.
        """

    def get_log_level(self) -> str: return "INFO"
    def get_reservation_id_length(self) -> int: return 8
    def get_hotel_display_name(self) -> str: return "Hotel Reservation System"

    def get_seed_rooms(self) -> Optional[List[Room]]:
        """Catalog used on first run. None means the built-in default catalog."""
        return None

    def create_engine(self) -> ReservationService:
        return ReservationService(
            store=self.create_store(),
            seed_rooms=self.get_seed_rooms(),
            id_length=self.get_reservation_id_length(),
        )
