"""Custom exceptions for hotelres."""
from __future__ import annotations


class HotelResError(Exception):
    """Base exception for all hotelres errors."""
    pass


class ConfigurationError(HotelResError):
    """Raised when configuration is invalid or missing."""
    pass


class PersistenceError(HotelResError):
    """Raised when the store cannot read or write hotel state."""
    pass


class ReservationError(HotelResError):
    """Raised when reservation-specific domain errors occur."""
    pass


class NotFoundError(ReservationError):
    """Raised when a referenced reservation or room does not exist."""
    pass


class ReservationNotFoundError(NotFoundError):
    """Raised when no reservation has the given ID."""

    def __init__(self, reservation_id: str):
        self.reservation_id = reservation_id
        super().__init__(f"Reservation not found: {reservation_id}")


class RoomNotFoundError(NotFoundError):
    """Raised when a room number is not part of the inventory."""

    def __init__(self, room_number: int):
        self.room_number = room_number
        super().__init__(f"Room not found: {room_number}")


class RoomUnavailableError(ReservationError):
    """Raised when an active reservation already covers part of the requested stay."""
    pass


class AlreadyCancelledError(ReservationError):
    pass


class AlreadyPaidError(ReservationError):
    pass


class CancelledConflictError(ReservationError):
    """Raised when paying for a reservation that has been cancelled."""
    pass


class InvalidDateRangeError(ReservationError):
    """Raised when check-out is not strictly after check-in."""
    pass
