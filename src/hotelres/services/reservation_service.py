from __future__ import annotations

import dataclasses
import logging
import threading
import uuid
from datetime import date
from typing import Callable, Dict, List, Optional, Union

from hotelres.adapters.base import HotelStore
from hotelres.exceptions import (
    AlreadyCancelledError,
    AlreadyPaidError,
    CancelledConflictError,
    InvalidDateRangeError,
    PersistenceError,
    ReservationError,
    ReservationNotFoundError,
    RoomNotFoundError,
    RoomUnavailableError,
)
from hotelres.models import Reservation, Room, RoomType
from hotelres.services.inventory_service import InventoryService

logger = logging.getLogger(__name__)

DEFAULT_ID_LENGTH = 8
MAX_ID_ATTEMPTS = 100


# ------------------------------------
# Helpers
# ------------------------------------
def dates_overlap(start1: date, end1: date, start2: date, end2: date) -> bool:
    """
    Half-open ranges [start1, end1) and [start2, end2) overlap when each one
    starts before the other ends. A check-out day may be the next check-in.
    """
    return start1 < end2 and start2 < end1


def random_reservation_id(length: int = DEFAULT_ID_LENGTH) -> str:
    return uuid.uuid4().hex[:length].upper()


class ReservationService:
    """
    Reservation engine: owns the reservation collection, derives room
    availability from it and runs the pending -> paid / cancelled lifecycle.

    All reads and mutations go through one engine-wide lock, so a booking's
    availability re-check and its insert form a single atomic step.
    """

    def __init__(
        self,
        store: HotelStore,
        seed_rooms: Optional[List[Room]] = None,
        id_factory: Optional[Callable[[], str]] = None,
        id_length: int = DEFAULT_ID_LENGTH,
    ):
        self.store = store
        self._id_factory = id_factory or (lambda: random_reservation_id(id_length))
        self._lock = threading.RLock()
        self._reservations: Dict[str, Reservation] = {}

        self.last_save_ok = True
        self.save_failures = 0
        self.load_failed = False

        self._load_state(seed_rooms)

    # ------------------------------------
    # Lifecycle
    # ------------------------------------
    def _load_state(self, seed_rooms: Optional[List[Room]]) -> None:
        try:
            self.store.init()
            rooms, reservations = self.store.load()
        except PersistenceError as e:
            logger.warning(f"Stored hotel state is unreadable, starting with an empty state: {e}")
            self.load_failed = True
            rooms, reservations = [], {}

        self.inventory, seeded = InventoryService.load_or_seed(rooms, seed_rooms)
        self._reservations = dict(reservations)

        for reservation in self._reservations.values():
            if reservation.room_number not in self.inventory:
                logger.warning(
                    f"Reservation {reservation.reservation_id} references unknown room {reservation.room_number}"
                )

        # unreadable state stays on disk untouched until the next mutation
        if seeded and not self.load_failed:
            self._persist()

    def _persist(self) -> bool:
        """Saves a snapshot. Failures are logged and counted, never raised."""
        try:
            self.store.save(self.inventory.list_rooms(), self._reservations)
        except PersistenceError as e:
            self.save_failures += 1
            self.last_save_ok = False
            logger.error(
                f"Error saving data ({self.save_failures} consecutive failures); "
                f"changes are kept in memory only: {e}"
            )
            return False

        self.save_failures = 0
        self.last_save_ok = True
        return True

    def _new_reservation_id(self) -> str:
        for _ in range(MAX_ID_ATTEMPTS):
            candidate = self._id_factory()
            if candidate not in self._reservations:
                return candidate
            logger.debug(f"Reservation ID collision on {candidate}, retrying")
        raise ReservationError(f"Could not generate a unique reservation ID after {MAX_ID_ATTEMPTS} attempts")

    def _get_or_raise(self, reservation_id: str) -> Reservation:
        reservation = self._reservations.get(reservation_id)
        if reservation is None:
            raise ReservationNotFoundError(reservation_id)
        return reservation

    def _booked_room_numbers(self, check_in: date, check_out: date) -> set:
        return {
            res.room_number
            for res in self._reservations.values()
            if res.is_active() and dates_overlap(check_in, check_out, res.check_in, res.check_out)
        }

    # ------------------------------------
    # Queries
    # ------------------------------------
    def locked(self) -> threading.RLock:
        """
        The engine lock. Holding it across a command and the read of
        ``last_save_ok`` ties the persistence outcome to that command.
        """
        return self._lock

    def list_rooms(self) -> List[Room]:
        return self.inventory.list_rooms()

    def find_available_rooms(
        self, room_type: Optional[RoomType], check_in: date, check_out: date
    ) -> List[Room]:
        """
        Rooms of ``room_type`` (any type when None) that no active reservation
        overlaps within [check_in, check_out), in catalog order.
        """
        with self._lock:
            booked = self._booked_room_numbers(check_in, check_out)
            return [
                room
                for room in self.inventory.list_rooms()
                if room.room_number not in booked and (room_type is None or room.room_type == room_type)
            ]

    def is_room_available(self, room_number: int, check_in: date, check_out: date) -> bool:
        with self._lock:
            return not any(
                res.is_active()
                and res.room_number == room_number
                and dates_overlap(check_in, check_out, res.check_in, res.check_out)
                for res in self._reservations.values()
            )

    def find_reservation(self, reservation_id: str) -> Optional[Reservation]:
        with self._lock:
            reservation = self._reservations.get(reservation_id)
            return dataclasses.replace(reservation) if reservation else None

    def list_reservations(
        self, room_number: Optional[int] = None, include_cancelled: bool = True
    ) -> List[Reservation]:
        with self._lock:
            return [
                dataclasses.replace(res)
                for res in self._reservations.values()
                if (room_number is None or res.room_number == room_number)
                and (include_cancelled or res.is_active())
            ]

    # ------------------------------------
    # Commands
    # ------------------------------------
    def make_reservation(
        self,
        room: Union[Room, int],
        guest_name: str,
        guest_email: str,
        check_in: date,
        check_out: date,
    ) -> Reservation:
        if check_out <= check_in:
            raise InvalidDateRangeError(
                f"Check-out date ({check_out}) must be after check-in date ({check_in})."
            )

        room_number = room.room_number if isinstance(room, Room) else int(room)

        with self._lock:
            catalog_room = self.inventory.get_room(room_number)
            if catalog_room is None:
                raise RoomNotFoundError(room_number)

            if not self.is_room_available(room_number, check_in, check_out):
                raise RoomUnavailableError(
                    f"Room {room_number} is not available from {check_in} to {check_out}."
                )

            reservation = Reservation(
                room_number=room_number,
                guest_name=guest_name,
                guest_email=guest_email,
                check_in=check_in,
                check_out=check_out,
                total_price=Reservation.calculate_total_price(catalog_room.price_per_night, check_in, check_out),
                reservation_id=self._new_reservation_id(),
            )
            self._reservations[reservation.reservation_id] = reservation
            logger.info(
                f"Reservation {reservation.reservation_id} created for room {room_number} "
                f"({check_in} -> {check_out}), total {reservation.total_price}"
            )
            self._persist()
            return dataclasses.replace(reservation)

    def cancel_reservation(self, reservation_id: str) -> Reservation:
        with self._lock:
            reservation = self._get_or_raise(reservation_id)
            if reservation.is_cancelled:
                raise AlreadyCancelledError(f"Reservation {reservation_id} is already cancelled.")

            reservation.is_cancelled = True
            logger.info(f"Reservation {reservation_id} cancelled (paid={reservation.is_paid})")
            self._persist()
            return dataclasses.replace(reservation)

    def process_payment(self, reservation_id: str) -> Reservation:
        with self._lock:
            reservation = self._get_or_raise(reservation_id)
            if reservation.is_paid:
                raise AlreadyPaidError(f"Payment for reservation {reservation_id} has already been processed.")
            if reservation.is_cancelled:
                raise CancelledConflictError(
                    f"Cannot process payment for cancelled reservation {reservation_id}."
                )

            reservation.is_paid = True
            logger.info(f"Payment received for reservation {reservation_id}: {reservation.total_price}")
            self._persist()
            return dataclasses.replace(reservation)
