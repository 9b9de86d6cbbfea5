from __future__ import annotations
from typing import Any, Dict
import logging

from hotelres.tools import tool, get_engine
from hotelres.tools._validation import normalize_reservation_id, parse_date, validate_email
from hotelres.exceptions import ReservationError
from hotelres.models import Reservation

logger = logging.getLogger(__name__)

PERSISTENCE_WARNING = "The change was applied but could not be saved; it will be lost on restart."


def _result(reservation: Reservation, saved: bool, **extra: Any) -> Dict[str, Any]:
    result: Dict[str, Any] = {
        "reservation": reservation.to_dict(),
        "summary": reservation.summary(),
        **extra,
    }
    if not saved:
        result["warning"] = PERSISTENCE_WARNING
    return result


@tool
def book_room(
    room_number: int,
    guest_name: str,
    guest_email: str,
    check_in: str,
    check_out: str,
) -> Dict[str, Any]:
    """
    Books a room for a guest.

    Args:
        room_number: Catalog room number, e.g. 101
        guest_name: Guest's full name
        guest_email: Guest's email address
        check_in: Check-in date (YYYY-MM-DD)
        check_out: Check-out date (YYYY-MM-DD), exclusive

    Returns:
        {"success": True, "reservation": ..., "summary": ...} or {"error": ...}
    """
    if not guest_name or not guest_name.strip():
        return {"error": "Guest name is required."}
    if not validate_email(guest_email):
        return {"error": "Invalid email address."}

    start = parse_date(check_in)
    end = parse_date(check_out)
    if start is None or end is None:
        return {"error": "Invalid date format. Use YYYY-MM-DD."}

    try:
        number = int(room_number)
    except (TypeError, ValueError):
        return {"error": f"Invalid room number: {room_number}"}

    engine = get_engine()
    try:
        # the save outcome must be read under the same lock as the booking
        with engine.locked():
            reservation = engine.make_reservation(
                number, guest_name.strip(), guest_email.strip(), start, end
            )
            saved = engine.last_save_ok
    except ReservationError as e:
        logger.info(f"Booking for room {room_number} rejected: {e}")
        return {"error": str(e)}

    return _result(reservation, saved, success=True)


@tool
def get_reservation_details(reservation_id: str) -> Dict[str, Any]:
    """Looks up a reservation by ID."""
    rid = normalize_reservation_id(reservation_id)
    reservation = get_engine().find_reservation(rid)
    if reservation is None:
        return {"error": f"Reservation not found: {rid}"}

    # read-only lookup: persistence state is irrelevant here
    return {"reservation": reservation.to_dict(), "summary": reservation.summary()}


@tool
def cancel_reservation(reservation_id: str) -> Dict[str, Any]:
    """Cancels a reservation by ID. Paid reservations may be cancelled too."""
    rid = normalize_reservation_id(reservation_id)
    engine = get_engine()
    try:
        with engine.locked():
            reservation = engine.cancel_reservation(rid)
            saved = engine.last_save_ok
    except ReservationError as e:
        return {"error": str(e)}
    return _result(reservation, saved, success=True)


@tool
def pay_reservation(reservation_id: str) -> Dict[str, Any]:
    """Records payment for a pending reservation."""
    rid = normalize_reservation_id(reservation_id)
    engine = get_engine()
    try:
        with engine.locked():
            reservation = engine.process_payment(rid)
            saved = engine.last_save_ok
    except ReservationError as e:
        return {"error": str(e)}
    return _result(reservation, saved, success=True, amount_paid=str(reservation.total_price))
