from __future__ import annotations
from typing import Any, Dict, Optional
import logging

from hotelres.tools import tool, get_engine
from hotelres.tools._validation import parse_date
from hotelres.models import RoomType

logger = logging.getLogger(__name__)


@tool
def list_rooms() -> Dict[str, Any]:
    """
    Lists the full room catalog.

    Returns:
        {"rooms": [room dicts]}
    """
    engine = get_engine()
    return {"rooms": [room.to_dict() for room in engine.list_rooms()]}


@tool
def search_available_rooms(
    check_in: str, check_out: str, room_type: Optional[str] = None
) -> Dict[str, Any]:
    """
    Finds rooms that are free for the whole stay.

    Args:
        check_in: Check-in date (YYYY-MM-DD)
        check_out: Check-out date (YYYY-MM-DD), exclusive
        room_type: STANDARD, DELUXE or SUITE; any type when omitted

    Returns:
        Search echo plus "available_rooms", or {"error": ...}.
    """
    start = parse_date(check_in)
    end = parse_date(check_out)
    if start is None:
        return {"error": "Invalid check-in date format. Use YYYY-MM-DD."}
    if end is None:
        return {"error": "Invalid check-out date format. Use YYYY-MM-DD."}
    if end <= start:
        return {"error": "Check-out date must be after check-in date."}

    parsed_type: Optional[RoomType] = None
    if room_type:
        try:
            parsed_type = RoomType.parse(room_type)
        except ValueError as e:
            return {"error": str(e)}

    rooms = get_engine().find_available_rooms(parsed_type, start, end)
    nights = (end - start).days

    return {
        "check_in": start.isoformat(),
        "check_out": end.isoformat(),
        "room_type": parsed_type.value if parsed_type else None,
        "nights": nights,
        "available_rooms": [
            {**room.to_dict(), "total_price": str(room.price_per_night * nights)}
            for room in rooms
        ],
    }
