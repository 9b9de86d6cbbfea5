from __future__ import annotations
from typing import Callable, Dict, List, Optional

from langchain_core.tools import StructuredTool

from hotelres.config import get_config
from hotelres.services import ReservationService

# Process-wide engine instance
_engine: Optional[ReservationService] = None


# ------------------------------------
# Utilities
# ------------------------------------
def tool(func: Callable) -> Callable:
    """Marks a function as part of the caller-facing tool surface."""
    func._is_tool = True
    func._tool_name = func.__name__
    func._tool_description = func.__doc__ or ""
    return func


def get_engine() -> ReservationService:
    """
    Returns the process-wide reservation engine, building it from the
    active config on first use.
    """
    global _engine
    if _engine is None:
        config = get_config()
        _engine = config.create_engine()
    return _engine


def set_engine(engine: Optional[ReservationService]) -> None:
    """Sets a custom engine instance (useful for tests)."""
    global _engine
    _engine = engine


# ------------------------------------
# Tool functions
# ------------------------------------
from .room_tools import (
    list_rooms,
    search_available_rooms,
)
from .reservation_tools import (
    book_room,
    get_reservation_details,
    cancel_reservation,
    pay_reservation,
)


_tools: Optional[List[StructuredTool]] = None
_tool_map: Dict[str, StructuredTool] = {}


def get_tools() -> List[StructuredTool]:
    """Returns the tool functions wrapped as LangChain ``StructuredTool``s (lazy init)."""
    global _tools, _tool_map
    if _tools is None:
        _tools = [
            StructuredTool.from_function(func=list_rooms, name="list_rooms", description="Lists every room in the hotel catalog with type, nightly rate and max occupancy."),
            StructuredTool.from_function(func=search_available_rooms, name="search_available_rooms", description="Lists rooms free for the whole stay between check_in and check_out (YYYY-MM-DD), optionally filtered by room type."),
            StructuredTool.from_function(func=book_room, name="book_room", description="Books a room for a guest over [check_in, check_out) and returns the new pending reservation."),
            StructuredTool.from_function(func=get_reservation_details, name="get_reservation_details", description="Returns reservation details and status for a reservation ID."),
            StructuredTool.from_function(func=cancel_reservation, name="cancel_reservation", description="Cancels a reservation by ID, freeing its room for those dates."),
            StructuredTool.from_function(func=pay_reservation, name="pay_reservation", description="Records payment for a pending reservation by ID."),
        ]
        _tool_map = {t.name: t for t in _tools}

    return _tools


def get_tool_map() -> Dict[str, StructuredTool]:
    """Maps tool name to its ``StructuredTool``."""
    if not _tool_map:
        get_tools()
    return _tool_map


__all__ = [
    "tool",
    "get_engine",
    "set_engine",

    "list_rooms",
    "search_available_rooms",
    "book_room",
    "get_reservation_details",
    "cancel_reservation",
    "pay_reservation",

    "get_tools",
    "get_tool_map",
]
