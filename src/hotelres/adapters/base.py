from __future__ import annotations

from typing import Protocol, runtime_checkable, Dict, List, Mapping, Sequence, Tuple

from hotelres.models import Room, Reservation


@runtime_checkable
class HotelStore(Protocol):
    """Persistence contract consumed by the reservation engine.

    ``load`` returns empty collections when no state exists yet and raises
    ``PersistenceError`` when stored data cannot be read. ``save`` writes a
    full snapshot and raises ``PersistenceError`` on failure.
    """

    # lifecycle
    def init(self) -> None: ...

    # state
    def load(self) -> Tuple[List[Room], Dict[str, Reservation]]: ...
    def save(self, rooms: Sequence[Room], reservations: Mapping[str, Reservation]) -> None: ...
