from __future__ import annotations

import copy
import logging
from typing import Dict, List, Mapping, Optional, Sequence, Tuple

from hotelres.exceptions import PersistenceError
from hotelres.models import Room, Reservation

logger = logging.getLogger(__name__)


class InMemoryHotelStore:
    """Keeps deep-copied snapshots in process memory.

    ``fail_on_save`` / ``fail_on_load`` make the next operations raise
    ``PersistenceError``, which is how tests exercise the engine's
    degraded paths.
    """

    def __init__(
        self,
        rooms: Optional[Sequence[Room]] = None,
        reservations: Optional[Mapping[str, Reservation]] = None,
    ):
        self._rooms: List[Room] = list(rooms or [])
        self._reservations: Dict[str, Reservation] = copy.deepcopy(dict(reservations or {}))
        self.fail_on_save = False
        self.fail_on_load = False
        self.save_count = 0

    def init(self) -> None:
        return None

    def load(self) -> Tuple[List[Room], Dict[str, Reservation]]:
        if self.fail_on_load:
            raise PersistenceError("In-memory store is configured to fail on load")
        return list(self._rooms), copy.deepcopy(self._reservations)

    def save(self, rooms: Sequence[Room], reservations: Mapping[str, Reservation]) -> None:
        if self.fail_on_save:
            raise PersistenceError("In-memory store is configured to fail on save")
        self._rooms = list(rooms)
        self._reservations = copy.deepcopy(dict(reservations))
        self.save_count += 1
        logger.debug(f"Snapshot saved: {len(self._rooms)} rooms, {len(self._reservations)} reservations")
