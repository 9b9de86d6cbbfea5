from __future__ import annotations

import sqlite3
import logging
from decimal import InvalidOperation
from pathlib import Path
from typing import Dict, List, Mapping, Sequence, Tuple

from hotelres.exceptions import PersistenceError
from hotelres.models import Room, Reservation

logger = logging.getLogger(__name__)


class SQLiteHotelStore:
    """SQLite-backed store holding the room catalog and every reservation."""

    def __init__(self, db_url: str):
        # Format: sqlite:///path
        if db_url.startswith("sqlite:///"):
            self.db_path = db_url.replace("sqlite:///", "")
        else:
            self.db_path = db_url

        Path(self.db_path).parent.mkdir(parents=True, exist_ok=True)
        logger.info(f"SQLiteHotelStore initialised. Database path: {self.db_path}")

    def _conn(self) -> sqlite3.Connection:
        try:
            conn = sqlite3.connect(self.db_path)
            conn.row_factory = sqlite3.Row
            return conn
        except sqlite3.Error as e:
            logger.error(f"Database connection error: {e}")
            raise PersistenceError(f"Could not connect to database: {e}") from e

    # ------------------------------------
    # Lifecycle
    # ------------------------------------
    def init(self) -> None:
        """Creates the tables if they do not exist yet."""
        try:
            with self._conn() as conn:
                cur = conn.cursor()
                # position keeps the catalog in its original order
                cur.execute(
                    """
                    CREATE TABLE IF NOT EXISTS rooms (
                        room_number INTEGER PRIMARY KEY,
                        room_type TEXT NOT NULL,
                        price_per_night TEXT NOT NULL,
                        max_occupancy INTEGER NOT NULL,
                        position INTEGER NOT NULL
                    )
                    """
                )
                cur.execute(
                    """
                    CREATE TABLE IF NOT EXISTS reservations (
                        reservation_id TEXT PRIMARY KEY,
                        room_number INTEGER NOT NULL,
                        guest_name TEXT NOT NULL,
                        guest_email TEXT NOT NULL,
                        check_in TEXT NOT NULL,
                        check_out TEXT NOT NULL,
                        total_price TEXT NOT NULL,
                        is_paid INTEGER NOT NULL DEFAULT 0,
                        is_cancelled INTEGER NOT NULL DEFAULT 0,
                        created_at TEXT,
                        FOREIGN KEY(room_number) REFERENCES rooms(room_number)
                    )
                    """
                )
                conn.commit()
        except sqlite3.Error as e:
            logger.error(f"SQLite error while creating tables: {e}")
            raise PersistenceError(f"Table initialisation failed: {e}") from e

    # ------------------------------------
    # State
    # ------------------------------------
    def load(self) -> Tuple[List[Room], Dict[str, Reservation]]:
        if not Path(self.db_path).exists():
            logger.info("No existing data found. Starting with a fresh system.")
            return [], {}

        try:
            with self._conn() as conn:
                cur = conn.cursor()
                cur.execute("SELECT * FROM rooms ORDER BY position")
                rooms = [Room.from_dict(dict(r)) for r in cur.fetchall()]

                cur.execute("SELECT * FROM reservations ORDER BY rowid")
                reservations: Dict[str, Reservation] = {}
                for row in cur.fetchall():
                    reservation = Reservation.from_dict(dict(row))
                    reservations[reservation.reservation_id] = reservation
        except sqlite3.Error as e:
            logger.error(f"SQLite error while loading state: {e}")
            raise PersistenceError(f"Error loading data: {e}") from e
        except (KeyError, TypeError, ValueError, InvalidOperation) as e:
            logger.error(f"Stored rows could not be decoded: {e}")
            raise PersistenceError(f"Corrupt data in {self.db_path}: {e}") from e

        if not rooms and not reservations:
            logger.info("No existing data found. Starting with a fresh system.")
        else:
            logger.info(f"Data loaded successfully: {len(rooms)} rooms, {len(reservations)} reservations.")
        return rooms, reservations

    def save(self, rooms: Sequence[Room], reservations: Mapping[str, Reservation]) -> None:
        """Replaces the stored snapshot in a single transaction."""
        try:
            with self._conn() as conn:
                cur = conn.cursor()
                cur.execute("DELETE FROM reservations")
                cur.execute("DELETE FROM rooms")
                cur.executemany(
                    """
                    INSERT INTO rooms (room_number, room_type, price_per_night, max_occupancy, position)
                    VALUES (?, ?, ?, ?, ?)
                    """,
                    [
                        (r.room_number, r.room_type.value, str(r.price_per_night), r.max_occupancy, i)
                        for i, r in enumerate(rooms)
                    ],
                )
                cur.executemany(
                    """
                    INSERT INTO reservations (
                        reservation_id, room_number, guest_name, guest_email, check_in,
                        check_out, total_price, is_paid, is_cancelled, created_at
                    )
                    VALUES (?, ?, ?, ?, ?, ?, ?, ?, ?, ?)
                    """,
                    [
                        (
                            res.reservation_id,
                            res.room_number,
                            res.guest_name,
                            res.guest_email,
                            res.check_in.isoformat(),
                            res.check_out.isoformat(),
                            str(res.total_price),
                            int(res.is_paid),
                            int(res.is_cancelled),
                            res.created_at.isoformat() if res.created_at else None,
                        )
                        for res in reservations.values()
                    ],
                )
                conn.commit()
        except sqlite3.Error as e:
            logger.error(f"Error saving data: {e}")
            raise PersistenceError(f"Could not save hotel state: {e}") from e
