"""
SQLite adapter for StateStore.

Use ":memory:" for tests, a file path for production.  A save replaces all
rows inside one transaction.
"""

import logging
import sqlite3
from datetime import date, datetime

from hotel_booking.domain.errors import PersistenceError
from hotel_booking.domain.reservation import Reservation
from hotel_booking.domain.rooms import Room
from hotel_booking.persistence.ports import HotelState, StateStore

log = logging.getLogger(__name__)

_SCHEMA = """
CREATE TABLE IF NOT EXISTS rooms (
    position     INTEGER NOT NULL,
    number       INTEGER PRIMARY KEY,
    category     TEXT NOT NULL,
    nightly_rate REAL NOT NULL,
    reserved     INTEGER NOT NULL DEFAULT 0
);

CREATE TABLE IF NOT EXISTS reservations (
    id           INTEGER PRIMARY KEY,
    room_number  INTEGER NOT NULL,
    guest_name   TEXT NOT NULL,
    guest_email  TEXT NOT NULL,
    check_in     TEXT NOT NULL,
    check_out    TEXT NOT NULL,
    created_at   TEXT NOT NULL
);

CREATE TABLE IF NOT EXISTS ledger_meta (
    key          TEXT PRIMARY KEY,
    value        INTEGER NOT NULL
);
"""


class SqliteStateStore(StateStore):

    def __init__(self, db_path: str = "hotel.db"):
        self.db_path = db_path
        try:
            self._conn = sqlite3.connect(db_path)
            self._conn.row_factory = sqlite3.Row
            self._conn.executescript(_SCHEMA)
        except sqlite3.Error as exc:
            raise PersistenceError(f"Cannot open {db_path}: {exc}") from exc

    def load(self) -> HotelState | None:
        try:
            meta = self._conn.execute(
                "SELECT value FROM ledger_meta WHERE key = 'next_reservation_id'"
            ).fetchone()
            if meta is None:
                return None
            room_rows = self._conn.execute(
                "SELECT * FROM rooms ORDER BY position"
            ).fetchall()
            res_rows = self._conn.execute(
                "SELECT * FROM reservations ORDER BY id"
            ).fetchall()
            state = HotelState(
                rooms=[self._row_to_room(r) for r in room_rows],
                reservations=[self._row_to_reservation(r) for r in res_rows],
                next_reservation_id=meta["value"],
            )
        except (sqlite3.Error, ValueError) as exc:
            raise PersistenceError(f"Cannot read {self.db_path}: {exc}") from exc

        log.info(
            "Loaded %d room(s), %d reservation(s) from %s",
            len(state.rooms), len(state.reservations), self.db_path,
        )
        return state

    def save(self, state: HotelState) -> None:
        try:
            with self._conn:
                self._conn.execute("DELETE FROM rooms")
                self._conn.execute("DELETE FROM reservations")
                self._conn.executemany(
                    "INSERT INTO rooms (position, number, category, nightly_rate, reserved)"
                    " VALUES (?, ?, ?, ?, ?)",
                    [
                        (i, r.number, r.category, r.nightly_rate, int(r.reserved))
                        for i, r in enumerate(state.rooms)
                    ],
                )
                self._conn.executemany(
                    "INSERT INTO reservations"
                    " (id, room_number, guest_name, guest_email, check_in, check_out, created_at)"
                    " VALUES (?, ?, ?, ?, ?, ?, ?)",
                    [
                        (r.reservation_id, r.room_number, r.guest_name, r.guest_email,
                         r.check_in.isoformat(), r.check_out.isoformat(),
                         r.created_at.isoformat())
                        for r in state.reservations
                    ],
                )
                self._conn.execute(
                    "INSERT OR REPLACE INTO ledger_meta (key, value)"
                    " VALUES ('next_reservation_id', ?)",
                    (state.next_reservation_id,),
                )
        except sqlite3.Error as exc:
            raise PersistenceError(f"Cannot write {self.db_path}: {exc}") from exc

        log.info("Saved state to %s", self.db_path)

    @staticmethod
    def _row_to_room(row) -> Room:
        return Room(
            number=row["number"],
            category=row["category"],
            nightly_rate=row["nightly_rate"],
            reserved=bool(row["reserved"]),
        )

    @staticmethod
    def _row_to_reservation(row) -> Reservation:
        return Reservation(
            reservation_id=row["id"],
            room_number=row["room_number"],
            guest_name=row["guest_name"],
            guest_email=row["guest_email"],
            check_in=date.fromisoformat(row["check_in"]),
            check_out=date.fromisoformat(row["check_out"]),
            created_at=datetime.fromisoformat(row["created_at"]),
        )
