"""
Wires the inventory, the ledger and a StateStore into one session object.

Load at startup is forgiving: a missing or unreadable state falls back to
the default rooms and an empty ledger.  Save is not: a PersistenceError is
raised for the caller to report.
"""

import logging
from collections import Counter

from hotel_booking.domain.errors import PersistenceError
from hotel_booking.domain.rooms import RoomInventory, default_rooms
from hotel_booking.ledger import ReservationLedger
from hotel_booking.persistence.ports import HotelState, StateStore

log = logging.getLogger(__name__)


class HotelSystem:

    def __init__(self, store: StateStore, ledger: ReservationLedger):
        self.store = store
        self.ledger = ledger

    @property
    def inventory(self) -> RoomInventory:
        return self.ledger.inventory

    @classmethod
    def open(cls, store: StateStore) -> "HotelSystem":
        try:
            state = store.load()
        except PersistenceError as exc:
            log.warning("Could not load saved state, using defaults: %s", exc)
            state = None

        if state is not None:
            try:
                return cls(store, _restore(state))
            except ValueError as exc:
                log.warning("Saved state is inconsistent, using defaults: %s", exc)

        return cls(store, _restore(HotelState(rooms=default_rooms())))

    def snapshot(self) -> HotelState:
        return HotelState(
            rooms=list(self.inventory.rooms()),
            reservations=list(self.ledger.reservations()),
            next_reservation_id=self.ledger.next_reservation_id,
        )

    def save(self) -> None:
        """Persist the current state. Raises PersistenceError."""
        self.store.save(self.snapshot())


def _restore(state: HotelState) -> ReservationLedger:
    """Build a ledger from saved state. Raises ValueError if it is inconsistent."""
    inventory = RoomInventory(state.rooms)

    ids = Counter(r.reservation_id for r in state.reservations)
    duplicate_ids = sorted(i for i, count in ids.items() if count > 1)
    if duplicate_ids:
        raise ValueError(f"Duplicate reservation ids: {duplicate_ids}")
    if ids and state.next_reservation_id <= max(ids):
        raise ValueError(
            f"next_reservation_id={state.next_reservation_id} is not above "
            f"existing id {max(ids)}"
        )

    for res in state.reservations:
        if res.check_out <= res.check_in:
            raise ValueError(f"Reservation #{res.reservation_id} ends before it starts")

    refs = Counter(r.room_number for r in state.reservations)
    double_booked = sorted(n for n, count in refs.items() if count > 1)
    if double_booked:
        raise ValueError(f"Rooms with more than one reservation: {double_booked}")

    # a reservation on a room missing from inventory is allowed; cancel() tolerates it
    for room in inventory.rooms():
        if room.reserved != (room.number in refs):
            raise ValueError(
                f"Room {room.number} reserved={room.reserved} disagrees with reservations"
            )

    return ReservationLedger(
        inventory,
        reservations=state.reservations,
        next_reservation_id=state.next_reservation_id,
    )
