"""
Reservation ledger — the booking lifecycle.

The ledger owns the ordered list of active reservations and the counter that
hands out reservation ids.  It holds the RoomInventory by reference and flips
room flags as a side effect of book() and cancel().

Every check in book() runs before the first mutation, so a rejected booking
leaves both the ledger and the inventory exactly as they were.
"""

import logging
from collections.abc import Callable, Iterable, Iterator
from datetime import date, datetime, timezone

from hotel_booking.domain.errors import (
    BookingError,
    ReservationNotFound,
    RoomNotFound,
    RoomUnavailable,
)
from hotel_booking.domain.reservation import Booking, Reservation, count_nights
from hotel_booking.domain.rooms import RoomInventory
from hotel_booking.domain.validation import check_stay, clean_email, clean_guest_name

log = logging.getLogger(__name__)

UNKNOWN_CATEGORY = "Unknown"


def _utc_now() -> datetime:
    return datetime.now(timezone.utc)


class ReservationLedger:

    def __init__(
        self,
        inventory: RoomInventory,
        reservations: Iterable[Reservation] = (),
        next_reservation_id: int = 1,
        clock: Callable[[], datetime] = _utc_now,
    ):
        self._inventory = inventory
        self._reservations: list[Reservation] = list(reservations)
        self._next_id = next_reservation_id
        self._clock = clock

    @property
    def inventory(self) -> RoomInventory:
        return self._inventory

    @property
    def next_reservation_id(self) -> int:
        return self._next_id

    # -- lifecycle -----------------------------------------------------------

    def book(
        self,
        room_number: int,
        guest_name: str,
        guest_email: str,
        check_in: str | date,
        check_out: str | date,
    ) -> Booking:
        """
        Reserve a room for a stay.

        Raises RoomNotFound, RoomUnavailable, InvalidGuest, InvalidEmail or
        InvalidDateRange, checked in that order.
        """
        try:
            room = self._inventory.find(room_number)
            if room.reserved:
                raise RoomUnavailable(room_number)
            name = clean_guest_name(guest_name)
            address = clean_email(guest_email)
            start, end = check_stay(check_in, check_out)
        except BookingError as exc:
            log.debug("room=%d booking rejected: %s", room_number, exc)
            raise

        nights = count_nights(start, end)
        total_cost = nights * room.nightly_rate

        reservation = Reservation(
            reservation_id=self._next_id,
            room_number=room.number,
            guest_name=name,
            guest_email=address,
            check_in=start,
            check_out=end,
            created_at=self._clock(),
        )
        self._next_id += 1
        self._inventory.mark_reserved(room.number)
        self._reservations.append(reservation)

        log.info(
            "res=%d room=%d booked %s → %s (%d night(s), %.2f)",
            reservation.reservation_id, room.number,
            start.isoformat(), end.isoformat(), nights, total_cost,
        )
        return Booking(
            reservation=reservation,
            room=room,
            nights=nights,
            total_cost=total_cost,
        )

    def cancel(self, reservation_id: int) -> Reservation:
        """
        Remove a reservation and free its room.

        A reservation whose room has vanished from the inventory is still
        removed; the missing room is only logged.  The freed id is never
        handed out again.
        """
        for index, reservation in enumerate(self._reservations):
            if reservation.reservation_id == reservation_id:
                break
        else:
            raise ReservationNotFound(reservation_id)

        del self._reservations[index]
        try:
            self._inventory.mark_available(reservation.room_number)
        except RoomNotFound:
            log.warning(
                "res=%d cancelled but room=%d is not in inventory",
                reservation_id, reservation.room_number,
            )

        log.info("res=%d room=%d cancelled", reservation_id, reservation.room_number)
        return reservation

    # -- queries -------------------------------------------------------------

    def reservations(self) -> Iterator[Reservation]:
        """Active reservations in booking order."""
        yield from self._reservations

    def find(self, reservation_id: int) -> Reservation:
        for reservation in self._reservations:
            if reservation.reservation_id == reservation_id:
                return reservation
        raise ReservationNotFound(reservation_id)

    def room_category(self, room_number: int) -> str:
        """Category of the room, or "Unknown" when it is not in inventory."""
        try:
            return self._inventory.find(room_number).category
        except RoomNotFound:
            return UNKNOWN_CATEGORY

    def __len__(self) -> int:
        return len(self._reservations)
