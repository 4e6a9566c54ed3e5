"""
Reservation records and the per-stay arithmetic.

A night is one 24-hour unit between check-in and check-out, counted by
truncating division: a 30-hour span is 1 night.
"""

from dataclasses import dataclass
from datetime import date, datetime, timedelta

from hotel_booking.domain.rooms import Room

_ONE_NIGHT = timedelta(hours=24)


def count_nights(check_in: date, check_out: date) -> int:
    return (check_out - check_in) // _ONE_NIGHT


@dataclass
class Reservation:
    reservation_id: int
    room_number: int
    guest_name: str
    guest_email: str
    check_in: date
    check_out: date       # strictly after check_in
    created_at: datetime  # timezone-aware UTC

    @property
    def nights(self) -> int:
        """Recomputed from the stored dates on every access."""
        return count_nights(self.check_in, self.check_out)


@dataclass
class Booking:
    """Result of a successful book(): the reservation plus its price."""

    reservation: Reservation
    room: Room
    nights: int
    total_cost: float
