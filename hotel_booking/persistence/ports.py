from abc import ABC, abstractmethod
from dataclasses import dataclass, field

from hotel_booking.domain.reservation import Reservation
from hotel_booking.domain.rooms import Room


@dataclass
class HotelState:
    """Everything persisted between runs."""

    rooms: list[Room]
    reservations: list[Reservation] = field(default_factory=list)
    next_reservation_id: int = 1


class StateStore(ABC):
    """
    Port: where the hotel state lives between runs.

    The system depends ONLY on this interface.  It doesn't know or care
    whether state is a JSON file or an SQLite database.
    """

    @abstractmethod
    def load(self) -> HotelState | None:
        """
        Return the persisted state, or None if nothing was saved yet.
        Raises PersistenceError if stored state cannot be read or decoded.
        """
        ...

    @abstractmethod
    def save(self, state: HotelState) -> None:
        """
        Replace the persisted state. Raises PersistenceError on failure;
        previously saved state is left intact in that case.
        """
        ...
