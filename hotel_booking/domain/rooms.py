"""
Inventory store — the fixed set of rooms and their reserved flags.

Rooms are never added or deleted during a session.  The only mutation is
flipping `reserved`, and it always targets the stored Room looked up by
number, never a copy handed out during iteration.
"""

from collections.abc import Iterable, Iterator
from dataclasses import dataclass

from hotel_booking.domain.errors import RoomNotFound

ROOM_CATEGORIES = ("Single", "Double", "Suite")


@dataclass
class Room:
    number: int
    category: str        # one of ROOM_CATEGORIES
    nightly_rate: float
    reserved: bool = False


_SEED = (
    (101, "Single", 80.00),
    (102, "Double", 100.00),
    (201, "Suite", 280.00),
    (103, "Single", 90.00),
    (202, "Double", 130.00),
    (301, "Suite", 289.00),
)


def default_rooms() -> list[Room]:
    """Return a fresh copy of the seed room list used on first run."""
    return [Room(number, category, rate) for number, category, rate in _SEED]


def normalize_category(category: str) -> str:
    """'suite', ' SUITE ' → 'Suite'."""
    return category.strip().title()


class RoomInventory:
    """Rooms keyed by number, iterated in seed/load order."""

    def __init__(self, rooms: Iterable[Room]):
        self._rooms: dict[int, Room] = {}
        for room in rooms:
            if room.number in self._rooms:
                raise ValueError(f"Duplicate room number: {room.number}")
            self._rooms[room.number] = room

    def rooms(self) -> Iterator[Room]:
        """Iterate over all rooms. Each call starts a fresh iteration."""
        yield from self._rooms.values()

    def available(self) -> Iterator[Room]:
        return (room for room in self.rooms() if not room.reserved)

    def search(self, category: str) -> Iterator[Room]:
        """Available rooms of one category (case-insensitive)."""
        wanted = normalize_category(category)
        return (room for room in self.available() if room.category == wanted)

    def find(self, room_number: int) -> Room:
        room = self._rooms.get(room_number)
        if room is None:
            raise RoomNotFound(room_number)
        return room

    def mark_reserved(self, room_number: int) -> None:
        self.find(room_number).reserved = True

    def mark_available(self, room_number: int) -> None:
        self.find(room_number).reserved = False

    def __contains__(self, room_number: object) -> bool:
        return room_number in self._rooms

    def __len__(self) -> int:
        return len(self._rooms)
