"""
Numbered text menu over a HotelSystem.

Prompts go through `read` and output through `write` so tests can drive the
shell with a scripted list of answers.  Every HotelError is printed and the
operator is returned to the menu; nothing here is fatal.
"""

import logging
from collections.abc import Callable

from hotel_booking.domain.errors import HotelError, PersistenceError
from hotel_booking.domain.rooms import ROOM_CATEGORIES, Room, normalize_category
from hotel_booking.system import HotelSystem

log = logging.getLogger(__name__)

RULE = "-" * 60

MENU = """\
--------------------------------------
|      MAIN MENU                     |
--------------------------------------
1. View Available Rooms
2. Make Reservation
3. View Reservations
4. Cancel Reservation
5. Search Room by Type
6. Exit
--------------------------------------"""


class BookingShell:

    def __init__(
        self,
        system: HotelSystem,
        read: Callable[[str], str] = input,
        write: Callable[[str], None] = print,
    ):
        self.system = system
        self._read = read
        self._write = write
        self._actions: dict[str, Callable[[], None]] = {
            "1": self.view_available_rooms,
            "2": self.make_reservation,
            "3": self.view_reservations,
            "4": self.cancel_reservation,
            "5": self.search_rooms,
        }

    def prompt(self, text: str) -> str:
        return self._read(text).strip()

    def run(self) -> None:
        self._write("=" * 60)
        self._write("      Welcome to the Hotel Reservation System")
        self._write("=" * 60)
        try:
            while True:
                self._write(MENU)
                option = self.prompt("Select an option: ")
                if option == "6":
                    break
                action = self._actions.get(option)
                if action is None:
                    self._write("Invalid option selected. Please select 1-6.")
                else:
                    self._dispatch(action)
                self._write("")
        except EOFError:
            self._write("")
        self._save()
        self._write("Thank you for using our system. Goodbye...")

    def _dispatch(self, action: Callable[[], None]) -> None:
        try:
            action()
        except HotelError as exc:
            self._write(f"Error: {exc}")

    def _save(self) -> bool:
        try:
            self.system.save()
        except PersistenceError as exc:
            log.error("Save failed: %s", exc)
            self._write(f"Warning: could not save data: {exc}")
            return False
        return True

    def _read_int(self, text: str, what: str) -> int | None:
        raw = self.prompt(text)
        try:
            return int(raw)
        except ValueError:
            self._write(f"Invalid {what}. Please enter a valid number.")
            return None

    def _write_room(self, room: Room) -> None:
        self._write(
            f"Room {room.number} | Type: {room.category:<8} | "
            f"Price: ${room.nightly_rate:.2f}/night"
        )

    # -- menu actions --------------------------------------------------------

    def view_available_rooms(self) -> None:
        self._write("\nAvailable Rooms:")
        self._write(RULE)
        found = False
        for room in self.system.inventory.available():
            self._write_room(room)
            found = True
        if not found:
            self._write("No rooms currently available.")
        self._write(RULE)

    def make_reservation(self) -> None:
        self.view_available_rooms()
        room_number = self._read_int("\nEnter room number to reserve: ", "room number")
        if room_number is None:
            return

        guest_name = self.prompt("Enter guest name: ")
        guest_email = self.prompt("Enter guest email: ")
        check_in = self.prompt("Enter check-in date (YYYY-MM-DD): ")
        check_out = self.prompt("Enter check-out date (YYYY-MM-DD): ")

        booking = self.system.ledger.book(
            room_number, guest_name, guest_email, check_in, check_out,
        )
        res = booking.reservation

        self._write("\nReservation Successful!")
        self._write(RULE)
        self._write(f"Reservation ID : #{res.reservation_id}")
        self._write(f"Guest          : {res.guest_name} ({res.guest_email})")
        self._write(f"Room           : {res.room_number} ({booking.room.category})")
        self._write(f"Check-in       : {res.check_in.isoformat()}")
        self._write(f"Check-out      : {res.check_out.isoformat()}")
        self._write(f"Duration       : {booking.nights} night(s)")
        self._write(f"Total cost     : ${booking.total_cost:.2f}")
        self._write(RULE)
        self._save()

    def view_reservations(self) -> None:
        ledger = self.system.ledger
        if not len(ledger):
            self._write("\nNo reservations found.")
            return

        self._write("\nCurrent Reservations:")
        self._write(RULE)
        for res in ledger.reservations():
            category = ledger.room_category(res.room_number)
            self._write(
                f"ID: #{res.reservation_id:<3} | Room: {res.room_number:<3} "
                f"({category:<8}) | Guest: {res.guest_name}"
            )
            self._write(
                f"         Email: {res.guest_email} | Stay: "
                f"{res.check_in.isoformat()} to {res.check_out.isoformat()} "
                f"({res.nights} night(s))"
            )
            self._write(RULE)

    def cancel_reservation(self) -> None:
        if not len(self.system.ledger):
            self._write("\nNo reservations to cancel.")
            return

        self.view_reservations()
        reservation_id = self._read_int(
            "\nEnter reservation ID to cancel: ", "reservation ID",
        )
        if reservation_id is None:
            return

        self.system.ledger.cancel(reservation_id)
        self._write(f"Reservation #{reservation_id} cancelled successfully.")
        self._save()

    def search_rooms(self) -> None:
        self._write(f"\nRoom types: {', '.join(ROOM_CATEGORIES)}")
        category = normalize_category(self.prompt("Enter room type to search: "))

        self._write(f"\nAvailable {category} Rooms:")
        self._write(RULE)
        found = False
        for room in self.system.inventory.search(category):
            self._write(f"Room {room.number} | Price: ${room.nightly_rate:.2f}/night")
            found = True
        if not found:
            self._write(f"No available {category} rooms found.")
        self._write(RULE)
