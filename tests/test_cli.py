"""
Menu shell tests, driven by scripted answers.

No terminal: `read` pops from a list, `write` appends to a list.
"""

import pytest

from hotel_booking.cli import BookingShell
from hotel_booking.persistence.json_store import JsonStateStore
from hotel_booking.system import HotelSystem
from tests.test_system import BrokenStore


class ScriptedTerminal:

    def __init__(self, answers):
        self.answers = list(answers)
        self.lines: list[str] = []

    def read(self, prompt: str) -> str:
        self.lines.append(prompt)
        if not self.answers:
            raise EOFError
        return self.answers.pop(0)

    def write(self, text: str) -> None:
        self.lines.append(text)

    @property
    def output(self) -> str:
        return "\n".join(self.lines)


@pytest.fixture
def store(tmp_path):
    return JsonStateStore(str(tmp_path / "hotel_data.json"))


def _run(system, answers):
    term = ScriptedTerminal(answers)
    BookingShell(system, read=term.read, write=term.write).run()
    return term


BOOK_102 = ["2", "102", "Sophie Martin", "sophie@example.com", "2024-01-01", "2024-01-04"]


def test_make_reservation_prints_confirmation_and_saves(store):
    system = HotelSystem.open(store)
    term = _run(system, BOOK_102 + ["6"])

    assert "Reservation Successful!" in term.output
    assert "Reservation ID : #1" in term.output
    assert "Room           : 102 (Double)" in term.output
    assert "Duration       : 3 night(s)" in term.output
    assert "Total cost     : $300.00" in term.output

    saved = store.load()
    assert saved is not None
    assert [r.reservation_id for r in saved.reservations] == [1]


def test_view_available_rooms_hides_reserved(store):
    system = HotelSystem.open(store)
    term = _run(system, BOOK_102 + ["1", "6"])
    listing = term.output.split("Reservation Successful!")[1]
    assert "Room 101 | Type: Single" in listing
    assert "Room 102 |" not in listing


def test_view_reservations_shows_category_and_nights(store):
    system = HotelSystem.open(store)
    term = _run(system, BOOK_102 + ["3", "6"])
    assert "ID: #1   | Room: 102 (Double  ) | Guest: Sophie Martin" in term.output
    assert "Stay: 2024-01-01 to 2024-01-04 (3 night(s))" in term.output


def test_view_reservations_when_empty(store):
    term = _run(HotelSystem.open(store), ["3", "6"])
    assert "No reservations found." in term.output


def test_cancel_reservation(store):
    system = HotelSystem.open(store)
    term = _run(system, BOOK_102 + ["4", "1", "6"])
    assert "Reservation #1 cancelled successfully." in term.output
    assert len(system.ledger) == 0
    assert system.inventory.find(102).reserved is False


def test_cancel_when_nothing_booked(store):
    term = _run(HotelSystem.open(store), ["4", "6"])
    assert "No reservations to cancel." in term.output


def test_domain_errors_are_reported_and_session_continues(store):
    system = HotelSystem.open(store)
    term = _run(system, BOOK_102 + BOOK_102 + ["4", "9", "6"])
    assert "Error: Room 102 is already reserved." in term.output
    assert "Error: Reservation #9 not found." in term.output
    assert len(system.ledger) == 1
    assert "Goodbye" in term.output


def test_bad_date_reported(store):
    system = HotelSystem.open(store)
    answers = ["2", "101", "Al", "al@example.com", "2024-01-05", "2024-01-05", "6"]
    term = _run(system, answers)
    assert "Error: Check-out date must be after check-in date." in term.output
    assert len(system.ledger) == 0


def test_non_numeric_room_number(store):
    term = _run(HotelSystem.open(store), ["2", "abc", "6"])
    assert "Invalid room number. Please enter a valid number." in term.output


def test_invalid_menu_option(store):
    term = _run(HotelSystem.open(store), ["9", "6"])
    assert "Invalid option selected. Please select 1-6." in term.output


def test_search_by_type_normalizes_case(store):
    system = HotelSystem.open(store)
    term = _run(system, ["5", "suite", "6"])
    assert "Available Suite Rooms:" in term.output
    assert "Room 201 | Price: $280.00/night" in term.output
    assert "Room 301 | Price: $289.00/night" in term.output


def test_search_unknown_type(store):
    term = _run(HotelSystem.open(store), ["5", "penthouse", "6"])
    assert "No available Penthouse rooms found." in term.output


def test_end_of_input_exits_and_saves(store):
    system = HotelSystem.open(store)
    term = _run(system, BOOK_102)
    assert "Goodbye" in term.output
    assert store.load() is not None


def test_save_failure_is_reported_not_fatal():
    system = HotelSystem.open(BrokenStore())
    term = _run(system, BOOK_102 + ["3", "6"])
    assert "Warning: could not save data: disk on fire" in term.output
    assert "Stay: 2024-01-01 to 2024-01-04" in term.output
    assert "Goodbye" in term.output
