"""
Error taxonomy for the booking tool.

Every failure the operator can trigger is a HotelError.  The shell catches
HotelError at the action boundary, prints str(exc) and returns to the menu.
"""


class HotelError(Exception):
    """Base class: carries a human-readable message."""


class BookingError(HotelError):
    """A booking or cancellation request was rejected. State is unchanged."""


class RoomNotFound(BookingError):

    def __init__(self, room_number: int):
        self.room_number = room_number
        super().__init__(f"Room {room_number} not found.")


class RoomUnavailable(BookingError):

    def __init__(self, room_number: int):
        self.room_number = room_number
        super().__init__(f"Room {room_number} is already reserved.")


class InvalidGuest(BookingError):

    def __init__(self, message: str = "Guest name cannot be empty."):
        super().__init__(message)


class InvalidEmail(BookingError):

    def __init__(self, email: str):
        self.email = email
        super().__init__(f"Invalid email address: {email!r}.")


class InvalidDateRange(BookingError):
    """A stay date did not parse, or check-out is not after check-in."""


class ReservationNotFound(BookingError):

    def __init__(self, reservation_id: int):
        self.reservation_id = reservation_id
        super().__init__(f"Reservation #{reservation_id} not found.")


class PersistenceError(HotelError):
    """Reading or writing durable state failed (a missing file is not an error)."""
