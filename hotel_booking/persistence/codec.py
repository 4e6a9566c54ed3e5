"""
Plain-dict encoding of HotelState.

Dates are YYYY-MM-DD, created_at is ISO-8601 with full precision.  Decoding
raises PersistenceError for missing keys or values of the wrong shape.
"""

from datetime import date, datetime
from typing import Any

from hotel_booking.domain.errors import PersistenceError
from hotel_booking.domain.reservation import Reservation
from hotel_booking.domain.rooms import Room
from hotel_booking.persistence.ports import HotelState


def room_to_dict(room: Room) -> dict[str, Any]:
    return {
        "number": room.number,
        "category": room.category,
        "nightly_rate": room.nightly_rate,
        "reserved": room.reserved,
    }


def reservation_to_dict(res: Reservation) -> dict[str, Any]:
    return {
        "id": res.reservation_id,
        "room_number": res.room_number,
        "guest_name": res.guest_name,
        "guest_email": res.guest_email,
        "check_in": res.check_in.isoformat(),
        "check_out": res.check_out.isoformat(),
        "created_at": res.created_at.isoformat(),
    }


def state_to_dict(state: HotelState) -> dict[str, Any]:
    return {
        "rooms": [room_to_dict(r) for r in state.rooms],
        "reservations": [reservation_to_dict(r) for r in state.reservations],
        "next_reservation_id": state.next_reservation_id,
    }


def room_from_dict(data: dict[str, Any]) -> Room:
    reserved = data["reserved"]
    if not isinstance(reserved, bool):
        raise TypeError(f"room {data['number']}: reserved must be true/false, got {reserved!r}")
    return Room(
        number=int(data["number"]),
        category=str(data["category"]),
        nightly_rate=float(data["nightly_rate"]),
        reserved=reserved,
    )


def reservation_from_dict(data: dict[str, Any]) -> Reservation:
    return Reservation(
        reservation_id=int(data["id"]),
        room_number=int(data["room_number"]),
        guest_name=str(data["guest_name"]),
        guest_email=str(data["guest_email"]),
        check_in=date.fromisoformat(data["check_in"]),
        check_out=date.fromisoformat(data["check_out"]),
        created_at=datetime.fromisoformat(data["created_at"]),
    )


def state_from_dict(data: Any) -> HotelState:
    try:
        return HotelState(
            rooms=[room_from_dict(r) for r in data["rooms"]],
            reservations=[reservation_from_dict(r) for r in data["reservations"]],
            next_reservation_id=int(data["next_reservation_id"]),
        )
    except (KeyError, TypeError, ValueError) as exc:
        raise PersistenceError(f"Malformed hotel state: {exc!r}") from exc
