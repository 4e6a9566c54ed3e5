"""Syntactic checks on operator input: guest name, email, stay dates."""

import email.utils
import re
from datetime import date, datetime

from hotel_booking.domain.errors import InvalidDateRange, InvalidEmail, InvalidGuest

DATE_FORMAT = "%Y-%m-%d"

# local@domain.tld — one "@", no whitespace, at least one "." after the "@"
_EMAIL_PATTERN = re.compile(r"^[^@\s]+@[^@\s.]+(\.[^@\s.]+)+$")


def is_valid_email(address: str) -> bool:
    address = address.strip()
    if not _EMAIL_PATTERN.match(address):
        return False
    # parseaddr rejects what the regex lets through in quoted/display forms
    _, parsed = email.utils.parseaddr(address)
    return parsed == address


def clean_guest_name(name: str) -> str:
    name = name.strip()
    if not name:
        raise InvalidGuest()
    return name


def clean_email(address: str) -> str:
    if not is_valid_email(address):
        raise InvalidEmail(address)
    return address.strip()


def parse_stay_date(value: str | date, label: str = "date") -> date:
    """Parse YYYY-MM-DD. A date object is returned unchanged."""
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    try:
        return datetime.strptime(value.strip(), DATE_FORMAT).date()
    except ValueError as exc:
        raise InvalidDateRange(
            f"Invalid {label} {value!r}. Use YYYY-MM-DD."
        ) from exc


def check_stay(check_in: str | date, check_out: str | date) -> tuple[date, date]:
    """Parse both dates and require check-out strictly after check-in."""
    start = parse_stay_date(check_in, "check-in date")
    end = parse_stay_date(check_out, "check-out date")
    if end <= start:
        raise InvalidDateRange("Check-out date must be after check-in date.")
    return start, end
