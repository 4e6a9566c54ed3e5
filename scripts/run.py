"""
Interactive runner for the hotel booking menu.

Usage:
    python scripts/run.py

Environment variables (all optional):
    HOTEL_STATE_BACKEND  - "json" or "sqlite" (default: json)
    HOTEL_DATA_FILE      - JSON state file (default: hotel_data.json)
    HOTEL_DB_PATH        - SQLite database path (default: data/hotel.db)
    LOG_LEVEL            - logging level (default: WARNING)
"""

import logging
import os
import sys

# Make sure project root is on sys.path when run as a script
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from hotel_booking.cli import BookingShell
from hotel_booking.domain.errors import PersistenceError
from hotel_booking.persistence.factory import create_state_store
from hotel_booking.system import HotelSystem

logging.basicConfig(
    level=os.environ.get("LOG_LEVEL", "WARNING").upper(),
    format="%(asctime)s  %(levelname)-7s  %(message)s",
    datefmt="%Y-%m-%d %H:%M:%S",
)
log = logging.getLogger(__name__)


def main() -> None:
    try:
        store = create_state_store()
    except (ValueError, PersistenceError) as exc:
        print(f"ERROR: {exc}", file=sys.stderr)
        sys.exit(1)

    system = HotelSystem.open(store)
    log.info(
        "Session started — %d room(s), %d reservation(s)",
        len(system.inventory), len(system.ledger),
    )
    BookingShell(system).run()


if __name__ == "__main__":
    try:
        main()
    except KeyboardInterrupt:
        log.info("Session interrupted.")
