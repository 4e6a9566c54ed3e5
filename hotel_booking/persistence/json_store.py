"""
JSON-file adapter for StateStore.

Writes go to a temporary file in the target directory which then replaces
the destination, so a failed save never leaves a half-written file behind.
"""

import json
import logging
import os
import stat
import tempfile

from hotel_booking.domain.errors import PersistenceError
from hotel_booking.persistence.codec import state_from_dict, state_to_dict
from hotel_booking.persistence.ports import HotelState, StateStore

log = logging.getLogger(__name__)

DEFAULT_DATA_FILE = "hotel_data.json"


class JsonStateStore(StateStore):

    def __init__(self, path: str = DEFAULT_DATA_FILE):
        self.path = path

    def load(self) -> HotelState | None:
        try:
            with open(self.path, "r", encoding="utf-8") as f:
                data = json.load(f)
        except FileNotFoundError:
            log.info("No state file at %s — starting from defaults", self.path)
            return None
        except (OSError, ValueError) as exc:
            raise PersistenceError(f"Cannot read {self.path}: {exc}") from exc

        state = state_from_dict(data)
        log.info(
            "Loaded %d room(s), %d reservation(s) from %s",
            len(state.rooms), len(state.reservations), self.path,
        )
        return state

    def save(self, state: HotelState) -> None:
        dirpath = os.path.dirname(os.path.abspath(self.path)) or "."
        try:
            fd, tmp_path = tempfile.mkstemp(dir=dirpath, suffix=".tmp")
        except OSError as exc:
            raise PersistenceError(f"Cannot write {self.path}: {exc}") from exc

        try:
            with os.fdopen(fd, "w", encoding="utf-8") as f:
                json.dump(state_to_dict(state), f, indent=2)
            _copy_mode(self.path, tmp_path)
            os.replace(tmp_path, self.path)
        except (OSError, TypeError, ValueError) as exc:
            if os.path.exists(tmp_path):
                os.remove(tmp_path)
            raise PersistenceError(f"Cannot write {self.path}: {exc}") from exc

        log.info("Saved state to %s", self.path)


def _copy_mode(src: str, dst: str) -> None:
    """Give dst the permission bits of src, or the plain open() mode if src is new."""
    try:
        mode = stat.S_IMODE(os.stat(src).st_mode)
    except FileNotFoundError:
        umask = os.umask(0)
        os.umask(umask)
        mode = 0o666 & ~umask
    os.chmod(dst, mode)
