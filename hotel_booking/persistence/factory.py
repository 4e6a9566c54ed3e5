import os

from hotel_booking.domain.errors import PersistenceError

from .ports import StateStore


def create_state_store(backend: str | None = None) -> StateStore:
    """
    Factory: create the right adapter based on config.

    The backend can be passed explicitly or read from the
    HOTEL_STATE_BACKEND env var. Defaults to "json".
    """
    backend = backend or os.environ.get("HOTEL_STATE_BACKEND", "json")

    if backend == "json":
        from .json_store import DEFAULT_DATA_FILE, JsonStateStore

        return JsonStateStore(os.environ.get("HOTEL_DATA_FILE", DEFAULT_DATA_FILE))

    if backend == "sqlite":
        from .sqlite_store import SqliteStateStore

        db_path = os.environ.get("HOTEL_DB_PATH", "data/hotel.db")
        db_dir = os.path.dirname(db_path)
        if db_dir:
            try:
                os.makedirs(db_dir, exist_ok=True)
            except OSError as exc:
                raise PersistenceError(f"Cannot create {db_dir}: {exc}") from exc
        return SqliteStateStore(db_path)

    raise ValueError(f"Unknown state backend: {backend!r}")
