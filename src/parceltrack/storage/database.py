import sqlite3
from contextlib import contextmanager
from pathlib import Path

from parceltrack.config import settings
from parceltrack.models.parcel import Parcel
from parceltrack.storage import codec

TABLE = "parcels"


def get_db_path() -> Path:
    return Path(settings.data_dir) / "parceltrack.db"


def init_db() -> None:
    """Initialize database with required tables."""
    with get_connection() as conn:
        conn.execute(f"""
            CREATE TABLE IF NOT EXISTS {TABLE} (
                id TEXT PRIMARY KEY,
                data JSON NOT NULL,
                created_at TEXT NOT NULL,
                updated_at TEXT NOT NULL
            )
        """)
        conn.commit()


@contextmanager
def get_connection():
    """Get a database connection."""
    db_path = get_db_path()
    db_path.parent.mkdir(parents=True, exist_ok=True)
    conn = sqlite3.connect(db_path)
    conn.row_factory = sqlite3.Row
    try:
        yield conn
    finally:
        conn.close()


def replace_all(parcels: list[Parcel]) -> None:
    """Replace the stored snapshot with `parcels` in a single transaction."""
    rows = [
        (p.id, codec.dump_parcel(p), p.created_at.isoformat(), p.updated_at.isoformat())
        for p in parcels
    ]
    with get_connection() as conn:
        try:
            conn.execute(f"DELETE FROM {TABLE}")
            conn.executemany(
                f"INSERT INTO {TABLE} (id, data, created_at, updated_at) VALUES (?, ?, ?, ?)",
                rows,
            )
            conn.commit()
        except sqlite3.Error:
            conn.rollback()
            raise


def load_all() -> list[Parcel]:
    """Load every stored parcel in insertion order.

    Raises SerializationError if any row cannot be decoded.
    """
    with get_connection() as conn:
        rows = conn.execute(f"SELECT data FROM {TABLE} ORDER BY rowid").fetchall()
        return [codec.load_parcel(row["data"]) for row in rows]
