"""Database migration utilities.

Schema evolution is tracked by an integer `schema_version` stored in the
metadata table. Each migration upgrades the SQLite schema in place while
preserving user data.

  v1: trips without a category column (first release)
  v2: trips.category, legacy rows backfilled with the default category
"""

from __future__ import annotations
from pathlib import Path
import logging
import sqlite3
from typing import Optional

from . import schema as schema_def
from .schema import init_db

CURRENT_SCHEMA_VERSION = 2
SCHEMA_VERSION_KEY = "schema_version"

logger = logging.getLogger("tripbook.db.migrate")


def _get_schema_version(conn: sqlite3.Connection) -> Optional[int]:
    try:
        cur = conn.cursor()
        cur.execute("SELECT value FROM metadata WHERE key=?", (SCHEMA_VERSION_KEY,))
        row = cur.fetchone()
        if row:
            return int(row[0])
    except sqlite3.OperationalError:
        # metadata table may not exist yet (first run before init_db)
        return None
    return None


def apply_migrations(db_path: Path, default_category: str) -> int:
    """Apply required migrations and return resulting schema version.

    default_category backfills trips stored before categories existed.
    """
    fresh = not Path(db_path).exists()
    init_db(db_path)
    conn = sqlite3.connect(db_path)
    try:
        version = _get_schema_version(conn)
        if version is None:
            version = CURRENT_SCHEMA_VERSION if fresh else 1
        if version < 2:
            _migrate_to_v2(conn, default_category)
            version = 2
        _set_schema_version(conn, version)
        conn.commit()
        return version
    finally:
        conn.close()


def _set_schema_version(conn: sqlite3.Connection, version: int) -> None:
    cur = conn.cursor()
    cur.execute(
        "INSERT INTO metadata (key, value) VALUES (?, ?) "
        "ON CONFLICT(key) DO UPDATE SET value=excluded.value, "
        f"updated_at=({schema_def.BASIC_UTC_NOW})",
        (SCHEMA_VERSION_KEY, str(version)),
    )


def _migrate_to_v2(conn: sqlite3.Connection, default_category: str) -> None:
    """Add trips.category and backfill rows created before categories existed."""
    cur = conn.cursor()
    try:
        if not _column_exists(cur, "trips", "category"):
            cur.execute("ALTER TABLE trips ADD COLUMN category TEXT NOT NULL DEFAULT ''")
        cur.execute(
            "UPDATE trips SET category = ? WHERE category IS NULL OR category = ''",
            (default_category,),
        )
        logger.info("migrated trips to schema v2", extra={"trip_count": cur.rowcount})
        conn.commit()
    except Exception:
        conn.rollback()
        raise


def _column_exists(cur: sqlite3.Cursor, table: str, column: str) -> bool:
    cur.execute(f"PRAGMA table_info({table})")
    return any(row[1] == column for row in cur.fetchall())
