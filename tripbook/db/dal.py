"""Data Access Layer for the trip store.

Responsibilities
----------------
- CRUD helpers for trips (create, update in place, delete, lookup).
- The ordered listing consumed by the classifier: all trips sorted by start
  date ascending, trips without a start date first.
- Translate sqlite failures into `StoreError` so callers can report them
  instead of crashing.
"""

from __future__ import annotations

from contextlib import contextmanager
from pathlib import Path
import logging
import sqlite3
from typing import Any, Dict, Iterator, List, Optional
from datetime import date, datetime

from tripbook.core.errors import StoreError, TripNotFoundError

UTC_NOW_SQL = "strftime('%Y-%m-%dT%H:%M:%fZ','now')"
_UNSET = object()

logger = logging.getLogger("tripbook.db")


def _iso(value: Any) -> Optional[str]:
    """Serialize a trip date; ISO strings are checked, anything else is refused."""
    if value is None:
        return None
    if isinstance(value, datetime):
        return value.date().isoformat()
    if isinstance(value, date):
        return value.isoformat()
    if isinstance(value, str):
        return date.fromisoformat(value).isoformat()
    raise TypeError(f"expected a date or ISO date string, got {type(value).__name__}")


class Database:
    def __init__(self, db_path: Path):
        self.db_path = db_path

    # ------------------------------------------------------------------
    # Connection helpers
    def _connect(self) -> sqlite3.Connection:
        conn = sqlite3.connect(self.db_path)
        conn.row_factory = sqlite3.Row
        return conn

    @contextmanager
    def _cursor(self) -> Iterator[sqlite3.Cursor]:
        """Yield a cursor; commit on success, wrap sqlite errors in StoreError."""
        try:
            conn = self._connect()
        except sqlite3.Error as exc:
            raise StoreError(f"cannot open trip store at {self.db_path}") from exc
        try:
            yield conn.cursor()
            conn.commit()
        except sqlite3.Error as exc:
            conn.rollback()
            raise StoreError(str(exc)) from exc
        except Exception:
            conn.rollback()
            raise
        finally:
            conn.close()

    # ------------------------------------------------------------------
    # Queries
    def list_trips(self) -> List[Dict[str, Any]]:
        """Return every trip ordered by start date (missing start dates first)."""
        with self._cursor() as cur:
            cur.execute(
                """
                SELECT * FROM trips
                ORDER BY start_date IS NOT NULL, start_date ASC, id ASC
                """
            )
            return [dict(r) for r in cur.fetchall()]

    def get_trip(self, trip_id: int) -> Optional[Dict[str, Any]]:
        with self._cursor() as cur:
            cur.execute("SELECT * FROM trips WHERE id = ?", (trip_id,))
            row = cur.fetchone()
            return dict(row) if row else None

    def count_trips(self) -> int:
        with self._cursor() as cur:
            cur.execute("SELECT COUNT(*) FROM trips")
            row = cur.fetchone()
            return int(row[0] if row and row[0] is not None else 0)

    # ------------------------------------------------------------------
    # Mutations
    def create_trip(
        self,
        name: str,
        category: str,
        start_date: Optional[date] = None,
        end_date: Optional[date] = None,
    ) -> int:
        params = (name, category, _iso(start_date), _iso(end_date))
        with self._cursor() as cur:
            cur.execute(
                f"""
                INSERT INTO trips (name, category, start_date, end_date, created_at, updated_at)
                VALUES (?, ?, ?, ?, ({UTC_NOW_SQL}), ({UTC_NOW_SQL}))
                """,
                params,
            )
            trip_id = int(cur.lastrowid)
        logger.info("trip created", extra={"trip_id": trip_id})
        return trip_id

    def update_trip(
        self,
        trip_id: int,
        *,
        name: Any = _UNSET,
        category: Any = _UNSET,
        start_date: Any = _UNSET,
        end_date: Any = _UNSET,
    ) -> None:
        updates: List[str] = []
        params: List[Any] = []

        if name is not _UNSET:
            updates.append("name = ?")
            params.append(name)
        if category is not _UNSET:
            updates.append("category = ?")
            params.append(category)
        if start_date is not _UNSET:
            updates.append("start_date = ?")
            params.append(_iso(start_date))
        if end_date is not _UNSET:
            updates.append("end_date = ?")
            params.append(_iso(end_date))

        if not updates:
            if self.get_trip(trip_id) is None:
                raise TripNotFoundError(f"trip {trip_id} not found")
            return

        updates.append(f"updated_at = ({UTC_NOW_SQL})")
        with self._cursor() as cur:
            cur.execute(
                f"UPDATE trips SET {', '.join(updates)} WHERE id = ?",
                (*params, trip_id),
            )
            if cur.rowcount == 0:
                raise TripNotFoundError(f"trip {trip_id} not found")
        logger.info("trip updated", extra={"trip_id": trip_id})

    def delete_trip(self, trip_id: int) -> None:
        with self._cursor() as cur:
            cur.execute("DELETE FROM trips WHERE id = ?", (trip_id,))
            if cur.rowcount == 0:
                raise TripNotFoundError(f"trip {trip_id} not found")
        logger.info("trip deleted", extra={"trip_id": trip_id})
