"""SQLite storage adapter.

Implements the core CoffeeStorePort using a simple SQLite database.
"""

from __future__ import annotations

import asyncio
import logging
import sqlite3
import uuid
from datetime import datetime, timezone
from typing import Optional

from coffee_editor.core.errors import CoffeeNotFoundError, PersistenceError
from coffee_editor.core.models import Coffee

LOGGER = logging.getLogger(__name__)


class SQLiteCoffeeStore:
    """Thin SQLite wrapper that satisfies the CoffeeStorePort contract."""

    def __init__(self, db_path: str, require_name: bool = False) -> None:
        self._db_path = db_path
        self._require_name = require_name

    def _connect(self) -> sqlite3.Connection:
        conn = sqlite3.connect(self._db_path)
        conn.row_factory = sqlite3.Row
        return conn

    def init_db(self) -> None:
        """Create the coffees table if it does not exist.

        Fields:
        - id: uuid hex assigned on first save (PRIMARY KEY)
        - name / tasting_notes: free text, stored as entered
        - sweetness / acidity: ratings, already clamped by the core
        - updated_at: timestamp of the last save
        """

        with self._connect() as conn:
            conn.execute(
                """
                CREATE TABLE IF NOT EXISTS coffees (
                    id TEXT PRIMARY KEY,
                    name TEXT NOT NULL,
                    tasting_notes TEXT NOT NULL,
                    sweetness INTEGER NOT NULL,
                    acidity INTEGER NOT NULL,
                    updated_at TIMESTAMP NOT NULL
                )
                """
            )

    async def persist(self, coffee: Coffee) -> Coffee:
        """Insert or update a coffee off the event loop; returns it as stored."""

        if self._require_name and not coffee.name.strip():
            raise PersistenceError("coffee name is required")
        try:
            return await asyncio.to_thread(self._write, coffee)
        except sqlite3.Error as exc:
            raise PersistenceError(f"database error: {exc}") from exc

    def _write(self, coffee: Coffee) -> Coffee:
        stored = coffee.with_id(uuid.uuid4().hex) if coffee.is_new else coffee
        now = datetime.now(timezone.utc)
        with self._connect() as conn:
            conn.execute(
                """
                INSERT INTO coffees (id, name, tasting_notes, sweetness, acidity, updated_at)
                VALUES (?, ?, ?, ?, ?, ?)
                ON CONFLICT(id) DO UPDATE SET
                    name = excluded.name,
                    tasting_notes = excluded.tasting_notes,
                    sweetness = excluded.sweetness,
                    acidity = excluded.acidity,
                    updated_at = excluded.updated_at
                """,
                (
                    stored.id,
                    stored.name,
                    stored.tasting_notes,
                    stored.sweetness,
                    stored.acidity,
                    now.isoformat(),
                ),
            )
        LOGGER.debug("Wrote coffee %s", stored.id)
        return stored

    def find_coffee(self, coffee_id: str) -> Optional[Coffee]:
        """Return the stored coffee for an id, if any."""

        with self._connect() as conn:
            row = conn.execute(
                "SELECT * FROM coffees WHERE id = ?",
                (coffee_id,),
            ).fetchone()
        return _row_to_coffee(row) if row else None

    def get_coffee(self, coffee_id: str) -> Coffee:
        coffee = self.find_coffee(coffee_id)
        if coffee is None:
            raise CoffeeNotFoundError(coffee_id)
        return coffee

    def list_coffees(self) -> list[Coffee]:
        """Return all stored coffees ordered by name."""

        with self._connect() as conn:
            rows = conn.execute("SELECT * FROM coffees ORDER BY name, id").fetchall()
        return [_row_to_coffee(row) for row in rows]


def _row_to_coffee(row: sqlite3.Row) -> Coffee:
    return Coffee(
        id=row["id"],
        name=row["name"],
        tasting_notes=row["tasting_notes"],
        sweetness=int(row["sweetness"]),
        acidity=int(row["acidity"]),
    )
