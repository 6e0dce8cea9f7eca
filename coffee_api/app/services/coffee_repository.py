"""
SQLite‑backed coffee repository.

``SqliteCoffeeRepository`` exposes the same async methods as the
in‑memory store but keeps coffees in the ``coffees`` table so they
survive restarts.  Each call opens a short‑lived connection through
``core.db``.  Upserts use a keyed lookup followed by a keyed ``UPDATE``
or an ``INSERT``; there is no scan.

Database failures surface as ``CoffeeStorageError`` and are never
reported as a missing coffee.
"""

from __future__ import annotations

import asyncio
import logging
import sqlite3
from contextlib import contextmanager
from typing import Iterator, List, Optional, Tuple

from coffee_api.app.core.db import get_cursor, init_db
from coffee_api.app.core.exceptions import CoffeeStorageError, DuplicateCoffeeError
from coffee_api.app.schemas.coffee import CoffeeCreate, CoffeeRead
from coffee_api.app.services.coffee_service import UpsertResult, check_name, resolve_id


logger = logging.getLogger(__name__)


class SqliteCoffeeRepository:
    """Coffee storage backed by a SQLite database file."""

    def __init__(self, database_url: str) -> None:
        self.database_url = database_url
        self._lock = asyncio.Lock()

    async def open(self) -> None:
        """Apply pending migrations, creating the database if needed."""
        try:
            version = init_db(self.database_url)
        except sqlite3.Error as exc:
            logger.exception("Failed to initialise coffee database %s", self.database_url)
            raise CoffeeStorageError(f"Could not initialise database: {exc}") from exc
        logger.info("Coffee database ready at %s (schema version %s)", self.database_url, version)

    async def close(self) -> None:
        """Connections are per call; nothing to release."""

    async def count(self) -> int:
        async with self._lock:
            with self._cursor("count") as cursor:
                row = cursor.execute("SELECT COUNT(*) AS n FROM coffees").fetchone()
                return row["n"]

    async def list_coffees(self) -> List[CoffeeRead]:
        """Return every coffee in insertion order."""
        async with self._lock:
            with self._cursor("list") as cursor:
                rows = cursor.execute("SELECT id, name FROM coffees ORDER BY rowid").fetchall()
                return [self._row_to_coffee(row) for row in rows]

    async def get_coffee(self, coffee_id: str) -> Optional[CoffeeRead]:
        """Return the coffee with ``coffee_id`` or ``None``."""
        async with self._lock:
            with self._cursor("get") as cursor:
                row = self._fetch(cursor, coffee_id)
                return self._row_to_coffee(row) if row else None

    async def create_coffee(self, data: CoffeeCreate) -> CoffeeRead:
        """Insert a coffee and return it with its resolved id."""
        check_name(data)
        async with self._lock:
            with self._cursor("create") as cursor:
                return self._insert(cursor, data)

    async def upsert_coffee(self, coffee_id: str, data: CoffeeCreate) -> Tuple[CoffeeRead, UpsertResult]:
        """Rename the coffee stored under ``coffee_id`` or create a new one."""
        check_name(data)
        async with self._lock:
            with self._cursor("upsert") as cursor:
                if self._fetch(cursor, coffee_id) is None:
                    return self._insert(cursor, data), UpsertResult.CREATED
                cursor.execute(
                    "UPDATE coffees SET name = ?, updated_at = CURRENT_TIMESTAMP WHERE id = ?",
                    (data.name, coffee_id),
                )
                logger.info("Updated coffee %s", coffee_id)
                return CoffeeRead(id=coffee_id, name=data.name), UpsertResult.UPDATED

    async def delete_coffee(self, coffee_id: str) -> int:
        """Delete the coffee with ``coffee_id``; return how many rows went."""
        async with self._lock:
            with self._cursor("delete") as cursor:
                cursor.execute("DELETE FROM coffees WHERE id = ?", (coffee_id,))
                removed = cursor.rowcount
        if removed:
            logger.info("Deleted coffee %s", coffee_id)
        return removed

    @contextmanager
    def _cursor(self, operation: str) -> Iterator[sqlite3.Cursor]:
        try:
            with get_cursor(self.database_url) as cursor:
                yield cursor
        except sqlite3.Error as exc:
            logger.exception("Coffee storage failed during %s", operation)
            raise CoffeeStorageError(f"Storage failure during {operation}: {exc}") from exc

    @staticmethod
    def _fetch(cursor: sqlite3.Cursor, coffee_id: str) -> Optional[sqlite3.Row]:
        return cursor.execute("SELECT id, name FROM coffees WHERE id = ?", (coffee_id,)).fetchone()

    def _insert(self, cursor: sqlite3.Cursor, data: CoffeeCreate) -> CoffeeRead:
        coffee_id = resolve_id(data.id)
        if self._fetch(cursor, coffee_id) is not None:
            raise DuplicateCoffeeError(coffee_id)
        try:
            cursor.execute("INSERT INTO coffees (id, name) VALUES (?, ?)", (coffee_id, data.name))
        except sqlite3.IntegrityError as exc:
            raise DuplicateCoffeeError(coffee_id) from exc
        logger.info("Created coffee %s", coffee_id)
        return CoffeeRead(id=coffee_id, name=data.name)

    @staticmethod
    def _row_to_coffee(row: sqlite3.Row) -> CoffeeRead:
        return CoffeeRead(id=row["id"], name=row["name"])

