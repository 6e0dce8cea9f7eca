"""
In‑memory coffee store.

``InMemoryCoffeeStore`` keeps coffees in an ordered list for the
lifetime of the process.  A single ``asyncio.Lock`` serialises every
operation so concurrent requests never interleave a scan with a
mutation.  Records handed out by the store are copies; callers cannot
change stored data through them.

``get_coffee`` returns ``None`` when nothing matches.  ``upsert_coffee``
reports whether it updated or created via :class:`UpsertResult`, and
``delete_coffee`` on a missing id does nothing.
"""

from __future__ import annotations

import asyncio
import enum
import logging
import uuid
from typing import Iterable, List, Optional, Tuple

from coffee_api.app.core.exceptions import CoffeeValidationError, DuplicateCoffeeError
from coffee_api.app.schemas.coffee import CoffeeCreate, CoffeeRead

logger = logging.getLogger(__name__)


class UpsertResult(enum.Enum):
    """Outcome of an upsert, valued by the HTTP status it maps to."""

    UPDATED = 200
    CREATED = 201

    @property
    def status_code(self) -> int:
        return self.value


def new_coffee_id() -> str:
    return str(uuid.uuid4())


def resolve_id(coffee_id: Optional[str]) -> str:
    """Return ``coffee_id`` or a fresh id when it is missing or blank."""
    if coffee_id is None or not coffee_id.strip():
        return new_coffee_id()
    return coffee_id


def check_name(coffee: CoffeeCreate) -> None:
    if not coffee.name or not coffee.name.strip():
        raise CoffeeValidationError("Coffee name must not be blank")


class InMemoryCoffeeStore:
    """Ordered, lock‑guarded list of coffees."""

    def __init__(self, initial: Optional[Iterable[CoffeeRead]] = None) -> None:
        self._lock = asyncio.Lock()
        # Initial records are taken as given, like a list literal.
        self._coffees: List[CoffeeRead] = [c.model_copy() for c in (initial or [])]

    async def open(self) -> None:
        """Nothing to prepare; present so both backends share a lifecycle."""

    async def close(self) -> None:
        """Nothing to release."""

    async def count(self) -> int:
        async with self._lock:
            return len(self._coffees)

    async def list_coffees(self) -> List[CoffeeRead]:
        """Return every coffee in insertion order."""
        async with self._lock:
            return [c.model_copy() for c in self._coffees]

    async def get_coffee(self, coffee_id: str) -> Optional[CoffeeRead]:
        """Return the coffee with ``coffee_id`` or ``None``."""
        async with self._lock:
            for coffee in self._coffees:
                if coffee.id == coffee_id:
                    return coffee.model_copy()
            return None

    async def create_coffee(self, data: CoffeeCreate) -> CoffeeRead:
        """Append a new coffee and return it with its resolved id.

        Raises ``DuplicateCoffeeError`` when the caller supplies an id
        that is already stored.
        """
        async with self._lock:
            return self._create(data)

    async def upsert_coffee(self, coffee_id: str, data: CoffeeCreate) -> Tuple[CoffeeRead, UpsertResult]:
        """Replace the coffee stored under ``coffee_id`` or create a new one.

        Every record whose id matches is rewritten in place and the scan
        does not stop at the first hit, so if duplicates were seeded all
        of them change and the last one is returned.  On a miss the
        payload is created exactly as ``create_coffee`` would, path id
        notwithstanding.
        """
        check_name(data)
        async with self._lock:
            updated: Optional[CoffeeRead] = None
            for index, coffee in enumerate(self._coffees):
                if coffee.id == coffee_id:
                    updated = CoffeeRead(id=coffee_id, name=data.name)
                    self._coffees[index] = updated
            if updated is None:
                return self._create(data), UpsertResult.CREATED
            logger.info("Updated coffee %s", coffee_id)
            return updated.model_copy(), UpsertResult.UPDATED

    async def delete_coffee(self, coffee_id: str) -> int:
        """Remove every coffee with ``coffee_id``; return how many were removed."""
        async with self._lock:
            before = len(self._coffees)
            self._coffees = [c for c in self._coffees if c.id != coffee_id]
            removed = before - len(self._coffees)
            if removed:
                logger.info("Deleted coffee %s", coffee_id)
            return removed

    def _create(self, data: CoffeeCreate) -> CoffeeRead:
        # Caller holds the lock.
        check_name(data)
        coffee_id = resolve_id(data.id)
        if any(c.id == coffee_id for c in self._coffees):
            raise DuplicateCoffeeError(coffee_id)
        coffee = CoffeeRead(id=coffee_id, name=data.name)
        self._coffees.append(coffee)
        logger.info("Created coffee %s", coffee_id)
        return coffee.model_copy()
