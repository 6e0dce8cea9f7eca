"""
Store construction and sample data.

``build_store`` picks the storage backend named in the settings and
``load_sample_data`` seeds it with a few coffees.  Seeding is kept
separate from the stores so it can be switched off with
``LOAD_SAMPLE_DATA=false`` without touching any other code.
"""

from __future__ import annotations

import logging
from typing import List, Union

from coffee_api.app.core.config import Settings
from coffee_api.app.schemas.coffee import CoffeeCreate, CoffeeRead
from coffee_api.app.services.coffee_repository import SqliteCoffeeRepository
from coffee_api.app.services.coffee_service import InMemoryCoffeeStore


logger = logging.getLogger(__name__)

CoffeeStore = Union[InMemoryCoffeeStore, SqliteCoffeeRepository]

SAMPLE_COFFEES = [
    "Cafe Cereza",
    "Cafe Ganador",
    "Cafe Lareno",
    "Cafe Tres Pontas",
]


def build_store(settings: Settings) -> CoffeeStore:
    """Return the coffee store selected by ``settings.storage``.

    Raises ``ValueError`` for an unknown backend name.
    """
    backend = settings.storage.strip().lower()
    if backend == "memory":
        return InMemoryCoffeeStore()
    if backend == "sqlite":
        return SqliteCoffeeRepository(settings.database_url)
    raise ValueError(f"Unknown coffee storage backend: {settings.storage!r}")


async def load_sample_data(store: CoffeeStore) -> List[CoffeeRead]:
    """Seed ``store`` with the sample coffees if it is empty.

    Returns the coffees that were created; an already populated store
    is left alone so restarts against a SQLite file do not pile up
    copies.
    """
    if await store.count():
        logger.info("Coffee store already populated; skipping sample data")
        return []
    created = [await store.create_coffee(CoffeeCreate(name=name)) for name in SAMPLE_COFFEES]
    logger.info("Loaded %d sample coffees", len(created))
    return created
