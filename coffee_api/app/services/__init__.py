"""
Service layer.

Two interchangeable coffee storage backends live here: an in‑memory
list guarded by a lock and a SQLite repository.  Both expose the same
async methods so API handlers do not care which one is configured.
"""

from .coffee_service import InMemoryCoffeeStore, UpsertResult  # noqa: F401
from .coffee_repository import SqliteCoffeeRepository  # noqa: F401
from .data_loader import build_store, load_sample_data  # noqa: F401
