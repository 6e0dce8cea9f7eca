"""
Simple configuration management.

The ``Settings`` dataclass reads configuration directly from
environment variables.  Defaults are provided for all fields, so the
service starts with an in‑memory store seeded with sample coffees and
the stock droid/greeting values.  ``create_app`` accepts an explicit
``Settings`` instance, which is how tests and embedding code override
values without touching the environment.
"""

import os
from dataclasses import dataclass


def _env_bool(name: str, default: str) -> bool:
    return os.getenv(name, default).lower() in {"1", "true", "yes"}


_GREETING_NAME = os.getenv("GREETING_NAME", "Dakota")


@dataclass
class Settings:
    """Application settings loaded from environment variables."""

    project_name: str = os.getenv("PROJECT_NAME", "Coffee API")
    api_version: str = os.getenv("API_VERSION", "1.0.0")
    # Prefix for the v1 router.  Empty means the coffee collection is
    # served from ``/coffees`` directly.
    api_prefix: str = os.getenv("API_PREFIX", "")
    log_level: str = os.getenv("LOG_LEVEL", "INFO")
    log_file: str = os.getenv("LOG_FILE", "")

    # Storage backend: ``memory`` keeps coffees in a list for the
    # lifetime of the process, ``sqlite`` persists them to
    # ``database_url``.
    storage: str = os.getenv("COFFEE_STORAGE", "memory")

    # Path to the SQLite database file.  Relative paths are resolved
    # against the project root by the ``db`` module.
    database_url: str = os.getenv("DATABASE_URL", "coffee.db")

    # Seed the store with a handful of coffees on startup when it is empty.
    load_sample_data: bool = _env_bool("LOAD_SAMPLE_DATA", "true")

    droid_id: str = os.getenv("DROID_ID", "BB-8")
    droid_description: str = os.getenv(
        "DROID_DESCRIPTION", "Small, rolling android. Probably doesn't drink coffee."
    )

    greeting_name: str = _GREETING_NAME
    greeting_coffee: str = os.getenv(
        "GREETING_COFFEE", f"{_GREETING_NAME} is drinking Cafe Ganador"
    )

    host: str = os.getenv("HOST", "0.0.0.0")
    port: int = int(os.getenv("PORT", "8000"))


# Instantiate settings once so other modules can import it without
# repeatedly reading environment variables.  Environment variables
# must be set before importing this module.
settings = Settings()
