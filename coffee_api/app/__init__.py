"""
Application package initializer.

The project is split into ``core`` (configuration, logging, database
helpers and errors), ``schemas`` (pydantic models), ``services``
(coffee storage backends) and ``api`` (versioned routers).
"""

from .main import app, create_app  # noqa: F401
