"""
FastAPI dependencies.

``create_app`` places the settings and the coffee store on
``app.state``; these helpers hand them to route functions so handlers
never import module‑level singletons.
"""

from fastapi import Request

from .config import Settings


def get_settings(request: Request) -> Settings:
    return request.app.state.settings


def get_store(request: Request):
    """Return the coffee store configured for this application."""
    return request.app.state.coffee_store
