"""
Top‑level router for version 1 of the API.

Aggregates the coffee collection and the configuration echo routers.
When new resources are introduced, include their routers here.
"""

from fastapi import APIRouter

from .endpoints import coffees, droid, greeting

router = APIRouter()

router.include_router(coffees.router, prefix="/coffees", tags=["coffees"])
router.include_router(droid.router, prefix="/droid", tags=["droid"])
router.include_router(greeting.router, prefix="/greeting", tags=["greeting"])
