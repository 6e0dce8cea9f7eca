"""
Greeting endpoints for API v1.

Both routes answer ``text/plain`` with the configured strings: ``/greeting`` the
greeting name and ``/greeting/coffee`` the coffee sentence.  Values
come from ``GREETING_NAME`` and ``GREETING_COFFEE``.
"""

from fastapi import APIRouter, Depends
from fastapi.responses import PlainTextResponse

from coffee_api.app.core.config import Settings
from coffee_api.app.core.dependencies import get_settings
from coffee_api.app.schemas.greeting import Greeting

router = APIRouter()


def _greeting(settings: Settings) -> Greeting:
    return Greeting(name=settings.greeting_name, coffee=settings.greeting_coffee)


@router.get("", response_class=PlainTextResponse)
async def get_greeting(settings: Settings = Depends(get_settings)) -> str:
    return _greeting(settings).name


@router.get("/coffee", response_class=PlainTextResponse)
async def get_name_and_coffee(settings: Settings = Depends(get_settings)) -> str:
    return _greeting(settings).coffee
