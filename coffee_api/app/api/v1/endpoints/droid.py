"""Droid endpoint: echoes the droid configured via ``DROID_*`` settings."""

from fastapi import APIRouter, Depends

from coffee_api.app.core.config import Settings
from coffee_api.app.core.dependencies import get_settings
from coffee_api.app.schemas.droid import Droid

router = APIRouter()


@router.get("", response_model=Droid)
async def get_droid(settings: Settings = Depends(get_settings)) -> Droid:
    return Droid(id=settings.droid_id, description=settings.droid_description)
