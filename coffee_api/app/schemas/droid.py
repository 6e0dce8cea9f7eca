"""Schema for the configured droid."""

from pydantic import BaseModel


class Droid(BaseModel):
    id: str
    description: str
