"""
Schema for the configured greeting.

The greeting endpoints return the two fields as plain strings; the
model groups them so they can be built from settings in one place.
"""

from pydantic import BaseModel


class Greeting(BaseModel):
    name: str
    coffee: str
