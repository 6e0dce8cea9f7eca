"""
Pydantic schemas for coffee records.

A coffee has a string ``id`` and a ``name``.  Clients may omit the
``id`` when creating a coffee; the store then generates a random UUID.
The ``name`` is required and may not be blank.
"""

from typing import Optional

from pydantic import BaseModel, Field, field_validator


class CoffeeCreate(BaseModel):
    """Schema for creating or replacing a coffee."""

    id: Optional[str] = Field(None, description="Coffee identifier; generated when omitted or blank")
    name: str = Field(..., description="Coffee name", examples=["Cafe Cereza"])

    @field_validator("name")
    @classmethod
    def validate_name(cls, v: str) -> str:
        if not v or not v.strip():
            raise ValueError("Coffee name must not be blank")
        return v


class CoffeeRead(BaseModel):
    """Schema for reading a coffee."""

    id: str
    name: str

    model_config = {
        "from_attributes": True,
    }
