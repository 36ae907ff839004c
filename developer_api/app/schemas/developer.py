"""
Pydantic schemas for developer records.

A developer has a free-form ``name`` and a free-form favourite
language (``fav_lang``).  Neither field is validated: both may be
missing, ``None`` or empty.  The list endpoint exposes only these two
fields (``DeveloperResource``) while the detail endpoint returns the
full stored row (``DeveloperRead``).
"""

from typing import Optional

from pydantic import BaseModel, Field


class DeveloperInput(BaseModel):
    """Fields accepted by the create and update endpoints."""

    name: Optional[str] = Field(None, description="Developer name")
    fav_lang: Optional[str] = Field(None, description="Favourite programming language")


class DeveloperRead(BaseModel):
    """Full developer record as stored in the database."""

    id: int
    name: Optional[str]
    fav_lang: Optional[str]
    created_at: Optional[str]
    updated_at: Optional[str]


class DeveloperResource(BaseModel):
    """Public view of a developer used in collections."""

    name: Optional[str]
    fav_lang: Optional[str]


class MessageResponse(BaseModel):
    """Confirmation returned by write operations."""

    message: str
