"""
Pydantic model for user data.

A user is a fixed-shape record with three optional fields.  Instances
are frozen: the seed users are shared by every request and must never
change after start‑up.
"""

from typing import Optional

from pydantic import BaseModel, Field


class User(BaseModel):
    """Schema for a user, used both by templates and the JSON API."""

    id: Optional[str] = Field(None, examples=["1"])
    name: Optional[str] = Field(None, examples=["José"])
    username: Optional[str] = Field(None, examples=["josevalim"])

    model_config = {
        "frozen": True,
    }
