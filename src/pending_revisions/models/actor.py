"""The actor performing a save or viewing a content item."""

from __future__ import annotations

from pydantic import BaseModel


class Actor(BaseModel):
    id: str
    name: str = ""
