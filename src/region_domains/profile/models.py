"""Profile models."""

from __future__ import annotations

from uuid import UUID

from pydantic import BaseModel, ConfigDict


class Profile(BaseModel):
    """Last known name for a player UUID."""

    model_config = ConfigDict(frozen=True)

    unique_id: UUID
    name: str
