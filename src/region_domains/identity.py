"""Rich player identity used for membership checks."""

from __future__ import annotations

from typing import Any
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field, model_validator

from region_domains.core.errors import InvalidArgumentError


class PlayerIdentity(BaseModel):
    """A player known by name, by UUID, or both.

    ``groups`` holds the permission groups the player belongs to; lookups
    are case-insensitive.  Constructing an identity with neither a name nor
    a UUID raises ``InvalidArgumentError``; ``model_validate`` reports the
    same problem as a ``ValidationError``.
    """

    model_config = ConfigDict(frozen=True)

    name: str | None = None
    unique_id: UUID | None = None
    groups: frozenset[str] = Field(default_factory=frozenset)

    def __init__(self, **data: Any) -> None:
        if data.get("name") is None and data.get("unique_id") is None:
            raise InvalidArgumentError("identity", "needs a name or a unique id")
        super().__init__(**data)

    @model_validator(mode="after")
    def _require_identifier(self) -> "PlayerIdentity":
        if self.name is None and self.unique_id is None:
            raise ValueError("identity needs a name or a unique id")
        return self

    def has_group(self, group: str) -> bool:
        wanted = group.strip().lower()
        return any(g.strip().lower() == wanted for g in self.groups)
