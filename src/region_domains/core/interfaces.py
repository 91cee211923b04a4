"""Protocol interfaces for region domains.

Module boundaries are defined here as Protocol classes so that game-server
adapters (player objects, profile services) can be plugged in without
depending on the concrete implementations in this package.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Iterable, Mapping, Protocol, runtime_checkable
from uuid import UUID

if TYPE_CHECKING:
    from region_domains.profile.models import Profile


# ---------------------------------------------------------------------------
# Change tracking
# ---------------------------------------------------------------------------

@runtime_checkable
class ChangeTracked(Protocol):
    """Object whose unsaved mutations are flagged for the persistence layer."""

    def is_dirty(self) -> bool: ...

    def set_dirty(self, dirty: bool) -> None: ...


# ---------------------------------------------------------------------------
# Identity
# ---------------------------------------------------------------------------

@runtime_checkable
class RichIdentity(Protocol):
    """A player reference carrying a name and/or a unique id.

    Either identifier may be ``None``.  Group membership is answered by the
    identity itself.
    """

    @property
    def name(self) -> str | None: ...

    @property
    def unique_id(self) -> UUID | None: ...

    def has_group(self, group: str) -> bool: ...


# ---------------------------------------------------------------------------
# Domain
# ---------------------------------------------------------------------------

@runtime_checkable
class Domain(Protocol):
    """A set-like collection answering "who" for an access rule."""

    def contains(self, player: RichIdentity | UUID | str) -> bool: ...

    def size(self) -> int: ...

    def clear(self) -> None: ...


# ---------------------------------------------------------------------------
# Name resolution
# ---------------------------------------------------------------------------

@runtime_checkable
class ProfileCache(Protocol):
    """UUID -> last known profile lookup.

    ``get_all_present`` omits UUIDs with no cached entry.
    """

    def put(self, profile: Profile) -> None: ...

    def put_all(self, profiles: Iterable[Profile]) -> None: ...

    def get_if_present(self, unique_id: UUID) -> Profile | None: ...

    def get_all_present(self, unique_ids: Iterable[UUID]) -> Mapping[UUID, Profile]: ...
