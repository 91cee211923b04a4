"""A combination of a ``PlayerDomain`` and a ``GroupDomain``.

Locking
-------
One ``threading.RLock`` guards the two collaborator slots.  Convenience
mutators hold it for the whole delegated call, so they never interleave
with a slot being replaced.  The collaborators guard their own indices,
which keeps mutation through ``get_player_domain()`` safe per element.
``add_all`` / ``remove_all`` take the lock once per element and are not
atomic as a whole: a concurrent reader may see a partial merge.
"""

from __future__ import annotations

import logging
import threading
from typing import Mapping
from uuid import UUID

from region_domains.core.config import FormattingConfig
from region_domains.core.errors import InvalidArgumentError
from region_domains.core.interfaces import ProfileCache, RichIdentity
from region_domains.profile.models import Profile
from region_domains.text.components import TextComponent

from . import formatting
from .group_domain import GroupDomain
from .player_domain import PlayerDomain

logger = logging.getLogger(__name__)

_EMPTY = object()


class CombinedDomain:
    """Players and groups allowed by an access rule."""

    def __init__(self, existing: CombinedDomain | None = None) -> None:
        self._lock = threading.RLock()
        self._player_domain = PlayerDomain()
        self._group_domain = GroupDomain()
        if existing is not None:
            self.set_player_domain(existing.get_player_domain())
            self.set_group_domain(existing.get_group_domain())

    def copy(self) -> CombinedDomain:
        """Deep copy of both collaborators."""
        return CombinedDomain(self)

    # ------------------------------------------------------------------
    # Collaborator slots
    # ------------------------------------------------------------------

    def get_player_domain(self) -> PlayerDomain:
        """The live player domain (not a copy)."""
        with self._lock:
            return self._player_domain

    def set_player_domain(self, player_domain: PlayerDomain) -> None:
        """Install a copy of *player_domain*."""
        if player_domain is None:
            raise InvalidArgumentError("player_domain")
        with self._lock:
            self._player_domain = PlayerDomain(player_domain)

    def get_group_domain(self) -> GroupDomain:
        """The live group domain (not a copy)."""
        with self._lock:
            return self._group_domain

    def set_group_domain(self, group_domain: GroupDomain) -> None:
        """Install a copy of *group_domain*."""
        if group_domain is None:
            raise InvalidArgumentError("group_domain")
        with self._lock:
            self._group_domain = GroupDomain(group_domain)

    # ------------------------------------------------------------------
    # Players
    # ------------------------------------------------------------------

    def add_player(self, player: RichIdentity | UUID | str) -> None:
        """Add a player by name, by UUID, or by both identifiers of *player*."""
        with self._lock:
            self._player_domain.add_player(player)

    def remove_player(self, player: RichIdentity | UUID | str) -> None:
        """Remove a player by name, by UUID, or by both identifiers of *player*."""
        with self._lock:
            self._player_domain.remove_player(player)

    def get_players(self) -> frozenset[str]:
        return self.get_player_domain().get_players()

    def get_unique_ids(self) -> frozenset[UUID]:
        return self.get_player_domain().get_unique_ids()

    # ------------------------------------------------------------------
    # Groups
    # ------------------------------------------------------------------

    def add_group(self, name: str) -> None:
        with self._lock:
            self._group_domain.add_group(name)

    def remove_group(self, name: str) -> None:
        with self._lock:
            self._group_domain.remove_group(name)

    def get_groups(self) -> tuple[str, ...]:
        return self.get_group_domain().get_groups()

    # ------------------------------------------------------------------
    # Bulk
    # ------------------------------------------------------------------

    def add_all(self, other: CombinedDomain) -> None:
        """Add every name, UUID and group of *other*, one at a time."""
        if other is None:
            raise InvalidArgumentError("other")
        for name in other.get_players():
            self.add_player(name)
        for uid in other.get_unique_ids():
            self.add_player(uid)
        for group in other.get_groups():
            self.add_group(group)
        logger.debug("Merged %d entries into domain", other.size())

    def remove_all(self, other: CombinedDomain | object = _EMPTY) -> None:
        """Remove every name, UUID and group of *other*, one at a time.

        Called with no argument it empties the domain, like ``clear``.
        """
        if other is _EMPTY:
            self.clear()
            return
        if other is None:
            raise InvalidArgumentError("other")
        for name in other.get_players():
            self.remove_player(name)
        for uid in other.get_unique_ids():
            self.remove_player(uid)
        for group in other.get_groups():
            self.remove_group(group)
        logger.debug("Removed %d entries from domain", other.size())

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------

    def contains(self, player: RichIdentity | UUID | str) -> bool:
        """Membership test.

        Bare names and UUIDs match players only; a rich identity also
        matches through any group it belongs to.
        """
        if isinstance(player, (str, UUID)):
            return self.get_player_domain().contains(player)
        return self.get_player_domain().contains(player) or self.get_group_domain().contains(player)

    def size(self) -> int:
        with self._lock:
            return self._group_domain.size() + self._player_domain.size()

    def __len__(self) -> int:
        return self.size()

    def clear(self) -> None:
        with self._lock:
            self._player_domain.clear()
            self._group_domain.clear()

    # ------------------------------------------------------------------
    # Change tracking
    # ------------------------------------------------------------------

    def is_dirty(self) -> bool:
        with self._lock:
            return self._player_domain.is_dirty() or self._group_domain.is_dirty()

    def set_dirty(self, dirty: bool) -> None:
        with self._lock:
            self._player_domain.set_dirty(dirty)
            self._group_domain.set_dirty(dirty)

    # ------------------------------------------------------------------
    # Formatting
    # ------------------------------------------------------------------

    def _snapshot(
        self, cache: ProfileCache | None
    ) -> tuple[frozenset[str], frozenset[UUID], tuple[str, ...], Mapping[UUID, Profile]]:
        with self._lock:
            names = self._player_domain.get_players()
            unique_ids = self._player_domain.get_unique_ids()
            groups = self._group_domain.get_groups()
        resolved = cache.get_all_present(unique_ids) if cache is not None else {}
        return names, unique_ids, groups, resolved

    def to_players_string(self, cache: ProfileCache | None = None) -> str:
        names, unique_ids, _, resolved = self._snapshot(cache)
        return formatting.players_string(names, unique_ids, resolved)

    def to_groups_string(self) -> str:
        return formatting.groups_string(self.get_groups())

    def to_user_friendly_string(self, cache: ProfileCache | None = None) -> str:
        """Players then groups, separated by ``"; "``; empty sections omitted."""
        names, unique_ids, groups, resolved = self._snapshot(cache)
        return formatting.join_sections(
            formatting.players_string(names, unique_ids, resolved),
            formatting.groups_string(groups),
        )

    def to_user_friendly_component(
        self,
        cache: ProfileCache | None = None,
        style: FormattingConfig | None = None,
    ) -> TextComponent:
        names, unique_ids, groups, resolved = self._snapshot(cache)
        has_players = bool(names or unique_ids)
        builder = TextComponent.builder()
        if has_players:
            builder.append(formatting.players_component(names, unique_ids, resolved, style))
        if groups:
            if has_players:
                builder.append(TextComponent.of(formatting.SECTION_SEPARATOR))
            builder.append(formatting.groups_component(groups, style))
        return builder.build()

    def __repr__(self) -> str:
        return f"{{players={self.get_player_domain()!r}, groups={self.get_group_domain()!r}}}"
