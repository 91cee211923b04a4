"""Players identified by name, by UUID, or both."""

from __future__ import annotations

import threading
from uuid import UUID

from region_domains.core.errors import InvalidArgumentError
from region_domains.core.interfaces import RichIdentity


def _name_key(name: str) -> str:
    return name.strip().lower()


class PlayerDomain:
    """A set of players keyed by name and by unique id.

    Names and UUIDs live in two independent indices.  Names compare
    case-insensitively but keep the spelling they were first added with.
    Reads return snapshots, so iterating a result never races a writer.
    """

    def __init__(self, existing: PlayerDomain | None = None) -> None:
        self._lock = threading.RLock()
        self._names: dict[str, str] = {}
        self._unique_ids: set[UUID] = set()
        self._dirty = True
        if existing is not None:
            with existing._lock:
                self._names = dict(existing._names)
                self._unique_ids = set(existing._unique_ids)

    def copy(self) -> PlayerDomain:
        return PlayerDomain(self)

    # ------------------------------------------------------------------
    # Mutation
    # ------------------------------------------------------------------

    def add_player(self, player: RichIdentity | UUID | str) -> None:
        """Add by name, by UUID, or by every identifier an identity carries."""
        if player is None:
            raise InvalidArgumentError("player")
        if isinstance(player, str):
            self._add_name(player)
        elif isinstance(player, UUID):
            self._add_unique_id(player)
        elif isinstance(player, RichIdentity):
            with self._lock:
                if player.name is not None:
                    self._add_name(player.name)
                if player.unique_id is not None:
                    self._add_unique_id(player.unique_id)
        else:
            raise InvalidArgumentError("player", f"has unsupported type {type(player).__name__}")

    def remove_player(self, player: RichIdentity | UUID | str) -> None:
        """Remove by name, by UUID, or by every identifier an identity carries."""
        if player is None:
            raise InvalidArgumentError("player")
        if isinstance(player, str):
            self._remove_name(player)
        elif isinstance(player, UUID):
            self._remove_unique_id(player)
        elif isinstance(player, RichIdentity):
            with self._lock:
                if player.name is not None:
                    self._remove_name(player.name)
                if player.unique_id is not None:
                    self._remove_unique_id(player.unique_id)
        else:
            raise InvalidArgumentError("player", f"has unsupported type {type(player).__name__}")

    def _add_name(self, name: str) -> None:
        key = _name_key(name)
        if not key:
            return
        with self._lock:
            self._dirty = True
            self._names.setdefault(key, name.strip())

    def _add_unique_id(self, unique_id: UUID) -> None:
        with self._lock:
            self._dirty = True
            self._unique_ids.add(unique_id)

    def _remove_name(self, name: str) -> None:
        with self._lock:
            self._dirty = True
            self._names.pop(_name_key(name), None)

    def _remove_unique_id(self, unique_id: UUID) -> None:
        with self._lock:
            self._dirty = True
            self._unique_ids.discard(unique_id)

    def clear(self) -> None:
        with self._lock:
            self._dirty = True
            self._names.clear()
            self._unique_ids.clear()

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------

    def contains(self, player: RichIdentity | UUID | str) -> bool:
        if player is None:
            raise InvalidArgumentError("player")
        with self._lock:
            if isinstance(player, str):
                return _name_key(player) in self._names
            if isinstance(player, UUID):
                return player in self._unique_ids
            if not isinstance(player, RichIdentity):
                raise InvalidArgumentError(
                    "player", f"has unsupported type {type(player).__name__}"
                )
            if player.unique_id is not None and player.unique_id in self._unique_ids:
                return True
            return player.name is not None and _name_key(player.name) in self._names

    def get_players(self) -> frozenset[str]:
        with self._lock:
            return frozenset(self._names.values())

    def get_unique_ids(self) -> frozenset[UUID]:
        with self._lock:
            return frozenset(self._unique_ids)

    def size(self) -> int:
        with self._lock:
            return len(self._names) + len(self._unique_ids)

    def __len__(self) -> int:
        return self.size()

    # ------------------------------------------------------------------
    # Change tracking
    # ------------------------------------------------------------------

    def is_dirty(self) -> bool:
        return self._dirty

    def set_dirty(self, dirty: bool) -> None:
        self._dirty = dirty

    def __repr__(self) -> str:
        return (
            f"PlayerDomain(names={sorted(self.get_players())}, "
            f"unique_ids={sorted(str(u) for u in self.get_unique_ids())})"
        )
