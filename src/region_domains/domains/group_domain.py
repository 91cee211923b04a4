"""Named permission groups."""

from __future__ import annotations

import threading

from region_domains.core.errors import InvalidArgumentError
from region_domains.core.interfaces import RichIdentity


def _group_key(name: str) -> str:
    if not isinstance(name, str):
        raise InvalidArgumentError("name", f"has unsupported type {type(name).__name__}")
    return name.strip().lower()


class GroupDomain:
    """An insertion-ordered set of group names.

    Names compare case-insensitively.  Membership of a player is answered
    by the player's own ``has_group``.
    """

    def __init__(self, existing: GroupDomain | None = None) -> None:
        self._lock = threading.RLock()
        self._groups: dict[str, str] = {}
        self._dirty = True
        if existing is not None:
            with existing._lock:
                self._groups = dict(existing._groups)

    def copy(self) -> GroupDomain:
        return GroupDomain(self)

    def add_group(self, name: str) -> None:
        if name is None:
            raise InvalidArgumentError("name")
        key = _group_key(name)
        if not key:
            return
        with self._lock:
            self._dirty = True
            self._groups.setdefault(key, name.strip())

    def remove_group(self, name: str) -> None:
        if name is None:
            raise InvalidArgumentError("name")
        key = _group_key(name)
        with self._lock:
            self._dirty = True
            self._groups.pop(key, None)

    def contains(self, player: RichIdentity) -> bool:
        if player is None:
            raise InvalidArgumentError("player")
        if not isinstance(player, RichIdentity):
            raise InvalidArgumentError("player", f"has unsupported type {type(player).__name__}")
        return any(player.has_group(group) for group in self.get_groups())

    def contains_group(self, name: str) -> bool:
        if name is None:
            raise InvalidArgumentError("name")
        key = _group_key(name)
        with self._lock:
            return key in self._groups

    def get_groups(self) -> tuple[str, ...]:
        """Snapshot of group names in insertion order."""
        with self._lock:
            return tuple(self._groups.values())

    def size(self) -> int:
        with self._lock:
            return len(self._groups)

    def __len__(self) -> int:
        return self.size()

    def clear(self) -> None:
        with self._lock:
            self._dirty = True
            self._groups.clear()

    def is_dirty(self) -> bool:
        return self._dirty

    def set_dirty(self, dirty: bool) -> None:
        self._dirty = dirty

    def __repr__(self) -> str:
        return f"GroupDomain(groups={list(self.get_groups())})"
