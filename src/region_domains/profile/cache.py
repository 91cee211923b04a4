"""In-memory profile cache.

Thread-safe dict-backed implementation of the ``ProfileCache`` protocol.
Lookups never block on I/O; eviction is left to the owner (``invalidate``
/ ``clear``).
"""

from __future__ import annotations

import json
import logging
import threading
from pathlib import Path
from typing import Iterable, Mapping
from uuid import UUID

from region_domains.core.errors import InvalidArgumentError, StorageError

from .models import Profile

logger = logging.getLogger(__name__)


class MemoryProfileCache:
    """UUID -> Profile map guarded by an RLock."""

    def __init__(self, profiles: Iterable[Profile] = ()) -> None:
        self._lock = threading.RLock()
        self._profiles: dict[UUID, Profile] = {}
        self.put_all(profiles)

    @classmethod
    def from_json_file(cls, path: str | Path) -> "MemoryProfileCache":
        """Build a cache from a ``{"<uuid>": "<name>"}`` JSON file."""
        path = Path(path)
        try:
            raw = json.loads(path.read_text())
            profiles = [Profile(unique_id=UUID(k), name=v) for k, v in raw.items()]
        except (OSError, ValueError, AttributeError) as exc:
            raise StorageError(f"Cannot read profiles from {path}: {exc}") from exc
        logger.debug("Loaded %d profiles from %s", len(profiles), path)
        return cls(profiles)

    # ------------------------------------------------------------------
    # Writes
    # ------------------------------------------------------------------

    def put(self, profile: Profile) -> None:
        if profile is None:
            raise InvalidArgumentError("profile")
        with self._lock:
            self._profiles[profile.unique_id] = profile

    def put_all(self, profiles: Iterable[Profile]) -> None:
        with self._lock:
            for profile in profiles:
                self.put(profile)

    def invalidate(self, unique_id: UUID) -> None:
        with self._lock:
            self._profiles.pop(unique_id, None)

    def clear(self) -> None:
        with self._lock:
            self._profiles.clear()

    # ------------------------------------------------------------------
    # Reads
    # ------------------------------------------------------------------

    def get_if_present(self, unique_id: UUID) -> Profile | None:
        with self._lock:
            return self._profiles.get(unique_id)

    def get_all_present(self, unique_ids: Iterable[UUID]) -> Mapping[UUID, Profile]:
        """Return cached profiles for *unique_ids*; misses are omitted."""
        with self._lock:
            return {
                uid: self._profiles[uid]
                for uid in unique_ids
                if uid in self._profiles
            }

    def __len__(self) -> int:
        with self._lock:
            return len(self._profiles)
