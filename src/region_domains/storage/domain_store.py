"""DomainStore: JSONL persistence for domains.

Each save appends one line ``{"key", "domain", "saved_at"}``; the latest
line for a key wins on load.  Saving consults the domain's dirty flag so
unchanged domains cost nothing.  The flag is cleared before the snapshot
is taken, so a change racing the write leaves the domain dirty for the
next save instead of being lost.
"""

from __future__ import annotations

import json
import logging
import threading
from datetime import datetime, timezone
from pathlib import Path
from uuid import UUID

from pydantic import BaseModel, Field, ValidationError

from region_domains.core.errors import CorruptRecordError, InvalidArgumentError, StorageError
from region_domains.core.file_io import read_lines, safe_append_line
from region_domains.domains.combined import CombinedDomain

logger = logging.getLogger(__name__)


def _now() -> datetime:
    return datetime.now(timezone.utc)


class DomainRecord(BaseModel):
    """Serialisable contents of a ``CombinedDomain``."""

    players: list[str] = Field(default_factory=list)
    unique_ids: list[UUID] = Field(default_factory=list)
    groups: list[str] = Field(default_factory=list)


class StoredDomain(BaseModel):
    key: str
    domain: DomainRecord
    saved_at: datetime = Field(default_factory=_now)


def record_from_domain(domain: CombinedDomain) -> DomainRecord:
    if domain is None:
        raise InvalidArgumentError("domain")
    return DomainRecord(
        players=sorted(domain.get_players(), key=str.lower),
        unique_ids=sorted(domain.get_unique_ids(), key=str),
        groups=list(domain.get_groups()),
    )


def domain_from_record(record: DomainRecord) -> CombinedDomain:
    """Rebuild a domain; the result starts clean (not dirty)."""
    domain = CombinedDomain()
    for name in record.players:
        domain.add_player(name)
    for uid in record.unique_ids:
        domain.add_player(uid)
    for group in record.groups:
        domain.add_group(group)
    domain.set_dirty(False)
    return domain


class DomainStore:
    """Latest domain per key, backed by an append-only JSONL file.

    Parameters
    ----------
    path:
        JSONL file.  Existing lines are loaded on init.
    strict:
        Raise ``CorruptRecordError`` on a malformed line instead of
        skipping it with a warning.
    """

    def __init__(self, path: str | Path, strict: bool = False) -> None:
        self._path = Path(path)
        self._strict = strict
        self._lock = threading.Lock()
        self._records: dict[str, StoredDomain] = {}
        self._load()

    def _load(self) -> None:
        count = 0
        try:
            lines = list(read_lines(self._path))
        except OSError as exc:
            raise StorageError(f"Cannot read domain store {self._path}: {exc}") from exc
        for line_no, line in lines:
            try:
                stored = StoredDomain.model_validate(json.loads(line))
            except (json.JSONDecodeError, ValidationError) as exc:
                if self._strict:
                    raise CorruptRecordError(str(self._path), line_no, str(exc)) from exc
                logger.warning("Skipping malformed domain entry at %s:%d", self._path, line_no)
                continue
            self._records[stored.key] = stored
            count += 1
        if count > 0:
            logger.info("Loaded %d domain entries from %s", count, self._path)

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------

    def save(self, key: str, domain: CombinedDomain, force: bool = False) -> bool:
        """Persist *domain* under *key* if it is dirty (or *force*).

        Returns True when a line was written.
        Raises ``StorageError`` if the line cannot be appended; the domain
        is left dirty.
        """
        if not key:
            raise InvalidArgumentError("key", "must be a non-empty string")
        if domain is None:
            raise InvalidArgumentError("domain")
        if not force and not domain.is_dirty():
            logger.debug("Domain %s unchanged, skipping save", key)
            return False

        with self._lock:
            domain.set_dirty(False)
            stored = StoredDomain(key=key, domain=record_from_domain(domain))
            try:
                safe_append_line(self._path, stored.model_dump_json())
            except OSError as exc:
                domain.set_dirty(True)
                raise StorageError(f"Cannot write domain {key} to {self._path}: {exc}") from exc
            self._records[key] = stored
        logger.info("Saved domain %s (%d entries)", key, domain.size())
        return True

    def load(self, key: str) -> CombinedDomain | None:
        with self._lock:
            stored = self._records.get(key)
        if stored is None:
            return None
        return domain_from_record(stored.domain)

    def saved_at(self, key: str) -> datetime | None:
        with self._lock:
            stored = self._records.get(key)
        return stored.saved_at if stored is not None else None

    def keys(self) -> list[str]:
        with self._lock:
            return sorted(self._records)

    def __contains__(self, key: str) -> bool:
        with self._lock:
            return key in self._records
