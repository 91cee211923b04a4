"""Tests for DomainStore JSONL persistence."""

from __future__ import annotations

import json
from pathlib import Path
from uuid import UUID

import pytest

from region_domains.core.errors import CorruptRecordError, InvalidArgumentError, StorageError
from region_domains.core.file_io import safe_append_line
from region_domains.domains.combined import CombinedDomain
from region_domains.storage import domain_store
from region_domains.storage.domain_store import (
    DomainRecord,
    DomainStore,
    domain_from_record,
    record_from_domain,
)


class TestRecordCodec:
    """Conversion between live domains and their persisted records."""

    def test_record_from_domain(self, populated_domain: CombinedDomain, alice_id: UUID) -> None:
        record = record_from_domain(populated_domain)
        assert record.players == ["Bob"]
        assert record.unique_ids == [alice_id]
        assert record.groups == ["mods", "admins"]

    def test_domain_from_record_is_clean(self, alice_id: UUID) -> None:
        record = DomainRecord(players=["Bob"], unique_ids=[alice_id], groups=["mods"])
        domain = domain_from_record(record)
        assert domain.contains("Bob")
        assert domain.contains(alice_id)
        assert domain.get_groups() == ("mods",)
        assert not domain.is_dirty()

    def test_record_from_none(self) -> None:
        with pytest.raises(InvalidArgumentError):
            record_from_domain(None)


class TestDomainStore:
    """Saving, reloading and skipping clean domains."""

    def test_save_and_load(self, tmp_path: Path, populated_domain: CombinedDomain) -> None:
        store = DomainStore(tmp_path / "domains.jsonl")
        assert store.save("spawn", populated_domain) is True
        loaded = store.load("spawn")
        assert loaded.get_players() == populated_domain.get_players()
        assert loaded.get_groups() == ("mods", "admins")
        assert "spawn" in store
        assert store.saved_at("spawn") is not None

    def test_save_clears_dirty(self, tmp_path: Path, populated_domain: CombinedDomain) -> None:
        store = DomainStore(tmp_path / "domains.jsonl")
        store.save("spawn", populated_domain)
        assert not populated_domain.is_dirty()

    def test_clean_domain_skipped(self, tmp_path: Path, populated_domain: CombinedDomain) -> None:
        path = tmp_path / "domains.jsonl"
        store = DomainStore(path)
        store.save("spawn", populated_domain)
        assert store.save("spawn", populated_domain) is False
        assert len(path.read_text().splitlines()) == 1

    def test_force_writes_clean_domain(
        self, tmp_path: Path, populated_domain: CombinedDomain
    ) -> None:
        store = DomainStore(tmp_path / "domains.jsonl")
        store.save("spawn", populated_domain)
        assert store.save("spawn", populated_domain, force=True) is True

    def test_reload_latest_wins(self, tmp_path: Path) -> None:
        path = tmp_path / "domains.jsonl"
        store = DomainStore(path)
        d = CombinedDomain()
        d.add_player("Bob")
        store.save("spawn", d)
        d.add_player("Carol")
        store.save("spawn", d)

        reopened = DomainStore(path)
        assert reopened.load("spawn").get_players() == frozenset({"Bob", "Carol"})
        assert reopened.keys() == ["spawn"]

    def test_missing_key(self, tmp_path: Path) -> None:
        store = DomainStore(tmp_path / "domains.jsonl")
        assert store.load("nowhere") is None
        assert store.saved_at("nowhere") is None
        assert store.keys() == []

    def test_malformed_line_skipped(self, tmp_path: Path) -> None:
        path = tmp_path / "domains.jsonl"
        good = {"key": "spawn", "domain": {"players": ["Bob"]}}
        path.write_text("not json\n" + json.dumps(good) + "\n")
        store = DomainStore(path)
        assert store.load("spawn").contains("Bob")

    def test_malformed_line_strict(self, tmp_path: Path) -> None:
        path = tmp_path / "domains.jsonl"
        path.write_text('{"key": "spawn", "domain": {"unique_ids": ["nope"]}}\n')
        with pytest.raises(CorruptRecordError, match="domains.jsonl:1"):
            DomainStore(path, strict=True)

    def test_invalid_arguments(self, tmp_path: Path, domain: CombinedDomain) -> None:
        store = DomainStore(tmp_path / "domains.jsonl")
        with pytest.raises(InvalidArgumentError):
            store.save("", domain)
        with pytest.raises(InvalidArgumentError):
            store.save("spawn", None)

    def test_uuid_round_trips_as_uuid(self, tmp_path: Path) -> None:
        path = tmp_path / "domains.jsonl"
        uid = UUID(int=7)
        d = CombinedDomain()
        d.add_player(uid)
        DomainStore(path).save("spawn", d)
        assert DomainStore(path).load("spawn").contains(uid)


class TestDomainStoreDirtyTracking:
    """Edits made while a save is in flight are not lost."""

    def test_edit_during_write_keeps_domain_dirty(
        self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        path = tmp_path / "domains.jsonl"
        store = DomainStore(path)
        d = CombinedDomain()
        d.add_player("Bob")

        def append_then_edit(target: Path, line: str) -> None:
            safe_append_line(target, line)
            d.add_player("Eve")

        monkeypatch.setattr(domain_store, "safe_append_line", append_then_edit)
        assert store.save("spawn", d) is True
        monkeypatch.undo()

        assert d.is_dirty()
        assert store.save("spawn", d) is True
        assert DomainStore(path).load("spawn").get_players() == frozenset({"Bob", "Eve"})

    def test_write_failure_leaves_domain_dirty(
        self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        store = DomainStore(tmp_path / "domains.jsonl")
        d = CombinedDomain()
        d.add_player("Bob")

        def failing_append(target: Path, line: str) -> None:
            raise OSError("disk full")

        monkeypatch.setattr(domain_store, "safe_append_line", failing_append)
        with pytest.raises(StorageError, match="disk full"):
            store.save("spawn", d)

        assert d.is_dirty()
        assert store.load("spawn") is None


class TestDomainStoreIOErrors:
    """Filesystem failures surface as StorageError."""

    def test_directory_path_rejected_on_open(self, tmp_path: Path) -> None:
        with pytest.raises(StorageError, match="Cannot read domain store"):
            DomainStore(tmp_path)

    def test_storage_error_keeps_cause(self, tmp_path: Path) -> None:
        with pytest.raises(StorageError) as excinfo:
            DomainStore(tmp_path)
        assert isinstance(excinfo.value.__cause__, OSError)
