"""Shared fixtures for the region-domains test suite."""

from __future__ import annotations

from uuid import UUID

import pytest

from region_domains.domains.combined import CombinedDomain
from region_domains.identity import PlayerIdentity
from region_domains.profile.cache import MemoryProfileCache
from region_domains.profile.models import Profile


# ---------------------------------------------------------------------------
# Identities
# ---------------------------------------------------------------------------

ALICE_ID = UUID("00000000-0000-0000-0000-00000000a11c")
BOB_ID = UUID("00000000-0000-0000-0000-000000000b0b")
CAROL_ID = UUID("00000000-0000-0000-0000-0000000ca201")


@pytest.fixture
def alice_id() -> UUID:
    return ALICE_ID


@pytest.fixture
def bob_id() -> UUID:
    return BOB_ID


@pytest.fixture
def alice() -> PlayerIdentity:
    """Alice, known by name and UUID, member of the builders group."""
    return PlayerIdentity(name="Alice", unique_id=ALICE_ID, groups=frozenset({"builders"}))


@pytest.fixture
def stranger() -> PlayerIdentity:
    return PlayerIdentity(name="Mallory", unique_id=CAROL_ID)


# ---------------------------------------------------------------------------
# Name resolution
# ---------------------------------------------------------------------------

@pytest.fixture
def profile_cache() -> MemoryProfileCache:
    """Cache that resolves only Alice's UUID."""
    return MemoryProfileCache([Profile(unique_id=ALICE_ID, name="Alice")])


# ---------------------------------------------------------------------------
# Domains
# ---------------------------------------------------------------------------

@pytest.fixture
def domain() -> CombinedDomain:
    return CombinedDomain()


@pytest.fixture
def populated_domain() -> CombinedDomain:
    """Bob by name, Alice by UUID, groups mods then admins."""
    d = CombinedDomain()
    d.add_player("Bob")
    d.add_player(ALICE_ID)
    d.add_group("mods")
    d.add_group("admins")
    return d
