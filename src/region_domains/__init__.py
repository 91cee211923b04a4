"""Region access domains: players and groups allowed by a rule."""

from region_domains.domains import CombinedDomain, GroupDomain, PlayerDomain
from region_domains.identity import PlayerIdentity
from region_domains.profile import MemoryProfileCache, Profile

__all__ = [
    "CombinedDomain",
    "GroupDomain",
    "MemoryProfileCache",
    "PlayerDomain",
    "PlayerIdentity",
    "Profile",
]

__version__ = "0.1.0"
