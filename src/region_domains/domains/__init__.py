"""Access domains: who is allowed by a rule."""

from .combined import CombinedDomain
from .group_domain import GroupDomain
from .player_domain import PlayerDomain

__all__ = ["CombinedDomain", "GroupDomain", "PlayerDomain"]
