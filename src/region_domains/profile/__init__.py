"""Name resolution: UUID -> last known player profile."""

from .cache import MemoryProfileCache
from .models import Profile

__all__ = ["MemoryProfileCache", "Profile"]
