"""Storage contracts consumed by the lifecycle manager, with in-memory backends."""

from .profiles import InMemoryProfileRepository, ProfileRepository
from .typing_tests import InMemoryTypingTestRepository, TypingTestRepository

__all__ = [
    "InMemoryProfileRepository",
    "InMemoryTypingTestRepository",
    "ProfileRepository",
    "TypingTestRepository",
]
