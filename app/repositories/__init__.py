from .base import BoutSource, PickSource, ResultSource, UserSource
from .memory import (
    InMemoryBoutRepository,
    InMemoryPickRepository,
    InMemoryResultRepository,
    InMemoryUserRepository,
)

__all__ = [
    "BoutSource",
    "PickSource",
    "ResultSource",
    "UserSource",
    "InMemoryBoutRepository",
    "InMemoryPickRepository",
    "InMemoryResultRepository",
    "InMemoryUserRepository",
]
