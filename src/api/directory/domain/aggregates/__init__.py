"""Domain aggregates for the directory context."""

from directory.domain.aggregates.user import User

__all__ = [
    "User",
]
