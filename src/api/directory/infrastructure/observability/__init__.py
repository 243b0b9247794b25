"""Domain-Oriented Observability for directory infrastructure."""

from directory.infrastructure.observability.repository_probe import (
    DefaultUserDirectoryRepositoryProbe,
    UserDirectoryRepositoryProbe,
)

__all__ = [
    "UserDirectoryRepositoryProbe",
    "DefaultUserDirectoryRepositoryProbe",
]
