"""Domain-Oriented Observability for the directory application layer."""

from directory.application.observability.user_directory_service_probe import (
    DefaultUserDirectoryServiceProbe,
    UserDirectoryServiceProbe,
)

__all__ = [
    "UserDirectoryServiceProbe",
    "DefaultUserDirectoryServiceProbe",
]
