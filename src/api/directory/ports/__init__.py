"""Ports (interfaces) for the directory bounded context.

Ports define the contracts for repositories without specifying
implementation details, keeping the domain and application layers
independent of infrastructure.
"""

from directory.ports.exceptions import (
    DirectoryError,
    NotFoundError,
    PersistenceError,
    TransactionRequiredError,
)
from directory.ports.repositories import IUserDirectoryRepository

__all__ = [
    "IUserDirectoryRepository",
    "DirectoryError",
    "NotFoundError",
    "PersistenceError",
    "TransactionRequiredError",
]
