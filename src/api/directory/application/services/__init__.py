"""Application services for the directory bounded context."""

from directory.application.services.user_directory_service import UserDirectoryService

__all__ = ["UserDirectoryService"]
