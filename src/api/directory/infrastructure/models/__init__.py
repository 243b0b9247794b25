"""SQLAlchemy ORM models for the directory bounded context.

These models map to database tables and are used by the repository
implementation. Only ``user`` is owned by the directory; ``account``,
``organization`` and ``labelrole`` are read for tenant scoping.
"""

from directory.infrastructure.models.account import AccountModel
from directory.infrastructure.models.organization import OrganizationModel
from directory.infrastructure.models.space_role import SpaceRoleModel
from directory.infrastructure.models.user import UserModel

__all__ = [
    "AccountModel",
    "OrganizationModel",
    "SpaceRoleModel",
    "UserModel",
]
