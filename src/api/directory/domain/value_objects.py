"""Value objects for the user directory domain.

Value objects are immutable descriptors that provide type safety and
domain semantics for identifiers and domain concepts.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum

from ulid import ULID


@dataclass(frozen=True)
class UserRefId:
    """Public reference id of a User.

    Externally stable and opaque; distinct from the store's internal
    sequence id, which never leaves the infrastructure layer.
    """

    value: str

    def __str__(self) -> str:
        """Return string representation."""
        return self.value

    @classmethod
    def generate(cls) -> UserRefId:
        """Generate a new UserRefId using ULID."""
        return cls(value=str(ULID()))

    @classmethod
    def from_string(cls, value: str) -> UserRefId:
        """Create UserRefId from string value.

        Args:
            value: ULID string

        Returns:
            UserRefId instance

        Raises:
            ValueError: If value is not a valid ULID
        """
        try:
            ULID.from_str(value)
        except ValueError as e:
            raise ValueError(f"Invalid UserRefId: {value}") from e

        return cls(value=value)


@dataclass(frozen=True)
class OrganizationId:
    """Reference id of an Organization (tenant)."""

    value: str

    def __str__(self) -> str:
        """Return string representation."""
        return self.value

    @classmethod
    def generate(cls) -> OrganizationId:
        """Generate a new OrganizationId using ULID."""
        return cls(value=str(ULID()))

    @classmethod
    def from_string(cls, value: str) -> OrganizationId:
        """Create OrganizationId from string value.

        Raises:
            ValueError: If value is not a valid ULID
        """
        try:
            ULID.from_str(value)
        except ValueError as e:
            raise ValueError(f"Invalid OrganizationId: {value}") from e

        return cls(value=value)


@dataclass(frozen=True)
class SpaceId:
    """Reference id of a space (folder) inside an organization."""

    value: str

    def __str__(self) -> str:
        """Return string representation."""
        return self.value

    @classmethod
    def generate(cls) -> SpaceId:
        """Generate a new SpaceId using ULID."""
        return cls(value=str(ULID()))

    @classmethod
    def from_string(cls, value: str) -> SpaceId:
        """Create SpaceId from string value.

        Raises:
            ValueError: If value is not a valid ULID
        """
        try:
            ULID.from_str(value)
        except ValueError as e:
            raise ValueError(f"Invalid SpaceId: {value}") from e

        return cls(value=value)


@dataclass(frozen=True)
class TenantScope:
    """The organization an operation is confined to.

    Every organization-scoped directory query takes one of these, so the
    isolation boundary is visible at each call site.
    """

    org_id: OrganizationId

    def __str__(self) -> str:
        """Return string representation."""
        return f"TenantScope({self.org_id})"

    @classmethod
    def for_org(cls, org_id: str) -> TenantScope:
        """Build a scope from a raw organization reference id."""
        return cls(org_id=OrganizationId.from_string(org_id))


class PasswordState(StrEnum):
    """Authentication state of a user's credentials.

    UNSET: provisioned, no password and no reset pending.
    ACTIVE: password set, reset token empty.
    RESET_PENDING: reset token set, password cleared.
    """

    UNSET = "unset"
    ACTIVE = "active"
    RESET_PENDING = "reset_pending"


def normalize_email(email: str) -> str:
    """Canonical form used for storing and comparing emails."""
    return email.strip().lower()


def normalize_domain(domain: str) -> str:
    """Canonical form used for comparing organization domains."""
    return domain.strip().lower()


def make_initials(firstname: str, lastname: str) -> str:
    """Upper-cased first letters of the first and last name."""
    parts = (firstname.strip(), lastname.strip())
    return "".join(part[0] for part in parts if part).upper()
