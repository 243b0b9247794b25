"""User aggregate for the directory context."""

from __future__ import annotations

from dataclasses import dataclass, replace
from datetime import datetime

from directory.domain.value_objects import (
    PasswordState,
    UserRefId,
    make_initials,
    normalize_email,
)


@dataclass(frozen=True)
class User:
    """User identity record.

    Users are bound to organizations through account memberships, which
    live outside this aggregate. The record carries its credential state:
    ``password`` and ``salt`` are produced by an external hashing step, and
    ``reset`` holds a pending reset token or the empty string.

    ``salt`` doubles as the onboarding serial of invited users until a real
    password is set.
    """

    id: UserRefId
    firstname: str
    lastname: str
    email: str
    initials: str = ""
    global_admin: bool = False
    password: str = ""
    salt: str = ""
    reset: str = ""
    created: datetime | None = None
    revised: datetime | None = None

    @classmethod
    def create(
        cls,
        firstname: str,
        lastname: str,
        email: str,
        password: str = "",
        salt: str = "",
        initials: str | None = None,
        global_admin: bool = False,
    ) -> User:
        """Factory for a user that has not been provisioned yet.

        Generates the reference id, normalizes the email and derives the
        initials from the names when none are given.
        """
        return cls(
            id=UserRefId.generate(),
            firstname=firstname,
            lastname=lastname,
            email=normalize_email(email),
            initials=make_initials(firstname, lastname)
            if initials is None
            else initials,
            global_admin=global_admin,
            password=password,
            salt=salt,
        )

    @property
    def fullname(self) -> str:
        """First and last name joined by a space."""
        return f"{self.firstname} {self.lastname}".strip()

    @property
    def password_state(self) -> PasswordState:
        """Which credential is currently usable for authentication."""
        if self.reset:
            return PasswordState.RESET_PENDING
        if self.password:
            return PasswordState.ACTIVE
        return PasswordState.UNSET

    def protect_secrets(self) -> User:
        """Return a copy with password, salt and reset token blanked."""
        return replace(self, password="", salt="", reset="")

    def __str__(self) -> str:
        """Return string representation."""
        return f"User({self.email})"

    def __eq__(self, other: object) -> bool:
        """Users are equal if they have the same reference id."""
        if not isinstance(other, User):
            return False
        return self.id == other.id

    def __hash__(self) -> int:
        """Hash based on reference id for use in sets and dicts."""
        return hash(self.id)
