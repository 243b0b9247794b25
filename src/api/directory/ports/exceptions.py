"""Exceptions raised by the user directory.

Two outcomes are distinguished: a keyed lookup that found nothing, and a
store that failed to run a statement. Lookups by email or domain that find
nothing are not errors; they return ``None``.
"""

from __future__ import annotations


class DirectoryError(Exception):
    """Base class for user directory failures."""

    pass


class NotFoundError(DirectoryError):
    """Raised when a uniquely keyed lookup (reference id, reset token,
    onboarding serial) matches no user.
    """

    def __init__(self, lookup: str, value: str):
        super().__init__(f"no user matches {lookup} {value!r}")
        self.lookup = lookup
        self.value = value


class PersistenceError(DirectoryError):
    """Raised when the store fails to prepare or execute a statement.

    The underlying exception is chained as ``__cause__``.
    """

    def __init__(self, operation: str, argument: str | None = None, detail: str = ""):
        message = operation if argument is None else f"{operation} {argument}"
        if detail:
            message = f"{message}: {detail}"
        super().__init__(message)
        self.operation = operation
        self.argument = argument


class TransactionRequiredError(PersistenceError):
    """Raised when a write is attempted on a session with no open transaction."""

    def __init__(self, operation: str, argument: str | None = None):
        super().__init__(operation, argument, detail="no active transaction")
