"""
Exceptions raised by the userform package.

Every failure is scoped to a single user action; the CLI catches
UserFormError and reports it without leaving the menu loop.

File: errors.py
Author: userform contributors
Created: 2026-10-14
Last Modified: 2026-10-16
"""

from typing import Dict, Optional


class UserFormError(Exception):
    """Base class for all userform errors."""


class ValidationError(UserFormError):
    """A single form field failed its check."""

    def __init__(self, field: str, message: str):
        super().__init__(f"{field}: {message}")
        self.field = field
        self.message = message


class FormInvalid(UserFormError):
    """Submission was blocked because one or more fields are invalid."""

    def __init__(self, errors: Dict[str, str]):
        fields = ", ".join(errors)
        super().__init__(f"Invalid fields: {fields}")
        self.errors = dict(errors)


class StorageError(UserFormError):
    """Base class for local database errors."""


class StorageUnavailable(StorageError):
    """The database file could not be opened or created."""


class StorageClosed(StorageError):
    """An operation was attempted on a store that is not open."""


class FetchFailed(UserFormError):
    """The random-user provider did not return a usable profile."""

    def __init__(self, message: str, status_code: Optional[int] = None):
        super().__init__(message)
        self.status_code = status_code


__all__ = [
    "UserFormError",
    "ValidationError",
    "FormInvalid",
    "StorageError",
    "StorageUnavailable",
    "StorageClosed",
    "FetchFailed",
]
