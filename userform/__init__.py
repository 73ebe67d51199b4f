"""
userform - capture user profiles, store them locally, list them.

File: __init__.py
Author: userform contributors
Created: 2026-10-14
Last Modified: 2026-10-17
"""

from .config import AppConfig, setup_logging
from .database import UserStore
from .errors import (
    FetchFailed,
    FormInvalid,
    StorageClosed,
    StorageError,
    StorageUnavailable,
    UserFormError,
    ValidationError,
)
from .intake import IntakeWorkflow, UserForm
from .models import User
from .randomuser import RandomUserClient

__version__ = "0.1.0"

__all__ = [
    "AppConfig",
    "setup_logging",
    "UserStore",
    "FetchFailed",
    "FormInvalid",
    "StorageClosed",
    "StorageError",
    "StorageUnavailable",
    "UserFormError",
    "ValidationError",
    "IntakeWorkflow",
    "UserForm",
    "User",
    "RandomUserClient",
]
