"""
randomuser.me integration for pre-filling the intake form.

Nothing fetched here is persisted; the user still has to submit the form.

File: randomuser/__init__.py
Author: userform contributors
Created: 2026-10-15
"""

from .client import RANDOM_USER_URL, RandomUserClient
from .convert import format_address, format_birth_date, profile_from_payload

__all__ = [
    "RANDOM_USER_URL",
    "RandomUserClient",
    "format_address",
    "format_birth_date",
    "profile_from_payload",
]
