"""
File: database/__init__.py
Author: userform contributors
Created: 2026-10-14
Last Modified: 2026-10-16
"""

from .common import LOCAL_DB_PATH, USERS_TABLE
from .create_tables import USERS_SCHEMA, create_schema, get_schema_version
from .store import UserStore

__all__ = [
    "LOCAL_DB_PATH",
    "USERS_TABLE",
    "USERS_SCHEMA",
    "create_schema",
    "get_schema_version",
    "UserStore",
]
