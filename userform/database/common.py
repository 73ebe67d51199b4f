"""
Common database constants and utilities

File: database/common.py
Author: userform contributors
Created: 2026-10-14
Last Modified: 2026-10-14
"""

from pathlib import Path

DATA_DIR = Path("data")
LOCAL_DB_PATH = DATA_DIR / "users.db"
USERS_TABLE = "users"
SCHEMA_VERSION = 1

__all__ = [
    "DATA_DIR",
    "LOCAL_DB_PATH",
    "USERS_TABLE",
    "SCHEMA_VERSION",
]
