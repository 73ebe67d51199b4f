"""
File: database/create_tables.py
Author: userform contributors
Created: 2026-10-14
Last Modified: 2026-10-16
"""

import logging

import aiosqlite

from .common import SCHEMA_VERSION

log = logging.getLogger(__name__)


USERS_SCHEMA = """
    CREATE TABLE IF NOT EXISTS users (
        id INTEGER PRIMARY KEY AUTOINCREMENT,
        name TEXT NOT NULL,
        email TEXT NOT NULL,
        birthDate TEXT NOT NULL,
        address TEXT NOT NULL,
        password TEXT NOT NULL
    )
"""


async def get_schema_version(conn: aiosqlite.Connection) -> int:
    """Read PRAGMA user_version; 0 means the file has never been initialized."""
    async with conn.execute("PRAGMA user_version") as cursor:
        row = await cursor.fetchone()
    return row[0] if row else 0


async def create_schema(conn: aiosqlite.Connection) -> bool:
    """
    Create the users table if this is the first time the file is opened.

    Args:
        conn: Open connection to the database file

    Returns:
        True if the schema was created, False if it already existed
    """
    version = await get_schema_version(conn)
    if version >= SCHEMA_VERSION:
        return False

    await conn.execute(USERS_SCHEMA)
    # PRAGMA does not accept bound parameters
    await conn.execute(f"PRAGMA user_version = {int(SCHEMA_VERSION)}")
    await conn.commit()
    log.info(f"Created users table (schema version {SCHEMA_VERSION})")
    return True
