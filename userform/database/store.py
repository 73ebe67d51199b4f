"""
Local SQLite store for user records.

A UserStore owns one database file. It is opened and closed explicitly (or
used as an async context manager) and passed to whatever needs it.

File: database/store.py
Author: userform contributors
Created: 2026-10-14
Last Modified: 2026-10-17
"""

import logging
from pathlib import Path
from typing import List, Optional, Union

import aiosqlite

from ..errors import StorageClosed, StorageError, StorageUnavailable
from ..models import User
from .common import LOCAL_DB_PATH, USERS_TABLE
from .create_tables import create_schema

log = logging.getLogger(__name__)

# sqlite3's own default
DEFAULT_BUSY_TIMEOUT = 5.0


class UserStore:
    """Append-only persistence for User records."""

    def __init__(self, path: Union[str, Path] = LOCAL_DB_PATH, busy_timeout: float = DEFAULT_BUSY_TIMEOUT):
        """
        Args:
            path: Location of the SQLite file
            busy_timeout: Seconds to wait on a locked database before failing
        """
        self.path = Path(path)
        self.busy_timeout = busy_timeout
        self._conn: Optional[aiosqlite.Connection] = None

    @property
    def is_open(self) -> bool:
        return self._conn is not None

    async def open(self) -> aiosqlite.Connection:
        """
        Open the database, creating the file and schema on first run.

        Calling open() on an already open store returns the existing
        connection.

        Raises:
            StorageUnavailable: If the file location cannot be created or opened
        """
        if self._conn is not None:
            return self._conn

        conn = None
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            conn = await aiosqlite.connect(self.path, timeout=self.busy_timeout)
            created = await create_schema(conn)
        except (OSError, aiosqlite.Error) as e:
            if conn is not None:
                await conn.close()
            log.error(f"Could not open database at {self.path}: {e}")
            raise StorageUnavailable(f"Could not open database at {self.path}: {e}") from e

        self._conn = conn
        if created:
            log.info(f"Local database initialized at {self.path}")
        else:
            log.info(f"Opened local database at {self.path}")
        return conn

    def _require_conn(self) -> aiosqlite.Connection:
        if self._conn is None:
            raise StorageClosed(f"Database at {self.path} is not open")
        return self._conn

    async def insert(self, user: User) -> int:
        """
        Insert a new user row.

        Args:
            user: User without an id

        Returns:
            The id assigned by the database

        Raises:
            ValueError: If the user already has an id
            StorageClosed: If the store is not open
            StorageError: If the row could not be written (nothing is kept)
        """
        if user.id is not None:
            raise ValueError(f"User already persisted with id {user.id}")
        conn = self._require_conn()

        row = user.to_db_dict()
        columns = ", ".join(row)
        placeholders = ", ".join("?" * len(row))
        try:
            async with conn.execute(
                f"INSERT INTO {USERS_TABLE} ({columns}) VALUES ({placeholders})",
                tuple(row.values()),
            ) as cursor:
                user_id = cursor.lastrowid
            await conn.commit()
        except aiosqlite.Error as e:
            log.error(f"Error inserting user into {self.path}: {e}")
            await self._rollback(conn)
            raise StorageError(f"Could not save user: {e}") from e

        log.info(f"Inserted user {user_id}")
        return user_id

    async def fetch_all(self) -> List[User]:
        """
        Get every stored user, in storage order.

        Returns:
            List of User objects (a snapshot, not a live cursor)

        Raises:
            StorageClosed: If the store is not open
            StorageError: If the table could not be read
        """
        conn = self._require_conn()

        users = []
        try:
            async with conn.execute(f"SELECT * FROM {USERS_TABLE}") as cursor:
                columns = [description[0] for description in cursor.description]
                async for row in cursor:
                    users.append(User.from_db_dict(dict(zip(columns, row))))
        except aiosqlite.Error as e:
            log.error(f"Error reading users from {self.path}: {e}")
            raise StorageError(f"Could not load users: {e}") from e

        log.info(f"Retrieved {len(users)} users")
        return users

    async def _rollback(self, conn: aiosqlite.Connection) -> None:
        try:
            await conn.rollback()
        except aiosqlite.Error as e:
            log.warning(f"Rollback failed on {self.path}: {e}")

    async def close(self) -> None:
        """Close the connection. Closing a closed store does nothing."""
        if self._conn is None:
            return
        conn, self._conn = self._conn, None
        await conn.close()
        log.info(f"Closed local database at {self.path}")

    async def __aenter__(self) -> "UserStore":
        await self.open()
        return self

    async def __aexit__(self, exc_type, exc, tb) -> None:
        await self.close()
