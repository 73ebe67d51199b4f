"""
Shared fixtures for the userform test suite.
"""

import copy
import sqlite3
from contextlib import contextmanager
from typing import List

import pytest

from userform.intake import UserForm
from userform.models import User


SAMPLE_PAYLOAD = {
    "results": [
        {
            "gender": "female",
            "name": {"title": "Ms", "first": "Ana", "last": "Lopez"},
            "location": {
                "street": {"number": 4821, "name": "Calle Mayor"},
                "city": "Valencia",
                "state": "Comunidad Valenciana",
                "country": "Spain",
                "postcode": 46001,
            },
            "email": "ana.lopez@example.com",
            "login": {"username": "bluecat123", "password": "sunshine"},
            "dob": {"date": "1990-05-12T09:44:18.674Z", "age": 36},
        }
    ],
    "info": {"seed": "abc", "results": 1, "page": 1, "version": "1.4"},
}


class FakeStore:
    """In-memory stand-in that records every call."""

    def __init__(self):
        self.inserted: List[User] = []
        self.fetch_calls = 0

    async def insert(self, user: User) -> int:
        self.inserted.append(user)
        return len(self.inserted)

    async def fetch_all(self) -> List[User]:
        self.fetch_calls += 1
        return [
            user.model_copy(update={"id": i})
            for i, user in enumerate(self.inserted, 1)
        ]


class FakeProvider:
    def __init__(self, profile: UserForm = None, error: Exception = None):
        self.profile = profile
        self.error = error
        self.calls = 0

    async def fetch_profile(self) -> UserForm:
        self.calls += 1
        if self.error is not None:
            raise self.error
        return self.profile


@pytest.fixture
def db_path(tmp_path):
    return tmp_path / "data" / "users.db"


@pytest.fixture
def valid_form():
    return UserForm(
        name="Ana Lopez",
        email="ana@example.com",
        birth_date="1990-05-12",
        address="Calle 1, City",
        password="secret1",
    )


@pytest.fixture
def sample_payload():
    return copy.deepcopy(SAMPLE_PAYLOAD)


def make_user(name: str = "Ana Lopez", email: str = "ana@example.com") -> User:
    return User(
        name=name,
        email=email,
        birth_date="1990-05-12",
        address="Calle 1, City",
        password="secret1",
    )


@contextmanager
def exclusive_lock(path):
    """Hold an exclusive lock on the database file from a second connection."""
    blocker = sqlite3.connect(path, timeout=0)
    try:
        blocker.execute("BEGIN EXCLUSIVE")
        yield blocker
    finally:
        blocker.rollback()
        blocker.close()
