"""
Intake workflow: validate the form, persist it, refresh the listing.

File: intake/workflow.py
Author: userform contributors
Created: 2026-10-15
Last Modified: 2026-10-16
"""

import logging
from typing import List, Optional, Protocol

from ..errors import FormInvalid
from ..models import User
from .form import UserForm, validate_form
from .pagination import DEFAULT_ROWS_PER_PAGE, Page, get_page, page_count

log = logging.getLogger(__name__)


class RecordStore(Protocol):
    async def insert(self, user: User) -> int: ...

    async def fetch_all(self) -> List[User]: ...


class ProfileProvider(Protocol):
    async def fetch_profile(self) -> UserForm: ...


class IntakeWorkflow:
    """
    Ties the form to the store.

    The listing is never cached across sessions: `users` only holds the
    snapshot from the latest refresh().
    """

    def __init__(
        self,
        store: RecordStore,
        provider: Optional[ProfileProvider] = None,
        rows_per_page: int = DEFAULT_ROWS_PER_PAGE,
    ):
        self.store = store
        self.provider = provider
        self.rows_per_page = rows_per_page
        self.form = UserForm()
        self.users: List[User] = []

    async def submit(self) -> int:
        """
        Validate the form and insert it as a new user.

        Returns:
            The id assigned to the new user

        Raises:
            FormInvalid: If any field fails validation (the store is not called)
            StorageError: If the store cannot be written or read
        """
        errors = validate_form(self.form)
        if errors:
            log.info(f"Submission rejected, invalid fields: {', '.join(errors)}")
            raise FormInvalid(errors)

        user_id = await self.store.insert(self.form.to_user())
        log.info(f"Registered user {user_id}")

        await self.refresh()
        return user_id

    async def refresh(self) -> List[User]:
        """Re-query every stored user for the listing."""
        self.users = await self.store.fetch_all()
        return self.users

    async def prefill(self) -> UserForm:
        """
        Replace the form values with a random profile from the provider.

        Nothing is persisted. If the fetch fails the form keeps its values.

        Raises:
            FetchFailed: If the provider request fails
        """
        if self.provider is None:
            raise RuntimeError("No profile provider configured")

        profile = await self.provider.fetch_profile()
        self.form.fill(
            name=profile.name,
            email=profile.email,
            birth_date=profile.birth_date,
            address=profile.address,
            password=profile.password,
        )
        return self.form

    @property
    def page_count(self) -> int:
        return page_count(len(self.users), self.rows_per_page)

    def page(self, index: int = 0) -> Page[User]:
        return get_page(self.users, index, self.rows_per_page)
