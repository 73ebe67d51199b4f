"""
randomuser.me API client used to pre-fill the intake form.

One request per call, no retries. Any non-200 response is a failure.

File: randomuser/client.py
Author: userform contributors
Created: 2026-10-15
Last Modified: 2026-10-16
"""

import asyncio
import logging
from typing import Any, Dict, Optional

import requests

from ..errors import FetchFailed
from ..intake.form import UserForm
from .convert import profile_from_payload

log = logging.getLogger(__name__)

RANDOM_USER_URL = "https://randomuser.me/api/"


class RandomUserClient:
    """
    Client for the random-user provider.
    """

    def __init__(self, url: str = RANDOM_USER_URL, timeout: Optional[float] = None):
        """
        Initialize the client.

        Args:
            url: Endpoint returning a random user as JSON
            timeout: Seconds to wait for the response; None waits indefinitely
        """
        self.url = url
        self.timeout = timeout
        self._request_count = 0

    def _get_payload(self) -> Dict[str, Any]:
        """Blocking GET; runs in a worker thread."""
        try:
            response = requests.get(self.url, timeout=self.timeout)
        except requests.RequestException as e:
            raise FetchFailed(f"Request to {self.url} failed: {e}") from e

        if response.status_code != 200:
            raise FetchFailed(
                f"Error fetching data from API (status {response.status_code})",
                status_code=response.status_code,
            )

        try:
            return response.json()
        except ValueError as e:
            raise FetchFailed(f"Invalid JSON from {self.url}: {e}", status_code=200) from e

    async def fetch_profile(self) -> UserForm:
        """
        Fetch one random user and convert it to form values.

        Returns:
            UserForm with all five fields populated

        Raises:
            FetchFailed: On transport errors, non-200 responses or malformed payloads
        """
        self._request_count += 1
        try:
            payload = await asyncio.to_thread(self._get_payload)
        except FetchFailed as e:
            log.warning(f"Random user fetch failed: {e}")
            raise

        try:
            profile = profile_from_payload(payload)
        except (KeyError, IndexError, TypeError, ValueError) as e:
            log.warning(f"Unexpected random user payload: {e!r}")
            raise FetchFailed(f"Unexpected payload from {self.url}: {e!r}", status_code=200) from e

        log.info("Fetched random user profile")
        return profile

    @property
    def request_count(self) -> int:
        """Number of API requests made."""
        return self._request_count
