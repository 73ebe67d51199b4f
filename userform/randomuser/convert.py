"""
Convert randomuser.me API payloads into form field values.

File: randomuser/convert.py
Author: userform contributors
Created: 2026-10-15
Last Modified: 2026-10-16
"""

import logging
from datetime import datetime, timezone
from typing import Any, Dict

from ..intake.form import UserForm

log = logging.getLogger(__name__)


def format_birth_date(raw: str) -> str:
    """
    Format an ISO-8601 timestamp from the API as YYYY-MM-DD.

    Timestamps with an offset (e.g. "1993-07-20T09:44:18.674Z") are
    converted to UTC before the date is taken.
    """
    value = raw.strip()
    if value.endswith("Z"):
        value = value[:-1] + "+00:00"
    parsed = datetime.fromisoformat(value)
    if parsed.tzinfo is not None:
        parsed = parsed.astimezone(timezone.utc)
    return parsed.strftime("%Y-%m-%d")


def format_address(location: Dict[str, Any]) -> str:
    """Join the location sub-fields into one line."""
    street = location["street"]
    return (
        f"{street['number']} {street['name']}, "
        f"{location['city']}, {location['state']}, {location['country']}"
    )


def profile_from_payload(payload: Dict[str, Any]) -> UserForm:
    """
    Build form values from the first result of an API response.

    Args:
        payload: Decoded JSON body with a "results" list

    Returns:
        UserForm with all five fields populated

    Raises:
        KeyError, IndexError, TypeError, ValueError: If the payload is malformed
    """
    data = payload["results"][0]

    return UserForm(
        name=f"{data['name']['first']} {data['name']['last']}",
        email=data["email"],
        birth_date=format_birth_date(data["dob"]["date"]),
        address=format_address(data["location"]),
        password=data["login"]["password"],
    )
