"""
Form state and field validation for user intake.

File: intake/form.py
Author: userform contributors
Created: 2026-10-14
Last Modified: 2026-10-17
"""

import re
from dataclasses import dataclass, fields
from datetime import date
from typing import Callable, Dict, Optional

from ..errors import ValidationError
from ..models import User

NAME_PATTERN = re.compile(r"^[a-zA-Z\s]+$")
NAME_INPUT_CHARS = re.compile(r"[^a-zA-Z\s]")
MIN_NAME_LENGTH = 3
MIN_PASSWORD_LENGTH = 6

# Earliest date the birth date picker offers
FIRST_BIRTH_DATE = date(1900, 1, 1)


@dataclass
class UserForm:
    """Current values of the five intake fields."""

    name: str = ""
    email: str = ""
    birth_date: str = ""
    address: str = ""
    password: str = ""

    def to_user(self) -> User:
        """Build an unpersisted User from the field values."""
        return User(
            name=self.name,
            email=self.email,
            birth_date=self.birth_date,
            address=self.address,
            password=self.password,
        )

    def fill(self, **values: str) -> None:
        """Set the given fields, leaving the rest untouched."""
        known = {f.name for f in fields(self)}
        for key, value in values.items():
            if key not in known:
                raise KeyError(f"Unknown form field: {key}")
            setattr(self, key, value)

    def clear(self) -> None:
        for f in fields(self):
            setattr(self, f.name, "")


def validate_name(value: str) -> Optional[str]:
    if not value:
        return "Name is required"
    if len(value) < MIN_NAME_LENGTH:
        return f"Name must be at least {MIN_NAME_LENGTH} characters"
    if not NAME_PATTERN.match(value):
        return "Name may only contain letters and spaces"
    return None


def validate_email(value: str) -> Optional[str]:
    # Presence of '@' is the only format check
    if not value or "@" not in value:
        return "Email is required and must be valid"
    return None


def validate_birth_date(value: str) -> Optional[str]:
    # Range is enforced when the date is picked, see pick_birth_date()
    if not value:
        return "Birth date is required"
    return None


def validate_address(value: str) -> Optional[str]:
    if not value:
        return "Address is required"
    return None


def validate_password(value: str) -> Optional[str]:
    if len(value) < MIN_PASSWORD_LENGTH:
        return f"Password is required and must be at least {MIN_PASSWORD_LENGTH} characters"
    return None


VALIDATORS: Dict[str, Callable[[str], Optional[str]]] = {
    "name": validate_name,
    "email": validate_email,
    "birth_date": validate_birth_date,
    "address": validate_address,
    "password": validate_password,
}


def validate_form(form: UserForm) -> Dict[str, str]:
    """
    Run every field validator.

    All fields are checked even after one fails, so the caller can show
    every message at once.

    Returns:
        Mapping of field name -> error message; empty when the form is valid
    """
    errors = {}
    for field_name, validator in VALIDATORS.items():
        message = validator(getattr(form, field_name))
        if message is not None:
            errors[field_name] = message
    return errors


def filter_name_input(text: str) -> str:
    """Drop characters that cannot be typed into the name field."""
    return NAME_INPUT_CHARS.sub("", text)


def pick_birth_date(value: str, today: Optional[date] = None) -> str:
    """
    Accept a birth date the way the date picker does.

    Args:
        value: Date as YYYY-MM-DD
        today: Upper bound (defaults to the current date)

    Returns:
        Normalized YYYY-MM-DD string

    Raises:
        ValidationError: If the value is malformed or outside [1900-01-01, today]
    """
    if today is None:
        today = date.today()

    try:
        picked = date.fromisoformat(value.strip())
    except ValueError as e:
        raise ValidationError("birth_date", "Birth date must be in YYYY-MM-DD format") from e

    if picked < FIRST_BIRTH_DATE or picked > today:
        raise ValidationError(
            "birth_date",
            f"Birth date must be between {FIRST_BIRTH_DATE.isoformat()} and {today.isoformat()}",
        )
    return picked.isoformat()
