"""
Rich renderables for the intake form and the users listing.

File: intake/formatting.py
Author: userform contributors
Created: 2026-10-15
Last Modified: 2026-10-16
"""

from typing import Dict

from rich import box
from rich.table import Table
from rich.text import Text

from ..models import User
from .form import UserForm
from .pagination import Page

FIELD_LABELS = {
    "name": "Name",
    "email": "Email",
    "birth_date": "Birth Date",
    "address": "Address",
    "password": "Password",
}

MASK_CHAR = "•"


def mask_password(password: str) -> str:
    return MASK_CHAR * len(password)


def render_form(form: UserForm) -> Table:
    """Current field values, password obscured."""
    table = Table(title="Registration Form", box=box.ROUNDED, show_header=False)
    table.add_column("Field", style="cyan")
    table.add_column("Value", style="white")

    for field_name, label in FIELD_LABELS.items():
        value = getattr(form, field_name)
        if field_name == "password":
            value = mask_password(value)
        table.add_row(label, value or Text("-", style="dim"))

    return table


def render_errors(errors: Dict[str, str]) -> Text:
    """One line per invalid field."""
    text = Text()
    for i, (field_name, message) in enumerate(errors.items()):
        if i:
            text.append("\n")
        text.append(f"{FIELD_LABELS.get(field_name, field_name)}: ", style="bold red")
        text.append(message, style="red")
    return text


def render_user_page(page: Page[User]) -> Table:
    table = Table(
        title="Registered Users",
        caption=page.label,
        box=box.ROUNDED,
        show_header=True,
        header_style="bold",
    )
    table.add_column("Name", style="cyan")
    table.add_column("Email", style="white")
    table.add_column("Birth Date", style="dim")

    for user in page.rows:
        table.add_row(*user.to_table_row())

    return table


def render_empty_listing() -> Text:
    return Text("No users registered", style="dim italic")
