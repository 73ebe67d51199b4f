"""
Form capture, validation and listing for user intake.

File: intake/__init__.py
Author: userform contributors
Created: 2026-10-15
Last Modified: 2026-10-16
"""

from .form import (
    FIRST_BIRTH_DATE,
    UserForm,
    filter_name_input,
    pick_birth_date,
    validate_address,
    validate_birth_date,
    validate_email,
    validate_form,
    validate_name,
    validate_password,
)
from .formatting import render_empty_listing, render_errors, render_form, render_user_page
from .pagination import Page, get_page, page_count, paginate
from .workflow import IntakeWorkflow

__all__ = [
    "FIRST_BIRTH_DATE",
    "UserForm",
    "filter_name_input",
    "pick_birth_date",
    "validate_address",
    "validate_birth_date",
    "validate_email",
    "validate_form",
    "validate_name",
    "validate_password",
    "render_empty_listing",
    "render_errors",
    "render_form",
    "render_user_page",
    "Page",
    "get_page",
    "page_count",
    "paginate",
    "IntakeWorkflow",
]
