"""
Tests for form validation and the intake workflow.

These tests verify that:
1. Each invalid field yields exactly one message and blocks the store
2. A valid form is inserted once and the listing is refreshed
3. Provider pre-fill replaces the form only on success
"""

import asyncio
from datetime import date

import pytest

from userform.errors import FetchFailed, FormInvalid, StorageClosed, ValidationError
from userform.database import UserStore
from userform.intake import (
    IntakeWorkflow,
    UserForm,
    filter_name_input,
    pick_birth_date,
    validate_email,
    validate_form,
    validate_name,
    validate_password,
)

from conftest import FakeProvider, FakeStore


# =============================================================================
# FIELD VALIDATOR TESTS
# =============================================================================

class TestFieldValidators:
    """Test the individual field checks."""

    def test_name_required(self):
        assert validate_name("") == "Name is required"

    def test_name_too_short(self):
        assert "at least 3" in validate_name("Al")

    def test_name_rejects_digits(self):
        assert "letters and spaces" in validate_name("Al3x")

    def test_name_accepts_letters_and_spaces(self):
        assert validate_name("Ana Lopez") is None

    def test_name_rejects_accents(self):
        assert validate_name("José Ruiz") is not None

    def test_email_needs_at_sign(self):
        assert validate_email("noatsign.com") is not None
        assert validate_email("") is not None
        assert validate_email("a@b") is None

    def test_password_length(self):
        assert validate_password("abcde") is not None
        assert validate_password("abcdef") is None


# =============================================================================
# FORM VALIDATION TESTS
# =============================================================================

class TestValidateForm:
    """Test whole-form validation."""

    @pytest.mark.parametrize(
        "field_name, value",
        [
            ("name", "Al"),
            ("name", "Al3x"),
            ("email", "noatsign.com"),
            ("birth_date", ""),
            ("address", ""),
            ("password", "abcde"),
        ],
    )
    def test_single_invalid_field(self, valid_form, field_name, value):
        """Each bad value yields exactly one error, for that field."""
        valid_form.fill(**{field_name: value})

        errors = validate_form(valid_form)

        assert list(errors) == [field_name]

    def test_valid_form_has_no_errors(self, valid_form):
        assert validate_form(valid_form) == {}

    def test_all_fields_evaluated(self):
        """An empty form reports every field, not just the first."""
        errors = validate_form(UserForm())
        assert set(errors) == {"name", "email", "birth_date", "address", "password"}


# =============================================================================
# INPUT AFFORDANCE TESTS
# =============================================================================

class TestInputAffordances:
    """Test the name filter and birth date picker rules."""

    def test_filter_name_input(self):
        assert filter_name_input("Al3x O'Neil!") == "Alx ONeil"

    def test_pick_birth_date_normalizes(self):
        assert pick_birth_date(" 1990-05-12 ", today=date(2026, 1, 1)) == "1990-05-12"

    def test_pick_birth_date_bounds_inclusive(self):
        today = date(2026, 10, 16)
        assert pick_birth_date("1900-01-01", today=today) == "1900-01-01"
        assert pick_birth_date("2026-10-16", today=today) == "2026-10-16"

    def test_pick_birth_date_rejects_future(self):
        with pytest.raises(ValidationError) as exc_info:
            pick_birth_date("2026-10-17", today=date(2026, 10, 16))
        assert exc_info.value.field == "birth_date"

    def test_pick_birth_date_rejects_before_1900(self):
        with pytest.raises(ValidationError):
            pick_birth_date("1899-12-31", today=date(2026, 10, 16))

    def test_pick_birth_date_rejects_garbage(self):
        with pytest.raises(ValidationError, match="YYYY-MM-DD"):
            pick_birth_date("12/05/1990")

    def test_pick_birth_date_keeps_parse_error_as_cause(self):
        with pytest.raises(ValidationError) as exc_info:
            pick_birth_date("1990-13-45")
        assert isinstance(exc_info.value.__cause__, ValueError)


# =============================================================================
# WORKFLOW TESTS
# =============================================================================

class TestSubmit:
    """Test submission through the workflow."""

    def test_valid_submit_inserts_once(self, valid_form):
        store = FakeStore()
        workflow = IntakeWorkflow(store)
        workflow.form = valid_form

        user_id = asyncio.run(workflow.submit())

        assert user_id == 1
        assert len(store.inserted) == 1
        inserted = store.inserted[0]
        assert inserted.id is None
        assert (inserted.name, inserted.email, inserted.birth_date, inserted.address, inserted.password) == (
            "Ana Lopez", "ana@example.com", "1990-05-12", "Calle 1, City", "secret1",
        )

    def test_submit_refreshes_listing(self, valid_form):
        store = FakeStore()
        workflow = IntakeWorkflow(store)
        workflow.form = valid_form

        asyncio.run(workflow.submit())

        assert store.fetch_calls == 1
        assert len(workflow.users) == 1
        assert workflow.users[0].id == 1

    @pytest.mark.parametrize(
        "field_name, value",
        [
            ("name", "Al"),
            ("name", "Al3x"),
            ("email", "noatsign.com"),
            ("birth_date", ""),
            ("password", "abcde"),
        ],
    )
    def test_invalid_submit_never_calls_store(self, valid_form, field_name, value):
        store = FakeStore()
        workflow = IntakeWorkflow(store)
        workflow.form = valid_form
        workflow.form.fill(**{field_name: value})

        with pytest.raises(FormInvalid) as exc_info:
            asyncio.run(workflow.submit())

        assert list(exc_info.value.errors) == [field_name]
        assert store.inserted == []
        assert store.fetch_calls == 0

    def test_submit_with_real_store(self, db_path, valid_form):
        async def scenario():
            async with UserStore(db_path) as store:
                workflow = IntakeWorkflow(store)
                workflow.form = valid_form
                await workflow.submit()
                await workflow.submit()
                return workflow.users

        users = asyncio.run(scenario())
        assert [u.id for u in users] == [1, 2]

    def test_submit_on_closed_store(self, db_path, valid_form):
        workflow = IntakeWorkflow(UserStore(db_path))
        workflow.form = valid_form

        with pytest.raises(StorageClosed):
            asyncio.run(workflow.submit())
        assert workflow.users == []


class TestPrefill:
    """Test provider pre-fill."""

    def test_prefill_replaces_all_fields(self, valid_form):
        profile = UserForm(
            name="Maria Garcia",
            email="maria@example.com",
            birth_date="1985-01-30",
            address="12 Main St, Springfield, Ohio, United States",
            password="hunter22",
        )
        store = FakeStore()
        workflow = IntakeWorkflow(store, FakeProvider(profile=profile))
        workflow.form = valid_form

        form = asyncio.run(workflow.prefill())

        assert form == profile
        # Nothing persisted
        assert store.inserted == []

    def test_failed_prefill_keeps_form(self, valid_form):
        provider = FakeProvider(error=FetchFailed("boom", status_code=503))
        workflow = IntakeWorkflow(FakeStore(), provider)
        workflow.form = valid_form
        before = UserForm(**vars(valid_form))

        with pytest.raises(FetchFailed):
            asyncio.run(workflow.prefill())

        assert workflow.form == before
        assert provider.calls == 1

    def test_prefill_without_provider(self):
        workflow = IntakeWorkflow(FakeStore())
        with pytest.raises(RuntimeError):
            asyncio.run(workflow.prefill())


class TestListing:
    """Test paging over the workflow's snapshot."""

    def test_pages_of_five(self, valid_form):
        store = FakeStore()
        workflow = IntakeWorkflow(store)
        workflow.form = valid_form

        async def scenario():
            for _ in range(7):
                await workflow.submit()

        asyncio.run(scenario())

        assert workflow.page_count == 2
        assert len(workflow.page(0).rows) == 5
        assert len(workflow.page(1).rows) == 2
        assert workflow.page(1).label == "6–7 of 7"
