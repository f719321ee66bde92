"""
Tests for the contact form validation and submission lifecycle.
"""

import asyncio

import pytest

from conftest import RecordingSender, RejectingSender
from controllers.form_controller import (
    FAILURE_NOTICE,
    FormController,
    validate_field,
    validate_fields,
)
from lifecycle.task_registry import TaskRegistry
from models.domain.form import ContactPayload
from models.enums import FormField, FormPhase, SubmissionOutcome


def fill(form, name="Ada", email="ada@example.com", message="Hello there"):
    form.update_field("name", name)
    form.update_field("email", email)
    form.update_field("message", message)


class GatedSender:
    """Holds every send until the test opens the gate"""

    def __init__(self):
        self.started = asyncio.Event()
        self.gate = asyncio.Event()
        self.calls = 0

    async def send(self, payload: ContactPayload) -> None:
        self.calls += 1
        self.started.set()
        await self.gate.wait()


class TestValidation:
    """validate_fields() is a pure function of the field values."""

    def test_all_empty(self):
        errors = validate_fields({"name": "", "email": "", "message": ""})
        assert errors == {
            "name": "Name required",
            "email": "Email required",
            "message": "Message required",
        }

    def test_whitespace_only_counts_as_empty(self):
        assert validate_field(FormField.NAME, "   ") == "Name required"
        assert validate_field(FormField.MESSAGE, "\n\t") == "Message required"

    @pytest.mark.parametrize("email", [
        "ada", "ada@example", "ada @example.com", "@example.com", "ada@.com", "ada@example.com\n",
    ])
    def test_invalid_email_format(self, email):
        assert validate_field(FormField.EMAIL, email) == "Invalid format"

    @pytest.mark.parametrize("email", ["ada@example.com", "a.b+c@sub.example.org"])
    def test_valid_email(self, email):
        assert validate_field(FormField.EMAIL, email) == ""

    def test_missing_keys_are_empty(self):
        assert validate_fields({})["name"] == "Name required"


class TestEditing:

    def test_update_field_clears_only_that_error(self):
        form = FormController(RecordingSender())
        form._errors = validate_fields({})

        form.update_field("name", "A")

        assert form.errors["name"] == ""
        assert form.errors["email"] == "Email required"

    def test_unknown_field_rejected(self):
        form = FormController(RecordingSender())
        with pytest.raises(ValueError):
            form.update_field("phone", "123")

    def test_accepts_enum_field_names(self):
        form = FormController(RecordingSender())
        form.update_field(FormField.EMAIL, "x@y.z")
        assert form.fields["email"] == "x@y.z"


class TestSubmission:

    @pytest.mark.asyncio
    async def test_invalid_submission_never_reaches_sender(self):
        sender = RecordingSender()
        form = FormController(sender, shake_duration=0.01)

        outcome = await form.submit()

        assert outcome is SubmissionOutcome.INVALID
        assert form.phase is FormPhase.VALIDATION_FAILED
        assert form.errors["email"] == "Email required"
        assert sender.sent == []
        form.teardown()

    @pytest.mark.asyncio
    async def test_invalid_submission_shakes_briefly(self):
        form = FormController(RecordingSender(), shake_duration=0.02)

        await form.submit()
        assert form.shaking is True

        await asyncio.sleep(0.06)
        assert form.shaking is False

    @pytest.mark.asyncio
    async def test_fixing_all_errors_returns_to_editing(self):
        form = FormController(RecordingSender(), shake_duration=0.01)
        await form.submit()

        fill(form)

        assert form.phase is FormPhase.EDITING
        form.teardown()

    @pytest.mark.asyncio
    async def test_successful_submission(self):
        sender = RecordingSender()
        form = FormController(sender)
        fill(form)

        outcome = await form.submit()

        assert outcome is SubmissionOutcome.SENT
        assert form.succeeded
        assert form.fields == {"name": "", "email": "", "message": ""}
        assert sender.sent == [ContactPayload(name="Ada", email="ada@example.com", message="Hello there")]

    @pytest.mark.asyncio
    async def test_editing_after_success_dismisses_indicator(self):
        form = FormController(RecordingSender())
        fill(form)
        await form.submit()

        form.update_field("name", "B")

        assert form.phase is FormPhase.EDITING
        assert not form.succeeded

    @pytest.mark.asyncio
    async def test_failed_delivery_keeps_fields_and_sets_notice(self):
        sender = RejectingSender()
        form = FormController(sender)
        fill(form)

        outcome = await form.submit()

        assert outcome is SubmissionOutcome.FAILED
        assert form.phase is FormPhase.EDITING
        assert form.fields["name"] == "Ada"
        assert form.notice == FAILURE_NOTICE
        assert sender.attempts == 1

    @pytest.mark.asyncio
    async def test_crashing_sender_is_a_failure_not_an_exception(self):
        form = FormController(RejectingSender(RuntimeError("boom")))
        fill(form)

        assert await form.submit() is SubmissionOutcome.FAILED
        assert not form.submitting

    @pytest.mark.asyncio
    async def test_missing_sender_fails(self):
        form = FormController(None)
        fill(form)

        assert await form.submit() is SubmissionOutcome.FAILED
        assert form.notice == FAILURE_NOTICE

    @pytest.mark.asyncio
    async def test_notice_cleared_on_next_attempt(self):
        sender = RejectingSender()
        form = FormController(sender)
        fill(form)
        await form.submit()

        form.dismiss_notice()
        assert form.notice is None

        await form.submit()
        assert form.notice == FAILURE_NOTICE

    @pytest.mark.asyncio
    async def test_second_submit_while_in_flight_is_ignored(self):
        sender = GatedSender()
        form = FormController(sender)
        fill(form)

        first = asyncio.create_task(form.submit())
        await sender.started.wait()

        assert form.submitting
        assert await form.submit() is SubmissionOutcome.IGNORED

        sender.gate.set()
        assert await first is SubmissionOutcome.SENT
        assert sender.calls == 1


class TestTeardown:

    @pytest.mark.asyncio
    async def test_teardown_cancels_shake_timer(self):
        form = FormController(RecordingSender(), shake_duration=10, owner="form-under-test")
        await form.submit()
        assert TaskRegistry.instance().active(owner="form-under-test")

        form.teardown()
        await asyncio.sleep(0.01)

        assert form.shaking is False
        assert TaskRegistry.instance().active(owner="form-under-test") == []

    @pytest.mark.asyncio
    async def test_submit_after_teardown_is_ignored(self):
        sender = RecordingSender()
        form = FormController(sender)
        fill(form)
        form.teardown()

        assert await form.submit() is SubmissionOutcome.IGNORED
        assert sender.sent == []

    @pytest.mark.asyncio
    async def test_teardown_mid_flight_leaves_fields_alone(self):
        sender = GatedSender()
        form = FormController(sender)
        fill(form)

        pending = asyncio.create_task(form.submit())
        await sender.started.wait()
        form.teardown()
        sender.gate.set()
        await pending

        assert form.phase is FormPhase.EDITING
        assert form.fields["name"] == "Ada"
        assert form.notice is None


class TestTaskHousekeeping:

    @pytest.mark.asyncio
    async def test_repeated_invalid_submits_keep_registry_bounded(self):
        form = FormController(RecordingSender(), shake_duration=0)
        registry = TaskRegistry.instance()

        for _ in range(150):
            await form.submit()
            await asyncio.sleep(0)
        await asyncio.sleep(0.01)

        assert len(registry.list_all()) <= registry.history_limit
        assert registry.active() == []

    @pytest.mark.asyncio
    async def test_validation_failure_logged_as_warning(self, capsys):
        form = FormController(RecordingSender(), shake_duration=0)

        await form.submit()

        lines = [line for line in capsys.readouterr().err.splitlines() if "Validation failed" in line]
        assert lines
        assert "⚠" in lines[0]
        assert "✓" not in lines[0]
        form.teardown()
