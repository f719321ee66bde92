"""
Form Controller - Contact form validation and submission lifecycle
"""

import asyncio
import re
from typing import Dict, Mapping, Optional, Union

from lifecycle.task_registry import create_tracked_task, TaskCategory
from models.domain.form import FormState, ContactPayload, EMPTY_FIELDS
from models.enums import FormField, FormPhase, SubmissionOutcome
from models.errors import SubmissionError
from services.message_service import MessageSender
from utils.logger import get_logger, LogCategory

log = get_logger().for_category(LogCategory.FORM)

EMAIL_PATTERN = re.compile(r"^[^\s@]+@[^\s@]+\.[^\s@]+$")
FAILURE_NOTICE = "Submission failed. Try again."


def validate_field(field: FormField, value: str) -> str:
    """Error message for one field, "" when valid."""
    if field is FormField.NAME:
        return "" if value.strip() else "Name required"
    if field is FormField.EMAIL:
        if not value.strip():
            return "Email required"
        return "" if EMAIL_PATTERN.fullmatch(value) else "Invalid format"
    if field is FormField.MESSAGE:
        return "" if value.strip() else "Message required"
    return ""


def validate_fields(fields: Mapping[str, str]) -> Dict[str, str]:
    """
    Validate every form field.

    Pure function of its input: returns a mapping with an entry for every
    field, "" for valid ones.

    Example:
        validate_fields({"name": "", "email": "a@b.com", "message": "hi"})
        → {"name": "Name required", "email": "", "message": ""}
    """
    return {f.value: validate_field(f, fields.get(f.value, "")) for f in FormField}


def _resolve_field(name: Union[FormField, str]) -> FormField:
    if isinstance(name, FormField):
        return name
    try:
        return FormField(name)
    except ValueError:
        raise ValueError(f"Unknown form field: {name!r}") from None


class FormController:
    """
    Contact form state machine: EDITING / VALIDATION_FAILED / SUBMITTING / SUCCEEDED

    - update_field() is allowed in every phase; editing after a success
      dismisses the success indicator
    - submit() validates, then hands the fields to the injected sender.
      A second submit() while one is in flight is ignored
    - an invalid attempt raises a short "shaking" pulse that clears itself
    - a failed delivery keeps the fields and sets a one-shot notice

    Example:
        form = FormController(sender=fake_sender)
        form.update_field("name", "Ada")
        outcome = await form.submit()
    """

    def __init__(
        self,
        sender: Optional[MessageSender],
        shake_duration: float = 0.5,
        owner: Optional[str] = None,
    ):
        self.sender = sender
        self.shake_duration = shake_duration
        self.owner = owner

        self._fields: Dict[str, str] = dict(EMPTY_FIELDS)
        self._errors: Dict[str, str] = dict(EMPTY_FIELDS)
        self._phase = FormPhase.EDITING
        self._shaking = False
        self._notice: Optional[str] = None

        self._shake_task: Optional[asyncio.Task] = None
        self._torn_down = False

    # ------------------------------------------------------------
    # Read-only state
    # ------------------------------------------------------------

    @property
    def state(self) -> FormState:
        return FormState(
            fields=dict(self._fields),
            errors=dict(self._errors),
            phase=self._phase,
            shaking=self._shaking,
            notice=self._notice,
        )

    @property
    def phase(self) -> FormPhase:
        return self._phase

    @property
    def fields(self) -> Dict[str, str]:
        return dict(self._fields)

    @property
    def errors(self) -> Dict[str, str]:
        return dict(self._errors)

    @property
    def submitting(self) -> bool:
        return self._phase is FormPhase.SUBMITTING

    @property
    def succeeded(self) -> bool:
        return self._phase is FormPhase.SUCCEEDED

    @property
    def shaking(self) -> bool:
        return self._shaking

    @property
    def notice(self) -> Optional[str]:
        return self._notice

    # ------------------------------------------------------------
    # Editing
    # ------------------------------------------------------------

    def update_field(self, name: Union[FormField, str], value: str) -> None:
        field = _resolve_field(name)
        self._fields[field.value] = value
        self._errors[field.value] = ""

        if self._phase is FormPhase.SUCCEEDED:
            self._phase = FormPhase.EDITING
        elif self._phase is FormPhase.VALIDATION_FAILED and not any(self._errors.values()):
            self._phase = FormPhase.EDITING

    def dismiss_notice(self) -> None:
        self._notice = None

    def validate(self) -> Dict[str, str]:
        return validate_fields(self._fields)

    # ------------------------------------------------------------
    # Submission
    # ------------------------------------------------------------

    async def submit(self) -> SubmissionOutcome:
        if self._torn_down:
            log.warn("Submit on a torn-down form ignored")
            return SubmissionOutcome.IGNORED

        if self._phase is FormPhase.SUBMITTING:
            log.debug("Submit ignored: submission already in flight")
            return SubmissionOutcome.IGNORED

        self._notice = None
        self._errors = self.validate()

        if any(self._errors.values()):
            self._phase = FormPhase.VALIDATION_FAILED
            self._start_shake()
            log.warn(
                "Validation failed",
                fields=", ".join(k for k, v in self._errors.items() if v)
            )
            return SubmissionOutcome.INVALID

        self._phase = FormPhase.SUBMITTING
        payload = ContactPayload(**self._fields)
        outcome = SubmissionOutcome.FAILED

        try:
            if self.sender is None:
                raise SubmissionError("Message delivery unavailable")
            await self.sender.send(payload)
            outcome = SubmissionOutcome.SENT
        except SubmissionError as e:
            log.warn(f"Submission failed: {e}")
        except Exception as e:
            log.error(f"Message sender crashed: {e}", error_type=type(e).__name__)
        finally:
            self._finish_submission(outcome)

        return outcome

    def _finish_submission(self, outcome: SubmissionOutcome) -> None:
        """Single exit from SUBMITTING, whatever happened during delivery."""
        if self._torn_down:
            self._phase = FormPhase.EDITING
            return

        if outcome is SubmissionOutcome.SENT:
            self._fields = dict(EMPTY_FIELDS)
            self._phase = FormPhase.SUCCEEDED
            log.info("Message sent")
        else:
            self._phase = FormPhase.EDITING
            self._notice = FAILURE_NOTICE

    # ------------------------------------------------------------
    # Invalid-attempt pulse
    # ------------------------------------------------------------

    def _start_shake(self) -> None:
        if self._shake_task and not self._shake_task.done():
            self._shake_task.cancel()

        self._shaking = True
        self._shake_task = create_tracked_task(
            self._clear_shake_after(self.shake_duration),
            category=TaskCategory.FORM,
            description="Form shake pulse",
            owner=self.owner,
        )

    async def _clear_shake_after(self, delay: float) -> None:
        await asyncio.sleep(delay)
        if not self._torn_down:
            self._shaking = False

    # ------------------------------------------------------------
    # Teardown
    # ------------------------------------------------------------

    def teardown(self) -> None:
        """Cancel the pending shake timer; no callback runs afterwards."""
        self._torn_down = True
        if self._shake_task and not self._shake_task.done():
            self._shake_task.cancel()
        self._shake_task = None
        self._shaking = False
