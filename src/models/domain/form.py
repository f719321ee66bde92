"""Contact form domain models"""

from dataclasses import dataclass, field
from typing import Dict, Mapping, Optional

from pydantic import BaseModel, Field

from models.enums import FormField, FormPhase

EMPTY_FIELDS: Mapping[str, str] = {f.value: "" for f in FormField}


@dataclass(frozen=True)
class FormState:
    """
    Snapshot of the contact form for the presentation layer.

    fields / errors are keyed by input name ("name", "email", "message").
    An empty error string means the field has no error.
    """
    fields: Dict[str, str] = field(default_factory=lambda: dict(EMPTY_FIELDS))
    errors: Dict[str, str] = field(default_factory=lambda: dict(EMPTY_FIELDS))
    phase: FormPhase = FormPhase.EDITING
    shaking: bool = False
    notice: Optional[str] = None

    @property
    def submitting(self) -> bool:
        return self.phase is FormPhase.SUBMITTING

    @property
    def succeeded(self) -> bool:
        return self.phase is FormPhase.SUCCEEDED

    @property
    def has_errors(self) -> bool:
        return any(self.errors.values())


class ContactPayload(BaseModel):
    """Validated form contents handed to the message delivery collaborator"""
    name: str = Field(description="Sender name")
    email: str = Field(description="Sender reply address")
    message: str = Field(description="Message body")

    def to_template_params(self, to_name: str) -> Dict[str, str]:
        """Template variables expected by the contact email template"""
        return {
            "from_name": self.name,
            "from_email": self.email,
            "message": self.message,
            "to_name": to_name,
        }
