"""Engine error taxonomy"""

from typing import Optional


class EngineError(Exception):
    """Base class for all interaction engine errors"""


class ValidationError(EngineError):
    """A single field failed validation (user-correctable, never fatal)"""

    def __init__(self, field: str, message: str):
        super().__init__(f"{field}: {message}")
        self.field = field
        self.message = message


class SubmissionError(EngineError):
    """Message delivery collaborator was unreachable or rejected the request"""

    def __init__(self, message: str, status_code: Optional[int] = None):
        super().__init__(message)
        self.status_code = status_code


class PersistenceError(EngineError):
    """Durable preference storage is unavailable or unreadable"""
