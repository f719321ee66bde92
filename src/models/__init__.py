"""
Models package - Enums, configuration and domain models for the interaction engine
"""

from .enums import (
    ThemePreference,
    TypewriterPhase,
    FormPhase,
    FormField,
    SubmissionOutcome,
    SkillCategory,
    LogLevel,
    LogCategory,
)
from .errors import EngineError, ValidationError, SubmissionError, PersistenceError

__all__ = [
    'ThemePreference',
    'TypewriterPhase',
    'FormPhase',
    'FormField',
    'SubmissionOutcome',
    'SkillCategory',
    'LogLevel',
    'LogCategory',
    'EngineError',
    'ValidationError',
    'SubmissionError',
    'PersistenceError',
]
