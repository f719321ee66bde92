"""
Enums for the portfolio interaction engine state machines
"""

from enum import Enum, auto


class ThemePreference(Enum):
    """
    Light/dark preference persisted in the durable preference store.

    Values are the exact strings written to storage.
    """
    LIGHT = "light"
    DARK = "dark"

    def flipped(self) -> "ThemePreference":
        return ThemePreference.DARK if self is ThemePreference.LIGHT else ThemePreference.LIGHT


class TypewriterPhase(Enum):
    """Typewriter state machine phases"""
    TYPING = auto()    # Appending one character per tick
    PAUSING = auto()   # Full phrase shown, waiting before deleting
    DELETING = auto()  # Removing one trailing character per tick


class FormPhase(Enum):
    """Contact form lifecycle"""
    EDITING = auto()
    VALIDATION_FAILED = auto()
    SUBMITTING = auto()
    SUCCEEDED = auto()


class FormField(Enum):
    """Contact form fields (value = input name)"""
    NAME = "name"
    EMAIL = "email"
    MESSAGE = "message"


class SubmissionOutcome(Enum):
    """Result of a single submit() call"""
    INVALID = auto()   # Validation failed, nothing sent
    SENT = auto()      # Collaborator accepted the message
    FAILED = auto()    # Collaborator rejected or unavailable
    IGNORED = auto()   # Re-entrant call while a submission is in flight


class SkillCategory(Enum):
    """Skill registry groups (value = label used in content files)"""
    CORE = "Core"
    TOOLS = "Tools"
    TESTING = "Testing"
    SPECIALIZED = "Specialized"


class LogLevel(Enum):
    """Log severity levels"""
    DEBUG = auto()
    INFO = auto()
    WARN = auto()
    ERROR = auto()


class LogCategory(Enum):
    """Log categories for grouping related events"""
    CONFIG = auto()      # Configuration and content loading
    THEME = auto()       # Theme preference changes, storage
    ANIMATION = auto()   # Typewriter and animation engine
    SCROLL = auto()      # Scroll / intersection derived signals
    NAVIGATION = auto()  # Menu and anchor navigation
    FORM = auto()        # Contact form lifecycle
    MESSAGING = auto()   # Message delivery collaborator
    PARTICLES = auto()   # Decorative particle generation

    LIFECYCLE = auto()
    TASK = auto()
    SYSTEM = auto()      # Startup, shutdown, errors

    GENERAL = auto()     # Default general category
