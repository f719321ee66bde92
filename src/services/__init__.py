"""Services layer"""

from .preference_store import PreferenceStore, MemoryPreferenceStore, JsonPreferenceStore
from .theme_service import ThemeService
from .message_service import MessageSender, EmailJsMessageSender, build_message_sender
from .service_container import ServiceContainer

__all__ = [
    "PreferenceStore",
    "MemoryPreferenceStore",
    "JsonPreferenceStore",
    "ThemeService",
    "MessageSender",
    "EmailJsMessageSender",
    "build_message_sender",
    "ServiceContainer",
]
