"""Service Container - Dependency injection container for the long-lived services"""

from dataclasses import dataclass
from typing import Optional

import httpx

from components.document_root import DocumentRoot
from models.config import EngineConfig
from models.domain.content import ContentRegistry
from services.message_service import MessageSender, build_message_sender
from services.preference_store import PreferenceStore
from services.theme_service import ThemeService


@dataclass
class ServiceContainer:
    """
    Services that outlive any single page view.

    Views (PageController) are created and destroyed against the same
    container, so the theme preference and the message sender are shared
    across remounts.

    Usage:
        services = ServiceContainer.build(config, content, store, root)
        page = PageController(services, viewport)
    """

    config: EngineConfig
    content: ContentRegistry
    theme_service: ThemeService
    message_sender: Optional[MessageSender] = None

    @classmethod
    def build(
        cls,
        config: EngineConfig,
        content: ContentRegistry,
        store: PreferenceStore,
        root: DocumentRoot,
        client: Optional[httpx.AsyncClient] = None,
    ) -> "ServiceContainer":
        return cls(
            config=config,
            content=content,
            theme_service=ThemeService(store, root, storage_key=config.theme.storage_key),
            message_sender=build_message_sender(config.messaging, client=client),
        )
