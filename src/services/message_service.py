"""
Message service - Delivery of contact form submissions

The form controller only depends on the MessageSender protocol; the EmailJS
REST transport below is the production collaborator.
"""

from typing import Dict, Optional, Protocol

import httpx
from pydantic import BaseModel, Field

from models.config import MessagingConfig
from models.domain.form import ContactPayload
from models.errors import SubmissionError
from utils.logger import get_logger, LogCategory

log = get_logger().for_category(LogCategory.MESSAGING)


class MessageSender(Protocol):
    """Delivers one contact message. Raises SubmissionError on any failure."""

    async def send(self, payload: ContactPayload) -> None: ...


class EmailJsRequest(BaseModel):
    """Body of the EmailJS send request"""
    service_id: str = Field(description="EmailJS service identifier")
    template_id: str = Field(description="EmailJS template identifier")
    user_id: str = Field(description="EmailJS public key")
    template_params: Dict[str, str] = Field(description="Template variables")


class EmailJsMessageSender:
    """
    Sends contact messages through the EmailJS REST API.

    Example:
        sender = EmailJsMessageSender(config.messaging)
        await sender.send(ContactPayload(name="Ada", email="ada@example.com", message="Hi"))
    """

    def __init__(self, config: MessagingConfig, client: Optional[httpx.AsyncClient] = None):
        self.config = config
        self._client = client

    def build_request(self, payload: ContactPayload) -> EmailJsRequest:
        return EmailJsRequest(
            service_id=self.config.service_id,
            template_id=self.config.template_id,
            user_id=self.config.public_key,
            template_params=payload.to_template_params(self.config.to_name),
        )

    async def send(self, payload: ContactPayload) -> None:
        body = self.build_request(payload).model_dump()

        try:
            if self._client is not None:
                response = await self._client.post(self.config.endpoint, json=body, timeout=self.config.timeout)
            else:
                async with httpx.AsyncClient(timeout=self.config.timeout) as client:
                    response = await client.post(self.config.endpoint, json=body)
        except httpx.HTTPError as e:
            log.error("Message delivery unreachable", error=str(e))
            raise SubmissionError(f"Message delivery unreachable: {e}") from e

        if response.status_code >= 400:
            log.error(
                "Message delivery rejected",
                status=response.status_code,
                body=response.text[:200],
            )
            raise SubmissionError(
                f"Message delivery rejected: HTTP {response.status_code}",
                status_code=response.status_code,
            )

        log.info("Message delivered", service=self.config.service_id)


def build_message_sender(
    config: MessagingConfig,
    client: Optional[httpx.AsyncClient] = None
) -> Optional[MessageSender]:
    """EmailJS sender, or None when delivery is not configured (collaborator unavailable)."""
    if not config.enabled:
        log.warn("Message delivery not configured; form submissions will fail")
        return None
    return EmailJsMessageSender(config, client=client)
