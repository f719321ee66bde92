"""
Tests for the EmailJS message sender, using httpx.MockTransport.
"""

import json

import httpx
import pytest

from models.config import MessagingConfig
from models.domain.form import ContactPayload
from models.errors import SubmissionError
from services.message_service import EmailJsMessageSender, build_message_sender

CONFIG = MessagingConfig(
    service_id="service_x",
    template_id="template_y",
    public_key="public_z",
    to_name="Portfolio Owner",
)

PAYLOAD = ContactPayload(name="Ada", email="ada@example.com", message="Hello")


def client_for(handler) -> httpx.AsyncClient:
    return httpx.AsyncClient(transport=httpx.MockTransport(handler))


class TestEmailJsMessageSender:

    @pytest.mark.asyncio
    async def test_posts_template_params(self):
        captured = {}

        def handler(request: httpx.Request) -> httpx.Response:
            captured["url"] = str(request.url)
            captured["body"] = json.loads(request.content)
            return httpx.Response(200, text="OK")

        async with client_for(handler) as client:
            await EmailJsMessageSender(CONFIG, client=client).send(PAYLOAD)

        assert captured["url"] == CONFIG.endpoint
        assert captured["body"] == {
            "service_id": "service_x",
            "template_id": "template_y",
            "user_id": "public_z",
            "template_params": {
                "from_name": "Ada",
                "from_email": "ada@example.com",
                "message": "Hello",
                "to_name": "Portfolio Owner",
            },
        }

    @pytest.mark.asyncio
    async def test_rejection_raises_submission_error(self):
        def handler(request: httpx.Request) -> httpx.Response:
            return httpx.Response(400, text="The template ID is invalid")

        async with client_for(handler) as client:
            with pytest.raises(SubmissionError) as exc_info:
                await EmailJsMessageSender(CONFIG, client=client).send(PAYLOAD)

        assert exc_info.value.status_code == 400

    @pytest.mark.asyncio
    async def test_unreachable_raises_submission_error(self):
        def handler(request: httpx.Request) -> httpx.Response:
            raise httpx.ConnectError("connection refused", request=request)

        async with client_for(handler) as client:
            with pytest.raises(SubmissionError) as exc_info:
                await EmailJsMessageSender(CONFIG, client=client).send(PAYLOAD)

        assert exc_info.value.status_code is None


class TestBuildMessageSender:

    def test_disabled_without_credentials(self):
        assert build_message_sender(MessagingConfig()) is None

    def test_enabled_with_credentials(self):
        assert isinstance(build_message_sender(CONFIG), EmailJsMessageSender)
