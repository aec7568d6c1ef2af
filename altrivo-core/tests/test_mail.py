"""
Tests for mail delivery providers.
"""

import json

import httpx
import pytest

from altrivo_core.config import MailConfig


def _config():
    return MailConfig(
        base_url="https://mail.test",
        api_token="token-123",
        sender="Altrivo <no-reply@altrivo.test>",
    )


class TestTemplateMailProvider:
    """Tests for the template API provider."""

    @pytest.mark.asyncio
    async def test_send_success(self):
        """Should post the template model and return the message id."""
        from altrivo_core.mail import TemplateMailProvider

        captured = {}

        def handler(request: httpx.Request) -> httpx.Response:
            captured["url"] = str(request.url)
            captured["token"] = request.headers["X-Postmark-Server-Token"]
            captured["body"] = json.loads(request.content)
            return httpx.Response(200, json={"ErrorCode": 0, "MessageID": "msg-1"})

        async with TemplateMailProvider(_config(), transport=httpx.MockTransport(handler)) as provider:
            result = await provider.send(
                "ada@example.com",
                "Verify Your Email",
                "user-activation-mail",
                {"otpCode": "4821", "expiryMinutes": 5},
            )

        assert result.success is True
        assert result.message_id == "msg-1"
        assert captured["url"] == "https://mail.test/email/withTemplate"
        assert captured["token"] == "token-123"
        assert captured["body"]["To"] == "ada@example.com"
        assert captured["body"]["TemplateAlias"] == "user-activation-mail"
        assert captured["body"]["TemplateModel"]["otpCode"] == "4821"
        assert captured["body"]["TemplateModel"]["subject"] == "Verify Your Email"

    @pytest.mark.asyncio
    async def test_send_rejected(self):
        """Provider error should come back as a failed result."""
        from altrivo_core.mail import TemplateMailProvider

        def handler(request: httpx.Request) -> httpx.Response:
            return httpx.Response(422, json={"ErrorCode": 300, "Message": "Invalid email request"})

        provider = TemplateMailProvider(_config(), transport=httpx.MockTransport(handler))
        result = await provider.send("bad", "Verify Your Email", "user-activation-mail", {})
        await provider.close()

        assert result.success is False
        assert result.error_code == "300"
        assert result.error_message == "Invalid email request"

    @pytest.mark.asyncio
    async def test_send_network_error(self):
        """Transport failure should not raise."""
        from altrivo_core.mail import TemplateMailProvider

        def handler(request: httpx.Request) -> httpx.Response:
            raise httpx.ConnectError("connection refused", request=request)

        provider = TemplateMailProvider(_config(), transport=httpx.MockTransport(handler))
        result = await provider.send("ada@example.com", "Verify Your Email", "forgot-password", {})
        await provider.close()

        assert result.success is False
        assert "connection refused" in result.error_message


class TestInMemoryMailer:
    """Tests for the outbox mailer."""

    @pytest.mark.asyncio
    async def test_records_mail(self):
        from altrivo_core.mail import InMemoryMailer

        mailer = InMemoryMailer()
        result = await mailer.send("ada@example.com", "Subject", "forgot-password", {"otpCode": "1234"})

        assert result.success is True
        assert mailer.last_for("ada@example.com").data == {"otpCode": "1234"}
        assert mailer.last_for("other@example.com") is None

    @pytest.mark.asyncio
    async def test_failing_mailer(self):
        from altrivo_core.mail import InMemoryMailer

        mailer = InMemoryMailer(fail=True)
        result = await mailer.send("ada@example.com", "Subject", "forgot-password", {})

        assert result.success is False
        assert mailer.outbox == []
