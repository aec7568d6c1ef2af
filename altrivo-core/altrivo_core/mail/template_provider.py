"""
Template Mail Provider
======================
Production mailer for a Postmark-style template API.
"""

from typing import Any, Dict, Optional

import httpx
import structlog

from altrivo_core.config import MailConfig

from .models import SendResult

logger = structlog.get_logger(__name__)


class TemplateMailProvider:
    """
    Sends templated mail through ``POST /email/withTemplate``.

    Templates are stored on the provider side and addressed by alias;
    this class only supplies the template model.
    """

    name = "template-api"

    def __init__(
        self,
        config: Optional[MailConfig] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        """
        Args:
            config: API location, token and sender address
            transport: Optional httpx transport (tests use MockTransport)
        """
        self.config = config or MailConfig()
        self._transport = transport
        self._client: Optional[httpx.AsyncClient] = None

    async def __aenter__(self):
        await self._get_client()
        return self

    async def __aexit__(self, *args):
        await self.close()

    async def _get_client(self) -> httpx.AsyncClient:
        if self._client is None:
            self._client = httpx.AsyncClient(
                base_url=self.config.base_url,
                timeout=self.config.timeout,
                headers=self._get_headers(),
                transport=self._transport,
            )
        return self._client

    def _get_headers(self) -> Dict[str, str]:
        return {
            "Accept": "application/json",
            "Content-Type": "application/json",
            "X-Postmark-Server-Token": self.config.api_token,
        }

    async def close(self) -> None:
        if self._client:
            await self._client.aclose()
            self._client = None

    async def send(
        self,
        to: str,
        subject: str,
        template: str,
        data: Dict[str, Any],
    ) -> SendResult:
        """Send a templated mail."""
        payload = {
            "From": self.config.sender,
            "To": to,
            "TemplateAlias": template,
            "TemplateModel": {"subject": subject, **data},
        }

        try:
            client = await self._get_client()
            response = await client.post("/email/withTemplate", json=payload)
        except httpx.HTTPError as e:
            logger.error("Mail send failed", template=template, error=str(e))
            return SendResult(success=False, error_message=str(e))

        try:
            body = response.json()
        except ValueError:
            body = {}

        if response.status_code == 200 and body.get("ErrorCode", 0) == 0:
            return SendResult(
                success=True,
                message_id=body.get("MessageID"),
                raw_response=body,
            )

        logger.warning(
            "Mail rejected by provider",
            template=template,
            status_code=response.status_code,
            error_code=body.get("ErrorCode"),
        )
        return SendResult(
            success=False,
            error_code=str(body.get("ErrorCode", response.status_code)),
            error_message=body.get("Message", "Unknown error"),
            raw_response=body,
        )
