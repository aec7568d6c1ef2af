"""
Mailer Interface
================
Contract for outbound templated mail delivery.
"""

from typing import Any, Dict, Protocol

from .models import SendResult


class Mailer(Protocol):
    """Sends a templated mail; failures are reported, not raised."""

    async def send(
        self,
        to: str,
        subject: str,
        template: str,
        data: Dict[str, Any],
    ) -> SendResult:
        ...
