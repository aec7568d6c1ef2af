"""
In-Memory Mailer
================
Outbox mailer for development and testing.
"""

import uuid
from typing import Any, Dict, List, Optional

from .models import OutgoingMail, SendResult


class InMemoryMailer:
    """
    Records mail instead of delivering it.

    For development and testing only.
    Use TemplateMailProvider in production.
    """

    def __init__(self, fail: bool = False):
        self.fail = fail
        self.outbox: List[OutgoingMail] = []

    async def send(
        self,
        to: str,
        subject: str,
        template: str,
        data: Dict[str, Any],
    ) -> SendResult:
        if self.fail:
            return SendResult(success=False, error_message="Delivery disabled")

        self.outbox.append(OutgoingMail(to=to, subject=subject, template=template, data=dict(data)))
        return SendResult(success=True, message_id=str(uuid.uuid4()))

    def last_for(self, to: str) -> Optional[OutgoingMail]:
        for mail in reversed(self.outbox):
            if mail.to == to:
                return mail
        return None
