"""
Mail Delivery
=============
Templated transactional mail used to deliver verification codes.
"""

from .models import SendResult, OutgoingMail
from .base import Mailer
from .template_provider import TemplateMailProvider
from .in_memory import InMemoryMailer

__all__ = [
    "SendResult",
    "OutgoingMail",
    "Mailer",
    "TemplateMailProvider",
    "InMemoryMailer",
]
