"""
Mail Models
===========
Result and message types for transactional mail delivery.
"""

from dataclasses import dataclass, field
from typing import Any, Dict, Optional


@dataclass
class SendResult:
    """Outcome of a single mail delivery."""
    success: bool
    message_id: Optional[str] = None
    error_code: Optional[str] = None
    error_message: Optional[str] = None
    raw_response: Optional[Dict[str, Any]] = None


@dataclass
class OutgoingMail:
    """A templated mail as handed to a provider."""
    to: str
    subject: str
    template: str
    data: Dict[str, Any] = field(default_factory=dict)
