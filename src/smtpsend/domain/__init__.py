"""Domain layer - pure message logic with no I/O or framework dependencies.

Contents:
    * :mod:`.message` - Email / OutgoingMessage values and their preparation
    * :mod:`.enums` - Domain enumerations (ContentType, TlsVersion)
    * :mod:`.errors` - Domain exception types
"""

from __future__ import annotations

from .enums import ContentType, TlsVersion
from .errors import ConfigurationError, NoRecipientsError, NoSenderError, ValidationError
from .message import Email, OutgoingMessage, build_outgoing_message, require_recipients

__all__ = [
    # Messages
    "Email",
    "OutgoingMessage",
    "build_outgoing_message",
    "require_recipients",
    # Enums
    "ContentType",
    "TlsVersion",
    # Errors
    "ConfigurationError",
    "NoRecipientsError",
    "NoSenderError",
    "ValidationError",
]
