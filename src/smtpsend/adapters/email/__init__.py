"""Email adapter - configurable SMTP sending.

Structure:
    * :mod:`.config` - SenderConfig / TlsSettings models and loader
    * :mod:`.options` - ``with_*`` option functions
    * :mod:`.sender` - EmailSender and new_email_sender
    * :mod:`.transport` - smtplib dial-and-send
"""

from __future__ import annotations

from .config import SenderConfig, TlsSettings, load_sender_config_from_dict
from .options import (
    SenderOption,
    options_from_config,
    with_dialer,
    with_from,
    with_host,
    with_password,
    with_port,
    with_ssl,
    with_tls_settings,
    with_username,
)
from .sender import EmailSender, new_email_sender
from .transport import dial_and_send

__all__ = [
    "EmailSender",
    "SenderConfig",
    "SenderOption",
    "TlsSettings",
    "dial_and_send",
    "load_sender_config_from_dict",
    "new_email_sender",
    "options_from_config",
    "with_dialer",
    "with_from",
    "with_host",
    "with_password",
    "with_port",
    "with_ssl",
    "with_tls_settings",
    "with_username",
]
