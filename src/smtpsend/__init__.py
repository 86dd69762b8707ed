"""Public package surface: sender builder, option functions, messages, errors.

Example:
    >>> from smtpsend import Email, new_email_sender, with_from, with_host, with_port
    >>> sender = new_email_sender(with_host("smtp.example.com"), with_port(587), with_from("a@example.com"))
    >>> sender.send(Email(recipients=["b@example.com"], subject="Hi", body="hello"))  # doctest: +SKIP
"""

from __future__ import annotations

from .__init__conf__ import print_info
from .adapters.email import (
    EmailSender,
    SenderConfig,
    SenderOption,
    TlsSettings,
    dial_and_send,
    load_sender_config_from_dict,
    new_email_sender,
    with_dialer,
    with_from,
    with_host,
    with_password,
    with_port,
    with_ssl,
    with_tls_settings,
    with_username,
)
from .domain import (
    ConfigurationError,
    ContentType,
    Email,
    NoRecipientsError,
    NoSenderError,
    OutgoingMessage,
    TlsVersion,
    ValidationError,
)

__all__ = [
    "ConfigurationError",
    "ContentType",
    "Email",
    "EmailSender",
    "NoRecipientsError",
    "NoSenderError",
    "OutgoingMessage",
    "SenderConfig",
    "SenderOption",
    "TlsSettings",
    "TlsVersion",
    "ValidationError",
    "dial_and_send",
    "load_sender_config_from_dict",
    "new_email_sender",
    "print_info",
    "with_dialer",
    "with_from",
    "with_host",
    "with_password",
    "with_port",
    "with_ssl",
    "with_tls_settings",
    "with_username",
]
