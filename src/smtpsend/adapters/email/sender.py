"""Email sender: validate a message, build the transport record, dispatch it.

Contents:
    * :class:`EmailSender` - Holds one frozen configuration and a dialer.
    * :func:`new_email_sender` - Build a sender from option functions.
"""

from __future__ import annotations

import logging

from smtpsend.application.ports import DialAndSend
from smtpsend.domain.message import Email, build_outgoing_message, require_recipients

from .config import SenderConfig
from .options import SenderOption, SenderSettings

logger = logging.getLogger(__name__)


class EmailSender:
    """Send messages through one SMTP relay configuration.

    The sender keeps no connection or history between calls, so a single
    instance can be reused for any number of sends and shared between
    threads.

    Example:
        >>> from smtpsend.adapters.memory import DialerSpy
        >>> spy = DialerSpy()
        >>> sender = EmailSender(SenderConfig(from_address="a@example.com"), dialer=spy)
        >>> sender.send(Email(recipients=["b@example.com"], subject="Hi", body="hello"))
        >>> spy.sent[0].message.from_address
        'a@example.com'
    """

    __slots__ = ("_config", "_dialer")

    def __init__(self, config: SenderConfig, *, dialer: DialAndSend) -> None:
        self._config = config
        self._dialer = dialer

    @property
    def config(self) -> SenderConfig:
        """The frozen configuration this sender delivers with."""
        return self._config

    def send(self, email: Email) -> None:
        """Validate *email* and deliver it in one SMTP transaction.

        Args:
            email: Message to send; read-only for the duration of the call.

        Raises:
            NoRecipientsError: ``email.recipients`` is empty. Raised before
                the dialer is touched.
            Exception: Whatever the dialer raises (connection, authentication,
                TLS or attachment I/O failures), propagated unchanged.
        """
        require_recipients(email)
        message = build_outgoing_message(email, from_address=self._config.from_address)

        logger.info(
            "Sending email",
            extra={
                "sender": message.from_address,
                "recipients": list(message.recipients),
                "subject": message.subject,
                "content_type": message.content_type.value,
                "attachment_count": len(message.attachments),
            },
        )
        self._dialer(message, config=self._config)
        logger.info(
            "Email sent",
            extra={"sender": message.from_address, "recipients": list(message.recipients)},
        )

    def __repr__(self) -> str:
        return f"EmailSender(config={self._config!r})"


def new_email_sender(*options: SenderOption) -> EmailSender:
    """Build an :class:`EmailSender` from option functions applied in order.

    Absent options leave their field at its zero value; no validation is
    done here, so an empty host only fails when a send is attempted.

    Example:
        >>> from smtpsend.adapters.email.options import with_host, with_port
        >>> sender = new_email_sender(with_host("smtp.example.com"), with_port(587))
        >>> sender.config.host, sender.config.port, sender.config.use_ssl
        ('smtp.example.com', 587, False)
    """
    settings = SenderSettings()
    for option in options:
        option(settings)
    return EmailSender(settings.freeze(), dialer=settings.dialer)


__all__ = [
    "EmailSender",
    "new_email_sender",
]
