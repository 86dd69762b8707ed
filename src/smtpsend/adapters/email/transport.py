"""SMTP dial-and-send transport built on ``smtplib`` and ``email.message``.

Converts an :class:`~smtpsend.domain.message.OutgoingMessage` into a MIME
message and delivers it in a single SMTP transaction. Each call opens and
closes its own connection; nothing is pooled or retried, and every
transport error reaches the caller unchanged.
"""

from __future__ import annotations

import errno
import logging
import mimetypes
import smtplib
from email.message import EmailMessage
from email.utils import formatdate, make_msgid
from pathlib import Path

from smtpsend.domain.errors import NoSenderError
from smtpsend.domain.message import OutgoingMessage

from .config import SenderConfig

logger = logging.getLogger(__name__)

_FALLBACK_MIME_TYPE = "application/octet-stream"


def _guess_mime_type(path: Path) -> tuple[str, str]:
    """Return ``(maintype, subtype)`` for *path* based on its file name.

    Example:
        >>> _guess_mime_type(Path("report.pdf"))
        ('application', 'pdf')
        >>> _guess_mime_type(Path("blob.unknownext"))
        ('application', 'octet-stream')
    """
    mime_type, encoding = mimetypes.guess_type(path.name)
    if mime_type is None or encoding is not None:
        mime_type = _FALLBACK_MIME_TYPE
    maintype, subtype = mime_type.split("/", 1)
    return maintype, subtype


def build_mime_message(message: OutgoingMessage) -> EmailMessage:
    """Render *message* as an :class:`email.message.EmailMessage`.

    Attachments are read here, in order; a missing or unreadable file raises
    the underlying ``OSError`` before any connection is opened.

    Example:
        >>> from smtpsend.domain.enums import ContentType
        >>> mime = build_mime_message(OutgoingMessage(
        ...     from_address="a@example.com", recipients=("b@example.com", "c@example.com"),
        ...     subject="Hi", body="hello", content_type=ContentType.PLAIN,
        ... ))
        >>> mime["To"]
        'b@example.com, c@example.com'
        >>> mime.get_content_type()
        'text/plain'
    """
    mime = EmailMessage()
    mime["From"] = message.from_address
    mime["To"] = ", ".join(message.recipients)
    mime["Subject"] = message.subject
    mime["Date"] = formatdate(localtime=True)
    mime["Message-ID"] = make_msgid()
    mime.set_content(message.body, subtype=message.content_type.subtype)

    for path in message.attachments:
        maintype, subtype = _guess_mime_type(path)
        mime.add_attachment(
            path.read_bytes(),
            maintype=maintype,
            subtype=subtype,
            filename=path.name,
        )
    return mime


def _open_connection(config: SenderConfig) -> smtplib.SMTP:
    """Connect to the relay, using implicit TLS when ``use_ssl`` is set.

    ``smtplib`` replaces port 0 with its own default, so an unset port is
    refused here instead of silently dialing 25 or 465.
    """
    if config.port == 0:
        raise OSError(errno.EINVAL, f"no SMTP port configured for host {config.host!r}")
    if config.use_ssl:
        logger.debug("Connecting with implicit TLS", extra={"host": config.host, "port": config.port})
        return smtplib.SMTP_SSL(config.host, config.port, context=config.ssl_context())
    logger.debug("Connecting with plain SMTP", extra={"host": config.host, "port": config.port})
    return smtplib.SMTP(config.host, config.port)


def _negotiate(smtp: smtplib.SMTP, config: SenderConfig) -> None:
    """Greet the server, upgrade via STARTTLS when offered, then log in."""
    smtp.ehlo()
    if not config.use_ssl and smtp.has_extn("starttls"):
        logger.debug("Upgrading connection with STARTTLS", extra={"host": config.host})
        smtp.starttls(context=config.ssl_context())
        smtp.ehlo()
    if config.username:
        smtp.login(config.username, config.password)


def dial_and_send(message: OutgoingMessage, *, config: SenderConfig) -> None:
    """Deliver *message* through the SMTP relay described by *config*.

    Args:
        message: Transport record built by the sender.
        config: Connection, authentication and TLS settings.

    Raises:
        NoSenderError: ``message.from_address`` is empty; nothing is dialed.
        OSError: The port is unset (0), an attachment is unreadable, or the
            connection failed.
        ssl.SSLError: TLS negotiation failed.
        smtplib.SMTPException: The server rejected the session or message.
    """
    if not message.from_address:
        raise NoSenderError()
    mime = build_mime_message(message)
    try:
        with _open_connection(config) as smtp:
            _negotiate(smtp, config)
            smtp.send_message(
                mime,
                from_addr=message.from_address,
                to_addrs=list(message.recipients),
            )
    except (smtplib.SMTPException, OSError):
        logger.debug(
            "SMTP delivery failed",
            extra={"host": config.host, "port": config.port},
            exc_info=True,
        )
        raise


__all__ = [
    "build_mime_message",
    "dial_and_send",
]
