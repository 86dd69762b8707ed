"""Message value objects and the pure functions that prepare them for transport.

Contents:
    * :class:`Email` - Caller-supplied message description.
    * :class:`OutgoingMessage` - Transport-level record handed to the dialer.
    * :func:`require_recipients` - Recipient presence check.
    * :func:`build_outgoing_message` - Assemble the transport record.
"""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass, field
from pathlib import Path

from .enums import ContentType
from .errors import NoRecipientsError


def _as_str_tuple(values: Iterable[str] | str) -> tuple[str, ...]:
    if isinstance(values, str):
        return (values,)
    return tuple(values)


def _as_path_tuple(values: Iterable[str | Path] | str | Path) -> tuple[Path, ...]:
    if isinstance(values, (str, Path)):
        return (Path(values),)
    return tuple(Path(value) for value in values)


@dataclass(frozen=True, slots=True)
class Email:
    """A message to send: recipients, subject, body and attachments.

    Recipient and attachment sequences are copied into tuples so the value
    stays read-only for the duration of a send. A bare string recipient is
    treated as a single address, and a bare string or Path as a single
    attachment.

    Example:
        >>> email = Email(recipients=["b@example.com"], subject="Hi", body="hello")
        >>> email.recipients
        ('b@example.com',)
        >>> email.is_html
        False
    """

    recipients: tuple[str, ...] = ()
    subject: str = ""
    body: str = ""
    is_html: bool = False
    attachments: tuple[Path, ...] = field(default=())

    def __post_init__(self) -> None:
        object.__setattr__(self, "recipients", _as_str_tuple(self.recipients))
        object.__setattr__(self, "attachments", _as_path_tuple(self.attachments))


@dataclass(frozen=True, slots=True)
class OutgoingMessage:
    """Transport-level message record consumed by a dial-and-send primitive.

    Attributes:
        from_address: Envelope and header sender.
        recipients: Envelope and ``To`` recipients, in order.
        subject: Subject header, verbatim.
        body: Body text, verbatim (no escaping or sanitising).
        content_type: ``text/plain`` or ``text/html``.
        attachments: Files to attach, in order; read by the transport.
    """

    from_address: str
    recipients: tuple[str, ...]
    subject: str
    body: str
    content_type: ContentType
    attachments: tuple[Path, ...] = ()


def require_recipients(email: Email) -> None:
    """Raise :class:`NoRecipientsError` when *email* has no recipients.

    Example:
        >>> require_recipients(Email(recipients=["a@example.com"]))
        >>> require_recipients(Email())  # doctest: +IGNORE_EXCEPTION_DETAIL
        Traceback (most recent call last):
        ...
        NoRecipientsError: no recipients specified
    """
    if not email.recipients:
        raise NoRecipientsError()


def build_outgoing_message(email: Email, *, from_address: str) -> OutgoingMessage:
    """Assemble the transport record for *email* sent from *from_address*.

    Example:
        >>> msg = build_outgoing_message(
        ...     Email(recipients=["b@example.com"], subject="Hi", body="<b>hi</b>", is_html=True),
        ...     from_address="a@example.com",
        ... )
        >>> msg.content_type.value
        'text/html'
        >>> msg.body
        '<b>hi</b>'
    """
    return OutgoingMessage(
        from_address=from_address,
        recipients=email.recipients,
        subject=email.subject,
        body=email.body,
        content_type=ContentType.for_html(email.is_html),
        attachments=email.attachments,
    )


__all__ = [
    "Email",
    "OutgoingMessage",
    "build_outgoing_message",
    "require_recipients",
]
