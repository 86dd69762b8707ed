"""Domain-specific exceptions for typed error handling at boundaries."""

from __future__ import annotations

NO_RECIPIENTS_MESSAGE = "no recipients specified"
NO_SENDER_MESSAGE = "no sender address specified"


class ValidationError(ValueError):
    """A message failed local validation before any transport work.

    Inherits from ValueError so callers that already guard message input
    with ``except ValueError`` keep working.

    Example:
        >>> from smtpsend.domain.errors import ValidationError
        >>> isinstance(ValidationError("bad message"), ValueError)
        True
    """


class NoRecipientsError(ValidationError):
    """The message to send has an empty recipient list.

    Always carries the fixed text ``"no recipients specified"`` so callers
    and log filters can match on it.

    Example:
        >>> str(NoRecipientsError())
        'no recipients specified'
    """

    def __init__(self) -> None:
        super().__init__(NO_RECIPIENTS_MESSAGE)


class NoSenderError(ValidationError):
    """The transport was asked to deliver a message without a sender address.

    Raised before dialing so an empty address never goes out as the null
    reverse-path used by bounce messages.

    Example:
        >>> str(NoSenderError())
        'no sender address specified'
    """

    def __init__(self) -> None:
        super().__init__(NO_SENDER_MESSAGE)


class ConfigurationError(Exception):
    """Missing or incomplete configuration detected at the CLI boundary.

    The library itself accepts any configuration (an empty host fails at
    delivery time); the CLI raises this before sending when no host is set.

    Example:
        >>> err = ConfigurationError("No SMTP host configured")
        >>> str(err)
        'No SMTP host configured'
    """


__all__ = [
    "NO_RECIPIENTS_MESSAGE",
    "NO_SENDER_MESSAGE",
    "ConfigurationError",
    "NoRecipientsError",
    "NoSenderError",
    "ValidationError",
]
