"""In-memory email adapters for testing.

Provides a dial-and-send double that satisfies the same Protocol as the SMTP
transport but opens no connections.

Contents:
    * :class:`DialerSpy` - Records every dispatched message.
    * :func:`load_sender_config_from_dict_in_memory` - In-memory config loader.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any

from ...domain.message import OutgoingMessage
from ..email.config import SenderConfig


@dataclass(frozen=True, slots=True)
class DialRecord:
    """One captured dial-and-send invocation."""

    message: OutgoingMessage
    config: SenderConfig


def _empty_record_list() -> list[DialRecord]:
    """Create an empty typed list for dial records."""
    return []


@dataclass
class DialerSpy:
    """Captures dial-and-send calls for test assertions.

    Each test should create its own spy. Calling the spy records the message
    first, then raises ``raise_exception`` when set, so tests can assert both
    that the transport was reached and that its error propagated.

    Attributes:
        sent: Captured invocations, in call order.
        raise_exception: When set, every call raises this exception.

    Example:
        >>> from smtpsend.domain.enums import ContentType
        >>> spy = DialerSpy()
        >>> msg = OutgoingMessage("a@example.com", ("b@example.com",), "Hi", "hello", ContentType.PLAIN)
        >>> spy(msg, config=SenderConfig())
        >>> spy.call_count
        1
    """

    sent: list[DialRecord] = field(default_factory=_empty_record_list)
    raise_exception: Exception | None = None

    @property
    def call_count(self) -> int:
        return len(self.sent)

    @property
    def last_message(self) -> OutgoingMessage:
        """Most recently dispatched message.

        Raises:
            IndexError: Nothing was dispatched yet.
        """
        return self.sent[-1].message

    def clear(self) -> None:
        """Reset captured data for next test."""
        self.sent.clear()
        self.raise_exception = None

    def __call__(self, message: OutgoingMessage, *, config: SenderConfig) -> None:
        self.sent.append(DialRecord(message=message, config=config))
        if self.raise_exception is not None:
            raise self.raise_exception


def load_sender_config_from_dict_in_memory(config_dict: Mapping[str, Any]) -> SenderConfig:
    """Parse sender config from dict using the real Pydantic model."""
    email_raw = config_dict.get("email", {})
    return SenderConfig.model_validate(email_raw if email_raw else {})


__all__ = [
    "DialRecord",
    "DialerSpy",
    "load_sender_config_from_dict_in_memory",
]
