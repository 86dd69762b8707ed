"""Type-safe domain enums for body content types and TLS protocol versions."""

from __future__ import annotations

from enum import Enum


class ContentType(str, Enum):
    """MIME content type of a message body.

    Inherits from str so values compare equal to their MIME strings.

    Attributes:
        PLAIN: Plain-text body.
        HTML: HTML body, delivered verbatim.

    Example:
        >>> ContentType.HTML == "text/html"
        True
        >>> ContentType.for_html(False).value
        'text/plain'
    """

    PLAIN = "text/plain"
    HTML = "text/html"

    @classmethod
    def for_html(cls, is_html: bool) -> ContentType:
        """Return ``HTML`` when *is_html* is true, otherwise ``PLAIN``."""
        return cls.HTML if is_html else cls.PLAIN

    @property
    def subtype(self) -> str:
        """MIME subtype (``plain`` or ``html``)."""
        return self.value.split("/", 1)[1]


class TlsVersion(str, Enum):
    """Minimum TLS protocol versions accepted for SMTP connections.

    Example:
        >>> TlsVersion("TLSv1.3") is TlsVersion.TLSV1_3
        True
    """

    TLSV1_2 = "TLSv1.2"
    TLSV1_3 = "TLSv1.3"


__all__ = [
    "ContentType",
    "TlsVersion",
]
