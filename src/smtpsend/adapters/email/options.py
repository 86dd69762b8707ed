"""Composable option functions that configure an email sender.

Each ``with_*`` function returns a :data:`SenderOption`: a callable that
overwrites exactly one field of a mutable :class:`SenderSettings` record.
:func:`smtpsend.adapters.email.sender.new_email_sender` applies them left to
right, so a repeated option keeps only its last value.

Example:
    >>> settings = SenderSettings()
    >>> for option in (with_host("a.example.com"), with_port(25), with_host("b.example.com")):
    ...     option(settings)
    >>> settings.host, settings.port
    ('b.example.com', 25)
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass

from smtpsend.application.ports import DialAndSend

from .config import SenderConfig, TlsSettings
from .transport import dial_and_send


@dataclass(slots=True)
class SenderSettings:
    """Mutable settings record the options write into before it is frozen."""

    host: str = ""
    port: int = 0
    username: str = ""
    password: str = ""
    from_address: str = ""
    tls: TlsSettings | None = None
    use_ssl: bool = False
    dialer: DialAndSend = dial_and_send

    def freeze(self) -> SenderConfig:
        """Return the immutable :class:`SenderConfig` for these settings."""
        return SenderConfig(
            host=self.host,
            port=self.port,
            username=self.username,
            password=self.password,
            from_address=self.from_address,
            tls=self.tls,
            use_ssl=self.use_ssl,
        )


SenderOption = Callable[[SenderSettings], None]
"""A single-field mutation of :class:`SenderSettings`."""


def with_host(host: str) -> SenderOption:
    """Set the SMTP relay host name or address."""

    def _apply(settings: SenderSettings) -> None:
        settings.host = host

    return _apply


def with_port(port: int) -> SenderOption:
    """Set the SMTP relay port."""

    def _apply(settings: SenderSettings) -> None:
        settings.port = port

    return _apply


def with_username(username: str) -> SenderOption:
    """Set the login name; an empty name skips authentication."""

    def _apply(settings: SenderSettings) -> None:
        settings.username = username

    return _apply


def with_password(password: str) -> SenderOption:
    """Set the login password."""

    def _apply(settings: SenderSettings) -> None:
        settings.password = password

    return _apply


def with_from(from_address: str) -> SenderOption:
    """Set the sender address used for the envelope and ``From`` header."""

    def _apply(settings: SenderSettings) -> None:
        settings.from_address = from_address

    return _apply


def with_tls_settings(tls: TlsSettings | None) -> SenderOption:
    """Set the TLS parameters used for STARTTLS and implicit TLS."""

    def _apply(settings: SenderSettings) -> None:
        settings.tls = tls

    return _apply


def with_ssl(use_ssl: bool) -> SenderOption:
    """Select implicit TLS (SMTPS) instead of plain SMTP with STARTTLS."""

    def _apply(settings: SenderSettings) -> None:
        settings.use_ssl = use_ssl

    return _apply


def with_dialer(dialer: DialAndSend) -> SenderOption:
    """Replace the dial-and-send primitive (defaults to the SMTP transport)."""

    def _apply(settings: SenderSettings) -> None:
        settings.dialer = dialer

    return _apply


def options_from_config(config: SenderConfig) -> list[SenderOption]:
    """Translate a loaded :class:`SenderConfig` back into option functions.

    Lets file-based configuration and explicit options share one
    construction path; options appended afterwards override these.

    Example:
        >>> options = options_from_config(SenderConfig(host="smtp.example.com", port=587))
        >>> settings = SenderSettings()
        >>> for option in options:
        ...     option(settings)
        >>> settings.freeze() == SenderConfig(host="smtp.example.com", port=587)
        True
    """
    return [
        with_host(config.host),
        with_port(config.port),
        with_username(config.username),
        with_password(config.password),
        with_from(config.from_address),
        with_tls_settings(config.tls),
        with_ssl(config.use_ssl),
    ]


__all__ = [
    "SenderOption",
    "SenderSettings",
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
