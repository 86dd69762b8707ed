"""Sender configuration models and loader.

Provides the frozen :class:`SenderConfig` and :class:`TlsSettings` Pydantic
models and the loader that builds them from layered configuration
dictionaries.

The models deliberately accept empty hosts and zero ports: such values
surface as delivery-time failures from the transport, not as load errors.
"""

from __future__ import annotations

import ssl
from collections.abc import Mapping
from pathlib import Path
from typing import Any, cast

from pydantic import BaseModel, ConfigDict, field_validator, model_validator

from smtpsend.domain.enums import TlsVersion

_SSL_VERSIONS: dict[TlsVersion, ssl.TLSVersion] = {
    TlsVersion.TLSV1_2: ssl.TLSVersion.TLSv1_2,
    TlsVersion.TLSV1_3: ssl.TLSVersion.TLSv1_3,
}


class TlsSettings(BaseModel):
    """Named TLS parameters used for STARTTLS and implicit-TLS connections.

    Attributes:
        min_version: Lowest accepted protocol version; None keeps the
            ``ssl`` module default.
        verify: Verify the server certificate and hostname.
        ca_file: Extra CA bundle to trust instead of the system store.
        cert_file: Client certificate (PEM) for mutual TLS.
        key_file: Private key for ``cert_file`` when stored separately.

    Example:
        >>> settings = TlsSettings(min_version="TLSv1.3")
        >>> settings.to_ssl_context().minimum_version.name
        'TLSv1_3'
    """

    model_config = ConfigDict(frozen=True)

    min_version: TlsVersion | None = None
    verify: bool = True
    ca_file: Path | None = None
    cert_file: Path | None = None
    key_file: Path | None = None

    @field_validator("min_version", "ca_file", "cert_file", "key_file", mode="before")
    @classmethod
    def _coerce_empty_string_to_none(cls, v: Any) -> Any:
        """Treat empty strings from config files as "not configured"."""
        if isinstance(v, str) and not v.strip():
            return None
        return v

    @model_validator(mode="after")
    def _validate_client_certificate(self) -> TlsSettings:
        """Reject a private key configured without its certificate."""
        if self.key_file is not None and self.cert_file is None:
            raise ValueError("key_file requires cert_file")
        return self

    def to_ssl_context(self) -> ssl.SSLContext:
        """Build an ``ssl.SSLContext`` reflecting these settings.

        Raises:
            OSError: When a configured CA, certificate or key file cannot be read.
            ssl.SSLError: When the certificate or key is malformed.
        """
        context = ssl.create_default_context(cafile=str(self.ca_file) if self.ca_file is not None else None)
        if not self.verify:
            context.check_hostname = False
            context.verify_mode = ssl.CERT_NONE
        if self.min_version is not None:
            context.minimum_version = _SSL_VERSIONS[self.min_version]
        if self.cert_file is not None:
            context.load_cert_chain(
                certfile=self.cert_file,
                keyfile=self.key_file,
            )
        return context


class SenderConfig(BaseModel):
    """Immutable connection and authentication settings of an email sender.

    Every field defaults to its zero value, matching what a sender built
    without options carries.

    Example:
        >>> config = SenderConfig(host="smtp.example.com", port=587)
        >>> config.use_ssl
        False
        >>> config.tls is None
        True
    """

    model_config = ConfigDict(frozen=True)

    host: str = ""
    port: int = 0
    username: str = ""
    password: str = ""
    from_address: str = ""
    tls: TlsSettings | None = None
    use_ssl: bool = False

    @field_validator("tls", mode="before")
    @classmethod
    def _coerce_empty_table_to_none(cls, v: Any) -> Any:
        """An empty ``[email.tls]`` table means no TLS settings."""
        if isinstance(v, Mapping) and not v:
            return None
        return v

    def __repr__(self) -> str:
        """Return string representation with the password redacted.

        Example:
            >>> config = SenderConfig(host="smtp.example.com", password="secret123")
            >>> "secret123" in repr(config)
            False
            >>> "[REDACTED]" in repr(config)
            True
        """
        fields: list[str] = []
        for name, value in self:
            if name == "password" and value:
                fields.append(f"{name}='[REDACTED]'")
            else:
                fields.append(f"{name}={value!r}")
        return f"SenderConfig({', '.join(fields)})"

    def ssl_context(self) -> ssl.SSLContext:
        """Return the TLS context for this sender.

        Falls back to ``ssl.create_default_context()`` (certificate and
        hostname verification on) when no TLS settings are configured.
        """
        if self.tls is None:
            return ssl.create_default_context()
        return self.tls.to_ssl_context()


def load_sender_config_from_dict(config_dict: Mapping[str, Any]) -> SenderConfig:
    """Load SenderConfig from a configuration dictionary.

    Bridges lib_layered_config's dictionary output with the typed model.
    Reads the ``[email]`` section; a nested ``[email.tls]`` table becomes
    :class:`TlsSettings`.

    Args:
        config_dict: Configuration dictionary typically from lib_layered_config.

    Returns:
        Sender configuration with zero values for missing keys.

    Example:
        >>> config = load_sender_config_from_dict(
        ...     {"email": {"host": "smtp.example.com", "port": 465, "use_ssl": True, "tls": {"verify": False}}}
        ... )
        >>> config.port, config.use_ssl, config.tls.verify
        (465, True, False)
    """
    email_section: Any = config_dict.get("email", {})
    if not isinstance(email_section, Mapping):
        return SenderConfig.model_validate(email_section)
    email_raw = dict(cast(Mapping[str, Any], email_section))
    return SenderConfig.model_validate(email_raw)


__all__ = [
    "SenderConfig",
    "TlsSettings",
    "load_sender_config_from_dict",
]
