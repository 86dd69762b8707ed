"""Application ports: callable Protocol definitions for adapter functions.

Each Protocol class defines a ``__call__`` method whose signature matches the
corresponding adapter function, so module-level functions and bound methods
satisfy them structurally (PEP 544).

System Role:
    Sits between domain and adapters. Infrastructure types (``Config``,
    ``SenderConfig``) are imported under ``TYPE_CHECKING`` only.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import TYPE_CHECKING, Any, Protocol

from ..domain.message import OutgoingMessage

if TYPE_CHECKING:
    from lib_layered_config import Config

    from ..adapters.email.config import SenderConfig


class DialAndSend(Protocol):
    """Open a connection, deliver one message, close the connection.

    Returns normally on success; transport failures propagate unchanged.
    """

    def __call__(self, message: OutgoingMessage, *, config: SenderConfig) -> None: ...


class GetConfig(Protocol):
    """Load layered configuration with application defaults."""

    def __call__(self, *, profile: str | None = ..., start_dir: str | None = ...) -> Config: ...


class LoadSenderConfigFromDict(Protocol):
    """Load SenderConfig from a configuration dictionary."""

    def __call__(self, config_dict: Mapping[str, Any]) -> SenderConfig: ...


class InitLogging(Protocol):
    """Initialize lib_log_rich runtime with the provided configuration."""

    def __call__(self, config: Config) -> None: ...


__all__ = [
    "DialAndSend",
    "GetConfig",
    "InitLogging",
    "LoadSenderConfigFromDict",
]
