"""In-memory configuration and logging adapters for testing.

Satisfy the same Protocols as the production adapters without touching the
filesystem or the lib_log_rich runtime.
"""

from __future__ import annotations

from lib_layered_config import Config


def get_config_in_memory(
    *,
    profile: str | None = None,
    start_dir: str | None = None,
) -> Config:
    """Return an empty in-memory Config."""
    return Config({}, {})


def init_logging_in_memory(config: Config) -> None:
    """No-op -- satisfies the InitLogging protocol without side effects."""


__all__ = [
    "get_config_in_memory",
    "init_logging_in_memory",
]
