"""Application layer - port definitions.

Contents:
    * :mod:`.ports` - Callable Protocol definitions for adapter functions
"""

from __future__ import annotations

from .ports import DialAndSend, GetConfig, InitLogging, LoadSenderConfigFromDict

__all__ = [
    "DialAndSend",
    "GetConfig",
    "InitLogging",
    "LoadSenderConfigFromDict",
]
