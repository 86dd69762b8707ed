"""In-memory adapter implementations for testing.

Lightweight implementations of the application ports that operate entirely
in memory -- no filesystem, no SMTP, no logging framework.

Contents:
    * :mod:`.config` - In-memory configuration and logging adapters
    * :mod:`.email` - In-memory dial-and-send (DialerSpy) and config loader
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from .config import get_config_in_memory, init_logging_in_memory
from .email import DialerSpy, DialRecord, load_sender_config_from_dict_in_memory

# Static conformance assertions
if TYPE_CHECKING:
    from smtpsend.application.ports import (
        DialAndSend,
        GetConfig,
        InitLogging,
        LoadSenderConfigFromDict,
    )

    _assert_get_config: GetConfig = get_config_in_memory
    _assert_init_logging: InitLogging = init_logging_in_memory
    _assert_load_sender_config: LoadSenderConfigFromDict = load_sender_config_from_dict_in_memory
    _assert_dial_and_send: DialAndSend = DialerSpy()

__all__ = [
    "DialRecord",
    "DialerSpy",
    "get_config_in_memory",
    "init_logging_in_memory",
    "load_sender_config_from_dict_in_memory",
]
