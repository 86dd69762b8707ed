"""Composition root wiring adapters to application ports."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from ..adapters.config.loader import get_config
from ..adapters.email.config import load_sender_config_from_dict
from ..adapters.email.transport import dial_and_send
from ..adapters.logging.setup import init_logging

# pyright checks that each adapter structurally satisfies its Protocol.
if TYPE_CHECKING:
    from ..adapters.memory.email import DialerSpy
    from ..application.ports import (
        DialAndSend,
        GetConfig,
        InitLogging,
        LoadSenderConfigFromDict,
    )

    _assert_get_config: GetConfig = get_config
    _assert_init_logging: InitLogging = init_logging
    _assert_load_sender_config_from_dict: LoadSenderConfigFromDict = load_sender_config_from_dict
    _assert_dial_and_send: DialAndSend = dial_and_send


@dataclass(frozen=True, slots=True)
class AppServices:
    """Frozen container holding all application port implementations."""

    get_config: GetConfig
    init_logging: InitLogging
    load_sender_config_from_dict: LoadSenderConfigFromDict
    dial_and_send: DialAndSend


def build_production() -> AppServices:
    """Wire production adapters into an AppServices container."""
    return AppServices(
        get_config=get_config,
        init_logging=init_logging,
        load_sender_config_from_dict=load_sender_config_from_dict,
        dial_and_send=dial_and_send,
    )


def build_testing(*, spy: DialerSpy | None = None) -> AppServices:
    """Wire in-memory adapters into an AppServices container.

    Args:
        spy: DialerSpy to capture dispatched messages; a fresh one when None.
            Pass your own to assert on what was sent.
    """
    from ..adapters.memory import (
        DialerSpy,
        get_config_in_memory,
        init_logging_in_memory,
        load_sender_config_from_dict_in_memory,
    )

    return AppServices(
        get_config=get_config_in_memory,
        init_logging=init_logging_in_memory,
        load_sender_config_from_dict=load_sender_config_from_dict_in_memory,
        dial_and_send=spy if spy is not None else DialerSpy(),
    )


__all__ = [
    "AppServices",
    "build_production",
    "build_testing",
]
