"""Shared pytest fixtures for sender, transport and CLI tests.

Fixtures use descriptive names that read as plain English; tests pick them up
implicitly through pytest's conftest discovery.
"""

from __future__ import annotations

import re
from collections.abc import Callable, Iterator
from dataclasses import dataclass, fields
from pathlib import Path
from typing import TYPE_CHECKING, Any

import lib_cli_exit_tools
import pytest
from click.testing import CliRunner
from lib_layered_config import Config

from smtpsend.adapters.memory import DialerSpy

if TYPE_CHECKING:
    from smtpsend.composition import AppServices


def _load_dotenv() -> None:
    """Load .env file when it exists for integration test configuration."""
    from dotenv import load_dotenv

    env_file = Path(__file__).parent.parent / ".env"
    if env_file.exists():
        load_dotenv(env_file)


_load_dotenv()

ANSI_ESCAPE_PATTERN = re.compile(r"\x1B\[[0-?]*[ -/]*[@-~]")
CONFIG_FIELDS: tuple[str, ...] = tuple(field.name for field in fields(type(lib_cli_exit_tools.config)))


def _snapshot_cli_config() -> dict[str, object]:
    """Capture every attribute from ``lib_cli_exit_tools.config``."""
    return {name: getattr(lib_cli_exit_tools.config, name) for name in CONFIG_FIELDS}


def _restore_cli_config(snapshot: dict[str, object]) -> None:
    """Reapply a configuration snapshot captured by ``_snapshot_cli_config``."""
    for name, value in snapshot.items():
        setattr(lib_cli_exit_tools.config, name, value)


@pytest.fixture
def cli_runner() -> CliRunner:
    """Provide a fresh CliRunner per test."""
    return CliRunner()


@pytest.fixture
def strip_ansi() -> Callable[[str], str]:
    """Return a helper that strips ANSI escape sequences from a string."""

    def _strip(value: str) -> str:
        return ANSI_ESCAPE_PATTERN.sub("", value)

    return _strip


@pytest.fixture
def managed_traceback_state() -> Iterator[None]:
    """Reset traceback flags to a known baseline and restore after the test."""
    lib_cli_exit_tools.reset_config()
    lib_cli_exit_tools.config.traceback = False
    lib_cli_exit_tools.config.traceback_force_color = False
    snapshot = _snapshot_cli_config()
    try:
        yield
    finally:
        _restore_cli_config(snapshot)


@pytest.fixture
def clear_config_cache() -> Iterator[None]:
    """Clear the get_config cache before the test."""
    from smtpsend.adapters.config import loader as config_mod

    config_mod.get_config.cache_clear()
    yield


@pytest.fixture
def dialer_spy() -> DialerSpy:
    """Provide a fresh in-memory dial-and-send double."""
    return DialerSpy()


@pytest.fixture
def attachment_files(tmp_path: Path) -> list[Path]:
    """Create three small files of different types to attach, in a fixed order."""
    files = {
        "notes.txt": b"plain notes\n",
        "report.pdf": b"%PDF-1.4 fake\n",
        "photo.png": b"\x89PNG\r\n\x1a\nfake",
    }
    paths: list[Path] = []
    for name, content in files.items():
        path = tmp_path / name
        path.write_bytes(content)
        paths.append(path)
    return paths


@dataclass
class EmailCliContext:
    """Services factory plus the spy that captures what the CLI dispatched."""

    factory: Callable[[], Any]
    spy: DialerSpy


@pytest.fixture
def email_cli_context(
    clear_config_cache: None,
) -> Callable[[dict[str, Any]], EmailCliContext]:
    """Create a CLI services factory with an injected ``[email]`` section.

    Replaces only the I/O boundaries (config loading and dial-and-send);
    logging and config parsing stay real.

    Example:
        def test_send(cli_runner, email_cli_context) -> None:
            ctx = email_cli_context({"host": "smtp.test.com", "from_address": "a@test.com"})
            result = cli_runner.invoke(cli, ["send-email", "--to", "b@test.com"], obj=ctx.factory)
            assert ctx.spy.call_count == 1
    """
    from smtpsend.composition import AppServices, build_production

    def _create(email_data: dict[str, Any]) -> EmailCliContext:
        spy = DialerSpy()
        config = Config({"email": email_data}, {})
        prod = build_production()

        def _fake_get_config(**_kwargs: Any) -> Config:
            return config

        services: AppServices = AppServices(
            get_config=_fake_get_config,
            init_logging=prod.init_logging,
            load_sender_config_from_dict=prod.load_sender_config_from_dict,
            dial_and_send=spy,
        )
        return EmailCliContext(factory=lambda: services, spy=spy)

    return _create
