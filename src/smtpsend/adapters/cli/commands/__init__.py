"""CLI command implementations registered on the root group.

Contents:
    * :func:`.info.cli_info` - Display package metadata.
    * :func:`.send_email.cli_send_email` - Send one email.
"""

from __future__ import annotations

from .info import cli_info
from .send_email import cli_send_email

__all__ = [
    "cli_info",
    "cli_send_email",
]
