"""POSIX-conventional exit codes for CLI error paths.

Values follow errno and sysexits.h conventions:

* 0-1: generic success / failure
* 2: ENOENT (attachment missing)
* 22: EINVAL (invalid message, e.g. no recipients)
* 69: EX_UNAVAILABLE (SMTP, TLS or socket failure)
* 78: EX_CONFIG (no SMTP host configured)
"""

from __future__ import annotations

from enum import IntEnum


class ExitCode(IntEnum):
    """Exit codes raised via ``SystemExit`` by CLI commands.

    Example:
        >>> int(ExitCode.SMTP_FAILURE)
        69
    """

    SUCCESS = 0
    GENERAL_ERROR = 1
    FILE_NOT_FOUND = 2
    INVALID_ARGUMENT = 22
    SMTP_FAILURE = 69
    CONFIG_ERROR = 78


__all__ = ["ExitCode"]
