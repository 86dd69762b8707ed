"""Static package metadata surfaced to the CLI and configuration layers.

Keeps the identifiers used by ``lib_layered_config`` (vendor, app, slug) and
the values printed by ``smtpsend info`` in one place.
"""

from __future__ import annotations

from typing import Final

name: Final[str] = "smtpsend"
title: Final[str] = "Configurable SMTP email sender with TLS/SSL support"
version: Final[str] = "1.0.0"
homepage: Final[str] = "https://github.com/smtpsend/smtpsend"
author: Final[str] = "smtpsend contributors"
author_email: Final[str] = "smtpsend@users.noreply.github.com"
shell_command: Final[str] = "smtpsend"

#: Identifiers lib_layered_config uses to derive platform-specific config paths.
LAYEREDCONF_VENDOR: Final[str] = "smtpsend"
LAYEREDCONF_APP: Final[str] = "smtpsend"
LAYEREDCONF_SLUG: Final[str] = "smtpsend"


def print_info() -> None:
    """Print the summarised metadata block used by ``smtpsend info``.

    Example:
        >>> print_info()  # doctest: +ELLIPSIS
        Info for smtpsend:
        ...
    """
    fields = [
        ("name", name),
        ("title", title),
        ("version", version),
        ("homepage", homepage),
        ("author", author),
        ("author_email", author_email),
        ("shell_command", shell_command),
    ]
    pad = max(len(label) for label, _ in fields)
    lines = [f"Info for {name}:", ""]
    lines.extend(f"    {label.ljust(pad)} = {value}" for label, value in fields)
    print("\n".join(lines))


__all__ = [
    "LAYEREDCONF_APP",
    "LAYEREDCONF_SLUG",
    "LAYEREDCONF_VENDOR",
    "author",
    "author_email",
    "homepage",
    "name",
    "print_info",
    "shell_command",
    "title",
    "version",
]
