"""Adapters layer - infrastructure and framework integrations.

Contents:
    * :mod:`.email` - Sender configuration, builder and SMTP transport
    * :mod:`.config` - Layered configuration loading
    * :mod:`.logging` - Logging setup with lib_log_rich
    * :mod:`.memory` - In-memory adapters for tests
    * :mod:`.cli` - rich-click command-line interface
"""

from __future__ import annotations

__all__: list[str] = []
