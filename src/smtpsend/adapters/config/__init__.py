"""Configuration adapter - layered loading via lib_layered_config.

Contents:
    * :mod:`.loader` - Configuration loading with caching and profiles
"""

from __future__ import annotations

from .loader import get_config, get_default_config_path, validate_profile

__all__ = [
    "get_config",
    "get_default_config_path",
    "validate_profile",
]
