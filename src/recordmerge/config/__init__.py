"""Application configuration helpers."""

from __future__ import annotations

from .env import env_choice, env_non_negative_int, optional_env_var
from .errors import ConfigurationError
from .logging import configure_logging
from .merge import MergeConfig, get_merge_config, parse_log_level

__all__ = [
    "ConfigurationError",
    "MergeConfig",
    "configure_logging",
    "env_choice",
    "env_non_negative_int",
    "get_merge_config",
    "optional_env_var",
    "parse_log_level",
]
