"""Merge driver configuration values."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Final

from .env import env_choice, env_non_negative_int, optional_env_var
from .errors import ConfigurationError

ANCESTOR_ONLY_ENV: Final[str] = "RECORDMERGE_ANCESTOR_ONLY"
INDENT_ENV: Final[str] = "RECORDMERGE_INDENT"
LOG_LEVEL_ENV: Final[str] = "RECORDMERGE_LOG_LEVEL"

ANCESTOR_ONLY_CHOICES: Final[tuple[str, ...]] = ("fail", "skip")
DEFAULT_INDENT: Final[int] = 4


@dataclass(frozen=True, slots=True)
class MergeConfig:
    ancestor_only: str = "fail"
    indent: int = DEFAULT_INDENT
    log_level: str = "INFO"


def parse_log_level(value: str) -> str:
    level = value.strip().upper()
    if not isinstance(logging.getLevelNamesMapping().get(level), int):
        raise ConfigurationError(f"Unknown log level: {value!r}")
    return level


def get_merge_config() -> MergeConfig:
    defaults = MergeConfig()
    ancestor_only = env_choice(ANCESTOR_ONLY_ENV, ANCESTOR_ONLY_CHOICES)
    indent = env_non_negative_int(INDENT_ENV)
    log_level = optional_env_var(LOG_LEVEL_ENV)
    return MergeConfig(
        ancestor_only=ancestor_only or defaults.ancestor_only,
        indent=defaults.indent if indent is None else indent,
        log_level=parse_log_level(log_level) if log_level else defaults.log_level,
    )
