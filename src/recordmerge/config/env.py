"""Environment variable loaders for configuration."""

from __future__ import annotations

import os
from typing import TYPE_CHECKING

from .errors import ConfigurationError

if TYPE_CHECKING:
    from collections.abc import Iterable


def optional_env_var(name: str) -> str | None:
    """Return the stripped value of ``name``, or ``None`` when unset or blank."""

    value = os.getenv(name)
    if value is None or not value.strip():
        return None
    return value.strip()


def env_choice(name: str, choices: Iterable[str]) -> str | None:
    value = optional_env_var(name)
    if value is None:
        return None
    allowed = tuple(choices)
    normalized = value.lower()
    if normalized not in allowed:
        raise ConfigurationError(
            f"Invalid value for {name}: {value!r} (expected one of {', '.join(allowed)})"
        )
    return normalized


def env_non_negative_int(name: str) -> int | None:
    value = optional_env_var(name)
    if value is None:
        return None
    try:
        parsed = int(value)
    except ValueError as exc:
        raise ConfigurationError(f"Invalid integer for {name}: {value!r}") from exc
    if parsed < 0:
        raise ConfigurationError(f"{name} must be non-negative, got {parsed}")
    return parsed
