"""
Environment-driven settings.

Reads ``MAP_PROBE_*`` variables into a ``ProbeSettings`` object. Command
line options override anything loaded here.
"""

import logging
import os
from collections.abc import Mapping
from dataclasses import dataclass, replace

from ..utilities.constants import (
    DEFAULT_LOG_LEVEL,
    DEFAULT_PASSES,
    DEFAULT_PROFILE,
    ProbeConfigError,
)
from .profiles import LanguageProfile, get_profile

ENV_PROFILE = "MAP_PROBE_PROFILE"
ENV_PASSES = "MAP_PROBE_PASSES"
ENV_SEED = "MAP_PROBE_SEED"
ENV_LOG_LEVEL = "MAP_PROBE_LOG_LEVEL"

_LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


@dataclass(frozen=True)
class ProbeSettings:
    """Resolved runtime settings."""

    profile: LanguageProfile
    passes: int = DEFAULT_PASSES
    seed: int | None = None
    log_level: str = DEFAULT_LOG_LEVEL

    def with_overrides(self, **overrides) -> "ProbeSettings":
        """Return a copy with every non-None override applied."""
        changes = {key: value for key, value in overrides.items() if value is not None}
        if isinstance(changes.get("profile"), str):
            changes["profile"] = get_profile(changes["profile"])
        return replace(self, **changes)

    @property
    def numeric_log_level(self) -> int:
        return getattr(logging, self.log_level)


def _parse_int(environ: Mapping[str, str], name: str) -> int | None:
    raw = environ.get(name)
    if raw is None or not raw.strip():
        return None
    try:
        return int(raw)
    except ValueError:
        raise ProbeConfigError(f"{name} must be an integer, got {raw!r}") from None


def get_environment_config(environ: Mapping[str, str] | None = None) -> ProbeSettings:
    """
    Load settings from the environment.

    Args:
        environ: Mapping to read from (defaults to ``os.environ``)

    Raises:
        ProbeConfigError: If a variable is present but malformed
    """
    if environ is None:
        environ = os.environ

    profile = get_profile(environ.get(ENV_PROFILE) or DEFAULT_PROFILE)

    passes = _parse_int(environ, ENV_PASSES)
    seed = _parse_int(environ, ENV_SEED)

    log_level = (environ.get(ENV_LOG_LEVEL) or DEFAULT_LOG_LEVEL).strip().upper()
    if log_level not in _LOG_LEVELS:
        raise ProbeConfigError(f"{ENV_LOG_LEVEL} must be one of {', '.join(_LOG_LEVELS)}")

    return ProbeSettings(
        profile=profile,
        passes=DEFAULT_PASSES if passes is None else passes,
        seed=seed,
        log_level=log_level,
    )
