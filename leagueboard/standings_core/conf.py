"""
Settings for the standings app.

STANDINGS_DEFAULT_SCORING_SYSTEM
    The scoring system used by leagues without one of their own, in the
    shape accepted by scoring.parse_scoring_system. Leave it unset for the
    built-in "Standard Scoring"; set it to None to run without a default.

When Django settings are not configured, the built-in defaults apply.
"""

from typing import Any, Optional

from django.conf import settings

from leagueboard.standings_core.exceptions import ConfigurationError
from leagueboard.standings_core.scoring import (
    DEFAULT_SCORING_SYSTEM,
    ScoringSystemConfig,
    parse_scoring_system,
    validate_scoring_system,
)

DEFAULT_SCORING_SETTING = "STANDINGS_DEFAULT_SCORING_SYSTEM"

_UNSET = object()


def _get_setting(name: str, default: Any = _UNSET) -> Any:
    if not settings.configured:
        return default
    return getattr(settings, name, default)


def _load(value: Any) -> ScoringSystemConfig:
    if isinstance(value, ScoringSystemConfig):
        return validate_scoring_system(value)
    return parse_scoring_system(value)


def default_scoring_system() -> ScoringSystemConfig:
    """
    Return the scoring system applied to leagues without their own.

    Raises:
        ConfigurationError: if no default is configured or it is invalid
    """
    value = _get_setting(DEFAULT_SCORING_SETTING)
    if value is _UNSET:
        return DEFAULT_SCORING_SYSTEM
    if value is None:
        raise ConfigurationError(
            f"No default scoring system configured ({DEFAULT_SCORING_SETTING} is None)"
        )
    return _load(value)


def resolve_scoring_system(
    configured: Optional[ScoringSystemConfig] = None,
) -> ScoringSystemConfig:
    """Return the league's own scoring system, or the default when it has none."""
    if configured is not None:
        return validate_scoring_system(configured)
    return default_scoring_system()


def check_settings() -> None:
    """Validate the configured default scoring system, if one is configured."""
    value = _get_setting(DEFAULT_SCORING_SETTING)
    if value is _UNSET or value is None:
        return
    _load(value)
