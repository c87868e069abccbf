"""
Configurable scoring systems for leagues.

This module defines the fixed constants used to score matches and games at an
event, and the configurable formulas and tie-breakers that turn a player's
achievements across a league's events into league standings.
"""

from dataclasses import dataclass, replace
from enum import Enum
from typing import Any, List, Mapping, Optional, Tuple

from leagueboard.standings_core.exceptions import ConfigurationError

# Match and game scoring at an event
MATCH_WIN_POINTS = 3
MATCH_DRAW_POINTS = 1
MATCH_LOSS_POINTS = 0

GAME_WIN_POINTS = 3
GAME_DRAW_POINTS = 1

# Lowest win percentage credited to anyone who played
WIN_PERCENTAGE_FLOOR = 1.0 / 3

# Limits on a scoring system
MIN_FORMULAS = 1
MAX_FORMULAS = 10
MAX_TIE_BREAKERS = 7
MAX_NAME_LENGTH = 100

# Name given to scoring systems built in code without one
CUSTOM_SYSTEM_NAME = "Custom"


class PointMetric(Enum):
    """A countable achievement used as input to a league formula."""

    EVENT_ATTENDANCE = "EVENT_ATTENDANCE"
    MATCH_WINS = "MATCH_WINS"
    GAME_WINS = "GAME_WINS"
    FIRST_PLACE = "FIRST_PLACE"
    SECOND_PLACE = "SECOND_PLACE"
    THIRD_PLACE = "THIRD_PLACE"


class TieBreakerKind(Enum):
    """A statistic used to separate players tied on league points."""

    LEAGUE_POINTS = "LEAGUE_POINTS"
    MATCH_POINTS = "MATCH_POINTS"
    OPP_MATCH_WIN_PCT = "OPP_MATCH_WIN_PCT"
    GAME_WIN_PCT = "GAME_WIN_PCT"
    OPP_GAME_WIN_PCT = "OPP_GAME_WIN_PCT"
    EVENT_ATTENDANCE_TIE = "EVENT_ATTENDANCE_TIE"
    MATCH_WINS_TIE = "MATCH_WINS_TIE"


# Event placement that earns each placement metric
PLACEMENT_METRICS = {
    1: PointMetric.FIRST_PLACE,
    2: PointMetric.SECOND_PLACE,
    3: PointMetric.THIRD_PLACE,
}


@dataclass(frozen=True)
class ScoreFormula:
    """``multiplier`` league points for every occurrence of ``point_metric``."""

    multiplier: int
    point_metric: PointMetric
    order: int


@dataclass(frozen=True)
class TieBreaker:
    kind: TieBreakerKind
    order: int


@dataclass(frozen=True)
class ScoringSystemConfig:
    """Defines how a league turns event results into standings.

    Formulas and tie-breakers are kept sorted by their ``order``.
    """

    name: str = CUSTOM_SYSTEM_NAME
    formulas: Tuple[ScoreFormula, ...] = ()
    tie_breakers: Tuple[TieBreaker, ...] = ()
    is_default: bool = False

    def sorted_formulas(self) -> List[ScoreFormula]:
        return sorted(self.formulas, key=lambda f: f.order)

    def sorted_tie_breakers(self) -> List[TieBreaker]:
        return sorted(self.tie_breakers, key=lambda t: t.order)

    def as_dict(self) -> dict:
        return {
            "name": self.name,
            "is_default": self.is_default,
            "formulas": [
                {
                    "multiplier": f.multiplier,
                    "point_metric": f.point_metric.value,
                    "order": f.order,
                }
                for f in self.sorted_formulas()
            ],
            "tie_breakers": [
                {"type": t.kind.value, "order": t.order}
                for t in self.sorted_tie_breakers()
            ],
        }


def _is_int(value: Any) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


def _coerce_enum(enum_cls, value, label: str, errors: List[str]):
    if isinstance(value, enum_cls):
        return value
    if isinstance(value, str):
        try:
            return enum_cls[value.strip().upper()]
        except KeyError:
            pass
    errors.append(f"Unrecognized {label} {value!r}")
    return None


def validate_scoring_system(config: ScoringSystemConfig) -> ScoringSystemConfig:
    """
    Check a scoring system against the rules a ranking relies on.

    Args:
        config: The scoring system to check

    Returns:
        The same scoring system with formulas and tie-breakers sorted by order;
        a blank name becomes CUSTOM_SYSTEM_NAME

    Raises:
        ConfigurationError: listing every problem found
    """
    errors: List[str] = []

    name = CUSTOM_SYSTEM_NAME
    if config.name is not None and not isinstance(config.name, str):
        errors.append(f"Name must be a string, got {config.name!r}")
    elif config.name and config.name.strip():
        name = config.name.strip()
    if len(name) > MAX_NAME_LENGTH:
        errors.append(f"Name must be {MAX_NAME_LENGTH} characters or less")

    formulas = list(config.formulas)
    if len(formulas) < MIN_FORMULAS:
        errors.append("At least one formula is required")
    if len(formulas) > MAX_FORMULAS:
        errors.append(f"Maximum {MAX_FORMULAS} formulas allowed")

    seen_metrics = set()
    for formula in formulas:
        if not isinstance(formula.point_metric, PointMetric):
            errors.append(f"Unrecognized point metric {formula.point_metric!r}")
        elif formula.point_metric in seen_metrics:
            errors.append(
                f"Duplicate point metric {formula.point_metric.value} is not allowed"
            )
        else:
            seen_metrics.add(formula.point_metric)
        if not _is_int(formula.multiplier):
            errors.append(f"Multiplier must be an integer, got {formula.multiplier!r}")
        if not _is_int(formula.order) or formula.order < 1:
            errors.append(f"Formula order must be a positive integer, got {formula.order!r}")

    tie_breakers = list(config.tie_breakers)
    if len(tie_breakers) > MAX_TIE_BREAKERS:
        errors.append(f"Maximum {MAX_TIE_BREAKERS} tie-breakers allowed")
    for tie_breaker in tie_breakers:
        if not isinstance(tie_breaker.kind, TieBreakerKind):
            errors.append(f"Unrecognized tie-breaker type {tie_breaker.kind!r}")
        if not _is_int(tie_breaker.order) or tie_breaker.order < 1:
            errors.append(
                f"Tie-breaker order must be a positive integer, got {tie_breaker.order!r}"
            )

    if errors:
        raise ConfigurationError(
            f"Invalid scoring system {config.name!r}", errors=errors
        )

    return replace(
        config,
        name=name,
        formulas=tuple(config.sorted_formulas()),
        tie_breakers=tuple(config.sorted_tie_breakers()),
    )


def parse_scoring_system(data: Mapping[str, Any]) -> ScoringSystemConfig:
    """
    Build a validated scoring system from a plain mapping.

    Accepts the persisted shape, e.g.::

        {
            "name": "Standard Scoring",
            "formulas": [{"multiplier": 1, "point_metric": "EVENT_ATTENDANCE", "order": 1}],
            "tie_breakers": [{"type": "MATCH_POINTS", "order": 1}],
        }

    ``pointMetric`` and ``tieBreakers`` are accepted as aliases.

    Raises:
        ConfigurationError: if the mapping does not describe a usable system
    """
    if not isinstance(data, Mapping):
        raise ConfigurationError(
            f"Scoring system must be a mapping, got {type(data).__name__}"
        )

    errors: List[str] = []
    formulas = []
    for raw in data.get("formulas") or []:
        if not isinstance(raw, Mapping):
            errors.append(f"Formula must be a mapping, got {raw!r}")
            continue
        metric = _coerce_enum(
            PointMetric,
            raw.get("point_metric", raw.get("pointMetric")),
            "point metric",
            errors,
        )
        formulas.append(
            ScoreFormula(
                multiplier=raw.get("multiplier"),
                point_metric=metric,
                order=raw.get("order"),
            )
        )

    tie_breakers = []
    raw_tie_breakers = data.get("tie_breakers", data.get("tieBreakers")) or []
    for raw in raw_tie_breakers:
        if not isinstance(raw, Mapping):
            errors.append(f"Tie-breaker must be a mapping, got {raw!r}")
            continue
        kind = _coerce_enum(
            TieBreakerKind, raw.get("type", raw.get("kind")), "tie-breaker type", errors
        )
        tie_breakers.append(TieBreaker(kind=kind, order=raw.get("order")))

    # The persisted shape always carries a name
    raw_name = data.get("name")
    if not isinstance(raw_name, str) or not raw_name.strip():
        errors.append("Name is required")

    if errors:
        raise ConfigurationError(
            f"Invalid scoring system {data.get('name')!r}", errors=errors
        )

    config = ScoringSystemConfig(
        name=raw_name,
        formulas=tuple(formulas),
        tie_breakers=tuple(tie_breakers),
        is_default=bool(data.get("is_default", data.get("isDefault", False))),
    )
    return validate_scoring_system(config)


def placement_metric(rank: int) -> Optional[PointMetric]:
    """Placement metric earned by finishing an event at ``rank``, if any."""
    return PLACEMENT_METRICS.get(rank)


# Pre-defined scoring systems
DEFAULT_SCORING_SYSTEM = ScoringSystemConfig(
    name="Standard Scoring",
    formulas=(
        ScoreFormula(1, PointMetric.EVENT_ATTENDANCE, 1),
        ScoreFormula(3, PointMetric.FIRST_PLACE, 2),
        ScoreFormula(2, PointMetric.SECOND_PLACE, 3),
        ScoreFormula(1, PointMetric.THIRD_PLACE, 4),
    ),
    tie_breakers=(
        TieBreaker(TieBreakerKind.LEAGUE_POINTS, 1),
        TieBreaker(TieBreakerKind.MATCH_POINTS, 2),
        TieBreaker(TieBreakerKind.OPP_MATCH_WIN_PCT, 3),
        TieBreaker(TieBreakerKind.GAME_WIN_PCT, 4),
        TieBreaker(TieBreakerKind.OPP_GAME_WIN_PCT, 5),
    ),
    is_default=True,
)

# Attendance only; useful for casual leagues
ATTENDANCE_SCORING = ScoringSystemConfig(
    name="Attendance",
    formulas=(ScoreFormula(1, PointMetric.EVENT_ATTENDANCE, 1),),
    tie_breakers=(TieBreaker(TieBreakerKind.MATCH_WINS_TIE, 1),),
)
