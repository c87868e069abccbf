"""
League points from a configurable scoring system.

Each formula multiplies how often a player achieved something across the
league's events (attending, winning matches, finishing first, ...) and the
products are summed into the player's league points.
"""

from dataclasses import dataclass
from typing import Callable, Dict, Iterable

from leagueboard.standings_core.exceptions import ConfigurationError
from leagueboard.standings_core.rankings import EventRanking
from leagueboard.standings_core.scoring import PointMetric, ScoringSystemConfig, placement_metric


@dataclass
class PlayerAchievements:
    """How often a player achieved each point metric in a league."""

    events_attended: int = 0
    match_wins: int = 0
    game_wins: int = 0
    first_place_finishes: int = 0
    second_place_finishes: int = 0
    third_place_finishes: int = 0

    def add_placement(self, rank: int) -> None:
        metric = placement_metric(rank)
        if metric is PointMetric.FIRST_PLACE:
            self.first_place_finishes += 1
        elif metric is PointMetric.SECOND_PLACE:
            self.second_place_finishes += 1
        elif metric is PointMetric.THIRD_PLACE:
            self.third_place_finishes += 1


METRIC_ACCESSORS: Dict[PointMetric, Callable[[PlayerAchievements], int]] = {
    PointMetric.EVENT_ATTENDANCE: lambda a: a.events_attended,
    PointMetric.MATCH_WINS: lambda a: a.match_wins,
    PointMetric.GAME_WINS: lambda a: a.game_wins,
    PointMetric.FIRST_PLACE: lambda a: a.first_place_finishes,
    PointMetric.SECOND_PLACE: lambda a: a.second_place_finishes,
    PointMetric.THIRD_PLACE: lambda a: a.third_place_finishes,
}

# Every metric needs an accessor; fail at import rather than score it as zero
_missing = set(PointMetric) - set(METRIC_ACCESSORS)
if _missing:
    raise ConfigurationError(
        "No accessor for point metrics: "
        + ", ".join(sorted(m.value for m in _missing))
    )


def metric_count(achievements: PlayerAchievements, metric: PointMetric) -> int:
    """Return how often the player achieved ``metric``."""
    try:
        accessor = METRIC_ACCESSORS[metric]
    except (KeyError, TypeError):
        raise ConfigurationError(f"Unrecognized point metric {metric!r}") from None
    return accessor(achievements)


def collect_achievements(
    event_rankings: Iterable[EventRanking],
) -> Dict[int, PlayerAchievements]:
    """
    Derive each player's achievements from the rankings of a league's events.

    A player ranked in an event attended it; ranks 1, 2 and 3 count as first,
    second and third place finishes. Match and game wins are summed across
    events.
    """
    achievements: Dict[int, PlayerAchievements] = {}
    for ranking in event_rankings:
        for ranked in ranking:
            entry = achievements.setdefault(ranked.player_id, PlayerAchievements())
            entry.events_attended += 1
            entry.match_wins += ranked.matches_won
            entry.game_wins += ranked.games_won
            entry.add_placement(ranked.rank)
    return achievements


def compute_league_points(
    player_id: int,
    achievements: Dict[int, PlayerAchievements],
    scoring_system: ScoringSystemConfig,
) -> int:
    """
    Calculate a player's league points.

    Args:
        player_id: The player to score
        achievements: Achievements of every player in the league
        scoring_system: Formulas to apply, in ascending order

    Returns:
        The sum over formulas of multiplier * metric count
    """
    player_achievements = achievements.get(player_id, PlayerAchievements())
    total = 0
    for formula in scoring_system.sorted_formulas():
        total += formula.multiplier * metric_count(player_achievements, formula.point_metric)
    return total
