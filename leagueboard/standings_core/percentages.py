"""
Win percentage calculations.

These functions turn raw counters into the percentages used to order
standings. Anyone who played gets at least WIN_PERCENTAGE_FLOOR so that a
single bad result does not drag down the opponents' averages of everyone they
played; anyone who did not play gets 0.
"""

from dataclasses import dataclass
from typing import Dict, List

from leagueboard.standings_core.aggregation import AggregatedStats, RawCounters
from leagueboard.standings_core.scoring import (
    GAME_DRAW_POINTS,
    GAME_WIN_POINTS,
    MATCH_DRAW_POINTS,
    MATCH_WIN_POINTS,
    WIN_PERCENTAGE_FLOOR,
)


@dataclass(frozen=True)
class PlayerStats:
    """Derived statistics for a player within a scope. Never persisted."""

    player_id: int
    name: str
    matches_won: int
    matches_lost: int
    matches_drawn: int
    games_won: int
    games_lost: int
    games_drawn: int
    match_points: int
    game_points: int
    match_win_percentage: float
    game_win_percentage: float
    opp_match_win_percentage: float
    opp_game_win_percentage: float

    @property
    def matches_played(self) -> int:
        return self.matches_won + self.matches_lost + self.matches_drawn

    @property
    def games_played(self) -> int:
        return self.games_won + self.games_lost + self.games_drawn


def calculate_match_points(counters: RawCounters) -> int:
    return MATCH_WIN_POINTS * counters.matches_won + MATCH_DRAW_POINTS * counters.matches_drawn


def calculate_game_points(counters: RawCounters) -> int:
    return GAME_WIN_POINTS * counters.games_won + GAME_DRAW_POINTS * counters.games_drawn


def floored_ratio(points: int, played: int, points_per_win: int) -> float:
    """
    Ratio of points earned to points available, floored at 1/3.

    Returns 0 when nothing was played; the floor only applies to players who
    took part.
    """
    if played <= 0:
        return 0.0
    return max(WIN_PERCENTAGE_FLOOR, points / (points_per_win * played))


def calculate_match_win_percentage(counters: RawCounters) -> float:
    return floored_ratio(
        calculate_match_points(counters), counters.matches_played, MATCH_WIN_POINTS
    )


def calculate_game_win_percentage(counters: RawCounters) -> float:
    return floored_ratio(
        calculate_game_points(counters), counters.games_played, GAME_WIN_POINTS
    )


def calculate_opponents_average(
    opponent_ids: List[int], percentages: Dict[int, float]
) -> float:
    """
    Average an already-floored percentage over the opponents faced.

    Every match counts as one sample, so an opponent met twice weighs twice.

    Args:
        opponent_ids: Opponents faced, one entry per match
        percentages: Mapping of player ID to that player's own percentage

    Returns:
        The mean percentage, or 0 if no known opponent was faced
    """
    samples = [percentages[o] for o in opponent_ids if o in percentages]
    if not samples:
        return 0.0
    return sum(samples) / len(samples)


def normalize(aggregated: AggregatedStats, names: Dict[int, str]) -> Dict[int, PlayerStats]:
    """
    Calculate PlayerStats for every player in an aggregation.

    Args:
        aggregated: Counters and opponents from aggregate_match_stats
        names: Mapping of player ID to display name

    Returns:
        Dictionary mapping player IDs to PlayerStats
    """
    match_pcts = {
        pid: calculate_match_win_percentage(c) for pid, c in aggregated.counters.items()
    }
    game_pcts = {
        pid: calculate_game_win_percentage(c) for pid, c in aggregated.counters.items()
    }

    stats = {}
    for player_id, counters in aggregated.counters.items():
        opponents = aggregated.opponents.get(player_id, [])
        stats[player_id] = PlayerStats(
            player_id=player_id,
            name=names.get(player_id, str(player_id)),
            matches_won=counters.matches_won,
            matches_lost=counters.matches_lost,
            matches_drawn=counters.matches_drawn,
            games_won=counters.games_won,
            games_lost=counters.games_lost,
            games_drawn=counters.games_drawn,
            match_points=calculate_match_points(counters),
            game_points=calculate_game_points(counters),
            match_win_percentage=match_pcts[player_id],
            game_win_percentage=game_pcts[player_id],
            opp_match_win_percentage=calculate_opponents_average(opponents, match_pcts),
            opp_game_win_percentage=calculate_opponents_average(opponents, game_pcts),
        )
    return stats
