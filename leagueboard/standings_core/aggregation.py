"""
Aggregation of match records into per-player counters.

The counters produced here are the raw material for every statistic in the
standings: match and game points, win percentages and the opponents'
averages derived from them.
"""

import logging
from dataclasses import dataclass, field
from typing import Dict, Iterable, List, Optional

from leagueboard.standings_core.exceptions import (
    DataIntegrityWarning,
    InconsistentDrawWarning,
    SelfPairingWarning,
    UnknownPlayerWarning,
)
from leagueboard.standings_core.structure import Match, participant_ids

logger = logging.getLogger(__name__)


@dataclass
class RawCounters:
    """Win/loss/draw tallies for one player within a scope."""

    matches_won: int = 0
    matches_lost: int = 0
    matches_drawn: int = 0
    games_won: int = 0
    games_lost: int = 0
    games_drawn: int = 0

    @property
    def matches_played(self) -> int:
        return self.matches_won + self.matches_lost + self.matches_drawn

    @property
    def games_played(self) -> int:
        return self.games_won + self.games_lost + self.games_drawn


@dataclass
class AggregatedStats:
    """Counters for every player in scope plus the opponents each one faced.

    ``opponents`` holds one entry per match played, so a player met twice is
    listed twice.
    """

    counters: Dict[int, RawCounters] = field(default_factory=dict)
    opponents: Dict[int, List[int]] = field(default_factory=dict)
    warnings: List[DataIntegrityWarning] = field(default_factory=list)

    def __contains__(self, player_id) -> bool:
        return player_id in self.counters


def _record(
    counters: RawCounters, games_for: int, games_against: int, drawn: bool
) -> None:
    counters.games_won += games_for
    counters.games_lost += games_against
    if drawn:
        counters.matches_drawn += 1
        counters.games_drawn += 1
    elif games_for > games_against:
        counters.matches_won += 1
    else:
        counters.matches_lost += 1


def aggregate_match_stats(
    matches: Iterable[Match],
    player_ids: Optional[Iterable[int]] = None,
    log_warnings: bool = True,
) -> AggregatedStats:
    """
    Reduce a set of matches to raw counters per player.

    Args:
        matches: The matches in scope (an event or a whole league)
        player_ids: Players to report on. Defaults to everyone appearing in a
                    complete match. Players without matches get zero counters.
        log_warnings: Log each data warning as it is collected

    Returns:
        AggregatedStats with counters, opponents and any data warnings
    """
    matches = list(matches)
    if player_ids is None:
        player_ids = participant_ids(matches)

    result = AggregatedStats()
    for player_id in player_ids:
        result.counters.setdefault(player_id, RawCounters())
        result.opponents.setdefault(player_id, [])

    for match in matches:
        if not match.is_complete:
            continue

        if match.player1_id == match.player2_id:
            result.warnings.append(SelfPairingWarning(match.match_id, match.player1_id))
            continue

        if not match.draw_flag_consistent:
            result.warnings.append(
                InconsistentDrawWarning(
                    match.match_id,
                    match.draw,
                    match.player1_score,
                    match.player2_score,
                )
            )

        drawn = match.is_draw
        sides = (
            (match.player1_id, match.player2_id, match.player1_score, match.player2_score),
            (match.player2_id, match.player1_id, match.player2_score, match.player1_score),
        )
        for player_id, opponent_id, games_for, games_against in sides:
            if player_id not in result.counters:
                result.warnings.append(UnknownPlayerWarning(match.match_id, player_id))
                continue
            _record(result.counters[player_id], games_for, games_against, drawn)
            # Unknown opponents have no percentages to average
            if opponent_id in result.counters:
                result.opponents[player_id].append(opponent_id)

    for warning in result.warnings if log_warnings else ():
        logger.warning("%s (%s)", warning.message, warning.kind)

    return result
