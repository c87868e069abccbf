"""
Event standings.

Within an event players are ordered by:
1. Match points
2. Match-win percentage
3. Opponents' match-win percentage
4. Game-win percentage
5. Opponents' game-win percentage
6. Player name (A-Z)

The name makes the order total, so two players only share a rank when their
names are identical too.
"""

import logging
from dataclasses import asdict
from typing import Iterable, List, Tuple

from leagueboard.standings_core.aggregation import aggregate_match_stats
from leagueboard.standings_core.percentages import PlayerStats, normalize
from leagueboard.standings_core.rankings import EventRankedPlayer, EventRanking, assign_ranks
from leagueboard.standings_core.structure import Event, Match, Player

logger = logging.getLogger(__name__)


def event_sort_key(stats: PlayerStats) -> Tuple:
    """Sort key placing the better player first."""
    return (
        -stats.match_points,
        -stats.match_win_percentage,
        -stats.opp_match_win_percentage,
        -stats.game_win_percentage,
        -stats.opp_game_win_percentage,
        stats.name,
    )


def calculate_event_stats(
    players: Iterable[Player], matches: Iterable[Match]
) -> Tuple[List[PlayerStats], list]:
    """Aggregate and normalize an event's matches for the given players."""
    players = list(players)
    names = {p.player_id: p.name for p in players}
    aggregated = aggregate_match_stats(matches, names.keys())
    stats = normalize(aggregated, names)
    return [stats[p.player_id] for p in players], aggregated.warnings


def rank_event(
    players: Iterable[Player], matches: Iterable[Match], event_id=None
) -> EventRanking:
    """
    Rank players by their results in a single event.

    Args:
        players: Players to rank. Players without matches rank last with zero stats.
        matches: The event's matches; unplayed matches are ignored

    Returns:
        EventRanking ordered from first place down
    """
    stats, warnings = calculate_event_stats(players, matches)
    ordered = sorted(stats, key=event_sort_key)
    ranked = assign_ranks(
        ordered,
        event_sort_key,
        lambda s, rank: EventRankedPlayer(rank=rank, **asdict(s)),
    )
    logger.debug("Ranked %d players for event %s", len(ranked), event_id)
    return EventRanking(players=tuple(ranked), warnings=tuple(warnings), event_id=event_id)


def rank_league_event(event: Event, players: Iterable[Player]) -> EventRanking:
    """
    Rank one event of a league.

    Only players who took part in the event are ranked, so placements are
    never handed to players who stayed at home.

    Args:
        event: The event to rank
        players: Known players; matches referencing anyone else are reported
    """
    known = {p.player_id: p for p in players}
    attendees = []
    for player_id in event.participant_ids():
        if player_id in known:
            attendees.append(known[player_id])
    return rank_event(attendees, event.matches, event_id=event.event_id)
