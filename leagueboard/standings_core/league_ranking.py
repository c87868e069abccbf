"""
League standings.

Ranking a league works in four steps:
1. Rank every event of the league on its own
2. Turn attendance, placements and wins into league points using the
   league's scoring system
3. Aggregate win percentages over all of the league's matches
4. Order players by league points and the scoring system's tie-breakers
"""

import logging
from dataclasses import asdict
from datetime import date
from typing import Iterable, List, Optional

from leagueboard.standings_core.aggregation import aggregate_match_stats
from leagueboard.standings_core.event_ranking import rank_league_event
from leagueboard.standings_core.league_scoring import collect_achievements, compute_league_points
from leagueboard.standings_core.percentages import normalize
from leagueboard.standings_core.rankings import LeaguePlayerStats, LeagueRanking
from leagueboard.standings_core.scoring import ScoringSystemConfig, validate_scoring_system
from leagueboard.standings_core.structure import Event, League, Player, participant_ids
from leagueboard.standings_core.tiebreaks import resolve_ties

logger = logging.getLogger(__name__)


def events_in_scope(league: League, as_of: Optional[date] = None) -> List[Event]:
    """Events of the league, limited to those dated on or before ``as_of``.

    Undated events are only included when no cut-off is given.
    """
    if as_of is None:
        return list(league.events)
    return [e for e in league.events if e.date is not None and e.date <= as_of]


def rank_league(
    league: League,
    players: Iterable[Player],
    scoring_system: ScoringSystemConfig,
    as_of: Optional[date] = None,
) -> LeagueRanking:
    """
    Calculate the standings of a league.

    Args:
        league: The league with its events and matches
        players: Known players; matches referencing anyone else are reported
                 as data warnings and skipped for that side
        scoring_system: The scoring system to apply, already resolved by the
                        caller (see conf.resolve_scoring_system)
        as_of: Only count events dated on or before this day

    Returns:
        LeagueRanking from first place down

    Raises:
        ConfigurationError: if the scoring system is invalid; nothing is ranked
    """
    scoring_system = validate_scoring_system(scoring_system)

    players = list(players)
    names = {p.player_id: p.name for p in players}
    events = events_in_scope(league, as_of)
    matches = [m for e in events for m in e.matches if m.is_complete]

    warnings = []
    event_rankings = []
    for event in events:
        ranking = rank_league_event(event, players)
        warnings.extend(ranking.warnings)
        event_rankings.append(ranking)

    league_player_ids = [pid for pid in participant_ids(matches) if pid in names]
    if not league_player_ids:
        logger.debug("League %s has no results to rank", league.league_id)
        return LeagueRanking(
            warnings=tuple(warnings),
            league_id=league.league_id,
            scoring_system_name=scoring_system.name,
        )

    achievements = collect_achievements(event_rankings)
    # Event rankings already reported the same problems match by match
    aggregated = aggregate_match_stats(matches, league_player_ids, log_warnings=False)
    stats = normalize(aggregated, names)

    league_stats = []
    for player_id in league_player_ids:
        player_achievements = achievements.get(player_id)
        league_stats.append(
            LeaguePlayerStats(
                league_points=compute_league_points(player_id, achievements, scoring_system),
                event_attendance=(
                    player_achievements.events_attended if player_achievements else 0
                ),
                **asdict(stats[player_id]),
            )
        )

    ranked = resolve_ties(league_stats, scoring_system.tie_breakers)
    logger.debug(
        "Ranked %d players over %d events for league %s using %r",
        len(ranked),
        len(events),
        league.league_id,
        scoring_system.name,
    )
    return LeagueRanking(
        players=tuple(ranked),
        warnings=tuple(warnings),
        league_id=league.league_id,
        scoring_system_name=scoring_system.name,
    )
