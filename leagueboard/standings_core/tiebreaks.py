"""
Tie-break resolution for league standings.

Players are ordered by league points, then by each configured tie-breaker in
ascending order, and finally by name (A-Z). The name fallback cannot be
configured away, so the resulting order is always total.
"""

from dataclasses import asdict
from typing import Callable, Dict, Iterable, List, Sequence, Tuple

from leagueboard.standings_core.exceptions import ConfigurationError
from leagueboard.standings_core.rankings import LeaguePlayerStats, LeagueRankedPlayer, assign_ranks
from leagueboard.standings_core.scoring import TieBreaker, TieBreakerKind

TIE_BREAKER_ACCESSORS: Dict[TieBreakerKind, Callable[[LeaguePlayerStats], float]] = {
    TieBreakerKind.LEAGUE_POINTS: lambda s: s.league_points,
    TieBreakerKind.MATCH_POINTS: lambda s: s.match_points,
    TieBreakerKind.OPP_MATCH_WIN_PCT: lambda s: s.opp_match_win_percentage,
    TieBreakerKind.GAME_WIN_PCT: lambda s: s.game_win_percentage,
    TieBreakerKind.OPP_GAME_WIN_PCT: lambda s: s.opp_game_win_percentage,
    TieBreakerKind.EVENT_ATTENDANCE_TIE: lambda s: s.event_attendance,
    TieBreakerKind.MATCH_WINS_TIE: lambda s: s.match_wins,
}

_missing = set(TieBreakerKind) - set(TIE_BREAKER_ACCESSORS)
if _missing:
    raise ConfigurationError(
        "No accessor for tie-breakers: " + ", ".join(sorted(k.value for k in _missing))
    )


def tie_breaker_value(stats: LeaguePlayerStats, kind: TieBreakerKind) -> float:
    """Return the statistic compared by a tie-breaker of the given kind."""
    try:
        accessor = TIE_BREAKER_ACCESSORS[kind]
    except (KeyError, TypeError):
        raise ConfigurationError(f"Unrecognized tie-breaker type {kind!r}") from None
    return accessor(stats)


def ordered_tie_breakers(tie_breakers: Iterable[TieBreaker]) -> List[TieBreaker]:
    """
    Sort tie-breakers by order, rejecting any of an unknown kind.

    Raises:
        ConfigurationError: before any ranking is attempted
    """
    tie_breakers = list(tie_breakers)
    unknown = [t.kind for t in tie_breakers if t.kind not in TIE_BREAKER_ACCESSORS]
    if unknown:
        raise ConfigurationError(
            "Unrecognized tie-breaker type",
            errors=[f"Unrecognized tie-breaker type {k!r}" for k in unknown],
        )
    return sorted(tie_breakers, key=lambda t: t.order)


def league_sort_key(
    stats: LeaguePlayerStats, tie_breakers: Sequence[TieBreaker]
) -> Tuple:
    """Sort key placing the better player first; tie_breakers must be ordered."""
    key = [-stats.league_points]
    for tie_breaker in tie_breakers:
        key.append(-tie_breaker_value(stats, tie_breaker.kind))
    key.append(stats.name)
    return tuple(key)


def resolve_ties(
    players: Iterable[LeaguePlayerStats], tie_breakers: Iterable[TieBreaker]
) -> List[LeagueRankedPlayer]:
    """
    Rank players by league points and the configured tie-breakers.

    Args:
        players: Statistics for every player in the league
        tie_breakers: Tie-breakers to apply among players level on league points

    Returns:
        LeagueRankedPlayer entries from first place down. A rank is shared only
        by players equal on every comparison including their name.
    """
    chain = ordered_tie_breakers(tie_breakers)

    def key(stats):
        return league_sort_key(stats, chain)

    ordered = sorted(players, key=key)
    return assign_ranks(
        ordered,
        key,
        lambda s, rank: LeagueRankedPlayer(rank=rank, **asdict(s)),
    )
