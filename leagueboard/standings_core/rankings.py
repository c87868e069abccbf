"""
Ranked results for events and leagues.

An event ranking and a league ranking carry different statistics, so each has
its own result type instead of one shape with optional league fields.
"""

from dataclasses import asdict, dataclass
from typing import Any, Callable, ClassVar, Dict, Iterator, List, Optional, Sequence, Tuple, TypeVar

from leagueboard.standings_core.exceptions import DataIntegrityWarning
from leagueboard.standings_core.percentages import PlayerStats

T = TypeVar("T")
R = TypeVar("R")


@dataclass(frozen=True)
class EventRankedPlayer(PlayerStats):
    rank: int


@dataclass(frozen=True)
class LeaguePlayerStats(PlayerStats):
    """PlayerStats over a whole league plus the league-only statistics."""

    league_points: int
    event_attendance: int

    @property
    def match_wins(self) -> int:
        return self.matches_won


@dataclass(frozen=True)
class LeagueRankedPlayer(LeaguePlayerStats):
    rank: int


def assign_ranks(
    ordered: Sequence[T], key: Callable[[T], Any], factory: Callable[[T, int], R]
) -> List[R]:
    """
    Give each entry of an already sorted sequence its rank.

    A rank is one plus the number of entries strictly ahead, so entries with
    an identical key share a rank and the following rank is skipped.

    Args:
        ordered: Entries in final order
        key: The full sort key used to order the entries
        factory: Builds the ranked entry from (entry, rank)
    """
    ranked = []
    previous_key = None
    rank = 0
    for position, entry in enumerate(ordered, start=1):
        entry_key = key(entry)
        if position == 1 or entry_key != previous_key:
            rank = position
        previous_key = entry_key
        ranked.append(factory(entry, rank))
    return ranked


class _Ranking:
    """Shared read-only sequence behaviour of the ranking results."""

    players: Tuple[Any, ...]
    warnings: Tuple[DataIntegrityWarning, ...]

    def __iter__(self) -> Iterator:
        return iter(self.players)

    def __len__(self) -> int:
        return len(self.players)

    def __getitem__(self, index):
        return self.players[index]

    @property
    def is_authoritative(self) -> bool:
        """Whether the ranking was computed without any data problems."""
        return not self.warnings

    def by_player(self, player_id: int):
        for player in self.players:
            if player.player_id == player_id:
                return player
        return None

    def by_name(self, name: str):
        for player in self.players:
            if player.name == name:
                return player
        return None

    def ranks(self) -> Dict[int, int]:
        return {p.player_id: p.rank for p in self.players}

    def as_dicts(self) -> List[Dict[str, Any]]:
        return [asdict(p) for p in self.players]


@dataclass(frozen=True)
class EventRanking(_Ranking):
    """Standings of a single event."""

    players: Tuple[EventRankedPlayer, ...] = ()
    warnings: Tuple[DataIntegrityWarning, ...] = ()
    event_id: Optional[int] = None

    scope: ClassVar[str] = "event"


@dataclass(frozen=True)
class LeagueRanking(_Ranking):
    """Standings of a league under a given scoring system."""

    players: Tuple[LeagueRankedPlayer, ...] = ()
    warnings: Tuple[DataIntegrityWarning, ...] = ()
    league_id: Optional[int] = None
    scoring_system_name: str = ""

    scope: ClassVar[str] = "league"
