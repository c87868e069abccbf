"""
Value types for representing a league and its results.

This module provides a simple, clean way to represent a league with:
- Players
- Events belonging to the league
- Matches played at each event, organised in rounds
- The league's (optional) scoring system

Everything here is an immutable snapshot; ranking never mutates these objects.
"""

from collections import defaultdict
from dataclasses import dataclass, field
from datetime import date, datetime
from typing import Dict, Iterable, List, Optional, Tuple

from leagueboard.standings_core.scoring import ScoringSystemConfig


@dataclass(frozen=True)
class Player:
    """A player with their ID and display name."""

    player_id: int
    name: str


@dataclass(frozen=True)
class Match:
    """A single match between two players at an event.

    Scores count the games each side won. A match missing either player or
    either score has not been played yet and is ignored by the standings.
    """

    player1_id: Optional[int]
    player2_id: Optional[int]
    player1_score: Optional[int] = None
    player2_score: Optional[int] = None
    round_number: int = 1
    draw: bool = False
    match_id: Optional[int] = None
    event_id: Optional[int] = None

    @property
    def is_complete(self) -> bool:
        """Whether both players and both scores are known."""
        return None not in (
            self.player1_id,
            self.player2_id,
            self.player1_score,
            self.player2_score,
        )

    @property
    def is_draw(self) -> bool:
        """Whether the match ended level. The scores are authoritative."""
        return self.player1_score == self.player2_score

    @property
    def draw_flag_consistent(self) -> bool:
        return self.draw == self.is_draw

    def involves(self, player_id: int) -> bool:
        return player_id in (self.player1_id, self.player2_id)

    def winner_id(self) -> Optional[int]:
        """Return the ID of the winner, or None for a draw or unplayed match."""
        if not self.is_complete or self.is_draw:
            return None
        if self.player1_score > self.player2_score:
            return self.player1_id
        return self.player2_id

    def opponent_of(self, player_id: int) -> Optional[int]:
        if player_id == self.player1_id:
            return self.player2_id
        if player_id == self.player2_id:
            return self.player1_id
        return None

    def score_for(self, player_id: int) -> Tuple[int, int]:
        """Return (games_for, games_against) from the given player's side."""
        if player_id == self.player1_id:
            return (self.player1_score, self.player2_score)
        return (self.player2_score, self.player1_score)


@dataclass(frozen=True)
class Round:
    """A round of an event containing multiple matches."""

    number: int
    matches: List[Match] = field(default_factory=list)

    def add_match(self, match: Match) -> "Round":
        """Return a new Round with the match added (immutable pattern)."""
        return Round(self.number, self.matches + [match])


@dataclass(frozen=True)
class Event:
    """An event of a league, owning the matches played there."""

    event_id: int
    name: str = ""
    date: Optional[date] = None
    league_id: Optional[int] = None
    matches: List[Match] = field(default_factory=list)

    @property
    def complete_matches(self) -> List[Match]:
        return [m for m in self.matches if m.is_complete]

    @property
    def rounds(self) -> List[Round]:
        """Matches grouped into rounds, ordered by round number."""
        rounds_dict = defaultdict(list)
        for match in self.matches:
            rounds_dict[match.round_number].append(match)
        return [Round(num, matches) for num, matches in sorted(rounds_dict.items())]

    @property
    def num_rounds(self) -> int:
        return len({m.round_number for m in self.matches})

    def participant_ids(self) -> List[int]:
        """IDs of players in at least one complete match, in first-seen order."""
        return participant_ids(self.complete_matches)


@dataclass(frozen=True)
class League:
    """A league owning events and, optionally, its own scoring system."""

    league_id: int
    name: str = ""
    events: List[Event] = field(default_factory=list)
    scoring_system: Optional[ScoringSystemConfig] = None
    start_date: Optional[date] = None
    end_date: Optional[date] = None
    created_at: Optional[datetime] = None

    @property
    def matches(self) -> List[Match]:
        """Get all matches across all events."""
        all_matches = []
        for event in self.events:
            all_matches.extend(event.matches)
        return all_matches

    @property
    def complete_matches(self) -> List[Match]:
        return [m for m in self.matches if m.is_complete]

    def participant_ids(self) -> List[int]:
        return participant_ids(self.complete_matches)


def participant_ids(matches: Iterable[Match]) -> List[int]:
    """Union of player1/player2 across complete matches, in first-seen order.

    Self-paired matches are never counted, so they make nobody a participant.
    """
    seen: Dict[int, None] = {}
    for match in matches:
        if not match.is_complete or match.player1_id == match.player2_id:
            continue
        seen.setdefault(match.player1_id, None)
        seen.setdefault(match.player2_id, None)
    return list(seen)


# Helper functions for common league formats
def create_match(
    p1_id: int,
    p2_id: int,
    p1_score: int,
    p2_score: int,
    round_number: int = 1,
    event_id: Optional[int] = None,
    match_id: Optional[int] = None,
) -> Match:
    """Create a played match, deriving the draw flag from the scores."""
    return Match(
        player1_id=p1_id,
        player2_id=p2_id,
        player1_score=p1_score,
        player2_score=p2_score,
        round_number=round_number,
        draw=p1_score == p2_score,
        match_id=match_id,
        event_id=event_id,
    )


def create_pending_match(
    p1_id: Optional[int], p2_id: Optional[int], round_number: int = 1
) -> Match:
    """Create a paired match that has no result yet."""
    return Match(player1_id=p1_id, player2_id=p2_id, round_number=round_number)


def create_event_from_matches(
    event_id: int,
    matches_with_rounds: List[Tuple[int, Match]],
    name: str = "",
    event_date: Optional[date] = None,
    league_id: Optional[int] = None,
) -> Event:
    """Create an event from a list of (round_number, match) tuples.

    This is a convenience function for tests.
    """
    matches = []
    for round_num, match in matches_with_rounds:
        matches.append(
            Match(
                player1_id=match.player1_id,
                player2_id=match.player2_id,
                player1_score=match.player1_score,
                player2_score=match.player2_score,
                round_number=round_num,
                draw=match.draw,
                match_id=match.match_id,
                event_id=event_id,
            )
        )
    return Event(event_id, name, event_date, league_id, matches)
