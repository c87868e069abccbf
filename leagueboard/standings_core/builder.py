"""
Builder for creating league structures with a fluent API.

This module provides a builder class for creating standings_core structures
with both low-level (ID based) and high-level (name based) fluent APIs,
without any database dependencies.
"""

import re
from dataclasses import dataclass, field
from datetime import date, datetime
from typing import Dict, List, Optional, Tuple

from leagueboard.standings_core.scoring import ScoringSystemConfig
from leagueboard.standings_core.structure import (
    Event,
    League,
    Match,
    Player,
    create_match,
    create_pending_match,
)

SCORE_PATTERN = re.compile(r"^\s*(\d+)\s*-\s*(\d+)\s*$")


def parse_score(score: str) -> Tuple[int, int]:
    """Parse a score like '2-1' into (2, 1)."""
    match = SCORE_PATTERN.match(score)
    if not match:
        raise ValueError(f"Invalid score: {score}")
    return int(match.group(1)), int(match.group(2))


@dataclass
class _EventDraft:
    event_id: int
    name: str
    date: Optional[date]
    matches: List[Match] = field(default_factory=list)
    current_round: int = 1


class LeagueBuilder:
    """Builder for creating league structures easily."""

    def __init__(self, name: str = "", league_id: int = 1):
        self.league_id = league_id
        self.league_name = name
        self.start_date: Optional[date] = None
        self.end_date: Optional[date] = None
        self.created_at: Optional[datetime] = None
        self.scoring_system: Optional[ScoringSystemConfig] = None
        self._players: Dict[int, Player] = {}
        self._name_to_id: Dict[str, int] = {}
        self._events: List[_EventDraft] = []
        self._next_player_id = 1
        self._next_event_id = 1
        self._next_match_id = 1

    # High-level fluent API methods

    def dates(
        self, start: date, end: date, created_at: Optional[datetime] = None
    ) -> "LeagueBuilder":
        """Set the league's date range."""
        self.start_date = start
        self.end_date = end
        self.created_at = created_at
        return self

    def scoring(self, scoring_system: Optional[ScoringSystemConfig]) -> "LeagueBuilder":
        """Give the league its own scoring system."""
        self.scoring_system = scoring_system
        return self

    def player(self, name: str) -> "LeagueBuilder":
        """Add a player by name."""
        self._get_or_create_player_id(name)
        return self

    def players(self, *names: str) -> "LeagueBuilder":
        for name in names:
            self.player(name)
        return self

    def event(self, name: str = "", event_date: Optional[date] = None) -> "LeagueBuilder":
        """Start a new event; later matches are added to it."""
        event_id = self._next_event_id
        self._next_event_id += 1
        self._events.append(_EventDraft(event_id, name or f"Event {event_id}", event_date))
        return self

    def round(self, number: int) -> "LeagueBuilder":
        """Add the following matches to the given round of the current event."""
        self._current_event().current_round = number
        return self

    def match(self, player1: str, player2: str, score: str) -> "LeagueBuilder":
        """Play a match between two named players, e.g. match("Alice", "Bob", "2-1")."""
        p1_score, p2_score = parse_score(score)
        return self.add_match(
            self._get_player_id(player1), self._get_player_id(player2), p1_score, p2_score
        )

    def pending(self, player1: str, player2: str) -> "LeagueBuilder":
        """Pair two named players without a result."""
        draft = self._current_event()
        match = create_pending_match(
            self._get_player_id(player1), self._get_player_id(player2), draft.current_round
        )
        draft.matches.append(self._stamp(match, draft))
        return self

    # Low-level API methods

    def add_match(
        self, player1_id: int, player2_id: int, player1_score: int, player2_score: int
    ) -> "LeagueBuilder":
        """Add a played match to the current round of the current event."""
        draft = self._current_event()
        match = create_match(
            player1_id, player2_id, player1_score, player2_score, draft.current_round
        )
        draft.matches.append(self._stamp(match, draft))
        return self

    def add_raw_match(self, match: Match) -> "LeagueBuilder":
        """Add a match exactly as given (useful for malformed data)."""
        draft = self._current_event()
        draft.matches.append(self._stamp(match, draft))
        return self

    def build(self) -> League:
        """Return the built league."""
        events = [
            Event(
                event_id=draft.event_id,
                name=draft.name,
                date=draft.date,
                league_id=self.league_id,
                matches=list(draft.matches),
            )
            for draft in self._events
        ]
        return League(
            league_id=self.league_id,
            name=self.league_name,
            events=events,
            scoring_system=self.scoring_system,
            start_date=self.start_date,
            end_date=self.end_date,
            created_at=self.created_at,
        )

    def build_players(self) -> List[Player]:
        """Return the players added so far, in the order they were added."""
        return list(self._players.values())

    @property
    def name_to_id(self) -> Dict[str, int]:
        return dict(self._name_to_id)

    # Helper methods

    def _current_event(self) -> _EventDraft:
        if not self._events:
            raise ValueError("Must add an event before adding matches")
        return self._events[-1]

    def _stamp(self, match: Match, draft: _EventDraft) -> Match:
        match_id = match.match_id
        if match_id is None:
            match_id = self._next_match_id
            self._next_match_id += 1
        return Match(
            player1_id=match.player1_id,
            player2_id=match.player2_id,
            player1_score=match.player1_score,
            player2_score=match.player2_score,
            round_number=match.round_number,
            draw=match.draw,
            match_id=match_id,
            event_id=draft.event_id,
        )

    def _get_or_create_player_id(self, name: str) -> int:
        if name not in self._name_to_id:
            player_id = self._next_player_id
            self._next_player_id += 1
            self._name_to_id[name] = player_id
            self._players[player_id] = Player(player_id, name)
        return self._name_to_id[name]

    def _get_player_id(self, name: str) -> int:
        if name not in self._name_to_id:
            raise ValueError(f"Player not found: {name}")
        return self._name_to_id[name]
