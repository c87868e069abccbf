"""
Fluent assertion interface for testing standings.

This module provides a clean, fluent way to assert event and league rankings
for testing purposes. It works with the EventRanking and LeagueRanking results
of the standings_core engine.
"""

from dataclasses import dataclass
from typing import Optional, Union

from leagueboard.standings_core.rankings import EventRanking, LeagueRanking

# Use the built-in AssertionError for proper test framework integration

Ranking = Union[EventRanking, LeagueRanking]

TOLERANCE = 0.0005


@dataclass
class StandingsAssertion:
    """Fluent interface for asserting standings."""

    ranking: Ranking

    def player(self, name: str) -> "PlayerAssertion":
        """Select a player by name for assertions."""
        entry = self.ranking.by_name(name)
        if entry is None:
            raise AssertionError(f"Player '{name}' not found in {self.ranking.scope} ranking")
        return PlayerAssertion(self.ranking, entry)

    def order(self, *names: str) -> "StandingsAssertion":
        """Assert the full finishing order by name."""
        actual = tuple(p.name for p in self.ranking)
        if actual != names:
            raise AssertionError(f"expected order {names}, got {actual}")
        return self

    def size(self, expected: int) -> "StandingsAssertion":
        if len(self.ranking) != expected:
            raise AssertionError(f"expected {expected} ranked players, got {len(self.ranking)}")
        return self

    def distinct_ranks(self) -> "StandingsAssertion":
        """Assert no two players share a rank."""
        ranks = [p.rank for p in self.ranking]
        if len(set(ranks)) != len(ranks):
            raise AssertionError(f"expected distinct ranks, got {ranks}")
        return self

    def warnings(self, *kinds: str) -> "StandingsAssertion":
        """Assert the kinds of data warnings reported, in order."""
        actual = tuple(w.kind for w in self.ranking.warnings)
        if actual != kinds:
            raise AssertionError(f"expected warnings {kinds}, got {actual}")
        return self


@dataclass
class PlayerAssertion:
    """Assertions for a specific ranked player."""

    ranking: Ranking
    entry: object

    def assert_(self) -> "PlayerResultAssertion":
        """Start a chain of assertions for this player."""
        return PlayerResultAssertion(self.ranking, self.entry)


@dataclass
class PlayerResultAssertion:
    """Fluent interface for asserting a player's statistics."""

    ranking: Ranking
    entry: object

    def _check(self, label: str, expected, actual) -> "PlayerResultAssertion":
        if actual != expected:
            raise AssertionError(
                f"{self.entry.name} expected {expected} {label}, got {actual}"
            )
        return self

    def _check_close(self, label: str, expected: float, actual: float) -> "PlayerResultAssertion":
        # Allow small floating point differences
        if abs(actual - expected) > TOLERANCE:
            raise AssertionError(
                f"{self.entry.name} expected {expected} {label}, got {actual}"
            )
        return self

    def rank(self, expected: int) -> "PlayerResultAssertion":
        return self._check("rank", expected, self.entry.rank)

    def wins(self, expected: int) -> "PlayerResultAssertion":
        return self._check("wins", expected, self.entry.matches_won)

    def losses(self, expected: int) -> "PlayerResultAssertion":
        return self._check("losses", expected, self.entry.matches_lost)

    def draws(self, expected: int) -> "PlayerResultAssertion":
        return self._check("draws", expected, self.entry.matches_drawn)

    def games_won(self, expected: int) -> "PlayerResultAssertion":
        return self._check("games won", expected, self.entry.games_won)

    def match_points(self, expected: int) -> "PlayerResultAssertion":
        return self._check("match points", expected, self.entry.match_points)

    def game_points(self, expected: int) -> "PlayerResultAssertion":
        return self._check("game points", expected, self.entry.game_points)

    def match_win_pct(self, expected: float) -> "PlayerResultAssertion":
        return self._check_close(
            "match-win percentage", expected, self.entry.match_win_percentage
        )

    def game_win_pct(self, expected: float) -> "PlayerResultAssertion":
        return self._check_close(
            "game-win percentage", expected, self.entry.game_win_percentage
        )

    def opp_match_win_pct(self, expected: float) -> "PlayerResultAssertion":
        return self._check_close(
            "opponents' match-win percentage", expected, self.entry.opp_match_win_percentage
        )

    def opp_game_win_pct(self, expected: float) -> "PlayerResultAssertion":
        return self._check_close(
            "opponents' game-win percentage", expected, self.entry.opp_game_win_percentage
        )

    def league_points(self, expected: int) -> "PlayerResultAssertion":
        self._require_league("league points")
        return self._check("league points", expected, self.entry.league_points)

    def attendance(self, expected: int) -> "PlayerResultAssertion":
        self._require_league("event attendance")
        return self._check("events attended", expected, self.entry.event_attendance)

    def _require_league(self, label: str) -> None:
        if not isinstance(self.ranking, LeagueRanking):
            raise AssertionError(f"{label} are only available on a league ranking")


def assert_standings(ranking: Ranking, name: Optional[str] = None):
    """Entry point for standings assertions; pass a name to select a player."""
    assertion = StandingsAssertion(ranking)
    if name is not None:
        return assertion.player(name).assert_()
    return assertion
