"""
Exceptions raised or reported by the standings engine.
"""

from typing import Any, Dict, List, Optional


class StandingsError(Exception):
    """Base exception for standings-related errors."""


class ConfigurationError(StandingsError):
    """Raised when a scoring system cannot be used to rank a league.

    Collects every problem found so a caller can report them all at once.
    """

    def __init__(self, message: str, errors: Optional[List[str]] = None):
        self.errors = list(errors) if errors else [message]
        super().__init__(message)

    def __str__(self):
        if len(self.errors) <= 1:
            return super().__str__()
        return "{}: {}".format(super().__str__(), "; ".join(self.errors))


class DataIntegrityWarning(StandingsError, UserWarning):
    """A problem with historical match data that was worked around.

    These are never raised by the engine; they are collected on the ranking
    result so the caller can tell an authoritative ranking from one computed
    over suspect data.
    """

    def __init__(self, kind: str, message: str, **context: Any):
        super().__init__(message)
        self.kind = kind
        self.message = message
        self.context: Dict[str, Any] = context

    def __eq__(self, other):
        if not isinstance(other, DataIntegrityWarning):
            return NotImplemented
        return (self.kind, self.message, self.context) == (
            other.kind,
            other.message,
            other.context,
        )

    def __hash__(self):
        return hash((self.kind, self.message))

    def __repr__(self):
        return f"DataIntegrityWarning(kind={self.kind!r}, message={self.message!r})"

    def as_dict(self) -> Dict[str, Any]:
        return {"kind": self.kind, "message": self.message, "context": self.context}


class UnknownPlayerWarning(DataIntegrityWarning):
    """A match references a player id outside the supplied player set."""

    def __init__(self, match_id, player_id):
        super().__init__(
            "unknown_player",
            f"Match {match_id} references unknown player {player_id}",
            match_id=match_id,
            player_id=player_id,
        )


class InconsistentDrawWarning(DataIntegrityWarning):
    """A match's draw flag disagrees with its scores."""

    def __init__(self, match_id, draw: bool, player1_score: int, player2_score: int):
        super().__init__(
            "inconsistent_draw",
            f"Match {match_id} has draw={draw} but score "
            f"{player1_score}-{player2_score}; using the score",
            match_id=match_id,
            draw=draw,
            player1_score=player1_score,
            player2_score=player2_score,
        )


class SelfPairingWarning(DataIntegrityWarning):
    """A match pairs a player against themselves."""

    def __init__(self, match_id, player_id):
        super().__init__(
            "self_pairing",
            f"Match {match_id} pairs player {player_id} against themselves",
            match_id=match_id,
            player_id=player_id,
        )
