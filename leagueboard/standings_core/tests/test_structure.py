"""
Tests for the league structure value types and the builder.
"""

import unittest
from datetime import date

from leagueboard.standings_core.builder import LeagueBuilder, parse_score
from leagueboard.standings_core.structure import (
    Match,
    create_event_from_matches,
    create_match,
    create_pending_match,
    participant_ids,
)


class MatchTests(unittest.TestCase):
    def test_decisive_match(self):
        match = create_match(1, 2, 2, 1)
        self.assertTrue(match.is_complete)
        self.assertFalse(match.is_draw)
        self.assertFalse(match.draw)
        self.assertEqual(match.winner_id(), 1)
        self.assertEqual(match.opponent_of(2), 1)
        self.assertEqual(match.score_for(2), (1, 2))

    def test_draw_flag_follows_score(self):
        match = create_match(1, 2, 1, 1)
        self.assertTrue(match.draw)
        self.assertTrue(match.is_draw)
        self.assertIsNone(match.winner_id())
        self.assertTrue(match.draw_flag_consistent)

    def test_inconsistent_draw_flag(self):
        match = Match(1, 2, 2, 0, draw=True)
        self.assertFalse(match.is_draw)
        self.assertFalse(match.draw_flag_consistent)
        self.assertEqual(match.winner_id(), 1)

    def test_pending_match_is_incomplete(self):
        match = create_pending_match(1, 2)
        self.assertFalse(match.is_complete)
        self.assertIsNone(match.winner_id())
        self.assertFalse(Match(1, None, 2, 0).is_complete)

    def test_participants_ignore_unplayed_matches(self):
        matches = [create_match(3, 1, 2, 0), create_pending_match(4, 5), create_match(1, 2, 0, 2)]
        self.assertEqual(participant_ids(matches), [3, 1, 2])

    def test_self_pairing_makes_no_participant(self):
        matches = [create_match(5, 5, 2, 0), create_match(1, 2, 2, 0)]
        self.assertEqual(participant_ids(matches), [1, 2])


class EventTests(unittest.TestCase):
    def test_rounds_grouped_in_order(self):
        event = create_event_from_matches(
            7,
            [(2, create_match(1, 3, 2, 0)), (1, create_match(1, 2, 2, 1)), (1, create_match(3, 4, 0, 2))],
        )
        self.assertEqual([r.number for r in event.rounds], [1, 2])
        self.assertEqual(len(event.rounds[0].matches), 2)
        self.assertEqual(event.num_rounds, 2)
        self.assertTrue(all(m.event_id == 7 for m in event.matches))

    def test_round_add_match_is_immutable(self):
        event = create_event_from_matches(1, [(1, create_match(1, 2, 2, 0))])
        round_one = event.rounds[0]
        extended = round_one.add_match(create_match(3, 4, 1, 1))
        self.assertEqual(len(round_one.matches), 1)
        self.assertEqual(len(extended.matches), 2)


class LeagueBuilderTests(unittest.TestCase):
    def test_builds_events_and_matches(self):
        builder = LeagueBuilder("Test League")
        builder.players("Alice", "Bob", "Carol")
        builder.event("Week 1", date(2024, 1, 6))
        builder.match("Alice", "Bob", "2-1")
        builder.round(2)
        builder.pending("Alice", "Carol")
        builder.event("Week 2", date(2024, 1, 13))
        builder.match("Bob", "Carol", "1-1")
        league = builder.build()

        self.assertEqual(league.name, "Test League")
        self.assertEqual([e.name for e in league.events], ["Week 1", "Week 2"])
        self.assertEqual(len(league.matches), 3)
        self.assertEqual(len(league.complete_matches), 2)
        self.assertEqual(league.events[0].matches[1].round_number, 2)
        self.assertEqual(league.participant_ids(), [1, 2, 3])
        self.assertEqual([m.match_id for m in league.matches], [1, 2, 3])
        self.assertEqual([p.name for p in builder.build_players()], ["Alice", "Bob", "Carol"])

    def test_unknown_player_rejected(self):
        builder = LeagueBuilder()
        builder.player("Alice")
        builder.event()
        with self.assertRaises(ValueError):
            builder.match("Alice", "Zed", "2-0")

    def test_match_requires_event(self):
        builder = LeagueBuilder().players("Alice", "Bob")
        with self.assertRaises(ValueError):
            builder.match("Alice", "Bob", "2-0")

    def test_parse_score(self):
        self.assertEqual(parse_score("2-1"), (2, 1))
        self.assertEqual(parse_score(" 0 - 0 "), (0, 0))
        with self.assertRaises(ValueError):
            parse_score("1/2-1/2")


if __name__ == "__main__":
    unittest.main()
