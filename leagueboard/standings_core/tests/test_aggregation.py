"""
Tests for aggregating matches into per-player counters.
No database, no Django models - just pure function tests.
"""

import unittest

from leagueboard.standings_core.aggregation import RawCounters, aggregate_match_stats
from leagueboard.standings_core.structure import Match, create_match, create_pending_match


class AggregateMatchStatsTests(unittest.TestCase):
    def test_decisive_match(self):
        result = aggregate_match_stats([create_match(1, 2, 2, 1)])

        self.assertEqual(
            result.counters[1],
            RawCounters(matches_won=1, games_won=2, games_lost=1),
        )
        self.assertEqual(
            result.counters[2],
            RawCounters(matches_lost=1, games_won=1, games_lost=2),
        )
        self.assertEqual(result.opponents, {1: [2], 2: [1]})
        self.assertEqual(result.warnings, [])

    def test_draw_is_symmetric(self):
        result = aggregate_match_stats([create_match(1, 2, 1, 1)])

        expected = RawCounters(matches_drawn=1, games_won=1, games_lost=1, games_drawn=1)
        self.assertEqual(result.counters[1], expected)
        self.assertEqual(result.counters[2], expected)
        self.assertEqual(result.counters[1].games_played, 3)

    def test_player_without_matches_kept(self):
        result = aggregate_match_stats([create_match(1, 2, 2, 0)], [1, 2, 3])

        self.assertIn(3, result)
        self.assertEqual(result.counters[3], RawCounters())
        self.assertEqual(result.counters[3].matches_played, 0)
        self.assertEqual(result.opponents[3], [])

    def test_unplayed_matches_ignored(self):
        result = aggregate_match_stats(
            [create_pending_match(1, 2), Match(1, 2, 2, None), create_match(1, 2, 0, 2)]
        )
        self.assertEqual(result.counters[1].matches_played, 1)
        self.assertEqual(result.counters[2].matches_won, 1)

    def test_rematches_listed_per_match(self):
        result = aggregate_match_stats(
            [create_match(1, 2, 2, 0, 1), create_match(2, 1, 2, 1, 2), create_match(1, 3, 1, 1, 3)]
        )
        self.assertEqual(result.opponents[1], [2, 2, 3])
        self.assertEqual(result.counters[1].matches_played, 3)

    def test_unknown_player_excluded_for_missing_side(self):
        matches = [create_match(1, 99, 2, 0, match_id=5), create_match(1, 2, 0, 2, match_id=6)]
        with self.assertLogs("leagueboard.standings_core.aggregation", level="WARNING"):
            result = aggregate_match_stats(matches, [1, 2])

        self.assertNotIn(99, result)
        self.assertEqual(result.counters[1], RawCounters(1, 1, 0, 2, 2, 0))
        self.assertEqual(result.counters[2], RawCounters(matches_won=1, games_won=2))
        self.assertEqual(result.opponents[1], [2])
        self.assertEqual([w.kind for w in result.warnings], ["unknown_player"])
        self.assertEqual(result.warnings[0].context, {"match_id": 5, "player_id": 99})

    def test_inconsistent_draw_flag_uses_score(self):
        result = aggregate_match_stats([Match(1, 2, 2, 0, draw=True, match_id=3)])

        self.assertEqual(result.counters[1].matches_won, 1)
        self.assertEqual(result.counters[1].matches_drawn, 0)
        self.assertEqual([w.kind for w in result.warnings], ["inconsistent_draw"])

    def test_self_pairing_skipped(self):
        result = aggregate_match_stats([create_match(1, 1, 2, 0)], [1])

        self.assertEqual(result.counters[1], RawCounters())
        self.assertEqual([w.kind for w in result.warnings], ["self_pairing"])

    def test_empty_input(self):
        result = aggregate_match_stats([])
        self.assertEqual(result.counters, {})
        self.assertEqual(result.warnings, [])

    def test_inputs_not_mutated(self):
        matches = [create_match(1, 2, 2, 1)]
        snapshot = list(matches)
        aggregate_match_stats(matches)
        self.assertEqual(matches, snapshot)


if __name__ == "__main__":
    unittest.main()
