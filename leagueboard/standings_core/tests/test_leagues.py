"""
Tests for league status, recency and display helpers.
"""

import unittest
from datetime import date, datetime

from leagueboard.standings_core.builder import LeagueBuilder
from leagueboard.standings_core.leagues import (
    LeagueStatus,
    LeagueSummary,
    events_in_range,
    format_date_range,
    format_league_option,
    league_status,
    league_summary,
    most_recent_league,
)
from leagueboard.standings_core.tests.test_utils import create_two_event_league


def dated_league(league_id, start, end, created_at=None, name="League"):
    return LeagueBuilder(name, league_id).dates(start, end, created_at).build()


class LeagueStatusTests(unittest.TestCase):
    def test_status_by_date(self):
        league = dated_league(1, date(2024, 6, 1), date(2024, 8, 31))
        self.assertEqual(league_status(league, date(2024, 5, 31)), LeagueStatus.UPCOMING)
        self.assertEqual(league_status(league, date(2024, 6, 1)), LeagueStatus.ACTIVE)
        self.assertEqual(league_status(league, date(2024, 8, 31)), LeagueStatus.ACTIVE)
        self.assertEqual(league_status(league, date(2024, 9, 1)), LeagueStatus.PAST)

    def test_time_of_day_ignored(self):
        league = dated_league(1, date(2024, 6, 1), date(2024, 8, 31))
        self.assertEqual(league_status(league, datetime(2024, 8, 31, 23, 59)), LeagueStatus.ACTIVE)

    def test_undated_league_is_active(self):
        league = LeagueBuilder("Open").build()
        self.assertEqual(league_status(league, date(2030, 1, 1)), LeagueStatus.ACTIVE)
        self.assertEqual(LeagueStatus.ACTIVE.value, "Active")


class MostRecentLeagueTests(unittest.TestCase):
    def test_latest_end_date_wins(self):
        spring = dated_league(1, date(2024, 3, 1), date(2024, 5, 31))
        summer = dated_league(2, date(2024, 6, 1), date(2024, 8, 31))
        self.assertEqual(most_recent_league([summer, spring]).league_id, 2)
        self.assertEqual(most_recent_league([spring, summer]).league_id, 2)

    def test_same_end_date_uses_creation_time(self):
        first = dated_league(1, date(2024, 1, 1), date(2024, 8, 31), datetime(2024, 1, 1, 9))
        second = dated_league(2, date(2024, 2, 1), date(2024, 8, 31), datetime(2024, 1, 2, 9))
        self.assertEqual(most_recent_league([second, first]).league_id, 2)

    def test_no_leagues(self):
        self.assertIsNone(most_recent_league([]))


class EventsInRangeTests(unittest.TestCase):
    def test_inclusive_range_sorted_by_date(self):
        builder = LeagueBuilder().players("Alice", "Bob")
        builder.event("Late", date(2024, 3, 1))
        builder.event("Early", date(2024, 1, 1))
        builder.event("Middle", date(2024, 2, 1))
        builder.event("Undated")
        league = builder.build()

        self.assertEqual(
            [e.name for e in events_in_range(league, date(2024, 1, 1), date(2024, 2, 1))],
            ["Early", "Middle"],
        )
        self.assertEqual(
            [e.name for e in events_in_range(league)], ["Early", "Middle", "Late", "Undated"]
        )
        self.assertEqual([e.name for e in events_in_range(league, end=date(2023, 12, 31))], [])


class SummaryAndFormattingTests(unittest.TestCase):
    def test_summary(self):
        builder = create_two_event_league()
        builder.pending("Alice", "Dave")
        self.assertEqual(
            league_summary(builder.build()),
            LeagueSummary(league_id=1, events_count=2, matches_count=8, players_count=4),
        )

    def test_date_range_same_year(self):
        self.assertEqual(format_date_range(date(2024, 6, 1), date(2024, 8, 31)), "1 Jun 2024 - 31 Aug 2024")

    def test_date_range_across_years(self):
        self.assertEqual(
            format_date_range(date(2024, 12, 1), date(2025, 2, 28)),
            "1 Dec 2024 - 28 Feb 2025",
        )

    def test_same_day_and_single_digit_days(self):
        self.assertEqual(
            format_date_range(date(2024, 7, 15), date(2024, 7, 15)), "15 Jul 2024 - 15 Jul 2024"
        )
        self.assertEqual(
            format_date_range(date(2024, 6, 1), date(2024, 6, 9)), "1 Jun 2024 - 9 Jun 2024"
        )

    def test_league_option(self):
        league = create_two_event_league().build()
        self.assertEqual(format_league_option(league), "Summer League (1 Jun 2024 - 31 Aug 2024)")
        self.assertEqual(format_league_option(LeagueBuilder("Open").build()), "Open")


if __name__ == "__main__":
    unittest.main()
