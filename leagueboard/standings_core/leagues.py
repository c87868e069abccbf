"""
League utilities: status, recency, chronological filtering and summaries.
"""

from dataclasses import dataclass
from datetime import date, datetime
from enum import Enum
from typing import Iterable, List, Optional

from leagueboard.standings_core.structure import Event, League


class LeagueStatus(Enum):
    UPCOMING = "Upcoming"
    ACTIVE = "Active"
    PAST = "Past"


@dataclass(frozen=True)
class LeagueSummary:
    """Headline numbers for a league."""

    league_id: int
    events_count: int
    matches_count: int
    players_count: int


def _as_date(value) -> Optional[date]:
    if isinstance(value, datetime):
        return value.date()
    return value


def league_status(league: League, today: date) -> LeagueStatus:
    """
    Status of a league on a given day, comparing dates only.

    A league without dates is treated as active.
    """
    today = _as_date(today)
    start = _as_date(league.start_date)
    end = _as_date(league.end_date)
    if start is not None and start > today:
        return LeagueStatus.UPCOMING
    if end is not None and end < today:
        return LeagueStatus.PAST
    return LeagueStatus.ACTIVE


def most_recent_league(leagues: Iterable[League]) -> Optional[League]:
    """
    The league with the latest end date.

    Leagues ending on the same day are separated by the latest creation time.
    Returns None when there are no leagues.
    """
    most_recent = None
    for league in leagues:
        if most_recent is None:
            most_recent = league
            continue
        current_end = _as_date(league.end_date) or date.min
        best_end = _as_date(most_recent.end_date) or date.min
        if current_end > best_end:
            most_recent = league
        elif current_end == best_end:
            current_created = league.created_at or datetime.min
            best_created = most_recent.created_at or datetime.min
            if current_created > best_created:
                most_recent = league
    return most_recent


def events_in_range(
    league: League, start: Optional[date] = None, end: Optional[date] = None
) -> List[Event]:
    """
    Events of a league dated within [start, end], oldest first.

    Undated events are kept only when no bound is given; they sort last.
    """
    selected = []
    for event in league.events:
        if event.date is None:
            if start is None and end is None:
                selected.append(event)
            continue
        if start is not None and event.date < start:
            continue
        if end is not None and event.date > end:
            continue
        selected.append(event)
    return sorted(selected, key=lambda e: (e.date is None, e.date or date.min, e.event_id))


def league_summary(league: League) -> LeagueSummary:
    """Count a league's events, played matches and distinct players."""
    matches = league.complete_matches
    return LeagueSummary(
        league_id=league.league_id,
        events_count=len(league.events),
        matches_count=len(matches),
        players_count=len(league.participant_ids()),
    )


def format_date_range(start: date, end: date) -> str:
    """
    Display of a date range with day, short month and year on both ends,
    e.g. "1 Jun 2024 - 31 Aug 2024".
    """
    return f"{start.day} {start:%b} {start.year} - {end.day} {end:%b} {end.year}"


def format_league_option(league: League) -> str:
    """League name with its date range, e.g. "Summer League (1 Jun 2024 - 31 Aug 2024)"."""
    if league.start_date is None or league.end_date is None:
        return league.name
    dates = format_date_range(_as_date(league.start_date), _as_date(league.end_date))
    return f"{league.name} ({dates})"
