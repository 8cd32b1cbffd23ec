"""Tests for session grouping."""

from datetime import UTC, datetime, timedelta

from catlog.domain.feedings import FeedingEntry
from catlog.services.sessions import find_session, group_sessions

BASE = datetime(2025, 3, 1, 10, 0, tzinfo=UTC)


def _entry(entry_id: int, minutes: float) -> FeedingEntry:
    return FeedingEntry(
        id=entry_id,
        timestamp=BASE + timedelta(minutes=minutes),
        food_id=None,
        food_name=None,
        grams_placed=10.0,
        calories_placed=10.0,
        calorie_density_snapshot=1.0,
    )


def test_group_sessions_splits_on_gap() -> None:
    sessions = group_sessions([_entry(1, 0), _entry(2, 10), _entry(3, 30)])

    assert [[entry.id for entry in s.entries] for s in sessions] == [[1, 2], [3]]
    assert [s.session_id for s in sessions] == [1, 3]
    assert sessions[0].entries[1].session_id == 1


def test_group_sessions_gap_equal_to_threshold_stays_together() -> None:
    sessions = group_sessions([_entry(1, 0), _entry(2, 15)])

    assert len(sessions) == 1
    assert sessions[0].end == BASE + timedelta(minutes=15)


def test_group_sessions_drifts_with_consecutive_gaps() -> None:
    entries = [_entry(index + 1, index * 14) for index in range(10)]

    sessions = group_sessions(entries)

    assert len(sessions) == 1
    assert sessions[0].end - sessions[0].start == timedelta(minutes=126)


def test_group_sessions_sorts_and_keeps_tie_order() -> None:
    sessions = group_sessions([_entry(5, 40), _entry(3, 0), _entry(4, 0)])

    assert [entry.id for entry in sessions[0].entries] == [3, 4]
    assert sessions[0].session_id == 3
    assert sessions[1].session_id == 5


def test_group_sessions_with_custom_gap() -> None:
    sessions = group_sessions(
        [_entry(1, 0), _entry(2, 10)], gap=timedelta(minutes=5)
    )

    assert len(sessions) == 2


def test_group_sessions_empty() -> None:
    assert group_sessions([]) == []


def test_find_session() -> None:
    sessions = group_sessions([_entry(1, 0), _entry(2, 30)])

    found = find_session(sessions, 2)

    assert found is not None
    assert found.session_id == 2
    assert find_session(sessions, 99) is None


def test_session_totals() -> None:
    entry = FeedingEntry(
        id=1,
        timestamp=BASE,
        food_id=None,
        food_name=None,
        grams_placed=40.0,
        calories_placed=40.0,
        calorie_density_snapshot=1.0,
        grams_leftover=10.0,
    )
    (session,) = group_sessions([entry, _entry(2, 5)])

    assert session.total_grams_placed == 50.0
    assert session.total_net_grams == 40.0
    assert session.total_leftover_calories == 10.0
    assert session.total_net_calories == 40.0
