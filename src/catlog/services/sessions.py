"""Read-time grouping of feedings into sessions."""

from collections.abc import Iterable
from dataclasses import replace
from datetime import timedelta

from catlog.domain.feedings import FeedingEntry, FeedingSession

DEFAULT_SESSION_GAP = timedelta(minutes=15)


def group_sessions(
    entries: Iterable[FeedingEntry], gap: timedelta = DEFAULT_SESSION_GAP
) -> list[FeedingSession]:
    """Partition feedings into sessions in one pass.

    A new session starts whenever the gap to the previous entry exceeds
    ``gap``. Gaps are measured between consecutive entries, so a session
    can drift arbitrarily far from its start. Equal timestamps keep input
    order.
    """
    sessions: list[FeedingSession] = []
    current: list[FeedingEntry] = []
    for entry in sorted(entries, key=lambda item: item.timestamp):
        if current and entry.timestamp - current[-1].timestamp > gap:
            sessions.append(_build_session(current))
            current = []
        current.append(entry)
    if current:
        sessions.append(_build_session(current))
    return sessions


def find_session(
    sessions: list[FeedingSession], entry_id: int
) -> FeedingSession | None:
    """Return the session that holds an entry."""
    for session in sessions:
        if any(entry.id == entry_id for entry in session.entries):
            return session
    return None


def _build_session(entries: list[FeedingEntry]) -> FeedingSession:
    session_id = entries[0].id
    return FeedingSession(
        session_id=session_id,
        start=entries[0].timestamp,
        end=entries[-1].timestamp,
        entries=[replace(entry, session_id=session_id) for entry in entries],
    )
