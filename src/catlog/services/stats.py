"""Reports over the feeding, weight and elimination logs."""

from collections.abc import Sequence
from dataclasses import dataclass
from datetime import UTC, date, datetime, time, timedelta
from zoneinfo import ZoneInfo

from catlog.domain.feedings import FeedingEntry, FeedingSession
from catlog.domain.stats import (
    DailyEliminationCounts,
    DailyFeedingTotals,
    FeedingSummary,
    WeightPoint,
)
from catlog.errors import InvalidArgumentError
from catlog.services.eliminations import ELIMINATION_DAYS_MAX, EliminationService
from catlog.services.feedings import FeedingLedgerService
from catlog.services.sessions import DEFAULT_SESSION_GAP, group_sessions
from catlog.services.weights import WEIGHT_DAYS_MAX, WeightService

SUMMARY_DAYS_DEFAULT = 30
SUMMARY_DAYS_MAX = 3650


@dataclass
class ReportService:
    """Service for computing summaries in the reporting timezone."""

    feeding_service: FeedingLedgerService
    weight_service: WeightService
    elimination_service: EliminationService
    timezone_name: str = "Asia/Tokyo"
    session_gap: timedelta = DEFAULT_SESSION_GAP
    calorie_average_window: int = 7
    weight_average_window: int = 7

    def feeding_summary(
        self,
        days: int | None = None,
        start_day: date | None = None,
        end_day: date | None = None,
    ) -> FeedingSummary:
        """Return zero-filled daily totals and sessions for a date range.

        An explicit ``start_day``/``end_day`` pair wins over ``days``; without
        either the range ends today in the reporting timezone.
        """
        tz = ZoneInfo(self.timezone_name)
        start_day, end_day = self._resolve_range(tz, days, start_day, end_day)
        start = datetime.combine(start_day, time.min, tzinfo=tz)
        end = datetime.combine(end_day + timedelta(days=1), time.min, tzinfo=tz)
        entries = [
            entry
            for entry in self.feeding_service.list_between(
                start.astimezone(UTC), end.astimezone(UTC)
            )
            if entry.timestamp < end
        ]
        sessions = group_sessions(
            self._with_edge_sessions(entries), self.session_gap
        )
        daily = daily_rollup(entries, sessions, start_day, end_day, tz)
        total_days = max(len(daily), 1)
        return FeedingSummary(
            start_day=start_day,
            end_day=end_day,
            daily=daily,
            sessions=sessions,
            net_calories_average=moving_average(
                [day.net_calories for day in daily], self.calorie_average_window
            ),
            avg_net_calories=sum(day.net_calories for day in daily) / total_days,
            avg_net_grams=sum(day.total_net_grams for day in daily) / total_days,
        )

    def weight_trend(
        self, days: int = 365, window: int | None = None
    ) -> list[WeightPoint]:
        """Return measurements oldest first with a trailing average.

        The average runs over the last ``window`` measurements, not calendar
        days, since weight is not logged daily.
        """
        bounded = max(1, min(WEIGHT_DAYS_MAX, days))
        start = datetime.now(tz=UTC) - timedelta(days=bounded - 1)
        entries = sorted(
            self.weight_service.list_since(start), key=lambda entry: entry.timestamp
        )
        averages = moving_average(
            [entry.weight_kg for entry in entries],
            window or self.weight_average_window,
        )
        return [
            WeightPoint(
                id=entry.id,
                timestamp=entry.timestamp,
                weight_kg=entry.weight_kg,
                average_kg=average,
            )
            for entry, average in zip(entries, averages, strict=True)
        ]

    def elimination_daily(self, days: int = 14) -> list[DailyEliminationCounts]:
        """Return zero-filled per-day counts for the last ``days`` days."""
        tz = ZoneInfo(self.timezone_name)
        bounded = max(1, min(ELIMINATION_DAYS_MAX, days))
        end_day = datetime.now(tz=tz).date()
        start_day = end_day - timedelta(days=bounded - 1)
        start = datetime.combine(start_day, time.min, tzinfo=tz)
        counts = {
            start_day + timedelta(days=offset): [0, 0, 0] for offset in range(bounded)
        }
        for entry in self.elimination_service.list_since(start.astimezone(UTC)):
            bucket = counts.get(entry.timestamp.astimezone(tz).date())
            if bucket is None:
                continue
            bucket[0] += int(entry.has_stool)
            bucket[1] += int(entry.has_urine)
            bucket[2] += int(entry.vomit)
        return [
            DailyEliminationCounts(day=day, stool=stool, urine=urine, vomit=vomit)
            for day, (stool, urine, vomit) in counts.items()
        ]

    def _with_edge_sessions(
        self, entries: list[FeedingEntry]
    ) -> list[FeedingEntry]:
        """Add the out-of-range members of sessions cut by the range edges.

        Daily totals still use only ``entries``; this keeps the reported
        sessions identical to what ``session_for`` returns.
        """
        if not entries:
            return entries
        by_id = {entry.id: entry for entry in entries}
        for edge in (entries[0], entries[-1]):
            for entry in self.feeding_service.session_for(edge.id).entries:
                by_id.setdefault(entry.id, entry)
        return list(by_id.values())

    @staticmethod
    def _resolve_range(
        tz: ZoneInfo,
        days: int | None,
        start_day: date | None,
        end_day: date | None,
    ) -> tuple[date, date]:
        if start_day is not None or end_day is not None:
            if start_day is None or end_day is None:
                raise InvalidArgumentError("from and to must be given together")
            if start_day > end_day:
                raise InvalidArgumentError("from must not be after to")
            if (end_day - start_day).days + 1 > SUMMARY_DAYS_MAX:
                raise InvalidArgumentError(
                    f"range must not exceed {SUMMARY_DAYS_MAX} days"
                )
            return start_day, end_day
        requested = SUMMARY_DAYS_DEFAULT if days is None else days
        bounded = max(1, min(SUMMARY_DAYS_MAX, requested))
        today = datetime.now(tz=tz).date()
        return today - timedelta(days=bounded - 1), today


def daily_rollup(
    entries: Sequence[FeedingEntry],
    sessions: Sequence[FeedingSession],
    start_day: date,
    end_day: date,
    tz: ZoneInfo,
) -> list[DailyFeedingTotals]:
    """Sum feedings per calendar day, emitting a zero row for empty days."""
    totals: dict[date, list[float]] = {}
    day = start_day
    while day <= end_day:
        totals[day] = [0.0, 0.0, 0.0, 0.0, 0.0, 0.0]
        day += timedelta(days=1)

    for entry in entries:
        bucket = totals.get(entry.timestamp.astimezone(tz).date())
        if bucket is None:
            continue
        bucket[0] += entry.calories_placed or 0.0
        bucket[1] += entry.leftover_calories
        bucket[2] += entry.net_calories
        bucket[3] += entry.grams_placed or 0.0
        bucket[4] += entry.net_grams
    for session in sessions:
        bucket = totals.get(session.start.astimezone(tz).date())
        if bucket is not None:
            bucket[5] += 1

    return [
        DailyFeedingTotals(
            day=day,
            feed_calories=round(values[0], 1),
            leftover_calories=round(values[1], 1),
            net_calories=round(values[2], 1),
            total_grams_placed=round(values[3], 1),
            total_net_grams=round(values[4], 1),
            session_count=int(values[5]),
        )
        for day, values in totals.items()
    ]


def moving_average(
    values: Sequence[float | None], window: int
) -> list[float | None]:
    """Trailing average over the last ``window`` points, skipping gaps."""
    if window < 1:
        raise InvalidArgumentError("window must be at least 1")
    averages: list[float | None] = []
    for index in range(len(values)):
        observed = [
            value
            for value in values[max(0, index - window + 1) : index + 1]
            if value is not None
        ]
        averages.append(sum(observed) / len(observed) if observed else None)
    return averages
