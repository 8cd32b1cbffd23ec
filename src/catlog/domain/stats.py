"""Domain models for reports."""

from dataclasses import dataclass
from datetime import date, datetime

from catlog.domain.feedings import FeedingSession


@dataclass(frozen=True)
class DailyFeedingTotals:
    """Feeding totals for one calendar day in the reporting timezone."""

    day: date
    feed_calories: float
    leftover_calories: float
    net_calories: float
    total_grams_placed: float
    total_net_grams: float
    session_count: int = 0


@dataclass(frozen=True)
class FeedingSummary:
    """Feeding report for a date range."""

    start_day: date
    end_day: date
    daily: list[DailyFeedingTotals]
    sessions: list[FeedingSession]
    net_calories_average: list[float | None]
    avg_net_calories: float
    avg_net_grams: float


@dataclass(frozen=True)
class WeightPoint:
    """A weight measurement with its trailing average."""

    id: int
    timestamp: datetime
    weight_kg: float
    average_kg: float | None


@dataclass(frozen=True)
class DailyEliminationCounts:
    """Elimination counts for one calendar day."""

    day: date
    stool: int
    urine: int
    vomit: int
