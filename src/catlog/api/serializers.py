"""JSON shapes returned by the API."""

from catlog.domain.eliminations import EliminationEntry
from catlog.domain.feedings import FeedingEntry, FeedingSession
from catlog.domain.foods import Food
from catlog.domain.stats import (
    DailyEliminationCounts,
    DailyFeedingTotals,
    FeedingSummary,
    WeightPoint,
)
from catlog.domain.weights import WeightEntry


def serialize_food(food: Food) -> dict[str, object]:
    return {
        "id": food.id,
        "name": food.name,
        "calories_per_gram": food.calories_per_gram,
        "food_type": food.food_type,
        "package_grams": food.package_grams,
        "package_calories": food.package_calories,
    }


def serialize_feeding(entry: FeedingEntry) -> dict[str, object]:
    """Return an entry with its derived net values."""
    return {
        "id": entry.id,
        "timestamp": entry.timestamp.isoformat(),
        "food_id": entry.food_id,
        "food_name": entry.food_name,
        "grams_placed": entry.grams_placed,
        "calories_placed": entry.calories_placed,
        "calorie_density_snapshot": entry.calorie_density_snapshot,
        "grams_leftover": entry.grams_leftover,
        "net_grams": round(entry.net_grams, 1),
        "leftover_calories": round(entry.leftover_calories, 1),
        "net_calories": round(entry.net_calories, 1),
        "note": entry.note,
        "session_id": entry.session_id,
    }


def serialize_session(session: FeedingSession) -> dict[str, object]:
    return {
        "session_id": session.session_id,
        "start": session.start.isoformat(),
        "end": session.end.isoformat(),
        "total_calories_placed": round(session.total_calories_placed, 1),
        "total_grams_placed": round(session.total_grams_placed, 1),
        "total_net_grams": round(session.total_net_grams, 1),
        "total_net_calories": round(session.total_net_calories, 1),
        "total_leftover_calories": round(session.total_leftover_calories, 1),
        "entries": [serialize_feeding(entry) for entry in session.entries],
    }


def serialize_daily(totals: DailyFeedingTotals) -> dict[str, object]:
    return {
        "day": totals.day.isoformat(),
        "feed_calories": totals.feed_calories,
        "leftover_calories": totals.leftover_calories,
        "net_calories": totals.net_calories,
        "total_grams_placed": totals.total_grams_placed,
        "total_net_grams": totals.total_net_grams,
        "session_count": totals.session_count,
    }


def serialize_summary(summary: FeedingSummary) -> dict[str, object]:
    return {
        "from": summary.start_day.isoformat(),
        "to": summary.end_day.isoformat(),
        "avg_net_calories": round(summary.avg_net_calories, 1),
        "avg_net_grams": round(summary.avg_net_grams, 1),
        "daily": [
            {
                **serialize_daily(day),
                "net_calories_avg": _round_optional(average),
            }
            for day, average in zip(
                summary.daily, summary.net_calories_average, strict=True
            )
        ],
        "sessions": [serialize_session(session) for session in summary.sessions],
    }


def serialize_weight(entry: WeightEntry) -> dict[str, object]:
    return {
        "id": entry.id,
        "timestamp": entry.timestamp.isoformat(),
        "weight_kg": entry.weight_kg,
        "memo": entry.memo,
    }


def serialize_weight_point(point: WeightPoint) -> dict[str, object]:
    return {
        "id": point.id,
        "timestamp": point.timestamp.isoformat(),
        "weight_kg": point.weight_kg,
        "average_kg": _round_optional(point.average_kg, 2),
    }


def serialize_elimination(entry: EliminationEntry) -> dict[str, object]:
    return {
        "id": entry.id,
        "timestamp": entry.timestamp.isoformat(),
        "kind": entry.kind.value,
        "amount": entry.amount,
        "urine_ml": entry.urine_ml,
        "score": entry.score,
        "note": entry.note,
        "vomit": entry.vomit,
    }


def serialize_elimination_day(counts: DailyEliminationCounts) -> dict[str, object]:
    return {
        "day": counts.day.isoformat(),
        "stool": counts.stool,
        "urine": counts.urine,
        "vomit": counts.vomit,
    }


def _round_optional(value: float | None, digits: int = 1) -> float | None:
    if value is None:
        return None
    return round(value, digits)
