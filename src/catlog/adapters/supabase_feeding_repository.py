"""Supabase repository for feeding entries."""

import logging
from dataclasses import dataclass
from datetime import datetime

from supabase import Client

from catlog.adapters.supabase_support import (
    embedded_value,
    execute,
    optional_float,
    parse_timestamp,
)
from catlog.domain.feedings import FeedingEntry, LeftoverUpdate
from catlog.errors import StorageError
from catlog.services.feedings import FeedingRepository

logger = logging.getLogger(__name__)

_COLUMNS = {
    "timestamp": "dt",
    "food_id": "food_id",
    "grams_placed": "grams",
    "calories_placed": "kcal",
    "calorie_density_snapshot": "kcal_per_g_snapshot",
    "grams_leftover": "leftover_g",
    "note": "note",
}
_SELECT = (
    "id, dt, food_id, grams, kcal, note, kcal_per_g_snapshot, leftover_g, "
    "cat_foods(food_name)"
)
LEFTOVER_FUNCTION = "apply_meal_leftovers"


@dataclass
class SupabaseFeedingRepository(FeedingRepository):
    """Supabase implementation for ``cat_meals``."""

    client: Client

    def create_feeding(self, payload: dict[str, object]) -> FeedingEntry:
        """Insert a feeding and return it with the joined food name."""
        response = execute(
            self.client.table("cat_meals").insert(_to_row(payload)), "create feeding"
        )
        if not response.data:
            raise StorageError("Failed to create feeding")
        return self._reload(int(response.data[0]["id"]))

    def get_feeding(self, entry_id: int) -> FeedingEntry | None:
        """Return a feeding by id."""
        response = execute(
            self.client.table("cat_meals").select(_SELECT).eq("id", entry_id).limit(1),
            "get feeding",
        )
        if not response.data:
            return None
        return _parse_feeding(response.data[0])

    def update_feeding(self, entry_id: int, payload: dict[str, object]) -> FeedingEntry:
        """Update the supplied fields of a feeding and return it."""
        response = execute(
            self.client.table("cat_meals").update(_to_row(payload)).eq("id", entry_id),
            "update feeding",
        )
        if not response.data:
            raise StorageError("Failed to update feeding")
        return self._reload(entry_id)

    def delete_feeding(self, entry_id: int) -> None:
        """Delete a feeding."""
        execute(
            self.client.table("cat_meals").delete().eq("id", entry_id),
            "delete feeding",
        )

    def list_recent_feedings(self, limit: int) -> list[FeedingEntry]:
        """Return the newest feedings first."""
        response = execute(
            self.client.table("cat_meals")
            .select(_SELECT)
            .order("dt", desc=True)
            .order("id", desc=True)
            .limit(limit),
            "list recent feedings",
        )
        return _parse_rows(response.data)

    def list_feedings_between(
        self, start: datetime, end: datetime
    ) -> list[FeedingEntry]:
        """Return feedings in the closed range, oldest first."""
        response = execute(
            self.client.table("cat_meals")
            .select(_SELECT)
            .gte("dt", start.isoformat())
            .lte("dt", end.isoformat())
            .order("dt", desc=False)
            .order("id", desc=False),
            "list feedings in range",
        )
        return _parse_rows(response.data)

    def apply_leftovers(self, updates: list[LeftoverUpdate]) -> None:
        """Apply a leftover batch through a single database function call."""
        execute(
            self.client.rpc(
                LEFTOVER_FUNCTION,
                {
                    "updates": [
                        {
                            "id": update.entry_id,
                            "leftover_g": update.grams_leftover,
                            "note": update.note,
                        }
                        for update in updates
                    ]
                },
            ),
            "apply leftovers",
        )

    def _reload(self, entry_id: int) -> FeedingEntry:
        entry = self.get_feeding(entry_id)
        if entry is None:
            raise StorageError(f"Feeding {entry_id} vanished after write")
        return entry


def _to_row(payload: dict[str, object]) -> dict[str, object]:
    row: dict[str, object] = {}
    for key, value in payload.items():
        column = _COLUMNS.get(key)
        if column is None:
            continue
        row[column] = value.isoformat() if isinstance(value, datetime) else value
    return row


def _parse_rows(rows: list[dict[str, object]] | None) -> list[FeedingEntry]:
    entries = []
    for row in rows or []:
        try:
            entries.append(_parse_feeding(row))
        except (KeyError, TypeError, ValueError):
            logger.warning(
                "Skipping malformed feeding row", extra={"row_id": row.get("id")}
            )
    return entries


def _parse_feeding(row: dict[str, object]) -> FeedingEntry:
    timestamp = parse_timestamp(row.get("dt"))
    if timestamp is None:
        raise ValueError("feeding row without timestamp")
    food_id = row.get("food_id")
    food_name = embedded_value(row, "cat_foods", "food_name")
    return FeedingEntry(
        id=int(row["id"]),
        timestamp=timestamp,
        food_id=int(food_id) if food_id is not None else None,
        food_name=str(food_name) if food_name is not None else None,
        grams_placed=optional_float(row.get("grams")),
        calories_placed=optional_float(row.get("kcal")),
        calorie_density_snapshot=optional_float(row.get("kcal_per_g_snapshot")),
        grams_leftover=optional_float(row.get("leftover_g")) or 0.0,
        note=row.get("note"),
    )
