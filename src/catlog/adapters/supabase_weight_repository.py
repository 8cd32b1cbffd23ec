"""Supabase repository for weight entries."""

from dataclasses import dataclass
from datetime import datetime

from supabase import Client

from catlog.adapters.supabase_support import execute, optional_float, parse_timestamp
from catlog.domain.weights import WeightEntry
from catlog.errors import StorageError
from catlog.services.weights import WeightRepository

_SELECT = "id, dt, weight_kg, memo"


@dataclass
class SupabaseWeightRepository(WeightRepository):
    """Supabase implementation for ``cat_weights``."""

    client: Client

    def create_weight(self, payload: dict[str, object]) -> WeightEntry:
        """Insert a weight entry and return it."""
        response = execute(
            self.client.table("cat_weights").insert([_to_row(payload)]),
            "create weight",
        )
        if not response.data:
            raise StorageError("Failed to create weight")
        return _parse_weight(response.data[0])

    def get_weight(self, entry_id: int) -> WeightEntry | None:
        """Return a weight entry by id."""
        response = execute(
            self.client.table("cat_weights")
            .select(_SELECT)
            .eq("id", entry_id)
            .limit(1),
            "get weight",
        )
        if not response.data:
            return None
        return _parse_weight(response.data[0])

    def update_weight(self, entry_id: int, payload: dict[str, object]) -> WeightEntry:
        """Update a weight entry and return it."""
        response = execute(
            self.client.table("cat_weights")
            .update(_to_row(payload))
            .eq("id", entry_id),
            "update weight",
        )
        if not response.data:
            raise StorageError("Failed to update weight")
        return _parse_weight(response.data[0])

    def delete_weight(self, entry_id: int) -> None:
        """Delete a weight entry."""
        execute(
            self.client.table("cat_weights").delete().eq("id", entry_id),
            "delete weight",
        )

    def list_weights_since(self, start: datetime) -> list[WeightEntry]:
        """Return weight entries at or after ``start``, newest first."""
        response = execute(
            self.client.table("cat_weights")
            .select(_SELECT)
            .gte("dt", start.isoformat())
            .order("dt", desc=True),
            "list weights",
        )
        return [_parse_weight(row) for row in response.data or []]


def _to_row(payload: dict[str, object]) -> dict[str, object]:
    row = dict(payload)
    timestamp = row.pop("timestamp", None)
    if isinstance(timestamp, datetime):
        row["dt"] = timestamp.isoformat()
    return row


def _parse_weight(row: dict[str, object]) -> WeightEntry:
    return WeightEntry(
        id=int(row["id"]),
        timestamp=parse_timestamp(row.get("dt")) or datetime.min,
        weight_kg=optional_float(row.get("weight_kg")) or 0.0,
        memo=row.get("memo"),
    )
