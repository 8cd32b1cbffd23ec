"""Supabase repository for elimination entries."""

import logging
from dataclasses import dataclass
from datetime import datetime

from supabase import Client

from catlog.adapters.supabase_support import execute, optional_float, parse_timestamp
from catlog.domain.eliminations import EliminationEntry, EliminationKind, parse_kind
from catlog.errors import StorageError
from catlog.services.eliminations import EliminationRepository

logger = logging.getLogger(__name__)

_SELECT = "id, dt, kind, stool, urine, urine_ml, amount, score, note, vomit"


@dataclass
class SupabaseEliminationRepository(EliminationRepository):
    """Supabase implementation for ``cat_elims``."""

    client: Client

    def create_elimination(self, payload: dict[str, object]) -> EliminationEntry:
        """Insert an elimination entry and return it."""
        response = execute(
            self.client.table("cat_elims").insert(_to_row(payload)),
            "create elimination",
        )
        if not response.data:
            raise StorageError("Failed to create elimination")
        return _parse_elimination(response.data[0])

    def get_elimination(self, entry_id: int) -> EliminationEntry | None:
        """Return an elimination entry by id."""
        response = execute(
            self.client.table("cat_elims").select(_SELECT).eq("id", entry_id).limit(1),
            "get elimination",
        )
        if not response.data:
            return None
        return _parse_elimination(response.data[0])

    def update_elimination(
        self, entry_id: int, payload: dict[str, object]
    ) -> EliminationEntry:
        """Update an elimination entry and return it."""
        response = execute(
            self.client.table("cat_elims").update(_to_row(payload)).eq("id", entry_id),
            "update elimination",
        )
        if not response.data:
            raise StorageError("Failed to update elimination")
        return _parse_elimination(response.data[0])

    def delete_elimination(self, entry_id: int) -> None:
        """Delete an elimination entry."""
        execute(
            self.client.table("cat_elims").delete().eq("id", entry_id),
            "delete elimination",
        )

    def list_eliminations_since(self, start: datetime) -> list[EliminationEntry]:
        """Return entries at or after ``start``, newest first."""
        response = execute(
            self.client.table("cat_elims")
            .select(_SELECT)
            .gte("dt", start.isoformat())
            .order("dt", desc=True),
            "list eliminations",
        )
        entries = []
        for row in response.data or []:
            try:
                entries.append(_parse_elimination(row))
            except ValueError:
                logger.warning(
                    "Skipping malformed elimination row",
                    extra={"row_id": row.get("id")},
                )
        return entries


def _to_row(payload: dict[str, object]) -> dict[str, object]:
    """Map a payload to columns, keeping the stool/urine markers in sync."""
    row = dict(payload)
    timestamp = row.pop("timestamp", None)
    if isinstance(timestamp, datetime):
        row["dt"] = timestamp.isoformat()
    kind = row.get("kind")
    if isinstance(kind, EliminationKind):
        row["kind"] = kind.value
        row["stool"] = "stool" if kind is not EliminationKind.URINE else None
        row["urine"] = "urine" if kind is not EliminationKind.STOOL else None
    return row


def _row_kind(row: dict[str, object]) -> EliminationKind:
    kind = parse_kind(row.get("kind"))
    if kind is not None:
        return kind
    stool = str(row.get("stool") or "").strip()
    urine = str(row.get("urine") or "").strip()
    if stool and urine:
        return EliminationKind.BOTH
    if stool:
        return EliminationKind.STOOL
    if urine:
        return EliminationKind.URINE
    raise ValueError(f"elimination row {row.get('id')} has no kind")


def _parse_elimination(row: dict[str, object]) -> EliminationEntry:
    timestamp = parse_timestamp(row.get("dt"))
    if timestamp is None:
        raise ValueError(f"elimination row {row.get('id')} has no timestamp")
    return EliminationEntry(
        id=int(row["id"]),
        timestamp=timestamp,
        kind=_row_kind(row),
        amount=optional_float(row.get("amount")),
        urine_ml=optional_float(row.get("urine_ml")),
        score=optional_float(row.get("score")),
        note=row.get("note"),
        vomit=row.get("vomit") is True,
    )
