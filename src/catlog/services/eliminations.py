"""Elimination log service."""

import logging
from dataclasses import dataclass
from datetime import UTC, datetime, timedelta
from typing import Protocol

from catlog.domain.eliminations import (
    EliminationDraft,
    EliminationEntry,
    parse_kind,
)
from catlog.errors import InvalidArgumentError, NotFoundError

logger = logging.getLogger(__name__)

ELIMINATION_DAYS_MAX = 90
_PATCH_FIELDS = {"timestamp", "amount", "urine_ml", "score", "note", "vomit"}


class EliminationRepository(Protocol):
    """Persistence interface for elimination entries."""

    def create_elimination(self, payload: dict[str, object]) -> EliminationEntry:
        """Insert an elimination entry and return it."""

    def get_elimination(self, entry_id: int) -> EliminationEntry | None:
        """Return an elimination entry by id."""

    def update_elimination(
        self, entry_id: int, payload: dict[str, object]
    ) -> EliminationEntry:
        """Update an elimination entry and return it."""

    def delete_elimination(self, entry_id: int) -> None:
        """Delete an elimination entry."""

    def list_eliminations_since(self, start: datetime) -> list[EliminationEntry]:
        """Return entries at or after ``start``, newest first."""


@dataclass
class EliminationService:
    """Service for litter box events."""

    repository: EliminationRepository

    def create(self, draft: EliminationDraft) -> EliminationEntry:
        """Record a litter box event."""
        if draft.timestamp is None:
            raise InvalidArgumentError("timestamp is required")
        if draft.kind is None:
            raise InvalidArgumentError(
                "kind is required (stool/urine/both or うんち/おしっこ/両方)"
            )
        entry = self.repository.create_elimination(
            {
                "timestamp": draft.timestamp,
                "kind": draft.kind,
                "amount": draft.amount,
                "urine_ml": draft.urine_ml,
                "score": draft.score,
                "note": _clean(draft.note),
                "vomit": draft.vomit,
            }
        )
        logger.info(
            "Recorded elimination",
            extra={"entry_id": entry.id, "kind": entry.kind.value},
        )
        return entry

    def list_recent(self, days: int = 14) -> list[EliminationEntry]:
        """Return events from the last ``days`` days, newest first."""
        bounded = max(1, min(ELIMINATION_DAYS_MAX, days))
        start = datetime.now(tz=UTC) - timedelta(days=bounded - 1)
        return self.repository.list_eliminations_since(start)

    def list_since(self, start: datetime) -> list[EliminationEntry]:
        """Return events at or after ``start``, newest first."""
        return self.repository.list_eliminations_since(start)

    def update(self, entry_id: int, patch: dict[str, object]) -> EliminationEntry:
        """Update the supplied fields of an event."""
        payload = {key: value for key, value in patch.items() if key in _PATCH_FIELDS}
        if "timestamp" in payload and payload["timestamp"] is None:
            raise InvalidArgumentError("timestamp must not be empty")
        if "note" in payload:
            payload["note"] = _clean(payload["note"])
        if "vomit" in payload:
            payload["vomit"] = payload["vomit"] is True
        if "kind" in patch:
            kind = parse_kind(patch["kind"])
            if kind is None:
                raise InvalidArgumentError(f"unknown kind: {patch['kind']}")
            payload["kind"] = kind
        if not payload:
            raise InvalidArgumentError("No fields to update")
        self.get(entry_id)
        return self.repository.update_elimination(entry_id, payload)

    def get(self, entry_id: int) -> EliminationEntry:
        """Return an event or raise NotFoundError."""
        entry = self.repository.get_elimination(entry_id)
        if entry is None:
            raise NotFoundError(f"elimination {entry_id} not found")
        return entry

    def delete(self, entry_id: int) -> None:
        """Delete an event."""
        self.get(entry_id)
        self.repository.delete_elimination(entry_id)
        logger.info("Deleted elimination", extra={"entry_id": entry_id})


def _clean(value: object) -> str | None:
    if value is None:
        return None
    cleaned = str(value).strip()
    return cleaned or None
