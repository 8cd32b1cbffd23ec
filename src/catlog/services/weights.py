"""Weight log service."""

import logging
from dataclasses import dataclass
from datetime import UTC, datetime, timedelta
from typing import Protocol

from catlog.domain.weights import WeightEntry
from catlog.errors import InvalidArgumentError, NotFoundError

logger = logging.getLogger(__name__)

WEIGHT_DAYS_MAX = 3650


class WeightRepository(Protocol):
    """Persistence interface for weight entries."""

    def create_weight(self, payload: dict[str, object]) -> WeightEntry:
        """Insert a weight entry and return it."""

    def get_weight(self, entry_id: int) -> WeightEntry | None:
        """Return a weight entry by id."""

    def update_weight(self, entry_id: int, payload: dict[str, object]) -> WeightEntry:
        """Update a weight entry and return it."""

    def delete_weight(self, entry_id: int) -> None:
        """Delete a weight entry."""

    def list_weights_since(self, start: datetime) -> list[WeightEntry]:
        """Return weight entries at or after ``start``, newest first."""


@dataclass
class WeightService:
    """Service for body weight measurements."""

    repository: WeightRepository

    def create(
        self, timestamp: datetime | None, weight_kg: float | None, memo: str | None
    ) -> WeightEntry:
        """Record a weight measurement."""
        if timestamp is None:
            raise InvalidArgumentError("timestamp is required")
        _require_positive_weight(weight_kg)
        entry = self.repository.create_weight(
            {"timestamp": timestamp, "weight_kg": weight_kg, "memo": _clean(memo)}
        )
        logger.info("Recorded weight", extra={"entry_id": entry.id})
        return entry

    def list_recent(self, days: int = 365) -> list[WeightEntry]:
        """Return measurements from the last ``days`` days, newest first."""
        bounded = max(1, min(WEIGHT_DAYS_MAX, days))
        start = datetime.now(tz=UTC) - timedelta(days=bounded - 1)
        return self.repository.list_weights_since(start)

    def list_since(self, start: datetime) -> list[WeightEntry]:
        """Return measurements at or after ``start``, newest first."""
        return self.repository.list_weights_since(start)

    def update(self, entry_id: int, patch: dict[str, object]) -> WeightEntry:
        """Update the supplied fields of a measurement."""
        payload: dict[str, object] = {}
        if "timestamp" in patch:
            if patch["timestamp"] is None:
                raise InvalidArgumentError("timestamp must not be empty")
            payload["timestamp"] = patch["timestamp"]
        if "weight_kg" in patch:
            _require_positive_weight(patch["weight_kg"])
            payload["weight_kg"] = float(patch["weight_kg"])
        if "memo" in patch:
            payload["memo"] = _clean(patch["memo"])
        if not payload:
            raise InvalidArgumentError("No fields to update")
        self.get(entry_id)
        return self.repository.update_weight(entry_id, payload)

    def get(self, entry_id: int) -> WeightEntry:
        """Return a measurement or raise NotFoundError."""
        entry = self.repository.get_weight(entry_id)
        if entry is None:
            raise NotFoundError(f"weight {entry_id} not found")
        return entry

    def delete(self, entry_id: int) -> None:
        """Delete a measurement."""
        self.get(entry_id)
        self.repository.delete_weight(entry_id)
        logger.info("Deleted weight", extra={"entry_id": entry_id})


def _require_positive_weight(value: object) -> None:
    if not isinstance(value, int | float) or isinstance(value, bool) or value <= 0:
        raise InvalidArgumentError("weight_kg must be positive number")


def _clean(value: object) -> str | None:
    if value is None:
        return None
    cleaned = str(value).strip()
    return cleaned or None
