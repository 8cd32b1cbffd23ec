"""Feeding ledger service."""

import logging
from dataclasses import dataclass
from datetime import datetime, timedelta
from typing import Protocol

from catlog.domain.feedings import (
    LEFTOVER_NOTE_TAG,
    FeedingDraft,
    FeedingEntry,
    FeedingSession,
    LeftoverMode,
    LeftoverUpdate,
)
from catlog.domain.foods import Food
from catlog.errors import InvalidArgumentError, NotFoundError
from catlog.services.foods import FoodCatalogService
from catlog.services.nutrition import (
    CALORIES_DIGITS,
    GRAMS_DIGITS,
    clamp_leftover,
    density_from_amounts,
    density_from_food,
    fill_placement,
    ratio_leftover,
    validate_non_negative,
)
from catlog.services.sessions import DEFAULT_SESSION_GAP, find_session, group_sessions

logger = logging.getLogger(__name__)

RECENT_LIMIT_MAX = 200
_INITIAL_SESSION_WINDOW = timedelta(hours=6)
_MAX_SESSION_WINDOW = timedelta(days=366)


class FeedingRepository(Protocol):
    """Persistence interface for feeding entries."""

    def create_feeding(self, payload: dict[str, object]) -> FeedingEntry:
        """Insert a feeding and return it with the joined food name."""

    def get_feeding(self, entry_id: int) -> FeedingEntry | None:
        """Return a feeding by id."""

    def update_feeding(self, entry_id: int, payload: dict[str, object]) -> FeedingEntry:
        """Update the supplied fields of a feeding and return it."""

    def delete_feeding(self, entry_id: int) -> None:
        """Delete a feeding."""

    def list_recent_feedings(self, limit: int) -> list[FeedingEntry]:
        """Return the newest feedings first."""

    def list_feedings_between(
        self, start: datetime, end: datetime
    ) -> list[FeedingEntry]:
        """Return feedings with ``start <= timestamp <= end``, oldest first."""

    def apply_leftovers(self, updates: list[LeftoverUpdate]) -> None:
        """Apply a leftover batch atomically."""


@dataclass
class FeedingLedgerService:
    """Records feedings and keeps their calorie snapshots consistent."""

    repository: FeedingRepository
    food_service: FoodCatalogService
    session_gap: timedelta = DEFAULT_SESSION_GAP

    def create(self, draft: FeedingDraft) -> FeedingEntry:
        """Create a feeding, snapshotting the food's calorie density."""
        if draft.timestamp is None:
            raise InvalidArgumentError("timestamp is required")
        validate_non_negative("grams_placed", draft.grams_placed)
        validate_non_negative("calories_placed", draft.calories_placed)

        if draft.food_id is not None:
            snapshot = density_from_food(self._resolve_food(draft.food_id))
            if draft.grams_placed is None and draft.calories_placed is None:
                raise InvalidArgumentError(
                    "grams_placed or calories_placed is required"
                )
        else:
            snapshot = density_from_amounts(draft.grams_placed, draft.calories_placed)

        grams, calories = fill_placement(
            draft.grams_placed, draft.calories_placed, snapshot
        )
        entry = self.repository.create_feeding(
            {
                "timestamp": draft.timestamp,
                "food_id": draft.food_id,
                "grams_placed": grams,
                "calories_placed": calories,
                "calorie_density_snapshot": snapshot,
                "grams_leftover": clamp_leftover(draft.grams_leftover, grams),
                "note": _clean_note(draft.note),
            }
        )
        logger.info(
            "Recorded feeding",
            extra={"entry_id": entry.id, "food_id": entry.food_id},
        )
        return entry

    def get(self, entry_id: int) -> FeedingEntry:
        """Return a feeding or raise NotFoundError."""
        entry = self.repository.get_feeding(entry_id)
        if entry is None:
            raise NotFoundError(f"feeding {entry_id} not found")
        return entry

    def list_recent(self, limit: int = 50) -> list[FeedingEntry]:
        """Return recent feedings, newest first."""
        bounded = max(1, min(RECENT_LIMIT_MAX, limit))
        return self.repository.list_recent_feedings(bounded)

    def list_between(self, start: datetime, end: datetime) -> list[FeedingEntry]:
        """Return feedings in a time range, oldest first."""
        return self.repository.list_feedings_between(start, end)

    def update(  # noqa: PLR0912
        self, entry_id: int, patch: dict[str, object]
    ) -> FeedingEntry:
        """Apply a partial update, re-snapshotting when the food changes."""
        current = self.get(entry_id)
        payload: dict[str, object] = {}

        if "timestamp" in patch:
            if patch["timestamp"] is None:
                raise InvalidArgumentError("timestamp must not be empty")
            payload["timestamp"] = patch["timestamp"]
        if "note" in patch:
            payload["note"] = _clean_note(patch["note"])

        snapshot = current.calorie_density_snapshot
        food_changed = False
        if "food_id" in patch:
            food_id = patch["food_id"]
            if food_id is None:
                raise InvalidArgumentError("food_id must not be empty")
            # Resending the current food keeps the write-time snapshot.
            food_changed = int(food_id) != current.food_id
        if food_changed:
            snapshot = density_from_food(self._resolve_food(int(food_id)))
            payload["food_id"] = int(food_id)
            payload["calorie_density_snapshot"] = snapshot

        grams = _optional_float(patch.get("grams_placed", current.grams_placed))
        validate_non_negative("grams_placed", grams)
        if "grams_placed" in patch:
            payload["grams_placed"] = _round(grams, GRAMS_DIGITS)

        usable_snapshot = snapshot is not None and snapshot > 0
        if "calories_placed" in patch:
            calories = _optional_float(patch["calories_placed"])
            validate_non_negative("calories_placed", calories)
            payload["calories_placed"] = _round(calories, CALORIES_DIGITS)
            if grams is None and calories is not None and usable_snapshot:
                grams = calories / snapshot
                payload["grams_placed"] = _round(grams, GRAMS_DIGITS)
        elif (
            ("grams_placed" in patch or food_changed)
            and grams is not None
            and usable_snapshot
        ):
            payload["calories_placed"] = _round(grams * snapshot, CALORIES_DIGITS)

        leftover_input = _optional_float(
            patch.get("grams_leftover", current.grams_leftover)
        )
        leftover = clamp_leftover(leftover_input, _round(grams, GRAMS_DIGITS))
        if "grams_leftover" in patch or leftover != current.grams_leftover:
            payload["grams_leftover"] = leftover

        if not patch:
            raise InvalidArgumentError("No fields to update")
        if not payload:
            return current
        entry = self.repository.update_feeding(entry_id, payload)
        logger.info(
            "Updated feeding",
            extra={"entry_id": entry_id, "fields": sorted(payload)},
        )
        return entry

    def delete(self, entry_id: int) -> None:
        """Delete a feeding."""
        self.get(entry_id)
        self.repository.delete_feeding(entry_id)
        logger.info("Deleted feeding", extra={"entry_id": entry_id})

    def session_for(self, anchor_id: int) -> FeedingSession:
        """Return the feeding session that contains an entry.

        The lookup window around the anchor doubles until both session
        boundaries sit more than one gap inside it.
        """
        anchor = self.get(anchor_id)
        window = _INITIAL_SESSION_WINDOW
        while True:
            start = anchor.timestamp - window
            end = anchor.timestamp + window
            entries = self.repository.list_feedings_between(start, end)
            if not any(entry.id == anchor.id for entry in entries):
                entries.append(anchor)
            session = find_session(group_sessions(entries, self.session_gap), anchor.id)
            if session is None:
                raise NotFoundError(f"feeding {anchor_id} not found")
            closed = (
                session.start - start > self.session_gap
                and end - session.end > self.session_gap
            )
            if closed or window >= _MAX_SESSION_WINDOW:
                return session
            window *= 2

    def record_leftover(
        self,
        anchor_id: int,
        mode: LeftoverMode | str,
        *,
        items: list[tuple[int, float]] | None = None,
        ratio_percent: float | None = None,
        note: str | None = None,
    ) -> int:
        """Write leftovers for the session containing ``anchor_id``.

        Returns the number of entries whose leftover was written. The whole
        batch, including note suffixes, is applied in a single transaction.
        """
        try:
            resolved_mode = LeftoverMode(mode)
        except ValueError as exc:
            raise InvalidArgumentError(f"unknown leftover mode: {mode}") from exc

        session = self.session_for(anchor_id)
        by_id = {entry.id: entry for entry in session.entries}
        leftovers: dict[int, float] = {}

        if resolved_mode is LeftoverMode.RATIO:
            if ratio_percent is None:
                raise InvalidArgumentError("ratio_percent is required")
            for entry in session.entries:
                leftovers[entry.id] = ratio_leftover(entry.grams_placed, ratio_percent)
        else:
            if not items:
                raise InvalidArgumentError("items is required")
            for entry_id, leftover_g in items:
                entry = by_id.get(entry_id)
                if entry is None:
                    logger.info(
                        "Skipping leftover outside session",
                        extra={"entry_id": entry_id, "anchor_id": anchor_id},
                    )
                    continue
                leftovers[entry_id] = clamp_leftover(leftover_g, entry.grams_placed)

        suffix = _leftover_note(note)
        updates: list[LeftoverUpdate] = []
        for entry in session.entries:
            merged_note = _append_note(entry.note, suffix) if suffix else None
            if entry.id not in leftovers and merged_note is None:
                continue
            updates.append(
                LeftoverUpdate(
                    entry_id=entry.id,
                    grams_leftover=leftovers.get(entry.id),
                    note=merged_note,
                )
            )
        if updates:
            self.repository.apply_leftovers(updates)
        logger.info(
            "Recorded leftovers",
            extra={
                "anchor_id": anchor_id,
                "mode": resolved_mode.value,
                "updated": len(leftovers),
            },
        )
        return len(leftovers)

    def _resolve_food(self, food_id: int) -> Food:
        try:
            return self.food_service.get_food(food_id)
        except NotFoundError as exc:
            raise InvalidArgumentError(f"food {food_id} does not exist") from exc


def _leftover_note(note: str | None) -> str | None:
    cleaned = _clean_note(note)
    if cleaned is None:
        return None
    return f"{LEFTOVER_NOTE_TAG} {cleaned}"


def _append_note(existing: str | None, suffix: str) -> str:
    if existing:
        return f"{existing}\n{suffix}"
    return suffix


def _clean_note(value: object) -> str | None:
    if value is None:
        return None
    cleaned = str(value).strip()
    return cleaned or None


def _optional_float(value: object) -> float | None:
    if value is None:
        return None
    return float(value)


def _round(value: float | None, digits: int) -> float | None:
    if value is None:
        return None
    return round(value, digits)
