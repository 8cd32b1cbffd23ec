"""Domain models for the feeding ledger."""

from dataclasses import dataclass, field
from datetime import datetime
from enum import StrEnum


class LeftoverMode(StrEnum):
    """How leftovers are distributed over a feeding session."""

    BY_FOOD = "by_food"
    RATIO = "ratio"


LEFTOVER_NOTE_TAG = "[LEFTOVER]"


@dataclass(frozen=True)
class FeedingEntry:
    """A single placement of food, with its write-time density snapshot."""

    id: int
    timestamp: datetime
    food_id: int | None
    food_name: str | None
    grams_placed: float | None
    calories_placed: float | None
    calorie_density_snapshot: float | None
    grams_leftover: float = 0.0
    note: str | None = None
    session_id: int | None = None

    @property
    def has_snapshot(self) -> bool:
        """Return True when the snapshot can be used for leftover math."""
        return (
            self.calorie_density_snapshot is not None
            and self.calorie_density_snapshot > 0
        )

    @property
    def net_grams(self) -> float:
        """Grams actually eaten."""
        return max(0.0, (self.grams_placed or 0.0) - self.grams_leftover)

    @property
    def leftover_calories(self) -> float:
        """Calories left in the bowl, priced at the snapshot density."""
        if not self.has_snapshot:
            return 0.0
        return max(0.0, self.grams_leftover * self.calorie_density_snapshot)

    @property
    def net_calories(self) -> float:
        """Calories actually eaten.

        Legacy rows without a usable snapshot are treated as already net.
        """
        placed = self.calories_placed or 0.0
        if not self.has_snapshot:
            return placed
        return max(0.0, placed - self.leftover_calories)


@dataclass(frozen=True)
class FeedingDraft:
    """Input for creating a feeding entry."""

    timestamp: datetime | None
    food_id: int | None = None
    grams_placed: float | None = None
    calories_placed: float | None = None
    grams_leftover: float | None = None
    note: str | None = None


@dataclass(frozen=True)
class LeftoverUpdate:
    """A computed write for one entry of a leftover batch.

    ``None`` fields are left untouched.
    """

    entry_id: int
    grams_leftover: float | None = None
    note: str | None = None


@dataclass(frozen=True)
class FeedingSession:
    """A maximal run of feedings with consecutive gaps within the session gap."""

    session_id: int
    start: datetime
    end: datetime
    entries: list[FeedingEntry] = field(default_factory=list)

    @property
    def total_calories_placed(self) -> float:
        return sum(entry.calories_placed or 0.0 for entry in self.entries)

    @property
    def total_grams_placed(self) -> float:
        return sum(entry.grams_placed or 0.0 for entry in self.entries)

    @property
    def total_net_grams(self) -> float:
        return sum(entry.net_grams for entry in self.entries)

    @property
    def total_net_calories(self) -> float:
        return sum(entry.net_calories for entry in self.entries)

    @property
    def total_leftover_calories(self) -> float:
        return sum(entry.leftover_calories for entry in self.entries)
