"""Domain models for the weight log."""

from dataclasses import dataclass
from datetime import datetime


@dataclass(frozen=True)
class WeightEntry:
    """A body weight measurement."""

    id: int
    timestamp: datetime
    weight_kg: float
    memo: str | None = None
