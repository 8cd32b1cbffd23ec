"""Domain models for the elimination log."""

from dataclasses import dataclass
from datetime import datetime
from enum import StrEnum


class EliminationKind(StrEnum):
    """What the cat left in the litter box."""

    STOOL = "stool"
    URINE = "urine"
    BOTH = "both"


_KIND_ALIASES = {
    "stool": EliminationKind.STOOL,
    "poop": EliminationKind.STOOL,
    "うんち": EliminationKind.STOOL,
    "urine": EliminationKind.URINE,
    "pee": EliminationKind.URINE,
    "おしっこ": EliminationKind.URINE,
    "both": EliminationKind.BOTH,
    "両方": EliminationKind.BOTH,
}


def parse_kind(raw: object) -> EliminationKind | None:
    """Normalize a user-supplied kind label, returning None when unknown."""
    if raw is None:
        return None
    return _KIND_ALIASES.get(str(raw).strip().lower())


@dataclass(frozen=True)
class EliminationEntry:
    """A litter box event."""

    id: int
    timestamp: datetime
    kind: EliminationKind
    amount: float | None = None
    urine_ml: float | None = None
    score: float | None = None
    note: str | None = None
    vomit: bool = False

    @property
    def has_stool(self) -> bool:
        return self.kind in {EliminationKind.STOOL, EliminationKind.BOTH}

    @property
    def has_urine(self) -> bool:
        return self.kind in {EliminationKind.URINE, EliminationKind.BOTH}


@dataclass(frozen=True)
class EliminationDraft:
    """Input for creating an elimination entry."""

    timestamp: datetime | None
    kind: EliminationKind | None
    amount: float | None = None
    urine_ml: float | None = None
    score: float | None = None
    note: str | None = None
    vomit: bool = False
