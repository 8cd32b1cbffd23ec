"""Pydantic models for API request bodies."""

from datetime import datetime
from zoneinfo import ZoneInfo

from pydantic import AliasChoices, BaseModel, ConfigDict, Field

from catlog.domain.feedings import LeftoverMode


class _Body(BaseModel):
    model_config = ConfigDict(populate_by_name=True, extra="ignore")


class FoodCreate(_Body):
    """Catalog entry payload."""

    name: str = Field(validation_alias=AliasChoices("name", "food_name"))
    calories_per_gram: float | None = Field(
        default=None, validation_alias=AliasChoices("calories_per_gram", "kcal_per_g")
    )
    food_type: str | None = None
    package_grams: float | None = Field(
        default=None, validation_alias=AliasChoices("package_grams", "package_g")
    )
    package_calories: float | None = Field(
        default=None, validation_alias=AliasChoices("package_calories", "package_kcal")
    )


class FoodUpdate(_Body):
    """Partial catalog update; only sent fields change."""

    name: str | None = Field(
        default=None, validation_alias=AliasChoices("name", "food_name")
    )
    calories_per_gram: float | None = Field(
        default=None, validation_alias=AliasChoices("calories_per_gram", "kcal_per_g")
    )
    food_type: str | None = None
    package_grams: float | None = Field(
        default=None, validation_alias=AliasChoices("package_grams", "package_g")
    )
    package_calories: float | None = Field(
        default=None, validation_alias=AliasChoices("package_calories", "package_kcal")
    )


class FeedingCreate(_Body):
    """Feeding submission."""

    timestamp: datetime | None = Field(
        default=None, validation_alias=AliasChoices("timestamp", "dt")
    )
    food_id: int | None = None
    grams_placed: float | None = Field(
        default=None, validation_alias=AliasChoices("grams_placed", "grams")
    )
    calories_placed: float | None = Field(
        default=None, validation_alias=AliasChoices("calories_placed", "kcal")
    )
    grams_leftover: float | None = Field(
        default=None, validation_alias=AliasChoices("grams_leftover", "leftover_g")
    )
    note: str | None = None


class FeedingUpdate(FeedingCreate):
    """Partial feeding edit; only sent fields change."""


class LeftoverItem(_Body):
    """Leftover grams for one entry of a session."""

    entry_id: int = Field(validation_alias=AliasChoices("entry_id", "meal_id"))
    leftover_g: float


class LeftoverRequest(_Body):
    """Leftover recording for the session around ``anchor_id``."""

    anchor_id: int
    mode: LeftoverMode
    items: list[LeftoverItem] | None = None
    ratio_percent: float | None = None
    note: str | None = None


class WeightCreate(_Body):
    """Weight measurement payload."""

    timestamp: datetime | None = Field(
        default=None, validation_alias=AliasChoices("timestamp", "dt")
    )
    weight_kg: float | None = Field(
        default=None, validation_alias=AliasChoices("weight_kg", "weight")
    )
    memo: str | None = None


class WeightUpdate(WeightCreate):
    """Partial weight edit."""


class EliminationCreate(_Body):
    """Litter box event payload."""

    timestamp: datetime | None = Field(
        default=None, validation_alias=AliasChoices("timestamp", "dt")
    )
    kind: str | None = None
    amount: float | None = None
    urine_ml: float | None = None
    score: float | None = None
    note: str | None = None
    vomit: bool = False


class EliminationUpdate(_Body):
    """Partial litter box event edit."""

    timestamp: datetime | None = Field(
        default=None, validation_alias=AliasChoices("timestamp", "dt")
    )
    kind: str | None = None
    amount: float | None = None
    urine_ml: float | None = None
    score: float | None = None
    note: str | None = None
    vomit: bool | None = None


def localize(value: datetime | None, timezone_name: str) -> datetime | None:
    """Attach the reporting timezone to naive timestamps."""
    if value is None or value.tzinfo is not None:
        return value
    return value.replace(tzinfo=ZoneInfo(timezone_name))
