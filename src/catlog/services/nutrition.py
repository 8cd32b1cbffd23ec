"""Calorie density math shared by the ledger and the reports."""

from catlog.domain.foods import Food
from catlog.errors import InvalidArgumentError

GRAMS_DIGITS = 1
CALORIES_DIGITS = 1
SNAPSHOT_DIGITS = 6
LEFTOVER_DIGITS = 3


def density_from_food(food: Food) -> float:
    """Return the food's calorie density, rejecting unusable values."""
    density = food.calories_per_gram
    if density is None or density <= 0:
        raise InvalidArgumentError(f"calories_per_gram is missing for food {food.id}")
    return round(float(density), SNAPSHOT_DIGITS)


def density_from_amounts(grams: float | None, calories: float | None) -> float:
    """Derive a density from explicit grams and calories."""
    if grams is None or calories is None:
        raise InvalidArgumentError(
            "Select a food or provide both grams_placed and calories_placed"
        )
    if grams <= 0:
        raise InvalidArgumentError("grams_placed must be positive without a food")
    if calories <= 0:
        raise InvalidArgumentError("calories_placed must be positive without a food")
    return round(calories / grams, SNAPSHOT_DIGITS)


def fill_placement(
    grams: float | None, calories: float | None, snapshot: float
) -> tuple[float | None, float | None]:
    """Fill whichever of grams/calories is missing and round both."""
    if grams is not None and calories is None:
        calories = grams * snapshot
    elif calories is not None and grams is None:
        grams = calories / snapshot
    return _round(grams, GRAMS_DIGITS), _round(calories, CALORIES_DIGITS)


def clamp_leftover(leftover: float | None, grams_placed: float | None) -> float:
    """Clamp leftover grams into ``[0, grams_placed]``."""
    value = max(0.0, float(leftover or 0.0))
    if grams_placed is None:
        return value
    return min(value, max(0.0, float(grams_placed)))


def ratio_leftover(grams_placed: float | None, ratio_percent: float) -> float:
    """Leftover grams for a share of the placed amount."""
    ratio = min(100.0, max(0.0, ratio_percent))
    grams = grams_placed or 0.0
    return clamp_leftover(round(grams * ratio / 100, LEFTOVER_DIGITS), grams)


def validate_non_negative(name: str, value: float | None) -> None:
    """Reject negative amounts."""
    if value is not None and value < 0:
        raise InvalidArgumentError(f"{name} must not be negative")


def _round(value: float | None, digits: int) -> float | None:
    if value is None:
        return None
    return round(value, digits)
