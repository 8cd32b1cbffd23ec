"""Domain models for the food catalog."""

from dataclasses import dataclass


@dataclass(frozen=True)
class Food:
    """A reference food with its calorie density."""

    id: int
    name: str
    calories_per_gram: float
    food_type: str | None = None
    package_grams: float | None = None
    package_calories: float | None = None
