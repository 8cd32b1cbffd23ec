"""Services for managing the food catalog."""

import logging
from dataclasses import dataclass
from typing import Protocol

from catlog.domain.foods import Food
from catlog.errors import ConflictError, InvalidArgumentError, NotFoundError

logger = logging.getLogger(__name__)

_FOOD_FIELDS = {
    "name",
    "calories_per_gram",
    "food_type",
    "package_grams",
    "package_calories",
}


class FoodRepository(Protocol):
    """Persistence interface for the food catalog."""

    def create_food(self, payload: dict[str, object]) -> Food:
        """Create a food and return it."""

    def update_food(self, food_id: int, payload: dict[str, object]) -> Food:
        """Update a food and return it."""

    def get_food(self, food_id: int) -> Food | None:
        """Return a food by id, if present."""

    def list_foods(self) -> list[Food]:
        """Return all foods ordered by name."""

    def delete_food(self, food_id: int) -> None:
        """Delete a food row."""

    def count_feedings(self, food_id: int) -> int:
        """Return the number of feedings referencing a food."""


@dataclass
class FoodCatalogService:
    """Application service for catalog operations."""

    repository: FoodRepository

    def get_food(self, food_id: int) -> Food:
        """Return a food or raise NotFoundError."""
        food = self.repository.get_food(food_id)
        if food is None:
            raise NotFoundError(f"food {food_id} not found")
        return food

    def list_foods(self) -> list[Food]:
        """Return the catalog ordered by name."""
        return sorted(self.repository.list_foods(), key=lambda food: food.name)

    def create_food(  # noqa: PLR0913
        self,
        name: str,
        calories_per_gram: float | None,
        food_type: str | None = None,
        package_grams: float | None = None,
        package_calories: float | None = None,
    ) -> Food:
        """Create a food after validating its density."""
        cleaned_name = (name or "").strip()
        if not cleaned_name:
            raise InvalidArgumentError("name is required")
        _require_positive_density(calories_per_gram)
        food = self.repository.create_food(
            {
                "name": cleaned_name,
                "calories_per_gram": float(calories_per_gram),
                "food_type": food_type,
                "package_grams": package_grams,
                "package_calories": package_calories,
            }
        )
        logger.info("Created food", extra={"food_id": food.id})
        return food

    def update_food(self, food_id: int, patch: dict[str, object]) -> Food:
        """Update the supplied fields of a food.

        Existing feedings keep their own density snapshot, so editing
        ``calories_per_gram`` here never changes historical net calories.
        """
        payload = {key: value for key, value in patch.items() if key in _FOOD_FIELDS}
        if not payload:
            raise InvalidArgumentError("No fields to update")
        if "calories_per_gram" in payload:
            _require_positive_density(payload["calories_per_gram"])
        if "name" in payload:
            cleaned_name = str(payload["name"] or "").strip()
            if not cleaned_name:
                raise InvalidArgumentError("name must not be empty")
            payload["name"] = cleaned_name
        self.get_food(food_id)
        return self.repository.update_food(food_id, payload)

    def delete_food(self, food_id: int) -> None:
        """Delete a food that no feeding references."""
        self.get_food(food_id)
        references = self.repository.count_feedings(food_id)
        if references:
            raise ConflictError(
                f"food {food_id} is referenced by {references} feeding entries"
            )
        self.repository.delete_food(food_id)
        logger.info("Deleted food", extra={"food_id": food_id})


def _require_positive_density(value: object) -> None:
    if not isinstance(value, int | float) or isinstance(value, bool) or value <= 0:
        raise InvalidArgumentError("calories_per_gram must be a positive number")
