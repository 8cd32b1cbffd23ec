"""Supabase implementation for the food catalog."""

from dataclasses import dataclass

from supabase import Client

from catlog.adapters.supabase_support import execute, optional_float
from catlog.domain.foods import Food
from catlog.errors import StorageError
from catlog.services.foods import FoodRepository

_COLUMNS = {
    "name": "food_name",
    "calories_per_gram": "kcal_per_g",
    "food_type": "food_type",
    "package_grams": "package_g",
    "package_calories": "package_kcal",
}
_SELECT = "id, food_name, food_type, kcal_per_g, package_g, package_kcal"


@dataclass
class SupabaseFoodRepository(FoodRepository):
    """Supabase-backed repository for ``cat_foods``."""

    client: Client

    def create_food(self, payload: dict[str, object]) -> Food:
        """Create a food and return it."""
        response = execute(
            self.client.table("cat_foods").insert(_to_row(payload)), "create food"
        )
        if not response.data:
            raise StorageError("Failed to create food")
        return _parse_food(response.data[0])

    def update_food(self, food_id: int, payload: dict[str, object]) -> Food:
        """Update a food and return it."""
        response = execute(
            self.client.table("cat_foods").update(_to_row(payload)).eq("id", food_id),
            "update food",
        )
        if not response.data:
            raise StorageError("Failed to update food")
        return _parse_food(response.data[0])

    def get_food(self, food_id: int) -> Food | None:
        """Return a food by id, if present."""
        response = execute(
            self.client.table("cat_foods").select(_SELECT).eq("id", food_id).limit(1),
            "get food",
        )
        if not response.data:
            return None
        return _parse_food(response.data[0])

    def list_foods(self) -> list[Food]:
        """Return all foods ordered by name."""
        response = execute(
            self.client.table("cat_foods").select(_SELECT).order("food_name"),
            "list foods",
        )
        return [_parse_food(row) for row in response.data or []]

    def delete_food(self, food_id: int) -> None:
        """Delete a food row."""
        execute(
            self.client.table("cat_foods").delete().eq("id", food_id), "delete food"
        )

    def count_feedings(self, food_id: int) -> int:
        """Return the number of feedings referencing a food."""
        response = execute(
            self.client.table("cat_meals")
            .select("id", count="exact")
            .eq("food_id", food_id)
            .limit(1),
            "count feedings for food",
        )
        if response.count is not None:
            return int(response.count)
        return len(response.data or [])


def _to_row(payload: dict[str, object]) -> dict[str, object]:
    return {_COLUMNS[key]: value for key, value in payload.items() if key in _COLUMNS}


def _parse_food(row: dict[str, object]) -> Food:
    """Parse a catalog row into a domain model."""
    return Food(
        id=int(row["id"]),
        name=str(row.get("food_name") or ""),
        calories_per_gram=optional_float(row.get("kcal_per_g")) or 0.0,
        food_type=row.get("food_type"),
        package_grams=optional_float(row.get("package_g")),
        package_calories=optional_float(row.get("package_kcal")),
    )
