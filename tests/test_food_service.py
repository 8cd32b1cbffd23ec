"""Tests for the food catalog service."""

from datetime import UTC, datetime

import pytest

from catlog.domain.feedings import FeedingDraft
from catlog.errors import ConflictError, InvalidArgumentError, NotFoundError


def test_create_food_strips_name(container) -> None:
    food = container.food_service.create_food(
        name="  Kibble  ", calories_per_gram=3.6, food_type="dry", package_grams=500
    )

    assert food.name == "Kibble"
    assert food.calories_per_gram == 3.6
    assert food.package_grams == 500


@pytest.mark.parametrize("density", [0, -1, None, True])
def test_create_food_rejects_bad_density(container, density) -> None:
    with pytest.raises(InvalidArgumentError):
        container.food_service.create_food(name="Kibble", calories_per_gram=density)


def test_create_food_requires_name(container) -> None:
    with pytest.raises(InvalidArgumentError):
        container.food_service.create_food(name=" ", calories_per_gram=1.0)


def test_list_foods_sorted_by_name(container) -> None:
    container.food_service.create_food(name="Tuna", calories_per_gram=1.0)
    container.food_service.create_food(name="Chicken", calories_per_gram=1.1)

    names = [food.name for food in container.food_service.list_foods()]

    assert names == ["Chicken", "Tuna"]


def test_update_food_validates(container) -> None:
    food = container.food_service.create_food(name="Tuna", calories_per_gram=1.0)

    updated = container.food_service.update_food(
        food.id, {"calories_per_gram": 1.3, "unknown": 1}
    )

    assert updated.calories_per_gram == 1.3
    with pytest.raises(InvalidArgumentError):
        container.food_service.update_food(food.id, {"calories_per_gram": 0})
    with pytest.raises(InvalidArgumentError):
        container.food_service.update_food(food.id, {"unknown": 1})
    with pytest.raises(NotFoundError):
        container.food_service.update_food(99, {"name": "Ghost"})


def test_delete_food_referenced_by_feeding_conflicts(container) -> None:
    food = container.food_service.create_food(name="Tuna", calories_per_gram=1.0)
    container.feeding_service.create(
        FeedingDraft(
            timestamp=datetime(2025, 1, 1, tzinfo=UTC), food_id=food.id, grams_placed=5
        )
    )

    with pytest.raises(ConflictError):
        container.food_service.delete_food(food.id)
    assert container.food_service.get_food(food.id).name == "Tuna"


def test_delete_unused_food(container) -> None:
    food = container.food_service.create_food(name="Tuna", calories_per_gram=1.0)

    container.food_service.delete_food(food.id)

    with pytest.raises(NotFoundError):
        container.food_service.get_food(food.id)
