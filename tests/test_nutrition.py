"""Tests for calorie density helpers."""

import pytest

from catlog.domain.feedings import FeedingEntry
from catlog.domain.foods import Food
from catlog.errors import InvalidArgumentError
from catlog.services.nutrition import (
    clamp_leftover,
    density_from_amounts,
    density_from_food,
    fill_placement,
    ratio_leftover,
)


def test_density_from_food_rejects_missing_density() -> None:
    with pytest.raises(InvalidArgumentError):
        density_from_food(Food(id=1, name="Broken", calories_per_gram=0))


def test_density_from_food_rounds() -> None:
    food = Food(id=1, name="Dry", calories_per_gram=3.12345678)

    assert density_from_food(food) == 3.123457


def test_density_from_amounts() -> None:
    assert density_from_amounts(40, 30) == 0.75
    with pytest.raises(InvalidArgumentError):
        density_from_amounts(None, 30)
    with pytest.raises(InvalidArgumentError):
        density_from_amounts(10, 0)


def test_fill_placement() -> None:
    assert fill_placement(20, None, 3.5) == (20.0, 70.0)
    assert fill_placement(None, 50, 4.0) == (12.5, 50.0)
    assert fill_placement(10, 99, 4.0) == (10.0, 99.0)


def test_clamp_leftover() -> None:
    assert clamp_leftover(None, 10) == 0.0
    assert clamp_leftover(-3, 10) == 0.0
    assert clamp_leftover(15, 10) == 10.0
    assert clamp_leftover(4, None) == 4.0


def test_ratio_leftover() -> None:
    assert ratio_leftover(40, 25) == 10.0
    assert ratio_leftover(33, 33.333) == 11.0
    assert ratio_leftover(40, -5) == 0.0
    assert ratio_leftover(None, 50) == 0.0


def test_legacy_entry_without_snapshot_is_already_net() -> None:
    entry = FeedingEntry(
        id=1,
        timestamp=None,  # type: ignore[arg-type]
        food_id=None,
        food_name=None,
        grams_placed=30.0,
        calories_placed=90.0,
        calorie_density_snapshot=None,
        grams_leftover=10.0,
    )

    assert entry.leftover_calories == 0.0
    assert entry.net_calories == 90.0
    assert entry.net_grams == 20.0


def test_net_calories_never_negative() -> None:
    entry = FeedingEntry(
        id=1,
        timestamp=None,  # type: ignore[arg-type]
        food_id=None,
        food_name=None,
        grams_placed=10.0,
        calories_placed=5.0,
        calorie_density_snapshot=1.0,
        grams_leftover=10.0,
    )

    assert entry.net_calories == 0.0
