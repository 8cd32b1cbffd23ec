"""Tests for the weight log service."""

from datetime import UTC, datetime, timedelta

import pytest

from catlog.errors import InvalidArgumentError, NotFoundError


def test_create_and_list_recent(container) -> None:
    now = datetime.now(tz=UTC)
    container.weight_service.create(now - timedelta(days=3), 4.2, "  after vet ")
    container.weight_service.create(now, 4.3, None)

    entries = container.weight_service.list_recent(days=7)

    assert [entry.weight_kg for entry in entries] == [4.3, 4.2]
    assert entries[1].memo == "after vet"


@pytest.mark.parametrize("weight", [0, -1.5, None])
def test_create_rejects_non_positive_weight(container, weight) -> None:
    with pytest.raises(InvalidArgumentError):
        container.weight_service.create(datetime.now(tz=UTC), weight, None)


def test_update_weight(container) -> None:
    entry = container.weight_service.create(datetime.now(tz=UTC), 4.0, None)

    updated = container.weight_service.update(entry.id, {"weight_kg": 4.1, "memo": ""})

    assert updated.weight_kg == 4.1
    assert updated.memo is None
    with pytest.raises(InvalidArgumentError):
        container.weight_service.update(entry.id, {})
    with pytest.raises(NotFoundError):
        container.weight_service.update(99, {"weight_kg": 4.0})


def test_delete_weight(container) -> None:
    entry = container.weight_service.create(datetime.now(tz=UTC), 4.0, None)

    container.weight_service.delete(entry.id)

    with pytest.raises(NotFoundError):
        container.weight_service.get(entry.id)
