"""Food catalog endpoints."""

from fastapi import APIRouter, Depends, Request

from catlog.api.auth import require_pin
from catlog.api.models import FoodCreate, FoodUpdate
from catlog.api.serializers import serialize_food
from catlog.containers import AppContainer

router = APIRouter(
    prefix="/api/foods", tags=["foods"], dependencies=[Depends(require_pin)]
)


@router.get("")
async def list_foods(request: Request) -> list[dict[str, object]]:
    """Return the catalog ordered by name."""
    container: AppContainer = request.app.state.container
    return [serialize_food(food) for food in container.food_service.list_foods()]


@router.post("")
async def create_food(body: FoodCreate, request: Request) -> dict[str, object]:
    """Create a catalog entry."""
    container: AppContainer = request.app.state.container
    food = container.food_service.create_food(
        name=body.name,
        calories_per_gram=body.calories_per_gram,
        food_type=body.food_type,
        package_grams=body.package_grams,
        package_calories=body.package_calories,
    )
    return serialize_food(food)


@router.get("/{food_id}")
async def get_food(food_id: int, request: Request) -> dict[str, object]:
    """Return one catalog entry."""
    container: AppContainer = request.app.state.container
    return serialize_food(container.food_service.get_food(food_id))


@router.patch("/{food_id}")
async def update_food(
    food_id: int, body: FoodUpdate, request: Request
) -> dict[str, object]:
    """Update the sent fields of a catalog entry."""
    container: AppContainer = request.app.state.container
    food = container.food_service.update_food(
        food_id, body.model_dump(exclude_unset=True)
    )
    return serialize_food(food)


@router.delete("/{food_id}")
async def delete_food(food_id: int, request: Request) -> dict[str, object]:
    """Delete a catalog entry no feeding references."""
    container: AppContainer = request.app.state.container
    container.food_service.delete_food(food_id)
    return {"ok": True}
