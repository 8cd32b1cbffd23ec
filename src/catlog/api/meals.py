"""Feeding ledger endpoints."""

from fastapi import APIRouter, Depends, Query, Request

from catlog.api.auth import require_pin
from catlog.api.models import FeedingCreate, FeedingUpdate, LeftoverRequest, localize
from catlog.api.serializers import serialize_feeding, serialize_session
from catlog.containers import AppContainer
from catlog.domain.feedings import FeedingDraft

router = APIRouter(
    prefix="/api/meals", tags=["meals"], dependencies=[Depends(require_pin)]
)

RECENT_ROUTE_LIMIT_MAX = 100


@router.get("")
async def list_meals(
    request: Request, limit: int = Query(default=50)
) -> list[dict[str, object]]:
    """Return recent feedings, newest first."""
    container: AppContainer = request.app.state.container
    entries = container.feeding_service.list_recent(limit)
    return [serialize_feeding(entry) for entry in entries]


@router.post("")
async def create_meal(body: FeedingCreate, request: Request) -> dict[str, object]:
    """Record a feeding."""
    container: AppContainer = request.app.state.container
    draft = FeedingDraft(
        timestamp=localize(body.timestamp, container.settings.reporting_timezone),
        food_id=body.food_id,
        grams_placed=body.grams_placed,
        calories_placed=body.calories_placed,
        grams_leftover=body.grams_leftover,
        note=body.note,
    )
    return serialize_feeding(container.feeding_service.create(draft))


@router.get("/recent")
async def recent_meals(
    request: Request, limit: int = Query(default=20)
) -> list[dict[str, object]]:
    """Return the latest feedings for the entry screen."""
    container: AppContainer = request.app.state.container
    bounded = max(1, min(RECENT_ROUTE_LIMIT_MAX, limit))
    entries = container.feeding_service.list_recent(bounded)
    return [serialize_feeding(entry) for entry in entries]


@router.get("/group")
async def meal_group(
    request: Request, anchor_id: int = Query()
) -> dict[str, object]:
    """Return the feeding session that contains ``anchor_id``."""
    container: AppContainer = request.app.state.container
    return serialize_session(container.feeding_service.session_for(anchor_id))


@router.post("/leftover")
async def record_leftover(
    body: LeftoverRequest, request: Request
) -> dict[str, object]:
    """Record leftovers for a whole feeding session."""
    container: AppContainer = request.app.state.container
    updated = container.feeding_service.record_leftover(
        body.anchor_id,
        body.mode,
        items=[(item.entry_id, item.leftover_g) for item in body.items or []],
        ratio_percent=body.ratio_percent,
        note=body.note,
    )
    return {"ok": True, "updated": updated}


@router.get("/{entry_id}")
async def get_meal(entry_id: int, request: Request) -> dict[str, object]:
    """Return one feeding with derived values."""
    container: AppContainer = request.app.state.container
    return serialize_feeding(container.feeding_service.get(entry_id))


@router.patch("/{entry_id}")
async def update_meal(
    entry_id: int, body: FeedingUpdate, request: Request
) -> dict[str, object]:
    """Edit the sent fields of a feeding."""
    container: AppContainer = request.app.state.container
    patch = body.model_dump(exclude_unset=True)
    if "timestamp" in patch:
        patch["timestamp"] = localize(
            patch["timestamp"], container.settings.reporting_timezone
        )
    return serialize_feeding(container.feeding_service.update(entry_id, patch))


@router.delete("/{entry_id}")
async def delete_meal(entry_id: int, request: Request) -> dict[str, object]:
    """Delete a feeding."""
    container: AppContainer = request.app.state.container
    container.feeding_service.delete(entry_id)
    return {"ok": True}
