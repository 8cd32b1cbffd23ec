"""Weight log endpoints."""

from fastapi import APIRouter, Depends, Query, Request

from catlog.api.auth import require_pin
from catlog.api.models import WeightCreate, WeightUpdate, localize
from catlog.api.serializers import serialize_weight, serialize_weight_point
from catlog.containers import AppContainer

router = APIRouter(
    prefix="/api/weights", tags=["weights"], dependencies=[Depends(require_pin)]
)


@router.get("")
async def list_weights(
    request: Request,
    days: int = Query(default=365),
    window: int | None = Query(default=None, ge=1),
) -> dict[str, object]:
    """Return measurements newest first plus the trailing average series."""
    container: AppContainer = request.app.state.container
    entries = container.weight_service.list_recent(days)
    trend = container.report_service.weight_trend(days, window)
    return {
        "data": [serialize_weight(entry) for entry in entries],
        "trend": [serialize_weight_point(point) for point in trend],
    }


@router.post("")
async def create_weight(body: WeightCreate, request: Request) -> dict[str, object]:
    """Record a measurement."""
    container: AppContainer = request.app.state.container
    entry = container.weight_service.create(
        timestamp=localize(body.timestamp, container.settings.reporting_timezone),
        weight_kg=body.weight_kg,
        memo=body.memo,
    )
    return serialize_weight(entry)


@router.patch("/{entry_id}")
async def update_weight(
    entry_id: int, body: WeightUpdate, request: Request
) -> dict[str, object]:
    """Edit the sent fields of a measurement."""
    container: AppContainer = request.app.state.container
    patch = body.model_dump(exclude_unset=True)
    if "timestamp" in patch:
        patch["timestamp"] = localize(
            patch["timestamp"], container.settings.reporting_timezone
        )
    return serialize_weight(container.weight_service.update(entry_id, patch))


@router.delete("/{entry_id}")
async def delete_weight(entry_id: int, request: Request) -> dict[str, object]:
    """Delete a measurement."""
    container: AppContainer = request.app.state.container
    container.weight_service.delete(entry_id)
    return {"ok": True}
