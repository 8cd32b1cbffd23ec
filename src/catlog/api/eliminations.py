"""Elimination log endpoints."""

from fastapi import APIRouter, Depends, Query, Request

from catlog.api.auth import require_pin
from catlog.api.models import EliminationCreate, EliminationUpdate, localize
from catlog.api.serializers import serialize_elimination, serialize_elimination_day
from catlog.containers import AppContainer
from catlog.domain.eliminations import EliminationDraft, parse_kind
from catlog.errors import InvalidArgumentError

router = APIRouter(
    prefix="/api/elims", tags=["eliminations"], dependencies=[Depends(require_pin)]
)


@router.get("")
async def list_eliminations(
    request: Request, days: int = Query(default=14)
) -> dict[str, object]:
    """Return events newest first."""
    container: AppContainer = request.app.state.container
    entries = container.elimination_service.list_recent(days)
    return {"data": [serialize_elimination(entry) for entry in entries]}


@router.post("")
async def create_elimination(
    body: EliminationCreate, request: Request
) -> dict[str, object]:
    """Record a litter box event."""
    container: AppContainer = request.app.state.container
    kind = parse_kind(body.kind)
    if body.kind is not None and kind is None:
        raise InvalidArgumentError(f"unknown kind: {body.kind}")
    draft = EliminationDraft(
        timestamp=localize(body.timestamp, container.settings.reporting_timezone),
        kind=kind,
        amount=body.amount,
        urine_ml=body.urine_ml,
        score=body.score,
        note=body.note,
        vomit=body.vomit,
    )
    return serialize_elimination(container.elimination_service.create(draft))


@router.get("/daily")
async def daily_eliminations(
    request: Request, days: int = Query(default=14)
) -> list[dict[str, object]]:
    """Return zero-filled per-day counts."""
    container: AppContainer = request.app.state.container
    counts = container.report_service.elimination_daily(days)
    return [serialize_elimination_day(day) for day in counts]


@router.patch("/{entry_id}")
async def update_elimination(
    entry_id: int, body: EliminationUpdate, request: Request
) -> dict[str, object]:
    """Edit the sent fields of an event."""
    container: AppContainer = request.app.state.container
    patch = body.model_dump(exclude_unset=True)
    if "timestamp" in patch:
        patch["timestamp"] = localize(
            patch["timestamp"], container.settings.reporting_timezone
        )
    entry = container.elimination_service.update(entry_id, patch)
    return serialize_elimination(entry)


@router.delete("/{entry_id}")
async def delete_elimination(entry_id: int, request: Request) -> dict[str, object]:
    """Delete an event."""
    container: AppContainer = request.app.state.container
    container.elimination_service.delete(entry_id)
    return {"ok": True}
