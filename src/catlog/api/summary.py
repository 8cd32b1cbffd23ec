"""Report endpoints."""

from datetime import date

from fastapi import APIRouter, Depends, Query, Request

from catlog.api.auth import require_pin
from catlog.api.serializers import serialize_summary
from catlog.containers import AppContainer

router = APIRouter(
    prefix="/api/summary", tags=["summary"], dependencies=[Depends(require_pin)]
)


@router.get("/meals")
async def meal_summary(
    request: Request,
    days: int | None = Query(default=None),
    start_day: date | None = Query(default=None, alias="from"),
    end_day: date | None = Query(default=None, alias="to"),
) -> dict[str, object]:
    """Return daily feeding totals, sessions and the calorie moving average."""
    container: AppContainer = request.app.state.container
    summary = container.report_service.feeding_summary(
        days=days, start_day=start_day, end_day=end_day
    )
    return serialize_summary(summary)
