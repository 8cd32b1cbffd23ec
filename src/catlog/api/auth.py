"""Shared-secret PIN gate for the API routes."""

from __future__ import annotations

from typing import TYPE_CHECKING

from fastapi import Depends, Header, HTTPException, Request, status

from catlog.config import normalize_pin

if TYPE_CHECKING:
    from catlog.containers import AppContainer


def _get_pin(request: Request) -> str | None:
    container: AppContainer = request.app.state.container
    return normalize_pin(container.settings.catlog_pin)


async def require_pin(
    x_catlog_pin: str | None = Header(default=None),
    pin: str | None = Depends(_get_pin),
) -> None:
    """Ensure requests carry the configured PIN; open when none is set."""
    if pin is None:
        return
    if not x_catlog_pin or x_catlog_pin != pin:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED, detail="PIN required"
        )
