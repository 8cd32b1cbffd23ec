"""Helpers shared by the Supabase repositories."""

import logging
from datetime import datetime
from typing import Any

from postgrest.exceptions import APIError

from catlog.errors import StorageError

logger = logging.getLogger(__name__)


def execute(query: Any, description: str) -> Any:  # noqa: ANN401
    """Run a PostgREST query, translating client errors into StorageError."""
    try:
        return query.execute()
    except APIError as exc:
        logger.exception("Supabase query failed", extra={"query": description})
        raise StorageError(exc.message or f"Failed to {description}") from exc


def parse_timestamp(raw: object) -> datetime | None:
    """Parse an ISO timestamp column."""
    if isinstance(raw, datetime):
        return raw
    if isinstance(raw, str) and raw:
        return datetime.fromisoformat(raw)
    return None


def optional_float(raw: object) -> float | None:
    """Coerce a numeric column, keeping nulls and dropping garbage."""
    if raw is None or isinstance(raw, bool):
        return None
    if isinstance(raw, int | float):
        return float(raw)
    if isinstance(raw, str):
        try:
            return float(raw)
        except ValueError:
            return None
    return None


def embedded_value(row: dict[str, object], relation: str, column: str) -> object:
    """Return a column from an embedded relation.

    PostgREST embeds a to-one relation as an object, but older client
    versions and some join shapes return a single-item list instead.
    """
    embedded = row.get(relation)
    if isinstance(embedded, list):
        embedded = embedded[0] if embedded else None
    if isinstance(embedded, dict):
        return embedded.get(column)
    return None
