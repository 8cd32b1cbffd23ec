"""Tests for container wiring."""

from datetime import timedelta

from catlog.adapters.supabase_feeding_repository import SupabaseFeedingRepository
from catlog.containers import build_container


def test_build_container_creates_services(settings) -> None:
    container = build_container(settings)

    assert isinstance(
        container.feeding_service.repository, SupabaseFeedingRepository
    )
    assert container.report_service.timezone_name == "Asia/Tokyo"
    assert container.feeding_service.session_gap == timedelta(minutes=15)
