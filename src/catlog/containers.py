"""Dependency container wiring for the application."""

from dataclasses import dataclass
from datetime import timedelta

from supabase import create_client

from catlog.adapters.supabase_elimination_repository import (
    SupabaseEliminationRepository,
)
from catlog.adapters.supabase_feeding_repository import SupabaseFeedingRepository
from catlog.adapters.supabase_food_repository import SupabaseFoodRepository
from catlog.adapters.supabase_weight_repository import SupabaseWeightRepository
from catlog.config import Settings
from catlog.services.eliminations import EliminationRepository, EliminationService
from catlog.services.feedings import FeedingLedgerService, FeedingRepository
from catlog.services.foods import FoodCatalogService, FoodRepository
from catlog.services.stats import ReportService
from catlog.services.weights import WeightRepository, WeightService


@dataclass
class AppContainer:
    """Holds application-wide dependencies."""

    settings: Settings
    food_service: FoodCatalogService
    feeding_service: FeedingLedgerService
    weight_service: WeightService
    elimination_service: EliminationService
    report_service: ReportService


def build_services(  # noqa: PLR0913
    settings: Settings,
    food_repository: FoodRepository,
    feeding_repository: FeedingRepository,
    weight_repository: WeightRepository,
    elimination_repository: EliminationRepository,
) -> AppContainer:
    """Wire services around the given repositories."""
    session_gap = timedelta(minutes=settings.session_gap_minutes)
    food_service = FoodCatalogService(food_repository)
    feeding_service = FeedingLedgerService(
        repository=feeding_repository,
        food_service=food_service,
        session_gap=session_gap,
    )
    weight_service = WeightService(weight_repository)
    elimination_service = EliminationService(elimination_repository)
    report_service = ReportService(
        feeding_service=feeding_service,
        weight_service=weight_service,
        elimination_service=elimination_service,
        timezone_name=settings.reporting_timezone,
        session_gap=session_gap,
        calorie_average_window=settings.calorie_average_window,
        weight_average_window=settings.weight_average_window,
    )
    return AppContainer(
        settings=settings,
        food_service=food_service,
        feeding_service=feeding_service,
        weight_service=weight_service,
        elimination_service=elimination_service,
        report_service=report_service,
    )


def build_container(settings: Settings | None = None) -> AppContainer:
    """Create the default dependency container."""
    resolved_settings = settings or Settings()
    supabase_client = create_client(
        resolved_settings.supabase_url, resolved_settings.supabase_service_key
    )
    return build_services(
        resolved_settings,
        food_repository=SupabaseFoodRepository(supabase_client),
        feeding_repository=SupabaseFeedingRepository(supabase_client),
        weight_repository=SupabaseWeightRepository(supabase_client),
        elimination_repository=SupabaseEliminationRepository(supabase_client),
    )
