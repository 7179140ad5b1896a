"""Dependency container wiring for the application."""

from collections.abc import Awaitable, Callable
from dataclasses import dataclass

from supabase import create_client

from food_lookup.adapters.supabase_food_repository import SupabaseFoodRepository
from food_lookup.config import Settings
from food_lookup.domain.foods import FoodRecord
from food_lookup.services.debounce import SearchController
from food_lookup.services.library import FoodLibraryService
from food_lookup.services.refresh import DataRefresher
from food_lookup.services.search import COMPACT_RESULT_LIMIT, FoodSearchService


@dataclass
class AppContainer:
    """Holds application-wide dependencies."""

    settings: Settings
    search_service: FoodSearchService
    library_service: FoodLibraryService

    def search_controller(
        self,
        on_results: Callable[[list[FoodRecord]], None] | None = None,
        limit: int = COMPACT_RESULT_LIMIT,
    ) -> SearchController:
        """Create a debounced search bound to the search service."""

        async def search(term: str) -> list[FoodRecord]:
            return await self.search_service.search(term, limit=limit)

        return SearchController(
            search=search,
            on_results=on_results,
            debounce_seconds=self.settings.search_debounce_seconds,
        )

    def data_refresher(
        self, fetch: Callable[[], Awaitable[None]], user_id: str | None
    ) -> DataRefresher:
        """Create a guarded refresher for a screen's data."""
        return DataRefresher(
            fetch=fetch,
            user_id=user_id,
            min_interval_seconds=self.settings.refetch_min_interval_seconds,
        )


def build_container(settings: Settings | None = None) -> AppContainer:
    """Create the default dependency container."""
    resolved_settings = settings or Settings()
    supabase_client = create_client(
        resolved_settings.supabase_url, resolved_settings.supabase_service_key
    )
    food_repository = SupabaseFoodRepository(
        supabase_client, table_name=resolved_settings.foods_table
    )
    search_service = FoodSearchService(
        food_repository, fetch_limit=resolved_settings.candidate_fetch_limit
    )
    library_service = FoodLibraryService(food_repository)
    return AppContainer(
        settings=resolved_settings,
        search_service=search_service,
        library_service=library_service,
    )
