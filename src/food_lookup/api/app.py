"""FastAPI application factory."""

import logging

from fastapi import FastAPI, HTTPException, Query, Request, status

from food_lookup.api.admin import router as admin_router
from food_lookup.api.models import (
    HighlightModel,
    MealPreviewRequest,
    MealPreviewResponse,
    SearchResultModel,
)
from food_lookup.api.serializers import (
    serialize_food,
    serialize_item,
    serialize_nutrients,
)
from food_lookup.app_logging import configure_logging
from food_lookup.containers import AppContainer
from food_lookup.services.meals import DEFAULT_MEAL_NAME, MealDraft
from food_lookup.services.search import INLINE_RESULT_LIMIT, highlight_segments


def create_app(container: AppContainer) -> FastAPI:
    """Create a FastAPI app configured with dependencies."""
    configure_logging()
    logger = logging.getLogger(__name__)

    app = FastAPI()
    app.state.container = container

    app.include_router(admin_router)

    @app.get("/health")
    async def health() -> dict[str, str]:
        """Simple health check endpoint."""
        return {"status": "ok"}

    @app.get("/foods/search")
    async def search_foods(
        request: Request,
        q: str = "",
        limit: int = Query(default=INLINE_RESULT_LIMIT, ge=1, le=INLINE_RESULT_LIMIT),
    ) -> dict[str, object]:
        """Search the reference table by name."""
        state_container: AppContainer = request.app.state.container
        foods = await state_container.search_service.search(q, limit=limit)
        results = [
            SearchResultModel(
                **serialize_food(food).model_dump(),
                segments=[
                    HighlightModel(text=segment.text, highlighted=segment.highlighted)
                    for segment in highlight_segments(food.name, q)
                ],
            )
            for food in foods
        ]
        return {"query": q, "results": [result.model_dump() for result in results]}

    @app.post("/meals/preview")
    async def preview_meal(
        payload: MealPreviewRequest, request: Request
    ) -> MealPreviewResponse:
        """Scale the requested foods and total them without saving."""
        state_container: AppContainer = request.app.state.container
        draft = MealDraft()
        for entry in payload.items:
            food = state_container.library_service.get_food(entry.food_id)
            if food is None:
                logger.info("Meal preview references unknown food: %s", entry.food_id)
                raise HTTPException(
                    status_code=status.HTTP_404_NOT_FOUND,
                    detail=f"Food {entry.food_id} not found",
                )
            draft.add_food(food, entry.quantity)
        return MealPreviewResponse(
            meal_name=payload.meal_name.strip() or DEFAULT_MEAL_NAME,
            items=[serialize_item(item) for item in draft.items],
            totals=serialize_nutrients(draft.totals),
        )

    return app
