"""Admin API endpoints for the food table, with simple token auth."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from fastapi import APIRouter, Depends, Header, HTTPException, Request, status

from food_lookup.api.models import FoodFormModel
from food_lookup.api.serializers import serialize_food
from food_lookup.domain.errors import FoodValidationError
from food_lookup.domain.foods import FoodForm, FoodRecord
from food_lookup.services.library import FoodLibraryService

if TYPE_CHECKING:
    from food_lookup.containers import AppContainer

router = APIRouter(prefix="/admin", tags=["admin"])

# Starlette renamed HTTP_422_UNPROCESSABLE_ENTITY; the old name warns.
_UNPROCESSABLE = 422

_logger = logging.getLogger(__name__)


def _get_admin_token(request: Request) -> str:
    container: AppContainer = request.app.state.container
    return container.settings.admin_token


def _get_library_service(request: Request) -> FoodLibraryService:
    container: AppContainer = request.app.state.container
    return container.library_service


async def require_admin(
    x_admin_token: str | None = Header(default=None),
    admin_token: str = Depends(_get_admin_token),
) -> None:
    """Ensure requests include a valid admin token."""
    if not x_admin_token or x_admin_token != admin_token:
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED)


@router.get("/foods", dependencies=[Depends(require_admin)])
async def list_foods(
    q: str = "",
    library: FoodLibraryService = Depends(_get_library_service),
) -> dict[str, object]:
    """Return the first page of foods, optionally filtered by name."""
    foods = library.list_foods()
    matches = library.filter_foods(foods, q) if q else foods
    page, remaining = library.page(matches)
    return {
        "total": len(foods),
        "matched": len(matches),
        "remaining": remaining,
        "foods": [serialize_food(food).model_dump() for food in page],
    }


@router.post(
    "/foods",
    dependencies=[Depends(require_admin)],
    status_code=status.HTTP_201_CREATED,
)
async def create_food(
    payload: FoodFormModel,
    library: FoodLibraryService = Depends(_get_library_service),
) -> dict[str, object]:
    """Create a food."""
    food = _save(library, payload, food_id=None)
    return {"food": serialize_food(food).model_dump()}


@router.put("/foods/{food_id}", dependencies=[Depends(require_admin)])
async def update_food(
    food_id: int | str,
    payload: FoodFormModel,
    library: FoodLibraryService = Depends(_get_library_service),
) -> dict[str, object]:
    """Update a food."""
    if library.get_food(food_id) is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND)
    food = _save(library, payload, food_id=food_id)
    return {"food": serialize_food(food).model_dump()}


@router.delete("/foods/{food_id}", dependencies=[Depends(require_admin)])
async def delete_food(
    food_id: int | str,
    library: FoodLibraryService = Depends(_get_library_service),
) -> dict[str, str]:
    """Delete a food."""
    try:
        library.delete_food(food_id)
    except RuntimeError as exc:
        _logger.exception("Failed to delete food %s", food_id)
        raise HTTPException(status_code=status.HTTP_502_BAD_GATEWAY) from exc
    return {"status": "ok"}


def _save(
    library: FoodLibraryService, payload: FoodFormModel, food_id: int | str | None
) -> FoodRecord:
    form = FoodForm(**payload.model_dump())
    try:
        return library.save_food(form, food_id=food_id)
    except FoodValidationError as exc:
        raise HTTPException(status_code=_UNPROCESSABLE, detail=str(exc)) from exc
    except RuntimeError as exc:
        _logger.exception("Failed to save food %s", food_id)
        raise HTTPException(status_code=status.HTTP_502_BAD_GATEWAY) from exc
