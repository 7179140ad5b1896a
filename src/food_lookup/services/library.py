"""Services for maintaining the reference food table."""

import logging
from dataclasses import dataclass
from typing import Protocol

from food_lookup.domain.errors import FoodValidationError
from food_lookup.domain.foods import FoodForm, FoodRecord
from food_lookup.services.search import FoodCandidateSource

ADMIN_PAGE_SIZE = 50

_logger = logging.getLogger(__name__)


class FoodRepository(FoodCandidateSource, Protocol):
    """Persistence interface for the reference food table."""

    def get_food(self, food_id: int | str) -> FoodRecord | None:
        """Return a food by id, if present."""

    def create_food(self, payload: dict[str, str]) -> FoodRecord:
        """Create a food row and return it."""

    def update_food(self, food_id: int | str, payload: dict[str, str]) -> FoodRecord:
        """Update a food row and return it."""

    def delete_food(self, food_id: int | str) -> None:
        """Delete a food row."""


@dataclass
class FoodLibraryService:
    """Application service for food table administration."""

    repository: FoodRepository

    def list_foods(self) -> list[FoodRecord]:
        """Return every food ordered by name."""
        return self.repository.list_foods()

    def get_food(self, food_id: int | str) -> FoodRecord | None:
        """Return a food by id, if present."""
        return self.repository.get_food(food_id)

    def save_food(
        self, form: FoodForm, food_id: int | str | None = None
    ) -> FoodRecord:
        """Create a food, or update it when ``food_id`` is given."""
        payload = build_food_payload(form)
        if food_id is None:
            food = self.repository.create_food(payload)
            _logger.info("Food created: id=%s name=%s", food.id, food.name)
        else:
            food = self.repository.update_food(food_id, payload)
            _logger.info("Food updated: id=%s name=%s", food.id, food.name)
        return food

    def delete_food(self, food_id: int | str) -> None:
        """Delete a food."""
        self.repository.delete_food(food_id)
        _logger.info("Food deleted: id=%s", food_id)

    @staticmethod
    def filter_foods(foods: list[FoodRecord], term: str) -> list[FoodRecord]:
        """Filter foods whose name contains ``term``, ignoring case."""
        needle = term.lower()
        return [food for food in foods if needle in food.name.lower()]

    @staticmethod
    def page(
        foods: list[FoodRecord], size: int = ADMIN_PAGE_SIZE
    ) -> tuple[list[FoodRecord], int]:
        """Return the first page of foods and how many were left out."""
        return foods[:size], max(len(foods) - size, 0)


def build_food_payload(form: FoodForm) -> dict[str, str]:
    """Build a table payload from form values."""
    name = form.name.strip()
    if not name:
        raise FoodValidationError("Food name is required")
    return {
        "alimento": name,
        "caloria": form.calories or "0",
        "proteina": form.protein or "0",
        "carboidrato": form.carbs or "0",
        "fibra": form.fiber or "0",
        "gordura": form.fats or "0",
    }


def form_from_record(record: FoodRecord) -> FoodForm:
    """Prefill the form with an existing food's values."""
    return FoodForm(
        name=record.name,
        calories=record.calories,
        protein=record.protein,
        carbs=record.carbs,
        fiber=record.fiber,
        fats=record.fats,
    )
