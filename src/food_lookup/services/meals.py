"""Portion scaling and meal totals for selected foods."""

import logging
from dataclasses import dataclass, field, replace
from uuid import UUID, uuid4

from food_lookup.domain.errors import FoodValidationError
from food_lookup.domain.foods import FoodRecord, NutrientProfile
from food_lookup.domain.meals import AggregateTotals, ExtraMeal, SelectedItem
from food_lookup.services.formatting import format_food_name, round_half_up
from food_lookup.services.numbers import parse_quantity

DEFAULT_QUANTITY_G = 100.0
DEFAULT_MEAL_NAME = "Refeicao Extra"

_logger = logging.getLogger(__name__)


def scale(per_100g: NutrientProfile, quantity_grams: float) -> NutrientProfile:
    """Scale per-100g values to a quantity.

    Calories are rounded to whole units and macros to one decimal.
    """
    multiplier = quantity_grams / 100
    return NutrientProfile(
        calories=round_half_up(per_100g.calories * multiplier),
        protein=round_half_up(per_100g.protein * multiplier * 10) / 10,
        carbs=round_half_up(per_100g.carbs * multiplier * 10) / 10,
        fats=round_half_up(per_100g.fats * multiplier * 10) / 10,
    )


def rescale(item: SelectedItem, new_quantity_grams: float) -> SelectedItem:
    """Return the item re-derived for a new quantity.

    The per-100g rate is recovered from the item's current values, so repeated
    edits can drift by a rounding unit.
    """
    rate = _recover_rate(item)
    scaled = scale(rate, new_quantity_grams)
    return replace(
        item,
        quantity=new_quantity_grams,
        calories=scaled.calories,
        protein=scaled.protein,
        carbs=scaled.carbs,
        fats=scaled.fats,
    )


def aggregate(items: list[SelectedItem]) -> AggregateTotals:
    """Sum nutrients across items."""
    calories = protein = carbs = fats = 0.0
    for item in items:
        calories += item.calories
        protein += item.protein
        carbs += item.carbs
        fats += item.fats
    return AggregateTotals(calories=calories, protein=protein, carbs=carbs, fats=fats)


def build_selected_item(record: FoodRecord, quantity_grams: float) -> SelectedItem:
    """Create a selected item for a food at a quantity."""
    scaled = scale(record.nutrients(), quantity_grams)
    return SelectedItem(
        id=uuid4(),
        name=format_food_name(record.name),
        quantity=quantity_grams,
        calories=scaled.calories,
        protein=scaled.protein,
        carbs=scaled.carbs,
        fats=scaled.fats,
    )


def _recover_rate(item: SelectedItem) -> NutrientProfile:
    if item.quantity == 0:
        # No quantity to divide by; treat the stored values as the rate.
        return NutrientProfile(
            calories=item.calories,
            protein=item.protein,
            carbs=item.carbs,
            fats=item.fats,
        )
    multiplier = item.quantity / 100
    return NutrientProfile(
        calories=item.calories / multiplier,
        protein=item.protein / multiplier,
        carbs=item.carbs / multiplier,
        fats=item.fats / multiplier,
    )


@dataclass
class MealDraft:
    """An extra meal being assembled from searched foods."""

    items: list[SelectedItem] = field(default_factory=list)

    @property
    def totals(self) -> AggregateTotals:
        """Totals for the current items."""
        return aggregate(self.items)

    def add_food(
        self, record: FoodRecord, quantity_text: str | float | None = "100"
    ) -> SelectedItem:
        """Add a food at the typed quantity, defaulting to 100g."""
        quantity = parse_quantity(quantity_text, default=DEFAULT_QUANTITY_G)
        item = build_selected_item(record, quantity)
        self.items.append(item)
        return item

    def update_quantity(
        self, item_id: UUID, quantity_text: str | float | None
    ) -> SelectedItem | None:
        """Re-derive an item's nutrients for a newly typed quantity."""
        quantity = parse_quantity(quantity_text, default=0.0)
        for index, item in enumerate(self.items):
            if item.id == item_id:
                updated = rescale(item, quantity)
                self.items[index] = updated
                return updated
        return None

    def remove(self, item_id: UUID) -> None:
        """Remove an item from the draft."""
        self.items = [item for item in self.items if item.id != item_id]

    def discard(self) -> None:
        """Drop every item without saving."""
        self.items = []

    def save(self, meal_name: str = "") -> ExtraMeal:
        """Build the extra meal from the draft and reset it."""
        if not self.items:
            raise FoodValidationError("An extra meal needs at least one food")
        totals = self.totals
        meal = ExtraMeal(
            id=uuid4(),
            meal_name=meal_name.strip() or DEFAULT_MEAL_NAME,
            foods=list(self.items),
            total_calories=totals.calories,
            total_protein=totals.protein,
            total_carbs=totals.carbs,
            total_fats=totals.fats,
        )
        _logger.info(
            "Extra meal saved: name=%s items=%s calories=%s",
            meal.meal_name,
            len(meal.foods),
            meal.total_calories,
        )
        self.discard()
        return meal
