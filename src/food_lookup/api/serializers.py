"""Conversions from domain objects to API models."""

from food_lookup.api.models import FoodModel, NutrientsModel, SelectedItemModel
from food_lookup.domain.foods import FoodRecord, NutrientProfile
from food_lookup.domain.meals import AggregateTotals, SelectedItem
from food_lookup.services.formatting import format_calories, format_food_name


def serialize_nutrients(values: NutrientProfile | AggregateTotals) -> NutrientsModel:
    """Serialize nutrient values."""
    return NutrientsModel(
        calories=values.calories,
        protein=values.protein,
        carbs=values.carbs,
        fats=values.fats,
    )


def serialize_food(food: FoodRecord) -> FoodModel:
    """Serialize a reference food with its parsed per-100g values."""
    return FoodModel(
        id=food.id,
        name=food.name,
        display_name=format_food_name(food.name),
        calories=food.calories,
        protein=food.protein,
        carbs=food.carbs,
        fats=food.fats,
        fiber=food.fiber,
        per_100g=serialize_nutrients(food.nutrients()),
        calories_label=format_calories(food.calories),
    )


def serialize_item(item: SelectedItem) -> SelectedItemModel:
    """Serialize a selected item."""
    return SelectedItemModel(
        id=str(item.id),
        name=item.name,
        quantity=item.quantity,
        calories=item.calories,
        protein=item.protein,
        carbs=item.carbs,
        fats=item.fats,
    )
