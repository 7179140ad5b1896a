"""Domain models for reference nutrition table rows."""

from dataclasses import dataclass
from datetime import datetime

from food_lookup.services.numbers import parse_locale_number


@dataclass(frozen=True)
class NutrientProfile:
    """Macronutrient values, either per 100g or for a portion."""

    calories: float
    protein: float
    carbs: float
    fats: float


@dataclass(frozen=True)
class FoodRecord:
    """Represents a row of the reference nutrition table.

    Nutrient fields keep the table's locale-formatted text (``"2,5"``) and are
    valued per 100g. Missing values are stored as ``"0"``.
    """

    id: int | str
    name: str
    calories: str = "0"
    protein: str = "0"
    carbs: str = "0"
    fats: str = "0"
    fiber: str = "0"
    created_at: datetime | None = None

    def nutrients(self) -> NutrientProfile:
        """Return the per-100g nutrient values as numbers."""
        return NutrientProfile(
            calories=parse_locale_number(self.calories),
            protein=parse_locale_number(self.protein),
            carbs=parse_locale_number(self.carbs),
            fats=parse_locale_number(self.fats),
        )


@dataclass(frozen=True)
class FoodForm:
    """Raw values typed into the food library form."""

    name: str
    calories: str = ""
    protein: str = ""
    carbs: str = ""
    fiber: str = ""
    fats: str = ""
