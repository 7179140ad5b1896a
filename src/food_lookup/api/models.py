"""Pydantic models for the HTTP API."""

from pydantic import BaseModel, Field


class NutrientsModel(BaseModel):
    """Macronutrient values."""

    calories: float
    protein: float
    carbs: float
    fats: float


class HighlightModel(BaseModel):
    """A segment of a food name for emphasis rendering."""

    text: str
    highlighted: bool


class FoodModel(BaseModel):
    """A reference food with raw and parsed per-100g values."""

    id: int | str
    name: str
    display_name: str
    calories: str
    protein: str
    carbs: str
    fats: str
    fiber: str
    per_100g: NutrientsModel
    calories_label: str


class SearchResultModel(FoodModel):
    """A search hit with highlight segments."""

    segments: list[HighlightModel]


class FoodFormModel(BaseModel):
    """Payload for creating or updating a food."""

    name: str
    calories: str = ""
    protein: str = ""
    carbs: str = ""
    fiber: str = ""
    fats: str = ""


class MealItemRequest(BaseModel):
    """A food to include in a meal preview."""

    food_id: int | str
    quantity: str | float | None = "100"


class MealPreviewRequest(BaseModel):
    """Payload for previewing an extra meal."""

    meal_name: str = ""
    items: list[MealItemRequest] = Field(default_factory=list)


class SelectedItemModel(BaseModel):
    """A food scaled to its chosen quantity."""

    id: str
    name: str
    quantity: float
    calories: float
    protein: float
    carbs: float
    fats: float


class MealPreviewResponse(BaseModel):
    """Scaled items and totals for a meal preview."""

    meal_name: str
    items: list[SelectedItemModel]
    totals: NutrientsModel
