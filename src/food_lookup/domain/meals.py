"""Domain models for meals assembled from searched foods."""

from dataclasses import dataclass, field
from uuid import UUID


@dataclass
class SelectedItem:
    """A food added to an in-progress meal at a chosen quantity."""

    id: UUID
    name: str
    quantity: float
    calories: float
    protein: float
    carbs: float
    fats: float


@dataclass(frozen=True)
class AggregateTotals:
    """Summed nutrients for a collection of selected items."""

    calories: float = 0.0
    protein: float = 0.0
    carbs: float = 0.0
    fats: float = 0.0


@dataclass(frozen=True)
class ExtraMeal:
    """A saved extra meal with its items and totals."""

    id: UUID
    meal_name: str
    foods: list[SelectedItem] = field(default_factory=list)
    total_calories: float = 0.0
    total_protein: float = 0.0
    total_carbs: float = 0.0
    total_fats: float = 0.0
