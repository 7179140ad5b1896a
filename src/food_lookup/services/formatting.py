"""Display formatting for food names and nutrient values."""

import math

from food_lookup.services.numbers import parse_locale_number


def round_half_up(value: float, digits: int = 0) -> float:
    """Round to ``digits`` decimals with ties going up, as browser clients do.

    Non-finite values are returned unchanged.
    """
    if not math.isfinite(value):
        return value
    factor = 10**digits
    return math.floor(value * factor + 0.5) / factor


def format_food_name(name: str) -> str:
    """Tidy a table name for display: single spaces, capitalized first letter."""
    clauses = [" ".join(clause.split()) for clause in name.split(",")]
    cleaned = ", ".join(clause for clause in clauses if clause)
    if not cleaned:
        return ""
    return cleaned[0].upper() + cleaned[1:]


def format_calories(raw: str | float | None) -> str:
    """Format a calorie value, keeping the raw text when it doesn't parse."""
    value = parse_locale_number(raw)
    if value == 0:
        return "" if raw is None else str(raw)
    return f"{round_half_up(value):.0f} kcal"


def format_nutrient(raw: str | float | None) -> str:
    """Format a macro value with one decimal."""
    return f"{parse_locale_number(raw):.1f}"


def format_admin_value(raw: str | None) -> str:
    """Format a stored value for the library listing."""
    if not raw or raw == "0":
        return "-"
    return raw
