"""Parsing helpers for locale-formatted numbers."""

import math


def parse_locale_number(value: str | float | None) -> float:
    """Parse a number that may use a comma as decimal separator.

    Returns 0 for empty or malformed input instead of raising.
    """
    if isinstance(value, int | float):
        return 0.0 if math.isnan(value) else value
    if value is None or value == "":
        return 0.0
    try:
        parsed = float(str(value).replace(",", "."))
    except ValueError:
        return 0.0
    return 0.0 if math.isnan(parsed) else parsed


def parse_quantity(raw: str | float | None, default: float) -> float:
    """Parse a typed gram quantity, using ``default`` when it is unusable."""
    quantity = parse_locale_number(raw)
    if quantity == 0:
        return default
    return quantity
