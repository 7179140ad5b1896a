"""Domain errors."""


class FoodValidationError(ValueError):
    """Raised when user-supplied food data cannot be accepted."""
