"""
Engine Errors

None of these are fatal: the line parser and converter catch them and fall
back to passing text or values through unchanged.
"""


class IngredientError(ValueError):
    """Base class for ingredient engine errors."""
    pass


class NoAmountFound(IngredientError):
    """Raised when text does not start with a recognizable amount."""
    pass


class NoUnitFound(IngredientError):
    """Raised when text does not start with a recognizable unit token."""
    pass


class UnconvertibleUnit(IngredientError):
    """Raised when a unit has no conversion factor (countable or unknown)."""
    pass
