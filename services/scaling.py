"""
Scaling Service

Functions for multiplying ingredient amounts by a serving multiplier.
"""

import logging
import math

from constants import DEFAULT_TABLES
from models import MeasurementSystem, Scalar
from .amounts import match_amount
from .formatting import format_quantity
from .units import classify_system

logger = logging.getLogger(__name__)


def check_multiplier(multiplier):
    """Return the multiplier as a float, rejecting non-positive or non-finite values."""
    try:
        value = float(multiplier)
    except (TypeError, ValueError):
        raise ValueError(f"multiplier must be a number, got {multiplier!r}")
    if not math.isfinite(value) or value <= 0:
        raise ValueError(f"multiplier must be positive, got {multiplier!r}")
    return value


def pluralize_unit(unit, quantity, tables=DEFAULT_TABLES):
    """
    Pluralize the unit display for scalars above one ("cup" -> "cups").

    Only US units spelled out in full are touched; abbreviations, metric
    units and ranges keep their display.
    """
    if unit is None or not isinstance(quantity, Scalar) or quantity.value <= 1:
        return unit
    if classify_system(unit, tables) != MeasurementSystem.US:
        return unit
    plural = tables.plural_display.get(unit.name)
    if plural and unit.display.lower() == unit.name:
        return unit.with_display(plural)
    return unit


def scale(ingredient, multiplier, tables=DEFAULT_TABLES):
    """
    Apply a multiplier to an ingredient's amount.

    The new amount keeps the style of the original one ("½" stays Unicode,
    "1/2" stays ASCII) and ranges keep their connector ("3 to 4" -> "6 to 8").
    """
    multiplier = check_multiplier(multiplier)
    if multiplier == 1 or ingredient.quantity is None:
        return ingredient

    quantity = ingredient.quantity.scaled(multiplier)
    amount = format_quantity(quantity, style_hint=ingredient.amount, tables=tables)
    unit = pluralize_unit(ingredient.unit, quantity, tables)
    logger.debug("Scaled %r x%s -> %r", ingredient.amount, multiplier, amount)
    return ingredient.evolve(quantity=quantity, amount=amount, unit=unit)


def scale_amount(amount_text, multiplier, tables=DEFAULT_TABLES):
    """
    Scale a bare amount string ("1 1/2", "3-4", "½").

    Text without a leading amount is returned unchanged.
    """
    multiplier = check_multiplier(multiplier)
    found = match_amount(amount_text, tables)
    if found is None:
        return amount_text
    if multiplier == 1:
        return found.text
    quantity = found.quantity.scaled(multiplier)
    return format_quantity(quantity, style_hint=found.text, tables=tables)
