"""
Unit Conversion Service

Functions for converting amounts between US customary and metric units,
picking the unit a home cook would reach for.
"""

import logging

from constants import DEFAULT_TABLES
from models import MeasurementSystem, Scalar, Range, Unit
from .errors import UnconvertibleUnit
from .formatting import format_quantity
from .units import classify_system, normalize_unit

logger = logging.getLogger(__name__)


def to_base(value, unit_name, tables=DEFAULT_TABLES):
    """
    Convert a value to its base amount.

    Returns (base_value, base_unit) where base_unit is 'milliliter' or 'gram'.
    Raises UnconvertibleUnit for units without a conversion factor.
    """
    if unit_name in tables.volume_to_ml:
        return value * tables.volume_to_ml[unit_name], 'milliliter'
    if unit_name in tables.weight_to_g:
        return value * tables.weight_to_g[unit_name], 'gram'
    raise UnconvertibleUnit(f"no conversion factor for {unit_name!r}")


def _metric_unit(unit_name, tables):
    return Unit(unit_name, tables.metric_display.get(unit_name, unit_name))


def choose_metric_unit(base_value, base_unit, tables=DEFAULT_TABLES):
    """Upgrade ml -> L and g -> kg for large amounts."""
    if base_value >= tables.metric_upgrade_at:
        upgraded = 'liter' if base_unit == 'milliliter' else 'kilogram'
        return _metric_unit(upgraded, tables)
    return _metric_unit(base_unit, tables)


def choose_us_unit(base_value, base_unit, tables=DEFAULT_TABLES):
    """Pick teaspoon/tablespoon/fluid ounce/cup or ounce/pound by magnitude."""
    thresholds = tables.ml_thresholds if base_unit == 'milliliter' else tables.g_thresholds
    for upper, unit_name in thresholds:
        if upper is None or base_value < upper:
            return Unit(unit_name, unit_name)
    # Thresholds always end with an open bound
    raise UnconvertibleUnit(f"no US unit for {base_value} {base_unit}")


def choose_target_unit(value, unit, target, tables=DEFAULT_TABLES):
    """Destination unit for ``value`` ``unit`` in the ``target`` system."""
    base_value, base_unit = to_base(value, unit.name, tables)
    if target == MeasurementSystem.METRIC:
        return choose_metric_unit(base_value, base_unit, tables)
    return choose_us_unit(base_value, base_unit, tables)


def convert_to_unit(value, unit, target_unit, tables=DEFAULT_TABLES):
    """Convert ``value`` from ``unit`` into the given target Unit."""
    base_value, _ = to_base(value, unit.name, tables)
    factor, _ = to_base(1, target_unit.name, tables)
    return base_value / factor


def _needs_conversion(unit, target, tables):
    if target not in (MeasurementSystem.US, MeasurementSystem.METRIC):
        return False
    source = classify_system(unit, tables)
    return source != MeasurementSystem.UNKNOWN and source != target


def convert(value, unit, target, tables=DEFAULT_TABLES):
    """
    Convert a value between US customary and metric.

    ``unit`` may be a Unit or a raw unit string. Returns the arguments as
    given, unit untouched, when the unit is already in the target system or
    has no system (countable items like "2 onions"). A converted unit is
    always a Unit.
    """
    target = MeasurementSystem(target)
    source = normalize_unit(unit, tables) if isinstance(unit, str) else unit
    if source is None or not _needs_conversion(source, target, tables):
        return value, unit
    try:
        target_unit = choose_target_unit(value, source, target, tables)
        return convert_to_unit(value, source, target_unit, tables), target_unit
    except UnconvertibleUnit as e:
        logger.debug("Leaving %s %s unconverted: %s", value, source.name, e)
        return value, unit


def convert_quantity(quantity, unit, target, tables=DEFAULT_TABLES):
    """
    Convert a Scalar or Range.

    A range takes its destination unit from its low endpoint so both ends
    share one unit.
    """
    if isinstance(quantity, Scalar):
        value, new_unit = convert(quantity.value, unit, target, tables)
        return Scalar(value), new_unit

    target = MeasurementSystem(target)
    if unit is None or not _needs_conversion(unit, target, tables):
        return quantity, unit
    try:
        target_unit = choose_target_unit(quantity.low, unit, target, tables)
        low = convert_to_unit(quantity.low, unit, target_unit, tables)
        high = convert_to_unit(quantity.high, unit, target_unit, tables)
    except UnconvertibleUnit as e:
        logger.debug("Leaving range in %s unconverted: %s", unit.name, e)
        return quantity, unit
    return Range(low, high), target_unit


def convert_ingredient(ingredient, target, tables=DEFAULT_TABLES):
    """Return a copy of ``ingredient`` expressed in the ``target`` system."""
    if ingredient.quantity is None or ingredient.unit is None:
        return ingredient
    quantity, unit = convert_quantity(ingredient.quantity, ingredient.unit, target, tables)
    if unit is ingredient.unit:
        return ingredient
    amount = format_quantity(quantity, connector_from=ingredient.amount, tables=tables)
    return ingredient.evolve(quantity=quantity, unit=unit, amount=amount)
