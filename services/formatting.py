"""
Amount Formatting Service

Functions for rendering numeric amounts back into the style a recipe was
written in: whole numbers, ASCII fractions, Unicode fractions or decimals.
"""

import math

from constants import DEFAULT_TABLES
from models import Range
from .amounts import detect_range_connector


def has_unicode_fraction(text, tables=DEFAULT_TABLES):
    """Check whether text contains a Unicode fraction glyph."""
    if not text:
        return False
    return any(ch in tables.unicode_fractions for ch in text)


def _nearest(decimal, table, tolerance):
    """Closest (value, label) within tolerance, or None."""
    best = None
    for value, label in table:
        # Rounded so float noise cannot pull 0.59 within 0.01 of 3/5
        distance = round(abs(decimal - value), 4)
        if distance < tolerance and (best is None or distance < best[0]):
            best = (distance, label)
    return best[1] if best else None


def format_decimal(value):
    """Decimal fallback: 1 place when the fraction is below 0.1, else 2."""
    if not math.isfinite(value):
        return str(value)
    rounded = round(value, 2)
    whole = int(rounded)
    places = 1 if rounded - whole < 0.1 else 2
    return f"{rounded:.{places}f}".rstrip('0').rstrip('.')


def float_to_fraction(value, tables=DEFAULT_TABLES):
    """Convert float to ASCII fraction string for display ("1 1/2")."""
    # Overflowed amounts ("inf") have no whole part to split off
    if not math.isfinite(value):
        return format_decimal(value)
    rounded = round(value, 2)
    # Check if it's a whole number
    if rounded == int(rounded):
        return str(int(rounded))
    # Split into whole and decimal parts
    whole = int(rounded)
    decimal = rounded - whole
    frac = _nearest(
        decimal,
        ((dec, label) for dec, label in tables.ascii_fractions.items()),
        tables.ascii_tolerance,
    )
    if frac:
        if whole > 0:
            return f"{whole} {frac}"
        return frac
    return format_decimal(rounded)


def float_to_unicode_fraction(value, tables=DEFAULT_TABLES):
    """Convert float to whole part plus Unicode glyph ("1½")."""
    if not math.isfinite(value):
        return format_decimal(value)
    rounded = round(value, 2)
    if rounded == int(rounded):
        return str(int(rounded))
    whole = int(rounded)
    decimal = rounded - whole
    glyph = _nearest(
        decimal,
        ((dec, ch) for ch, dec in tables.unicode_fractions.items()),
        tables.unicode_tolerance,
    )
    if glyph:
        if whole > 0:
            return f"{whole}{glyph}"
        return glyph
    return format_decimal(rounded)


def format_amount(value, style_hint=None, tables=DEFAULT_TABLES):
    """
    Format a number in the register of ``style_hint``.

    When the hint (usually the amount as originally written) contains a
    Unicode fraction, the result uses Unicode fractions too. Otherwise ASCII
    fractions, whole numbers or decimals are used.
    """
    if has_unicode_fraction(style_hint, tables):
        return float_to_unicode_fraction(value, tables)
    return float_to_fraction(value, tables)


def format_quantity(quantity, style_hint=None, connector_from=None, tables=DEFAULT_TABLES):
    """
    Format a Scalar or Range.

    Range endpoints are joined with the connector found in ``connector_from``
    (falling back to ``style_hint``): " to " or "-".
    """
    if quantity is None:
        return ''
    if isinstance(quantity, Range):
        connector = detect_range_connector(connector_from if connector_from is not None else style_hint)
        low = format_amount(quantity.low, style_hint, tables)
        high = format_amount(quantity.high, style_hint, tables)
        return f"{low}{connector}{high}"
    return format_amount(quantity.value, style_hint, tables)
