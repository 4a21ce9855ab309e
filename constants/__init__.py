"""
Constants Package

Unit tables, conversion factors and validation limits.
"""

from .units import (
    US_UNITS,
    METRIC_UNITS,
    COUNT_UNITS,
    KNOWN_UNITS,
    UNIT_ALIASES,
    PLURAL_EXCEPTIONS,
    VOLUME_TO_ML,
    WEIGHT_TO_G,
    METRIC_DISPLAY,
    PLURAL_DISPLAY,
    COMMON_FRACTIONS,
    UNICODE_FRACTIONS,
)

from .validation import (
    VALID_SYSTEMS,
    MIN_MULTIPLIER,
    DEFAULT_MAX_MULTIPLIER,
    MAX_LENGTHS,
    DEFAULT_MAX_INGREDIENT_LINES,
    BULLET_CHARS,
)

from .tables import ConversionTables, DEFAULT_TABLES, load_tables

__all__ = [
    # Units
    'US_UNITS',
    'METRIC_UNITS',
    'COUNT_UNITS',
    'KNOWN_UNITS',
    'UNIT_ALIASES',
    'PLURAL_EXCEPTIONS',
    'VOLUME_TO_ML',
    'WEIGHT_TO_G',
    'METRIC_DISPLAY',
    'PLURAL_DISPLAY',
    'COMMON_FRACTIONS',
    'UNICODE_FRACTIONS',
    # Validation
    'VALID_SYSTEMS',
    'MIN_MULTIPLIER',
    'DEFAULT_MAX_MULTIPLIER',
    'MAX_LENGTHS',
    'DEFAULT_MAX_INGREDIENT_LINES',
    'BULLET_CHARS',
    # Tables
    'ConversionTables',
    'DEFAULT_TABLES',
    'load_tables',
]
