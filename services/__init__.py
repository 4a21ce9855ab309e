"""
Services Package

Parsing, unit conversion, formatting and scaling of recipe ingredients.
"""

from .errors import (
    IngredientError,
    NoAmountFound,
    NoUnitFound,
    UnconvertibleUnit,
)

from .amounts import (
    AmountMatch,
    match_amount,
    parse_amount,
    detect_range_connector,
)

from .units import (
    normalize_unit,
    classify_system,
    match_unit,
)

from .conversion import (
    convert,
    convert_quantity,
    convert_ingredient,
)

from .formatting import (
    float_to_fraction,
    format_amount,
    format_quantity,
)

from .scaling import (
    scale,
    scale_amount,
)

from .parsing import (
    parse_line,
    parse_lines,
)

from .shopping import (
    format_ingredient,
    ingredient_to_text,
    format_dual_amount,
    search_term,
    detect_measurement_system,
    build_shopping_list,
)

from .engine import IngredientEngine

__all__ = [
    # Errors
    'IngredientError',
    'NoAmountFound',
    'NoUnitFound',
    'UnconvertibleUnit',
    # Amounts
    'AmountMatch',
    'match_amount',
    'parse_amount',
    'detect_range_connector',
    # Units
    'normalize_unit',
    'classify_system',
    'match_unit',
    # Conversion
    'convert',
    'convert_quantity',
    'convert_ingredient',
    # Formatting
    'float_to_fraction',
    'format_amount',
    'format_quantity',
    # Scaling
    'scale',
    'scale_amount',
    # Parsing
    'parse_line',
    'parse_lines',
    # Shopping
    'format_ingredient',
    'ingredient_to_text',
    'format_dual_amount',
    'search_term',
    'detect_measurement_system',
    'build_shopping_list',
    # Engine
    'IngredientEngine',
]
