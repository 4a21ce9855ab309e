"""
Unit Constants and Conversion Tables

Contains unit aliases, measurement-system classification, conversion
factors and fraction display tables used by the ingredient engine.
"""

# Canonical unit names understood by the engine
US_UNITS = {
    'cup', 'tablespoon', 'teaspoon', 'fluid ounce',
    'pound', 'ounce', 'quart', 'gallon', 'pint',
}

METRIC_UNITS = {'milliliter', 'liter', 'gram', 'kilogram'}

# Countable units: recognized when parsing, never converted
COUNT_UNITS = {
    'clove', 'head', 'slice', 'piece', 'can', 'package',
    'bunch', 'stalk', 'sprig', 'pinch', 'dash', 'stick',
}

KNOWN_UNITS = US_UNITS | METRIC_UNITS | COUNT_UNITS

# Abbreviations and spelling variants (lowercase input -> canonical unit)
UNIT_ALIASES = {
    'tbsp': 'tablespoon', 'tbl': 'tablespoon', 'tbs': 'tablespoon', 'tb': 'tablespoon',
    'tsp': 'teaspoon', 't': 'teaspoon', 'ts': 'teaspoon',
    'oz': 'ounce',
    'lb': 'pound', 'lbs': 'pound',
    'g': 'gram', 'gr': 'gram', 'gramme': 'gram',
    'kg': 'kilogram', 'kilo': 'kilogram',
    'ml': 'milliliter', 'millilitre': 'milliliter',
    'l': 'liter', 'litre': 'liter',
    'c': 'cup',
    'fl oz': 'fluid ounce', 'fl. oz': 'fluid ounce', 'floz': 'fluid ounce',
    'pt': 'pint', 'qt': 'quart', 'gal': 'gallon',
    'pkg': 'package',
}

# Plurals mapped directly instead of by stripping the trailing 's'
PLURAL_EXCEPTIONS = {
    'tablespoons': 'tablespoon',
    'teaspoons': 'teaspoon',
    'cups': 'cup',
    'ounces': 'ounce',
    'pounds': 'pound',
    'grams': 'gram',
    'kilograms': 'kilogram',
    'fluid ounces': 'fluid ounce',
    'pinches': 'pinch',
    'dashes': 'dash',
    'bunches': 'bunch',
}

# Volume conversions to ML
VOLUME_TO_ML = {
    'cup': 236.588,
    'tablespoon': 14.7868,
    'teaspoon': 4.92892,
    'fluid ounce': 29.5735,
    'pint': 473.176,
    'quart': 946.353,
    'gallon': 3785.41,
    'milliliter': 1,
    'liter': 1000,
}

# Weight conversions to G
WEIGHT_TO_G = {
    'pound': 453.592,
    'ounce': 28.3495,
    'gram': 1,
    'kilogram': 1000,
}

# Metric -> US destination by magnitude (exclusive upper bound in ml/g, unit)
ML_TO_US_THRESHOLDS = (
    (15, 'teaspoon'),
    (60, 'tablespoon'),
    (240, 'fluid ounce'),
    (None, 'cup'),
)

G_TO_US_THRESHOLDS = (
    (100, 'ounce'),
    (None, 'pound'),
)

# Metric amounts at or above this are upgraded to L / kg
METRIC_UPGRADE_AT = 1000

# Display spelling for converted metric units
METRIC_DISPLAY = {
    'milliliter': 'ml',
    'liter': 'L',
    'gram': 'g',
    'kilogram': 'kg',
}

# US unit names that take a plural display when scaled above one
PLURAL_DISPLAY = {
    'cup': 'cups',
    'tablespoon': 'tablespoons',
    'teaspoon': 'teaspoons',
    'ounce': 'ounces',
    'fluid ounce': 'fluid ounces',
    'pound': 'pounds',
    'pint': 'pints',
    'quart': 'quarts',
    'gallon': 'gallons',
}

# Common fractions for display (using precise values)
COMMON_FRACTIONS = {
    0.125: '1/8', 0.2: '1/5', 0.25: '1/4', 1/3: '1/3', 0.375: '3/8',
    0.4: '2/5', 0.5: '1/2', 0.6: '3/5', 0.625: '5/8', 2/3: '2/3',
    0.75: '3/4', 0.8: '4/5', 0.875: '7/8'
}

# Unicode fraction characters mapping
UNICODE_FRACTIONS = {
    '\u00bd': 0.5,    # ½
    '\u2153': 1/3,    # ⅓
    '\u2154': 2/3,    # ⅔
    '\u00bc': 0.25,   # ¼
    '\u00be': 0.75,   # ¾
    '\u2155': 0.2,    # ⅕
    '\u2156': 0.4,    # ⅖
    '\u2157': 0.6,    # ⅗
    '\u2158': 0.8,    # ⅘
    '\u2159': 1/6,    # ⅙
    '\u215a': 5/6,    # ⅚
    '\u215b': 0.125,  # ⅛
    '\u215c': 0.375,  # ⅜
    '\u215d': 0.625,  # ⅝
    '\u215e': 0.875,  # ⅞
}

# Snapping tolerances for fraction display
ASCII_FRACTION_TOLERANCE = 0.01
UNICODE_FRACTION_TOLERANCE = 0.05
