"""
Validation Constants

Contains whitelist values and limits for validating API input.
"""

# Valid values for the target measurement system (whitelist)
VALID_SYSTEMS = {'us', 'metric'}

# Multiplier bounds accepted from callers
MIN_MULTIPLIER = 0.01
DEFAULT_MAX_MULTIPLIER = 100

# Maximum field lengths
MAX_LENGTHS = {
    'ingredient_text': 500,
    'amount': 50,
    'unit': 30,
    'request_text': 50000,
}

# Maximum number of ingredient lines per request
DEFAULT_MAX_INGREDIENT_LINES = 200

# List bullets stripped from the start of pasted ingredient lines
BULLET_CHARS = '-*•▪◦‣⁃#'
