# Utility modules for the ingredient engine
from .sanitizer import (
    normalize_whitespace, sanitize_text, sanitize_ingredient_text
)
