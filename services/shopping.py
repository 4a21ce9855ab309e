"""
Shopping List Service

Functions for turning parsed ingredients into display lines, clipboard
text and shopping-site search terms.
"""

import re
from collections import Counter

from constants import DEFAULT_TABLES
from models import MeasurementSystem
from .conversion import convert_ingredient
from .parsing import parse_lines
from .scaling import scale
from .units import classify_system


def format_ingredient(ingredient, system=None, multiplier=1, tables=DEFAULT_TABLES):
    """Scale an ingredient, then convert it to ``system`` when one is given."""
    formatted = scale(ingredient, multiplier, tables)
    if system:
        formatted = convert_ingredient(formatted, system, tables)
    return formatted


def ingredient_to_text(ingredient):
    """Format an ingredient as a single line: 'amount unit name (notes)'."""
    parts = []
    if ingredient.amount:
        parts.append(ingredient.amount)
    if ingredient.unit:
        parts.append(ingredient.unit.display)
    if ingredient.name:
        parts.append(ingredient.name)
    text = ' '.join(parts)
    if ingredient.notes:
        text += f" ({ingredient.notes})"
    return text.strip()


def format_dual_amount(ingredient, tables=DEFAULT_TABLES):
    """
    Format an amount in both systems, e.g. '1 cup | 236.59 ml'.

    Ingredients whose unit has no system (or no unit at all) show a single
    amount.
    """
    first = ' '.join(p for p in (ingredient.amount, ingredient.unit.display if ingredient.unit else '') if p)
    source = classify_system(ingredient.unit, tables) if ingredient.unit else MeasurementSystem.UNKNOWN
    if source == MeasurementSystem.UNKNOWN or ingredient.quantity is None:
        return first
    other = MeasurementSystem.METRIC if source == MeasurementSystem.US else MeasurementSystem.US
    converted = convert_ingredient(ingredient, other, tables)
    if converted is ingredient:
        return first
    return f"{first} | {converted.amount} {converted.unit.display}"


def search_term(ingredient):
    """Shopping-site search query: the ingredient name without parentheticals."""
    term = re.sub(r'\(.*?\)', '', ingredient.name or '')
    return re.sub(r'\s+', ' ', term).strip()


def detect_measurement_system(ingredients, tables=DEFAULT_TABLES):
    """
    Guess which system a recipe is written in by counting its units.

    Returns METRIC only when metric units outnumber US ones.
    """
    counts = Counter(
        classify_system(ing.unit, tables) for ing in ingredients if ing.unit is not None
    )
    if counts[MeasurementSystem.METRIC] > counts[MeasurementSystem.US]:
        return MeasurementSystem.METRIC
    return MeasurementSystem.US


def build_shopping_list(lines, system=None, multiplier=1, tables=DEFAULT_TABLES):
    """
    Parse and format a list of ingredient lines for display.

    Returns a dict with the formatted ingredients, the clipboard text, the
    search terms and the system the recipe was written in.
    """
    parsed = parse_lines(lines, tables)
    formatted = [format_ingredient(ing, system, multiplier, tables) for ing in parsed]
    terms = [search_term(ing) for ing in formatted]
    return {
        'ingredients': formatted,
        'text': '\n'.join(ingredient_to_text(ing) for ing in formatted),
        'search_terms': [t for t in terms if t],
        'source_system': detect_measurement_system(parsed, tables),
    }
