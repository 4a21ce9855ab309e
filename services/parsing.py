"""
Parsing Service

Functions for splitting free-form ingredient lines into amount, unit,
name and notes.
"""

import logging
import re

from constants import DEFAULT_TABLES, BULLET_CHARS
from models import Ingredient
from utils.sanitizer import sanitize_ingredient_text
from .amounts import match_amount
from .errors import NoUnitFound
from .units import match_unit

logger = logging.getLogger(__name__)

NOTES_RE = re.compile(r'\(([^)]*)\)')
BULLET_RE = re.compile(r'^[' + re.escape(BULLET_CHARS) + r']+\s*')


def _collapse(text):
    return re.sub(r'\s+', ' ', text).strip()


def extract_notes(text):
    """Pull the first parenthesized run out of text. Returns (text, notes)."""
    m = NOTES_RE.search(text)
    if not m:
        return text, None
    notes = m.group(1).strip() or None
    return _collapse(text[:m.start()] + ' ' + text[m.end():]), notes


def parse_line(text, tables=DEFAULT_TABLES):
    """
    Parse ingredient text like '1 1/2 cups flour (sifted)'.

    Never raises: anything that cannot be read as an amount or unit stays
    part of the name, so no text is dropped.
    """
    original = text if isinstance(text, str) else ('' if text is None else str(text))
    remainder = BULLET_RE.sub('', sanitize_ingredient_text(original))
    if not remainder:
        return Ingredient(name=original.strip(), original_text=original)

    # Order matters: each stage anchors to the start of what is left
    quantity = None
    amount = ''
    found = match_amount(remainder, tables)
    if found is not None:
        quantity = found.quantity
        amount = found.text.strip()
        remainder = remainder[found.end:].lstrip()

    unit = None
    if quantity is not None:
        try:
            unit_match = match_unit(remainder, tables)
            unit = unit_match.unit
            remainder = remainder[unit_match.end:].lstrip()
        except NoUnitFound:
            pass

    name, notes = extract_notes(remainder)
    name = _collapse(name)

    ingredient = Ingredient(
        quantity=quantity,
        amount=amount,
        unit=unit,
        name=name,
        notes=notes,
        original_text=original,
    )
    logger.debug("Parsed %r -> amount=%r unit=%r name=%r notes=%r",
                 original, amount, unit.name if unit else None, name, notes)
    return ingredient


def split_lines(text):
    """Split pasted recipe text into ingredient lines, dropping bullets and blanks."""
    if not text:
        return []
    lines = []
    for line in text.splitlines():
        line = BULLET_RE.sub('', line.strip())
        if line:
            lines.append(line)
    return lines


def parse_lines(text, tables=DEFAULT_TABLES):
    """Parse every ingredient line in a block of text."""
    lines = text if isinstance(text, (list, tuple)) else split_lines(text)
    return [parse_line(line, tables) for line in lines]
