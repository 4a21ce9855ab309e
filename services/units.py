"""
Unit Normalization Service

Functions for canonicalizing unit spellings and classifying them by
measurement system.
"""

import logging
import re
from dataclasses import dataclass

from constants import DEFAULT_TABLES
from models import MeasurementSystem, Unit
from .errors import NoUnitFound

logger = logging.getLogger(__name__)

# One or two words, each optionally ending in a period ("fl. oz.", "Tbsp.")
UNIT_TOKEN_RE = re.compile(r'([A-Za-z]+\.?)(?:[ \t]+([A-Za-z]+\.?))?')


@dataclass(frozen=True)
class UnitMatch:
    """A known unit plus the span of text it was read from."""
    unit: Unit
    end: int


def canonical_unit_name(raw, tables=DEFAULT_TABLES):
    """
    Resolve a raw unit token to its canonical name.

    Returns None when the token is not a known unit.
    """
    if not raw:
        return None
    clean = re.sub(r'\s+', ' ', raw.strip()).rstrip('.').lower()
    known = tables.known_units
    if clean in known:
        return clean
    if clean in tables.unit_aliases:
        return tables.unit_aliases[clean]
    if clean in tables.plural_exceptions:
        return tables.plural_exceptions[clean]

    # Generic plural: strip the 's' only if what remains is a unit
    if clean.endswith('s') and len(clean) > 1:
        singular = clean[:-1]
        if singular in known:
            return singular
        if singular in tables.unit_aliases:
            return tables.unit_aliases[singular]
    return None


def normalize_unit(raw, tables=DEFAULT_TABLES):
    """
    Normalize a unit token, keeping its original spelling as the display.

    Unknown tokens pass through as unknown units rather than raising,
    since many lines legitimately have no unit ("2 eggs").
    """
    name = canonical_unit_name(raw, tables)
    if name is None:
        return Unit.unknown(raw)
    return Unit(name, (raw or '').strip())


def classify_system(unit, tables=DEFAULT_TABLES):
    """Return the measurement system of a Unit or canonical unit name."""
    name = unit.name if isinstance(unit, Unit) else unit
    if name in tables.us_units:
        return MeasurementSystem.US
    if name in tables.metric_units:
        return MeasurementSystem.METRIC
    return MeasurementSystem.UNKNOWN


def _at_boundary(text, end):
    return end == len(text) or text[end].isspace()


def match_unit(text, tables=DEFAULT_TABLES):
    """
    Match a known unit token at the start of ``text``.

    Two-word units ("fl oz", "fluid ounces") are tried before one-word
    ones. A token only counts when followed by whitespace or end of text.
    Raises NoUnitFound otherwise.
    """
    m = UNIT_TOKEN_RE.match(text or '')
    if m:
        candidates = []
        if m.group(2):
            candidates.append(m.end(2))
        candidates.append(m.end(1))
        for end in candidates:
            token = text[:end]
            if not _at_boundary(text, end):
                continue
            name = canonical_unit_name(token, tables)
            if name is not None:
                return UnitMatch(Unit(name, token), end)
    logger.debug("No unit found at start of %r", text)
    raise NoUnitFound(f"no unit at start of {text!r}")
