"""
Amount Parsing Service

Turns the quantity at the start of an ingredient line into a Scalar or
Range. Each supported notation is a separate strategy; the longest match
wins and ties go to the earlier strategy.
"""

import logging
import math
import re
from dataclasses import dataclass

from constants import DEFAULT_TABLES
from models import Scalar, Range
from .errors import NoAmountFound

logger = logging.getLogger(__name__)

MIXED_FRACTION_RE = re.compile(r'(\d+)\s+(\d+)\s*/\s*(\d+)')
SIMPLE_FRACTION_RE = re.compile(r'(\d+)\s*/\s*(\d+)')
DECIMAL_RE = re.compile(r'\d*\.\d+')
INTEGER_RE = re.compile(r'\d+')
DASH_CONNECTOR_RE = re.compile(r'\s*[-–—]\s*')
WORD_CONNECTOR_RE = re.compile(r'\s+to\s+', re.IGNORECASE)

# Fractions and decimals must not run into a trailing decimal point ("1/2.5")
_NOT_FOLLOWED_BY_DIGIT = re.compile(r'(?![\d.])')


@dataclass(frozen=True)
class AmountMatch:
    """A quantity plus the span of text it was read from."""
    quantity: object
    text: str
    end: int


def _number(digits):
    """Float value of a digit run, or None when it does not fit in a float."""
    try:
        return float(int(digits))
    except (OverflowError, ValueError):
        return None


def _fraction(num, den):
    num, den = _number(num), _number(den)
    if num is None or not den:
        return None
    return num / den


def _unicode_class(tables):
    return '[' + ''.join(re.escape(ch) for ch in tables.unicode_fractions) + ']'


def _finish(text, pos, end, value):
    if value is None or not math.isfinite(value):
        return None
    if not _NOT_FOLLOWED_BY_DIGIT.match(text, end):
        return None
    return AmountMatch(Scalar(value), text[pos:end], end)


def match_mixed_fraction(text, pos=0, tables=DEFAULT_TABLES):
    """Mixed ASCII fraction: "1 1/2"."""
    m = MIXED_FRACTION_RE.match(text, pos)
    if not m:
        return None
    whole = _number(m.group(1))
    frac = _fraction(m.group(2), m.group(3))
    if whole is None or frac is None:
        return None
    return _finish(text, pos, m.end(), whole + frac)


def match_simple_fraction(text, pos=0, tables=DEFAULT_TABLES):
    """Simple ASCII fraction: "3/4"."""
    m = SIMPLE_FRACTION_RE.match(text, pos)
    if not m:
        return None
    return _finish(text, pos, m.end(), _fraction(m.group(1), m.group(2)))


def match_decimal(text, pos=0, tables=DEFAULT_TABLES):
    """Decimal: "1.5" or ".5"."""
    m = DECIMAL_RE.match(text, pos)
    if not m:
        return None
    return _finish(text, pos, m.end(), float(m.group(0)))


def match_integer(text, pos=0, tables=DEFAULT_TABLES):
    """Whole number: "2"."""
    m = INTEGER_RE.match(text, pos)
    if not m:
        return None
    value = _number(m.group(0))
    if value is None:
        return None
    return AmountMatch(Scalar(value), m.group(0), m.end())


def match_mixed_unicode(text, pos=0, tables=DEFAULT_TABLES):
    """Mixed Unicode fraction: "1½" or "1 ½"."""
    m = re.compile(r'(\d+)\s?(' + _unicode_class(tables) + ')').match(text, pos)
    if not m:
        return None
    whole = _number(m.group(1))
    if whole is None:
        return None
    value = whole + tables.unicode_fractions[m.group(2)]
    return AmountMatch(Scalar(value), m.group(0), m.end())


def match_unicode(text, pos=0, tables=DEFAULT_TABLES):
    """Bare Unicode fraction: "½"."""
    if pos < len(text) and text[pos] in tables.unicode_fractions:
        return AmountMatch(Scalar(tables.unicode_fractions[text[pos]]), text[pos], pos + 1)
    return None


SCALAR_STRATEGIES = (
    match_mixed_fraction,
    match_simple_fraction,
    match_decimal,
    match_integer,
    match_mixed_unicode,
    match_unicode,
)


def match_scalar(text, pos=0, tables=DEFAULT_TABLES):
    """Longest scalar match at ``pos`` across all scalar strategies."""
    return longest_match(SCALAR_STRATEGIES, text, pos, tables)


def _match_range(connector_re, text, pos, tables):
    first = match_scalar(text, pos, tables)
    if first is None:
        return None
    connector = connector_re.match(text, first.end)
    if not connector:
        return None
    second = match_scalar(text, connector.end(), tables)
    if second is None:
        return None
    quantity = Range.ordered(first.quantity.value, second.quantity.value)
    return AmountMatch(quantity, text[pos:second.end], second.end)


def match_dash_range(text, pos=0, tables=DEFAULT_TABLES):
    """Dash range: "1-2", "1 - 2", "1½–2"."""
    return _match_range(DASH_CONNECTOR_RE, text, pos, tables)


def match_word_range(text, pos=0, tables=DEFAULT_TABLES):
    """Word range: "1 to 2"."""
    return _match_range(WORD_CONNECTOR_RE, text, pos, tables)


# Priority order; earlier strategies win ties on match length
AMOUNT_STRATEGIES = SCALAR_STRATEGIES + (
    match_dash_range,
    match_word_range,
)


def longest_match(strategies, text, pos=0, tables=DEFAULT_TABLES):
    """Run every strategy at ``pos`` and keep the longest match."""
    best = None
    for strategy in strategies:
        found = strategy(text, pos, tables)
        if found is not None and (best is None or found.end > best.end):
            best = found
    return best


def match_amount(text, tables=DEFAULT_TABLES):
    """
    Match an amount at the start of ``text`` (leading whitespace ignored).

    Returns an AmountMatch whose ``end`` indexes into the original text,
    or None if the text does not start with an amount.
    """
    if not text:
        return None
    pos = len(text) - len(text.lstrip())
    return longest_match(AMOUNT_STRATEGIES, text, pos, tables)


def parse_amount(text, tables=DEFAULT_TABLES):
    """
    Parse the amount at the start of ``text``.

    Handles: 1, 1.5, 1/2, 1 1/2, ½, 1½, 1-2, 1 - 2, 1 to 2.
    Raises NoAmountFound if nothing matches.
    """
    found = match_amount(text, tables)
    if found is None:
        logger.debug("No amount found in %r", text)
        raise NoAmountFound(f"no amount at start of {text!r}")
    return found.quantity


def detect_range_connector(amount_text):
    """Return the connector a range amount was written with: ' to ' or '-'."""
    if amount_text and WORD_CONNECTOR_RE.search(amount_text):
        return ' to '
    return '-'
