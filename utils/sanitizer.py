"""
Input Sanitization Module

Cleans ingredient text from external sources (scraped pages, pasted text)
before it reaches the parser.
"""

import re

from constants import MAX_LENGTHS

# Non-breaking, thin and zero-width spaces that scraped text is full of
EXOTIC_WHITESPACE_RE = re.compile(r'[\u00a0\u1680\u2000-\u200b\u202f\u205f\u3000\ufeff]')

CONTROL_CHARS_RE = re.compile(r'[\x00-\x08\x0b-\x1f\x7f-\x9f]')


def normalize_whitespace(text):
    """Replace exotic spaces with regular ones and collapse runs of whitespace."""
    text = EXOTIC_WHITESPACE_RE.sub(' ', text)
    return re.sub(r'\s+', ' ', text).strip()


def sanitize_text(text, max_length=10000):
    """
    Sanitize free text.

    Args:
        text: The text to sanitize (can be None)
        max_length: Maximum allowed length (default 10000)

    Returns:
        Sanitized string, truncated if necessary. Newlines are kept.
    """
    if text is None:
        return ''

    if not isinstance(text, str):
        text = str(text)

    # Remove control characters (tabs and newlines survive)
    text = CONTROL_CHARS_RE.sub('', text)
    text = EXOTIC_WHITESPACE_RE.sub(' ', text)

    # Truncate if too long
    if len(text) > max_length:
        text = text[:max_length]

    return text.strip()


def sanitize_ingredient_text(text, max_length=None):
    """
    Sanitize a single ingredient line from external sources.

    Args:
        text: Single ingredient line
        max_length: Maximum length (default MAX_LENGTHS['ingredient_text'])

    Returns:
        Sanitized ingredient text on one line
    """
    if not text:
        return ''

    if max_length is None:
        max_length = MAX_LENGTHS['ingredient_text']

    if not isinstance(text, str):
        text = str(text)

    # Remove control characters
    text = CONTROL_CHARS_RE.sub('', text)

    text = normalize_whitespace(text)

    # Truncate
    if len(text) > max_length:
        text = text[:max_length].rstrip()

    return text
