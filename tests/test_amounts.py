"""Tests for amount parsing"""

import pytest

from models import Scalar, Range
from services.amounts import (
    match_amount,
    match_mixed_fraction,
    match_simple_fraction,
    match_decimal,
    match_integer,
    match_mixed_unicode,
    match_unicode,
    match_dash_range,
    match_word_range,
    parse_amount,
    detect_range_connector,
)
from services.errors import NoAmountFound


class TestStrategies:
    """Each notation on its own"""

    def test_mixed_fraction(self):
        found = match_mixed_fraction("1 1/2 cups")
        assert found.quantity == Scalar(1.5)
        assert found.text == "1 1/2"

    def test_simple_fraction(self):
        assert match_simple_fraction("3/4 cup").quantity == Scalar(0.75)

    def test_simple_fraction_zero_denominator(self):
        assert match_simple_fraction("1/0") is None

    def test_decimal(self):
        assert match_decimal("1.5 kg").quantity == Scalar(1.5)
        assert match_decimal(".5 kg").quantity == Scalar(0.5)

    def test_decimal_rejects_integer(self):
        assert match_decimal("2 eggs") is None

    def test_integer(self):
        assert match_integer("2 eggs").quantity == Scalar(2.0)

    def test_mixed_unicode(self):
        assert match_mixed_unicode("1½ cups").quantity == Scalar(1.5)
        assert match_mixed_unicode("2 ¼ cups").quantity == Scalar(2.25)

    def test_unicode(self):
        assert match_unicode("¾ cup").quantity == Scalar(0.75)
        assert match_unicode("cup") is None

    def test_dash_range(self):
        found = match_dash_range("1-2 cups")
        assert found.quantity == Range(1.0, 2.0)
        assert found.text == "1-2"

    def test_spaced_dash_range(self):
        assert match_dash_range("1 - 2 cups").quantity == Range(1.0, 2.0)

    def test_en_dash_range(self):
        assert match_dash_range("3–4 cloves").quantity == Range(3.0, 4.0)

    def test_word_range(self):
        found = match_word_range("3 to 4 cups broth")
        assert found.quantity == Range(3.0, 4.0)
        assert found.text == "3 to 4"

    def test_dash_without_second_amount(self):
        assert match_dash_range("2-inch piece ginger") is None


class TestMatchAmount:
    """Longest match across all strategies"""

    @pytest.mark.parametrize("text,expected", [
        ("2", Scalar(2.0)),
        ("1.5", Scalar(1.5)),
        ("3/4", Scalar(0.75)),
        ("1 1/2", Scalar(1.5)),
        ("½", Scalar(0.5)),
        ("1½", Scalar(1.5)),
        ("1-2", Range(1.0, 2.0)),
        ("1 - 2", Range(1.0, 2.0)),
        ("1 to 2", Range(1.0, 2.0)),
        ("1½-2", Range(1.5, 2.0)),
        ("1 1/2 to 2 1/2", Range(1.5, 2.5)),
        ("½ - ¾", Range(0.5, 0.75)),
    ])
    def test_notations(self, text, expected):
        assert parse_amount(text) == expected

    def test_range_beats_integer(self):
        found = match_amount("3-4 cups broth")
        assert isinstance(found.quantity, Range)
        assert found.end == 3

    def test_leading_whitespace_ignored(self):
        found = match_amount("  2 eggs")
        assert found.quantity == Scalar(2.0)
        assert found.end == 3

    def test_descending_range_is_ordered(self):
        assert parse_amount("4-2") == Range(2.0, 4.0)

    def test_not_rounded(self):
        assert parse_amount("1/3").value == pytest.approx(1 / 3)

    def test_unicode_and_ascii_agree(self):
        assert parse_amount("½") == parse_amount("1/2")
        assert parse_amount("1¼") == parse_amount("1 1/4")

    def test_no_match_for_empty(self):
        assert match_amount("") is None
        assert match_amount(None) is None


class TestParseAmountErrors:
    """No amount is an error, not a crash"""

    @pytest.mark.parametrize("text", ["", "salt", "to taste", "a pinch"])
    def test_no_amount(self, text):
        with pytest.raises(NoAmountFound):
            parse_amount(text)

    def test_no_amount_is_value_error(self):
        with pytest.raises(ValueError):
            parse_amount("salt")


class TestRangeConnector:
    """Connector detection for reassembling ranges"""

    def test_word(self):
        assert detect_range_connector("3 to 4") == " to "

    def test_dash(self):
        assert detect_range_connector("3-4") == "-"
        assert detect_range_connector("3 - 4") == "-"

    def test_default(self):
        assert detect_range_connector("") == "-"
        assert detect_range_connector(None) == "-"


class TestOversizedNumbers:
    """Numbers that do not fit in a float are not amounts"""

    def test_integer(self):
        assert match_integer("9" * 400 + " cups") is None

    def test_fraction(self):
        assert match_simple_fraction("9" * 400 + "/1") is None
        assert match_simple_fraction("1/" + "9" * 400) is None

    def test_mixed_fraction(self):
        assert match_mixed_fraction("9" * 400 + " 1/2") is None

    def test_decimal(self):
        assert match_decimal("9" * 400 + ".5") is None

    def test_mixed_unicode(self):
        assert match_mixed_unicode("9" * 400 + "½") is None

    def test_beyond_int_digit_limit(self):
        assert match_amount("9" * 5000) is None

    def test_parse_amount_raises_no_amount(self):
        with pytest.raises(NoAmountFound):
            parse_amount("9" * 400)
