"""Tests for US / metric conversion"""

import pytest

from models import Ingredient, MeasurementSystem, Scalar, Range, Unit
from services.conversion import (
    to_base,
    convert,
    convert_quantity,
    convert_ingredient,
)
from services.errors import UnconvertibleUnit
from services.units import classify_system
from services.parsing import parse_line


class TestToBase:
    """Factors into milliliters and grams"""

    def test_volume(self):
        assert to_base(1, 'cup') == (236.588, 'milliliter')

    def test_weight(self):
        assert to_base(2, 'pound') == (907.184, 'gram')

    def test_unconvertible(self):
        with pytest.raises(UnconvertibleUnit):
            to_base(1, 'clove')


class TestConvertToMetric:
    """US amounts into ml / L / g / kg"""

    def test_cup_to_ml(self):
        value, unit = convert(1, 'cup', 'metric')
        assert value == pytest.approx(236.588)
        assert unit == Unit('milliliter', 'ml')

    def test_large_volume_upgrades_to_liters(self):
        value, unit = convert(5, 'cups', 'metric')
        assert value == pytest.approx(1.18294)
        assert unit.name == 'liter'
        assert unit.display == 'L'

    def test_pound_to_grams(self):
        value, unit = convert(1, 'lb', 'metric')
        assert value == pytest.approx(453.592)
        assert unit.display == 'g'

    def test_heavy_weight_upgrades_to_kilograms(self):
        value, unit = convert(3, 'pounds', 'metric')
        assert value == pytest.approx(1.360776)
        assert unit.name == 'kilogram'


class TestConvertToUS:
    """Metric amounts into the unit a cook would use"""

    def test_small_volume_is_teaspoons(self):
        value, unit = convert(5, 'ml', 'us')
        assert unit.name == 'teaspoon'
        assert value == pytest.approx(1.0144, abs=1e-3)

    def test_medium_volume_is_tablespoons(self):
        value, unit = convert(30, 'ml', 'us')
        assert unit.name == 'tablespoon'
        assert value == pytest.approx(2.0288, abs=1e-3)

    def test_volume_below_a_cup_is_fluid_ounces(self):
        _, unit = convert(100, 'ml', 'us')
        assert unit.name == 'fluid ounce'

    def test_large_volume_is_cups(self):
        value, unit = convert(500, 'ml', 'us')
        assert unit.name == 'cup'
        assert value == pytest.approx(2.1134, abs=1e-3)

    def test_light_weight_is_ounces(self):
        _, unit = convert(50, 'g', 'us')
        assert unit.name == 'ounce'

    def test_heavy_weight_is_pounds(self):
        value, unit = convert(500, 'g', 'us')
        assert unit.name == 'pound'
        assert value == pytest.approx(1.1023, abs=1e-3)

    def test_liters(self):
        _, unit = convert(1, 'L', 'us')
        assert unit.name == 'cup'


class TestNoConversion:
    """Amounts that stay as they are"""

    def test_already_in_target_system(self):
        unit = Unit('cup', 'cups')
        assert convert(2, unit, 'us') == (2, unit)

    def test_countable_unit(self):
        unit = Unit('clove', 'cloves')
        assert convert(3, unit, MeasurementSystem.METRIC) == (3, unit)

    def test_unknown_unit(self):
        assert convert(2, 'handfuls', 'metric') == (2, 'handfuls')

    @pytest.mark.parametrize("raw", ["cup", "cups", "tbsp", "g", "ml", "clove"])
    def test_string_unit_returned_as_given(self, raw):
        system = classify_system(raw)
        assert convert(1.5, raw, system) == (1.5, raw)

    def test_string_unit_in_target_system(self):
        assert convert(2, 'cups', 'us') == (2, 'cups')

    def test_no_unit(self):
        assert convert(2, None, 'metric') == (2, None)

    def test_invalid_target(self):
        with pytest.raises(ValueError):
            convert(1, 'cup', 'imperial')


class TestConvertQuantity:
    """Scalars and ranges"""

    def test_range_shares_one_unit(self):
        quantity, unit = convert_quantity(Range(1.0, 2.0), Unit('cup', 'cups'), 'metric')
        assert isinstance(quantity, Range)
        assert quantity.low == pytest.approx(236.588)
        assert quantity.high == pytest.approx(473.176)
        assert unit.name == 'milliliter'

    def test_range_unit_chosen_from_low_end(self):
        quantity, unit = convert_quantity(Range(3.0, 5.0), Unit('cup', 'cups'), 'metric')
        # 5 cups is over a liter, but the low end is not
        assert unit.name == 'milliliter'
        assert quantity.high == pytest.approx(1182.94)

    def test_scalar(self):
        quantity, unit = convert_quantity(Scalar(2.0), Unit('tablespoon', 'tbsp'), 'metric')
        assert quantity.value == pytest.approx(29.5736)
        assert unit.display == 'ml'


class TestConvertIngredient:
    """Whole ingredient lines"""

    def test_formats_converted_amount(self):
        converted = convert_ingredient(parse_line("1 cup milk"), 'metric')
        assert converted.amount == '236.59'
        assert converted.unit.display == 'ml'
        assert converted.name == 'milk'

    def test_range_keeps_connector(self):
        converted = convert_ingredient(parse_line("1 to 2 cups stock"), 'metric')
        assert converted.amount == '236.59 to 473.18'

    def test_metric_to_us_decimal(self):
        converted = convert_ingredient(parse_line("250 ml cream"), 'us')
        assert converted.unit.name == 'cup'
        assert converted.amount == '1.1'

    def test_unchanged_returns_same_object(self):
        ingredient = parse_line("2 cups flour")
        assert convert_ingredient(ingredient, 'us') is ingredient

    def test_no_quantity(self):
        ingredient = Ingredient(name='salt', original_text='salt')
        assert convert_ingredient(ingredient, 'metric') is ingredient

    def test_name_and_notes_kept(self):
        converted = convert_ingredient(parse_line("8 oz cheddar (grated)"), 'metric')
        assert converted.unit.name == 'gram'
        assert converted.amount == '226 4/5'
        assert converted.notes == 'grated'
        assert converted.original_text == "8 oz cheddar (grated)"
