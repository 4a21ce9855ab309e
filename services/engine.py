"""
Ingredient Engine

A thin facade binding the service functions to one set of conversion
tables. The engine holds no other state, so one instance can be shared
freely between threads.
"""

from constants import DEFAULT_TABLES
from . import amounts, conversion, formatting, parsing, scaling, shopping, units


class IngredientEngine:
    """Parse, scale, convert and format ingredients with fixed tables."""

    def __init__(self, tables=None):
        self.tables = tables if tables is not None else DEFAULT_TABLES

    def parse_amount(self, text):
        return amounts.parse_amount(text, self.tables)

    def normalize_unit(self, raw):
        return units.normalize_unit(raw, self.tables)

    def classify_system(self, unit):
        return units.classify_system(unit, self.tables)

    def convert(self, value, unit, target):
        return conversion.convert(value, unit, target, self.tables)

    def convert_ingredient(self, ingredient, target):
        return conversion.convert_ingredient(ingredient, target, self.tables)

    def format_amount(self, value, style_hint=None):
        return formatting.format_amount(value, style_hint, self.tables)

    def scale(self, ingredient, multiplier):
        return scaling.scale(ingredient, multiplier, self.tables)

    def scale_amount(self, amount_text, multiplier):
        return scaling.scale_amount(amount_text, multiplier, self.tables)

    def parse_line(self, text):
        return parsing.parse_line(text, self.tables)

    def parse_lines(self, text):
        return parsing.parse_lines(text, self.tables)

    def format_ingredient(self, ingredient, system=None, multiplier=1):
        return shopping.format_ingredient(ingredient, system, multiplier, self.tables)

    def build_shopping_list(self, lines, system=None, multiplier=1):
        return shopping.build_shopping_list(lines, system, multiplier, self.tables)
