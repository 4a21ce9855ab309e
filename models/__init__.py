"""
Models Package

Exports the ingredient value types used throughout the engine.
"""

from .ingredient import (
    MeasurementSystem,
    Scalar,
    Range,
    Quantity,
    Unit,
    Ingredient,
    quantity_from_dict,
)

__all__ = [
    'MeasurementSystem',
    'Scalar',
    'Range',
    'Quantity',
    'Unit',
    'Ingredient',
    'quantity_from_dict',
]
