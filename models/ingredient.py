"""
Ingredient Models

Contains the value types produced by the parser and consumed by the
scaling, conversion and formatting services.
"""

from dataclasses import dataclass, replace
from enum import Enum
from typing import Optional, Union

from constants import KNOWN_UNITS


class MeasurementSystem(str, Enum):
    """Measurement system a unit belongs to."""
    US = 'us'
    METRIC = 'metric'
    UNKNOWN = 'unknown'


@dataclass(frozen=True)
class Scalar:
    """A single amount, e.g. "1 1/2"."""
    value: float

    def __post_init__(self):
        if self.value < 0:
            raise ValueError(f"amount cannot be negative: {self.value}")

    def scaled(self, multiplier):
        return Scalar(self.value * multiplier)

    def to_dict(self):
        return {'type': 'scalar', 'value': self.value}


@dataclass(frozen=True)
class Range:
    """An amount given as two endpoints, e.g. "3-4" or "3 to 4"."""
    low: float
    high: float

    def __post_init__(self):
        if self.low < 0 or self.high < 0:
            raise ValueError(f"amount cannot be negative: {self.low}-{self.high}")
        if self.low > self.high:
            raise ValueError(f"range is descending: {self.low}-{self.high}")

    @classmethod
    def ordered(cls, a, b):
        return cls(min(a, b), max(a, b))

    def scaled(self, multiplier):
        return Range(self.low * multiplier, self.high * multiplier)

    def to_dict(self):
        return {'type': 'range', 'min': self.low, 'max': self.high}


Quantity = Union[Scalar, Range]


def quantity_from_dict(data):
    """Rebuild a Scalar or Range from its dict form."""
    if not data:
        return None
    if data.get('type') == 'range':
        return Range(float(data['min']), float(data['max']))
    return Scalar(float(data['value']))


@dataclass(frozen=True)
class Unit:
    """
    A canonical unit name plus the spelling it was written with.

    ``name`` is one of the known canonical units (``cup``, ``gram``...) or,
    for unrecognized tokens, the lower-cased raw text. ``display`` keeps the
    original surface spelling (``"Tbsp."``) for round-tripping.
    """
    name: str
    display: str

    @property
    def known(self):
        return self.name in KNOWN_UNITS

    @classmethod
    def unknown(cls, raw):
        raw = raw or ''
        return cls(raw.strip().lower(), raw.strip())

    def with_display(self, display):
        return replace(self, display=display)

    def to_dict(self):
        return {'name': self.name, 'display': self.display}

    @classmethod
    def from_dict(cls, data):
        if not data:
            return None
        return cls(data['name'], data.get('display') or data['name'])


@dataclass(frozen=True)
class Ingredient:
    """
    One parsed ingredient line.

    ``amount`` is the amount as it should be displayed: the raw matched
    substring right after parsing, the formatted value after scaling or
    conversion. It doubles as the style hint for later formatting.
    """
    quantity: Optional[Quantity] = None
    amount: str = ''
    unit: Optional[Unit] = None
    name: str = ''
    notes: Optional[str] = None
    original_text: str = ''

    def evolve(self, **changes):
        """Return a copy with the given fields replaced."""
        return replace(self, **changes)

    def to_dict(self):
        return {
            'quantity': self.quantity.to_dict() if self.quantity else None,
            'amount': self.amount,
            'unit': self.unit.to_dict() if self.unit else None,
            'name': self.name,
            'notes': self.notes,
            'original_text': self.original_text,
        }

    @classmethod
    def from_dict(cls, data):
        return cls(
            quantity=quantity_from_dict(data.get('quantity')),
            amount=data.get('amount') or '',
            unit=Unit.from_dict(data.get('unit')),
            name=data.get('name') or '',
            notes=data.get('notes'),
            original_text=data.get('original_text') or '',
        )
