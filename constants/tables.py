"""
Conversion Tables

Bundles the unit constants into a single read-only object so an engine
instance can own its configuration and pass it to every service call.
"""

from dataclasses import dataclass
from types import MappingProxyType
from typing import Mapping, FrozenSet, Tuple, Optional

from . import units


@dataclass(frozen=True)
class ConversionTables:
    """Immutable unit, factor and fraction tables."""
    us_units: FrozenSet[str]
    metric_units: FrozenSet[str]
    count_units: FrozenSet[str]
    unit_aliases: Mapping[str, str]
    plural_exceptions: Mapping[str, str]
    volume_to_ml: Mapping[str, float]
    weight_to_g: Mapping[str, float]
    ml_thresholds: Tuple[Tuple[Optional[float], str], ...]
    g_thresholds: Tuple[Tuple[Optional[float], str], ...]
    metric_upgrade_at: float
    metric_display: Mapping[str, str]
    plural_display: Mapping[str, str]
    ascii_fractions: Mapping[float, str]
    unicode_fractions: Mapping[str, float]
    ascii_tolerance: float
    unicode_tolerance: float

    @property
    def known_units(self):
        return self.us_units | self.metric_units | self.count_units


def load_tables():
    """Build a ConversionTables from the module-level constants."""
    return ConversionTables(
        us_units=frozenset(units.US_UNITS),
        metric_units=frozenset(units.METRIC_UNITS),
        count_units=frozenset(units.COUNT_UNITS),
        unit_aliases=MappingProxyType(dict(units.UNIT_ALIASES)),
        plural_exceptions=MappingProxyType(dict(units.PLURAL_EXCEPTIONS)),
        volume_to_ml=MappingProxyType(dict(units.VOLUME_TO_ML)),
        weight_to_g=MappingProxyType(dict(units.WEIGHT_TO_G)),
        ml_thresholds=tuple(units.ML_TO_US_THRESHOLDS),
        g_thresholds=tuple(units.G_TO_US_THRESHOLDS),
        metric_upgrade_at=units.METRIC_UPGRADE_AT,
        metric_display=MappingProxyType(dict(units.METRIC_DISPLAY)),
        plural_display=MappingProxyType(dict(units.PLURAL_DISPLAY)),
        ascii_fractions=MappingProxyType(dict(units.COMMON_FRACTIONS)),
        unicode_fractions=MappingProxyType(dict(units.UNICODE_FRACTIONS)),
        ascii_tolerance=units.ASCII_FRACTION_TOLERANCE,
        unicode_tolerance=units.UNICODE_FRACTION_TOLERANCE,
    )


# Shared default instance
DEFAULT_TABLES = load_tables()
