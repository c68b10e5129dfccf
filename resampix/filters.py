"""Resampling filters and their supports."""

from __future__ import annotations

import math
from collections.abc import Callable
from enum import Enum

FilterFn = Callable[[float], float]


class FilterType(Enum):
    """Kinds of resampling filters."""

    BOX = "box"
    BILINEAR = "bilinear"
    HAMMING = "hamming"
    CATMULL_ROM = "catmull_rom"
    MITCHELL = "mitchell"
    LANCZOS3 = "lanczos3"


DEFAULT_FILTER_TYPE = FilterType.LANCZOS3


def box_filter(x: float) -> float:
    """Every covered source pixel gets the same weight."""
    return 1.0 if -0.5 < x <= 0.5 else 0.0


def bilinear_filter(x: float) -> float:
    """Triangle filter for linear interpolation."""
    x = abs(x)
    return 1.0 - x if x < 1.0 else 0.0


def hamming_filter(x: float) -> float:
    """Sinc windowed by a Hamming window, support 1."""
    x = abs(x)
    if x == 0.0:
        return 1.0
    if x >= 1.0:
        return 0.0
    x *= math.pi
    return (0.54 + 0.46 * math.cos(x)) * math.sin(x) / x


def catmull_rom_filter(x: float) -> float:
    """Catmull-Rom bicubic filter (a = -0.5)."""
    a = -0.5
    x = abs(x)
    if x < 1.0:
        return ((a + 2.0) * x - (a + 3.0)) * x * x + 1.0
    if x < 2.0:
        return (((x - 5.0) * x + 8.0) * x - 4.0) * a
    return 0.0


def mitchell_filter(x: float) -> float:
    """Mitchell-Netravali filter with B = C = 1/3."""
    x = abs(x)
    if x < 1.0:
        return (7.0 * x / 6.0 - 2.0) * x * x + 16.0 / 18.0
    if x < 2.0:
        return ((2.0 - 7.0 * x / 18.0) * x - 10.0 / 3.0) * x + 16.0 / 9.0
    return 0.0


def sinc_filter(x: float) -> float:
    """Normalised sinc function."""
    if x == 0.0:
        return 1.0
    x *= math.pi
    return math.sin(x) / x


def lanczos_filter(x: float) -> float:
    """Lanczos filter: sinc truncated to [-3, 3)."""
    if -3.0 <= x < 3.0:
        return sinc_filter(x) * sinc_filter(x / 3.0)
    return 0.0


_FILTERS: dict[FilterType, tuple[FilterFn, float]] = {
    FilterType.BOX: (box_filter, 0.5),
    FilterType.BILINEAR: (bilinear_filter, 1.0),
    FilterType.HAMMING: (hamming_filter, 1.0),
    FilterType.CATMULL_ROM: (catmull_rom_filter, 2.0),
    FilterType.MITCHELL: (mitchell_filter, 2.0),
    FilterType.LANCZOS3: (lanczos_filter, 3.0),
}


def get_filter_func(filter_type: FilterType) -> tuple[FilterFn, float]:
    """Return the filter function and its support for ``filter_type``."""
    return _FILTERS[FilterType(filter_type)]