"""Resampling filter kernels used by convolution-based resizing."""

from __future__ import annotations

import enum
import math
from typing import Callable

FilterFn = Callable[[float], float]


class FilterType(enum.Enum):
    """Kind of filter used to compute convolution weights."""

    BOX = "box"
    BILINEAR = "bilinear"
    HAMMING = "hamming"
    CATMULL_ROM = "catmull_rom"
    MITCHELL = "mitchell"
    LANCZOS3 = "lanczos3"

    @classmethod
    def default(cls) -> "FilterType":
        """The filter used when none is chosen explicitly."""
        return cls.LANCZOS3


def _box_filter(x: float) -> float:
    """Unit weight inside the half-open window (-0.5, 0.5]."""
    inside = -0.5 < x <= 0.5
    if inside:
        return 1.0
    return 0.0


def _bilinear_filter(x: float) -> float:
    x = abs(x)
    return 1.0 - x if x < 1.0 else 0.0


def _hamming_filter(x: float) -> float:
    x = abs(x)
    if x == 0.0:
        return 1.0
    if x >= 1.0:
        return 0.0
    x *= math.pi
    return (0.54 + 0.46 * math.cos(x)) * math.sin(x) / x


def _catmull_rom_filter(x: float) -> float:
    """Catmull-Rom bicubic kernel with a = -0.5."""
    a = -0.5
    x = abs(x)
    if x < 1.0:
        return ((a + 2.0) * x - (a + 3.0)) * x * x + 1.0
    if x < 2.0:
        return (((x - 5.0) * x + 8.0) * x - 4.0) * a
    return 0.0


def _mitchell_filter(x: float) -> float:
    """Mitchell-Netravali kernel with B = C = 1/3."""
    x = abs(x)
    if x < 1.0:
        return (7.0 * x / 6.0 - 2.0) * x * x + 16.0 / 18.0
    if x < 2.0:
        return ((2.0 - 7.0 * x / 18.0) * x - 10.0 / 3.0) * x + 16.0 / 9.0
    return 0.0


def _sinc(x: float) -> float:
    if x == 0.0:
        return 1.0
    x *= math.pi
    return math.sin(x) / x


def _lanczos3_filter(x: float) -> float:
    """Sinc truncated to the window [-3, 3)."""
    if -3.0 <= x < 3.0:
        return _sinc(x) * _sinc(x / 3.0)
    return 0.0


_FILTERS: dict[FilterType, tuple[FilterFn, float]] = {
    FilterType.BOX: (_box_filter, 0.5),
    FilterType.BILINEAR: (_bilinear_filter, 1.0),
    FilterType.HAMMING: (_hamming_filter, 1.0),
    FilterType.CATMULL_ROM: (_catmull_rom_filter, 2.0),
    FilterType.MITCHELL: (_mitchell_filter, 2.0),
    FilterType.LANCZOS3: (_lanczos3_filter, 3.0),
}


def get_filter_func(filter_type: FilterType) -> tuple[FilterFn, float]:
    """Return the kernel function of a filter and its support radius."""
    try:
        return _FILTERS[filter_type]
    except KeyError:
        raise ValueError(f"unknown filter type: {filter_type!r}") from None