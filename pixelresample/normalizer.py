"""Conversion of float convolution weights into fixed-point integers."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import ClassVar, Iterable, Sequence

from pixelresample.coefficients import Bound


@dataclass(frozen=True)
class IntCoefficientsChunk:
    """Fixed-point weights of one destination pixel and its first source index."""

    start: int
    values: tuple[int, ...]


def _round_half_away(x: float) -> float:
    if x < 0.0:
        return -_round_half_away(-x)
    floor = math.floor(x)
    return floor + 1.0 if x - floor >= 0.5 else float(floor)


def _saturating_int(x: float, bits: int) -> int:
    """Convert like a saturating float-to-signed-integer cast."""
    if math.isnan(x):
        return 0
    low, high = -(1 << (bits - 1)), (1 << (bits - 1)) - 1
    if x <= low:
        return low
    if x >= high:
        return high
    return int(x)


class _NormalizerGuard:
    # Bits usable for the accumulated sum and the maximum stored weight.
    _precision_bits: ClassVar[int]
    _max_coefs_precision: ClassVar[int]
    _coef_bits: ClassVar[int]
    _accum_bits: ClassVar[int]

    def __init__(self, values: Iterable[float]) -> None:
        floats = list(values)
        max_weight = max(floats, default=0.0)

        precision = 0
        limit = 1 << self._max_coefs_precision
        for precision in range(self._precision_bits):
            next_value = _saturating_int(
                _round_half_away(max_weight * float(1 << (precision + 1))), self._accum_bits
            )
            if next_value >= limit:
                break

        scale = float(1 << precision)
        self.precision: int = precision
        self.values: tuple[int, ...] = tuple(
            _saturating_int(_round_half_away(v * scale), self._coef_bits) for v in floats
        )

    def _split_chunks(
        self, window_size: int, bounds: Sequence[Bound]
    ) -> list[IntCoefficientsChunk]:
        chunks = []
        for index, bound in enumerate(bounds):
            offset = index * window_size
            if offset + window_size > len(self.values):
                raise ValueError("not enough coefficient values for the given bounds")
            chunks.append(
                IntCoefficientsChunk(bound.start, self.values[offset : offset + bound.size])
            )
        return chunks


class NormalizerGuard16(_NormalizerGuard):
    """Fixed-point weights stored as 16-bit values, producing 8-bit results."""

    _precision_bits = 32 - 8 - 2
    _max_coefs_precision = 16 - 1
    _coef_bits = 16
    _accum_bits = 32

    def normalized_chunks(
        self, window_size: int, bounds: Sequence[Bound]
    ) -> list[IntCoefficientsChunk]:
        """Split the fixed-point weights into one chunk per destination pixel."""
        return self._split_chunks(window_size, bounds)

    def clip(self, v: int) -> int:
        """Shift an accumulated sum back to an 8-bit component value."""
        return min(max(v >> self.precision, 0), 255)


class NormalizerGuard32(_NormalizerGuard):
    """Fixed-point weights stored as 32-bit values, producing 16-bit results."""

    _precision_bits = 64 - 16 - 2
    _max_coefs_precision = 32 - 1
    _coef_bits = 32
    _accum_bits = 64

    def normalized_chunks(
        self, window_size: int, bounds: Sequence[Bound]
    ) -> list[IntCoefficientsChunk]:
        """Split the fixed-point weights into one chunk per destination pixel."""
        return self._split_chunks(window_size, bounds)

    def clip(self, v: int) -> int:
        """Shift an accumulated sum back to a 16-bit component value."""
        return min(max(v >> self.precision, 0), 0xFFFF)