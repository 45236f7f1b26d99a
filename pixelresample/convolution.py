"""Horizontal and vertical convolution passes over rows of pixels."""

from __future__ import annotations

import enum
import math
import struct
from typing import Any, Callable, Sequence

from pixelresample.coefficients import Coefficients
from pixelresample.normalizer import NormalizerGuard16, NormalizerGuard32

Pixel = Any
Row = Sequence[Pixel]
_Combiner = Callable[[Sequence[Pixel], Sequence[Any]], Pixel]


class PixelKind(enum.Enum):
    """Layout of one pixel.

    Single-component pixels are plain numbers; three-component pixels are
    tuples of three integers.
    """

    U8 = "u8"
    U8X3 = "u8x3"
    U16X3 = "u16x3"
    I32 = "i32"
    F32 = "f32"

    @property
    def components(self) -> int:
        """Number of components in one pixel."""
        return 3 if self in (PixelKind.U8X3, PixelKind.U16X3) else 1


_I32_MIN = -(1 << 31)
_I32_MAX = (1 << 31) - 1


def _round_half_away(x: float) -> float:
    if math.isnan(x) or math.isinf(x):
        return x
    rounded = math.floor(abs(x) + 0.5)
    return float(-rounded if x < 0 else rounded)


def _to_i32(x: float) -> int:
    if math.isnan(x):
        return 0
    x = _round_half_away(x)
    if x <= _I32_MIN:
        return _I32_MIN
    if x >= _I32_MAX:
        return _I32_MAX
    return int(x)


def _to_f32(x: float) -> float:
    x = _round_half_away(x)
    try:
        return struct.unpack("<f", struct.pack("<f", x))[0]
    except OverflowError:
        return math.copysign(math.inf, x)


def _float_combiner(cast: Callable[[float], Any]) -> _Combiner:
    def combine(pixels: Sequence[Pixel], weights: Sequence[float]) -> Pixel:
        total = 0.0
        for weight, pixel in zip(weights, pixels):
            total += float(pixel) * weight
        return cast(total)

    return combine


def _fixed_point_combiner(
    guard: NormalizerGuard16 | NormalizerGuard32, components: int
) -> _Combiner:
    initial = 1 << (guard.precision - 1)

    if components == 1:

        def combine_scalar(pixels: Sequence[Pixel], weights: Sequence[int]) -> Pixel:
            total = initial
            for weight, pixel in zip(weights, pixels):
                total += pixel * weight
            return guard.clip(total)

        return combine_scalar

    def combine_multi(pixels: Sequence[Pixel], weights: Sequence[int]) -> Pixel:
        totals = [initial] * components
        for weight, pixel in zip(weights, pixels):
            totals = [total + component * weight for total, component in zip(totals, pixel)]
        return tuple(guard.clip(total) for total in totals)

    return combine_multi


def _prepare(pixel_kind: PixelKind, coeffs: Coefficients) -> tuple[list[Any], _Combiner]:
    """Return per-destination-pixel weight chunks and the matching combiner."""
    if pixel_kind is PixelKind.F32:
        return coeffs.get_chunks(), _float_combiner(_to_f32)
    if pixel_kind is PixelKind.I32:
        return coeffs.get_chunks(), _float_combiner(_to_i32)
    if pixel_kind in (PixelKind.U8, PixelKind.U8X3):
        guard: NormalizerGuard16 | NormalizerGuard32 = NormalizerGuard16(coeffs.values)
    elif pixel_kind is PixelKind.U16X3:
        guard = NormalizerGuard32(coeffs.values)
    else:
        raise ValueError(f"unsupported pixel kind: {pixel_kind!r}")
    chunks = guard.normalized_chunks(coeffs.window_size, coeffs.bounds)
    return chunks, _fixed_point_combiner(guard, pixel_kind.components)


def _required_extent(chunks: Sequence[Any]) -> int:
    return max((chunk.start + len(chunk.values) for chunk in chunks), default=0)


def horiz_convolution(
    pixel_kind: PixelKind,
    src_rows: Sequence[Row],
    offset: int,
    height: int,
    coeffs: Coefficients,
) -> list[list[Pixel]]:
    """Resample ``height`` rows starting at row ``offset`` along the x axis.

    Each returned row has one pixel per bound in ``coeffs``.
    """
    rows = list(src_rows)
    if offset < 0 or height < 0:
        raise ValueError("offset and height must not be negative")
    if offset + height > len(rows):
        raise ValueError("source image has fewer rows than offset + height")

    chunks, combine = _prepare(pixel_kind, coeffs)
    extent = _required_extent(chunks)

    result = []
    for row in rows[offset : offset + height]:
        if extent > len(row):
            raise ValueError("coefficients reach beyond the width of a source row")
        result.append(
            [
                combine(row[chunk.start : chunk.start + len(chunk.values)], chunk.values)
                for chunk in chunks
            ]
        )
    return result


def vert_convolution(
    pixel_kind: PixelKind,
    src_rows: Sequence[Row],
    coeffs: Coefficients,
) -> list[list[Pixel]]:
    """Resample rows along the y axis; one output row per bound in ``coeffs``."""
    rows = list(src_rows)
    width = len(rows[0]) if rows else 0
    if any(len(row) != width for row in rows):
        raise ValueError("all source rows must have the same width")

    chunks, combine = _prepare(pixel_kind, coeffs)
    if _required_extent(chunks) > len(rows):
        raise ValueError("coefficients reach beyond the height of the source image")

    result = []
    for chunk in chunks:
        window = rows[chunk.start : chunk.start + len(chunk.values)]
        result.append(
            [combine([row[x] for row in window], chunk.values) for x in range(width)]
        )
    return result