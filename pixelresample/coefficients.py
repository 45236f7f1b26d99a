"""Precomputation of convolution weights for one resize axis."""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from typing import Callable


@dataclass(frozen=True)
class Bound:
    """Range of source pixels that contribute to one destination pixel."""

    start: int
    size: int


@dataclass(frozen=True)
class CoefficientsChunk:
    """Weights of one destination pixel together with its first source index."""

    start: int
    values: tuple[float, ...]


@dataclass
class Coefficients:
    """Weights of all destination pixels, each padded to ``window_size``."""

    values: list[float]
    window_size: int
    bounds: list[Bound] = field(default_factory=list)

    def get_chunks(self) -> list[CoefficientsChunk]:
        """Split the flat weights into one chunk per destination pixel."""
        window = self.window_size
        chunks = []
        for index, bound in enumerate(self.bounds):
            offset = index * window
            if offset + window > len(self.values):
                raise ValueError("not enough coefficient values for the given bounds")
            chunks.append(
                CoefficientsChunk(bound.start, tuple(self.values[offset : offset + bound.size]))
            )
        return chunks


def precompute_coefficients(
    in_size: int,
    in0: float,
    in1: float,
    out_size: int,
    filter: Callable[[float], float],
    filter_support: float,
) -> Coefficients:
    """Compute normalised filter weights mapping ``in_size`` pixels onto ``out_size``.

    ``in0`` and ``in1`` are the left and right cropping borders in the source.
    """
    if in_size <= 0:
        raise ValueError("in_size must be positive")
    if out_size <= 0:
        raise ValueError("out_size must be positive")

    scale = (in1 - in0) / out_size
    filter_scale = max(scale, 1.0)
    filter_radius = filter_support * filter_scale
    window_size = int(math.ceil(filter_radius)) * 2 + 1
    recip_filter_scale = 1.0 / filter_scale

    values: list[float] = []
    bounds: list[Bound] = []

    for out_x in range(out_size):
        in_center = in0 + (out_x + 0.5) * scale
        x_min = int(max(math.floor(in_center - filter_radius), 0.0))
        x_max = int(max(min(math.ceil(in_center - 0.0 + filter_radius), float(in_size)), 0.0))

        center = in_center - 0.5
        weights = [filter((x - center) * recip_filter_scale) for x in range(x_min, x_max)]
        total = sum(weights)
        if total != 0.0:
            weights = [w / total for w in weights]
        weights.extend([0.0] * (window_size - len(weights)))
        values.extend(weights[:window_size])
        bounds.append(Bound(start=x_min, size=max(x_max - x_min, 0)))

    return Coefficients(values=values, window_size=window_size, bounds=bounds)