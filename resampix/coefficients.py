"""Precomputation of convolution weights for one resampling axis."""

from __future__ import annotations

import math
from collections.abc import Callable
from dataclasses import dataclass, field


@dataclass(frozen=True, slots=True)
class Bound:
    """Range of source pixels that contribute to one output pixel."""

    start: int
    size: int


@dataclass(frozen=True, slots=True)
class CoefficientsChunk:
    """Weights of one output pixel, starting at source pixel ``start``."""

    start: int
    values: tuple[float, ...]


@dataclass(slots=True)
class Coefficients:
    """Weights for all output pixels, stored in fixed-size windows."""

    values: list[float]
    window_size: int
    bounds: list[Bound] = field(default_factory=list)

    def get_chunks(self) -> list[CoefficientsChunk]:
        """Split the weights into one chunk per output pixel."""
        chunks = []
        for index, bound in enumerate(self.bounds):
            begin = index * self.window_size
            if begin + self.window_size > len(self.values):
                raise ValueError("not enough coefficient values for the bounds")
            chunks.append(
                CoefficientsChunk(bound.start, tuple(self.values[begin : begin + bound.size]))
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
    """Compute normalised weights for resampling ``[in0, in1)`` of
    ``in_size`` source pixels into ``out_size`` output pixels."""
    if in_size < 1:
        raise ValueError("in_size must be a positive integer")
    if out_size < 1:
        raise ValueError("out_size must be a positive integer")

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
        x_max = int(min(math.ceil(in_center + filter_radius), float(in_size)))
        x_max = max(x_max, x_min)

        center = in_center - 0.5
        weights = [filter((x - center) * recip_filter_scale) for x in range(x_min, x_max)]
        total = sum(weights)
        if total != 0.0:
            weights = [w / total for w in weights]
        weights.extend([0.0] * (window_size - len(weights)))

        values.extend(weights)
        bounds.append(Bound(start=x_min, size=x_max - x_min))

    return Coefficients(values=values, window_size=window_size, bounds=bounds)