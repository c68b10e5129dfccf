"""Fixed-point helpers for 8-bit convolution."""

from __future__ import annotations

import math
from collections.abc import Iterable, Sequence
from dataclasses import dataclass

from resampix.coefficients import Bound

# 8 bits of result plus 2 bits of headroom for filters with negative lobes.
PRECISION_BITS = 32 - 8 - 2
# Coefficients are stored as signed 16-bit integers.
MAX_COEFS_PRECISION = 16 - 1

_I16_MIN = -(1 << 15)
_I16_MAX = (1 << 15) - 1


def _round_half_away(value: float) -> int:
    """Round to nearest integer, halves away from zero."""
    return int(math.copysign(math.floor(abs(value) + 0.5), value))


def clip8(v: int, precision: int) -> int:
    """Shift a fixed-point sum right by ``precision`` and clamp it to 0..255."""
    return min(max(v >> precision, 0), 255)


@dataclass(frozen=True, slots=True)
class CoefficientsI16Chunk:
    """Fixed-point weights of one output pixel, starting at ``start``."""

    start: int
    values: tuple[int, ...]


@dataclass(frozen=True, slots=True)
class NormalizedCoefficients:
    """Weights scaled by ``2 ** precision`` and rounded to 16-bit integers."""

    values: tuple[int, ...]
    precision: int

    @classmethod
    def from_values(cls, values: Iterable[float]) -> NormalizedCoefficients:
        """Pick the largest precision that keeps every weight in range."""
        floats = list(values)
        max_weight = max(floats, default=0.0)

        precision = 0
        for precision in range(PRECISION_BITS):
            next_value = _round_half_away(max_weight * (1 << (precision + 1)))
            if next_value >= (1 << MAX_COEFS_PRECISION):
                break

        scale = float(1 << precision)
        scaled = tuple(
            min(max(_round_half_away(v * scale), _I16_MIN), _I16_MAX) for v in floats
        )
        return cls(values=scaled, precision=precision)

    def chunks(self, window_size: int, bounds: Sequence[Bound]) -> list[CoefficientsI16Chunk]:
        """Split the weights into one chunk per output pixel."""
        result = []
        for index, bound in enumerate(bounds):
            begin = index * window_size
            if begin + window_size > len(self.values):
                raise ValueError("not enough coefficient values for the bounds")
            result.append(
                CoefficientsI16Chunk(bound.start, self.values[begin : begin + bound.size])
            )
        return result