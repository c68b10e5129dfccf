"""One-axis convolution of images with precomputed coefficients.

Images are given as rows of pixels.  ``U8`` pixels are ints in 0..255,
``U8X4`` pixels are four-channel tuples of such ints, ``I32`` pixels are
ints and ``F32`` pixels are floats.
"""

from __future__ import annotations

import math
import struct
from collections.abc import Sequence
from enum import Enum
from typing import Any

from resampix.coefficients import Coefficients
from resampix.optimisations import NormalizedCoefficients, clip8

_F32 = struct.Struct("<f")
_I32_MIN = -(1 << 31)
_I32_MAX = (1 << 31) - 1


class PixelKind(Enum):
    """Pixel formats the convolution supports."""

    U8 = "u8"
    U8X4 = "u8x4"
    I32 = "i32"
    F32 = "f32"


def _round(value: float) -> float:
    """Round to the nearest integer value, halves away from zero."""
    if not math.isfinite(value):
        return value
    truncated = float(math.trunc(value))
    if abs(value - truncated) >= 0.5:
        truncated += math.copysign(1.0, value)
    return truncated


def _to_i32(value: float) -> int:
    if math.isnan(value):
        return 0
    if math.isinf(value):
        return _I32_MAX if value > 0 else _I32_MIN
    return min(max(int(value), _I32_MIN), _I32_MAX)


def _to_f32(value: float) -> float:
    try:
        return _F32.unpack(_F32.pack(value))[0]
    except OverflowError:
        return math.copysign(math.inf, value)


def _float_dot(weights: Sequence[float], pixels: Sequence[float]) -> float:
    total = 0.0
    for k, pixel in zip(weights, pixels):
        total += pixel * k
    return total


def _fixed_dot(weights: Sequence[int], values: Sequence[int], precision: int) -> int:
    total = 1 << (precision - 1) if precision > 0 else 0
    for k, value in zip(weights, values):
        total += value * k
    return clip8(total, precision)


def _fixed_pixel(
    weights: Sequence[int], pixels: Sequence[Any], precision: int, kind: PixelKind
) -> Any:
    if kind is PixelKind.U8:
        return _fixed_dot(weights, pixels, precision)
    return tuple(
        _fixed_dot(weights, [pixel[channel] for pixel in pixels], precision)
        for channel in range(4)
    )


def _float_pixel(weights: Sequence[float], pixels: Sequence[Any], kind: PixelKind) -> Any:
    rounded = _round(_float_dot(weights, pixels))
    return _to_i32(rounded) if kind is PixelKind.I32 else _to_f32(rounded)


def _weights(coeffs: Coefficients, kind: PixelKind) -> tuple[list[tuple[int, Sequence]], int]:
    """Return ``(start, weights)`` pairs and the fixed-point precision."""
    if kind in (PixelKind.I32, PixelKind.F32):
        return [(chunk.start, chunk.values) for chunk in coeffs.get_chunks()], 0
    normalized = NormalizedCoefficients.from_values(coeffs.values)
    chunks = normalized.chunks(coeffs.window_size, coeffs.bounds)
    return [(chunk.start, chunk.values) for chunk in chunks], normalized.precision


def _pixel(weights: Sequence, pixels: Sequence[Any], precision: int, kind: PixelKind) -> Any:
    if kind in (PixelKind.I32, PixelKind.F32):
        return _float_pixel(weights, pixels, kind)
    return _fixed_pixel(weights, pixels, precision, kind)


def horiz_convolution(
    src_rows: Sequence[Sequence[Any]],
    height: int,
    offset: int,
    coeffs: Coefficients,
    kind: PixelKind | str,
) -> list[list[Any]]:
    """Resample ``height`` rows of ``src_rows`` starting at ``offset`` along x.

    The result has one pixel per bound of ``coeffs`` in every row.
    """
    kind = PixelKind(kind)
    if height < 0 or offset < 0 or offset + height > len(src_rows):
        raise ValueError("rows requested lie outside of the source image")
    chunks, precision = _weights(coeffs, kind)
    return [
        [
            _pixel(weights, row[start : start + len(weights)], precision, kind)
            for start, weights in chunks
        ]
        for row in src_rows[offset : offset + height]
    ]


def vert_convolution(
    src_rows: Sequence[Sequence[Any]],
    coeffs: Coefficients,
    kind: PixelKind | str,
) -> list[list[Any]]:
    """Resample ``src_rows`` along y.

    The result has one row per bound of ``coeffs``, as wide as the source.
    """
    kind = PixelKind(kind)
    chunks, precision = _weights(coeffs, kind)
    width = len(src_rows[0]) if src_rows else 0
    result = []
    for start, weights in chunks:
        if start + len(weights) > len(src_rows):
            raise IndexError("coefficients reach outside of the source image")
        window = src_rows[start : start + len(weights)]
        result.append(
            [_pixel(weights, [row[x] for row in window], precision, kind) for x in range(width)]
        )
    return result