"""Multiplying and dividing the colour channels of RGBA pixels by alpha.

Images are given as rows of pixels, each pixel a sequence of four 8-bit
channels ``(r, g, b, a)``.  Destination rows must be mutable lists; they
are overwritten with the result.
"""

from __future__ import annotations

import struct
from collections.abc import Callable, MutableSequence, Sequence

from resampix.errors import MulDivImageError, MulDivImagesError

Pixel = tuple[int, int, int, int]
Rows = Sequence[Sequence[Sequence[int]]]
MutableRows = Sequence[MutableSequence[Sequence[int]]]

_F32 = struct.Struct("<f")


def _f32(value: float) -> float:
    """Round a float to single precision."""
    return _F32.unpack(_F32.pack(value))[0]


def mul_div_255(a: int, b: int) -> int:
    """Return ``a * b / 255`` rounded, for 8-bit ``a`` and ``b``."""
    tmp = a * b + 128
    return (((tmp >> 8) + tmp) >> 8) & 0xFF


def div_and_clip(v: int, recip_alpha: float) -> int:
    """Scale ``v`` by ``recip_alpha`` in single precision, clamped to 255."""
    result = min(_f32(v * recip_alpha), 255.0)
    return max(int(result), 0)


def _multiply_pixel(pixel: Sequence[int]) -> Pixel:
    r, g, b, a = pixel
    return (mul_div_255(r, a), mul_div_255(g, a), mul_div_255(b, a), a)


def _divide_pixel(pixel: Sequence[int]) -> Pixel:
    r, g, b, a = pixel
    recip_alpha = 0.0 if a == 0 else _f32(255.0 / a)
    return (
        div_and_clip(r, recip_alpha),
        div_and_clip(g, recip_alpha),
        div_and_clip(b, recip_alpha),
        a,
    )


def _is_rgba(rows: Rows) -> bool:
    return all(len(pixel) == 4 for row in rows for pixel in row)


def _check_image(rows: Rows) -> None:
    if not _is_rgba(rows):
        raise MulDivImageError(MulDivImageError.Reason.UNSUPPORTED_PIXEL_TYPE)


def _check_images(src_rows: Rows, dst_rows: Rows) -> None:
    if not (_is_rgba(src_rows) and _is_rgba(dst_rows)):
        raise MulDivImagesError(MulDivImagesError.Reason.UNSUPPORTED_PIXEL_TYPE)
    if len(src_rows) != len(dst_rows) or any(
        len(src) != len(dst) for src, dst in zip(src_rows, dst_rows)
    ):
        raise MulDivImagesError(MulDivImagesError.Reason.SIZE_IS_DIFFERENT)


def _apply(
    op: Callable[[Sequence[int]], Pixel], src_rows: Rows, dst_rows: MutableRows
) -> None:
    for src_row, dst_row in zip(src_rows, dst_rows):
        dst_row[:] = [op(pixel) for pixel in src_row]


def multiply_alpha(src_rows: Rows, dst_rows: MutableRows) -> None:
    """Store the source pixels with RGB multiplied by alpha into ``dst_rows``."""
    _check_images(src_rows, dst_rows)
    _apply(_multiply_pixel, src_rows, dst_rows)


def multiply_alpha_inplace(rows: MutableRows) -> None:
    """Multiply RGB by alpha for every pixel of ``rows`` in place."""
    _check_image(rows)
    _apply(_multiply_pixel, rows, rows)


def divide_alpha(src_rows: Rows, dst_rows: MutableRows) -> None:
    """Store the source pixels with RGB divided by alpha into ``dst_rows``."""
    _check_images(src_rows, dst_rows)
    _apply(_divide_pixel, src_rows, dst_rows)


def divide_alpha_inplace(rows: MutableRows) -> None:
    """Divide RGB by alpha for every pixel of ``rows`` in place."""
    _check_image(rows)
    _apply(_divide_pixel, rows, rows)