# resampix

Image resampling building blocks in plain Python. It has no dependencies
beyond the standard library.

- `resampix.filters`: the resampling kernels `box_filter`, `bilinear_filter`,
  `hamming_filter`, `catmull_rom_filter`, `mitchell_filter`, `sinc_filter` and
  `lanczos_filter`, the `FilterType` enum, and `get_filter_func`. That function
  returns a kernel together with its support.
- `resampix.coefficients`: `precompute_coefficients` computes normalised weights
  for every output pixel of one axis. It works for any scale and for a crop
  window `[in0, in1)`. The result is a `Coefficients` value. Its `get_chunks()`
  method splits the weights into one `CoefficientsChunk` per output pixel.
- `resampix.optimisations`: `NormalizedCoefficients.from_values` turns weights
  into 16-bit fixed-point integers and picks the precision for them. `clip8`
  shifts a fixed-point sum and clamps it to 0..255.
- `resampix.convolution`: `horiz_convolution` and `vert_convolution` run a
  one-axis pass. They take the pixel kinds in `PixelKind`: `U8` (ints), `U8X4`
  (four-channel tuples), `I32` (ints) and `F32` (floats). The 8-bit kinds use
  fixed-point arithmetic. The others use floating point and round to the
  nearest value.
- `resampix.alpha`: `multiply_alpha`, `multiply_alpha_inplace`, `divide_alpha`
  and `divide_alpha_inplace` multiply or divide the RGB channels of `(r, g, b, a)`
  pixels by alpha.
- `resampix.errors`: the exceptions. All of them derive from `ValueError`.

## Installation

```
pip install .
```

## Images

An image is a sequence of rows, and each row is a sequence of pixels.
Convolution returns new rows as lists. The alpha functions write their result
into the destination rows, and those rows must be mutable lists.

## Example: downscale a row of grey pixels

```python
from resampix.filters import FilterType, get_filter_func
from resampix.coefficients import precompute_coefficients
from resampix.convolution import PixelKind, horiz_convolution

src = [[0, 64, 128, 255, 255, 128, 64, 0]]
filter_fn, support = get_filter_func(FilterType.LANCZOS3)
coeffs = precompute_coefficients(8, 0.0, 8.0, 4, filter_fn, support)

dst = horiz_convolution(src, 1, 0, coeffs, PixelKind.U8)
print(dst)  # one row of four pixels
```

`horiz_convolution(src_rows, height, offset, coeffs, kind)` convolves `height`
rows, starting at row `offset`. It raises `ValueError` if those rows lie outside
the source. `vert_convolution(src_rows, coeffs, kind)` returns one row per bound
of `coeffs`. A full resize is a horizontal pass followed by a vertical pass,
with coefficients computed for each axis.

## Example: premultiply alpha

```python
from resampix.alpha import multiply_alpha_inplace, divide_alpha_inplace

rows = [[(255, 128, 64, 128)]]
multiply_alpha_inplace(rows)
print(rows)  # [[(128, 64, 32, 128)]]
divide_alpha_inplace(rows)
print(rows)  # [[(255, 127, 63, 128)]]
```

A pixel whose alpha is zero divides to `(0, 0, 0, 0)`. Pixels that do not have
exactly four channels raise `MulDivImageError`. In the two-image functions they
raise `MulDivImagesError` instead. Source and destination images of different
sizes also raise `MulDivImagesError`.

## What this package does not do

- It has no image type.
- It has no single resize call that chooses and chains both passes for you.
- It does not read or write image files.
- It has no command-line tool.
- The error classes for image rows, buffers and crop boxes are defined in
  `resampix.errors`, but no function in the package raises them yet.

## Running the tests

```
pip install .[test]
pytest
```