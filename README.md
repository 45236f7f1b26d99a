# pixelresample

The building blocks of image resampling by separable convolution, and
multiplication or division of RGB channels by alpha. Plain Python, no
dependencies.

Images are lists of rows. Each row is a list of pixels.

## Modules

- `pixelresample.filters`: `FilterType` names the kernels `BOX`, `BILINEAR`,
  `HAMMING`, `CATMULL_ROM`, `MITCHELL` and `LANCZOS3`.
  `FilterType.default()` returns `LANCZOS3`.
  `get_filter_func(filter_type)` returns a pair: the kernel function and
  its support radius.
- `pixelresample.coefficients`:
  `precompute_coefficients(in_size, in0, in1, out_size, filter, filter_support)`
  computes the weights that map `in_size` source pixels onto `out_size`
  destination pixels along one axis. `in0` and `in1` are the crop borders
  in the source. The weights of each destination pixel are normalised to
  sum to 1. The function returns a `Coefficients` object with the flat
  `values`, a `window_size`, and one `Bound(start, size)` per destination
  pixel. `Coefficients.get_chunks()` splits the weights into one
  `CoefficientsChunk(start, values)` per destination pixel. Sizes below 1
  raise `ValueError`.
- `pixelresample.normalizer`: `NormalizerGuard16` and `NormalizerGuard32`
  turn float weights into fixed-point integers and choose a precision for
  them. Use `normalized_chunks(window_size, bounds)` to split the integer
  weights into `IntCoefficientsChunk` objects. `clip(v)` shifts an
  accumulated sum back and clamps it to 0..255 for the 16-bit guard, or
  to 0..65535 for the 32-bit guard.
- `pixelresample.convolution`: `PixelKind` describes the layout of a
  pixel:
  - `U8`, `I32` and `F32` pixels are single numbers.
  - `U8X3` and `U16X3` pixels are tuples of three integers.

  `horiz_convolution(pixel_kind, src_rows, offset, height, coeffs)`
  resamples `height` rows, starting at row `offset`, along x.
  `vert_convolution(pixel_kind, src_rows, coeffs)` resamples along y.
  `U8` and `U8X3` use 16-bit fixed-point weights. `U16X3` uses 32-bit
  weights. `I32` and `F32` sum in floating point and round the result to
  the nearest whole value. Both functions raise `ValueError` in these
  cases:
  - the rows are too few;
  - the rows are too narrow;
  - the rows are ragged, for the vertical pass.
- `pixelresample.alpha`: `MulDiv` works on rows of RGBA pixels. Each pixel
  is four integers in 0..255. Results are written back as 4-tuples.
  - `multiply_alpha(src_rows, dst_rows)` and
    `divide_alpha(src_rows, dst_rows)` write into the destination rows.
  - `multiply_alpha_inplace(rows)` and `divide_alpha_inplace(rows)`
    change the rows they are given.
  - The alpha channel is left as it is. Dividing where alpha is 0 gives
    0 in the RGB channels.

  The arithmetic helpers `mul_div_255(a, b)` and
  `div_and_clip(v, recip_alpha)` are public, as is the `RECIP_ALPHA`
  table.

## Errors in `pixelresample.alpha`

- `UnsupportedPixelTypeError` is raised for pixels that are not four
  integers in 0..255. It subclasses both `MulDivImagesError` and
  `MulDivImageError`.
- `SizeIsDifferentError` is raised when the source and the destination
  differ in width or height.
- `ValueError` is raised for an empty image or for rows of unequal width.
- `PixelTypeIsDifferentError` is defined, but no operation raises it.

## Installing

```
pip install .
```

To run the tests:

```
pip install .[test]
pytest
```

## Example

Scale a row of grey pixels from 8 down to 4 with a Lanczos3 kernel:

```python
from pixelresample.filters import FilterType, get_filter_func
from pixelresample.coefficients import precompute_coefficients
from pixelresample.convolution import PixelKind, horiz_convolution

kernel, support = get_filter_func(FilterType.LANCZOS3)
coeffs = precompute_coefficients(8, 0.0, 8.0, 4, kernel, support)

rows = [[0, 32, 64, 96, 128, 160, 192, 224]]
result = horiz_convolution(PixelKind.U8, rows, 0, 1, coeffs)
```

A vertical pass works the same way. Build the coefficients for the height
and call `vert_convolution(pixel_kind, src_rows, coeffs)`.

Premultiply RGBA pixels by their alpha:

```python
from pixelresample.alpha import MulDiv

rows = [[(255, 128, 0, 128)] * 4]
MulDiv().multiply_alpha_inplace(rows)
# rows[0][0] == (128, 64, 0, 128)
```

## What it does not do

The package has no whole-image resizer that chains the two passes.
There is no nearest-neighbour or supersampling mode, and no reading or
writing of image files. To resize an image, call `horiz_convolution` and
`vert_convolution` yourself with coefficients for each axis.