"""Multiplication and division of RGB channels by the alpha channel.

Images are given as rows of RGBA pixels. Each pixel is a sequence of four
integers in the range 0..255; results are written back as 4-tuples.
"""

from __future__ import annotations

from typing import Any, MutableSequence, Sequence

Pixel = Sequence[int]
Rows = Sequence[Sequence[Any]]

_PRECISION = 8


class MulDivImagesError(Exception):
    """Error raised by operations that take a source and a destination image."""


class MulDivImageError(Exception):
    """Error raised by operations that work on a single image in place."""


class SizeIsDifferentError(MulDivImagesError):
    """The source and destination images have different sizes."""

    def __init__(
        self, message: str = "Size of source image does not match to destination image"
    ) -> None:
        super().__init__(message)


class PixelTypeIsDifferentError(MulDivImagesError):
    """The source and destination images have different pixel types."""

    def __init__(
        self, message: str = "Pixel type of source image does not match to destination image"
    ) -> None:
        super().__init__(message)


class UnsupportedPixelTypeError(MulDivImagesError, MulDivImageError):
    """The image pixels are not 8-bit RGBA."""

    def __init__(self, message: str = "Pixel type of image is not supported") -> None:
        super().__init__(message)


def _recip_alpha_table(precision: int) -> tuple[int, ...]:
    scale = 1 << (precision + 1)
    return (0,) + tuple(((255 * scale // alpha) + 1) >> 1 for alpha in range(1, 256))


RECIP_ALPHA: tuple[int, ...] = _recip_alpha_table(_PRECISION)


def mul_div_255(a: int, b: int) -> int:
    """Return ``a * b / 255`` rounded, using integer arithmetic only."""
    tmp = a * b + 128
    return (((tmp >> 8) + tmp) >> 8) & 0xFF


def div_and_clip(v: int, recip_alpha: int) -> int:
    """Multiply a component by a fixed-point reciprocal of alpha, clipped to 255."""
    return min((v * recip_alpha) >> _PRECISION, 255)


def _is_rgba8(pixel: Any) -> bool:
    try:
        if len(pixel) != 4:
            return False
    except TypeError:
        return False
    return all(
        isinstance(c, int) and not isinstance(c, bool) and 0 <= c <= 255 for c in pixel
    )


def _check_image(rows: Rows) -> tuple[int, int]:
    """Validate an RGBA image and return its ``(width, height)``."""
    rows = list(rows)
    if not rows or not rows[0]:
        raise ValueError("image must have a non-zero width and height")
    width = len(rows[0])
    for row in rows:
        if len(row) != width:
            raise ValueError("all rows of an image must have the same width")
        if not all(_is_rgba8(pixel) for pixel in row):
            raise UnsupportedPixelTypeError()
    return width, len(rows)


def _check_images(src_rows: Rows, dst_rows: Rows) -> None:
    if _check_image(src_rows) != _check_image(dst_rows):
        raise SizeIsDifferentError()


def _multiply_pixel(pixel: Pixel) -> tuple[int, int, int, int]:
    r, g, b, a = pixel
    return (mul_div_255(r, a), mul_div_255(g, a), mul_div_255(b, a), a)


def _divide_pixel(pixel: Pixel) -> tuple[int, int, int, int]:
    r, g, b, a = pixel
    recip = RECIP_ALPHA[a]
    return (div_and_clip(r, recip), div_and_clip(g, recip), div_and_clip(b, recip), a)


class MulDiv:
    """Multiplies or divides the RGB channels of RGBA images by alpha."""

    def multiply_alpha(self, src_rows: Rows, dst_rows: Sequence[MutableSequence[Any]]) -> None:
        """Store the source with RGB multiplied by alpha into the destination."""
        _check_images(src_rows, dst_rows)
        for src_row, dst_row in zip(src_rows, dst_rows):
            dst_row[:] = [_multiply_pixel(pixel) for pixel in src_row]

    def multiply_alpha_inplace(self, rows: Sequence[MutableSequence[Any]]) -> None:
        """Multiply RGB channels of the image by alpha in place."""
        _check_image(rows)
        for row in rows:
            row[:] = [_multiply_pixel(pixel) for pixel in row]

    def divide_alpha(self, src_rows: Rows, dst_rows: Sequence[MutableSequence[Any]]) -> None:
        """Store the source with RGB divided by alpha into the destination."""
        _check_images(src_rows, dst_rows)
        for src_row, dst_row in zip(src_rows, dst_rows):
            dst_row[:] = [_divide_pixel(pixel) for pixel in src_row]

    def divide_alpha_inplace(self, rows: Sequence[MutableSequence[Any]]) -> None:
        """Divide RGB channels of the image by alpha in place."""
        _check_image(rows)
        for row in rows:
            row[:] = [_divide_pixel(pixel) for pixel in row]