import pytest

from pixelresample.coefficients import Bound, precompute_coefficients
from pixelresample.filters import FilterType, get_filter_func
from pixelresample.normalizer import (
    IntCoefficientsChunk,
    NormalizerGuard16,
    NormalizerGuard32,
)


def test_minimal_precision():
    assert NormalizerGuard16([0.0]).precision >= 4
    assert NormalizerGuard16([2.0]).precision >= 4
    assert NormalizerGuard32([0.0]).precision >= 4
    assert NormalizerGuard32([2.0]).precision >= 4


def test_precision_for_unit_weight():
    # Largest precision whose doubled weight still fits the coefficient type.
    assert NormalizerGuard16([1.0]).precision == 15 - 1
    assert NormalizerGuard32([1.0]).precision == 31 - 1


def test_precision_for_zero_weights_is_maximal():
    assert NormalizerGuard16([0.0]).precision == 32 - 8 - 2 - 1
    assert NormalizerGuard32([0.0]).precision == 64 - 16 - 2 - 1


@pytest.mark.parametrize("guard_cls", [NormalizerGuard16, NormalizerGuard32])
def test_weights_scaled_by_precision(guard_cls):
    weights = [0.1, -0.05, 0.5, 0.45]
    guard = guard_cls(weights)
    scale = 1 << guard.precision
    for w, i in zip(weights, guard.values):
        assert abs(i - w * scale) <= 0.5


def test_guard16_values_fit_i16():
    func, support = get_filter_func(FilterType.LANCZOS3)
    coeffs = precompute_coefficients(100, 0.0, 100.0, 37, func, support)
    guard = NormalizerGuard16(coeffs.values)
    assert all(-(1 << 15) <= v < (1 << 15) for v in guard.values)


@pytest.mark.parametrize("guard_cls", [NormalizerGuard16, NormalizerGuard32])
def test_normalized_chunks_follow_bounds(guard_cls):
    func, support = get_filter_func(FilterType.CATMULL_ROM)
    coeffs = precompute_coefficients(40, 0.0, 40.0, 11, func, support)
    guard = guard_cls(coeffs.values)
    chunks = guard.normalized_chunks(coeffs.window_size, coeffs.bounds)
    assert [c.start for c in chunks] == [b.start for b in coeffs.bounds]
    assert [len(c.values) for c in chunks] == [b.size for b in coeffs.bounds]
    one = 1 << guard.precision
    for chunk in chunks:
        assert abs(sum(chunk.values) - one) <= len(chunk.values)


def test_normalized_chunks_manual():
    guard = NormalizerGuard16([0.5, 0.5, 0.0, 1.0, 0.0, 0.0])
    half = 1 << (guard.precision - 1)
    chunks = guard.normalized_chunks(3, [Bound(2, 2), Bound(7, 1)])
    assert chunks == [
        IntCoefficientsChunk(2, (half, half)),
        IntCoefficientsChunk(7, (1 << guard.precision,)),
    ]


def test_normalized_chunks_too_few_values():
    guard = NormalizerGuard16([1.0])
    with pytest.raises(ValueError):
        guard.normalized_chunks(3, [Bound(0, 1)])


def test_clip16():
    guard = NormalizerGuard16([1.0])
    p = guard.precision
    assert guard.clip(0) == 0
    assert guard.clip(-1) == 0
    assert guard.clip(-(100 << p)) == 0
    assert guard.clip(128 << p) == 128
    assert guard.clip((255 << p) + (1 << p) - 1) == 255
    assert guard.clip(300 << p) == 255


def test_clip32():
    guard = NormalizerGuard32([1.0])
    p = guard.precision
    assert guard.clip(-5) == 0
    assert guard.clip(1000 << p) == 1000
    assert guard.clip(0xFFFF << p) == 0xFFFF
    assert guard.clip(0x10000 << p) == 0xFFFF


def test_rounding_half_away_from_zero():
    guard = NormalizerGuard16([1.0, -1.0])
    scale = 1 << guard.precision
    tiny = NormalizerGuard16([1.0, 0.5 / scale, -0.5 / scale])
    assert tiny.values[1] == 1
    assert tiny.values[2] == -1
    assert guard.values == (scale, -scale)