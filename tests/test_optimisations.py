import pytest

from resampix.coefficients import Bound, precompute_coefficients
from resampix.filters import FilterType, get_filter_func
from resampix.optimisations import (
    MAX_COEFS_PRECISION,
    PRECISION_BITS,
    CoefficientsI16Chunk,
    NormalizedCoefficients,
    clip8,
)


def test_clip8_passes_in_range_values():
    for value in (0, 1, 100, 255):
        assert clip8(value << 10, 10) == value


def test_clip8_clamps():
    assert clip8(-5 << 3, 3) == 0
    assert clip8(300, 0) == 255
    assert clip8(511 << 7, 7) == 255
    assert clip8(-512 << 7, 7) == 0


def test_clip8_discards_fraction():
    assert clip8((42 << 8) + 255, 8) == 42


def test_precision_is_maximal_for_unit_weight():
    normalized = NormalizedCoefficients.from_values([1.0, 0.5, 0.0])
    p = normalized.precision
    assert max(normalized.values) < (1 << MAX_COEFS_PRECISION)
    assert round(1.0 * (1 << (p + 1))) >= (1 << MAX_COEFS_PRECISION)
    assert normalized.values[0] == 1 << p
    assert normalized.values[1] * 2 == normalized.values[0]
    assert normalized.values[2] == 0


def test_zero_weights_use_highest_precision():
    normalized = NormalizedCoefficients.from_values([0.0, 0.0])
    assert normalized.precision == PRECISION_BITS - 1
    assert normalized.values == (0, 0)


def test_empty_values():
    normalized = NormalizedCoefficients.from_values([])
    assert normalized.values == ()
    assert normalized.precision == PRECISION_BITS - 1


def test_values_saturate_to_i16():
    normalized = NormalizedCoefficients.from_values([1.0, -5.0])
    assert normalized.values[1] == -(1 << 15)


def test_rounding_halves_away_from_zero():
    normalized = NormalizedCoefficients.from_values([1.0, 2.5 / (1 << 14), -2.5 / (1 << 14)])
    assert normalized.precision == 14
    assert normalized.values[1] == 3
    assert normalized.values[2] == -3


def test_chunks_follow_bounds():
    normalized = NormalizedCoefficients.from_values(
        [0.25, 0.5, 0.25, 0.0, 1.0, 0.0, 0.0, 0.0]
    )
    chunks = normalized.chunks(4, [Bound(0, 3), Bound(1, 1)])
    assert chunks == [
        CoefficientsI16Chunk(0, normalized.values[0:3]),
        CoefficientsI16Chunk(1, normalized.values[4:5]),
    ]


def test_chunks_reject_short_values():
    normalized = NormalizedCoefficients.from_values([1.0])
    with pytest.raises(ValueError):
        normalized.chunks(2, [Bound(0, 1)])


@pytest.mark.parametrize("filter_type", list(FilterType))
def test_normalized_chunks_sum_near_unity(filter_type):
    func, support = get_filter_func(filter_type)
    coeffs = precompute_coefficients(13, 0.0, 13.0, 5, func, support)
    normalized = NormalizedCoefficients.from_values(coeffs.values)
    one = 1 << normalized.precision
    for chunk in normalized.chunks(coeffs.window_size, coeffs.bounds):
        assert abs(sum(chunk.values) - one) <= len(chunk.values)