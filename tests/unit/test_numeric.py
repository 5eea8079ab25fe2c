"""Unit tests for hal_utils.utils.numeric."""

from __future__ import annotations

import math

import pytest

from hal_utils.errors import HalError, HalOutOfRangeError
from hal_utils.model.decimal64 import Decimal64
from hal_utils.utils.numeric import (
    convert_decimal64_to_double,
    convert_double_to_decimal64,
    convert_hz_to_mhz,
    convert_mhz_to_hz,
)

# ---------------------------------------------------------------------------
# Decimal64 -> float
# ---------------------------------------------------------------------------


def test_decimal64_to_double() -> None:
    result = convert_decimal64_to_double(Decimal64(digits=12345, precision=2))
    assert result == pytest.approx(123.45)


def test_decimal64_to_double_negative() -> None:
    assert convert_decimal64_to_double(Decimal64(digits=-5, precision=1)) == pytest.approx(-0.5)


def test_decimal64_to_double_zero_precision() -> None:
    assert convert_decimal64_to_double(Decimal64(digits=42, precision=0)) == 42.0


def test_decimal64_to_double_overflow() -> None:
    with pytest.raises(HalOutOfRangeError) as exc_info:
        convert_decimal64_to_double(Decimal64(digits=1, precision=400))
    assert "precision 400" in str(exc_info.value)


def test_decimal64_to_double_digits_too_large_for_float() -> None:
    with pytest.raises(HalOutOfRangeError):
        convert_decimal64_to_double(Decimal64(digits=10**400, precision=0))


# ---------------------------------------------------------------------------
# float -> Decimal64
# ---------------------------------------------------------------------------


def test_double_to_decimal64_default_precision() -> None:
    assert convert_double_to_decimal64(12.34) == Decimal64(digits=1234, precision=2)


def test_double_to_decimal64_explicit_precision() -> None:
    assert convert_double_to_decimal64(1.5, precision=3) == Decimal64(digits=1500, precision=3)


def test_double_to_decimal64_rounds_half_away_from_zero() -> None:
    assert convert_double_to_decimal64(2.5, precision=0).digits == 3
    assert convert_double_to_decimal64(-2.5, precision=0).digits == -3
    assert convert_double_to_decimal64(0.5, precision=0).digits == 1


def test_double_to_decimal64_overflow() -> None:
    with pytest.raises(HalOutOfRangeError) as exc_info:
        convert_double_to_decimal64(1e308, precision=10)
    assert "1e+308" in str(exc_info.value)


def test_double_to_decimal64_digits_beyond_int64() -> None:
    with pytest.raises(HalOutOfRangeError):
        convert_double_to_decimal64(1e19, precision=0)


def test_double_to_decimal64_nan_and_inf() -> None:
    for value in (math.nan, math.inf, -math.inf):
        with pytest.raises(HalOutOfRangeError):
            convert_double_to_decimal64(value)


def test_out_of_range_error_is_hal_error() -> None:
    with pytest.raises(HalError):
        convert_double_to_decimal64(math.inf)


def test_round_trip_within_precision() -> None:
    for value, precision in ((3.14159, 2), (-273.15, 2), (0.001, 3), (98765.4321, 4), (7.0, 0)):
        decimal = convert_double_to_decimal64(value, precision)
        assert decimal.precision == precision
        back = convert_decimal64_to_double(decimal)
        assert back == pytest.approx(value, abs=0.5 * 10**-precision)


# ---------------------------------------------------------------------------
# Frequencies
# ---------------------------------------------------------------------------


def test_hz_to_mhz_truncates() -> None:
    assert convert_hz_to_mhz(156_250_000) == 156
    assert convert_hz_to_mhz(999_999) == 0


def test_mhz_to_hz() -> None:
    assert convert_mhz_to_hz(156) == 156_000_000


def test_double_to_decimal64_just_below_half_rounds_down() -> None:
    assert convert_double_to_decimal64(0.49999999999999994, precision=0).digits == 0
    assert convert_double_to_decimal64(-0.49999999999999994, precision=0).digits == 0
