"""Numeric boundary conversions: gNMI Decimal64 <-> float, Hz <-> MHz."""

from __future__ import annotations

import math
from decimal import ROUND_HALF_UP, Decimal

from hal_utils.errors import HalOutOfRangeError
from hal_utils.model.decimal64 import Decimal64
from hal_utils.vendor.openconfig.constants import (
    DECIMAL64_DIGITS_MAX,
    DECIMAL64_DIGITS_MIN,
    DEFAULT_DECIMAL64_PRECISION,
    HZ_PER_MHZ,
)


def convert_decimal64_to_double(value: Decimal64) -> float:
    """Return ``value.digits / 10**value.precision`` as a float.

    Raises:
        HalOutOfRangeError: If the scale factor or the result is not a
            finite float.
    """
    try:
        result = value.digits / math.pow(10, value.precision)
    except (OverflowError, ZeroDivisionError) as exc:
        raise HalOutOfRangeError(
            operation="decimal64_to_double",
            detail=f"decimal with digits {value.digits} and precision "
            f"{value.precision} to a double value ({exc})",
        ) from exc
    if not math.isfinite(result):
        raise HalOutOfRangeError(
            operation="decimal64_to_double",
            detail=f"decimal with digits {value.digits} and precision "
            f"{value.precision} to a double value",
        )
    return result


def convert_double_to_decimal64(
    value: float,
    precision: int = DEFAULT_DECIMAL64_PRECISION,
) -> Decimal64:
    """Encode *value* as a :class:`Decimal64` with *precision* fraction digits.

    The digits are ``value * 10**precision`` rounded half away from zero.

    Args:
        value: Number to encode.
        precision: Number of digits after the decimal point.

    Returns:
        The encoded :class:`Decimal64`.

    Raises:
        HalOutOfRangeError: If *value* is NaN or infinite, the scaling
            overflows, or the digits do not fit a signed 64-bit integer.
    """
    detail = f"number {value} with precision {precision} to a Decimal64 value"
    try:
        scaled = value * math.pow(10, precision)
        digits = int(Decimal(scaled).to_integral_value(rounding=ROUND_HALF_UP))
    except (OverflowError, ValueError) as exc:
        raise HalOutOfRangeError(operation="double_to_decimal64", detail=detail) from exc
    if not DECIMAL64_DIGITS_MIN <= digits <= DECIMAL64_DIGITS_MAX:
        raise HalOutOfRangeError(operation="double_to_decimal64", detail=detail)
    return Decimal64(digits=digits, precision=precision)


def convert_hz_to_mhz(hz: int) -> int:
    return hz // HZ_PER_MHZ


def convert_mhz_to_hz(mhz: int) -> int:
    return mhz * HZ_PER_MHZ
