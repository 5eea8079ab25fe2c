"""Typed model for gNMI Decimal64 values."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Decimal64:
    """Fixed-point number equal to ``digits * 10**-precision``.

    Attributes:
        digits: Signed 64-bit set of digits.
        precision: Number of digits after the decimal point.
    """

    digits: int
    precision: int
