"""Custom exceptions for the hal-utils helpers."""

from __future__ import annotations

from dataclasses import dataclass


class HalError(Exception):
    """Base exception for all hal-utils errors."""


@dataclass
class HalInvalidParamError(HalError, ValueError):
    """Raised when a string does not name any value of a strict lookup table.

    Attributes:
        parameter: Name of the offending parameter (e.g. ``"severity"``).
        value: The rejected input, verbatim.
    """

    parameter: str
    value: str

    def __post_init__(self) -> None:
        super().__init__(f"Invalid {self.parameter} string {self.value!r}.")


@dataclass
class HalOutOfRangeError(HalError, ArithmeticError):
    """Raised when a numeric conversion produces an invalid floating-point result.

    Attributes:
        operation: Short name of the conversion that failed.
        detail: Human-readable description of the rejected operands.
    """

    operation: str
    detail: str

    def __post_init__(self) -> None:
        super().__init__(f"{self.operation}: can not convert {self.detail}")
