"""Unit tests for hal_utils.model and hal_utils.errors."""

from __future__ import annotations

import dataclasses

import pytest

from hal_utils.errors import HalError, HalInvalidParamError, HalOutOfRangeError
from hal_utils.model.led import UNKNOWN_SIGNAL, LedSignal
from hal_utils.model.states import AdminState, LedColor, LedState, PortState
from hal_utils.model.trunk import TrunkPort

# ---------------------------------------------------------------------------
# LedSignal
# ---------------------------------------------------------------------------


def test_led_signal_unpacks_as_pair() -> None:
    color, state = LedSignal(LedColor.AMBER, LedState.SOLID)
    assert color is LedColor.AMBER
    assert state is LedState.SOLID


def test_led_signal_is_immutable() -> None:
    signal = LedSignal(LedColor.GREEN, LedState.SOLID)
    with pytest.raises(dataclasses.FrozenInstanceError):
        signal.color = LedColor.AMBER  # type: ignore[misc]


def test_led_signal_is_hashable() -> None:
    signals = {
        LedSignal(LedColor.GREEN, LedState.SOLID),
        LedSignal(LedColor.GREEN, LedState.SOLID),
    }
    assert len(signals) == 1


def test_is_amber_blinking() -> None:
    assert LedSignal(LedColor.AMBER, LedState.BLINKING_SLOW).is_amber_blinking
    assert LedSignal(LedColor.AMBER, LedState.BLINKING_FAST).is_amber_blinking
    assert not LedSignal(LedColor.AMBER, LedState.SOLID).is_amber_blinking
    assert not LedSignal(LedColor.GREEN, LedState.BLINKING_FAST).is_amber_blinking


def test_unknown_signal() -> None:
    assert tuple(UNKNOWN_SIGNAL) == (LedColor.UNKNOWN, LedState.UNKNOWN)


# ---------------------------------------------------------------------------
# States
# ---------------------------------------------------------------------------


def test_states_compare_equal_to_raw_integers() -> None:
    assert AdminState.ENABLED == 1
    assert PortState(3) is PortState.FAILED


def test_trunk_port_defaults() -> None:
    trunk = TrunkPort()
    assert trunk.id == 0
    assert trunk.members == ()


# ---------------------------------------------------------------------------
# Errors
# ---------------------------------------------------------------------------


def test_invalid_param_error_message() -> None:
    err = HalInvalidParamError(parameter="severity", value="LOUD")
    assert str(err) == "Invalid severity string 'LOUD'."
    assert isinstance(err, HalError)
    assert isinstance(err, ValueError)


def test_out_of_range_error_message() -> None:
    err = HalOutOfRangeError(operation="double_to_decimal64", detail="number inf")
    assert "double_to_decimal64" in str(err)
    assert "number inf" in str(err)
    assert isinstance(err, ArithmeticError)
