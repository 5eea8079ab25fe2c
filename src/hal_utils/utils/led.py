"""Front-panel LED signal resolver.

Decides the (color, blink pattern) a port LED shows from four independent
state inputs, and merges per-port decisions when one physical LED stands for
several ports (e.g. the lanes of a channelized port).
"""

from __future__ import annotations

import logging
from collections.abc import Iterable
from dataclasses import dataclass
from typing import Protocol

from hal_utils.model.led import UNKNOWN_SIGNAL, LedSignal
from hal_utils.model.states import (
    AdminState,
    HealthState,
    LedColor,
    LedState,
    PortState,
    TrunkMemberBlockState,
)

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class PortStates:
    """The four state inputs of a single port.

    Attributes:
        admin_state: Administrative intent.
        oper_state: Observed link state.
        health_state: Derived health of the link.
        block_state: Trunk member block state; UNKNOWN for non-members.
    """

    admin_state: AdminState = AdminState.UNKNOWN
    oper_state: PortState = PortState.UNKNOWN
    health_state: HealthState = HealthState.UNKNOWN
    block_state: TrunkMemberBlockState = TrunkMemberBlockState.UNKNOWN


class PortStateSource(Protocol):
    """Supplies the current state inputs of a port on demand."""

    def get_port_states(self, port_id: int) -> PortStates: ...


def resolve_port_led(
    admin_state: AdminState,
    oper_state: PortState,
    health_state: HealthState,
    block_state: TrunkMemberBlockState,
) -> LedSignal:
    """Return the LED signal for a single port.

    Rules are checked in order and the first match wins:

    1. Admin state not ENABLED: solid amber.
    2. Oper state not UP: green, off.
    3. Trunk member BLOCKED (e.g. by LACP): green, slow blink.
    4. Health GOOD: solid green.
    5. Health BAD (e.g. neighbor mismatch): amber, fast blink.
    6. Health unknown: green, fast blink.

    Args:
        admin_state: Administrative state of the port.
        oper_state: Operational (link) state of the port.
        health_state: Health state of the port.
        block_state: Block state if the port is a trunk member, UNKNOWN
            otherwise.

    Returns:
        The :class:`LedSignal` to display. Never raises; unrecognised values
        fall through to the next rule.
    """
    if admin_state != AdminState.ENABLED:
        return LedSignal(LedColor.AMBER, LedState.SOLID)
    if oper_state != PortState.UP:
        return LedSignal(LedColor.GREEN, LedState.OFF)
    if block_state == TrunkMemberBlockState.BLOCKED:
        return LedSignal(LedColor.GREEN, LedState.BLINKING_SLOW)
    if health_state == HealthState.GOOD:
        return LedSignal(LedColor.GREEN, LedState.SOLID)
    if health_state == HealthState.BAD:
        return LedSignal(LedColor.AMBER, LedState.BLINKING_FAST)
    return LedSignal(LedColor.GREEN, LedState.BLINKING_FAST)


def aggregate_port_leds(
    signals: Iterable[LedSignal | tuple[LedColor, LedState]],
) -> LedSignal:
    """Merge the signals of ports sharing one LED into a single signal.

    Scans left to right keeping a running aggregate. Whenever the next
    signal differs from the aggregate, the aggregate becomes amber: slow
    blink if either side is a blinking amber, solid otherwise. Later signals
    are compared against that amber aggregate, not against the earlier
    per-port signals.

    Args:
        signals: Per-port signals in display order. Plain ``(color, state)``
            pairs are accepted.

    Returns:
        ``(UNKNOWN, UNKNOWN)`` for no input, the common signal if all inputs
        agree, otherwise the folded amber signal.
    """
    aggregate: LedSignal | None = None
    for signal in signals:
        incoming = signal if isinstance(signal, LedSignal) else LedSignal(*signal)
        if aggregate is None:
            aggregate = incoming
            continue
        if incoming == aggregate:
            continue
        if aggregate.is_amber_blinking or incoming.is_amber_blinking:
            aggregate = LedSignal(LedColor.AMBER, LedState.BLINKING_SLOW)
        else:
            aggregate = LedSignal(LedColor.AMBER, LedState.SOLID)
    return aggregate if aggregate is not None else UNKNOWN_SIGNAL


def resolve_port_group_led(source: PortStateSource, port_ids: Iterable[int]) -> LedSignal:
    """Resolve the shared LED of a group of ports.

    Pulls the states of each port from *source* in the given order, resolves
    each port with :func:`resolve_port_led` and merges the results with
    :func:`aggregate_port_leds`.

    Args:
        source: Provider of current port states.
        port_ids: Ports sharing the LED, in display order.

    Returns:
        The aggregated :class:`LedSignal`.
    """
    signals: list[LedSignal] = []
    for port_id in port_ids:
        states = source.get_port_states(port_id)
        signal = resolve_port_led(
            states.admin_state,
            states.oper_state,
            states.health_state,
            states.block_state,
        )
        logger.debug(
            "Port %d LED resolved to %s/%s", port_id, signal.color.name, signal.state.name
        )
        signals.append(signal)
    result = aggregate_port_leds(signals)
    logger.debug(
        "Group of %d port(s) LED aggregated to %s/%s",
        len(signals),
        result.color.name,
        result.state.name,
    )
    return result
