#!/usr/bin/env python3
"""Example: resolve front-panel LEDs for a few ports and print them as JSON.

Builds an in-memory state source for a 4-lane channelized port and two
trunk members, resolves each port's LED, then aggregates the four lanes into
the single LED they share on the front panel.

Usage::

    python examples/port_led_report.py

Environment variables:
    LOG_SEVERITY   Log severity name (CRITICAL, ERROR, WARNING, NOTICE,
                   INFORMATIONAL, DEBUG). Default: NOTICE.
"""

from __future__ import annotations

import json
import logging
import os
import sys

from hal_utils.errors import HalInvalidParamError
from hal_utils.model.port import build_singleton_port
from hal_utils.model.states import (
    AdminState,
    HealthState,
    PortState,
    TrunkMemberBlockState,
)
from hal_utils.utils.led import PortStates, resolve_port_group_led, resolve_port_led
from hal_utils.utils.log_severity import convert_string_to_log_severity, logging_level_for
from hal_utils.utils.normalize import convert_admin_state_to_string, convert_port_state_to_string
from hal_utils.utils.render import print_singleton_port

# port_id -> (slot, port, channel, speed_bps)
_LOCATIONS: dict[int, tuple[int, int, int, int]] = {
    1: (1, 1, 1, 25_000_000_000),
    2: (1, 1, 2, 25_000_000_000),
    3: (1, 1, 3, 25_000_000_000),
    4: (1, 1, 4, 25_000_000_000),
    5: (1, 2, 0, 100_000_000_000),
    6: (1, 3, 0, 100_000_000_000),
}

_STATES: dict[int, PortStates] = {
    1: PortStates(AdminState.ENABLED, PortState.UP, HealthState.GOOD),
    2: PortStates(AdminState.ENABLED, PortState.UP, HealthState.GOOD),
    3: PortStates(AdminState.ENABLED, PortState.DOWN),
    4: PortStates(AdminState.ENABLED, PortState.UP, HealthState.BAD),
    5: PortStates(
        AdminState.ENABLED, PortState.UP, HealthState.GOOD, TrunkMemberBlockState.FORWARDING
    ),
    6: PortStates(
        AdminState.ENABLED, PortState.UP, HealthState.GOOD, TrunkMemberBlockState.BLOCKED
    ),
}


class StaticStateSource:
    """PortStateSource backed by a fixed dict."""

    def __init__(self, states: dict[int, PortStates]) -> None:
        self._states = states

    def get_port_states(self, port_id: int) -> PortStates:
        return self._states.get(port_id, PortStates())


def main() -> None:
    severity = os.environ.get("LOG_SEVERITY", "NOTICE")
    try:
        log_config = convert_string_to_log_severity(severity)
    except HalInvalidParamError as exc:
        print(f"ERROR: {exc}", file=sys.stderr)
        sys.exit(1)
    logging.basicConfig(level=logging_level_for(log_config))

    source = StaticStateSource(_STATES)
    ports = []
    for port_id, (slot, port, channel, speed_bps) in _LOCATIONS.items():
        states = source.get_port_states(port_id)
        signal = resolve_port_led(
            states.admin_state, states.oper_state, states.health_state, states.block_state
        )
        ports.append(
            {
                "port_id": port_id,
                "port": print_singleton_port(build_singleton_port(slot, port, channel, speed_bps)),
                "admin_status": convert_admin_state_to_string(states.admin_state),
                "oper_status": convert_port_state_to_string(states.oper_state),
                "led": [signal.color.name, signal.state.name],
            }
        )

    shared = resolve_port_group_led(source, [1, 2, 3, 4])
    report = {
        "ports": ports,
        "shared_leds": {"slot 1 port 1": [shared.color.name, shared.state.name]},
    }
    print(json.dumps(report, indent=2))


if __name__ == "__main__":
    main()
