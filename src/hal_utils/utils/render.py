"""Human-readable renderers for nodes, ports and trunks.

Every descriptor is a parenthesised, comma-separated list of ``key: value``
fields, e.g. ``(node_id: 1, port_id: 3, slot: 1, port: 2, speed: 100G)``.
Unset fields are omitted.
"""

from __future__ import annotations

from hal_utils.model.device import Node
from hal_utils.model.port import SingletonPort
from hal_utils.model.states import PortState
from hal_utils.model.trunk import TrunkPort
from hal_utils.vendor.openconfig.constants import BITS_PER_GIGABIT
from hal_utils.vendor.openconfig.mappings import PORT_STATE_LABELS, UNKNOWN


def print_node(node: Node) -> str:
    return print_node_properties(node.id, node.slot, node.index)


def print_singleton_port(port: SingletonPort) -> str:
    return print_port_properties(
        port.node,
        port.id,
        port.slot,
        port.port,
        port.channel,
        speed_bps=port.speed_bps,
    )


def print_trunk_port(trunk: TrunkPort) -> str:
    return print_trunk_properties(trunk.node, trunk.id)


def print_node_properties(node_id: int, slot: int, index: int) -> str:
    """Render a node descriptor.

    ``id`` is included only when > 0 and ``index`` only when > 0; ``slot``
    is always present.
    """
    fields: list[str] = []
    if node_id > 0:
        fields.append(f"id: {node_id}")
    fields.append(f"slot: {slot}")
    if index > 0:
        fields.append(f"index: {index}")
    return _join(fields)


def print_port_properties(
    node_id: int,
    port_id: int,
    slot: int,
    port: int,
    channel: int = 0,
    unit: int = -1,
    logical_port: int = -1,
    speed_bps: int = 0,
) -> str:
    """Render a singleton port descriptor.

    Args:
        node_id: Node ID, included when > 0.
        port_id: Port ID, included when > 0.
        slot: Slot number, always included.
        port: Front-panel port number, always included.
        channel: Channel number, included when > 0.
        unit: SDK unit, included when >= 0.
        logical_port: SDK logical port, included when >= 0.
        speed_bps: Speed in bps, included as whole gigabits when > 0.

    Returns:
        The rendered descriptor.
    """
    fields: list[str] = []
    if node_id > 0:
        fields.append(f"node_id: {node_id}")
    if port_id > 0:
        fields.append(f"port_id: {port_id}")
    fields.append(f"slot: {slot}")
    fields.append(f"port: {port}")
    if channel > 0:
        fields.append(f"channel: {channel}")
    if unit >= 0:
        fields.append(f"unit: {unit}")
    if logical_port >= 0:
        fields.append(f"logical_port: {logical_port}")
    if speed_bps > 0:
        fields.append(f"speed: {speed_bps // BITS_PER_GIGABIT}G")
    return _join(fields)


def print_trunk_properties(
    node_id: int,
    trunk_id: int,
    unit: int = -1,
    trunk_port: int = -1,
    speed_bps: int = 0,
) -> str:
    """Render a trunk descriptor; every field is optional, so ``()`` is possible."""
    fields: list[str] = []
    if node_id > 0:
        fields.append(f"node_id: {node_id}")
    if trunk_id > 0:
        fields.append(f"trunk_id: {trunk_id}")
    if unit >= 0:
        fields.append(f"unit: {unit}")
    if trunk_port >= 0:
        fields.append(f"trunk_port: {trunk_port}")
    if speed_bps > 0:
        fields.append(f"speed: {speed_bps // BITS_PER_GIGABIT}G")
    return _join(fields)


def print_port_state(state: PortState) -> str:
    """Return ``UP``, ``DOWN``, ``FAILED`` or ``UNKNOWN``."""
    return PORT_STATE_LABELS.get(state, UNKNOWN)


# ---------------------------------------------------------------------------
# Internals
# ---------------------------------------------------------------------------

def _join(fields: list[str]) -> str:
    return "(" + ", ".join(fields) + ")"
