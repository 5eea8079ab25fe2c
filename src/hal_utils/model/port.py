"""Typed models for singleton (non-trunk) ports."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class SingletonPort:
    """A physical port, or one channel of a channelized port.

    Attributes:
        id: Controller-assigned port ID, ``0`` if unset.
        node: ID of the node (ASIC) the port belongs to, ``0`` if unset.
        slot: 1-based slot (linecard) number.
        port: 1-based front-panel port number within the slot.
        channel: 1-based channel for channelized ports, ``0`` for
            non-channelized ports.
        speed_bps: Configured port speed in bits per second, ``0`` if unset.
    """

    id: int = 0
    node: int = 0
    slot: int = 0
    port: int = 0
    channel: int = 0
    speed_bps: int = 0


def build_singleton_port(slot: int, port: int, channel: int, speed_bps: int) -> SingletonPort:
    """Return a :class:`SingletonPort` with only the physical location and speed set."""
    return SingletonPort(slot=slot, port=port, channel=channel, speed_bps=speed_bps)
