"""Typed model for nodes (switching ASICs)."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Node:
    """A switching node within the chassis.

    Attributes:
        id: Controller-assigned node ID, ``0`` if unset.
        slot: 1-based slot the node sits in.
        index: 1-based index of the node within its slot, ``0`` if unset.
    """

    id: int = 0
    slot: int = 0
    index: int = 0
