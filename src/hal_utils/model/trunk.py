"""Typed model for trunk/LAG ports."""

from __future__ import annotations

from dataclasses import dataclass, field


@dataclass(frozen=True)
class TrunkPort:
    """Represents a link-aggregation trunk.

    Attributes:
        id: Controller-assigned trunk ID, ``0`` if unset.
        node: ID of the node the trunk belongs to, ``0`` if unset.
        members: IDs of the singleton ports aggregated by the trunk.
    """

    id: int = 0
    node: int = 0
    members: tuple[int, ...] = field(default_factory=tuple)
