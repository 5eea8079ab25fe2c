"""Enumerated hardware and operational states.

Values follow the numbering of the HAL protobuf enums, so raw integers read
from a telemetry cache compare equal to the members below.
"""

from __future__ import annotations

from enum import IntEnum


class AdminState(IntEnum):
    """Administrative intent for a port."""

    UNKNOWN = 0
    ENABLED = 1
    DISABLED = 2
    DIAG = 3


class PortState(IntEnum):
    """Observed link (operational) state of a port."""

    UNKNOWN = 0
    UP = 1
    DOWN = 2
    FAILED = 3


class HealthState(IntEnum):
    """Derived health of an up link, e.g. from neighbor-mismatch detection."""

    UNKNOWN = 0
    GOOD = 1
    BAD = 2


class TrunkMemberBlockState(IntEnum):
    """Forwarding state of a trunk member. Non-members always carry UNKNOWN."""

    UNKNOWN = 0
    FORWARDING = 1
    BLOCKED = 2


class HwState(IntEnum):
    UNKNOWN = 0
    NOT_PRESENT = 1
    PRESENT = 2
    OFF = 3
    CONFIGURED_OFF = 4
    READY = 5
    FAILED = 6
    DIAGNOSTIC = 7


class MediaType(IntEnum):
    """Transceiver media type as reported by the optics driver."""

    UNKNOWN = 0
    SFP = 1
    CFP_COPPER = 2
    CFP_LR4 = 3
    QSFP_CSR4 = 4
    QSFP_COPPER = 5
    QSFP_PSM4 = 6
    QSFP_SR4 = 7
    QSFP_LR4 = 8
    QSFP_CLR4 = 9
    QSFP_CCR4 = 10


class AlarmSeverity(IntEnum):
    UNKNOWN = 0
    MINOR = 1
    WARNING = 2
    MAJOR = 3
    CRITICAL = 4


class LoopbackState(IntEnum):
    UNKNOWN = 0
    NONE = 1
    MAC = 2
    PHY = 3


class TriState(IntEnum):
    UNKNOWN = 0
    TRUE = 1
    FALSE = 2


class LedColor(IntEnum):
    UNKNOWN = 0
    GREEN = 1
    AMBER = 2


class LedState(IntEnum):
    """Blink pattern of a front-panel LED."""

    UNKNOWN = 0
    OFF = 1
    SOLID = 2
    BLINKING_SLOW = 3
    BLINKING_FAST = 4
