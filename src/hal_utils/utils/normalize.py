"""Conversions from HAL enum values to their canonical strings.

Lookups are lenient: values missing from a table map to the table's
UNKNOWN string (or ``0`` for speeds) instead of raising.
"""

from __future__ import annotations

import logging

from hal_utils.model.states import (
    AdminState,
    AlarmSeverity,
    HealthState,
    HwState,
    LoopbackState,
    MediaType,
    PortState,
    TriState,
    TrunkMemberBlockState,
)
from hal_utils.vendor.openconfig.mappings import (
    ADMIN_STATE_MAP,
    ALARM_SEVERITY_MAP,
    HEALTH_STATE_MAP,
    HW_PRESENT_MAP,
    HW_STATE_MAP,
    MEDIA_TYPE_MAP,
    PORT_STATE_MAP,
    SPEED_BPS_TO_STRING,
    SPEED_STRING_TO_BPS,
    SPEED_UNKNOWN,
    UNKNOWN,
)

logger = logging.getLogger(__name__)


def convert_hw_state_to_string(state: HwState) -> str:
    """Return the component oper-status string for *state*.

    READY is ``UP``, OFF is ``DORMANT``, PRESENT and CONFIGURED_OFF are
    ``DOWN``, FAILED is ``LOWER_LAYER_DOWN`` and DIAGNOSTIC is ``TESTING``.
    """
    return HW_STATE_MAP.get(state, UNKNOWN)


def convert_hw_state_to_present_string(state: HwState) -> str:
    """Return ``NOT_PRESENT`` for NOT_PRESENT and ``PRESENT`` for any other
    defined state, including UNKNOWN. Undefined values give ``UNKNOWN``.
    """
    return HW_PRESENT_MAP.get(state, UNKNOWN)


def convert_port_state_to_string(state: PortState) -> str:
    return PORT_STATE_MAP.get(state, UNKNOWN)


def convert_admin_state_to_string(state: AdminState) -> str:
    return ADMIN_STATE_MAP.get(state, UNKNOWN)


def convert_speed_bps_to_string(speed_bps: int) -> str:
    """Return the OpenConfig speed identity for *speed_bps*.

    Args:
        speed_bps: Port speed in bits per second.

    Returns:
        ``SPEED_10GB`` … ``SPEED_100GB``, or ``SPEED_UNKNOWN`` for any other
        value (including ``0``).
    """
    return SPEED_BPS_TO_STRING.get(speed_bps, SPEED_UNKNOWN)


def convert_string_to_speed_bps(speed: str) -> int:
    """Return the speed in bps for an OpenConfig speed identity, ``0`` if unknown."""
    speed_bps = SPEED_STRING_TO_BPS.get(speed)
    if speed_bps is None:
        logger.debug("Unrecognised speed string %r, using 0 bps", speed)
        return 0
    return speed_bps


def convert_alarm_severity_to_string(severity: AlarmSeverity) -> str:
    return ALARM_SEVERITY_MAP.get(severity, UNKNOWN)


def convert_health_state_to_string(state: HealthState) -> str:
    return HEALTH_STATE_MAP.get(state, UNKNOWN)


def convert_media_type_to_string(media_type: MediaType) -> str:
    """Return the transceiver form factor for *media_type*.

    Variants collapse onto their form factor: both CFP types are ``CFP``,
    the PSM4/SR4/LR4/CLR4 QSFPs are ``QSFP28``, CSR4 is ``QSFP_PLUS`` and
    the copper/CCR4 QSFPs are ``QSFP``.
    """
    return MEDIA_TYPE_MAP.get(media_type, UNKNOWN)


def convert_trunk_member_block_state_to_bool(state: TrunkMemberBlockState) -> bool:
    """Return ``True`` only if the trunk member is forwarding."""
    return state == TrunkMemberBlockState.FORWARDING


def is_port_autoneg_enabled(state: TriState) -> bool:
    return state == TriState.TRUE


def is_admin_state_enabled(admin_state: AdminState) -> bool:
    return admin_state == AdminState.ENABLED


def is_loopback_state_enabled(loopback_state: LoopbackState) -> bool:
    """Return ``True`` for MAC and PHY loopback."""
    return loopback_state in (LoopbackState.MAC, LoopbackState.PHY)
