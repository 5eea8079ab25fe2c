"""MAC address conversions between 48-bit integers and YANG strings."""

from __future__ import annotations

import re

from hal_utils.vendor.openconfig.constants import MAC_ADDRESS_REGEX

# Optional whitespace, sign and 0x prefix, then the leading hex digits.
_HEX_PREFIX_RE: re.Pattern[str] = re.compile(r"\s*([+-]?)(?:0[xX])?([0-9A-Fa-f]+)")

_UINT64_MODULUS: int = 2**64


def mac_address_to_yang_string(mac_address: int) -> str:
    """Render the low 48 bits of *mac_address* as colon-separated hex octets.

    Octets are not zero padded, so the output does not always pass
    :func:`is_mac_address_valid` and does not always parse back to the same
    value.

    Example: ``0x0011223344AA`` -> ``"0:11:22:33:44:aa"``
    """
    octets = [(mac_address >> shift) & 0xFF for shift in range(40, -1, -8)]
    return ":".join(f"{octet:x}" for octet in octets)


def yang_string_to_mac_address(yang_string: str) -> int:
    """Parse a colon-separated MAC string into an integer.

    Colons are removed, then the string is read like an unsigned base-16
    number: leading whitespace, an optional sign and an optional ``0x``
    prefix are accepted, and parsing stops at the first non-hex character.
    A leading ``-`` negates modulo 2**64 and values that do not fit 64 bits
    saturate to ``2**64 - 1``. A string with no leading hex
    digits yields ``0``.
    """
    m = _HEX_PREFIX_RE.match(yang_string.replace(":", ""))
    if not m:
        return 0
    value = int(m.group(2), 16)
    if value >= _UINT64_MODULUS:
        return _UINT64_MODULUS - 1
    if m.group(1) == "-":
        return -value % _UINT64_MODULUS
    return value


def is_mac_address_valid(mac_address: str) -> bool:
    """Return ``True`` if *mac_address* is six two-digit hex octets
    separated by ``:`` or ``-``.
    """
    return MAC_ADDRESS_REGEX.fullmatch(mac_address) is not None
