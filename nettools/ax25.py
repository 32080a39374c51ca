"""AX.25 callsign addresses.

An AX.25 address is six callsign characters, each shifted left by one
bit and padded with blanks, followed by a byte holding the SSID.
"""

from __future__ import annotations

import re

from nettools.hwaddr import AddressError

AX25_ALEN = 7
AF_AX25 = 3
ARPHRD_AX25 = 3

_CALL_LEN = 6
_NONE_SET = "[NONE SET]"
_ATOI = re.compile(r"[ \t\n\v\f\r]*([+-]?[0-9]+)")
_CALL_CHARS = frozenset("ABCDEFGHIJKLMNOPQRSTUVWXYZ0123456789")


def format_ax25(data: bytes) -> str:
    """Format a 7-byte AX.25 address as ``CALL`` or ``CALL-SSID``."""
    raw = bytes(data)
    if len(raw) < AX25_ALEN:
        raise AddressError(
            f"ax25 address needs {AX25_ALEN} bytes, got {len(raw)}"
        )
    chars = []
    for octet in raw[:_CALL_LEN]:
        value = octet >> 1
        if value in (0, ord(" ")):
            break
        chars.append(chr(value))
    call = "".join(chars)
    ssid = (raw[6] & 0x1E) >> 1
    return f"{call}-{ssid}" if ssid else call


def _atoi(text: str) -> int:
    match = _ATOI.match(text)
    return int(match.group(1)) if match else 0


def parse_ax25(text: str) -> bytes:
    """Parse a callsign with optional ``-SSID`` into a 7-byte address."""
    out = bytearray()
    pos = 0
    end = len(text)
    while pos < end and text[pos] != "-" and len(out) < _CALL_LEN:
        char = text[pos]
        if "a" <= char <= "z":
            char = char.upper()
        if char not in _CALL_CHARS:
            raise AddressError("Invalid callsign")
        out.append((ord(char) << 1) & 0xFE)
        pos += 1
    if len(out) == _CALL_LEN and pos < end and text[pos] != "-":
        raise AddressError("Callsign too long")
    out.extend(bytes([(ord(" ") << 1) & 0xFE]) * (_CALL_LEN - len(out)))
    if pos < end and text[pos] == "-":
        out.append((_atoi(text[pos + 1:]) << 1) & 0xFE)
    else:
        out.append(0)
    return bytes(out)


def format_ax25_sockaddr(family: int, data: bytes) -> str:
    """Format an AX.25 socket address, or a marker when none is set."""
    if family in (0, 0xFFFF):
        return _NONE_SET
    return format_ax25(data)