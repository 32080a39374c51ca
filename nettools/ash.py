"""Ash hop-list addresses.

An Ash address is a list of up to 64 hops. Each hop is a number from 0
to 15 and is stored as a Hamming-coded byte. Unused slots hold 0xc9.
"""

from __future__ import annotations

import re

from nettools.hwaddr import AddressError

ASH_ALEN = 64
ARPHRD_ASH = 517
AF_ASH = 18

HAMMING = (
    0x15, 0x02, 0x49, 0x5E, 0x64, 0x73, 0x38, 0x2F,
    0xD0, 0xC7, 0x8C, 0x9B, 0xA1, 0xB6, 0xFD, 0xEA,
)

_FILL = 0xC9
_END = 0xFF
_NONE_SET = "[NONE SET]"

_HOP = re.compile(
    r"[ \t\n\v\f\r]*([+-]?)(0[xX](?=[0-9a-fA-F]))?([0-9a-fA-F]*)"
)


def format_ash(data: bytes) -> str:
    """Format the coded hops of an Ash address in brackets."""
    digits = []
    for octet in bytes(data)[:ASH_ALEN]:
        if octet in (_FILL, _END):
            break
        digits.append("%x" % octet)
    return "[" + "".join(digits) + "]"


def _read_hop(text: str, start: int) -> tuple[int, int]:
    """Read one hexadecimal hop number; return its value and end position."""
    match = _HOP.match(text, start)
    sign, prefix, digits = match.groups()
    if not digits and not prefix:
        return 0, start
    value = int(digits, 16) if digits else 0
    return (-value if sign == "-" else value), match.end()


def parse_ash(text: str) -> bytes:
    """Parse colon-separated hop numbers into a 64-byte Ash address."""
    out = bytearray()
    pos: int | None = 0
    while pos is not None and len(out) < ASH_ALEN:
        hop, end = _read_hop(text, pos)
        if not 0 <= hop < len(HAMMING):
            raise AddressError("Malformed Ash address")
        out.append(HAMMING[hop])
        if end >= len(text):
            pos = None
        elif text[end] == ":":
            pos = end + 1
        else:
            raise AddressError("Malformed Ash address")
    return bytes(out.ljust(ASH_ALEN, bytes([_FILL])))


def format_ash_sockaddr(family: int, data: bytes) -> str:
    """Format an Ash socket address, or a marker if the family differs."""
    if family != AF_ASH:
        return _NONE_SET
    return format_ash(data)