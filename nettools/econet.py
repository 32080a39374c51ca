"""Econet address parsing and formatting."""

from __future__ import annotations

import re

from nettools.hwaddr import AddressError

AF_ECONET = 19

_NUMBER = re.compile(r"[ \t\n\v\f\r]*([+-]?[0-9]+)")


def format_econet(net: int, station: int) -> str:
    """Format an Econet address as ``net.station``."""
    return f"{int(net)}.{int(station)}"


def parse_econet(text: str) -> tuple[int, int]:
    """Parse ``net.station`` or a bare station number into (net, station).

    Both parts are stored in a byte each.
    """
    first = _NUMBER.match(text)
    if first is None:
        raise AddressError(f"invalid econet address: {text!r}")
    pos = first.end()
    if text[pos:pos + 1] == ".":
        second = _NUMBER.match(text, pos + 1)
        if second is not None:
            return int(first.group(1)) & 0xFF, int(second.group(1)) & 0xFF
    return 0, int(first.group(1)) & 0xFF