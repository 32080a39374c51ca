"""Formatting of the AX.25 and AppleTalk kernel routing tables."""

from __future__ import annotations

import enum
import re
from typing import Iterable

_ATOI = re.compile(r"[ \t\n\v\f\r]*([+-]?[0-9]+)")

AX25_TITLE = "Kernel AX.25 routing table"
AX25_HEADER = "Destination  Iface    Use"
DDP_HEADER = "Destination     Gateway         Device          Flags"


class RouteFlag(enum.IntFlag):
    """Routing entry flags."""

    UP = 0x0001
    GATEWAY = 0x0002
    HOST = 0x0004
    REINSTATE = 0x0008
    DYNAMIC = 0x0010
    MODIFIED = 0x0020
    MTU = 0x0040
    WINDOW = 0x0080
    IRTT = 0x0100
    REJECT = 0x0200
    NOTCACHED = 0x0400
    DEFAULT = 0x00010000
    ALLONLINK = 0x00020000
    ADDRCONF = 0x00040000
    NONEXTHOP = 0x00200000
    EXPIRES = 0x00400000
    CACHE = 0x01000000
    FLOW = 0x02000000
    POLICY = 0x04000000
    LOCAL = 0x80000000


_FLAG_LETTERS = (
    (RouteFlag.UP, "U"),
    (RouteFlag.GATEWAY, "G"),
    (RouteFlag.REJECT, "!"),
    (RouteFlag.HOST, "H"),
    (RouteFlag.REINSTATE, "R"),
    (RouteFlag.DYNAMIC, "D"),
    (RouteFlag.MODIFIED, "M"),
    (RouteFlag.DEFAULT, "d"),
    (RouteFlag.ALLONLINK, "a"),
    (RouteFlag.ADDRCONF, "c"),
    (RouteFlag.NONEXTHOP, "o"),
    (RouteFlag.EXPIRES, "e"),
    (RouteFlag.CACHE, "c"),
    (RouteFlag.FLOW, "f"),
    (RouteFlag.POLICY, "p"),
    (RouteFlag.LOCAL, "l"),
    (RouteFlag.MTU, "u"),
    (RouteFlag.WINDOW, "w"),
    (RouteFlag.IRTT, "i"),
    (RouteFlag.NOTCACHED, "n"),
)


def _atoi(text: str) -> int:
    match = _ATOI.match(text)
    return int(match.group(1)) if match else 0


def decode_route_flags(flags: int) -> str:
    """Return the one-letter codes of the flags that are set."""
    value = int(flags)
    return "".join(letter for flag, letter in _FLAG_LETTERS if value & flag)


def ax25_routes(lines: Iterable[str]) -> list[str]:
    """Format the AX.25 routing table; the first input line is a header."""
    out = [AX25_TITLE, AX25_HEADER]
    rows = iter(lines)
    next(rows, None)
    for line in rows:
        line = line.rstrip("\n")
        dest = line[:9]
        dev = line[10:14]
        use = _atoi(line[15:])
        out.append("%-9s    %-5s  %5d" % (dest, dev, use))
    return out


def ddp_routes(lines: Iterable[str]) -> list[str]:
    """Format the AppleTalk routing table from its whitespace-separated fields.

    The first four fields are a header; each route has destination,
    gateway, flags and device.
    """
    tokens = [token for line in lines for token in line.split()]
    out = [DDP_HEADER]
    if len(tokens) < 4:
        return out
    fields = iter(tokens[4:])
    for dest, gateway, flags, dev in zip(fields, fields, fields, fields):
        out.append("%-16s%-16s%-16s%-s" % (
            dest, gateway, dev, decode_route_flags(_atoi(flags))))
    return out