"""Reading and formatting of the kernel ARP table."""

from __future__ import annotations

import enum
import re
from dataclasses import dataclass
from typing import Iterable, Optional

from nettools import hardware

ARP_TABLE_PATH = "/proc/net/arp"
DEFAULT_HW = "ether"

LINUX_HEADER = (
    "Address                  HWtype  HWaddress           Flags Mask"
    "            Iface"
)

_HEX_FIELD = re.compile(r"0x([0-9a-fA-F]+)")
_FIELD_MAX = 99


class ArpFlag(enum.IntFlag):
    """Flags of an ARP table entry."""

    COM = 0x02
    PERM = 0x04
    PUBL = 0x08
    USETRAILERS = 0x10
    NETMASK = 0x20
    DONTPUB = 0x40
    MAGIC = 0x80


@dataclass(frozen=True)
class ArpEntry:
    """One row of the ARP table."""

    ip: str
    type: int
    flags: int
    hwaddr: str
    mask: str
    device: str


def _scan(line: str) -> list:
    """Scan ``ip 0xTYPE 0xFLAGS hwaddr mask device``; stop at the first mismatch."""
    tokens = line.split()
    values: list = []
    if not tokens:
        return values
    values.append(tokens[0])
    for token in tokens[1:3]:
        match = _HEX_FIELD.fullmatch(token)
        if match is None:
            return values
        values.append(int(match.group(1), 16))
    if len(values) < 3:
        return values
    values.extend(token[:_FIELD_MAX] for token in tokens[3:6])
    return values


def parse_arp_table(lines: Iterable[str]) -> list[ArpEntry]:
    """Parse the ARP table; the first line is a header.

    A row without a hardware address has five fields. A row with only four
    keeps the mask and device of the row before it. Parsing stops at the
    first row with fewer than four fields.
    """
    entries: list[ArpEntry] = []
    rows = iter(lines)
    if next(rows, None) is None:
        return entries
    mask, device = "-", "-"
    for line in rows:
        values = _scan(line)
        if len(values) < 4:
            break
        ip, type_, flags = values[:3]
        if len(values) == 5:
            hwaddr = ""
            mask, device = values[3], values[4]
        else:
            hwaddr = values[3]
            if len(values) >= 5:
                mask = values[4]
            if len(values) >= 6:
                device = values[5]
        entries.append(ArpEntry(ip, type_, flags, hwaddr, mask, device))
    return entries


def format_flags(flags: int) -> str:
    """Return the one-letter codes of the flags that are set."""
    value = int(flags)
    letters = (
        (ArpFlag.COM, "C"),
        (ArpFlag.PERM, "M"),
        (ArpFlag.PUBL, "P"),
        (ArpFlag.MAGIC, "A"),
        (ArpFlag.DONTPUB, "!"),
        (ArpFlag.USETRAILERS, "T"),
    )
    return "".join(letter for flag, letter in letters if value & flag)


def _hwname(entry: ArpEntry, hwname: Optional[str]) -> str:
    if hwname is not None:
        return hwname
    hw = hardware.get_hwntype(entry.type) or hardware.get_hwtype(DEFAULT_HW)
    return hw.name if hw is not None else DEFAULT_HW


def format_linux(entry: ArpEntry, hwname: Optional[str] = None) -> str:
    """Format an entry as a row below ``LINUX_HEADER``.

    The first column shows ``entry.ip``. Without ``hwname`` the hardware
    type name is looked up from the entry's type.
    """
    flags = entry.flags
    parts = ["%-23.23s  " % entry.ip]
    if not flags & ArpFlag.COM:
        if flags & ArpFlag.PUBL:
            parts.append("%-8.8s%-20.20s" % ("*", "<from_interface>"))
        else:
            parts.append("%-8.8s%-20.20s" % ("", "(incomplete)"))
    else:
        parts.append("%-8.8s%-20.20s" % (_hwname(entry, hwname), entry.hwaddr))
    mask = entry.mask if flags & ArpFlag.NETMASK else ""
    parts.append("%-6.6s%-15.15s %s" % (format_flags(flags), mask, entry.device))
    return "".join(parts)


def format_bsd(
    entry: ArpEntry, hostname: str, hwname: Optional[str] = None
) -> str:
    """Format an entry in the BSD style: ``host (ip) at hwaddr [type] ... on dev``."""
    flags = entry.flags
    parts = [f"{hostname} ({entry.ip}) at "]
    if not flags & ArpFlag.COM:
        if flags & ArpFlag.PUBL:
            parts.append("<from_interface> ")
        else:
            parts.append("<incomplete> ")
    else:
        parts.append(f"{entry.hwaddr} [{_hwname(entry, hwname)}] ")
    if flags & ArpFlag.NETMASK:
        parts.append(f"netmask {entry.mask} ")
    words = (
        (ArpFlag.PERM, "PERM "),
        (ArpFlag.PUBL, "PUB "),
        (ArpFlag.MAGIC, "AUTO "),
        (ArpFlag.DONTPUB, "DONTPUB "),
        (ArpFlag.USETRAILERS, "TRAIL "),
    )
    parts.extend(word for flag, word in words if flags & flag)
    parts.append(f"on {entry.device}")
    return "".join(parts)