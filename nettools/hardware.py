"""Table of known hardware (link-layer) address types."""

from __future__ import annotations

import sys
from dataclasses import dataclass
from typing import Callable, Optional

from nettools import ash, ax25, hwaddr

ARPHRD_ETHER = 1
ARPHRD_AX25 = ax25.ARPHRD_AX25
ARPHRD_ARCNET = 7
ARPHRD_DLCI = 15
ARPHRD_EUI64 = 27
ARPHRD_INFINIBAND = 32
ARPHRD_HDLC = 513
ARPHRD_LAPB = 516
ARPHRD_ASH = ash.ARPHRD_ASH
ARPHRD_FRAD = 770
ARPHRD_FDDI = 774
ARPHRD_HIPPI = 780
ARPHRD_ECONET = 782


@dataclass(frozen=True)
class HardwareType:
    """A hardware address type and its text conversions."""

    name: str
    title: str
    type: int
    alen: int
    format: Optional[Callable[[bytes], str]] = None
    parse: Optional[Callable[[str], bytes]] = None
    suppress_null: bool = False


def format_dlci(data: bytes) -> str:
    """Format a Frame Relay DLCI stored as a native-order signed short."""
    raw = bytes(data)
    if len(raw) < 2:
        raise hwaddr.AddressError("dlci address needs at least 2 bytes")
    return str(int.from_bytes(raw[:2], sys.byteorder, signed=True))


_HWTYPES: tuple[HardwareType, ...] = (
    HardwareType("ash", "Ash", ARPHRD_ASH, ash.ASH_ALEN,
                 ash.format_ash, ash.parse_ash, True),
    HardwareType("ether", "Ethernet", ARPHRD_ETHER, hwaddr.ETHER_ALEN,
                 hwaddr.format_ether, hwaddr.parse_ether),
    HardwareType("ax25", "AMPR AX.25", ARPHRD_AX25, ax25.AX25_ALEN,
                 ax25.format_ax25, ax25.parse_ax25),
    HardwareType("hdlc", "(Cisco)-HDLC", ARPHRD_HDLC, 0),
    HardwareType("lapb", "LAPB", ARPHRD_LAPB, 0),
    HardwareType("arcnet", "ARCnet", ARPHRD_ARCNET, hwaddr.ARCNET_ALEN,
                 hwaddr.format_arcnet, hwaddr.parse_arcnet),
    HardwareType("dlci", "Frame Relay DLCI", ARPHRD_DLCI, 3, format_dlci),
    HardwareType("frad", "Frame Relay Access Device", ARPHRD_FRAD, 0),
    HardwareType("fddi", "Fiber Distributed Data Interface", ARPHRD_FDDI,
                 hwaddr.FDDI_ALEN, hwaddr.format_fddi, hwaddr.parse_fddi),
    HardwareType("hippi", "HIPPI", ARPHRD_HIPPI, hwaddr.HIPPI_ALEN,
                 hwaddr.format_hippi, hwaddr.parse_hippi),
    HardwareType("ec", "Econet", ARPHRD_ECONET, 0),
    HardwareType("infiniband", "InfiniBand", ARPHRD_INFINIBAND,
                 hwaddr.INFINIBAND_ALEN, hwaddr.format_infiniband,
                 hwaddr.parse_infiniband),
    HardwareType("eui64", "Generic EUI-64", ARPHRD_EUI64, hwaddr.EUI64_ALEN,
                 hwaddr.format_eui64, hwaddr.parse_eui64),
    HardwareType("unspec", "UNSPEC", -1, 0),
)


def hardware_types() -> tuple[HardwareType, ...]:
    """Return all known hardware types in lookup order."""
    return _HWTYPES


def get_hwtype(name: str) -> Optional[HardwareType]:
    """Find a hardware type by name, or return None."""
    return next((hw for hw in _HWTYPES if hw.name == name), None)


def get_hwntype(type: int) -> Optional[HardwareType]:
    """Find a hardware type by its ARPHRD number, or return None."""
    return next((hw for hw in _HWTYPES if hw.type == type), None)


def format_hwlist(arp_only: bool) -> str:
    """List the hardware types, three to a line; optionally only ARP-capable ones."""
    parts = []
    count = 0
    for hw in _HWTYPES:
        if (arp_only and hw.alen == 0) or hw.type == -1:
            continue
        if count % 3 == 0:
            parts.append("\n    " if count else "    ")
        parts.append(f"{hw.name or '..'} ({hw.title}) ")
        count += 1
    parts.append("\n")
    return "".join(parts)


def hw_null_address(hw: HardwareType, address: bytes) -> bool:
    """Return True if the first ``hw.alen`` bytes of the address are all zero."""
    return not any(bytes(address)[:hw.alen])