"""Parsing and formatting of link-layer hardware addresses.

Covers Ethernet, FDDI, HIPPI, EUI-64, ARCnet and InfiniBand addresses.
Parsers return exactly as many bytes as the address type holds. Octets
the text does not supply are zero, and text after the last octet is
ignored.
"""

from __future__ import annotations

import sys

ETHER_ALEN = 6
FDDI_ALEN = 6
HIPPI_ALEN = 6
EUI64_ALEN = 8
ARCNET_ALEN = 1
INFINIBAND_ALEN = 20

_HEXDIGITS = frozenset("0123456789abcdefABCDEF")


class AddressError(ValueError):
    """Raised when a hardware address cannot be parsed or formatted."""


def _hex_value(char: str) -> int | None:
    if char and char in _HEXDIGITS:
        return int(char, 16)
    return None


def _parse_flexible(text: str, alen: int, kind: str) -> bytes:
    """Parse octets that may be written with one or two hex digits."""
    out = bytearray()
    pos = 0
    end = len(text)
    while pos < end and len(out) < alen:
        high = _hex_value(text[pos])
        if high is None:
            raise AddressError(f"invalid {kind} address: {text!r}")
        pos += 1
        char = text[pos] if pos < end else ""
        low = _hex_value(char)
        if low is not None:
            value = (high << 4) | low
        elif char in (":", ""):
            value = high
        else:
            raise AddressError(f"invalid {kind} address: {text!r}")
        if char:
            pos += 1
        out.append(value)
        if pos < end and text[pos] == ":":
            pos += 1
    return bytes(out.ljust(alen, b"\0"))


def _parse_strict(text: str, alen: int, kind: str) -> bytes:
    """Parse octets that must each be written with two hex digits."""
    out = bytearray()
    pos = 0
    end = len(text)
    while pos < end and len(out) < alen:
        high = _hex_value(text[pos])
        low = _hex_value(text[pos + 1] if pos + 1 < end else "")
        if high is None or low is None:
            raise AddressError(f"invalid {kind} address: {text!r}")
        pos += 2
        out.append((high << 4) | low)
        if pos < end and text[pos] == ":":
            pos += 1
    return bytes(out.ljust(alen, b"\0"))


def _octets(data: bytes, alen: int, kind: str) -> bytes:
    raw = bytes(data)
    if len(raw) < alen:
        raise AddressError(
            f"{kind} address needs {alen} bytes, got {len(raw)}"
        )
    return raw[:alen]


def _join(data: bytes, alen: int, kind: str, pattern: str, sep: str) -> str:
    return sep.join(pattern % octet for octet in _octets(data, alen, kind))


def format_ether(data: bytes) -> str:
    """Format an Ethernet address as lower-case colon-separated hex."""
    return _join(data, ETHER_ALEN, "ether", "%02x", ":")


def parse_ether(text: str) -> bytes:
    """Parse an Ethernet address such as ``0:1a:2b:3c:4d:5e``."""
    return _parse_flexible(text, ETHER_ALEN, "ether")


def format_fddi(data: bytes) -> str:
    """Format an FDDI address as upper-case dash-separated hex."""
    return _join(data, FDDI_ALEN, "fddi", "%02X", "-")


def parse_fddi(text: str) -> bytes:
    """Parse an FDDI address; every octet needs two hex digits."""
    return _parse_strict(text, FDDI_ALEN, "fddi")


def format_hippi(data: bytes) -> str:
    """Format a HIPPI address as upper-case colon-separated hex."""
    return _join(data, HIPPI_ALEN, "hippi", "%02X", ":")


def parse_hippi(text: str) -> bytes:
    """Parse a HIPPI address; every octet needs two hex digits."""
    return _parse_strict(text, HIPPI_ALEN, "hippi")


def format_eui64(data: bytes) -> str:
    """Format an EUI-64 address as upper-case colon-separated hex."""
    return _join(data, EUI64_ALEN, "eui64", "%02X", ":")


def parse_eui64(text: str) -> bytes:
    """Parse an EUI-64 address; octets may have one or two hex digits."""
    return _parse_flexible(text, EUI64_ALEN, "eui64")


def format_arcnet(data: bytes) -> str:
    """Format a one-byte ARCnet address as two upper-case hex digits."""
    return _join(data, ARCNET_ALEN, "arcnet", "%02X", "")


def parse_arcnet(text: str) -> bytes:
    """Parse a one-byte ARCnet address written as two hex digits."""
    return _parse_strict(text, ARCNET_ALEN, "arcnet")


def format_infiniband(data: bytes) -> str:
    """Format a 20-byte InfiniBand address; warns on stderr as it may be wrong."""
    text = _join(data, INFINIBAND_ALEN, "infiniband", "%02X", ":")
    print(
        "Infiniband hardware address can be incorrect! "
        "Please read BUGS section in ifconfig(8).",
        file=sys.stderr,
    )
    return text


def parse_infiniband(text: str) -> bytes:
    """Parse an InfiniBand address; octets may have one or two hex digits."""
    return _parse_flexible(text, INFINIBAND_ALEN, "infiniband")