"""Listing and changing of link-layer multicast addresses."""

from __future__ import annotations

import fcntl
import socket
import struct
import sys
from dataclasses import dataclass
from typing import Iterable, Optional

from nettools.hwaddr import AddressError
from nettools.inet import parse_hex_socket

RELEASE = "net-tools 3.14-alpha"

E_OPTERR = 3
E_USAGE = 4
E_VERSION = 5

AF_UNSPEC = 0
AF_INET = 2
AF_INET6 = 10
AF_PACKET = 17

SIOCADDMULTI = 0x8931
SIOCDELMULTI = 0x8932

IFNAMSIZ = 16
ADDR_DATA_LEN = 16
_SA_DATA_LEN = 14

DEV_MCAST_PATH = "/proc/net/dev_mcast"
IGMP_PATH = "/proc/net/igmp"
IGMP6_PATH = "/proc/net/igmp6"

_HEXDIGITS = frozenset("0123456789abcdefABCDEF")

_USAGE = (
    "Usage: ipmaddr [ add | del ] MULTIADDR dev STRING\n"
    "       ipmaddr show [ dev STRING ] [ ipv4 | ipv6 | link | all ]\n"
    "       ipmaddr -V | -version\n"
)


class _UsageError(Exception):
    def __init__(self, code: int) -> None:
        super().__init__(code)
        self.code = code


@dataclass
class MulticastAddress:
    """One multicast group membership of an interface."""

    index: int
    name: str
    users: int
    family: int
    address: bytes
    features: Optional[str] = None


def matches(cmd: str, pattern: str) -> bool:
    """Return True if ``cmd`` is a prefix of ``pattern``."""
    return len(cmd) <= len(pattern) and pattern.startswith(cmd)


def _hex_pair(text: str, pos: int) -> int:
    pair = text[pos:pos + 2]
    if len(pair) < 2:
        raise AddressError(f"odd number of hex digits: {text!r}")
    if pair[0] not in _HEXDIGITS:
        raise AddressError(f"invalid hex digits: {text!r}")
    digits = pair if pair[1] in _HEXDIGITS else pair[0]
    return int(digits, 16)


def parse_lla(text: str) -> bytes:
    """Parse a link-layer address; ``:`` and ``.`` separators are ignored."""
    out = bytearray()
    pos = 0
    while pos < len(text):
        if text[pos] in ":.":
            pos += 1
            continue
        out.append(_hex_pair(text, pos))
        pos += 2
    return bytes(out)


def parse_hex(text: str, maxlen: int) -> bytes:
    """Parse pairs of hex digits into at most ``maxlen`` bytes."""
    out = bytearray()
    pos = 0
    while len(out) < maxlen and pos < len(text):
        out.append(_hex_pair(text, pos))
        pos += 2
    return bytes(out)


def read_dev_mcast(lines: Iterable[str], dev: str = "") -> list[MulticastAddress]:
    """Read link-layer groups from the dev_mcast table."""
    entries = []
    for line in lines:
        fields = line.split()
        if len(fields) < 5:
            continue
        try:
            index, users, static = int(fields[0]), int(fields[2]), int(fields[3])
        except ValueError:
            continue
        name = fields[1]
        if dev and dev != name:
            continue
        try:
            address = parse_hex(fields[4], ADDR_DATA_LEN)
        except AddressError:
            continue
        entries.append(MulticastAddress(
            index, name, users, AF_PACKET, address,
            "static" if static else None))
    return entries


def read_igmp(lines: Iterable[str], dev: str = "") -> list[MulticastAddress]:
    """Read IPv4 groups from the igmp table; the first line is a header."""
    entries = []
    rows = iter(lines)
    next(rows, None)
    index, name = 0, ""
    for line in rows:
        if not line.startswith("\t"):
            fields = line.split()
            if fields:
                try:
                    index = int(fields[0])
                except ValueError:
                    continue
                if len(fields) > 1:
                    name = fields[1]
            continue
        if dev and dev != name:
            continue
        fields = line.split()
        if len(fields) < 2:
            continue
        try:
            address = parse_hex_socket(fields[0]).packed
            users = int(fields[1])
        except (AddressError, ValueError):
            continue
        entries.append(MulticastAddress(index, name, users, AF_INET, address))
    return entries


def read_igmp6(lines: Iterable[str], dev: str = "") -> list[MulticastAddress]:
    """Read IPv6 groups from the igmp6 table."""
    entries = []
    for line in lines:
        fields = line.split()
        if len(fields) < 4:
            continue
        try:
            index, users = int(fields[0]), int(fields[3])
        except ValueError:
            continue
        name = fields[1]
        if dev and dev != name:
            continue
        try:
            address = parse_hex(fields[2], ADDR_DATA_LEN)
        except AddressError:
            continue
        entries.append(MulticastAddress(index, name, users, AF_INET6, address))
    return entries


def _format_host(family: int, address: bytes) -> Optional[str]:
    try:
        if family == AF_INET:
            return socket.inet_ntop(socket.AF_INET, address.ljust(4, b"\0")[:4])
        if family == AF_INET6:
            return socket.inet_ntop(
                socket.AF_INET6, address.ljust(16, b"\0")[:16])
    except (OSError, ValueError):
        return None
    return None


def format_maddr(entry: MulticastAddress) -> str:
    """Format one group membership as an indented line."""
    parts = ["\t"]
    if entry.family == AF_PACKET:
        parts.append("link  ")
        parts.append(":".join("%02x" % octet for octet in entry.address))
    else:
        prefix = {AF_INET: "inet  ", AF_INET6: "inet6 "}.get(
            entry.family, f"family {entry.family} ")
        parts.append(prefix)
        parts.append(_format_host(entry.family, entry.address) or "?")
    if entry.users != 1:
        parts.append(f" users {entry.users}")
    if entry.features:
        parts.append(f" {entry.features}")
    return "".join(parts)


def format_list(entries: Iterable[MulticastAddress]) -> list[str]:
    """Format memberships, starting a header line whenever the index changes."""
    lines = []
    current = 0
    for entry in entries:
        if entry.index != current:
            current = entry.index
            lines.append(f"{current}:\t{entry.name}")
        lines.append(format_maddr(entry))
    return lines


def _read_file(path: str) -> list[str]:
    try:
        with open(path, encoding="utf-8", errors="replace") as handle:
            return handle.readlines()
    except OSError:
        return []


def _check_dev(name: str) -> str:
    if not 0 < len(name) < IFNAMSIZ:
        raise _UsageError(E_OPTERR)
    return name


def _list(args: list[str]) -> int:
    filter_dev = ""
    family = AF_UNSPEC
    rest = iter(args)
    for arg in rest:
        if arg == "dev":
            value = next(rest, None)
            if value is None:
                raise _UsageError(E_OPTERR)
            filter_dev = _check_dev(value)
        elif arg == "all":
            family = AF_UNSPEC
        elif arg == "ipv4":
            family = AF_INET
        elif arg == "ipv6":
            family = AF_INET6
        elif arg == "link":
            family = AF_PACKET
        else:
            filter_dev = _check_dev(arg)
    entries: list[MulticastAddress] = []
    if family in (AF_UNSPEC, AF_PACKET):
        entries.extend(read_dev_mcast(_read_file(DEV_MCAST_PATH), filter_dev))
    if family in (AF_UNSPEC, AF_INET):
        entries.extend(read_igmp(_read_file(IGMP_PATH), filter_dev))
    if family in (AF_UNSPEC, AF_INET6):
        entries.extend(read_igmp6(_read_file(IGMP6_PATH), filter_dev))
    entries.sort(key=lambda entry: entry.index)
    for line in format_list(entries):
        print(line)
    return 0


def _modify(add: bool, args: list[str]) -> int:
    name = ""
    address = b""
    rest = iter(args)
    for arg in rest:
        if arg == "dev":
            value = next(rest, None)
            if value is None or name:
                raise _UsageError(E_OPTERR)
            name = value[:IFNAMSIZ - 1]
        else:
            if address[:1] not in (b"", b"\0"):
                raise _UsageError(E_OPTERR)
            try:
                address = parse_lla(arg)
            except AddressError:
                raise _UsageError(E_OPTERR) from None
            if len(address) > _SA_DATA_LEN:
                raise _UsageError(E_OPTERR)
    if not name:
        raise _UsageError(E_OPTERR)
    request = SIOCADDMULTI if add else SIOCDELMULTI
    ifreq = struct.pack(
        "16sH14s8x", name.encode(), AF_UNSPEC,
        address.ljust(_SA_DATA_LEN, b"\0"))
    try:
        sock = socket.socket(socket.AF_INET, socket.SOCK_DGRAM)
    except OSError as exc:
        print(f"Cannot create socket: {exc.strerror}", file=sys.stderr)
        return 1
    with sock:
        try:
            fcntl.ioctl(sock.fileno(), request, ifreq)
        except OSError as exc:
            print(f"ioctl: {exc.strerror}", file=sys.stderr)
            return 1
    return 0


def _dispatch(args: list[str]) -> int:
    if not args:
        return _list([])
    command, rest = args[0], args[1:]
    if matches(command, "add"):
        return _modify(True, rest)
    if matches(command, "delete"):
        return _modify(False, rest)
    if matches(command, "list") or matches(command, "show") \
            or matches(command, "lst"):
        return _list(rest)
    raise _UsageError(E_OPTERR)


def main(argv: Optional[list[str]] = None) -> int:
    """Run the command; return the exit status."""
    args = list(sys.argv[1:] if argv is None else argv)
    try:
        while args and args[0].startswith("-"):
            option = args.pop(0)
            if matches(option, "-family"):
                if not args or args.pop(0) not in ("inet", "inet6"):
                    raise _UsageError(E_OPTERR)
            elif matches(option, "-stats") or matches(option, "-statistics"):
                pass
            elif matches(option, "-resolve"):
                pass
            elif matches(option, "-V") or matches(option, "--version"):
                print(RELEASE)
                return E_VERSION
            elif matches(option, "-h") or matches(option, "--help"):
                raise _UsageError(E_USAGE)
            else:
                raise _UsageError(E_OPTERR)
        return _dispatch(args)
    except _UsageError as exc:
        print(_USAGE, end="", file=sys.stderr if exc.code else sys.stdout)
        return exc.code