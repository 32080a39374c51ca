"""IPv4 address conversion, name resolution and service names."""

from __future__ import annotations

import ipaddress
import re
import socket
import string
import sys
from typing import Callable, Iterable, Optional, Union

from nettools.hwaddr import AddressError

NETWORKS_PATH = "/etc/networks"
SERVICES_PATH = "/etc/services"
PROTOCOLS_PATH = "/etc/protocols"

NUMERIC_DEFAULT = 0x8000
NUMERIC_HOST = 0x4000
NUMERIC_MASK = 0x0FFF

DEFAULT_NETMASK = 0xFFFFFF00

_NONE_SET = "[NONE SET]"
_SERVICE_NAME_MAX = 63
_C_SPACE = " \t\n\v\f\r"

_HEX = re.compile(r"0[xX]([0-9a-fA-F]+)\Z")
_OCT = re.compile(r"0([0-7]*)\Z")
_DEC = re.compile(r"[1-9][0-9]*\Z")

Address = Union[ipaddress.IPv4Address, str, int]


def _read_lines(path: str) -> list[str]:
    try:
        with open(path, encoding="utf-8", errors="replace") as handle:
            return handle.readlines()
    except OSError:
        return []


def _fields(line: str) -> list[str]:
    return line.split("#", 1)[0].split()


def _c_number(text: str) -> Optional[int]:
    """Parse an unsigned number with C base prefixes (0x hex, 0 octal)."""
    match = _HEX.match(text)
    if match:
        return int(match.group(1), 16)
    match = _OCT.match(text)
    if match:
        return int(match.group(1), 8) if match.group(1) else 0
    if _DEC.match(text):
        return int(text)
    return None


def _inet_network(text: str) -> Optional[int]:
    """Convert a network number such as ``10`` or ``192.168.1`` to an integer."""
    parts = text.split(".")
    if not 1 <= len(parts) <= 4:
        return None
    value = 0
    for part in parts:
        number = _c_number(part)
        if number is None or number > 0xFF:
            return None
        value = (value << 8) | number
    return value


def _reverse_host(address: str) -> str:
    return socket.gethostbyaddr(address)[0]


def format_inet(data: bytes) -> str:
    """Format four bytes in network order as a dotted quad."""
    raw = bytes(data)
    if len(raw) < 4:
        raise AddressError(f"inet address needs 4 bytes, got {len(raw)}")
    return str(ipaddress.IPv4Address(raw[:4]))


def parse_netmask(text: str) -> tuple[str, Optional[ipaddress.IPv4Address]]:
    """Split ``address/prefix`` into the address text and its netmask.

    Without a slash the netmask is None.
    """
    if "/" not in text:
        return text, None
    address, prefix_text = text.split("/", 1)
    if prefix_text == "":
        prefix = 0
    else:
        body = prefix_text.lstrip(_C_SPACE)
        if body.startswith("+"):
            body = body[1:]
        number = _c_number(body)
        if number is None:
            raise AddressError(f"invalid prefix length: {prefix_text!r}")
        prefix = number
    if prefix > 32:
        raise AddressError(f"prefix length out of range: {prefix}")
    mask = ~(0xFFFFFFFF >> prefix) & 0xFFFFFFFF
    return address, ipaddress.IPv4Address(mask)


def parse_hex_socket(text: str) -> ipaddress.IPv4Address:
    """Parse eight hex digits in host byte order, as the kernel tables use."""
    digits = text[:8]
    if len(digits) < 8 or any(c not in string.hexdigits for c in digits):
        raise AddressError(f"invalid hex socket address: {text!r}")
    return ipaddress.IPv4Address(
        int.from_bytes(bytes.fromhex(digits), sys.byteorder)
    )


class InetResolver:
    """Resolves IPv4 names and addresses, caching reverse lookups."""

    def __init__(
        self,
        host_lookup: Optional[Callable[[str], str]] = None,
        addr_lookup: Optional[Callable[[str], str]] = None,
        networks: Optional[Iterable[str]] = None,
    ) -> None:
        self._host_lookup = host_lookup or socket.gethostbyname
        self._addr_lookup = addr_lookup or _reverse_host
        self._network_lines = networks
        self._networks: Optional[list[tuple[tuple[str, ...], int]]] = None
        self._cache: dict[tuple[int, bool], str] = {}

    def _network_table(self) -> list[tuple[tuple[str, ...], int]]:
        if self._networks is None:
            lines = self._network_lines
            if lines is None:
                lines = _read_lines(NETWORKS_PATH)
            table = []
            for line in lines:
                fields = _fields(line)
                if len(fields) < 2:
                    continue
                number = _inet_network(fields[1])
                if number is None:
                    continue
                table.append(((fields[0], *fields[2:]), number))
            self._networks = table
        return self._networks

    def _lookup_host(self, name: str) -> Optional[ipaddress.IPv4Address]:
        try:
            return ipaddress.IPv4Address(self._host_lookup(name))
        except (OSError, UnicodeError, ValueError):
            return None

    def _lookup_network(self, name: str) -> Optional[ipaddress.IPv4Address]:
        for names, number in self._network_table():
            if name in names:
                return ipaddress.IPv4Address(number)
        return None

    @staticmethod
    def _aton(name: str) -> Optional[ipaddress.IPv4Address]:
        try:
            return ipaddress.IPv4Address(socket.inet_aton(name))
        except (OSError, ValueError):
            return None

    def resolve(
        self, name: str, hostfirst: bool = False
    ) -> tuple[ipaddress.IPv4Address, bool]:
        """Resolve a name to an address; the flag is True for a network."""
        if name == "default":
            return ipaddress.IPv4Address(0), True
        address = self._aton(name)
        if address is not None:
            return address, False
        if hostfirst:
            address = self._lookup_host(name)
            if address is not None:
                return address, False
        address = self._lookup_network(name)
        if address is not None:
            return address, True
        if not hostfirst:
            address = self._lookup_host(name)
            if address is not None:
                return address, False
        raise AddressError(f"{name}: Unknown host")

    def reverse(
        self, address: Address, numeric: int = 0, netmask: int = DEFAULT_NETMASK
    ) -> str:
        """Return the host or network name of an address."""
        addr = ipaddress.IPv4Address(address)
        if numeric & NUMERIC_MASK:
            return str(addr)
        value = int(addr)
        if value == 0:
            if netmask == 0:
                return "default" if numeric & NUMERIC_DEFAULT else "*"
            return "0.0.0.0"
        host = bool(value & ~netmask & 0xFFFFFFFF) or bool(numeric & NUMERIC_HOST)
        key = (value, host)
        cached = self._cache.get(key)
        if cached is not None:
            return cached
        name: Optional[str] = None
        if host:
            try:
                name = self._addr_lookup(str(addr))
            except (OSError, UnicodeError):
                name = None
        else:
            name = next(
                (names[0] for names, number in self._network_table()
                 if number == value),
                None,
            )
        if not name:
            name = str(addr)
        self._cache[key] = name
        return name

    def sprint(self, address: Optional[Address], numeric: int = 0) -> str:
        """Format an address for display; None means no address is set."""
        if address is None:
            return _NONE_SET
        return self.reverse(address, numeric, DEFAULT_NETMASK)


class ServiceTable:
    """Maps port and protocol numbers to service names."""

    def __init__(
        self,
        services: Optional[Iterable[str]] = None,
        protocols: Optional[Iterable[str]] = None,
    ) -> None:
        self._service_lines = services
        self._protocol_lines = protocols
        self._tables: Optional[dict[str, dict[int, str]]] = None

    def _load(self) -> dict[str, dict[int, str]]:
        if self._tables is not None:
            return self._tables
        tables: dict[str, dict[int, str]] = {"tcp": {}, "udp": {}, "raw": {}}
        services = self._service_lines
        if services is None:
            services = _read_lines(SERVICES_PATH)
        for line in services:
            fields = _fields(line)
            if len(fields) < 2 or "/" not in fields[1]:
                continue
            port_text, proto = fields[1].split("/", 1)
            if not port_text.isdigit() or proto not in tables:
                continue
            tables[proto][int(port_text)] = fields[0]
        protocols = self._protocol_lines
        if protocols is None:
            protocols = _read_lines(PROTOCOLS_PATH)
        for line in protocols:
            fields = _fields(line)
            if len(fields) < 2 or not fields[1].isdigit():
                continue
            tables["raw"][int(fields[1])] = fields[0]
        self._tables = tables
        return tables

    def name(self, port: int, proto: str, numeric: bool = False) -> str:
        """Return the service name for a port, or the number as text."""
        if port == 0:
            return "*"
        if not numeric:
            found = self._load().get(proto, {}).get(port)
            if found:
                return found[:_SERVICE_NAME_MAX]
        return str(port)