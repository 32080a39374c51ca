"""Table of known address families and dispatch of routing table output."""

from __future__ import annotations

import sys
from dataclasses import dataclass
from typing import Callable, Optional

from nettools import ash, ax25, ddp, econet, inet, routes

AF_UNSPEC = 0
AF_INET = 2
AF_AX25 = ax25.AF_AX25
AF_APPLETALK = ddp.AF_APPLETALK
AF_ASH = ash.AF_ASH
AF_ECONET = econet.AF_ECONET

AX25_ROUTE_PATH = "/proc/net/ax25_route"
ATALK_ROUTE_PATH = "/proc/net/atalk_route"

AFNAME_MAX = 256

# Command-line aliases and the family names they stand for.
_ALIASES: tuple[tuple[str, str], ...] = (
    ("ax25", "ax25"),
    ("ip", "inet"),
    ("ip6", "inet6"),
    ("ipx", "ipx"),
    ("rose", "rose"),
    ("appletalk", "ddp"),
    ("netrom", "netrom"),
    ("inet", "inet"),
    ("inet6", "inet6"),
    ("ddp", "ddp"),
    ("unix", "unix"),
    ("tcpip", "inet"),
    ("econet", "ec"),
    ("x25", "x25"),
    ("ash", "ash"),
    ("bluetooth", "bluetooth"),
)


class FamilyError(ValueError):
    """Raised for unknown or unusable address families."""


@dataclass(frozen=True)
class AddressFamily:
    """An address family and the operations it supports."""

    name: str
    title: str
    af: int
    alen: int
    format: Optional[Callable[..., str]] = None
    sprint: Optional[Callable[..., str]] = None
    parse: Optional[Callable[..., object]] = None
    rprint: Optional[Callable[[int], list[str]]] = None
    getmask: Optional[Callable[[str], object]] = None
    proc_path: Optional[str] = None


def _read_route_file(path: str, message: str) -> list[str]:
    try:
        with open(path, encoding="utf-8", errors="replace") as handle:
            return handle.readlines()
    except OSError as exc:
        print(f"{path}: {exc.strerror}", file=sys.stderr)
        raise FamilyError(message) from exc


def _ax25_rprint(options: int) -> list[str]:
    lines = _read_route_file(
        AX25_ROUTE_PATH, "AX.25 not configured in this system."
    )
    return routes.ax25_routes(lines)


def _ddp_rprint(options: int) -> list[str]:
    lines = _read_route_file(
        ATALK_ROUTE_PATH, "DDP (AppleTalk) not configured on this system."
    )
    return routes.ddp_routes(lines)


_RESOLVER = inet.InetResolver()

_AFTYPES: tuple[AddressFamily, ...] = (
    AddressFamily(
        "inet", "DARPA Internet", AF_INET, 4,
        format=inet.format_inet,
        sprint=_RESOLVER.sprint,
        parse=_RESOLVER.resolve,
        getmask=inet.parse_netmask,
    ),
    AddressFamily(
        "ax25", "AMPR AX.25", AF_AX25, ax25.AX25_ALEN,
        format=ax25.format_ax25,
        sprint=ax25.format_ax25_sockaddr,
        parse=ax25.parse_ax25,
        rprint=_ax25_rprint,
        proc_path="/proc/net/ax25",
    ),
    AddressFamily(
        "ddp", "Appletalk DDP", AF_APPLETALK, 0,
        format=ddp.format_ddp,
        sprint=ddp.format_ddp_sockaddr,
        rprint=_ddp_rprint,
        proc_path="/proc/net/appletalk",
    ),
    AddressFamily(
        "ec", "Econet", AF_ECONET, 0,
        format=econet.format_econet,
        parse=econet.parse_econet,
        proc_path="/proc/sys/net/econet",
    ),
    AddressFamily(
        "ash", "Ash", AF_ASH, 0,
        format=ash.format_ash,
        sprint=ash.format_ash_sockaddr,
        proc_path="/proc/sys/net/ash",
    ),
    AddressFamily("unspec", "UNSPEC", AF_UNSPEC, 0),
)


def get_aftype(name: str) -> Optional[AddressFamily]:
    """Find an address family by name, or return None."""
    for family in _AFTYPES:
        if family.name == name:
            return family
    if "," in name:
        print("Please don't supply more than one address family.",
              file=sys.stderr)
    return None


def get_afntype(af: int) -> Optional[AddressFamily]:
    """Find an address family by its number, or return None."""
    return next((family for family in _AFTYPES if family.af == af), None)


def translate_families(arg: str) -> list[str]:
    """Translate a comma-separated list of aliases into family names."""
    names: list[str] = []
    length = 0
    for alias in arg.split(","):
        name = next((n for a, n in _ALIASES if a == alias), None)
        if name is None:
            raise FamilyError(f"Unknown address family `{alias}'.")
        if len(name) + length + 1 >= AFNAME_MAX:
            raise FamilyError("Too much address family arguments.")
        length += len(name) + (1 if names else 0)
        names.append(name)
    return names


def default_families(tool: str, argv0: str, default: str) -> str:
    """Derive the family list from a program name such as ``inet_route``."""
    base = argv0.rsplit("/", 1)[-1]
    if len(tool) >= len(base) or not base.endswith(tool):
        return default
    prefix = base[: len(base) - len(tool)].split("_", 1)[0]
    try:
        return ",".join(translate_families(prefix))
    except FamilyError as exc:
        print(exc, file=sys.stderr)
        return prefix


def format_aflist(routable: bool) -> str:
    """List the address families three to a line; optionally only routable ones."""
    parts = []
    count = 0
    for family in _AFTYPES:
        if (routable and family.rprint is None) or family.af == 0:
            continue
        if count % 3 == 0:
            parts.append("\n    " if count else "    ")
        parts.append(f"{family.name or '..'} ({family.title}) ")
        count += 1
    parts.append("\n")
    return "".join(parts)


def route_info(afnames: str, options: int = 0) -> list[str]:
    """Return the routing table lines of each family in a comma-separated list."""
    lines: list[str] = []
    found = False
    for name in afnames.split(","):
        if not name:
            continue
        family = get_aftype(name)
        if family is None:
            raise FamilyError(f"Address family `{name}' not supported.")
        if family.rprint is None:
            raise FamilyError(
                f"No routing for address family `{family.name}'."
            )
        found = True
        lines.extend(family.rprint(options))
    if not found:
        raise FamilyError("no address family given")
    return lines