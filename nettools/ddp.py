"""AppleTalk DDP address formatting."""

from __future__ import annotations

AF_APPLETALK = 5

_NONE_SET = "[NONE SET]"


def format_ddp(net: int, node: int) -> str:
    """Format a DDP address as ``net/node``."""
    return f"{int(net)}/{int(node)}"


def format_ddp_sockaddr(family: int, net: int, node: int) -> str:
    """Format a DDP socket address, or a marker if the family differs."""
    if family != AF_APPLETALK:
        return _NONE_SET
    return format_ddp(net, node)