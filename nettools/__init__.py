"""Address handling, kernel table readers and a multicast address command for Linux networking."""

__version__ = "0.1.0"