import pytest

from nettools.arptable import (
    LINUX_HEADER,
    ArpEntry,
    ArpFlag,
    format_bsd,
    format_flags,
    format_linux,
    parse_arp_table,
)

HEADER = ("IP address       HW type     Flags       HW address"
          "            Mask     Device\n")
MAC = "02:00:00:00:00:01"


def complete(flags=ArpFlag.COM, mask="*"):
    return ArpEntry("192.0.2.10", 1, int(flags), MAC, mask, "eth0")


def test_parse_full_row():
    lines = [HEADER, f"192.0.2.10     0x1    0x2    {MAC}     *    eth0\n"]
    assert parse_arp_table(lines) == [
        ArpEntry("192.0.2.10", 1, 2, MAC, "*", "eth0")]


def test_parse_row_without_hardware_address():
    lines = [HEADER, "192.0.2.11  0x1  0x0  *  eth1\n"]
    (entry,) = parse_arp_table(lines)
    assert entry.hwaddr == ""
    assert entry.mask == "*"
    assert entry.device == "eth1"


def test_parse_four_field_row_keeps_previous_mask_and_device():
    lines = [
        HEADER,
        f"192.0.2.10 0x1 0x2 {MAC} * eth0\n",
        f"192.0.2.12 0x1 0x2 {MAC}\n",
    ]
    entries = parse_arp_table(lines)
    assert len(entries) == 2
    assert (entries[1].mask, entries[1].device) == ("*", "eth0")


def test_parse_first_row_defaults_to_dash():
    lines = [HEADER, f"192.0.2.12 0x1 0x2 {MAC}\n"]
    (entry,) = parse_arp_table(lines)
    assert (entry.mask, entry.device) == ("-", "-")


def test_parse_stops_at_short_row():
    lines = [
        HEADER,
        f"192.0.2.10 0x1 0x2 {MAC} * eth0\n",
        "garbage\n",
        f"192.0.2.13 0x1 0x2 {MAC} * eth0\n",
    ]
    assert [e.ip for e in parse_arp_table(lines)] == ["192.0.2.10"]


def test_parse_stops_at_bad_hex_field():
    lines = [HEADER, f"192.0.2.10 1 0x2 {MAC} * eth0\n"]
    assert parse_arp_table(lines) == []


def test_parse_empty_input():
    assert parse_arp_table([]) == []
    assert parse_arp_table([HEADER]) == []


def test_hex_fields_are_parsed_as_hex():
    lines = [HEADER, f"192.0.2.10 0x1 0x{0x6:x} {MAC} * eth0\n"]
    (entry,) = parse_arp_table(lines)
    assert entry.flags == ArpFlag.COM | ArpFlag.PERM


def test_format_flags_order():
    assert format_flags(ArpFlag.COM | ArpFlag.PERM) == "CM"
    assert format_flags(0) == ""
    all_flags = format_flags(
        ArpFlag.COM | ArpFlag.PERM | ArpFlag.PUBL | ArpFlag.MAGIC
        | ArpFlag.DONTPUB | ArpFlag.USETRAILERS)
    assert all_flags == "CMPA!T"


def test_format_flags_ignores_netmask():
    assert format_flags(ArpFlag.NETMASK) == ""


def test_format_linux_columns_line_up_with_header():
    line = format_linux(complete())
    assert line[:23].rstrip() == "192.0.2.10"
    assert line[25:33].rstrip() == "ether"
    assert line[33:53].rstrip() == MAC
    assert line[53:59].rstrip() == "C"
    assert line.endswith(" eth0")
    assert LINUX_HEADER.index("HWtype") == 25
    assert LINUX_HEADER.index("HWaddress") == 33
    assert LINUX_HEADER.index("Flags") == 53


def test_format_linux_explicit_hwname():
    line = format_linux(complete(), "fddi")
    assert line[25:33].rstrip() == "fddi"


def test_format_linux_unknown_type_falls_back_to_ether():
    entry = ArpEntry("192.0.2.10", 9999, int(ArpFlag.COM), MAC, "*", "eth0")
    assert format_linux(entry)[25:33].rstrip() == "ether"


def test_format_linux_incomplete():
    entry = complete(flags=0)
    line = format_linux(entry)
    assert "(incomplete)" in line
    assert MAC not in line


def test_format_linux_published_without_address():
    line = format_linux(complete(flags=ArpFlag.PUBL))
    assert line[25:33].rstrip() == "*"
    assert "<from_interface>" in line


def test_format_linux_mask_only_with_netmask_flag():
    plain = format_linux(complete(mask="255.255.255.0"))
    masked = format_linux(
        complete(flags=ArpFlag.COM | ArpFlag.NETMASK, mask="255.255.255.0"))
    assert "255.255.255.0" not in plain
    assert masked[59:74].rstrip() == "255.255.255.0"


def test_format_linux_truncates_long_address():
    name = "a" * 40
    entry = ArpEntry(name, 1, int(ArpFlag.COM), MAC, "*", "eth0")
    line = format_linux(entry)
    assert line[:23] == name[:23]
    assert line[23:25] == "  "


def test_format_bsd_complete_permanent():
    line = format_bsd(complete(flags=ArpFlag.COM | ArpFlag.PERM), "?")
    assert line == f"? (192.0.2.10) at {MAC} [ether] PERM on eth0"


def test_format_bsd_incomplete():
    line = format_bsd(complete(flags=0), "host")
    assert line.startswith("host (192.0.2.10) at <incomplete> ")
    assert line.endswith("on eth0")


def test_format_bsd_published_without_address():
    line = format_bsd(complete(flags=ArpFlag.PUBL), "host")
    assert "<from_interface> " in line
    assert "PUB " in line


def test_format_bsd_netmask_and_words():
    flags = (ArpFlag.COM | ArpFlag.NETMASK | ArpFlag.MAGIC
             | ArpFlag.DONTPUB | ArpFlag.USETRAILERS)
    line = format_bsd(complete(flags=flags, mask="255.255.255.0"), "h", "ether")
    assert "netmask 255.255.255.0 " in line
    assert line.index("AUTO ") < line.index("DONTPUB ") < line.index("TRAIL ")


@pytest.mark.parametrize("flags", [0, ArpFlag.COM, ArpFlag.PUBL])
def test_format_bsd_always_names_device(flags):
    assert format_bsd(complete(flags=flags), "h").endswith(" on eth0")