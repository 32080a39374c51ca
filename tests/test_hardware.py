import sys

from nettools.hardware import (
    format_dlci,
    format_hwlist,
    get_hwntype,
    get_hwtype,
    hardware_types,
    hw_null_address,
)


def test_ether_lookup_by_name():
    hw = get_hwtype("ether")
    assert hw.alen == 6
    assert hw.title == "Ethernet"


def test_lookup_by_number():
    assert get_hwntype(1).name == "ether"


def test_unknown_name():
    assert get_hwtype("nope") is None


def test_unknown_number():
    assert get_hwntype(123456) is None


def test_every_type_found_by_name():
    for hw in hardware_types():
        assert get_hwtype(hw.name) is hw


def test_names_unique():
    names = [hw.name for hw in hardware_types()]
    assert len(names) == len(set(names))


def test_ether_round_trip_via_table():
    hw = get_hwtype("ether")
    assert hw.format(hw.parse("02:00:00:aa:bb:cc")) == "02:00:00:aa:bb:cc"


def test_ash_suppresses_null():
    assert get_hwtype("ash").suppress_null is True
    assert get_hwtype("ether").suppress_null is False


def test_hwlist_arp_only_skips_zero_length():
    text = format_hwlist(True)
    assert "hdlc" not in text
    assert "ether (Ethernet) " in text
    assert "UNSPEC" not in text


def test_hwlist_all_includes_zero_length_but_not_unspec():
    text = format_hwlist(False)
    assert "lapb (LAPB) " in text
    assert "unspec" not in text


def test_hwlist_layout():
    text = format_hwlist(False)
    assert text.startswith("    ")
    assert text.endswith("\n")
    for line in text.splitlines():
        assert line.count(") ") <= 3


def test_null_address_true():
    assert hw_null_address(get_hwtype("ether"), bytes(6)) is True


def test_null_address_false():
    assert hw_null_address(get_hwtype("ether"), b"\0\0\0\0\0\1") is False


def test_null_address_ignores_bytes_beyond_length():
    assert hw_null_address(get_hwtype("arcnet"), b"\0\xff") is True


def test_format_dlci_positive():
    assert format_dlci((300).to_bytes(2, sys.byteorder) + b"\0") == "300"


def test_format_dlci_negative():
    assert format_dlci((-5).to_bytes(2, sys.byteorder, signed=True)) == "-5"