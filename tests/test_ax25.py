import pytest

from nettools.ax25 import (
    AF_AX25,
    AX25_ALEN,
    format_ax25,
    format_ax25_sockaddr,
    parse_ax25,
)
from nettools.hwaddr import AddressError


def test_round_trip_with_ssid():
    assert format_ax25(parse_ax25("N0CALL-15")) == "N0CALL-15"


def test_round_trip_short_call():
    assert format_ax25(parse_ax25("AB1")) == "AB1"


def test_lower_case_is_upper_cased():
    assert format_ax25(parse_ax25("n0call")) == "N0CALL"


def test_length_is_seven():
    assert len(parse_ax25("X")) == AX25_ALEN


def test_no_ssid_byte_is_zero():
    assert parse_ax25("AB")[6] == 0


def test_padding_is_shifted_blank():
    data = parse_ax25("AB")
    assert set(data[2:6]) == {ord(" ") << 1}


def test_invalid_character():
    with pytest.raises(AddressError, match="Invalid callsign"):
        parse_ax25("AB!C")


def test_callsign_too_long():
    with pytest.raises(AddressError, match="Callsign too long"):
        parse_ax25("ABCDEFG")


def test_six_chars_with_ssid_accepted():
    assert format_ax25(parse_ax25("ABCDEF-3")) == "ABCDEF-3"


def test_format_too_short():
    with pytest.raises(AddressError):
        format_ax25(b"\x00" * 6)


@pytest.mark.parametrize("family", [0, 0xFFFF])
def test_sockaddr_none_set(family):
    assert format_ax25_sockaddr(family, parse_ax25("AB")) == "[NONE SET]"


def test_sockaddr_set_matches_plain_format():
    data = parse_ax25("K1ABC-2")
    assert format_ax25_sockaddr(AF_AX25, data) == format_ax25(data)