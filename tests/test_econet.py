import pytest

from nettools.econet import format_econet, parse_econet
from nettools.hwaddr import AddressError


def test_parse_net_and_station():
    assert parse_econet("1.2") == (1, 2)


@pytest.mark.parametrize("text", ["5", "5.", "5.x"])
def test_parse_station_only(text):
    assert parse_econet(text) == (0, 5)


@pytest.mark.parametrize("text", ["", "x", ".5"])
def test_parse_errors(text):
    with pytest.raises(AddressError):
        parse_econet(text)


def test_format():
    assert format_econet(1, 2) == "1.2"


@pytest.mark.parametrize("net,station", [(0, 0), (3, 254), (127, 1)])
def test_round_trip(net, station):
    assert parse_econet(format_econet(net, station)) == (net, station)