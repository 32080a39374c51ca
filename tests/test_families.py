import ipaddress

import pytest

from nettools import families
from nettools.families import FamilyError


def test_get_aftype_by_name():
    family = families.get_aftype("inet")
    assert family.af == families.AF_INET
    assert family.title == "DARPA Internet"


def test_get_aftype_unknown_with_comma(capsys):
    assert families.get_aftype("inet,ax25") is None
    err = capsys.readouterr().err
    assert "Please don't supply more than one address family." in err


def test_get_aftype_unknown_without_comma(capsys):
    assert families.get_aftype("nosuch") is None
    assert capsys.readouterr().err == ""


def test_get_afntype():
    assert families.get_afntype(families.AF_AX25).name == "ax25"
    assert families.get_afntype(families.AF_ECONET).name == "ec"
    assert families.get_afntype(12345) is None


def test_translate_families_aliases():
    assert families.translate_families("ip,appletalk,tcpip") == [
        "inet", "ddp", "inet"]
    assert families.translate_families("econet") == ["ec"]


def test_translate_families_unknown():
    with pytest.raises(FamilyError, match="Unknown address family"):
        families.translate_families("bogus")


def test_translate_families_trailing_comma():
    with pytest.raises(FamilyError):
        families.translate_families("ip,")


def test_default_families_plain_name():
    assert families.default_families("route", "/sbin/route", "inet") == "inet"


def test_default_families_prefix():
    assert families.default_families("route", "/sbin/ax25_route", "inet") == "ax25"
    assert families.default_families("route", "inet6route", "inet") == "inet6"
    assert families.default_families("route", "tcpip_route", "x") == "inet"


def test_default_families_unknown_prefix(capsys):
    result = families.default_families("route", "/usr/sbin/foo_route", "inet")
    assert result == "foo"
    assert "Unknown address family" in capsys.readouterr().err


def test_format_aflist_routable():
    text = families.format_aflist(True)
    assert "ax25 (AMPR AX.25)" in text
    assert "ddp (Appletalk DDP)" in text
    assert "inet (" not in text
    assert "unspec" not in text


def test_format_aflist_all():
    text = families.format_aflist(False)
    assert text.startswith("    ")
    assert text.endswith("\n")
    assert "inet (DARPA Internet)" in text
    assert "UNSPEC" not in text


def test_route_info_unknown_family():
    with pytest.raises(FamilyError, match="not supported"):
        families.route_info("bogus", 0)


def test_route_info_no_routing():
    with pytest.raises(FamilyError, match="No routing"):
        families.route_info("inet", 0)


def test_route_info_nothing_given():
    with pytest.raises(FamilyError):
        families.route_info(",,", 0)


def test_econet_parse_via_family():
    family = families.get_aftype("ec")
    assert family.parse("1.2") == (1, 2)
    assert family.format(1, 2) == "1.2"


def test_ax25_round_trip_via_family():
    family = families.get_aftype("ax25")
    assert family.format(family.parse("N0CALL-3")) == "N0CALL-3"


def test_inet_getmask_via_family():
    family = families.get_aftype("inet")
    address, mask = family.getmask("10.0.0.0/8")
    assert address == "10.0.0.0"
    assert mask == ipaddress.IPv4Address("255.0.0.0")