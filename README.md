# nettools

Building blocks for basic Linux network administration: reading and
writing hardware and protocol addresses, looking up hardware types and
address families, reading kernel tables from text, and an `ipmaddr`
command for multicast addresses.

## Installing

    pip install .

Run the tests with:

    pip install ".[test]"
    pytest

## The ipmaddr command

`ipmaddr` lists and changes link-layer multicast addresses:

    ipmaddr                          # list every membership
    ipmaddr show dev eth0 ipv4       # one interface, IPv4 groups only
    ipmaddr add 01:00:5e:00:00:fb dev eth0
    ipmaddr del 01:00:5e:00:00:fb dev eth0
    ipmaddr -V                       # print the release

Commands may be abbreviated (`sh`, `a`, `d`). `show` accepts `dev NAME`
or a bare interface name, and one of `ipv4`, `ipv6`, `link` or `all`.
Listing reads `/proc/net/dev_mcast`, `/proc/net/igmp` and
`/proc/net/igmp6`; adding and deleting need the right privileges and
exit with status 1 when the kernel refuses. Bad arguments print the
usage text and exit with status 3.

## Library

Hardware addresses, in `nettools.hwaddr`:

    >>> from nettools.hwaddr import parse_ether, format_ether
    >>> format_ether(parse_ether("0:0:5e:0:53:1"))
    '00:00:5e:00:53:01'

Bad input raises `AddressError`. The same module handles FDDI, HIPPI,
EUI-64, ARCnet and InfiniBand (`parse_fddi`, `format_eui64` and so on);
`format_infiniband` also prints a warning on stderr. `nettools.ax25` and
`nettools.ash` do the same for AX.25 callsigns and Ash hop lists,
`nettools.econet` parses and formats Econet addresses and `nettools.ddp`
formats AppleTalk addresses.

Hardware types and address families:

    >>> from nettools.hardware import get_hwtype
    >>> get_hwtype("ether").alen
    6
    >>> from nettools.families import get_aftype, translate_families
    >>> get_aftype("inet").name
    'inet'
    >>> translate_families("ip,appletalk")
    ['inet', 'ddp']

`format_hwlist` and `format_aflist` give the lists shown in usage texts,
and `nettools.families.route_info` returns the routing table lines of
the AX.25 and AppleTalk families.

`nettools.inet` has `InetResolver` for IPv4 name resolution, with its
reverse-lookup cache, and `ServiceTable` for service names. The helpers
`parse_netmask` and `parse_hex_socket` parse prefixes and kernel-style
hex addresses.

Kernel tables are read from lines of text, so they work on any file or
captured output: `nettools.arptable.parse_arp_table` with `format_linux`
and `format_bsd`, `nettools.routes.ax25_routes` and `ddp_routes`, and
`read_dev_mcast`, `read_igmp` and `read_igmp6` in `nettools.ipmaddr`.

`nettools.argsplit.split_args` splits a line into fields, with support
for quoting, in the way `/etc/ethers` lines are read.

## What it does not do

The package has no command to show or change the ARP cache and no
command to show or set the host name or NIS domain name. It can read and
format the ARP table, but adding or deleting ARP entries is not offered.