# pingsweep/addresses.py

import re
from typing import List

from netaddr import AddrFormatError, IPAddress, IPNetwork

from .errors import InvalidSubnet

# Dotted-quad address, a slash, and a decimal prefix length. netaddr would
# also take netmasks, abbreviations and bare addresses; CIDR only here.
CIDR_PATTERN = re.compile(r"(\d{1,3}(?:\.\d{1,3}){3})/(\d{1,2})", re.ASCII)


def parse_subnet(subnet: str) -> IPNetwork:
    """Parses an IPv4 CIDR string, raising InvalidSubnet on anything else."""
    if not isinstance(subnet, str):
        raise InvalidSubnet(f"expected a string, got {type(subnet).__name__}")

    match = CIDR_PATTERN.fullmatch(subnet)
    if not match:
        raise InvalidSubnet(f"{subnet!r} is not of the form a.b.c.d/prefix")

    prefix = int(match.group(2))
    if prefix > 32:
        raise InvalidSubnet(f"prefix length {prefix} is out of range 0-32")

    try:
        return IPNetwork(subnet)
    except (AddrFormatError, ValueError) as e:
        raise InvalidSubnet(str(e)) from e


def subnet_size(subnet: str) -> int:
    """Number of addresses in the block, network and broadcast included."""
    return parse_subnet(subnet).size


def _increment(octets: bytearray) -> bool:
    """
    Adds one to a big-endian address in place, carrying into the next octet
    when one wraps from 255 to 0. Returns False once the whole address wraps.
    """
    for i in reversed(range(len(octets))):
        octets[i] = (octets[i] + 1) & 0xFF
        if octets[i]:
            return True
    return False


def enumerate_hosts(subnet: str) -> List[str]:
    """
    Lists the probeable host addresses of an IPv4 CIDR block in ascending order.

    The address part is masked down to the network address first, so
    192.168.1.5/24 enumerates 192.168.1.0/24. Blocks with more than two
    addresses lose their network and broadcast addresses; /31 and /32
    blocks are returned whole.
    """
    network = parse_subnet(subnet)

    addresses = []
    octets = bytearray(network.network.packed)
    while True:
        address = IPAddress(int.from_bytes(octets, "big"), 4)
        if address not in network:
            break
        # str() snapshots the current value; octets is mutated below
        addresses.append(str(address))
        if not _increment(octets):
            break

    if len(addresses) > 2:
        addresses = addresses[1:-1]
    return addresses


def ip_to_int(ip: str) -> int:
    """
    Packs a dotted-quad into a 32-bit integer, first octet in the high byte.
    Anything that is not four dot-separated numbers packs to 0.
    """
    parts = ip.split(".")
    if len(parts) != 4 or not all(part.isascii() and part.isdigit() for part in parts):
        return 0

    result = 0
    for i, part in enumerate(parts):
        result |= int(part) << (24 - i * 8)
    return result & 0xFFFFFFFF


def int_to_ip(value: int) -> str:
    return str(IPAddress(value & 0xFFFFFFFF, 4))
