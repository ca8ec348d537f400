# pingsweep/__init__.py

from .addresses import enumerate_hosts, int_to_ip, ip_to_int, parse_subnet, subnet_size
from .errors import ConfigError, InvalidSubnet, MalformedRequest, SweepError
from .ping import is_alive
from .scanner import PingScanner, scan_addresses, sweep

__all__ = [
    'ConfigError',
    'InvalidSubnet',
    'MalformedRequest',
    'PingScanner',
    'SweepError',
    'enumerate_hosts',
    'int_to_ip',
    'ip_to_int',
    'is_alive',
    'parse_subnet',
    'scan_addresses',
    'subnet_size',
    'sweep',
]
