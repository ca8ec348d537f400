import random

import pytest

from pingsweep.addresses import enumerate_hosts, ip_to_int
from pingsweep.scanner import PingScanner, scan_addresses, sweep

from conftest import StubProber


def test_scan_of_a_24_reports_every_host_in_order(stub_prober):
    results = scan_addresses(enumerate_hosts("192.168.1.0/24"), prober=stub_prober)

    assert len(results) == 254
    assert results[:4] == [
        {'ip': '192.168.1.1', 'alive': True},
        {'ip': '192.168.1.2', 'alive': False},
        {'ip': '192.168.1.3', 'alive': True},
        {'ip': '192.168.1.4', 'alive': False},
    ]
    assert results[-1] == {'ip': '192.168.1.254', 'alive': False}
    assert sum(r['alive'] for r in results) == 2


def test_output_matches_input_addresses():
    addresses = enumerate_hosts("10.20.0.0/23")
    results = scan_addresses(addresses, prober=StubProber())

    assert sorted(r['ip'] for r in results) == sorted(addresses)
    values = [ip_to_int(r['ip']) for r in results]
    assert values == sorted(values)


def test_output_is_independent_of_input_order():
    addresses = enumerate_hosts("172.16.4.0/25")
    prober = StubProber(alive=addresses[::7])
    expected = scan_addresses(addresses, prober=prober)

    shuffled = list(addresses)
    random.Random(7).shuffle(shuffled)
    assert scan_addresses(shuffled, prober=prober) == expected


def test_default_pool_never_exceeds_fifty_probes():
    prober = StubProber(delay=0.01)
    results = scan_addresses(enumerate_hosts("192.168.1.0/24"), prober=prober)

    assert len(results) == 254
    assert len(prober.calls) == 254
    assert 1 < prober.peak <= 50


def test_custom_pool_width_is_honoured():
    prober = StubProber(delay=0.005)
    PingScanner(max_workers=4, prober=prober).scan(enumerate_hosts("10.0.0.0/26"))
    assert prober.peak <= 4


def test_probe_exceptions_count_as_down():
    def flaky(ip):
        if ip.endswith(".2"):
            raise RuntimeError("probe crashed")
        return True

    results = scan_addresses(["10.0.0.3", "10.0.0.2", "10.0.0.1"], prober=flaky)
    assert results == [
        {'ip': '10.0.0.1', 'alive': True},
        {'ip': '10.0.0.2', 'alive': False},
        {'ip': '10.0.0.3', 'alive': True},
    ]


def test_empty_address_list():
    assert scan_addresses([], prober=StubProber()) == []


def test_invalid_pool_width():
    with pytest.raises(ValueError):
        PingScanner(max_workers=0)


def test_sweep_enumerates_and_scans():
    prober = StubProber(alive={'10.0.0.5'})
    assert sweep("10.0.0.5/32", prober=prober) == [{'ip': '10.0.0.5', 'alive': True}]
