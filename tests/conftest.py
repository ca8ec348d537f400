import threading
import time

import pytest

from app import create_app


class StubProber:
    """Answers from a fixed set of live addresses and records concurrency."""

    def __init__(self, alive=(), delay=0.0):
        self.alive = set(alive)
        self.delay = delay
        self.calls = []
        self.in_flight = 0
        self.peak = 0
        self._lock = threading.Lock()

    def __call__(self, ip):
        with self._lock:
            self.calls.append(ip)
            self.in_flight += 1
            self.peak = max(self.peak, self.in_flight)
        try:
            if self.delay:
                time.sleep(self.delay)
            return ip in self.alive
        finally:
            with self._lock:
                self.in_flight -= 1


@pytest.fixture
def stub_prober():
    return StubProber(alive={'192.168.1.1', '192.168.1.3'})


@pytest.fixture
def app(stub_prober):
    return create_app({
        'TESTING': True,
        'PROBER': stub_prober,
        'DEFAULT_SUBNET': '10.1.2.0/24',
        'ICON': None,
    })


@pytest.fixture
def client(app):
    return app.test_client()
