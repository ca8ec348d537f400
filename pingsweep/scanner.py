# pingsweep/scanner.py

import logging
import time
from concurrent.futures import ThreadPoolExecutor, as_completed
from typing import Callable, Dict, Iterable, List, Optional, Union

from .addresses import enumerate_hosts, ip_to_int
from .config import MAX_THREADS
from .ping import is_alive

logger = logging.getLogger(__name__)

ScanResult = Dict[str, Union[str, bool]]
Prober = Callable[[str], bool]


class PingScanner:
    """
    Probes a list of addresses in parallel and returns one verdict per address.

    The worker pool is the permit pool: at most `max_workers` probes run at
    once, the rest queue for a free worker. Results are sorted by numeric
    address whatever order the caller passed them in.
    """
    def __init__(self, max_workers: int = MAX_THREADS, prober: Optional[Prober] = None):
        if max_workers < 1:
            raise ValueError(f"max_workers must be at least 1, got {max_workers}")
        self.max_workers = max_workers
        self.prober = prober or is_alive

    def _probe(self, ip: str) -> bool:
        """Runs the prober for one address; any failure counts as down."""
        try:
            alive = bool(self.prober(ip))
        except Exception:
            logger.warning("probe for %s raised, reporting it as down", ip, exc_info=True)
            return False
        logger.debug("%s is %s", ip, "up" if alive else "down")
        return alive

    def scan(self, addresses: Iterable[str]) -> List[ScanResult]:
        """Blocks until every address has a verdict."""
        addresses = list(addresses)
        if not addresses:
            return []

        # One slot per address; each future fills only its own index
        results: List[Optional[ScanResult]] = [None] * len(addresses)

        with ThreadPoolExecutor(max_workers=min(self.max_workers, len(addresses))) as executor:
            future_to_index = {
                executor.submit(self._probe, ip): index
                for index, ip in enumerate(addresses)
            }
            for future in as_completed(future_to_index):
                index = future_to_index[future]
                results[index] = {'ip': addresses[index], 'alive': future.result()}

        results.sort(key=lambda result: ip_to_int(result['ip']))
        return results


def scan_addresses(addresses: Iterable[str], max_workers: int = MAX_THREADS,
                   prober: Optional[Prober] = None) -> List[ScanResult]:
    return PingScanner(max_workers=max_workers, prober=prober).scan(addresses)


def sweep(subnet: str, max_workers: int = MAX_THREADS,
          prober: Optional[Prober] = None) -> List[ScanResult]:
    """Enumerates the hosts of a CIDR block and pings all of them."""
    addresses = enumerate_hosts(subnet)
    logger.info("Scanning %s (%d addresses, %d workers)", subnet, len(addresses), max_workers)

    started = time.monotonic()
    results = scan_addresses(addresses, max_workers=max_workers, prober=prober)
    alive = sum(1 for result in results if result['alive'])

    logger.info("Scan of %s finished in %.1fs: %d/%d alive",
                subnet, time.monotonic() - started, alive, len(results))
    return results
