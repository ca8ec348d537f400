# main.py

import argparse
import json
import sys
from typing import List, Optional

from pingsweep.addresses import enumerate_hosts, subnet_size
from pingsweep.config import configure_logging, load_settings
from pingsweep.errors import SweepError
from pingsweep.reporting import format_message, format_result, summarize
from pingsweep.scanner import Prober, PingScanner

# Ensure a reasonable width for the final report separators
total_width = 40


def parse_args(argv: Optional[List[str]] = None, default_subnet: Optional[str] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Ping every host address of an IPv4 subnet.")
    parser.add_argument("subnet", nargs="?", default=default_subnet,
                        help="CIDR block to sweep (default: $DEFAULT_SUBNET or 192.168.1.0/24)")
    parser.add_argument("-w", "--workers", type=int, default=None,
                        help="maximum simultaneous pings (default: $SCAN_WORKERS or 50)")
    parser.add_argument("--alive-only", action="store_true", help="only print hosts that answered")
    parser.add_argument("--json", action="store_true", help="print the results as a JSON array")
    parser.add_argument("--no-color", action="store_true", help="disable ANSI colours")
    parser.add_argument("--log-level", default=None, help="logging level (default: $LOG_LEVEL or INFO)")
    return parser.parse_args(argv)


def main(argv: Optional[List[str]] = None, prober: Optional[Prober] = None) -> int:
    """
    Command-line sweep: enumerates the subnet, pings every host and prints
    one line per address followed by a summary. Returns the exit status.
    """
    settings = load_settings()
    args = parse_args(argv, default_subnet=settings.default_subnet)
    configure_logging(args.log_level)
    color = not args.no_color and sys.stdout.isatty()

    workers = args.workers if args.workers is not None else settings.max_workers
    if workers < 1:
        print(format_message("ERROR", f"--workers must be at least 1, got {workers}", color), file=sys.stderr)
        return 2

    try:
        size = subnet_size(args.subnet)
        if size > settings.max_subnet_addresses:
            print(format_message("ERROR", f"{args.subnet} spans {size} addresses, "
                                          f"the limit is {settings.max_subnet_addresses}", color),
                  file=sys.stderr)
            return 2
        addresses = enumerate_hosts(args.subnet)
    except SweepError as e:
        print(format_message("ERROR", str(e), color), file=sys.stderr)
        return 2

    if not args.json:
        print(format_message("INFO", f"Pinging {len(addresses)} addresses in {args.subnet}...", color))

    results = PingScanner(max_workers=workers, prober=prober).scan(addresses)
    shown = [r for r in results if r['alive']] if args.alive_only else results

    if args.json:
        print(json.dumps(shown, indent=2))
        return 0

    for result in shown:
        print(format_result(result['ip'], result['alive'], color))

    summary = summarize(results)
    print("-" * total_width)
    print(f"Hosts: {summary['total']}  Alive: {summary['alive']}  Down: {summary['down']}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
