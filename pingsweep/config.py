# pingsweep/config.py

import logging
import os
from dataclasses import dataclass
from typing import Mapping, Optional

from .errors import ConfigError

# --- PING CONFIGURATION ---
# Echo requests sent per probe (-c on Unix, -n on Windows)
PING_COUNT = 3
# Per-reply timeout: seconds for Unix `-W`, milliseconds for Windows `-w`
PING_TIMEOUT_SEC = 1
PING_TIMEOUT_MS = 1000
# Extra wall-clock seconds a ping child gets before it is killed
PING_GRACE_SEC = 2

# Maximum number of ping processes in flight during one scan
MAX_THREADS = 50

# --- SERVER DEFAULTS ---
DEFAULT_PORT = 8080
DEFAULT_SUBNET = "192.168.1.0/24"
# Largest block (in addresses) the server and CLI agree to sweep; a /16
MAX_SUBNET_ADDRESSES = 65536

# --- COLOR MAP (for CLI output in main.py) ---
COLOR_MAP = {
    "UP": "\033[92m",       # Green
    "DOWN": "\033[90m",     # Grey
    "INFO": "\033[96m",     # Cyan
    "ERROR": "\033[91m",    # Red
    "ENDC": "\033[0m",      # Reset (end color code)
}

LOG_FORMAT = "%(asctime)s %(levelname)-7s %(name)s: %(message)s"


@dataclass(frozen=True)
class Settings:
    port: int = DEFAULT_PORT
    default_subnet: str = DEFAULT_SUBNET
    icon_path: Optional[str] = None
    max_workers: int = MAX_THREADS
    max_subnet_addresses: int = MAX_SUBNET_ADDRESSES


def _int_from_env(environ: Mapping[str, str], name: str, default: int, minimum: int) -> int:
    raw = environ.get(name, "").strip()
    if not raw:
        return default
    try:
        value = int(raw)
    except ValueError:
        raise ConfigError(f"{name} must be an integer, got {raw!r}") from None
    if value < minimum:
        raise ConfigError(f"{name} must be at least {minimum}, got {value}")
    return value


def load_settings(environ: Optional[Mapping[str, str]] = None) -> Settings:
    """
    Reads the server configuration from environment variables.

    PORT, DEFAULT_SUBNET and ICON mirror the web UI's needs; SCAN_WORKERS and
    MAX_SUBNET_ADDRESSES tune the sweep. Unset or empty variables fall back
    to the module defaults above.
    """
    if environ is None:
        environ = os.environ

    return Settings(
        port=_int_from_env(environ, "PORT", DEFAULT_PORT, 1),
        default_subnet=environ.get("DEFAULT_SUBNET", "").strip() or DEFAULT_SUBNET,
        icon_path=environ.get("ICON", "").strip() or None,
        max_workers=_int_from_env(environ, "SCAN_WORKERS", MAX_THREADS, 1),
        max_subnet_addresses=_int_from_env(environ, "MAX_SUBNET_ADDRESSES", MAX_SUBNET_ADDRESSES, 1),
    )


def configure_logging(level: Optional[str] = None) -> None:
    """Root logging setup shared by the web server and the CLI."""
    level = (level or os.environ.get("LOG_LEVEL") or "INFO").upper()
    logging.basicConfig(level=getattr(logging, level, logging.INFO), format=LOG_FORMAT)
