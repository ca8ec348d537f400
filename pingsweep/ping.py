# pingsweep/ping.py

import logging
import os
import platform
import subprocess
from typing import List, Optional

from .config import PING_COUNT, PING_GRACE_SEC, PING_TIMEOUT_MS, PING_TIMEOUT_SEC

logger = logging.getLogger(__name__)

# Wall-clock limit for one ping child before it is killed and counted as down
PROBE_DEADLINE_SEC = PING_COUNT * PING_TIMEOUT_SEC + PING_GRACE_SEC


def build_ping_command(ip: str, system: Optional[str] = None) -> List[str]:
    """Returns the argv for the host's ping utility, chosen at runtime."""
    system = (system or platform.system()).lower()
    if system == "windows":
        return ["ping", "-n", str(PING_COUNT), "-w", str(PING_TIMEOUT_MS), ip]
    return ["ping", "-c", str(PING_COUNT), "-W", str(PING_TIMEOUT_SEC), ip]


def is_alive(ip: str) -> bool:
    """
    Pings an address with the OS utility and reports whether it answered.

    Exit status 0 means at least one echo reply came back. A non-zero exit,
    a missing ping binary, or a child that outlives PROBE_DEADLINE_SEC all
    report the host as down. Output is discarded, never parsed.
    """
    command = build_ping_command(ip)

    creationflags = 0
    if os.name == "nt":
        creationflags = getattr(subprocess, "CREATE_NO_WINDOW", 0)

    try:
        result = subprocess.run(
            command,
            stdout=subprocess.DEVNULL,
            stderr=subprocess.DEVNULL,
            timeout=PROBE_DEADLINE_SEC,
            creationflags=creationflags,
        )
    except subprocess.TimeoutExpired:
        logger.debug("ping %s killed after %ss", ip, PROBE_DEADLINE_SEC)
        return False
    except (OSError, subprocess.SubprocessError) as e:
        logger.debug("ping %s failed to run: %s", ip, e)
        return False

    return result.returncode == 0
