# pingsweep/reporting.py

from typing import Dict, Iterable, Mapping

from .config import COLOR_MAP


def format_result(ip: str, alive: bool, color: bool = True) -> str:
    """Formats one verdict as a console line (used by main.py)."""
    status = "UP" if alive else "DOWN"
    line = f"[{ip:<15}] {status}"
    if not color:
        return line
    return f"{COLOR_MAP[status]}{line}{COLOR_MAP['ENDC']}"


def format_message(level: str, message: str, color: bool = True) -> str:
    line = f"[{level.upper():<5}] {message}"
    if not color:
        return line
    return f"{COLOR_MAP.get(level.upper(), COLOR_MAP['INFO'])}{line}{COLOR_MAP['ENDC']}"


def summarize(results: Iterable[Mapping]) -> Dict[str, int]:
    """Counts total, alive and down hosts in a list of scan results."""
    total = alive = 0
    for result in results:
        total += 1
        if result['alive']:
            alive += 1
    return {'total': total, 'alive': alive, 'down': total - alive}
