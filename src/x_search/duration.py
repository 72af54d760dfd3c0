from __future__ import annotations

import re

from x_search.errors import DurationError

_DURATION_PATTERN = re.compile(r"^\s*([0-9]+)\s*([mhd])\s*$", re.IGNORECASE)
_UNIT_MS = {
    "m": 60 * 1000,
    "h": 60 * 60 * 1000,
    "d": 24 * 60 * 60 * 1000,
}

# Recent search only reaches back seven days.
MAX_RECENT_WINDOW_MS = 7 * _UNIT_MS["d"]


def parse_duration_ms(value: str) -> int:
    """Parse ``30m`` / ``24h`` / ``2d`` style tokens into milliseconds."""
    match = _DURATION_PATTERN.match(value or "")
    if not match:
        raise DurationError(f"Invalid duration: {value!r} (expected e.g. 24h, 1h, 30m, 2d)")

    amount = int(match.group(1))
    if amount <= 0:
        raise DurationError(f"Invalid duration: {value!r} (must be positive)")

    return amount * _UNIT_MS[match.group(2).lower()]
