"""Size and time formatting utilities.

Shared by the CLI table and detail views so sizes and update times read
the same everywhere.
"""

import time
from typing import Optional

SIZE_UNITS = ["B", "KB", "MB", "GB", "TB"]

SECONDS_PER_DAY = 24 * 60 * 60


def format_size(num_bytes: float) -> str:
    """Format a byte count, e.g. 1536 -> "1.5 KB"."""
    if num_bytes <= 0:
        return "0 B"

    # floor(log1024(n)) without float rounding at exact powers of 1024
    index = 0
    while num_bytes >= 1024 ** (index + 1) and index < len(SIZE_UNITS) - 1:
        index += 1

    value = f"{num_bytes / 1024 ** index:.2f}".rstrip("0").rstrip(".")
    return f"{value} {SIZE_UNITS[index]}"


def format_relative_time(timestamp: int, now: Optional[float] = None) -> str:
    """Format a Unix timestamp relative to now, e.g. "Yesterday"."""
    if now is None:
        now = time.time()

    days = max(0, int((now - timestamp) // SECONDS_PER_DAY))

    if days == 0:
        return "Today"
    if days == 1:
        return "Yesterday"
    if days < 7:
        return f"{days} days ago"
    if days < 30:
        return f"{days // 7} weeks ago"
    return f"{days // 30} months ago"
