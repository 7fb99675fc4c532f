"""
Human-readable crack-time formatting.
"""

import math

BELOW_ONE_SECOND = "< 1s"

# Ordered largest first; the first unit that fits is used
CRACK_TIME_UNITS = (
    ("y", 365 * 24 * 3600),
    ("d", 24 * 3600),
    ("h", 3600),
    ("m", 60),
    ("s", 1),
)


def format_crack_time(seconds) -> str:
    """
    Format seconds as a single whole unit, e.g. 90000 -> "1d".

    Non-numeric, non-finite and values up to one second return "< 1s".
    """
    try:
        value = float(seconds)
    except (TypeError, ValueError):
        return BELOW_ONE_SECOND

    if not math.isfinite(value) or value <= 1:
        return BELOW_ONE_SECOND

    for label, unit_seconds in CRACK_TIME_UNITS:
        if value >= unit_seconds:
            return f"{math.floor(value / unit_seconds)}{label}"

    return BELOW_ONE_SECOND
