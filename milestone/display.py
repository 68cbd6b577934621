"""Human-readable rendering of durations."""

from milestone.util import DAY, HOUR, MINUTE, SECOND, WEEK, YEAR

_PARTS = (
    ("year", YEAR),
    ("week", WEEK),
    ("day", DAY),
    ("hour", HOUR),
    ("minute", MINUTE),
    ("second", SECOND),
)


def format_duration(seconds: int | float, precision: int = 3) -> str:
    """Render a number of seconds as its most significant parts.

    Example:
        >>> format_duration(1_900_800)
        '3 weeks, 1 day'
    """
    if seconds < 0:
        raise ValueError(f"Duration must be non-negative, got {seconds}")
    if precision < 1:
        raise ValueError(f"Precision must be >= 1, got {precision}")

    remaining = int(seconds)
    parts: list[str] = []
    for name, size in _PARTS:
        count, remaining = divmod(remaining, size)
        if count:
            parts.append(f"{count} {name}" if count == 1 else f"{count} {name}s")
        if len(parts) == precision:
            break

    return ", ".join(parts) if parts else "0 seconds"
