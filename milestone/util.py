"""Utility constants and digit helpers for milestone.

Time unit constants represent durations in seconds.
Digit helpers work in any base >= 2 using exact integer arithmetic.
"""

# Time unit constants (all values in seconds)
SECOND = 1
MINUTE = 60
HOUR = 3600
DAY = 86400
WEEK = 604800
YEAR = 31536000

# Largest value a pattern may take (unsigned 64-bit)
U64_MAX = 2**64 - 1


def digit_count(n: int, base: int) -> int:
    """Number of digits needed to write `n` in `base`.

    Zero is written with a single digit.
    """
    if base < 2:
        raise ValueError(f"Base must be >= 2, got {base}")
    if n < 0:
        raise ValueError(f"Cannot count digits of a negative value ({n})")

    count = 1
    while n >= base:
        n //= base
        count += 1
    return count


def first_digit(n: int, base: int) -> int:
    """Leading digit of `n` written in `base`. Requires n >= 1."""
    if n < 1:
        raise ValueError(f"Leading digit is undefined for {n}; expected n >= 1")
    return n // base ** (digit_count(n, base) - 1)
