"""Finders for "notable" numbers: round, repeated-digit and digit sequences.

Each finder answers one question: what is the smallest notable value that
is >= n when written in a given base? A finder returns None when no such
value can be built within the unsigned 64-bit range.
"""

from abc import ABC, abstractmethod
from collections.abc import Iterable

from typing_extensions import override

from milestone.pattern import SUPPORTED_BASES, Base, Pattern
from milestone.util import U64_MAX, digit_count, first_digit

# Largest digit count a round number may be derived from
MAX_EXPONENT = 19


class PatternFinder(ABC):

    def find_next(self, n: int, base: Base | int) -> Pattern | None:
        """Return the smallest notable value >= n in `base`, or None."""
        if n < 1:
            raise ValueError(f"Pattern search requires n >= 1, got {n}")
        base = Base.coerce(base)
        value = self._next_value(n, base)
        if value is None or value > U64_MAX:
            return None
        return Pattern(value=value, base=base)

    @abstractmethod
    def _next_value(self, n: int, base: Base) -> int | None:
        pass


class RoundNumberFinder(PatternFinder):
    """A single leading digit followed by zeros (200, 0x3000)."""

    @override
    def _next_value(self, n: int, base: Base) -> int | None:
        # Work from n - 1 so exact powers of the base count as round already
        digits = digit_count(n - 1, base)
        if digits < 2 or digits > MAX_EXPONENT:
            return None
        return (first_digit(n - 1, base) + 1) * base ** (digits - 1)


class RepeatedDigitFinder(PatternFinder):
    """The leading digit repeated across every position (777, 0xaaa)."""

    @staticmethod
    def _repeat(digit: int, digits: int, base: Base) -> int:
        res = digit
        for _ in range(1, digits):
            res = res * base + digit
        return res

    @override
    def _next_value(self, n: int, base: Base) -> int | None:
        digits = digit_count(n, base)
        lead = first_digit(n, base)

        res = self._repeat(lead, digits, base)
        if res >= n:
            return res
        return self._repeat(lead + 1, digits, base)


class SequenceFinder(PatternFinder):
    """Consecutive digits starting at 1: 123... or, descending, ...321."""

    def __init__(self, descending: bool = False):
        self.descending: bool = descending

    @override
    def _next_value(self, n: int, base: Base) -> int | None:
        res = 1
        for i in range(2, base):
            if res >= n:
                return res
            if self.descending:
                res += i * base ** digit_count(res, base)
            else:
                res = res * base + i
        return res if res >= n else None

    def __repr__(self) -> str:
        return f"SequenceFinder(descending={self.descending})"


def default_finders() -> list[PatternFinder]:
    return [
        RoundNumberFinder(),
        RepeatedDigitFinder(),
        SequenceFinder(),
        SequenceFinder(descending=True),
    ]


class MultiPatternFinder:
    """Runs every finder and collects their answers for a value and base."""

    def __init__(
        self,
        bases: Iterable[Base | int | str] = SUPPORTED_BASES,
        finders: Iterable[PatternFinder] | None = None,
    ):
        self.bases: tuple[Base, ...] = tuple(Base.coerce(b) for b in bases)
        self.finders: tuple[PatternFinder, ...] = tuple(
            default_finders() if finders is None else finders
        )

    def _check_base(self, base: Base | int | str) -> Base:
        base = Base.coerce(base)
        if base not in self.bases:
            valid = ", ".join(str(int(b)) for b in self.bases)
            raise ValueError(
                f"Base {int(base)} is not enabled for this finder.\n"
                f"Enabled bases: {valid}"
            )
        return base

    def find_patterns(self, n: int, base: Base | int | str) -> list[Pattern]:
        """All notable values >= n in `base`, sorted ascending.

        Values found by more than one finder appear once per finder.
        """
        base = self._check_base(base)
        found = (finder.find_next(n, base) for finder in self.finders)
        return sorted((p for p in found if p is not None), key=lambda p: p.value)

    def find_next(self, n: int, base: Base | int | str) -> Pattern | None:
        """The nearest notable value >= n in `base`, or None."""
        patterns = self.find_patterns(n, base)
        if not patterns:
            return None
        return min(patterns, key=lambda p: p.value - n)
