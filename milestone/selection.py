"""Pick the next notable milestone counted from a reference date.

For every enabled (unit, base) pair the elapsed time is converted into a
count of that unit, the nearest notable value at or above that count is
found, and the value is projected back onto the calendar. The candidate
landing earliest wins.
"""

import logging
from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from datetime import date, datetime, time, timedelta, timezone

from dateutil.relativedelta import relativedelta

from milestone.finders import MultiPatternFinder
from milestone.pattern import SUPPORTED_BASES, Base, Pattern
from milestone.units import TimeUnit

logger = logging.getLogger(__name__)

_MICROSECOND = timedelta(microseconds=1)


@dataclass(frozen=True)
class Candidate:
    pattern: Pattern
    unit: TimeUnit

    def __str__(self) -> str:
        return f"{self.pattern} {self.unit.label(self.pattern.value)}"


@dataclass(frozen=True)
class Milestone:
    """The winning candidate together with the date it falls on."""

    pattern: Pattern
    unit: TimeUnit
    target_date: datetime

    def __str__(self) -> str:
        return f"{self.pattern} {self.unit.label(self.pattern.value)}"


def _coerce_moment(value: date | datetime, name: str) -> datetime:
    if isinstance(value, datetime):
        return value
    if isinstance(value, date):
        return datetime.combine(value, time.min)
    raise TypeError(
        f"{name} must be a date or datetime.\n"
        f"Got {type(value).__name__!r}: {value!r}"
    )


def _coerce_pair(
    reference: date | datetime, current: date | datetime
) -> tuple[datetime, datetime]:
    reference = _coerce_moment(reference, "reference")
    current = _coerce_moment(current, "current")
    if (reference.tzinfo is None) != (current.tzinfo is None):
        raise TypeError(
            f"Cannot compare a naive and a timezone-aware datetime.\n"
            f"Got reference={reference!r}, current={current!r}\n"
            f"Hint: Give both the same kind of timestamp:\n"
            f"  datetime(..., tzinfo=timezone.utc)  # for both, or neither"
        )
    if reference.tzinfo is not None and current.tzinfo is not reference.tzinfo:
        # Measure and project in the same wall clock
        current = current.astimezone(reference.tzinfo)
    return reference, current


def _precedes(moment: datetime, other: datetime) -> bool:
    """Compare on the real timeline, not the wall clock."""
    if moment.tzinfo is None:
        return moment < other
    return moment.astimezone(timezone.utc) < other.astimezone(timezone.utc)


def add_months(moment: datetime, months: int) -> datetime:
    """Calendar month arithmetic, clamping to the last day of short months."""
    return moment + relativedelta(months=months)


def unit_count(
    reference: date | datetime, current: date | datetime, unit: TimeUnit
) -> int:
    """Whole units separating `reference` and `current`, rounded up.

    Rounding up keeps any projected date from landing before `current`.
    The count is never below 1.
    """
    reference, current = _coerce_pair(reference, current)
    earlier, later = sorted((reference, current))

    if unit.seconds is None:
        delta = relativedelta(later, earlier)
        count = delta.years * 12 + delta.months
        if add_months(earlier, count) < later:
            count += 1
    else:
        elapsed = (later - earlier) // _MICROSECOND
        per_unit = unit.seconds * 1_000_000
        count = -(-elapsed // per_unit)

    return max(count, 1)


def candidates(
    reference: date | datetime,
    current: date | datetime,
    units: Iterable[TimeUnit | str] = tuple(TimeUnit),
    bases: Iterable[Base | int | str] = SUPPORTED_BASES,
    finder: MultiPatternFinder | None = None,
) -> Iterator[Candidate]:
    """Yield the nearest notable candidate for each (unit, base) pair.

    Pairs without any notable value contribute nothing.
    """
    bases = tuple(Base.coerce(b) for b in bases)
    if finder is None:
        finder = MultiPatternFinder(bases)

    for unit in (TimeUnit.coerce(u) for u in units):
        n = unit_count(reference, current, unit)
        for base in bases:
            pattern = finder.find_next(n, base)
            logger.debug("%s count %d, base %d -> %s", unit.value, n, base, pattern)
            if pattern is not None:
                yield Candidate(pattern, unit)


def project(candidate: Candidate, reference: date | datetime) -> datetime:
    """Date on which `candidate` is reached, counting from `reference`.

    Months are added on the calendar; a day that does not exist in the
    target month is clamped to that month's last day.
    """
    reference = _coerce_moment(reference, "reference")
    value = candidate.pattern.value
    seconds = candidate.unit.seconds
    try:
        if seconds is None:
            return add_months(reference, value)
        return reference + timedelta(seconds=value * seconds)
    except (OverflowError, ValueError) as exc:
        raise OverflowError(
            f"{candidate} after {reference.isoformat()} is outside the "
            f"supported date range"
        ) from exc


def best_milestone(
    reference: date | datetime,
    current: date | datetime,
    *,
    units: Iterable[TimeUnit | str] = tuple(TimeUnit),
    bases: Iterable[Base | int | str] = SUPPORTED_BASES,
) -> Milestone | None:
    """The notable milestone reached soonest, or None if there is none.

    Milestones are always counted forward from `reference`. When `reference`
    lies after `current`, the distance between the two only sets the
    smallest count considered, so the result is a milestone after the
    future date (e.g. 100 days after it), not a countdown to it.

    Ties on the target date go to the smaller unit, then the smaller base.
    """
    reference, current = _coerce_pair(reference, current)
    units = tuple(TimeUnit.coerce(u) for u in units)
    bases = tuple(Base.coerce(b) for b in bases)
    unit_order = {u: i for i, u in enumerate(TimeUnit)}

    projected: list[Milestone] = []
    for candidate in candidates(reference, current, units, bases):
        try:
            target = project(candidate, reference)
        except OverflowError as exc:
            logger.debug("skipping %s: %s", candidate, exc)
            continue
        if _precedes(target, current):
            logger.debug("skipping %s: lands on %s, before now", candidate, target)
            continue
        projected.append(Milestone(candidate.pattern, candidate.unit, target))

    if not projected:
        logger.debug("no milestone for reference=%s current=%s", reference, current)
        return None

    projected.sort(
        key=lambda m: (m.target_date, unit_order[m.unit], int(m.pattern.base))
    )
    winner = projected[0]
    logger.info("next milestone: %s on %s", winner, winner.target_date.isoformat())
    return winner
