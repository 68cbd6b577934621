from .display import format_duration
from .finders import (
    MultiPatternFinder,
    PatternFinder,
    RepeatedDigitFinder,
    RoundNumberFinder,
    SequenceFinder,
)
from .pattern import SUPPORTED_BASES, Base, Pattern
from .selection import Candidate, Milestone, best_milestone, candidates, project
from .units import TimeUnit
from .util import digit_count, first_digit

__all__ = [
    "Base",
    "Pattern",
    "SUPPORTED_BASES",
    "TimeUnit",
    "Candidate",
    "Milestone",
    "PatternFinder",
    "RoundNumberFinder",
    "RepeatedDigitFinder",
    "SequenceFinder",
    "MultiPatternFinder",
    "digit_count",
    "first_digit",
    "candidates",
    "project",
    "best_milestone",
    "format_duration",
]
