"""Dataclasses produced by the time span grammar."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, auto

from time_parsing.era_date import EraDate


class RangeKind(Enum):
    """Qualifier in front of a date ("ab 1920", "um 1920", ...)."""
    FROM = auto()
    BEFORE = auto()
    UNTIL = auto()
    AFTER = auto()
    AROUND = auto()
    PRESUMABLY = auto()


class OperatorKind(Enum):
    """Connector between two expressions ("1920, 1925", "1920/1925")."""
    OR = auto()
    BETWEEN = auto()


class LimitationKind(Enum):
    """Part of a century ("2. Hälfte", "Anfang", ...)."""
    DECADE = auto()
    QUARTER = auto()
    THIRD = auto()
    HALF = auto()
    START = auto()
    MIDDLE = auto()
    END = auto()


@dataclass(frozen=True)
class Range:
    parsed: str
    kind: RangeKind


@dataclass(frozen=True)
class Operator:
    parsed: str
    kind: OperatorKind


@dataclass(frozen=True)
class CenturyMillenniumLimitation:
    """A century fraction; number is the ordinal for DECADE/QUARTER/THIRD/HALF."""
    parsed: str
    kind: LimitationKind
    number: int | None = None


@dataclass(frozen=True)
class TimeSpan:
    """A parsed date span.

    Attributes:
        parsed: The part of the canonical string this span was built from
        start: First day of the span
        end: Last day of the span
    """
    parsed: str
    start: EraDate
    end: EraDate

    @property
    def start_year(self) -> int:
        """Signed start year (BC negative)."""
        return self.start.signed_year

    @property
    def end_year(self) -> int:
        """Signed end year (BC negative)."""
        return self.end.signed_year
