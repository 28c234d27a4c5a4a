"""Semantic actions of the grammar: qualifier ranges and century fractions."""

from __future__ import annotations

from time_parsing.era_date import EraDate
from time_parsing.time_span import CenturyMillenniumLimitation, LimitationKind, RangeKind, TimeSpan

# Width in years of one unit of a numbered century fraction
_FRACTION_WIDTHS = {
    LimitationKind.DECADE: 10,
    LimitationKind.QUARTER: 25,
    LimitationKind.THIRD: 33,
    LimitationKind.HALF: 50,
}

# First and last year of the named parts, counted from the century's year 0
_NAMED_PARTS = {
    LimitationKind.START: (1, 15),
    LimitationKind.MIDDLE: (45, 55),
    LimitationKind.END: (85, 100),
}

AFTER_DELTA = 25


class DateRangeResolver:
    """Computes concrete start/end dates for qualifiers and century parts."""

    @staticmethod
    def get_date_delta(year: int) -> int:
        """Uncertainty in years for from/until/before, by era-relative start year."""
        if 0 <= year <= 999:
            return 100
        if 1000 <= year <= 1499:
            return 50
        if 1500 <= year <= 1799:
            return 25
        if 1800 <= year <= 1899:
            return 10
        if 1900 <= year <= 1945:
            return 3
        if year >= 1946:
            return 1
        return 0

    @staticmethod
    def get_around_delta(year: int) -> int:
        """Uncertainty in years for "um"/"ca.", by era-relative start year."""
        if year >= 1900:
            return 1
        if year >= 1700:
            return 2
        if year >= 1000:
            return 5
        return 10

    def resolve_range(self, span: TimeSpan, kind: RangeKind) -> tuple[EraDate, EraDate]:
        """Widen or move an exact span according to its qualifier.

        Args:
            span: The span of the date following the qualifier
            kind: The qualifier

        Returns:
            The new (start, end) pair

        Raises:
            CalendarValidationError: If a shifted date does not exist
        """
        start, end = span.start, span.end

        if kind is RangeKind.FROM:
            return start, end.shift_years(self.get_date_delta(start.year))
        if kind is RangeKind.UNTIL:
            return start.shift_years(-self.get_date_delta(start.year)), end
        if kind is RangeKind.BEFORE:
            delta = self.get_date_delta(start.year)
            return start.shift_years(-delta), start.previous_day()
        if kind is RangeKind.AROUND:
            delta = self.get_around_delta(start.year)
            return start.shift_years(-delta), end.shift_years(delta)
        if kind is RangeKind.AFTER:
            return start, end.shift_years(AFTER_DELTA)
        return start, end

    @staticmethod
    def century_bounds(century: int) -> tuple[EraDate, EraDate]:
        """Full extent of a century: (C-1)*100+1 to C*100."""
        base = (century - 1) * 100
        return EraDate.from_astronomical(base + 1, 1, 1), EraDate.from_astronomical(base + 100, 12, 31)

    @staticmethod
    def limit_century(limitation: CenturyMillenniumLimitation, century: int) -> tuple[EraDate, EraDate]:
        """Start and end of a part of a century ("2. Hälfte 19. Jahrhundert")."""
        base = (century - 1) * 100
        kind = limitation.kind
        if kind in _FRACTION_WIDTHS:
            width = _FRACTION_WIDTHS[kind]
            number = limitation.number or 1
            first = base + 1 + (number - 1) * width
            last = base + number * width
        else:
            first_offset, last_offset = _NAMED_PARTS[kind]
            first, last = base + first_offset, base + last_offset
        return EraDate.from_astronomical(first, 1, 1), EraDate.from_astronomical(last, 12, 31)
