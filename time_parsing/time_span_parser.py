"""Recursive-descent grammar for canonical date expressions.

    Expression := Simple (Operator Expression)?
    Simple     := (Range ' ' Date) | Date
    Range      := 'ab' | 'seit' | 'bis' | 'vor' | 'um' | 'ca.' | 'nach' | 'vermutlich'
    Date       := (CenturyOrMillennium | YMD) [' nach Christus'] [' vor Christus']
    CenturyOrMillennium := [Limitation ' '] N '. Jahrhundert'
    YMD        := ['-'] digits ['-' MM ['-' DD]]
    Operator   := ',' | '/' | ' oder '

Each rule takes the reader and an immutable Position and returns either None
or a (node, Position) pair. Alternatives are tried in order on the same
starting position, so a failed branch never moves the caller's cursor.
"""

from __future__ import annotations

import re

from time_parsing.era_date import Era, EraDate, days_in_month
from time_parsing.errors import GrammarError
from time_parsing.position import InputStringReader, Position
from time_parsing.range_resolver import DateRangeResolver
from time_parsing.time_span import (
    CenturyMillenniumLimitation,
    LimitationKind,
    Operator,
    OperatorKind,
    Range,
    RangeKind,
    TimeSpan,
)

PATTERN_CENTURY = re.compile(r"(\d+)\. Jahrhundert")
PATTERN_CENTURY_MILLENNIUM_LIMITATION = re.compile(
    r"([1-9]|10)\. (Dekade)"
    r"|([1-3])\. (Drittel)"
    r"|([1-4])\. (Viertel)"
    r"|([1-2])\. (Hälfte)"
    r"|Anfang|Mitte|Ende"
)
PATTERN_RANGE = re.compile(r"(ab|seit|bis|vor|um|ca\.|nach|vermutlich)")
PATTERN_YMD = re.compile(r"(-?)(\d+)-(\d{2})-(\d{2})")
PATTERN_YM = re.compile(r"(-?)(\d+)-(\d{2})")
PATTERN_Y = re.compile(r"(-?)(\d+)")

AD_SUFFIX = " nach Christus"
BC_SUFFIX = " vor Christus"

RANGE_KINDS = {
    "ab": RangeKind.FROM,
    "seit": RangeKind.FROM,
    "bis": RangeKind.UNTIL,
    "vor": RangeKind.BEFORE,
    "um": RangeKind.AROUND,
    "ca.": RangeKind.AROUND,
    "nach": RangeKind.AFTER,
    "vermutlich": RangeKind.PRESUMABLY,
}

OPERATORS = (
    (",", OperatorKind.OR),
    ("/", OperatorKind.BETWEEN),
    (" oder ", OperatorKind.OR),
)

# (group holding the ordinal, group holding the unit word, kind)
_NUMBERED_LIMITATIONS = (
    (1, 2, LimitationKind.DECADE),
    (3, 4, LimitationKind.THIRD),
    (5, 6, LimitationKind.QUARTER),
    (7, 8, LimitationKind.HALF),
)
_NAMED_LIMITATIONS = {
    "Anfang": LimitationKind.START,
    "Mitte": LimitationKind.MIDDLE,
    "Ende": LimitationKind.END,
}


class TimeSpanParser:
    """Interprets a canonical string as a time span."""

    def __init__(self, resolver: DateRangeResolver | None = None):
        self.resolver = resolver or DateRangeResolver()

    def parse(self, text: str) -> TimeSpan:
        """Parse the whole canonical string.

        Raises:
            GrammarError: If nothing matches or the match stops early
            CalendarValidationError: If a resolved date does not exist
        """
        reader = InputStringReader(text)
        result = self.parse_expression(reader, Position())
        if result is None:
            raise GrammarError(f'The input string "{text}" could not be parsed')
        span, _ = result
        if len(span.parsed) != len(text):
            raise GrammarError(f'The input string "{text}" could not be parsed entirely')
        return span

    def parse_expression(self, reader: InputStringReader, position: Position) -> tuple[TimeSpan, Position] | None:
        """Expression := Simple (Operator Expression)?"""
        simple = self.parse_simple(reader, position)
        if simple is None:
            return None
        span, after_simple = simple

        operator = self.parse_operator(reader, after_simple)
        if operator is not None:
            op, after_operator = operator
            rest = self.parse_expression(reader, after_operator)
            if rest is not None:
                next_span, after_rest = rest
                combined = TimeSpan(span.parsed + op.parsed + next_span.parsed, span.start, next_span.end)
                return combined, after_rest

        return span, after_simple

    def parse_operator(self, reader: InputStringReader, position: Position) -> tuple[Operator, Position] | None:
        for literal, kind in OPERATORS:
            accepted = reader.try_to_accept(position, literal)
            if accepted.accepted:
                return Operator(accepted.parsed, kind), accepted.position
        return None

    def parse_simple(self, reader: InputStringReader, position: Position) -> tuple[TimeSpan, Position] | None:
        """Simple := (Range ' ' Date) | Date"""
        ranged = self.parse_range(reader, position)
        if ranged is not None:
            range_, after_range = ranged
            space = reader.try_to_accept(after_range, " ")
            if space.accepted:
                dated = self.parse_date(reader, space.position)
                if dated is not None:
                    original, after_date = dated
                    start, end = self.resolver.resolve_range(original, range_.kind)
                    parsed = range_.parsed + space.parsed + original.parsed
                    return TimeSpan(parsed, start, end), after_date

        return self.parse_date(reader, position)

    def parse_range(self, reader: InputStringReader, position: Position) -> tuple[Range, Position] | None:
        accepted = reader.try_to_accept(position, PATTERN_RANGE)
        if not accepted.accepted:
            return None
        return Range(accepted.parsed, RANGE_KINDS[accepted.group(1)]), accepted.position

    def parse_date(self, reader: InputStringReader, position: Position) -> tuple[TimeSpan, Position] | None:
        """Date := (CenturyOrMillennium | YMD) [' nach Christus'] [' vor Christus']"""
        result = self.parse_century_or_millennium(reader, position)
        if result is None:
            result = self.parse_ymd(reader, position)
        if result is None:
            return None
        span, position = result

        accepted = reader.try_to_accept(position, AD_SUFFIX)
        if accepted.accepted:
            span = TimeSpan(span.parsed + accepted.parsed, span.start, span.end)
            position = accepted.position

        accepted = reader.try_to_accept(position, BC_SUFFIX)
        if accepted.accepted:
            # BC years run backwards: the later AD-style year becomes the start
            start = EraDate(Era.BC, span.end.year, span.start.month, span.start.day)
            end = EraDate(Era.BC, span.start.year, span.end.month, span.end.day)
            span = TimeSpan(span.parsed + accepted.parsed, start, end)
            position = accepted.position

        return span, position

    def parse_century_or_millennium(
        self, reader: InputStringReader, position: Position
    ) -> tuple[TimeSpan, Position] | None:
        """CenturyOrMillennium := [Limitation ' '] N '. Jahrhundert'"""
        limited = self.parse_limitation(reader, position)
        if limited is not None:
            limitation, after_limitation = limited
            space = reader.try_to_accept(after_limitation, " ")
            if space.accepted:
                century = reader.try_to_accept(space.position, PATTERN_CENTURY)
                if century.accepted:
                    start, end = self.resolver.limit_century(limitation, int(century.group(1)))
                    parsed = limitation.parsed + space.parsed + century.parsed
                    return TimeSpan(parsed, start, end), century.position

        century = reader.try_to_accept(position, PATTERN_CENTURY)
        if century.accepted:
            start, end = self.resolver.century_bounds(int(century.group(1)))
            return TimeSpan(century.parsed, start, end), century.position
        return None

    def parse_limitation(
        self, reader: InputStringReader, position: Position
    ) -> tuple[CenturyMillenniumLimitation, Position] | None:
        accepted = reader.try_to_accept(position, PATTERN_CENTURY_MILLENNIUM_LIMITATION)
        if not accepted.accepted:
            return None
        for number_group, unit_group, kind in _NUMBERED_LIMITATIONS:
            if accepted.group(unit_group) is not None:
                number = int(accepted.group(number_group))
                return CenturyMillenniumLimitation(accepted.parsed, kind, number), accepted.position
        kind = _NAMED_LIMITATIONS[accepted.parsed]
        return CenturyMillenniumLimitation(accepted.parsed, kind), accepted.position

    def parse_ymd(self, reader: InputStringReader, position: Position) -> tuple[TimeSpan, Position] | None:
        """YMD := ['-'] digits ['-' MM ['-' DD]]; a leading '-' means BC."""
        accepted = reader.try_to_accept(position, PATTERN_YMD)
        if accepted.accepted:
            is_bc = bool(accepted.group(1))
            year, month, day = int(accepted.group(2)), int(accepted.group(3)), int(accepted.group(4))
            date = EraDate.of(year, month, day, is_bc)
            return TimeSpan(accepted.parsed, date, date), accepted.position

        accepted = reader.try_to_accept(position, PATTERN_YM)
        if accepted.accepted:
            is_bc = bool(accepted.group(1))
            year, month = int(accepted.group(2)), int(accepted.group(3))
            start = EraDate.of(year, month, 1, is_bc)
            end = EraDate.of(year, month, days_in_month(start.astronomical_year, month), is_bc)
            return TimeSpan(accepted.parsed, start, end), accepted.position

        accepted = reader.try_to_accept(position, PATTERN_Y)
        if accepted.accepted:
            is_bc = bool(accepted.group(1))
            year = int(accepted.group(2))
            start = EraDate.of(year, 1, 1, is_bc)
            end = EraDate.of(year, 12, 31, is_bc)
            return TimeSpan(accepted.parsed, start, end), accepted.position

        return None
