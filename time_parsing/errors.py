"""Exception types raised by the time parsing pipeline.

Every stage raises its own subclass of TimeParserError. TimeParser.parse_time
collapses all of them into an empty result; TimeParser.resolve lets them
propagate so callers and tests can tell the failure kinds apart.
"""


class TimeParserError(Exception):
    """Base class for all parse failures."""


class AmbiguousRuleError(TimeParserError):
    """More than one distinct rule matches the input shape."""

    def __init__(self, text: str, rule_count: int):
        super().__init__(f'Multiple rules found for input string "{text}"')
        self.text = text
        self.rule_count = rule_count


class NormalizationError(TimeParserError):
    """A rule could not turn the input into a canonical string."""


class PatternError(NormalizationError):
    """A mask/pattern pair could not be compiled into tokens."""


class GrammarError(TimeParserError):
    """The canonical string was not (entirely) recognised by the grammar."""


class CalendarValidationError(TimeParserError):
    """A computed date has fields that do not exist in the calendar."""


class TableFormatError(ValueError):
    """A rule or facet table row is malformed."""

    def __init__(self, message: str, line_number: int):
        super().__init__(message)
        self.line_number = line_number
