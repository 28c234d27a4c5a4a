"""Time parsing module for German catalogue date expressions.

Turns expressions like "um 1920", "-20000-02-21" or
"2. Hälfte 19. Jahrhundert" into era facet notations and sortable day
indices.
"""

from time_parsing.config import TimeParserConfig
from time_parsing.era_date import Era, EraDate
from time_parsing.errors import (
    AmbiguousRuleError,
    CalendarValidationError,
    GrammarError,
    NormalizationError,
    PatternError,
    TableFormatError,
    TimeParserError,
)
from time_parsing.facet import Facet
from time_parsing.readers import read_facets, read_rules
from time_parsing.rule import Replacement, Rule, RuleMatcher
from time_parsing.time_parser import TimeParser
from time_parsing.time_span import TimeSpan

__all__ = [
    "AmbiguousRuleError",
    "CalendarValidationError",
    "Era",
    "EraDate",
    "Facet",
    "GrammarError",
    "NormalizationError",
    "PatternError",
    "Replacement",
    "Rule",
    "RuleMatcher",
    "TableFormatError",
    "TimeParser",
    "TimeParserConfig",
    "TimeParserError",
    "TimeSpan",
    "read_facets",
    "read_rules",
]
