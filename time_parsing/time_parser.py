"""Converts a textual point or period in time into facets and sort values.

The process consists of four steps:

1. Rule selection (RuleMatcher)
2. Input normalization (Normalizer)
3. Time span calculation (TimeSpanParser with DateRangeResolver)
4. Final output string generation (OutputEncoder)

A TimeParser holds nothing but the immutable rule and facet tables, so one
instance can be shared between threads.
"""

from __future__ import annotations

import logging
from pathlib import Path

from time_parsing.config import TimeParserConfig
from time_parsing.errors import TimeParserError
from time_parsing.facet import Facet
from time_parsing.normalizer import Normalizer
from time_parsing.output_encoder import OutputEncoder
from time_parsing.readers import read_facets, read_rules
from time_parsing.rule import Rule, RuleMatcher
from time_parsing.throttle import PARSE_WARNINGS, WarningThrottle
from time_parsing.time_span import TimeSpan
from time_parsing.time_span_parser import TimeSpanParser

logger = logging.getLogger(__name__)


class TimeParser:
    """Parses catalogue date expressions against fixed rule and facet tables."""

    def __init__(
        self,
        rules: tuple[Rule, ...],
        facets: tuple[Facet, ...],
        *,
        warnings: WarningThrottle | None = None,
    ):
        self.rules = tuple(rules)
        self.facets = tuple(facets)
        self.warnings = warnings if warnings is not None else PARSE_WARNINGS
        self._matcher = RuleMatcher(self.rules)
        self._normalizer = Normalizer()
        self._span_parser = TimeSpanParser()
        self._encoder = OutputEncoder(self.facets)

    @classmethod
    def from_files(
        cls,
        rules_path: str | Path,
        facets_path: str | Path,
        *,
        strict_facets: bool = False,
        encoding: str = "utf-8",
    ) -> TimeParser:
        """Load both tables from tab-separated files."""
        rules = read_rules(rules_path, encoding)
        facets = read_facets(facets_path, encoding, strict=strict_facets)
        return cls(rules, facets)

    @classmethod
    def from_config(cls, config: TimeParserConfig | None = None) -> TimeParser:
        """Load the tables named by config (environment or bundled defaults)."""
        config = config or TimeParserConfig.from_env()
        return cls.from_files(
            config.rules_path,
            config.facets_path,
            strict_facets=config.strict_facets,
            encoding=config.encoding,
        )

    def normalize(self, text: str) -> str:
        """Return the canonical string for text.

        Without a matching rule the text is passed through unchanged.

        Raises:
            AmbiguousRuleError: If several rules match
            NormalizationError: If the rule cannot be applied
        """
        rule = self._matcher.select(text)
        if rule is None:
            return text
        return self._normalizer.normalize(text, rule)

    def resolve(self, text: str) -> TimeSpan:
        """Run rule selection, normalization and the grammar.

        Raises:
            TimeParserError: Any of its subclasses, depending on the failing stage
        """
        return self._span_parser.parse(self.normalize(text))

    def encode(self, text: str) -> str:
        """Like parse_time, but raising instead of returning an empty string."""
        span = self.resolve(text)
        return self._encoder.encode(span)

    def parse_time(self, text: str) -> str:
        """Convert text into "<facets> <startDays>|<endDays>".

        Returns:
            The output string, or "" for empty input and for any failure
        """
        if not text:
            return ""
        try:
            return self.encode(text)
        except TimeParserError as e:
            self.warnings.warn(logger, str(e))
        except Exception as e:
            self.warnings.warn(logger, f"Unexpected {type(e).__name__} for input {text!r}: {e}")
        return ""
