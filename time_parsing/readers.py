"""Readers for the tab-separated rule and facet tables.

Both files start with a header line that is skipped. Rule rows hold four
columns (input mask, input pattern, output mask, output pattern); facet rows
hold seven (id, notation, earliest year, latest year, German description,
English description, sort key).
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Iterator

from time_parsing.errors import TableFormatError
from time_parsing.facet import Facet
from time_parsing.rule import Rule

logger = logging.getLogger(__name__)

RULE_COLUMNS = 4
FACET_COLUMNS = 7


def _data_lines(path: Path, encoding: str) -> Iterator[tuple[int, str]]:
    """Yield (line_number, line) for every line after the header."""
    with path.open(encoding=encoding) as handle:
        for line_number, line in enumerate(handle):
            if line_number == 0:
                continue
            yield line_number, line.rstrip("\r\n")


def read_rules(path: str | Path, encoding: str = "utf-8") -> tuple[Rule, ...]:
    """Load the rule table.

    Masks may start or end with blanks, so only line breaks are stripped.

    Raises:
        TableFormatError: If a row does not have four columns
    """
    path = Path(path)
    rules: list[Rule] = []
    for line_number, line in _data_lines(path, encoding):
        if not line.strip():
            continue
        columns = line.split("\t")
        if len(columns) < RULE_COLUMNS:
            raise TableFormatError(
                f'Expected {RULE_COLUMNS} columns instead of {len(columns)} in rule file "{path}", '
                f'line {line_number}: "{line}"',
                line_number,
            )
        rules.append(Rule(*columns[:RULE_COLUMNS]))
    logger.info("Loaded %d rules from %s", len(rules), path)
    return tuple(rules)


def read_facets(path: str | Path, encoding: str = "utf-8", strict: bool = False) -> tuple[Facet, ...]:
    """Load the facet table.

    Args:
        path: Location of the tab-separated file
        encoding: File encoding
        strict: Fail on rows whose years are not integers instead of
            dropping them

    Raises:
        TableFormatError: If a row has fewer than seven columns, or a year
            is malformed and strict is set
    """
    path = Path(path)
    facets: list[Facet] = []
    for line_number, line in _data_lines(path, encoding):
        line = line.strip()
        if not line:
            continue
        columns = line.split("\t")
        if len(columns) < FACET_COLUMNS:
            raise TableFormatError(
                f'Expected {FACET_COLUMNS} columns instead of {len(columns)} in facet file "{path}", '
                f'line {line_number}: "{line}"',
                line_number,
            )
        try:
            earliest, latest = int(columns[2]), int(columns[3])
        except ValueError:
            if strict:
                raise TableFormatError(
                    f'Incorrect number format in facet file "{path}", line {line_number}: "{line}"',
                    line_number,
                ) from None
            logger.debug("Skipping facet row %d with malformed years: %r", line_number, line)
            continue
        facets.append(Facet(columns[0], columns[1], earliest, latest, columns[4], columns[5], columns[6]))
    logger.info("Loaded %d facets from %s", len(facets), path)
    return tuple(facets)
