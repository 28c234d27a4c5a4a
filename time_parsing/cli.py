#!/usr/bin/env python3
"""
Batch enrichment of date expressions.

Reads one expression per line and prints the expression and its parsed form
separated by a tab. Lines that cannot be parsed get an empty second column.

Usage:
    timeparser [FILE ...] [--rules PATH] [--facets PATH] [--strict-facets] [--log-level LEVEL]

Without FILE arguments the expressions are read from stdin. Table paths
default to TIMEPARSER_RULES_PATH / TIMEPARSER_FACETS_PATH or the bundled
tables.
"""

from __future__ import annotations

import argparse
import logging
import sys
from dataclasses import replace
from pathlib import Path
from typing import Iterable, TextIO

from time_parsing.config import TimeParserConfig
from time_parsing.time_parser import TimeParser


def build_arg_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Convert German date expressions into era facets and day indices"
    )
    parser.add_argument(
        "files",
        nargs="*",
        type=Path,
        help="Files with one expression per line (default: stdin)",
    )
    parser.add_argument("--rules", type=Path, default=None, help="Rule table (tab-separated)")
    parser.add_argument("--facets", type=Path, default=None, help="Facet table (tab-separated)")
    parser.add_argument(
        "--strict-facets",
        action="store_true",
        help="Fail on facet rows with malformed years instead of skipping them",
    )
    parser.add_argument(
        "--log-level",
        default="WARNING",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Logging level (default: WARNING)",
    )
    return parser


def config_from_args(args: argparse.Namespace) -> TimeParserConfig:
    """Environment config with command line overrides applied."""
    config = TimeParserConfig.from_env()
    if args.rules is not None:
        config = replace(config, rules_path=args.rules)
    if args.facets is not None:
        config = replace(config, facets_path=args.facets)
    if args.strict_facets:
        config = replace(config, strict_facets=True)
    return config


def enrich_lines(parser: TimeParser, lines: Iterable[str], out: TextIO) -> int:
    """Write "<expression>\\t<result>" for every non-empty line; return how many parsed."""
    parsed = 0
    for line in lines:
        expression = line.rstrip("\r\n")
        if not expression:
            continue
        result = parser.parse_time(expression)
        if result:
            parsed += 1
        out.write(f"{expression}\t{result}\n")
    return parsed


def main(argv: list[str] | None = None) -> int:
    args = build_arg_parser().parse_args(argv)
    logging.basicConfig(level=getattr(logging, args.log_level), format="%(asctime)s\t%(levelname)s\t%(message)s")

    time_parser = TimeParser.from_config(config_from_args(args))

    total = 0
    if args.files:
        for path in args.files:
            with path.open(encoding="utf-8") as handle:
                total += enrich_lines(time_parser, handle, sys.stdout)
    else:
        total += enrich_lines(time_parser, sys.stdin, sys.stdout)

    logging.getLogger(__name__).info("Parsed %d expressions", total)
    return 0


if __name__ == "__main__":
    sys.exit(main())
