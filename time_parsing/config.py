"""Runtime configuration, read from environment variables."""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path

CONF_DIR = Path(__file__).resolve().parent / "conf"
DEFAULT_RULES_PATH = CONF_DIR / "rules.tsv"
DEFAULT_FACETS_PATH = CONF_DIR / "facets.tsv"

# Cap on logged parse warnings per process
MAX_ERROR_COUNT = 100


def _env_flag(name: str, default: bool = False) -> bool:
    value = os.getenv(name)
    if value is None:
        return default
    return value.strip().lower() in {"1", "true", "yes", "on"}


@dataclass(frozen=True)
class TimeParserConfig:
    """Where the rule and facet tables live and how to load them."""
    rules_path: Path = DEFAULT_RULES_PATH
    facets_path: Path = DEFAULT_FACETS_PATH
    strict_facets: bool = False
    encoding: str = "utf-8"

    @classmethod
    def from_env(cls) -> TimeParserConfig:
        """Build a config from TIMEPARSER_* environment variables."""
        return cls(
            rules_path=Path(os.getenv("TIMEPARSER_RULES_PATH", str(DEFAULT_RULES_PATH))),
            facets_path=Path(os.getenv("TIMEPARSER_FACETS_PATH", str(DEFAULT_FACETS_PATH))),
            strict_facets=_env_flag("TIMEPARSER_STRICT_FACETS"),
            encoding=os.getenv("TIMEPARSER_ENCODING", "utf-8"),
        )
