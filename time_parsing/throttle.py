"""Process-wide cap on logged parse warnings."""

from __future__ import annotations

import logging

from time_parsing.config import MAX_ERROR_COUNT


class WarningThrottle:
    """Logs at most `limit` warnings, then stays silent.

    The counter is not locked; concurrent callers may log a few extra
    warnings, which only affects log volume.
    """

    def __init__(self, limit: int = MAX_ERROR_COUNT):
        self.limit = limit
        self.count = 0

    @property
    def exhausted(self) -> bool:
        return self.count >= self.limit

    def warn(self, logger: logging.Logger, message: str) -> bool:
        """Log message unless the cap is reached; return whether it was logged."""
        if self.exhausted:
            return False
        logger.warning("TimeParser: %s", message)
        self.count += 1
        return True

    def reset(self) -> None:
        self.count = 0


PARSE_WARNINGS = WarningThrottle()
