"""Immutable cursor and single-step matching over a canonical string."""

from __future__ import annotations

import re
from dataclasses import dataclass


@dataclass(frozen=True)
class Position:
    """A cursor into the text. Never mutated; advancing returns a new one."""
    index: int = 0

    def advance(self, count: int) -> Position:
        return Position(self.index + count)


@dataclass(frozen=True)
class AcceptResult:
    """Outcome of one match attempt.

    Attributes:
        accepted: Whether the expected text was found at the cursor
        parsed: The consumed substring
        groups: Capture groups for regex attempts (index 0 is the whole match)
        position: Cursor after the match; the starting cursor when rejected
    """
    accepted: bool
    position: Position
    parsed: str = ""
    groups: tuple[str | None, ...] = ()

    def group(self, index: int) -> str | None:
        if index < len(self.groups):
            return self.groups[index]
        return None


class InputStringReader:
    """Matches literals and patterns at a given position of a string."""

    def __init__(self, text: str):
        self.text = text

    def at_end(self, position: Position) -> bool:
        return position.index >= len(self.text)

    def try_to_accept(self, position: Position, expected: str | re.Pattern[str]) -> AcceptResult:
        """Try to match expected right at position.

        Args:
            position: Where the match has to start
            expected: Literal text or a compiled pattern (matched with
                re.Pattern.match, so it is anchored at the cursor)

        Returns:
            An AcceptResult; the original position is kept on rejection
        """
        if isinstance(expected, str):
            if self.text.startswith(expected, position.index):
                return AcceptResult(True, position.advance(len(expected)), expected, (expected,))
            return AcceptResult(False, position)

        match = expected.match(self.text, position.index)
        if match is None:
            return AcceptResult(False, position)
        parsed = match.group(0)
        return AcceptResult(True, position.advance(len(parsed)), parsed, (parsed, *match.groups()))
