"""Rule-driven normalization of raw expressions into canonical strings.

A rule carries two mask/pattern pairs. The mask describes the shape of a
string, the pattern (aligned with the mask character by character) marks
which positions hold values:

    J  year        M  month        T  day
    W  weekday     V  era marker ("v. Chr." / "-")

A pattern letter is a placeholder when the mask shows something else at the
same position ("##.##.####" / "TT.MM.JJJJ"); the mask codes "MM" and "GG"
stand for spelled month and weekday names. Everything else is literal text.

Example rule: "##.##.####", "TT.MM.JJJJ" -> "####-##-##", "JJJJ-MM-TT"
turns "15.07.1985" into "1985-07-15".
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum
from itertools import zip_longest

from time_parsing.errors import NormalizationError, PatternError
from time_parsing.rule import (
    MONTH_CODE,
    MONTH_REPLACEMENTS,
    WEEKDAY_CODE,
    WEEKDAY_REPLACEMENTS,
    Rule,
    apply_replacements,
)

logger = logging.getLogger(__name__)


class TokenKind(Enum):
    LITERAL = "literal"
    YEAR = "J"
    MONTH = "M"
    DAY = "T"
    WEEKDAY = "W"
    ERA = "V"


_PLACEHOLDERS = {kind.value: kind for kind in TokenKind if kind is not TokenKind.LITERAL}
_DIGIT_KINDS = frozenset({TokenKind.YEAR, TokenKind.MONTH, TokenKind.DAY})
_MASK_CODES = {MONTH_CODE: TokenKind.MONTH, WEEKDAY_CODE: TokenKind.WEEKDAY}


@dataclass(frozen=True)
class Token:
    """One literal fragment or typed placeholder of a compiled pattern."""
    kind: TokenKind
    width: int
    text: str = ""


@dataclass(frozen=True)
class TokenWithValue:
    """A placeholder token together with the value extracted for it."""
    token: Token
    value: str

    @property
    def kind(self) -> TokenKind:
        return self.token.kind


def _classify(mask: str, pattern: str, index: int) -> TokenKind:
    """Kind of the position at index; LITERAL unless it is a placeholder."""
    pattern_char = pattern[index] if index < len(pattern) else ""
    mask_char = mask[index] if index < len(mask) else ""
    for code, kind in _MASK_CODES.items():
        # A code pair covers index either as its first or second character
        for start in (index, index - 1):
            if start >= 0 and mask[start:start + 2] == code and pattern[start:start + 2] in (code, kind.value * 2):
                return kind
    kind = _PLACEHOLDERS.get(pattern_char)
    if kind is not None and mask_char and mask_char != pattern_char:
        return kind
    return TokenKind.LITERAL


def compile_pattern(mask: str, pattern: str, permissive: bool = False) -> list[Token]:
    """Compile an aligned mask/pattern pair into a token list.

    Args:
        mask: Shape template
        pattern: Placeholder layout aligned with mask
        permissive: Accept length differences; surplus characters of either
            side become literal text (used for the output side)

    Returns:
        Tokens in order, adjacent positions of the same kind merged

    Raises:
        PatternError: If the lengths differ and permissive is False
    """
    if not permissive and len(mask) != len(pattern):
        raise PatternError(
            f'Mask "{mask}" and pattern "{pattern}" differ in length ({len(mask)} vs {len(pattern)})'
        )

    tokens: list[Token] = []
    for index, (mask_char, pattern_char) in enumerate(zip_longest(mask, pattern, fillvalue="")):
        kind = _classify(mask, pattern, index)
        char = pattern_char or mask_char
        text = char if kind is TokenKind.LITERAL else ""
        if tokens and tokens[-1].kind is kind:
            previous = tokens.pop()
            tokens.append(Token(kind, previous.width + 1, previous.text + text))
        else:
            tokens.append(Token(kind, 1, text))
    return tokens


def is_bc_marker(value: str) -> bool:
    """Whether an extracted era marker denotes BC ("-", "v. Chr.", "vor Chr.")."""
    marker = value.strip().lower()
    return marker == "-" or marker.startswith("v")


class InputExtractor:
    """Reads placeholder values out of a raw string along a token list."""

    def __init__(self, tokens: list[Token]):
        self.tokens = tokens

    @staticmethod
    def prepare(text: str) -> str:
        """Replace month names by their numbers and weekday names by the code."""
        text = apply_replacements(text, MONTH_REPLACEMENTS)
        return apply_replacements(text, WEEKDAY_REPLACEMENTS)

    def extract(self, text: str) -> list[TokenWithValue]:
        """Walk the tokens over the text and collect placeholder values.

        Raises:
            NormalizationError: If a slice is malformed or the widths do not
                add up to the length of the text
        """
        prepared = self.prepare(text)
        expected = sum(token.width for token in self.tokens)
        if expected != len(prepared):
            raise NormalizationError(
                f'Input "{text}" has length {len(prepared)}, pattern expects {expected}'
            )

        values: list[TokenWithValue] = []
        offset = 0
        for token in self.tokens:
            value = prepared[offset:offset + token.width]
            offset += token.width
            if token.kind is TokenKind.LITERAL:
                continue
            if token.kind in _DIGIT_KINDS and not value.isdecimal():
                raise NormalizationError(
                    f'Expected digits for {token.kind.name.lower()} in "{text}", got "{value}"'
                )
            values.append(TokenWithValue(token, value))
        return values


class OutputRenderer:
    """Renders an output token list with extracted values."""

    def __init__(self, tokens: list[Token]):
        self.tokens = tokens

    def render(self, values: list[TokenWithValue]) -> str:
        """Substitute placeholders with the extracted values of the same kind.

        The n-th placeholder of a kind takes the n-th value of that kind, or
        the last one when fewer values were extracted.

        Raises:
            NormalizationError: If no value of a required kind was extracted
        """
        by_kind: dict[TokenKind, list[str]] = {}
        for item in values:
            by_kind.setdefault(item.kind, []).append(item.value)

        used: dict[TokenKind, int] = {}
        parts: list[str] = []
        for token in self.tokens:
            if token.kind is TokenKind.LITERAL:
                parts.append(token.text)
                continue
            candidates = by_kind.get(token.kind)
            if not candidates:
                raise NormalizationError(f"No {token.kind.name.lower()} value available for output")
            index = used.get(token.kind, 0)
            used[token.kind] = index + 1
            value = candidates[min(index, len(candidates) - 1)]
            parts.append(self._format(token, value))
        return "".join(parts)

    @staticmethod
    def _format(token: Token, value: str) -> str:
        if token.kind is TokenKind.ERA:
            return "-" if is_bc_marker(value) else ""
        if token.kind in _DIGIT_KINDS:
            return value.zfill(token.width)
        return value


class Normalizer:
    """Turns a raw expression into the canonical string a rule describes."""

    def normalize(self, text: str, rule: Rule) -> str:
        """Apply rule to text.

        Raises:
            NormalizationError: If the rule cannot be applied to text
        """
        input_tokens = compile_pattern(rule.input_mask, rule.input_pattern)
        values = InputExtractor(input_tokens).extract(text)
        output_tokens = compile_pattern(rule.output_mask, rule.output_pattern, permissive=True)
        result = OutputRenderer(output_tokens).render(values)
        logger.debug("Normalized %r to %r using mask %r", text, result, rule.input_mask)
        return result
