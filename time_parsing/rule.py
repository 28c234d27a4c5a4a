"""Transformation rules and the shape matcher that selects them."""

from __future__ import annotations

import re
import unicodedata
from dataclasses import dataclass

from time_parsing.errors import AmbiguousRuleError


@dataclass(frozen=True)
class Rule:
    """Maps an input shape to a canonical output.

    Attributes:
        input_mask: Character-class template the raw string must match
        input_pattern: Placeholder layout aligned with input_mask
        output_mask: Template of the canonical string
        output_pattern: Placeholder layout aligned with output_mask
    """
    input_mask: str
    input_pattern: str
    output_mask: str
    output_pattern: str

    @property
    def hash_count(self) -> int:
        """Number of digit wildcards; fewer means more specific."""
        return self.input_mask.count(DIGIT_WILDCARD)


@dataclass(frozen=True)
class Replacement:
    """Literal substitution applied before matching or extraction."""
    source: str
    target: str


MONTH_CODE = "MM"
WEEKDAY_CODE = "GG"
DIGIT_WILDCARD = "#"

MONTH_REPLACEMENTS: tuple[Replacement, ...] = (
    Replacement("Januar", "01"),
    Replacement("Februar", "02"),
    Replacement("März", "03"),
    Replacement("April", "04"),
    Replacement("Mai", "05"),
    Replacement("Juni", "06"),
    Replacement("Juli", "07"),
    Replacement("August", "08"),
    Replacement("September", "09"),
    Replacement("Oktober", "10"),
    Replacement("November", "11"),
    Replacement("Dezember", "12"),
    Replacement("Jan.", "01"),
    Replacement("Feb.", "02"),
    Replacement("Apr.", "04"),
    Replacement("Jun.", "06"),
    Replacement("Jul.", "07"),
    Replacement("Aug.", "08"),
    Replacement("Sept.", "09"),
    Replacement("Okt.", "10"),
    Replacement("Nov.", "11"),
    Replacement("Dez.", "12"),
    Replacement("Nov", "11"),
)

WEEKDAY_REPLACEMENTS: tuple[Replacement, ...] = (
    Replacement("Montag", WEEKDAY_CODE),
    Replacement("Dienstag", WEEKDAY_CODE),
    Replacement("Mittwoch", WEEKDAY_CODE),
    Replacement("Donnerstag", WEEKDAY_CODE),
    Replacement("Freitag", WEEKDAY_CODE),
    Replacement("Samstag", WEEKDAY_CODE),
    Replacement("Sonntag", WEEKDAY_CODE),
)

# Mask characters that must appear verbatim in the input. Note the two
# different dashes (hyphen-minus and en dash).
LITERAL_MASK_CHARS = frozenset(",=?/()-–.[]0acuorcfAMJhDVIZX")

# Masks naming a whole period; the input has to be exactly the same word.
PERIOD_RULES = frozenset({"Ottonisch", "Römisch", "Karolingisch", "Klassizistisch"})

_WHITESPACE_RE = re.compile(r"\s", re.ASCII)
# Unicode space, line and paragraph separators; tabs and line breaks are not blanks
_BLANK_CATEGORIES = frozenset({"Zs", "Zl", "Zp"})


def apply_replacements(text: str, replacements: tuple[Replacement, ...], target: str | None = None) -> str:
    """Replace every occurrence of each source, in table order.

    Args:
        text: The text to rewrite
        replacements: Substitution table
        target: If given, used instead of each replacement's own target

    Returns:
        The rewritten text
    """
    for replacement in replacements:
        text = text.replace(replacement.source, replacement.target if target is None else target)
    return text


def _is_blank(char: str) -> bool:
    return unicodedata.category(char) in _BLANK_CATEGORIES


def to_shape(text: str) -> str:
    """Replace month and weekday names by their fixed-width codes."""
    text = apply_replacements(text, MONTH_REPLACEMENTS, MONTH_CODE)
    return apply_replacements(text, WEEKDAY_REPLACEMENTS, WEEKDAY_CODE)


class RuleMatcher:
    """Selects the transformation rule for a raw expression."""

    def __init__(self, rules: tuple[Rule, ...]):
        self.rules = tuple(rules)

    @staticmethod
    def is_matching(mask_char: str, input_char: str) -> bool:
        """Check one input character against one mask character."""
        if mask_char == DIGIT_WILDCARD:
            return input_char.isdecimal()
        if _is_blank(mask_char) or _is_blank(input_char):
            return _is_blank(mask_char) and _is_blank(input_char)
        if mask_char in LITERAL_MASK_CHARS:
            return mask_char == input_char
        return True

    @staticmethod
    def passes_basic_checks(shape: str, mask: str) -> bool:
        """Length checks plus the verbatim check for period rules."""
        if len(mask) != len(shape):
            return False
        if len(_WHITESPACE_RE.sub("", mask)) != len(_WHITESPACE_RE.sub("", shape)):
            return False
        return mask not in PERIOD_RULES or shape == mask

    def matches(self, rule: Rule, shape: str) -> bool:
        mask = rule.input_mask
        if not self.passes_basic_checks(shape, mask):
            return False
        return all(self.is_matching(m, c) for m, c in zip(mask, shape))

    def find_rules(self, text: str) -> list[Rule]:
        """Return the most specific rules matching the shape of text.

        Among all matching rules only those with the fewest digit wildcards
        survive; duplicates are removed keeping first-seen order.
        """
        shape = to_shape(text)
        found = [rule for rule in self.rules if self.matches(rule, shape)]
        if len(found) > 1:
            fewest = min(rule.hash_count for rule in found)
            found = [rule for rule in found if rule.hash_count == fewest]
        return list(dict.fromkeys(found))

    def select(self, text: str) -> Rule | None:
        """Return the single rule for text, or None if no rule applies.

        Raises:
            AmbiguousRuleError: If more than one distinct rule remains
        """
        found = self.find_rules(text)
        if len(found) > 1:
            raise AmbiguousRuleError(text, len(found))
        return found[0] if found else None
