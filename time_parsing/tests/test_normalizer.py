"""Unit tests for pattern compilation, extraction and rendering."""

import pytest
from time_parsing.errors import NormalizationError, PatternError
from time_parsing.normalizer import (
    InputExtractor,
    Normalizer,
    OutputRenderer,
    Token,
    TokenKind,
    TokenWithValue,
    compile_pattern,
    is_bc_marker,
)
from time_parsing.rule import Rule


class TestCompilePattern:
    """Test cases for compile_pattern."""

    def test_day_month_year(self):
        tokens = compile_pattern("##.##.####", "TT.MM.JJJJ")
        assert tokens == [
            Token(TokenKind.DAY, 2),
            Token(TokenKind.LITERAL, 1, "."),
            Token(TokenKind.MONTH, 2),
            Token(TokenKind.LITERAL, 1, "."),
            Token(TokenKind.YEAR, 4),
        ]

    def test_month_code_is_placeholder(self):
        tokens = compile_pattern("##. MM ####", "TT. MM JJJJ")
        assert [t.kind for t in tokens] == [
            TokenKind.DAY, TokenKind.LITERAL, TokenKind.MONTH, TokenKind.LITERAL, TokenKind.YEAR,
        ]

    def test_weekday_code_is_placeholder(self):
        tokens = compile_pattern("GG, #. MM ####", "WW, T. MM JJJJ")
        assert tokens[0] == Token(TokenKind.WEEKDAY, 2)

    def test_letters_equal_to_mask_stay_literal(self):
        tokens = compile_pattern("Mitte ##. Jh.", "Mitte JJ. Jh.")
        assert tokens == [
            Token(TokenKind.LITERAL, 6, "Mitte "),
            Token(TokenKind.YEAR, 2),
            Token(TokenKind.LITERAL, 5, ". Jh."),
        ]

    def test_era_marker(self):
        tokens = compile_pattern("### v. Chr.", "JJJ V. Chr.")
        assert tokens[2] == Token(TokenKind.ERA, 1)

    def test_length_mismatch(self):
        with pytest.raises(PatternError):
            compile_pattern("####", "JJJ")

    def test_permissive_keeps_trailing_mask(self):
        tokens = compile_pattern("####-##", "JJJJ", permissive=True)
        assert tokens == [Token(TokenKind.YEAR, 4), Token(TokenKind.LITERAL, 3, "-##")]

    def test_permissive_keeps_trailing_pattern(self):
        tokens = compile_pattern("####", "JJJJ vor Christus", permissive=True)
        assert tokens == [Token(TokenKind.YEAR, 4), Token(TokenKind.LITERAL, 13, " vor Christus")]


class TestInputExtractor:
    """Test cases for InputExtractor."""

    def test_extracts_values(self):
        extractor = InputExtractor(compile_pattern("##.##.####", "TT.MM.JJJJ"))
        values = extractor.extract("15.07.1985")
        assert [(v.kind, v.value) for v in values] == [
            (TokenKind.DAY, "15"),
            (TokenKind.MONTH, "07"),
            (TokenKind.YEAR, "1985"),
        ]

    def test_month_name_is_replaced_by_number(self):
        extractor = InputExtractor(compile_pattern("##. MM ####", "TT. MM JJJJ"))
        values = extractor.extract("15. März 1920")
        assert values[1].value == "03"

    def test_non_digit_fails(self):
        extractor = InputExtractor(compile_pattern("##.##.####", "TT.MM.JJJJ"))
        with pytest.raises(NormalizationError):
            extractor.extract("1a.07.1985")

    def test_wrong_width_fails(self):
        extractor = InputExtractor(compile_pattern("##.##.####", "TT.MM.JJJJ"))
        with pytest.raises(NormalizationError):
            extractor.extract("15.07.198")


class TestOutputRenderer:
    """Test cases for OutputRenderer."""

    def test_zero_pads_to_width(self):
        renderer = OutputRenderer(compile_pattern("####-##-##", "JJJJ-MM-TT"))
        values = [
            TokenWithValue(Token(TokenKind.DAY, 1), "5"),
            TokenWithValue(Token(TokenKind.MONTH, 1), "7"),
            TokenWithValue(Token(TokenKind.YEAR, 4), "1985"),
        ]
        assert renderer.render(values) == "1985-07-05"

    def test_values_are_used_in_order(self):
        renderer = OutputRenderer(compile_pattern("####/####", "JJJJ/JJJJ"))
        values = [
            TokenWithValue(Token(TokenKind.YEAR, 4), "1920"),
            TokenWithValue(Token(TokenKind.YEAR, 4), "1925"),
        ]
        assert renderer.render(values) == "1920/1925"

    def test_missing_kind_fails(self):
        renderer = OutputRenderer(compile_pattern("####-##", "JJJJ-MM"))
        with pytest.raises(NormalizationError):
            renderer.render([TokenWithValue(Token(TokenKind.YEAR, 4), "1920")])

    @pytest.mark.parametrize("marker,expected", [
        ("v", True),
        ("-", True),
        ("vor Chr.", True),
        ("n", False),
        ("", False),
    ])
    def test_is_bc_marker(self, marker, expected):
        assert is_bc_marker(marker) is expected


class TestNormalizer:
    """Test cases for full rule application."""

    def setup_method(self):
        self.normalizer = Normalizer()

    @pytest.mark.parametrize("rule,text,expected", [
        (Rule("##.##.####", "TT.MM.JJJJ", "####-##-##", "JJJJ-MM-TT"), "15.07.1985", "1985-07-15"),
        (Rule("#. MM ####", "T. MM JJJJ", "####-##-##", "JJJJ-MM-TT"), "1. Mai 1920", "1920-05-01"),
        (Rule("GG, ##. MM ####", "WW, TT. MM JJJJ", "####-##-##", "JJJJ-MM-TT"),
         "Montag, 15. März 1920", "1920-03-15"),
        (Rule("### v. Chr.", "JJJ V. Chr.", "-###", "VJJJ"), "500 v. Chr.", "-500"),
        (Rule("### v. Chr.", "JJJ V. Chr.", "-###", "VJJJ"), "500 n. Chr.", "500"),
        (Rule("#. Hälfte ##. Jh.", "J. Hälfte JJ. Jh.", "#. Hälfte ##. Jahrhundert", "J. Hälfte JJ. Jahrhundert"),
         "2. Hälfte 19. Jh.", "2. Hälfte 19. Jahrhundert"),
        (Rule("Ottonisch", "Ottonisch", "919/1024", "919/1024"), "Ottonisch", "919/1024"),
    ])
    def test_normalize(self, rule, text, expected):
        assert self.normalizer.normalize(text, rule) == expected
