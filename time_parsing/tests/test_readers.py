"""Unit tests for the tab-separated table readers."""

import pytest
from time_parsing.config import DEFAULT_FACETS_PATH, DEFAULT_RULES_PATH
from time_parsing.errors import TableFormatError
from time_parsing.facet import Facet
from time_parsing.readers import read_facets, read_rules
from time_parsing.rule import Rule

RULE_HEADER = "input_mask\tinput_pattern\toutput_mask\toutput_pattern\n"
FACET_HEADER = "id\tnotation\tearliest\tlatest\tde\ten\tsort\n"


class TestReadRules:
    """Test cases for read_rules."""

    def test_reads_rows_after_header(self, tmp_path):
        path = tmp_path / "rules.tsv"
        path.write_text(RULE_HEADER + "##.##.####\tTT.MM.JJJJ\t####-##-##\tJJJJ-MM-TT\n", encoding="utf-8")
        assert read_rules(path) == (Rule("##.##.####", "TT.MM.JJJJ", "####-##-##", "JJJJ-MM-TT"),)

    def test_keeps_surrounding_blanks(self, tmp_path):
        path = tmp_path / "rules.tsv"
        path.write_text(RULE_HEADER + " ####\t JJJJ\t####\tJJJJ \r\n", encoding="utf-8")
        (rule,) = read_rules(path)
        assert rule.input_mask == " ####"
        assert rule.output_pattern == "JJJJ "

    def test_skips_blank_lines(self, tmp_path):
        path = tmp_path / "rules.tsv"
        path.write_text(RULE_HEADER + "\n####\tJJJJ\t####\tJJJJ\n\n", encoding="utf-8")
        assert len(read_rules(path)) == 1

    def test_too_few_columns(self, tmp_path):
        path = tmp_path / "rules.tsv"
        path.write_text(RULE_HEADER + "####\tJJJJ\t####\n", encoding="utf-8")
        with pytest.raises(TableFormatError) as excinfo:
            read_rules(path)
        assert excinfo.value.line_number == 1

    def test_missing_file(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            read_rules(tmp_path / "missing.tsv")

    def test_bundled_table(self):
        rules = read_rules(DEFAULT_RULES_PATH)
        assert Rule("Ottonisch", "Ottonisch", "919/1024", "919/1024") in rules


class TestReadFacets:
    """Test cases for read_facets."""

    def test_reads_rows(self, tmp_path):
        path = tmp_path / "facets.tsv"
        path.write_text(FACET_HEADER + "1\ttime_60500\t1\t500\tFrüh\tEarly\t06\n", encoding="utf-8")
        assert read_facets(path) == (Facet("1", "time_60500", 1, 500, "Früh", "Early", "06"),)

    def test_lines_are_trimmed(self, tmp_path):
        path = tmp_path / "facets.tsv"
        path.write_text(FACET_HEADER + "  1\ttime_a\t-10\t-1\tde\ten\t01  \n", encoding="utf-8")
        (facet,) = read_facets(path)
        assert facet.id == "1"
        assert facet.earliest_year == -10
        assert facet.sort_key == "01"

    def test_malformed_year_is_skipped(self, tmp_path):
        path = tmp_path / "facets.tsv"
        path.write_text(
            FACET_HEADER
            + "1\ttime_a\tabc\t500\tde\ten\t01\n"
            + "2\ttime_b\t501\t1000\tde\ten\t02\n",
            encoding="utf-8",
        )
        assert [facet.notation for facet in read_facets(path)] == ["time_b"]

    def test_malformed_year_strict(self, tmp_path):
        path = tmp_path / "facets.tsv"
        path.write_text(FACET_HEADER + "1\ttime_a\tabc\t500\tde\ten\t01\n", encoding="utf-8")
        with pytest.raises(TableFormatError, match="Incorrect number format"):
            read_facets(path, strict=True)

    def test_too_few_columns(self, tmp_path):
        path = tmp_path / "facets.tsv"
        path.write_text(FACET_HEADER + "1\ttime_a\t1\t500\n", encoding="utf-8")
        with pytest.raises(TableFormatError, match="Expected 7 columns instead of 4"):
            read_facets(path)

    def test_bundled_table(self):
        facets = read_facets(DEFAULT_FACETS_PATH, strict=True)
        assert facets[0].notation == "time_18000"
        assert facets[0].earliest_year == -2000000
