"""Tests for the timeparser command line tool."""

import io

from time_parsing import TimeParser, TimeParserConfig
from time_parsing.cli import build_arg_parser, config_from_args, enrich_lines, main


class TestEnrichLines:
    """Test cases for enrich_lines."""

    def test_writes_expression_and_result(self):
        parser = TimeParser.from_config(TimeParserConfig())
        out = io.StringIO()
        parsed = enrich_lines(parser, ["1985-07-15\n", "\n", "xyz\n"], out)
        assert parsed == 1
        assert out.getvalue() == "1985-07-15\ttime_62000 724838|724838\nxyz\t\n"


class TestArguments:
    """Test cases for argument handling."""

    def test_overrides(self, tmp_path):
        args = build_arg_parser().parse_args(["--rules", str(tmp_path / "r.tsv"), "--strict-facets"])
        config = config_from_args(args)
        assert config.rules_path == tmp_path / "r.tsv"
        assert config.strict_facets is True

    def test_defaults(self, monkeypatch):
        monkeypatch.delenv("TIMEPARSER_RULES_PATH", raising=False)
        args = build_arg_parser().parse_args([])
        assert args.files == []
        assert config_from_args(args).rules_path == TimeParserConfig().rules_path


class TestMain:
    """Test cases for main."""

    def test_reads_files(self, tmp_path, capsys):
        source = tmp_path / "dates.txt"
        source.write_text("15.07.1985\n", encoding="utf-8")
        assert main([str(source)]) == 0
        assert capsys.readouterr().out == "15.07.1985\ttime_62000 724838|724838\n"

    def test_reads_stdin(self, monkeypatch, capsys):
        monkeypatch.setattr("sys.stdin", io.StringIO("-20000-02-21\n"))
        assert main([]) == 0
        assert capsys.readouterr().out == "-20000-02-21\ttime_18000 -7304949|-7304949\n"
