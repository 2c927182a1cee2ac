"""Tests for the command-line entry point."""

import argparse
import shutil
from pathlib import Path

import pytest

from testgen_engine.cli import build_parser, main
from testgen_engine.errors import UsageError

FIXTURES = Path(__file__).parent / "fixtures"


@pytest.fixture
def sample(tmp_path):
    target = tmp_path / "sample.rs"
    shutil.copy(FIXTURES / "sample.rs", target)
    return target


class TestParser:
    def test_build_parser_returns_parser(self):
        assert isinstance(build_parser(), argparse.ArgumentParser)

    def test_parses_file_and_options(self):
        args = build_parser().parse_args(["x.rs", "--fixtures-root", "/tmp", "--meta", "--check"])
        assert args.file == "x.rs"
        assert args.fixtures_root == "/tmp"
        assert args.meta is True
        assert args.check is True
        assert args.dry_run is False

    def test_errors_raise_instead_of_exiting(self):
        with pytest.raises(UsageError):
            build_parser().parse_args([])

    def test_dry_run_and_check_are_exclusive(self):
        with pytest.raises(UsageError):
            build_parser().parse_args(["x.rs", "--dry-run", "--check"])


class TestUsage:
    @pytest.mark.parametrize("argv", [[], ["a.rs", "b.rs"]])
    def test_wrong_argument_count(self, argv, capsys):
        assert main(argv) == 1
        captured = capsys.readouterr()
        assert "usage: testgen" in captured.err
        assert captured.out == ""

    def test_help_exits_zero(self, capsys):
        with pytest.raises(SystemExit) as exc:
            main(["--help"])
        assert exc.value.code == 0
        assert "TESTGEN" in capsys.readouterr().out


class TestRegen:
    def test_regenerates_file(self, sample, capsys):
        rc = main([str(sample), "--fixtures-root", str(FIXTURES)])
        assert rc == 0
        assert sample.read_text() == (FIXTURES / "sample.expected.rs").read_text()
        out = capsys.readouterr().out
        assert "updated" in out
        assert "basic_txt" in out
        assert "2 region(s), 5 test(s)" in out
        assert "sample.rs.old" in out

    def test_fixtures_root_from_environment(self, sample, monkeypatch):
        monkeypatch.setenv("TESTGEN_FIXTURES_DIR", str(FIXTURES))
        assert main([str(sample)]) == 0
        assert "mod edge_txt {" in sample.read_text()

    def test_dry_run(self, sample, capsys):
        original = sample.read_text()
        rc = main([str(sample), "--fixtures-root", str(FIXTURES), "--dry-run"])
        assert rc == 0
        assert sample.read_text() == original
        assert "[DRY RUN]" in capsys.readouterr().out

    def test_check_stale_file_fails(self, sample):
        original = sample.read_text()
        assert main([str(sample), "--fixtures-root", str(FIXTURES), "--check"]) == 1
        assert sample.read_text() == original

    def test_check_fresh_file_passes(self, sample):
        assert main([str(sample), "--fixtures-root", str(FIXTURES)]) == 0
        assert main([str(sample), "--fixtures-root", str(FIXTURES), "--check"]) == 0

    def test_missing_group_reports_error(self, sample, tmp_path, capsys):
        original = sample.read_text()
        rc = main([str(sample), "--fixtures-root", str(tmp_path)])
        assert rc == 1
        err = capsys.readouterr().err
        assert "ERROR" in err
        assert str(sample) in err
        assert sample.read_text() == original

    def test_empty_group_reports_group(self, tmp_path, capsys):
        (tmp_path / "empty.txt").write_text("")
        doc = tmp_path / "doc.rs"
        doc.write_text("////\n// TESTGEN: empty.txt\n////\n")
        assert main([str(doc), "--fixtures-root", str(tmp_path)]) == 1
        assert "no data found for empty.txt" in capsys.readouterr().err
        assert doc.read_text() == "////\n// TESTGEN: empty.txt\n////\n"
