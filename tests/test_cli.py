"""
Tests for the berlin-clock command line.
"""

import os
from datetime import datetime

import pytest

from berlin_clock import cli


@pytest.fixture(autouse=True)
def _quiet(quiet_env):
    yield


class TestMain:
    def test_renders_time(self, capsys):
        assert cli.main(["13:17:01"]) == 0
        out = capsys.readouterr().out
        assert out == os.linesep.join(["0", "RR00", "RRR0", "YYR00000000", "YY00"]) + "\n"

    def test_invalid_time_exits_with_error(self, capsys):
        assert cli.main(["25:00:00"]) == 1
        captured = capsys.readouterr()
        assert captured.out == ""
        assert captured.err.strip() == "Error: Hours out of bounds."

    def test_huge_field_exits_with_error(self, capsys):
        assert cli.main(["1" * 5000 + ":00:00"]) == 1
        assert capsys.readouterr().err.strip() == "Error: Hours out of bounds."

    def test_labelled_output(self, capsys):
        assert cli.main(["00:00:00", "-l", "TRUE"]) == 0
        lines = capsys.readouterr().out.rstrip("\n").split(os.linesep)
        assert len(lines) == 5
        assert lines[0].endswith(": Y")

    def test_now_uses_current_time(self, capsys, monkeypatch):
        class FixedDatetime(datetime):
            @classmethod
            def now(cls, tz=None):
                return cls(2024, 5, 1, 23, 59, 59)

        monkeypatch.setattr(cli, "datetime", FixedDatetime)
        assert cli.main(["--now"]) == 0
        out = capsys.readouterr().out
        assert out == os.linesep.join(["0", "RRRR", "RRR0", "YYRYYRYYRYY", "YYYY"]) + "\n"

    def test_verbose_prints_parsed_time(self, capsys, monkeypatch):
        monkeypatch.setenv("BERLIN_CLOCK_VERBOSE", "yes")
        assert cli.main(["7:5:9"]) == 0
        assert "Debug: rendering 07:05:09" in capsys.readouterr().err


class TestArguments:
    def test_time_required(self, capsys):
        with pytest.raises(SystemExit) as exc_info:
            cli.main([])
        assert exc_info.value.code == 2
        assert "-n/--now is required" in capsys.readouterr().err

    def test_time_and_now_conflict(self):
        with pytest.raises(SystemExit) as exc_info:
            cli.main(["12:00:00", "--now"])
        assert exc_info.value.code == 2

    def test_bad_label_option(self, capsys):
        with pytest.raises(SystemExit) as exc_info:
            cli.main(["12:00:00", "-l", "maybe"])
        assert exc_info.value.code == 2
        assert "Invalid l option: maybe" in capsys.readouterr().err

    def test_version(self, capsys):
        with pytest.raises(SystemExit) as exc_info:
            cli.main(["-v"])
        assert exc_info.value.code == 0
        assert capsys.readouterr().out.strip() == f"Berlin Clock version {cli.VERSION}"

    def test_help(self, capsys):
        with pytest.raises(SystemExit) as exc_info:
            cli.main(["--help"])
        assert exc_info.value.code == 0
        assert "Usage: berlin-clock" in capsys.readouterr().out


class TestEnvTruthy:
    @pytest.mark.parametrize("raw", ["1", "true", "YES", " on "])
    def test_truthy(self, monkeypatch, raw):
        monkeypatch.setenv("BERLIN_CLOCK_VERBOSE", raw)
        assert cli.env_truthy("BERLIN_CLOCK_VERBOSE")

    @pytest.mark.parametrize("raw", ["", "0", "false", "No", "off"])
    def test_falsy(self, monkeypatch, raw):
        monkeypatch.setenv("BERLIN_CLOCK_VERBOSE", raw)
        assert not cli.env_truthy("BERLIN_CLOCK_VERBOSE")
