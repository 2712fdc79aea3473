#!/usr/bin/env python3
"""
Tests for the command-line driver
"""

import io

import pytest

from reverser import cli

EXPECTED_SAMPLES = [
    "ehT sex'of nur revo ot eht secnef, tub tno'd pmuj.",
    "Hello Eric, hope you have a great day! It was a pleasure doing this small test :)",
    "lliW dda rehtona ecnetnes - tsuj esuaceb I nac. yhW ton!",
]


class _Terminal(io.StringIO):
    """Stand-in for an interactive stdin"""

    def isatty(self):
        return True


@pytest.fixture
def tty_stdin(monkeypatch):
    monkeypatch.setattr("sys.stdin", _Terminal())


def test_runs_builtin_samples_in_order(tty_stdin, capsys):
    """No input at all prints one reversed line per built-in sample"""
    assert cli.main([]) == 0

    out = capsys.readouterr().out
    assert out.splitlines() == EXPECTED_SAMPLES


def test_text_argument(tty_stdin, capsys):
    assert cli.main(["--text", "Hello, World!"]) == 0
    assert capsys.readouterr().out == "olleH, dlroW!\n"


def test_file_argument(tty_stdin, tmp_path, capsys):
    """Each line of the file is reversed on its own line"""
    path = tmp_path / "in.txt"
    path.write_text("abc\na1b2c3\n", encoding="utf-8")

    assert cli.main(["-f", str(path)]) == 0
    assert capsys.readouterr().out == "cba\nc1b2a3\n"


def test_piped_stdin(monkeypatch, capsys):
    """Non-interactive stdin is read line by line"""
    monkeypatch.setattr("sys.stdin", io.StringIO("abc def\r\nxy z\n"))

    assert cli.main([]) == 0
    assert capsys.readouterr().out == "cba fed\nyx z\n"


def test_missing_file_reports_no_input(tty_stdin, tmp_path, capsys):
    assert cli.main(["-f", str(tmp_path / "missing.txt")]) == 1

    captured = capsys.readouterr()
    assert captured.out == ""
    assert "No input text." in captured.err


def test_blank_text_reports_no_input(tty_stdin, capsys):
    assert cli.main(["-t", "   "]) == 1
    assert "No input text." in capsys.readouterr().err


def test_run_writes_to_given_stream():
    buf = io.StringIO()
    cli.run(["abc", "", "a  b"], out=buf)
    assert buf.getvalue() == "cba\n\na  b\n"


def test_empty_piped_stdin_falls_back_to_samples(monkeypatch, capsys):
    """A non-interactive but empty stdin still prints the built-in samples"""
    monkeypatch.setattr("sys.stdin", io.StringIO(""))

    assert cli.main([]) == 0
    assert capsys.readouterr().out.splitlines() == EXPECTED_SAMPLES
