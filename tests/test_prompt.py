import io

import pytest

from relinstall_core.prompt import answer, yes


def test_answer_returns_input():
    assert answer("/opt/app", io.StringIO("  /usr/local  \n")) == "/usr/local"


def test_answer_empty_uses_default():
    assert answer("/opt/app", io.StringIO("\n")) == "/opt/app"
    assert answer("/opt/app", io.StringIO("")) == "/opt/app"


@pytest.mark.parametrize("line,expected", [
    ("y\n", True),
    ("Yes\n", True),
    ("  yep\n", True),
    ("n\n", False),
    ("\n", False),
    ("", False),
    ("okay\n", False),
])
def test_yes(line, expected):
    assert yes(io.StringIO(line)) is expected


def test_yes_reads_stdin(monkeypatch):
    monkeypatch.setattr("sys.stdin", io.StringIO("Y\n"))
    assert yes() is True
