import csv
import io
import sys

from vidyut.generate_rules import main, write_rules
from vidyut.sandhi_generator import Rule, generate_rules


def test_header_line():
    buf = io.StringIO()
    write_rules([], buf)
    assert buf.getvalue() == "first,second,result\n"


def test_round_trip():
    rules = generate_rules()
    buf = io.StringIO()
    write_rules(rules, buf)
    buf.seek(0)
    rows = list(csv.reader(buf))
    assert rows[0] == ["first", "second", "result"]
    assert [Rule(*row) for row in rows[1:]] == rules


def test_main_prints_all_rules(capsys):
    assert main() == 0
    out = capsys.readouterr().out
    lines = out.splitlines()
    assert lines[0] == "first,second,result"
    assert len(lines) == len(generate_rules()) + 1


class _BrokenStream:
    def write(self, _data):
        raise OSError("broken pipe")

    def flush(self):
        raise OSError("broken pipe")


def test_main_reports_write_failure(monkeypatch, capsys):
    monkeypatch.setattr(sys, "stdout", _BrokenStream())
    assert main([]) == 1
    assert "broken pipe" in capsys.readouterr().err