import csv
import io
import os
import sys

import pytest

# Ensure we can import from the project
sys.path.append(os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

from symtab import cli


def test_parse_pair():
    assert cli.parse_pair("a = 1") == ("a", "1")
    assert cli.parse_pair("7=x=y", int_keys=True) == (7, "x=y")
    with pytest.raises(ValueError):
        cli.parse_pair("novalue")
    with pytest.raises(ValueError):
        cli.parse_pair("=1")


def test_read_pairs_skips_blank_and_comments():
    stream = io.StringIO("# header\n\nb=2\na=1\n")
    assert list(cli.read_pairs(stream)) == [("b", "2"), ("a", "1")]


def test_sort_prints_in_key_order(tmp_path, capsys):
    src = tmp_path / "pairs.txt"
    src.write_text("5=five\n3=three\n7=seven\n2=two\n4=four\n6=six\n8=eight\n")
    cli.main(["sort", str(src), "--int-keys", "--delete", "7"])
    out = capsys.readouterr().out.splitlines()
    assert out[0] == "size: 6"
    assert out[1] == "height: 3"
    assert out[2:] == ["2=two", "3=three", "4=four", "5=five", "6=six", "8=eight"]


def test_sort_reads_stdin(monkeypatch, capsys):
    monkeypatch.setattr(sys, "stdin", io.StringIO("b=2\na=1\nb=3\n"))
    cli.main(["sort"])
    out = capsys.readouterr().out.splitlines()
    assert out == ["size: 2", "height: 2", "a=1", "b=3"]


def test_sort_dash_reads_stdin(monkeypatch, capsys):
    monkeypatch.setattr(sys, "stdin", io.StringIO("2=b\n1=a\n"))
    cli.main(["sort", "-", "--int-keys"])
    assert capsys.readouterr().out.splitlines()[2:] == ["1=a", "2=b"]


def test_sort_handles_long_sorted_file(tmp_path, capsys):
    src = tmp_path / "sorted.txt"
    src.write_text("".join(f"{i}=v{i}\n" for i in range(1500)))
    cli.main(["sort", str(src), "--int-keys", "--delete", "1499", "--delete", "0"])
    out = capsys.readouterr().out.splitlines()
    assert out[0] == "size: 1498"
    assert out[1] == "height: 1498"
    assert out[2] == "1=v1"
    assert out[-1] == "1498=v1498"


def test_sort_missing_file_is_usage_error(tmp_path, capsys):
    with pytest.raises(SystemExit) as exc:
        cli.main(["sort", str(tmp_path / "nope.txt")])
    assert exc.value.code == 2
    assert "nope.txt" in capsys.readouterr().err


def test_sort_rejects_malformed_line(tmp_path, capsys):
    src = tmp_path / "bad.txt"
    src.write_text("oops\n")
    with pytest.raises(SystemExit) as exc:
        cli.main(["sort", str(src)])
    assert exc.value.code == 2
    assert "expected key=value" in capsys.readouterr().err


def test_buckets_report(tmp_path, capsys):
    report = tmp_path / "buckets.csv"
    cli.main(["buckets", "--count", "2000", "--max-key", "22", "--seed", "1", "--csv", str(report)])
    out = capsys.readouterr().out.splitlines()
    assert out[0].startswith("Slot 0: ")
    assert len([line for line in out if line.startswith("Slot ")]) == 11

    printed = [int(line.split(": ")[1].split()[0]) for line in out if line.startswith("Slot ")]
    assert sum(printed) == 2000

    with open(report, newline="") as f:
        rows = list(csv.reader(f))
    assert rows[0] == ["Slot", "Elements"]
    counts = [int(count) for _, count in rows[1:]]
    assert counts == printed
    # Every draw is kept, repeated numbers included.
    assert sum(counts) == 2000
    assert all(count > 0 for count in counts)


def test_buckets_default_keeps_every_draw(capsys):
    cli.main(["buckets", "--seed", "1"])
    out = capsys.readouterr().out.splitlines()
    counts = [int(line.split(": ")[1].split()[0]) for line in out]
    assert len(counts) == 11
    assert sum(counts) == 10000


def test_buckets_rejects_zero_buckets(capsys):
    with pytest.raises(SystemExit):
        cli.main(["buckets", "--buckets", "0"])
    assert "bucket_count" in capsys.readouterr().err


def test_command_required():
    with pytest.raises(SystemExit):
        cli.main([])
