import json

import pytest

from stats_report.cli import build_parser, main


def test_parser_defaults():
    args = build_parser().parse_args(["numbers.txt"])
    assert args.location == "numbers.txt"
    assert args.statistic == "all"
    assert args.encoding == "utf-8"
    assert args.json is False


def test_parser_rejects_unknown_statistic():
    with pytest.raises(SystemExit):
        build_parser().parse_args(["numbers.txt", "--statistic", "variance"])


def test_cli_prints_all_statistics(write_numbers, capsys):
    path = write_numbers("numbers.txt", "1\n1\n2\n2\n3\n")

    exit_code = main([str(path), "--log-level", "ERROR"])

    assert exit_code == 0
    assert capsys.readouterr().out.splitlines() == [
        "mean: 1.8",
        "median: 2.0",
        "mode: [1.0, 2.0]",
    ]


def test_cli_single_statistic(write_numbers, capsys):
    path = write_numbers("numbers.txt", "7\n34\n2\n")

    exit_code = main([str(path), "--statistic", "median", "--log-level", "ERROR"])

    assert exit_code == 0
    assert capsys.readouterr().out.strip() == "median: 7.0"


def test_cli_json_output_for_empty_file(write_numbers, capsys):
    """NaN is printed as null in JSON output"""
    path = write_numbers("empty.txt", "")

    exit_code = main([str(path), "--json", "--log-level", "ERROR"])

    assert exit_code == 0
    assert json.loads(capsys.readouterr().out) == {
        "mean": None,
        "median": None,
        "mode": [],
    }


def test_cli_missing_file(tmp_path, capsys):
    missing = tmp_path / "missing.txt"

    exit_code = main([str(missing), "--log-level", "CRITICAL"])

    assert exit_code == 1
    captured = capsys.readouterr()
    assert captured.out == ""
    assert f"File not found: {missing}" in captured.err


def test_cli_unknown_encoding(write_numbers, capsys):
    """An unknown --encoding is reported, not raised"""
    path = write_numbers("numbers.txt", "1\n2\n")

    exit_code = main([str(path), "--encoding", "bogus", "--log-level", "CRITICAL"])

    assert exit_code == 1
    captured = capsys.readouterr()
    assert captured.out == ""
    assert f"Cannot read file: {path}" in captured.err
