import io

import pandas as pd

from main import main, parse_args


def test_check_single_expression(capsys):
    assert main(parse_args(["--expression", "1234+++"])) == 0
    assert capsys.readouterr().out == "10\n"


def test_check_with_decode(capsys):
    main(parse_args(["--expression", "12+34+*", "--decode"]))
    assert capsys.readouterr().out == "Not 10\n(1 + 2) * (3 + 4)\n"


def test_invalid_expression_is_not_decoded(capsys):
    main(parse_args(["--expression", "12+3*45", "--decode"]))
    assert capsys.readouterr().out == "Invalid input\n"


def test_reads_stdin(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("1234+++\n\n1234///\n123+-*\n"))
    assert main(parse_args([])) == 0
    assert capsys.readouterr().out.splitlines() == ["10", "Not an integer", "Invalid input"]


def test_encode(capsys):
    assert main(parse_args(["--encode", "(1 + 2) * (3 + 4)"])) == 0
    assert capsys.readouterr().out == "12+34+*\n"


def test_encode_error(capsys):
    assert main(parse_args(["--encode", "(1 + 2"])) == 1
    assert "unbalanced parentheses" in capsys.readouterr().err


def test_batch(tmp_path, capsys):
    batch_path = tmp_path / "expressions.txt"
    batch_path.write_text("1234+++\n\n11+8+8*\nabc\n", encoding="utf-8")
    output_path = tmp_path / "report.csv"

    assert main(parse_args(["--batch_path", str(batch_path), "--output_path", str(output_path)])) == 0

    report = pd.read_csv(output_path, dtype=str)
    assert report['expression'].tolist() == ["1234+++", "11+8+8*", "abc"]
    assert report['result'].tolist() == ["10", "Not 10", "Invalid input"]
    assert "1 + 2 + 3 + 4" in capsys.readouterr().out


def test_check_infix(capsys):
    assert main(parse_args(["--infix", "(1 + 9) * 2 / 2"])) == 0
    assert capsys.readouterr().out == "10\n"


def test_batch_writes_default_output_path(tmp_path, monkeypatch):
    batch_path = tmp_path / "expressions.txt"
    batch_path.write_text("1234+++\n", encoding="utf-8")
    monkeypatch.chdir(tmp_path)

    assert main(parse_args(["--batch_path", str(batch_path)])) == 0

    report = pd.read_csv(tmp_path / "check_results.csv", dtype=str)
    assert report['result'].tolist() == ["10"]
