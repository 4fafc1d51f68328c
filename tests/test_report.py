import pandas as pd

from config.config import validate_config
from core import RPNEvaluator
from utils.report import tabulate_formulas, summarize
import main


def test_tabulate_formulas():
    df = tabulate_formulas(["6 1 - 1 1 + *", "1 0 /", "9223372036854775807"])
    assert list(df.columns) == ["formula", "infix", "value", "error"]
    assert str(df["value"].dtype) == "Int64"
    assert df.loc[0, "infix"] == "(6 - 1) * (1 + 1)"
    assert df.loc[0, "value"] == 10
    assert pd.isna(df.loc[0, "error"])
    assert df.loc[1, "error"] == "division by zero"
    assert pd.isna(df.loc[1, "value"])
    assert df.loc[2, "value"] == 9223372036854775807
    assert summarize(df) == {"total": 3, "ok": 2, "failed": 1}


def test_tabulate_uses_given_evaluator():
    lines = []
    df = tabulate_formulas(["1 2 +"], evaluator=RPNEvaluator(trace=True, sink=lines.append))
    assert df.loc[0, "value"] == 3
    assert lines[-1] == "[] [3]"


def test_tabulate_empty():
    df = tabulate_formulas([])
    assert len(df) == 0
    assert summarize(df) == {"total": 0, "ok": 0, "failed": 0}


def test_validate_config():
    validate_config()


def test_main(tmp_path, capsys):
    output_path = tmp_path / "results.csv"
    args = main.build_parser().parse_args(["4 3 1 / * 2 -", "1 1 ^", "--output_path", str(output_path)])
    assert main.main(args) == 1
    out = capsys.readouterr().out
    assert "4 * 3 / 1 - 2 = 10" in out
    assert "1 1 ^: error: invalid token at 3" in out
    saved = pd.read_csv(output_path)
    assert list(saved["formula"]) == ["4 3 1 / * 2 -", "1 1 ^"]


def test_main_all_ok():
    args = main.build_parser().parse_args(["2 3 +"])
    assert main.main(args) == 0


def test_tabulate_very_long_literal():
    df = tabulate_formulas(["9" * 5000, "1 2 +"])
    assert df.loc[0, "error"] == "invalid syntax at 1"
    assert pd.isna(df.loc[0, "value"])
    assert df.loc[1, "value"] == 3
    assert pd.isna(df.loc[1, "error"])


def test_main_prints_successful_formulas(capsys):
    args = main.build_parser().parse_args(["6 1 - 1 1 + *", "2 3 +"])
    assert main.main(args) == 0
    assert capsys.readouterr().out == "(6 - 1) * (1 + 1) = 10\n2 + 3 = 5\n"
