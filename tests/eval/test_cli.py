import json
import os

from eval.aggregate import AggregateResult
from eval.cli import build_parser, format_duration, format_results_table, main


def test_format_duration():
    assert format_duration(0.01234) == "12.34ms"
    assert format_duration(2.5) == "2.50s"


def test_format_results_table_sorted():
    results = {
        "Slow": AggregateResult(trials=5, average=9.0, minimum=1, maximum=20, zero_count=0, elapsed=1.5),
        "Fast": AggregateResult(trials=5, average=3.25, minimum=0, maximum=8, zero_count=2, elapsed=0.02),
    }
    table = format_results_table(results).splitlines()
    assert table[0].startswith("Strategy")
    assert set(table[1]) == {"-"}
    assert table[2].startswith("Fast")
    assert "3.25" in table[2]
    assert table[3].startswith("Slow")


def test_parser_strategy_list():
    args = build_parser().parse_args(["run", "--trials", "5", "--strategies", "MinPoints, Hybrid"])
    assert args.trials == 5
    assert args.strategies == ["MinPoints", "Hybrid"]


def test_run_writes_outputs(tmp_path, capsys):
    out = tmp_path / "exp"
    rc = main(["run", "--trials", "5", "--strategies", "MinPoints,ZeroOrMin", "--no-progress",
               "--no-plot", "--out", str(out)])
    assert rc == 0
    printed = capsys.readouterr().out
    assert "MinPoints" in printed and "ZeroOrMin" in printed

    summary = json.loads((out / "summary.json").read_text(encoding="utf-8"))
    assert summary["trial_count"] == 5
    assert {r["strategy"] for r in summary["results"]} == {"MinPoints", "ZeroOrMin"}
    averages = [r["average"] for r in summary["results"]]
    assert averages == sorted(averages)
    assert os.path.exists(out / "config.json")


def test_run_unknown_strategy(capsys):
    rc = main(["run", "--trials", "5", "--strategies", "Nope", "--no-progress"])
    assert rc == 2
    assert "Unknown strategy" in capsys.readouterr().err


def test_list(capsys):
    assert main(["list"]) == 0
    out = capsys.readouterr().out
    assert "BigZeroOrMin" in out
    assert "legacy" in out
