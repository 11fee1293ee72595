from __future__ import annotations

import json
from pathlib import Path

import pytest

import score


def test_score_config_loads_and_cli_overrides(tmp_path: Path) -> None:
    cfg = tmp_path / "nav.yaml"
    cfg.write_text(
        "\n".join(
            [
                "# sample run",
                "resource: navigation",
                "echo: false",
                "strict-median: true  # fail on even counts",
                f"outdir: {tmp_path / 'out'}",
            ]
        )
        + "\n",
        encoding="utf-8",
    )

    args = score.parse_args(["--config", str(cfg), "--echo"])

    assert args.resource == "navigation"
    assert args.echo is True
    assert args.strict_median is True
    assert args.outdir == tmp_path / "out"
    assert args.input is None


def test_score_json_config(tmp_path: Path) -> None:
    cfg = tmp_path / "nav.json"
    cfg.write_text(json.dumps({"input": "lines.txt", "echo": False}), encoding="utf-8")

    args = score.parse_args(["--config", str(cfg)])

    assert args.input == Path("lines.txt")
    assert args.echo is False


def test_score_config_unknown_key_raises(tmp_path: Path) -> None:
    cfg = tmp_path / "bad.yaml"
    cfg.write_text("unknown_key: 123\n", encoding="utf-8")

    with pytest.raises(SystemExit) as excinfo:
        score.parse_args(["--config", str(cfg)])

    assert "Unknown config keys" in str(excinfo.value)


def test_score_config_non_boolean_toggle_raises(tmp_path: Path) -> None:
    cfg = tmp_path / "bad.yaml"
    cfg.write_text("echo: sometimes\n", encoding="utf-8")

    with pytest.raises(SystemExit) as excinfo:
        score.parse_args(["--config", str(cfg)])

    assert "must be boolean" in str(excinfo.value)


def test_repo_config_file_loads() -> None:
    cfg = Path(__file__).resolve().parents[1] / "configs" / "navigation.yaml"
    assert cfg.exists(), "Expected configs/navigation.yaml to exist"

    args = score.parse_args(["--config", str(cfg)])
    assert args.resource == "navigation"
    assert args.strict_median is True


def test_main_prints_median(capsys) -> None:
    score.main(["--no-echo"])
    out = capsys.readouterr().out.splitlines()
    assert out[-1] == "Middle score: 288957"
    assert "Expected ], but found } instead." in out
    assert not out[0].startswith("lines:")


def test_main_writes_outputs(tmp_path: Path, capsys) -> None:
    lines_path = tmp_path / "input.txt"
    lines_path.write_text("(]\n((\n[\n()\n", encoding="utf-8")
    outdir = tmp_path / "run"

    score.main(["--input", str(lines_path), "--outdir", str(outdir), "--strict-median"])

    metrics = json.loads((outdir / "metrics.json").read_text(encoding="utf-8"))
    assert metrics["count"] == 4
    assert metrics["corrupted"] == 1
    assert metrics["incomplete"] == 2
    assert metrics["complete"] == 1
    assert metrics["scores"] == [0, 2, 6]
    assert metrics["median"] == 2
    report_lines = (outdir / "lines.jsonl").read_text(encoding="utf-8").splitlines()
    assert len(report_lines) == 4
    assert json.loads(report_lines[0])["status"] == "corrupted"


def test_main_missing_input_exits(tmp_path: Path) -> None:
    with pytest.raises(SystemExit) as excinfo:
        score.main(["--input", str(tmp_path / "missing.txt")])
    assert "Input not found" in str(excinfo.value)


def test_main_strict_median_on_even_count_exits(tmp_path: Path) -> None:
    lines_path = tmp_path / "input.txt"
    lines_path.write_text("(\n[\n", encoding="utf-8")
    with pytest.raises(SystemExit) as excinfo:
        score.main(["--input", str(lines_path), "--strict-median"])
    assert "Even number of scores" in str(excinfo.value)


def test_main_overflowing_line_exits_with_line_number(tmp_path: Path) -> None:
    lines_path = tmp_path / "input.txt"
    lines_path.write_text("(\n" + "(" * 30 + "\n[\n", encoding="utf-8")
    with pytest.raises(SystemExit) as excinfo:
        score.main(["--input", str(lines_path)])
    assert "Line 2" in str(excinfo.value)
    assert "64-bit" in str(excinfo.value)


def test_metrics_record_programmatic_argv(tmp_path: Path) -> None:
    outdir = tmp_path / "run"
    argv = ["--no-echo", "--outdir", str(outdir)]

    score.main(argv)

    metrics = json.loads((outdir / "metrics.json").read_text(encoding="utf-8"))
    assert metrics["cli_argv"] == argv
    assert metrics["input"] == "resource:navigation"
    assert metrics["median"] == 288957
