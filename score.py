"""Entrypoint: score incomplete navigation lines and report the middle score."""

from __future__ import annotations

import argparse
import json
import sys
from pathlib import Path
from typing import Any, Dict, List, Sequence

from syntax_scoring.data import LineReport, load_bundled_lines, read_lines, write_report
from syntax_scoring.data.lines import DEFAULT_RESOURCE
from syntax_scoring.pipeline import AnalysisResult, analyse_lines, print_summary


def _parse_yaml_scalar(raw: str) -> Any:
    text = raw.strip()
    if text == "":
        return ""
    lowered = text.lower()
    if lowered in {"null", "none", "~"}:
        return None
    if lowered in {"true", "yes", "on"}:
        return True
    if lowered in {"false", "no", "off"}:
        return False
    try:
        return int(text)
    except ValueError:
        pass
    # Quoted strings
    if (text.startswith('"') and text.endswith('"')) or (text.startswith("'") and text.endswith("'")):
        return text[1:-1]
    return text


def _load_simple_yaml(path: Path) -> dict[str, Any]:
    """Load a minimal YAML subset: top-level key/value scalars.

    Supported:
    - `key: value` pairs (no nesting)
    - comments starting with `#`
    - scalars: int/bool/null/str
    """

    data: dict[str, Any] = {}
    with path.open("r", encoding="utf-8") as f:
        for line_no, raw in enumerate(f, start=1):
            line = raw.strip()
            if not line or line.startswith("#"):
                continue
            if ":" not in line:
                raise ValueError(f"Invalid YAML at {path}:{line_no}: expected 'key: value'")
            key_raw, value_raw = line.split(":", 1)
            key = key_raw.strip()
            if not key:
                raise ValueError(f"Invalid YAML at {path}:{line_no}: empty key")
            value_part = value_raw.strip()
            if value_part and not (value_part.startswith('"') or value_part.startswith("'")):
                value_part = value_part.split("#", 1)[0].strip()
            data[key] = _parse_yaml_scalar(value_part)
    return data


def _load_config_file(path: Path) -> dict[str, Any]:
    if not path.exists():
        raise FileNotFoundError(path)
    suffix = path.suffix.lower()
    if suffix == ".json":
        with path.open("r", encoding="utf-8") as f:
            payload = json.load(f)
        if not isinstance(payload, dict):
            raise ValueError("JSON config must be an object at top-level")
        return payload
    if suffix in {".yaml", ".yml"}:
        return _load_simple_yaml(path)
    raise ValueError(f"Unsupported config format: {path.suffix} (expected .yaml/.yml/.json)")


def _apply_config_defaults(parser: argparse.ArgumentParser, config: dict[str, Any]) -> None:
    # Config keys may use CLI-style kebab-case.
    normalised: dict[str, Any] = {str(k).replace("-", "_"): v for k, v in config.items()}

    valid_dests = {
        action.dest for action in parser._actions if action.dest not in {"help", "config"}  # noqa: SLF001
    }
    unknown = sorted([k for k in normalised.keys() if k not in valid_dests])
    if unknown:
        raise ValueError(f"Unknown config keys: {unknown}")

    defaults: dict[str, Any] = {}
    for action in parser._actions:  # noqa: SLF001
        dest = action.dest
        if dest not in valid_dests or dest not in normalised:
            continue
        value = normalised[dest]

        # argparse does not type-cast defaults.
        if value is None:
            converted = None
        elif isinstance(action, argparse.BooleanOptionalAction):
            if isinstance(value, bool):
                converted = value
            elif isinstance(value, str):
                converted = _parse_yaml_scalar(value)
                if not isinstance(converted, bool):
                    raise ValueError(f"Config key '{dest}' must be boolean")
            else:
                raise ValueError(f"Config key '{dest}' must be boolean")
        elif action.type is Path:
            converted = Path(str(value))
        elif action.type is str:
            converted = str(value)
        else:
            converted = value

        defaults[dest] = converted

    parser.set_defaults(**defaults)


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Score incomplete bracket lines.")
    parser.add_argument(
        "--config",
        type=Path,
        default=None,
        help="Optional YAML/JSON config file. CLI args override values from this file.",
    )
    parser.add_argument(
        "--input",
        type=Path,
        default=None,
        help="Text file with one bracket line per row. Overrides --resource.",
    )
    parser.add_argument(
        "--resource",
        type=str,
        default=DEFAULT_RESOURCE,
        help="Bundled input to use when --input is not given.",
    )
    parser.add_argument(
        "--echo",
        action=argparse.BooleanOptionalAction,
        default=True,
        help="Print the input lines before the results.",
    )
    parser.add_argument(
        "--strict-median",
        action=argparse.BooleanOptionalAction,
        default=False,
        help="Fail instead of warning when the number of scores is even.",
    )
    parser.add_argument(
        "--outdir",
        type=Path,
        default=None,
        help="Optional directory for lines.jsonl and metrics.json.",
    )
    return parser


def parse_args(argv: Sequence[str] | None = None) -> argparse.Namespace:
    # Pre-parse to locate config file (so we can apply defaults before full parsing).
    config_parser = argparse.ArgumentParser(add_help=False)
    config_parser.add_argument("--config", type=Path, default=None)
    known, _ = config_parser.parse_known_args(argv)

    parser = _build_parser()
    if known.config is not None:
        try:
            cfg = _load_config_file(known.config)
            _apply_config_defaults(parser, cfg)
        except Exception as exc:
            raise SystemExit(f"Failed to load config '{known.config}': {exc}") from exc

    return parser.parse_args(argv)


def load_input(args: argparse.Namespace) -> List[str]:
    if args.input is not None:
        if not args.input.exists():
            raise SystemExit(f"Input not found: {args.input}")
        return read_lines(args.input)
    try:
        return load_bundled_lines(args.resource)
    except FileNotFoundError as exc:
        raise SystemExit(str(exc)) from exc


def build_metrics(
    args: argparse.Namespace,
    analysis: AnalysisResult,
    argv: Sequence[str] | None = None,
) -> Dict[str, object]:
    return {
        "count": len(analysis.results),
        "corrupted": analysis.corrupted_count,
        "incomplete": analysis.incomplete_count,
        "complete": analysis.complete_count,
        "scores": analysis.scores,
        "median": analysis.median,
        "input": str(args.input) if args.input is not None else f"resource:{args.resource}",
        "config_file": str(args.config) if getattr(args, "config", None) else None,
        "cli_argv": list(argv) if argv is not None else sys.argv,
    }


def main(argv: Sequence[str] | None = None) -> None:
    args = parse_args(argv)
    lines = load_input(args)

    try:
        analysis = analyse_lines(lines, strict_median=args.strict_median)
    except (ValueError, OverflowError) as exc:
        raise SystemExit(str(exc)) from exc

    print_summary(lines, analysis, echo_lines=args.echo)

    if args.outdir is None:
        return

    outdir: Path = args.outdir
    outdir.mkdir(parents=True, exist_ok=True)
    report_path = outdir / "lines.jsonl"
    write_report(
        (LineReport.from_result(idx, result) for idx, result in enumerate(analysis.results, start=1)),
        report_path,
    )

    metrics_path = outdir / "metrics.json"
    with metrics_path.open("w", encoding="utf-8") as f:
        json.dump(build_metrics(args, analysis, argv), f, ensure_ascii=False, indent=2)

    print(f"Wrote line report to {report_path}")
    print(f"Wrote metrics to {metrics_path}")


if __name__ == "__main__":
    main()
