"""Command line interface for gradient-slice."""

from __future__ import annotations

import argparse
import json
import logging
from pathlib import Path
from typing import Any, Sequence

from pydantic import ValidationError

from . import __version__
from .config import GradientConfig, load_gradient_config, merge_overrides
from .gradient import WindowGradient, expected_window_count
from .logging_utils import configure_logging, log_event
from .reporting import gradient_frame, summarize_passes, write_frame

logger = logging.getLogger(__name__)


def _print_result(result: Any, as_json: bool) -> None:
    if as_json:
        print(json.dumps(result, indent=2))
    else:
        print(result)


def _add_source_arguments(parser: argparse.ArgumentParser) -> None:
    parser.add_argument("text", nargs="?", help="Input text (omit when using --file)")
    parser.add_argument("--file", type=Path, help="Read input text from a file instead")
    parser.add_argument("--config", type=Path, help="Gradient configuration (YAML or JSON)")
    parser.add_argument("--mode", choices=["chars", "bytes", "tokens"], help="How text becomes a sequence")
    parser.add_argument("--separator", help="Token separator for --mode tokens (default: whitespace)")
    parser.add_argument("--max-width", type=int, help="Largest window width to produce")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="gradient-slice",
        description="Enumerate every contiguous window of a sequence, width by width.",
    )
    parser.add_argument("--log-level", help="Logging level (default: $GRADIENT_SLICE_LOG_LEVEL or WARNING)")
    parser.add_argument("--json-logs", action="store_true", default=None, help="Emit JSON logs")

    subparsers = parser.add_subparsers(dest="command", required=True)

    windows = subparsers.add_parser("windows", help="Print each window in gradient order")
    _add_source_arguments(windows)
    windows.add_argument("--json", action="store_true", help="Emit windows as a JSON list")

    count = subparsers.add_parser("count", help="Print how many windows a sequence length yields")
    count.add_argument("length", type=int, help="Length of the input sequence")
    count.add_argument("--max-width", type=int, help="Largest window width to produce")
    count.add_argument("--json", action="store_true", help="Emit count as JSON")

    table = subparsers.add_parser("table", help="Tabulate window bounds and contents")
    _add_source_arguments(table)
    table.add_argument("--output", type=Path, help="Write the table to CSV, or JSON lines for .jsonl/.json")
    table.add_argument("--summary", action="store_true", help="Show one row per width pass instead")
    table.add_argument("--json", action="store_true", help="Emit table as JSON records")

    subparsers.add_parser("version", help="Display the installed version")

    return parser


def _build_gradient(args: argparse.Namespace) -> tuple[GradientConfig, WindowGradient]:
    if args.text is None and args.file is None:
        raise SystemExit("Provide input text or --file.")
    if args.text is not None and args.file is not None:
        raise SystemExit("Provide either input text or --file, not both.")

    try:
        config = load_gradient_config(args.config) if args.config else GradientConfig()
        config = merge_overrides(
            config,
            {"mode": args.mode, "separator": args.separator, "max_width": args.max_width},
        )
    except (FileNotFoundError, ValueError, ValidationError) as exc:
        raise SystemExit(f"Invalid configuration: {exc}")

    if args.file is not None and not args.file.exists():
        raise SystemExit(f"Input file not found: {args.file}")
    try:
        text = args.file.read_text(encoding=config.encoding) if args.file is not None else args.text
        return config, config.build(text)
    except (UnicodeError, LookupError) as exc:
        raise SystemExit(f"Could not convert input with encoding {config.encoding!r}: {exc}")


def main(argv: Sequence[str] | None = None) -> None:
    parser = build_parser()
    args = parser.parse_args(argv)
    configure_logging(level=args.log_level, json_logs=args.json_logs)

    if args.command == "windows":
        config, g = _build_gradient(args)
        log_event(logger, "windows", mode=config.mode, length=len(g), max_width=config.max_width)
        rendered = [config.render(window) for window in g]
        if args.json:
            _print_result(rendered, as_json=True)
        else:
            for item in rendered:
                print(repr(item) if isinstance(item, str) else item)
    elif args.command == "count":
        if args.length < 0:
            raise SystemExit("Length cannot be negative.")
        total = expected_window_count(args.length, args.max_width)
        if args.json:
            _print_result({"length": args.length, "max_width": args.max_width, "windows": total}, as_json=True)
        else:
            print(total)
    elif args.command == "table":
        config, g = _build_gradient(args)
        log_event(logger, "table", mode=config.mode, length=len(g), max_width=config.max_width)
        frame = gradient_frame(g, render=config.render)
        if args.summary:
            frame = summarize_passes(frame)
        if args.output:
            path = write_frame(frame, args.output)
            if args.json:
                _print_result({"output": str(path), "rows": len(frame)}, as_json=True)
            else:
                print(f"Wrote {len(frame)} rows to {path}")
        elif args.json:
            _print_result(json.loads(frame.to_json(orient="records")), as_json=True)
        else:
            print(frame.to_string(index=False))
    elif args.command == "version":
        print(__version__)


if __name__ == "__main__":
    main()
