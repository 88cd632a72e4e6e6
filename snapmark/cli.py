"""Command-line interface for snapmark."""

from __future__ import annotations

import argparse
import sys
from pathlib import Path
from typing import Iterable, Optional

from .format_markup import format_markup
from .io_utils import read_text, write_text
from .models import Settings
from .settings import current_settings, load_settings_file
from .snapshots import compare_snapshot, write_snapshot


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="snapmark",
        description="Format HTML markup into a diffable snapshot.",
    )
    parser.add_argument(
        "--version",
        action="version",
        version="snapmark 0.1.0",
        help="Show the snapmark version and exit.",
    )
    parser.add_argument("input", type=Path, help="Markup file to format.")
    parser.add_argument(
        "--config",
        type=Path,
        help="YAML file of serializer settings (camelCase or snake_case keys).",
    )
    output = parser.add_mutually_exclusive_group()
    output.add_argument("--out", type=Path, help="Write the snapshot here instead of stdout.")
    output.add_argument(
        "--check",
        type=Path,
        metavar="SNAPSHOT",
        help="Compare with a stored snapshot; print a diff and exit 1 when they differ.",
    )
    return parser


def _load_settings(config: Optional[Path]) -> Settings:
    if config is None:
        return current_settings()
    if not config.exists():
        raise SystemExit(f"Settings file not found: {config}")
    return load_settings_file(config)


def main(argv: Optional[Iterable[str]] = None) -> None:
    parser = build_parser()
    args = parser.parse_args(list(argv) if argv is not None else None)

    if not args.input.exists():
        raise SystemExit(f"Markup file not found: {args.input}")
    settings = _load_settings(args.config)
    formatted = format_markup(read_text(args.input), settings)

    if args.check:
        matches, diff = compare_snapshot(args.check, formatted)
        if not matches:
            sys.stderr.write(diff)
            sys.exit(1)
        return
    if args.out:
        write_snapshot(args.out, formatted)
        return
    sys.stdout.write(formatted + "\n")


__all__ = ["build_parser", "main"]


if __name__ == "__main__":
    main()
