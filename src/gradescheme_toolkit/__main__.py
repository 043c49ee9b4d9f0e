#!/usr/bin/env python3
"""Command line tools for grading scheme files.

    python -m gradescheme_toolkit validate scheme.json [--strict]
    python -m gradescheme_toolkit show initial_form_data.json [--points]
"""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from typing import Optional, Sequence

from gradescheme_toolkit import __version__
from gradescheme_toolkit.core.schemas.validator import ValidationError, validate_grading_scheme
from gradescheme_toolkit.core.utils.serialization import load_grading_scheme, load_initial_form_data
from gradescheme_toolkit.editor import GradingSchemeEditor

logger = logging.getLogger("gradescheme_toolkit")


def _cmd_validate(args: argparse.Namespace) -> int:
    try:
        scheme = load_grading_scheme(args.file)
        validate_grading_scheme(scheme, strict=args.strict)
    except ValidationError as e:
        for message in e.errors:
            print(f"{args.file}: {message}")
        return 1
    print(f"{args.file}: OK ({len(scheme.data)} rows, {scheme.kind})")
    return 0


def _cmd_show(args: argparse.Namespace) -> int:
    try:
        form_data = load_initial_form_data(args.file)
    except ValidationError as e:
        print(f"{args.file}: {e}")
        return 1
    editor = GradingSchemeEditor(form_data, "points" if args.points else "percentage")
    print(editor.title)
    for row in editor.rows:
        print(f"  {row.letter_grade:<8} {row.min_range_display:>8} - {row.max_range_display}")
    return 0


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="gradescheme", description="Grading scheme tools")
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    sub = parser.add_subparsers(dest="command", required=True)

    validate = sub.add_parser("validate", help="Validate a stored grading scheme JSON file")
    validate.add_argument("file", type=Path, help="Path to the scheme JSON")
    validate.add_argument("--strict", action="store_true", help="Also check the JSON Schema")
    validate.set_defaults(func=_cmd_validate)

    show = sub.add_parser("show", help="Print the display table of an initial form data file")
    show.add_argument("file", type=Path, help="Path to the initial form data JSON")
    show.add_argument("--points", action="store_true", help="Show the points representation")
    show.set_defaults(func=_cmd_show)
    return parser


def main(argv: Optional[Sequence[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.WARNING, format="%(message)s")
    logger.debug(f"gradescheme {__version__}: {args.command} {args.file}")
    return args.func(args)


if __name__ == "__main__":
    raise SystemExit(main())
