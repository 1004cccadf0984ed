"""`cldpy` command-line front end."""

from __future__ import annotations

import argparse
from pathlib import Path
import sys

from loguru import logger

from cldpy.ast import BuildOptions
from cldpy.diagnostics import render_diagnostic
from cldpy.errors import CldError, ParseError, to_diagnostic
from cldpy.log import configure_logging
from cldpy.pipeline import run_check
from cldpy.policy import DuplicatePolicy
from cldpy.world import AssemblyOptions

EXIT_OK = 0
EXIT_SEMANTIC_ERROR = 1
EXIT_SYNTAX_ERROR = 2


def build_arg_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="cldpy", description="Load and check CLD world documents.")
    commands = parser.add_subparsers(dest="command", required=True)

    check = commands.add_parser("check", help="Parse, assemble and validate one CLD file.")
    check.add_argument("file", type=Path, help="Path to a .cld document.")
    check.add_argument("--no-validate", action="store_true", help="Stop after world assembly.")
    check.add_argument(
        "--reject-duplicates",
        action="store_true",
        help="Fail on repeated field keys or declaration names instead of keeping the last one.",
    )
    check.add_argument("--verbose", action="store_true", help="Log pipeline steps to stderr.")
    return parser


def main(argv: list[str] | None = None) -> int:
    args = build_arg_parser().parse_args(argv)
    configure_logging(verbose=args.verbose)
    return _check(args.file, validate=not args.no_validate, reject_duplicates=args.reject_duplicates)


def _check(path: Path, *, validate: bool, reject_duplicates: bool) -> int:
    try:
        text = path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        print(f"Error reading file {path}: {exc}", file=sys.stderr)
        return EXIT_SYNTAX_ERROR

    print(f"Parsing CLD file: {path}")
    print(f"Content length: {len(text)} characters")

    policy = DuplicatePolicy.REJECT if reject_duplicates else DuplicatePolicy.OVERWRITE
    result = run_check(
        text,
        build_options=BuildOptions(duplicate_fields=policy),
        assembly_options=AssemblyOptions(duplicate_declarations=policy),
        validate=validate,
    )

    if result.error is not None and result.is_syntax_error:
        _report_syntax_error(result.error, text, path)
        return EXIT_SYNTAX_ERROR

    if result.citizens_built:
        print(f"Successfully parsed {len(result.citizens)} citizens")
        for citizen in result.citizens:
            print(citizen)

    if result.error is not None:
        _report_semantic_error(result.error, text, path)
        return EXIT_SEMANTIC_ERROR

    if validate:
        print("World is valid")
    logger.debug("check of {} finished without errors", path)
    return EXIT_OK


def _report_syntax_error(error: CldError, text: str, path: Path) -> None:
    diagnostics = error.diagnostics if isinstance(error, ParseError) else (to_diagnostic(error),)
    print(f"Syntax error in {path}:", file=sys.stderr)
    for diagnostic in diagnostics:
        print(f"  {render_diagnostic(diagnostic, text, path=str(path))}", file=sys.stderr)


def _report_semantic_error(error: CldError, text: str, path: Path) -> None:
    source = text if error.range is not None else None
    rendered = render_diagnostic(to_diagnostic(error), source, path=str(path))
    print(f"Semantic error: {rendered}", file=sys.stderr)


if __name__ == "__main__":
    raise SystemExit(main())
