"""Command-line entry point for translating phone numbers into words.

Usage: ``phone-encoder [WORDS_FILE] [NUMBERS_FILE] [--count] [--output PATH]``.
Both inputs are read completely before the first line is written, so an
unreadable file aborts the run without partial output.
"""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from typing import Iterable, Optional, TextIO

from .common.config import load_settings
from .common.files import read_lines
from .service import EncodingService

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"
logger = logging.getLogger(__name__)


def _configure_logging(verbose: bool) -> None:
    level = logging.DEBUG if verbose else logging.INFO
    logging.basicConfig(level=level, format=LOG_FORMAT)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description=(
            "Print every encoding of phone numbers as dictionary words under "
            "the fixed letter-to-digit mapping."
        ),
    )
    parser.add_argument(
        "words_file",
        nargs="?",
        help="Word list, one word per line (default: $PHONE_ENCODER_WORDS or tests/words.txt).",
    )
    parser.add_argument(
        "numbers_file",
        nargs="?",
        help="Phone numbers, one per line (default: $PHONE_ENCODER_NUMBERS or tests/numbers.txt).",
    )
    parser.add_argument(
        "--count",
        action="store_true",
        help="Print only the total number of solutions instead of the solutions.",
    )
    parser.add_argument(
        "--output",
        type=Path,
        help="Optional path to write the results. Defaults to stdout.",
    )
    parser.add_argument(
        "--progress",
        action="store_true",
        help="Show a progress bar on stderr while numbers are processed.",
    )
    parser.add_argument(
        "--verbose",
        action="store_true",
        help="Enable debug logging.",
    )
    return parser


def main(argv: Optional[Iterable[str]] = None) -> int:
    args_list = list(argv) if argv is not None else sys.argv[1:]
    args = build_parser().parse_args(args_list)
    _configure_logging(args.verbose)
    return encode_from_args(args)


def encode_from_args(args: argparse.Namespace) -> int:
    """Load both inputs, then write solutions (or their count).

    Input failures are reported on stderr with exit code 2.
    """
    try:
        settings = load_settings(args.words_file, args.numbers_file)
    except ValueError as exc:
        _emit_error(f"Invalid configuration: {exc}")
        return 2

    try:
        service = EncodingService.from_settings(settings)
        numbers = read_lines(settings.numbers_path)
    except OSError as exc:
        _emit_error(_describe_io_error(exc))
        return 2

    logger.info(
        "Encoding numbers",
        extra={"words": str(settings.words_path), "numbers": len(numbers)},
    )

    if args.output:
        try:
            args.output.parent.mkdir(parents=True, exist_ok=True)
            with args.output.open("w", encoding="utf-8", newline="\n") as handle:
                _write_results(service, numbers, handle, count=args.count, progress=args.progress)
        except OSError as exc:
            _emit_error(f"Cannot write output file {args.output}: {exc.strerror or exc}")
            return 2
    else:
        _write_results(service, numbers, sys.stdout, count=args.count, progress=args.progress)
        sys.stdout.flush()
    return 0


def _write_results(
    service: EncodingService,
    numbers: Iterable[str],
    stream: TextIO,
    *,
    count: bool,
    progress: bool,
) -> None:
    if count:
        stream.write(f"{service.count_solutions(numbers, progress=progress)}\n")
        return
    for line in service.encode_numbers(numbers, progress=progress):
        stream.write(line)
        stream.write("\n")


def _describe_io_error(exc: OSError) -> str:
    if exc.filename:
        return f"Cannot read input file {exc.filename}: {exc.strerror or exc}"
    return f"Cannot read input: {exc}"


def _emit_error(message: str) -> None:
    """Send an error message to stderr without raising an exception."""
    print(message, file=sys.stderr)


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
