"""Command-line interface for webcharset."""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

import webcharset
from webcharset.config import DetectorConfig
from webcharset.detector import CharsetDetector


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Resolve the character encoding of web documents."
    )
    parser.add_argument("files", nargs="*", help="Files to detect encoding of")
    parser.add_argument(
        "--minimal", action="store_true", help="Output only the encoding name"
    )
    parser.add_argument(
        "--fast",
        action="store_true",
        default=None,
        help="Stop at the first signal instead of cross-checking HTTP and HTML",
    )
    parser.add_argument(
        "--max-length",
        type=int,
        default=None,
        help="Only examine the first N bytes (0 for no limit)",
    )
    parser.add_argument(
        "--content-type",
        default=None,
        help="Content-Type header value served with the documents",
    )
    parser.add_argument(
        "-v", "--verbose", action="store_true", help="Log detection steps to stderr"
    )
    parser.add_argument(
        "--version", action="version", version=f"webcharset {webcharset.__version__}"
    )
    return parser


def _format(label: str, candidate: webcharset.Candidate, minimal: bool) -> str:
    if minimal:
        return candidate.encoding
    return f"{label}: {candidate.encoding} ({candidate.source.value})"


def main(argv: list[str] | None = None) -> None:
    """Run the ``webcharset`` command-line tool.

    Settings not given on the command line are taken from the
    ``WEBCHARSET_FAST`` and ``WEBCHARSET_MAX_LENGTH`` environment variables.

    :param argv: Command-line arguments.  Defaults to ``sys.argv[1:]``.
    """
    args = _build_parser().parse_args(argv)

    if args.verbose:
        logging.basicConfig(
            level=logging.DEBUG, format="%(name)s: %(message)s", stream=sys.stderr
        )

    env_config = DetectorConfig.from_env()
    config = DetectorConfig(
        fast=env_config.fast if args.fast is None else args.fast,
        max_length=env_config.max_length
        if args.max_length is None
        else args.max_length,
    )
    detector = CharsetDetector(config)
    headers = {"content-type": args.content_type} if args.content_type else None

    failed = False
    if args.files:
        for filepath in args.files:
            try:
                with Path(filepath).open("rb") as f:
                    candidate = detector.detect_candidate(f, headers)
            except OSError as e:
                print(f"webcharset: {filepath}: {e}", file=sys.stderr)
                failed = True
                continue
            print(_format(filepath, candidate, args.minimal))
    else:
        candidate = detector.detect_candidate(sys.stdin.buffer, headers)
        print(_format("stdin", candidate, args.minimal))

    if failed:
        sys.exit(1)


if __name__ == "__main__":
    main()
