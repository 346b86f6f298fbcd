"""Command-line interface for omnisniff."""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

import omnisniff
from omnisniff._utils import DEFAULT_SAMPLE_SIZE
from omnisniff.enums import MediaFamily

_FAMILY_NAMES = [f.value for f in MediaFamily]
_UNRECOGNIZED = "unrecognized"


def _describe(content_type: omnisniff.ContentType | None, minimal: bool) -> str:
    if content_type is None:
        return _UNRECOGNIZED
    if minimal:
        return content_type.extension
    return f"{content_type.value} ({content_type.extension})"


def main(argv: list[str] | None = None) -> None:
    """Run the ``omnisniff`` command-line tool.

    :param argv: Command-line arguments.  Defaults to ``sys.argv[1:]``.
    """
    parser = argparse.ArgumentParser(
        description="Detect the content type of files from their bytes."
    )
    parser.add_argument("files", nargs="*", help="Files to classify")
    parser.add_argument(
        "-f",
        "--family",
        default=MediaFamily.DOCUMENT.value,
        choices=_FAMILY_NAMES,
        help="Detector family to classify against (default: document)",
    )
    parser.add_argument(
        "--minimal", action="store_true", help="Output only the file extension"
    )
    parser.add_argument(
        "--sample-size",
        type=int,
        default=DEFAULT_SAMPLE_SIZE,
        help="Leading bytes screened for text (document family only)",
    )
    parser.add_argument(
        "-v", "--verbose", action="store_true", help="Enable debug logging"
    )
    parser.add_argument(
        "--version", action="version", version=f"omnisniff {omnisniff.__version__}"
    )

    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(name)s: %(levelname)s: %(message)s",
    )

    if args.sample_size < 1:
        parser.error("--sample-size must be a positive integer")

    family = MediaFamily(args.family)

    if not args.files:
        data = sys.stdin.buffer.read()
        result = omnisniff.classify(data, family, args.sample_size)
        if args.minimal:
            print(_describe(result, minimal=True))
        else:
            print(f"stdin: {_describe(result, minimal=False)}")
        return

    failed = False
    for filepath in args.files:
        try:
            data = Path(filepath).read_bytes()
        except OSError as e:
            print(f"omnisniff: {filepath}: {e}", file=sys.stderr)
            failed = True
            continue
        result = omnisniff.classify(data, family, args.sample_size)
        if args.minimal:
            print(_describe(result, minimal=True))
        else:
            print(f"{filepath}: {_describe(result, minimal=False)}")

    if failed:
        sys.exit(1)


if __name__ == "__main__":
    main()
