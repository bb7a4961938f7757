"""
PGN Comments – command-line interface
=====================================

Usage
-----
::

    python -m pgn_comments.cli SOURCE [COMMENT ...] [OPTIONS]

Options
-------
--comments-file, -i   File with one mangled comment per line.
--encoding            Encoding of SOURCE (default: utf-8).
--output, -o          Output file path (default: stdout).
--format, -f          Output format: ``text`` (default) or ``json``.
--verbose, -v         Enable DEBUG logging.

Examples
--------
::

    python -m pgn_comments.cli Partida_08.pgn "{Lasblancastienendospiezas.}"
    python -m pgn_comments.cli file:///games/Partida_08.pgn -i comments.txt -f json
"""
from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path

from .errors import SpaceRecoveryError
from .pipeline.space_recovery import SpaceRecoverer

logger = logging.getLogger(__name__)


def _build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(
        prog="pgn-comments",
        description="Recover spaces stripped from PGN comments by a parser",
    )
    p.add_argument("source", help="Original PGN file (path or file: URI)")
    p.add_argument(
        "comments",
        nargs="*",
        metavar="COMMENT",
        help="Parsed comment(s) with spaces removed",
    )
    p.add_argument(
        "--comments-file", "-i",
        default="",
        metavar="FILE",
        help="Read additional comments from FILE, one per line",
    )
    p.add_argument(
        "--encoding",
        default="utf-8",
        help="Encoding of the source file (default: utf-8)",
    )
    p.add_argument(
        "--output", "-o",
        default="-",
        metavar="FILE",
        help="Output file (default: stdout)",
    )
    p.add_argument(
        "--format", "-f",
        choices=["text", "json"],
        default="text",
        help="Output format (default: text)",
    )
    p.add_argument(
        "--verbose", "-v",
        action="store_true",
        help="Enable verbose (DEBUG) logging",
    )
    return p


def _read_comments_file(path: str) -> list[str]:
    text = Path(path).read_text(encoding="utf-8")
    return [line.strip() for line in text.splitlines() if line.strip()]


def main(argv: list[str] | None = None) -> int:
    parser = _build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )

    comments: list[str] = list(args.comments)
    if args.comments_file:
        try:
            comments.extend(_read_comments_file(args.comments_file))
        except (OSError, UnicodeDecodeError) as exc:
            print(f"error: cannot read {args.comments_file}: {exc}", file=sys.stderr)
            return 1
    if not comments:
        print("error: no comment given (pass COMMENT or --comments-file)", file=sys.stderr)
        return 2

    recoverer = SpaceRecoverer(encoding=args.encoding)
    try:
        results = recoverer.reconstruct_all(comments, args.source)
    except SpaceRecoveryError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 1

    for r in results:
        if not r.exact:
            logger.warning("No exact match for %r (line %d)", r.comment, r.line_index + 1)

    if args.format == "json":
        output_text = json.dumps([r.to_dict() for r in results], indent=2, ensure_ascii=False)
    else:
        output_text = "\n".join(r.text for r in results)

    if args.output == "-":
        print(output_text)
    else:
        Path(args.output).write_text(output_text + "\n", encoding="utf-8")
        print(f"Output written to {args.output}", file=sys.stderr)

    return 0


if __name__ == "__main__":
    sys.exit(main())
