"""Command-line interface for altsv.

Intentionally simple:
- reads from stdin or a file
- `decode`: ALTSV in, one JSON object per line out
- `encode`: JSON Lines in, ALTSV out
- writes to stdout
"""

from __future__ import annotations
import argparse
import json
import logging
import sys
from typing import Iterable, TextIO

from .errors import AltsvError
from .records import parse_line
from .render import encode

_log = logging.getLogger("altsv.cli")


def _open_input(path: str | None) -> TextIO:
    if path is None or path == "-":
        return sys.stdin
    return open(path, "r", encoding="utf-8")


def _setup_logging(verbose: bool) -> None:
    h = logging.StreamHandler(sys.stderr)
    h.setFormatter(logging.Formatter("[%(levelname)s] %(name)s: %(message)s"))
    root = logging.getLogger("altsv")
    root.handlers[:] = [h]
    root.setLevel(logging.DEBUG if verbose else logging.WARNING)


def decode_stream(lines: Iterable[str]) -> Iterable[str]:
    """Yield one JSON object per ALTSV line."""
    for line in lines:
        yield json.dumps(parse_line(line), ensure_ascii=False)


def encode_stream(lines: Iterable[str]) -> Iterable[str]:
    """Yield one ALTSV line per JSON object; blank lines are skipped.

    Raises:
        ValueError (invalid JSON), ArgumentNotMappable, RenderError
    """
    for lineno, line in enumerate(lines, 1):
        if not line.strip():
            continue
        obj = json.loads(line)
        _log.debug("line %d: %d fields", lineno, len(obj) if isinstance(obj, dict) else 0)
        yield encode(obj)


def make_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(prog="altsv", description="Convert between ALTSV and JSON Lines.")
    p.add_argument("-v", "--verbose", action="store_true", help="Log debug messages to stderr")
    sub = p.add_subparsers(dest="command", required=True)
    for name, help_text in (
        ("decode", "ALTSV to JSON Lines"),
        ("encode", "JSON Lines to ALTSV"),
    ):
        sp = sub.add_parser(name, help=help_text)
        sp.add_argument("path", nargs="?", default="-", help="Input file path or '-' for stdin")
    return p


def main(argv: list[str] | None = None) -> int:
    args = make_parser().parse_args(argv)
    _setup_logging(args.verbose)

    convert = decode_stream if args.command == "decode" else encode_stream
    try:
        with _open_input(args.path) as fh:
            out = list(convert(fh))
    except (AltsvError, OSError, ValueError) as ex:
        sys.stderr.write(f"error: {ex}\n")
        return 2

    _log.debug("%s: %d lines written", args.command, len(out))
    for line in out:
        sys.stdout.write(line + "\n")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
