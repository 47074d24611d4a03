"""Document decoding.

Pipeline shape:
- split text -> lines
- decode each line -> Record

Only '\n' (optionally preceded by '\r') ends a line; other Unicode line
separators are ordinary characters inside a field.
"""

from __future__ import annotations
import logging
import os
from typing import Any, Iterable

from .records import Record, parse_line

_log = logging.getLogger(__name__)


def split_lines(text: str) -> list[str]:
    """Split text on line endings; a trailing line ending adds no line."""
    if not text:
        return []
    lines = text.split("\n")
    if lines[-1] == "":
        lines.pop()
    return lines


def decode_document(text: str) -> list[Record]:
    """Decode every line of `text`, keeping line order."""
    return [parse_line(line) for line in split_lines(text)]


def decode_lines(lines: Iterable[str]) -> list[Record]:
    """Decode lines as read from a text stream."""
    return [parse_line(line) for line in lines]


def parse(source: Any) -> list[Record]:
    """Decode a string, an in-memory buffer or a text stream.

    Raises:
        TypeError: if `source` is none of those.
    """
    if isinstance(source, str):
        return decode_document(source)
    getvalue = getattr(source, "getvalue", None)
    if callable(getvalue):
        return decode_document(getvalue())
    if hasattr(source, "readline") and hasattr(source, "__iter__"):
        return decode_lines(source)
    raise TypeError(f"cannot parse {type(source).__name__}: expected str or a text stream")


def load(path_or_io: Any) -> list[Record]:
    """Decode a file given by path, or an already open text stream."""
    if isinstance(path_or_io, (str, os.PathLike)):
        with open(path_or_io, "r", encoding="utf-8") as fh:
            records = parse(fh)
        _log.debug("loaded %d records from %s", len(records), os.fspath(path_or_io))
        return records
    if hasattr(path_or_io, "readline"):
        return parse(path_or_io)
    raise TypeError("load only accepts a text stream or a path")
