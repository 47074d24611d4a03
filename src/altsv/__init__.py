"""altsv - labeled tab separated values.

One record per line, `key:value` fields separated by tabs, with backslash
escapes for the separators so any text survives a round trip.
"""

from .document import decode_document, load, parse
from .errors import AltsvError, ArgumentNotMappable, RenderError
from .records import Record, decode_line, parse_line
from .render import encode

dump = encode

__version__ = "0.1.0"
__all__ = [
    "decode_document",
    "decode_line",
    "encode",
    "parse",
    "parse_line",
    "load",
    "dump",
    "Record",
    "AltsvError",
    "ArgumentNotMappable",
    "RenderError",
]
