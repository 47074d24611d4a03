"""Record encoding.

Turns a mapping-like object into one escaped ALTSV line:
    {"host": "127.0.0.1", "path": "/a:b"}  ->  "host:127.0.0.1\tpath:/a\\:b"

Keys and values are rendered independently; the pairs keep the mapping's
iteration order. Nothing is written until every item rendered, so a failing
item leaves no partial output behind.
"""

from __future__ import annotations
from collections.abc import Mapping
from enum import Enum
from typing import Any

from .errors import ArgumentNotMappable, RenderError

_ESCAPE_TABLE = str.maketrans({
    "\r": "\\r",
    "\n": "\\n",
    "\t": "\\t",
    ":": "\\:",
    "\\": "\\\\",
})

# Conversions tried, in order, on objects that are not mappings already.
MAPPING_CONVERSIONS = ("to_dict", "_asdict")


def as_mapping(obj: Any) -> Mapping:
    """Coerce `obj` into a mapping.

    Raises:
        ArgumentNotMappable: if no conversion applies.
    """
    if isinstance(obj, Mapping):
        return obj

    for name in MAPPING_CONVERSIONS:
        convert = getattr(obj, name, None)
        if callable(convert):
            converted = convert()
            if not isinstance(converted, Mapping):
                raise ArgumentNotMappable(
                    f"{name}() returned {type(converted).__name__}, not a mapping"
                )
            return converted

    if obj is None:
        return {}

    raise ArgumentNotMappable("argument responds to neither to_dict() nor _asdict()")


def render_scalar(item: Any) -> str:
    """Render a key or value as plain (unescaped) text."""
    if isinstance(item, Enum):
        return item.name
    if isinstance(item, str):
        return item
    if item is None:
        return ""
    try:
        return str(item)
    except Exception as ex:
        raise RenderError(f"cannot render {type(item).__name__}: {ex}", item) from ex


def escape(text: str) -> str:
    return text.translate(_ESCAPE_TABLE)


def render_record(fields: Any) -> str:
    """Render a mapping-like object to its line form.

    Raises:
        ArgumentNotMappable, RenderError
    """
    parts: list[str] = []
    for key, value in as_mapping(fields).items():
        parts.append(escape(render_scalar(key)))
        parts.append(":")
        parts.append(escape(render_scalar(value)))
        parts.append("\t")
    return "".join(parts).rstrip()


encode = render_record
