"""Errors raised by the ALTSV codec.

Decoding never raises; only the encode path has failure modes.
"""

class AltsvError(Exception):
    """Base error for this package."""


class ArgumentNotMappable(AltsvError, TypeError):
    """Raised when the object to encode cannot be turned into a mapping."""


class RenderError(AltsvError):
    """Raised when a key or value cannot be rendered as text.

    The offending object is kept in `item`; the original exception is
    chained as `__cause__`.
    """

    def __init__(self, message: str, item: object = None) -> None:
        super().__init__(message)
        self.item = item
