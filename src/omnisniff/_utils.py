"""Internal shared utilities for omnisniff."""

from __future__ import annotations

#: Default number of leading bytes screened for text likelihood.
DEFAULT_SAMPLE_SIZE: int = 1024

#: Number of leading characters searched for HTML markers.
HTML_SCAN_LIMIT: int = 1024

#: Number of leading bytes searched for an XML-declared SVG document.
SVG_SCAN_LIMIT: int = 1024

#: Maximum number of lines sampled by the CSV heuristic.
CSV_SAMPLE_LINES: int = 10

#: Characters treated as whitespace by the text screen and when trimming
#: text. U+0085 and the no-break spaces (U+00A0, U+2007, U+202F) are not
#: whitespace here.
WHITESPACE: str = (
    "\t\n\x0b\x0c\r\x1c\x1d\x1e\x1f "
    "\u1680\u2000\u2001\u2002\u2003\u2004\u2005\u2006\u2008\u2009\u200a"
    "\u2028\u2029\u205f\u3000"
)


def _coerce_bytes(data: bytes | bytearray | memoryview | None) -> bytes:
    """Return *data* as :class:`bytes`, mapping ``None`` to ``b""``.

    :raises TypeError: If *data* is not a bytes-like object.
    """
    if data is None:
        return b""
    if isinstance(data, bytes):
        return data
    if isinstance(data, (bytearray, memoryview)):
        return bytes(data)
    msg = f"expected a bytes-like object or None, not {type(data).__name__}"
    raise TypeError(msg)


def _validate_sample_size(sample_size: int) -> None:
    """Raise ValueError if *sample_size* is not a positive integer."""
    if (
        isinstance(sample_size, bool)
        or not isinstance(sample_size, int)
        or sample_size < 1
    ):
        msg = "sample_size must be a positive integer"
        raise ValueError(msg)
