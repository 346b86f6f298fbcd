"""Text likelihood screening."""

from __future__ import annotations

import codecs
import unicodedata

from omnisniff._utils import DEFAULT_SAMPLE_SIZE, WHITESPACE


def _decode_sample(data: bytes, sample_size: int) -> str:
    """Strictly decode the first *sample_size* bytes of *data* as UTF-8.

    A multi-byte sequence cut off by the sample boundary is left pending
    instead of failing; a buffer that itself ends mid-sequence still fails.

    :raises UnicodeDecodeError: If the sample is not valid UTF-8.
    """
    decoder = codecs.getincrementaldecoder("utf-8")(errors="strict")
    final = len(data) <= sample_size
    return decoder.decode(data[:sample_size], final=final)


def is_likely_text(data: bytes, sample_size: int = DEFAULT_SAMPLE_SIZE) -> bool:
    """Return True if *data* looks like UTF-8 text rather than binary content.

    Rejects the buffer if its leading *sample_size* bytes are not valid
    UTF-8 (overlong forms, stray continuation bytes and encoded surrogates
    all fail), or if any decoded character is a control character other
    than whitespace.  Tabs, carriage returns and newlines are text; NEL
    (U+0085) is not.

    :param data: The raw byte data to examine.
    :param sample_size: Maximum number of leading bytes to screen.
    :returns: ``True`` for likely text, ``False`` otherwise.
    """
    try:
        sample = _decode_sample(data, sample_size)
    except UnicodeDecodeError:
        return False

    for char in sample:
        if unicodedata.category(char) == "Cc" and char not in WHITESPACE:
            return False
    return True
