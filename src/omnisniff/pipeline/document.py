"""Document classification orchestrator."""

from __future__ import annotations

from omnisniff._utils import DEFAULT_SAMPLE_SIZE
from omnisniff.pipeline import ContentType
from omnisniff.pipeline.container import detect_zip_container
from omnisniff.pipeline.heuristics import classify_text
from omnisniff.pipeline.signature import starts_with
from omnisniff.pipeline.text import is_likely_text
from omnisniff.registry import BINARY, PDF

_PDF_MAGIC = b"%PDF"
_ZIP_MAGIC = b"PK\x03\x04"


def detect_document(
    data: bytes, sample_size: int = DEFAULT_SAMPLE_SIZE
) -> ContentType:
    """Classify *data* as one of the twelve document types.

    PDF and ZIP magic are checked before the text screen because their
    headers are not valid UTF-8 text.  Anything unrecognized, including
    empty input and unparsable ZIP archives, is binary.

    :param data: The raw byte data to examine.
    :param sample_size: Number of leading bytes screened for text.
    :returns: The classified :class:`ContentType`, never ``None``.
    """
    if not data:
        return BINARY

    if starts_with(data, 0, _PDF_MAGIC):
        return PDF

    if starts_with(data, 0, _ZIP_MAGIC):
        container = detect_zip_container(data)
        return container if container is not None else BINARY

    if is_likely_text(data, sample_size):
        return classify_text(data)

    return BINARY
