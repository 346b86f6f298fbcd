"""Content type sniffing for raw byte buffers."""

from __future__ import annotations

from omnisniff._utils import (
    DEFAULT_SAMPLE_SIZE,
    _coerce_bytes,
    _validate_sample_size,
)
from omnisniff.enums import MediaFamily
from omnisniff.pipeline import ContentType, ImageType
from omnisniff.pipeline.audiovideo import detect_audio_video
from omnisniff.pipeline.document import detect_document
from omnisniff.pipeline.image import detect_image
from omnisniff.registry import lookup_extension

__version__ = "1.0.0"
__all__ = [
    "ContentType",
    "ImageType",
    "MediaFamily",
    "classify",
    "classify_audio_video",
    "classify_document",
    "classify_image",
    "extension_for",
]


def classify_document(
    data: bytes | bytearray | memoryview | None,
    sample_size: int = DEFAULT_SAMPLE_SIZE,
) -> ContentType:
    """Classify a document buffer.

    Always returns one of ``pdf``, ``zip``, ``docx``, ``xlsx``, ``pptx``,
    ``json``, ``xml``, ``html``, ``csv``, ``md``, ``txt`` or ``bin``.
    ``None``, empty input and anything unrecognized are ``bin``.

    :param data: The raw bytes to classify.
    :param sample_size: Number of leading bytes screened for UTF-8 text.
    :returns: The classified :class:`ContentType`.
    :raises TypeError: If *data* is not bytes-like.
    :raises ValueError: If *sample_size* is not a positive integer.
    """
    _validate_sample_size(sample_size)
    return detect_document(_coerce_bytes(data), sample_size)


def classify_image(data: bytes | bytearray | memoryview | None) -> ImageType | None:
    """Classify an image buffer by its magic bytes.

    :param data: The raw bytes to classify.
    :returns: The :class:`ImageType` with its capability flags, or ``None``
        if *data* is not a recognized image.
    :raises TypeError: If *data* is not bytes-like.
    """
    return detect_image(_coerce_bytes(data))


def classify_audio_video(
    data: bytes | bytearray | memoryview | None,
) -> ContentType | None:
    """Classify an audio or video buffer by its container magic bytes.

    :param data: The raw bytes to classify.
    :returns: The :class:`ContentType`, or ``None`` if unrecognized.
    :raises TypeError: If *data* is not bytes-like.
    """
    return detect_audio_video(_coerce_bytes(data))


def classify(
    data: bytes | bytearray | memoryview | None,
    family: MediaFamily = MediaFamily.DOCUMENT,
    sample_size: int = DEFAULT_SAMPLE_SIZE,
) -> ContentType | None:
    """Classify *data* with the detector for *family*.

    *sample_size* only applies to :attr:`MediaFamily.DOCUMENT`.
    """
    if family is MediaFamily.IMAGE:
        return classify_image(data)
    if family is MediaFamily.AUDIO_VIDEO:
        return classify_audio_video(data)
    return classify_document(data, sample_size)


def extension_for(media_type: str | None) -> str:
    """Return the file extension for a MIME value, or ``"bin"`` if unknown.

    :param media_type: A MIME value, e.g. ``"application/pdf"``.
    :returns: The extension without a leading dot, e.g. ``"pdf"``.
    """
    return lookup_extension(media_type)
