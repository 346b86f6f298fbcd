"""Registry of every content type the detectors can produce.

Each detector family has a fixed vocabulary.  The document family always
resolves to one of its twelve types, with :data:`BINARY` as the universal
fallback; the image and audio/video families may leave a buffer
unrecognized.
"""

from __future__ import annotations

from omnisniff.enums import MediaFamily
from omnisniff.pipeline import ContentType, ImageType

# Document family
PDF = ContentType("application/pdf", "pdf")
DOCX = ContentType(
    "application/vnd.openxmlformats-officedocument.wordprocessingml.document", "docx"
)
XLSX = ContentType(
    "application/vnd.openxmlformats-officedocument.spreadsheetml.sheet", "xlsx"
)
PPTX = ContentType(
    "application/vnd.openxmlformats-officedocument.presentationml.presentation",
    "pptx",
)
ZIP = ContentType("application/zip", "zip")
CSV = ContentType("text/csv", "csv")
JSON = ContentType("application/json", "json")
HTML = ContentType("text/html", "html")
XML = ContentType("application/xml", "xml")
MARKDOWN = ContentType("text/markdown", "md")
TEXT = ContentType("text/plain", "txt")
BINARY = ContentType("application/octet-stream", "bin")

# Image family: (attachment, alpha, legacy)
JPEG = ImageType("image/jpeg", "jpeg", True, False, False)
PNG = ImageType("image/png", "png", True, True, False)
GIF = ImageType("image/gif", "gif", True, True, True)
BMP = ImageType("image/bmp", "bmp", True, False, True)
WEBP = ImageType("image/webp", "webp", True, True, False)
ICO = ImageType("image/x-icon", "ico", False, False, False)
SVG = ImageType("image/svg+xml", "svg", True, False, False)
HEIC = ImageType("image/heic", "heic", False, False, False)
HEIF = ImageType("image/heif", "heif", False, False, False)
JXL = ImageType("image/jxl", "jxl", False, True, False)
TIFF = ImageType("image/tiff", "tiff", False, False, True)

# Audio/video family
MP3 = ContentType("audio/mpeg", "mp3")
WAV = ContentType("audio/wav", "wav")
FLAC = ContentType("audio/flac", "flac")
OGG = ContentType("audio/ogg", "ogg")
M4A = ContentType("audio/mp4", "m4a")
MP4 = ContentType("video/mp4", "mp4")
MOV = ContentType("video/quicktime", "mov")
MKV = ContentType("video/x-matroska", "mkv")
WEBM = ContentType("video/webm", "webm")
AVI = ContentType("video/x-msvideo", "avi")

DOCUMENT_TYPES: tuple[ContentType, ...] = (
    PDF,
    DOCX,
    XLSX,
    PPTX,
    ZIP,
    CSV,
    JSON,
    HTML,
    XML,
    MARKDOWN,
    TEXT,
    BINARY,
)

IMAGE_TYPES: tuple[ImageType, ...] = (
    JPEG,
    PNG,
    GIF,
    BMP,
    WEBP,
    ICO,
    SVG,
    HEIC,
    HEIF,
    JXL,
    TIFF,
)

AUDIO_VIDEO_TYPES: tuple[ContentType, ...] = (
    MP3,
    WAV,
    FLAC,
    OGG,
    M4A,
    MP4,
    MOV,
    MKV,
    WEBM,
    AVI,
)

_TYPES_BY_FAMILY: dict[MediaFamily, tuple[ContentType, ...]] = {
    MediaFamily.DOCUMENT: DOCUMENT_TYPES,
    MediaFamily.IMAGE: IMAGE_TYPES,
    MediaFamily.AUDIO_VIDEO: AUDIO_VIDEO_TYPES,
}


def get_types(family: MediaFamily) -> tuple[ContentType, ...]:
    """Return the vocabulary of content types for *family*."""
    return _TYPES_BY_FAMILY[family]


def lookup_extension(media_type: str | None) -> str:
    """Return the file extension for a MIME value, or ``"bin"`` if unknown.

    Matching is case-insensitive and searches the document family first,
    then images, then audio/video.

    :param media_type: A MIME value such as ``"application/pdf"``.
    :returns: The extension without a leading dot.
    """
    if media_type:
        wanted = media_type.lower()
        for types in _TYPES_BY_FAMILY.values():
            for content_type in types:
                if content_type.value == wanted:
                    return content_type.extension
    return BINARY.extension
