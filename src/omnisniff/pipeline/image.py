"""Image classification by magic bytes."""

from __future__ import annotations

from omnisniff._utils import SVG_SCAN_LIMIT
from omnisniff.pipeline import ImageType
from omnisniff.pipeline.signature import (
    FTYP_MAGIC,
    RIFF_MAGIC,
    Signature,
    match_first,
)
from omnisniff.registry import (
    BMP,
    GIF,
    HEIC,
    HEIF,
    ICO,
    JPEG,
    JXL,
    PNG,
    SVG,
    TIFF,
    WEBP,
)

_SVG_NAMESPACE = "http://www.w3.org/2000/svg"

# Ordered: RIFF and ftyp entries rely on their sub-signatures to
# disambiguate formats sharing the same container.
_SIGNATURES: tuple[Signature, ...] = (
    Signature(JPEG, b"\xff\xd8\xff"),
    Signature(PNG, b"\x89PNG"),
    Signature(GIF, b"GIF8"),
    Signature(BMP, b"BM"),
    Signature(WEBP, RIFF_MAGIC, sub_magic=b"WEBP", sub_offset=8),
    Signature(ICO, b"\x00\x00\x01\x00"),
    Signature(SVG, b"<svg"),
    Signature(HEIC, FTYP_MAGIC, offset=4, sub_magic=b"heic", sub_offset=8),
    Signature(HEIF, FTYP_MAGIC, offset=4, sub_magic=b"mif1", sub_offset=8),
    Signature(JXL, b"\xff\x0a"),
    Signature(JXL, b"JXL "),
    Signature(JXL, b"\x00\x00\x00\x0cJXL \r\n\x87\n"),
    Signature(TIFF, b"II*\x00"),
    Signature(TIFF, b"MM\x00*"),
)


def is_likely_svg(data: bytes) -> bool:
    """Return True if *data* opens with an XML declaration for an SVG document."""
    head = data[:SVG_SCAN_LIMIT].decode("ascii", errors="replace").lower()
    return head.startswith("<?xml") and ("<svg" in head or _SVG_NAMESPACE in head)


def detect_image(data: bytes) -> ImageType | None:
    """Guess the image type of *data* from its magic bytes.

    Recognized types: JPEG, PNG, GIF, BMP, WEBP, ICO, SVG, HEIC, HEIF, JXL
    and TIFF.  SVG documents that start with an XML declaration are caught
    by a secondary check after the signature table.

    :param data: The raw byte data to examine.
    :returns: The matched :class:`ImageType`, or ``None`` if not an image.
    """
    if len(data) < 4:
        return None

    matched = match_first(_SIGNATURES, data)
    if matched is not None:
        return matched  # type: ignore[return-value]

    if is_likely_svg(data):
        return SVG

    return None
