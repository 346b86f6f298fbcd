"""ZIP container introspection for Office Open XML formats."""

from __future__ import annotations

import io
import logging
import struct
import zipfile

from omnisniff.pipeline import ContentType
from omnisniff.registry import DOCX, PPTX, XLSX, ZIP

logger = logging.getLogger(__name__)

# Entry name prefixes that identify an Office Open XML package.
_OFFICE_PREFIXES: tuple[tuple[str, ContentType], ...] = (
    ("word/", DOCX),
    ("xl/", XLSX),
    ("ppt/", PPTX),
)


def detect_zip_container(data: bytes) -> ContentType | None:
    """Peek inside a ZIP archive to tell Office documents from plain ZIPs.

    Only the archive's central directory is read; no entry is decompressed
    and nested archives are not opened.  The first entry (in archive order)
    under ``word/``, ``xl/`` or ``ppt/`` decides between DOCX, XLSX and
    PPTX.

    :param data: Raw bytes starting with the ZIP local file header magic.
    :returns: The Office type, :data:`~omnisniff.registry.ZIP` when no entry
        matches, or ``None`` when the archive cannot be parsed.
    """
    try:
        with zipfile.ZipFile(io.BytesIO(data)) as archive:
            names = archive.namelist()
    except (
        zipfile.BadZipFile,
        NotImplementedError,
        OSError,
        EOFError,
        ValueError,
        struct.error,
    ) as e:
        logger.debug("unparsable ZIP archive: %s", e)
        return None

    for name in names:
        for prefix, content_type in _OFFICE_PREFIXES:
            if name.startswith(prefix):
                logger.debug("ZIP entry %r identifies %s", name, content_type.extension)
                return content_type
    return ZIP
