"""Audio and video container classification by magic bytes."""

from __future__ import annotations

from omnisniff.pipeline import ContentType
from omnisniff.pipeline.signature import (
    FTYP_MAGIC,
    RIFF_MAGIC,
    Signature,
    match_first,
    starts_with,
)
from omnisniff.registry import AVI, FLAC, M4A, MKV, MOV, MP3, MP4, OGG, WAV, WEBM

_ID3_MAGIC = b"ID3"
_EBML_MAGIC = b"\x1a\x45\xdf\xa3"

# EBML DocType element ID followed by a one-byte size marker for "webm".
_WEBM_DOCTYPE = b"\x42\x82\x84webm"
_EBML_HEADER_SCAN_LIMIT = 64

_SIMPLE_SIGNATURES: tuple[Signature, ...] = (
    Signature(FLAC, b"fLaC"),
    Signature(OGG, b"OggS"),
)

_RIFF_SIGNATURES: tuple[Signature, ...] = (
    Signature(WAV, RIFF_MAGIC, sub_magic=b"WAVE", sub_offset=8),
    Signature(AVI, RIFF_MAGIC, sub_magic=b"AVI ", sub_offset=8),
)

_FTYP_BRANDS: dict[bytes, ContentType] = {
    b"isom": MP4,
    b"iso2": MP4,
    b"mp41": MP4,
    b"mp42": MP4,
    b"qt  ": MOV,
    b"M4A ": M4A,
}


def _is_mpeg_frame_sync(data: bytes) -> bool:
    """Check for an MPEG audio frame sync: 0xFF then three set high bits."""
    return len(data) > 1 and data[0] == 0xFF and data[1] & 0xE0 == 0xE0


def _detect_ebml(data: bytes) -> ContentType:
    """Tell WebM from generic Matroska by the EBML header's DocType."""
    if _WEBM_DOCTYPE in data[: _EBML_HEADER_SCAN_LIMIT]:
        return WEBM
    return MKV


def detect_audio_video(data: bytes) -> ContentType | None:
    """Guess the audio or video container type of *data* from its magic bytes.

    Recognized types: MP3, FLAC, OGG, MKV/WebM, WAV, AVI, MP4, MOV and M4A.
    An ISO-BMFF ``ftyp`` box with an unknown brand is left unrecognized
    rather than assumed to be MP4.

    :param data: The raw byte data to examine.
    :returns: The matched :class:`ContentType`, or ``None``.
    """
    if starts_with(data, 0, _ID3_MAGIC) or _is_mpeg_frame_sync(data):
        return MP3

    matched = match_first(_SIMPLE_SIGNATURES, data)
    if matched is not None:
        return matched

    if starts_with(data, 0, _EBML_MAGIC):
        return _detect_ebml(data)

    if len(data) >= 12:
        matched = match_first(_RIFF_SIGNATURES, data)
        if matched is not None:
            return matched

        if starts_with(data, 4, FTYP_MAGIC):
            return _FTYP_BRANDS.get(data[8:12])

    return None
