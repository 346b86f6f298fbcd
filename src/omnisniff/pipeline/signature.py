"""Magic-byte signatures and the ordered matching cascade."""

from __future__ import annotations

import dataclasses
from collections.abc import Iterable

from omnisniff.pipeline import ContentType

#: Container magics shared by formats that need a sub-signature.
RIFF_MAGIC = b"RIFF"
FTYP_MAGIC = b"ftyp"


def starts_with(data: bytes, offset: int, prefix: bytes) -> bool:
    """Return True if *data* holds *prefix* at *offset*.

    Buffers too short for the window simply do not match.
    """
    end = offset + len(prefix)
    if len(data) < end:
        return False
    return data[offset:end] == prefix


@dataclasses.dataclass(frozen=True, slots=True)
class Signature:
    """A magic-byte signature producing *content_type* when it matches.

    A signature with a *sub_magic* only matches when both the primary
    magic and the sub-signature are present, as with RIFF or ISO-BMFF
    containers that share a primary magic.
    """

    content_type: ContentType
    magic: bytes
    offset: int = 0
    sub_magic: bytes | None = None
    sub_offset: int = 0

    def matches(self, data: bytes) -> bool:
        """Return True if *data* carries this signature."""
        if not starts_with(data, self.offset, self.magic):
            return False
        if self.sub_magic is not None:
            return starts_with(data, self.sub_offset, self.sub_magic)
        return True


def match_first(
    signatures: Iterable[Signature], data: bytes
) -> ContentType | None:
    """Return the content type of the first matching signature, in order.

    :param signatures: Signatures in priority order.
    :param data: The raw byte data to examine.
    :returns: The matched :class:`ContentType`, or ``None``.
    """
    for signature in signatures:
        if signature.matches(data):
            return signature.content_type
    return None
