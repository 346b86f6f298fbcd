"""Classification pipeline stages and shared types."""

from __future__ import annotations

import base64
import dataclasses


@dataclasses.dataclass(frozen=True, slots=True)
class ContentType:
    """A classified content type.

    Frozen dataclass holding the canonical MIME value and the file extension
    (without a leading dot) returned by every detector.
    """

    value: str
    extension: str

    def to_dict(self) -> dict[str, str | bool]:
        """Convert this content type to a plain dict.

        :returns: A dict with ``'value'`` and ``'extension'`` keys.
        """
        return {"value": self.value, "extension": self.extension}

    def to_base64(self, content: bytes) -> str:
        """Encode *content* as a Base64 string."""
        return base64.b64encode(content).decode("ascii")

    def to_data_uri(self, content: bytes) -> str:
        """Encode *content* as ``data:<value>;base64,<data>``."""
        return f"data:{self.value};base64,{self.to_base64(content)}"


@dataclasses.dataclass(frozen=True, slots=True)
class ImageType(ContentType):
    """An image content type annotated with capability flags.

    The flags are metadata for image sanitizers: whether the format can be
    sent as an attachment as-is, whether it may carry an alpha channel that
    needs flattening, and whether it is a legacy format that needs
    re-encoding to PNG.
    """

    supported_as_attachment: bool = False
    supports_alpha_channel: bool = False
    needs_legacy_conversion: bool = False

    def to_dict(self) -> dict[str, str | bool]:
        """Convert this image type to a plain dict including its flags."""
        return {
            "value": self.value,
            "extension": self.extension,
            "supported_as_attachment": self.supported_as_attachment,
            "supports_alpha_channel": self.supports_alpha_channel,
            "needs_legacy_conversion": self.needs_legacy_conversion,
        }
