"""Enumerations for omnisniff."""

import enum


class MediaFamily(enum.Enum):
    """The detector family a caller classifies a buffer against."""

    DOCUMENT = "document"
    IMAGE = "image"
    AUDIO_VIDEO = "audio_video"
