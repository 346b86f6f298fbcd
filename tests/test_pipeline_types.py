# tests/test_pipeline_types.py
from __future__ import annotations

import dataclasses

import pytest

from omnisniff.pipeline import ContentType, ImageType


def test_content_type_fields():
    t = ContentType(value="application/pdf", extension="pdf")
    assert t.value == "application/pdf"
    assert t.extension == "pdf"


def test_content_type_to_dict():
    t = ContentType("text/plain", "txt")
    assert t.to_dict() == {"value": "text/plain", "extension": "txt"}


def test_content_type_is_frozen():
    t = ContentType("text/plain", "txt")
    with pytest.raises(dataclasses.FrozenInstanceError):
        t.extension = "md"  # type: ignore[misc]


def test_content_type_equality_is_by_value():
    assert ContentType("text/csv", "csv") == ContentType("text/csv", "csv")
    assert ContentType("text/csv", "csv") != ContentType("text/plain", "txt")
    assert hash(ContentType("text/csv", "csv")) == hash(ContentType("text/csv", "csv"))


def test_content_type_to_base64():
    t = ContentType("application/pdf", "pdf")
    assert t.to_base64(b"%PDF") == "JVBERg=="


def test_content_type_to_data_uri():
    t = ContentType("application/pdf", "pdf")
    assert t.to_data_uri(b"%PDF") == "data:application/pdf;base64,JVBERg=="


def test_image_type_flags_default_to_false():
    t = ImageType("image/x-icon", "ico")
    assert t.supported_as_attachment is False
    assert t.supports_alpha_channel is False
    assert t.needs_legacy_conversion is False


def test_image_type_is_a_content_type():
    t = ImageType("image/png", "png", True, True, False)
    assert isinstance(t, ContentType)
    assert t.to_data_uri(b"\x89PNG").startswith("data:image/png;base64,")


def test_image_type_to_dict_includes_flags():
    t = ImageType("image/gif", "gif", True, True, True)
    assert t.to_dict() == {
        "value": "image/gif",
        "extension": "gif",
        "supported_as_attachment": True,
        "supports_alpha_channel": True,
        "needs_legacy_conversion": True,
    }


def test_image_type_is_frozen():
    t = ImageType("image/png", "png", True, True, False)
    with pytest.raises(dataclasses.FrozenInstanceError):
        t.supports_alpha_channel = False  # type: ignore[misc]
