"""Shared test fixtures."""

from __future__ import annotations

import io
import sys
import zipfile
from collections.abc import Callable
from pathlib import Path

import pytest

# Add scripts/ to sys.path so we can import utils
sys.path.insert(0, str(Path(__file__).parent.parent / "scripts"))


def build_zip(*names: str) -> bytes:
    """Build an in-memory ZIP archive holding one small entry per name."""
    buffer = io.BytesIO()
    with zipfile.ZipFile(buffer, "w", compression=zipfile.ZIP_DEFLATED) as archive:
        for name in names:
            archive.writestr(name, f"<{name}/>")
    return buffer.getvalue()


@pytest.fixture
def make_zip() -> Callable[..., bytes]:
    """Return a builder for in-memory ZIP archives with the given entry names."""
    return build_zip


@pytest.fixture
def corrupted_zip() -> bytes:
    """A local file header whose declared name length runs past the buffer."""
    return (
        b"PK\x03\x04"  # Local file header signature
        b"\x00\x00"  # Version needed
        b"\x00\x00"  # Flags
        b"\x00\x00"  # Compression method
        b"\x00\x00"  # Last mod time
        b"\x00\x00"  # Last mod date
        b"\x00\x00\x00\x00"  # CRC-32
        b"\x00\x00\x00\x00"  # Compressed size
        b"\x00\x00\x00\x00"  # Uncompressed size
        b"\xff\xff"  # File name length = 65535, truncated
        b"\x00\x00"  # Extra field length
    )


@pytest.fixture
def unsupported_version_zip() -> bytes:
    """An archive whose central directory demands an unsupported zip version."""
    data = bytearray(build_zip("test.txt"))
    # "Version needed to extract" of the last central directory header
    data[data.rindex(b"PK\x01\x02") + 6] = 0xFF
    return bytes(data)
