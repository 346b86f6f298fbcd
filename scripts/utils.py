"""Shared utilities for scripts and tests."""

from __future__ import annotations

from pathlib import Path


def format_bytes(n: int) -> str:
    """Format byte count as human-readable string."""
    if n >= 1 << 20:
        return f"{n / (1 << 20):.1f} MiB"
    if n >= 1 << 10:
        return f"{n / (1 << 10):.1f} KiB"
    return f"{n} B"


def collect_sample_files(data_dir: Path) -> list[tuple[str, Path]]:
    """Collect (expected_extension, filepath) tuples from sample data.

    Each subdirectory of *data_dir* is named after the extension its files
    are expected to classify as, e.g. ``pdf/``, ``docx/``, ``md/``.  Files
    directly under *data_dir* and hidden directories are ignored.
    """
    sample_files: list[tuple[str, Path]] = []
    for extension_dir in sorted(data_dir.iterdir()):
        if not extension_dir.is_dir() or extension_dir.name.startswith("."):
            continue
        sample_files.extend(
            (extension_dir.name, filepath)
            for filepath in sorted(extension_dir.iterdir())
            if filepath.is_file()
        )
    return sample_files
