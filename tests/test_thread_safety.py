"""Thread-safety integration tests for concurrent classification calls."""

from __future__ import annotations

import threading

from conftest import build_zip

from omnisniff import classify_audio_video, classify_document, classify_image

_SAMPLES = [
    (classify_document, build_zip("word/document.xml"), "docx"),
    (classify_document, build_zip("notes.txt"), "zip"),
    (classify_document, b"name,age\nJohn,30\nJane,25\n", "csv"),
    (classify_document, b"<!DOCTYPE html><html></html>", "html"),
    (classify_document, b"Hello\x07World", "bin"),
    (classify_image, b"RIFF\x24\x00\x00\x00WEBPVP8 ", "webp"),
    (classify_audio_video, b"\x00\x00\x00\x20ftypqt  \x00\x00", "mov"),
]


def _run_concurrent_classify(n_workers: int, iterations: int) -> list[str]:
    """Spawn *n_workers* threads per sample, each classifying *iterations* times.

    Returns a list of error strings (empty = success).
    """
    errors: list[str] = []
    barrier = threading.Barrier(n_workers * len(_SAMPLES))

    def worker(classify, data: bytes, expected: str) -> None:
        barrier.wait()
        for _ in range(iterations):
            result = classify(data)
            extension = result.extension if result is not None else None
            if extension != expected:
                errors.append(f"Expected {expected!r}, got {extension!r}")

    threads = []
    for _ in range(n_workers):
        for classify, data, expected in _SAMPLES:
            t = threading.Thread(target=worker, args=(classify, data, expected))
            threads.append(t)
            t.start()

    for t in threads:
        t.join()

    return errors


def test_concurrent_classify_no_corruption():
    """Multiple threads classifying simultaneously must not corrupt results."""
    errors = _run_concurrent_classify(n_workers=3, iterations=20)
    assert not errors, "Thread-safety violations:\n" + "\n".join(errors[:10])


def test_concurrent_classify_high_concurrency():
    """Stress test with a higher thread count."""
    errors = _run_concurrent_classify(n_workers=8, iterations=10)
    assert not errors, "Thread-safety violations:\n" + "\n".join(errors[:10])
