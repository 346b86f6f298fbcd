"""Heuristic classification of text content.

The checks are structural only: a buffer that starts with ``{`` and ends
with ``}`` is JSON-like whether or not it parses.  The cascade runs in a
fixed order and the first heuristic that accepts the text wins:

1. JSON (outer braces or brackets)
2. XML, refined to HTML when an HTML marker appears near the start
3. CSV (consistent comma or semicolon counts)
4. Markdown (ATX headings, inline links, code fences)
5. Plain text
"""

from __future__ import annotations

import re

from omnisniff._utils import CSV_SAMPLE_LINES, HTML_SCAN_LIMIT, WHITESPACE
from omnisniff.pipeline import ContentType
from omnisniff.registry import CSV, HTML, JSON, MARKDOWN, TEXT, XML

_HTML_MARKERS: tuple[str, ...] = ("<!doctype html", "<html", "<head", "<body")

# ATX heading of any level at the start of a line, including the first.
_ATX_HEADING_RE = re.compile(r"^#{1,6} ", re.MULTILINE)


def looks_like_json(text: str) -> bool:
    """Check if *text* starts with ``{`` or ``[`` and ends with its closer."""
    return (text.startswith("{") and text.endswith("}")) or (
        text.startswith("[") and text.endswith("]")
    )


def looks_like_xml(text: str) -> bool:
    """Check if *text* starts with ``<`` and ends with ``>``."""
    return text.startswith("<") and text.endswith(">")


def looks_like_html(text: str) -> bool:
    """Check the head of XML-like *text* for a doctype or html/head/body tag."""
    head = text[:HTML_SCAN_LIMIT].lower()
    return any(marker in head for marker in _HTML_MARKERS)


def looks_like_csv(text: str) -> bool:
    """Check for consistent comma or semicolon separated values.

    Samples at most the first :data:`~omnisniff._utils.CSV_SAMPLE_LINES`
    lines.  The delimiter is ``;`` if the first line contains one, else
    ``,``.  At least ``min(lines, 3)`` non-blank lines must carry exactly
    as many delimiters as the first line.
    """
    lines = text.split("\n", CSV_SAMPLE_LINES)[:CSV_SAMPLE_LINES]
    if len(lines) < 2:
        return False

    delimiter = ";" if ";" in lines[0] else ","
    expected = lines[0].count(delimiter)
    if expected == 0:
        return False

    consistent = sum(
        1 for line in lines if line.strip() and line.count(delimiter) == expected
    )
    return consistent >= min(len(lines), 3)


def looks_like_markdown(text: str) -> bool:
    """Check for common Markdown patterns: headings, links, code fences."""
    return (
        _ATX_HEADING_RE.search(text) is not None or "](" in text or "```" in text
    )


def classify_text(data: bytes) -> ContentType:
    """Classify text content that already passed the text likelihood screen.

    :param data: The raw byte data, expected to be UTF-8 text.
    :returns: One of the JSON, XML, HTML, CSV, Markdown or plain text types.
    """
    text = data.decode("utf-8", errors="replace").strip(WHITESPACE)

    if looks_like_json(text):
        return JSON

    if looks_like_xml(text):
        if looks_like_html(text):
            return HTML
        return XML

    if looks_like_csv(text):
        return CSV

    if looks_like_markdown(text):
        return MARKDOWN

    return TEXT
