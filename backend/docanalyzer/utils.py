"""
Shared utility functions for the document analyzer.
"""
from __future__ import annotations

import html
import math
import re
from datetime import datetime, timezone
from typing import Iterable

_APOSTROPHES = re.compile(r"[‘’ʼ`]")


def now_utc() -> datetime:
    """
    Get current UTC datetime with timezone information.

    Returns:
        Current UTC datetime
    """
    return datetime.now(timezone.utc)


def normalize_text(text: str | None) -> str:
    """
    Normalize whitespace in text content.

    Args:
        text: Input text string (can be None)

    Returns:
        Normalized text with single spaces and trimmed edges
    """
    if not text:
        return ""
    return re.sub(r"\s+", " ", text).strip()


def normalize_apostrophes(text: str) -> str:
    return _APOSTROPHES.sub("'", text)


def clamp_to_unit_range(value: float) -> float:
    """
    Clamp a float value to the range [0.0, 1.0].

    Args:
        value: Input float value

    Returns:
        Value clamped to [0.0, 1.0] range
    """
    return max(0.0, min(1.0, value))


def round_half_up(value: float) -> int:
    """Round to the nearest integer, with halves going up (12.5 -> 13, -0.5 -> 0)."""
    return int(math.floor(value + 0.5))


def clamp_percentage(value: float) -> int:
    """Round half up to an integer and clamp into [0, 100]."""
    return max(0, min(100, round_half_up(value)))


def highlight_keywords(text: str, keywords: Iterable[str]) -> str:
    """
    Wrap whole-word keyword matches in highlight spans.

    The text is HTML-escaped first so the result is safe to render.

    Args:
        text: Original document text
        keywords: Terms to highlight (case-insensitive)

    Returns:
        Escaped text with ``<span class="doc-highlight">`` markers
    """
    terms = [re.escape(keyword) for keyword in keywords if keyword]
    if not terms:
        return html.escape(text)

    # One pass over the raw text so markup is never matched twice
    pattern = re.compile(rf"\b(?:{'|'.join(terms)})\b", re.IGNORECASE)
    parts = []
    last = 0
    for match in pattern.finditer(text):
        parts.append(html.escape(text[last:match.start()]))
        parts.append(f'<span class="doc-highlight">{html.escape(match.group(0))}</span>')
        last = match.end()
    parts.append(html.escape(text[last:]))
    return "".join(parts)
