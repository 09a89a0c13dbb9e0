"""
File: docanalyzer/models.py
Internal records kept by the storage layer.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Optional


@dataclass
class Document:
    """A stored document. Serialised through ``schemas.Document``."""

    id: int
    title: str
    content: str
    word_count: int
    analyzed_at: datetime
    user_id: Optional[int] = None


__all__ = ["Document"]
