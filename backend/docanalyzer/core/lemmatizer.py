"""
Dictionary-backed lemmatizer with a suffix-stripping fallback.
"""
from __future__ import annotations

from types import MappingProxyType
from typing import Iterable, List, Mapping

# Irregular and domain forms. Canonical forms that suffix stripping would
# damage ("exceed" -> "exce", "this" -> "thi") map to themselves.
LEMMA_MAP: Mapping[str, str] = MappingProxyType({
    "running": "run",
    "ran": "run",
    "better": "good",
    "best": "good",
    "products": "product",
    "exceeded": "exceed",
    "exceeds": "exceed",
    "exceed": "exceed",
    "absolutely": "absolute",
    "customers": "customer",
    "easiest": "easy",
    "easier": "easy",
    "recommended": "recommend",
    "purchased": "purchase",
    "purchases": "purchase",
    "supporting": "support",
    "it's": "it",
    "that's": "that",
    "children": "child",
    "people": "person",
    "went": "go",
    "was": "be",
    "were": "be",
    "is": "be",
    "are": "be",
    "worse": "bad",
    "worst": "bad",
    "analyses": "analysis",
    "analysis": "analysis",
    "this": "this",
    "thus": "thus",
    "bus": "bus",
    "gas": "gas",
    "yes": "yes",
    "its": "its",
    "needed": "need",
    "need": "need",
    "feed": "feed",
    "speed": "speed",
    "proceed": "proceed",
    "succeed": "succeed",
    "indeed": "indeed",
    # "-ing" nouns, so their plurals settle on the singular in one step
    "meeting": "meeting",
    "finding": "finding",
    "setting": "setting",
    "string": "string",
    "building": "building",
    "morning": "morning",
    "evening": "evening",
    "readings": "read",
})

# Checked in priority order; only the first matching suffix is stripped
_SUFFIX_RULES = (("ing", 3), ("ed", 2))


def _strip_suffix(word: str) -> str:
    for suffix, length in _SUFFIX_RULES:
        if word.endswith(suffix):
            return word[:-length]
    if word.endswith("s") and not word.endswith("ss"):
        return word[:-1]
    return word


def lemmatize(token: str) -> str:
    """
    Reduce a token to its canonical base form.

    Args:
        token: A single word token

    Returns:
        The mapped form, the suffix-stripped form when it keeps at least
        three characters, or the lowercased token unchanged
    """
    word = token.lower()
    if word in LEMMA_MAP:
        return LEMMA_MAP[word]

    stripped = _strip_suffix(word)
    stripped = LEMMA_MAP.get(stripped, stripped)
    if len(stripped) >= 3:
        return stripped
    return word


def lemmatize_all(tokens: Iterable[str]) -> List[str]:
    return [lemmatize(token) for token in tokens]
