"""
Word tokenization, contraction expansion and stopword filtering.
"""
from __future__ import annotations

import logging
import re
from functools import lru_cache
from typing import FrozenSet, Iterable, List

import nltk
from nltk.corpus import stopwords

from docanalyzer.utils import normalize_apostrophes

logger = logging.getLogger(__name__)


# Irregular negations have to be expanded before the generic n't rule
_IRREGULAR_CONTRACTIONS = (
    (re.compile(r"\bcan't\b"), "can not"),
    (re.compile(r"\bwon't\b"), "will not"),
    (re.compile(r"\bshan't\b"), "shall not"),
)

_CONTRACTIONS = (
    (re.compile(r"n't\b"), " not"),
    (re.compile(r"'s\b"), " is"),
    (re.compile(r"'m\b"), " am"),
    (re.compile(r"'re\b"), " are"),
    (re.compile(r"'ll\b"), " will"),
    (re.compile(r"'ve\b"), " have"),
    (re.compile(r"'d\b"), " would"),
)

_WORD = re.compile(r"[a-z0-9]+")
_SIMPLE_WORD = re.compile(r"[a-z0-9]+(?:'[a-z]+)?")

# Forms NLTK's English list lacks: modals produced by contraction expansion
# and contractions typed without an apostrophe
EXTRA_STOPWORDS = frozenset({
    "would", "could", "shall",
    "im", "ive", "youre", "youve", "hes", "shes", "theyre", "weve", "theyve",
    "hasnt", "havent", "hadnt", "doesnt", "dont", "didnt", "isnt", "wasnt",
    "wont", "cant",
})


@lru_cache(maxsize=1)
def load_stopwords() -> FrozenSet[str]:
    """
    Load NLTK's English stopword list, downloading the corpus on first use.

    Returns:
        Frozen set of NLTK's English stopwords plus EXTRA_STOPWORDS
    """
    try:
        nltk.data.find("corpora/stopwords")
    except LookupError:
        logger.info("Downloading NLTK stopwords corpus...")
        nltk.download("stopwords", quiet=True)

    words = frozenset(stopwords.words("english")) | EXTRA_STOPWORDS
    logger.debug("Loaded %d stopwords", len(words))
    return words


def normalize_contractions(text: str) -> str:
    """
    Lowercase text and expand English contractions.

    Args:
        text: Raw input text

    Returns:
        Lowercased text with contractions spelled out and stray
        apostrophes removed
    """
    lowered = normalize_apostrophes(text.lower())
    for pattern, replacement in _IRREGULAR_CONTRACTIONS:
        lowered = pattern.sub(replacement, lowered)
    for pattern, replacement in _CONTRACTIONS:
        lowered = pattern.sub(replacement, lowered)
    return lowered.replace("'", "")


def tokenize(text: str | None) -> List[str]:
    """
    Split text into lowercase word tokens.

    Args:
        text: Raw input text (can be None)

    Returns:
        List of tokens; empty when the text holds no word characters
    """
    if not text:
        return []
    return _WORD.findall(normalize_contractions(text))


def simple_tokenize(text: str | None) -> List[str]:
    """Lowercase word tokens with contractions such as "doesn't" kept whole."""
    if not text:
        return []
    return _SIMPLE_WORD.findall(normalize_apostrophes(text.lower()))


def remove_stopwords(tokens: Iterable[str]) -> List[str]:
    stop = load_stopwords()
    return [token for token in tokens if token not in stop]
