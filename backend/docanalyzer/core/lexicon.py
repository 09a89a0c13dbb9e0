"""
Static sentiment, weighting and pattern tables shared by the scoring engine.

Everything here is built once per process by :func:`load_tables` and handed
to the keyword extractor, sentiment scorer and comparator as a frozen
:class:`LexiconTables`. The mappings are read-only proxies, so a single
instance can be shared between threads.
"""
from __future__ import annotations

import logging
import re
from dataclasses import dataclass
from functools import lru_cache
from types import MappingProxyType
from typing import Dict, FrozenSet, Iterable, Mapping, Optional, Tuple

logger = logging.getLogger(__name__)


SENTIMENT_LEXICON: Dict[str, float] = {
    # Strong positive
    "amazing": 8,
    "best": 8,
    "fantastic": 8,
    "outstanding": 8,
    "excellent": 8,
    "exceeded": 8,
    "perfect": 8,
    "incredible": 8,
    "happier": 8,
    "helpful": 6,
    "resolved": 6,
    "improved": 6,
    "significantly": 6,
    # Moderate positive
    "great": 4,
    "wonderful": 4,
    "impressive": 4,
    "love": 4,
    "happy": 4,
    "recommend": 3,
    "satisfied": 3,
    "stable": 3,
    "reliable": 3,
    "performance": 3,
    # Mild positive
    "good": 3,
    "nice": 3,
    "pretty": 2,
    "fine": 2,
    "works": 2,
    "decent": 2,
    "okay": 1,
    # Strong negative
    "terrible": -5,
    "waste": -5,
    "horrible": -5,
    "awful": -5,
    "worst": -5,
    "hate": -5,
    "useless": -5,
    "unreliable": -4,
    # Moderate negative
    "bad": -4,
    "poor": -4,
    "broken": -4,
    "disappointed": -4,
    "disappointing": -4,
    "frustrating": -3,
    "flaws": -3,
    # Mild negative
    "issues": -3,
    "problem": -3,
    "slow": -2,
    "improvement": -2,
    "never": -3,
    "expected": -1,
    "minor": -1,
}

INTENSIFIERS: Dict[str, float] = {
    "absolutely": 2.5,
    "completely": 2.5,
    "totally": 2.5,
    "incredibly": 2.5,
    "extremely": 2.5,
    "most": 2.5,
    "very": 2.0,
    "really": 2.0,
    "significantly": 2.0,
    "highly": 2.0,
    "quite": 1.5,
    "all": 1.5,
    "so": 1.5,
    "such": 1.5,
    "especially": 1.5,
}

NEGATIONS: FrozenSet[str] = frozenset({
    "not", "no", "never", "nothing", "neither", "nor",
    "doesn't", "didn't", "won't", "don't", "can't", "isn't", "wasn't",
    "aren't", "weren't", "couldn't", "wouldn't", "shouldn't", "haven't",
    "hasn't", "hadn't",
})

# Tier name -> (multiplier, words). A word may belong to at most one tier.
NEGATIVE_TIERS: Dict[str, Tuple[float, FrozenSet[str]]] = {
    "strong": (2.0, frozenset({
        "terrible", "horrible", "awful", "worst", "hate", "waste", "useless",
        "garbage", "disgusting", "pathetic", "scam",
    })),
    "moderate": (1.5, frozenset({
        "bad", "poor", "disappointed", "disappointing", "broken",
        "unreliable", "defective", "frustrating", "annoying", "failed",
    })),
    "mild": (1.2, frozenset({
        "issue", "issues", "problem", "problems", "flaws", "slow", "minor",
        "mediocre", "lacking", "overpriced", "expensive",
    })),
}

TERM_IMPORTANCE: Dict[str, float] = {
    "disappointed": 1.4,
    "quality": 1.4,
    "product": 1.3,
    "performance": 1.3,
    "recommend": 1.3,
    "price": 1.2,
    "service": 1.2,
    "customer": 1.2,
    "support": 1.2,
    "experience": 1.2,
    "features": 1.2,
    "reliability": 1.2,
    "language": 1.2,
    "analysis": 1.2,
}

NEGATIVE_PHRASES: Tuple[str, ...] = (
    r"stopped working",
    r"no longer",
    r"does(?:n't| not) work",
    r"did(?:n't| not) work",
    r"would(?:n't| not) recommend",
    r"waste of",
    r"complete waste",
    r"don't waste",
    r"never again",
    r"not worth",
    r"fell apart",
    r"can't believe how bad",
    r"broke after",
)

REFERENCE_CORPUS: Tuple[str, ...] = (
    "The product arrived on time and works as described in the listing.",
    "Customer service answered my question quickly and resolved the issue.",
    "The quality of the materials is good for the price we paid.",
    "I was disappointed with the battery life after the latest update.",
    "Natural language processing helps computers analyze and understand text.",
    "Machine learning models learn patterns from large amounts of data.",
    "The report describes the results of the analysis in detail.",
    "News articles present different perspectives on the same events.",
    "Users left feedback about the features they use most often.",
    "The software update improved performance and fixed several bugs.",
    "Delivery was slow and the package was damaged when it arrived.",
    "This document summarizes the main points of the meeting.",
)

NLP_VOCABULARY: Tuple[str, ...] = (
    "language", "natural", "processing", "nlp", "text",
    "analysis", "algorithm", "model", "data", "learning",
)

TECHNICAL_VOCABULARY: FrozenSet[str] = frozenset({
    "algorithm", "algorithms", "api", "architecture", "computation",
    "computational", "corpus", "data", "dataset", "database", "embedding",
    "framework", "implementation", "learning", "linguistics", "machine",
    "model", "models", "network", "neural", "nlp", "parameter", "parsing",
    "processing", "protocol", "software", "statistical", "syntax", "system",
    "tfidf", "token", "tokenization", "vector", "server", "query",
})


@dataclass(frozen=True)
class LexiconTables:
    """Read-only bundle of every lookup table the engine consults."""

    sentiment: Mapping[str, float]
    intensifiers: Mapping[str, float]
    negations: FrozenSet[str]
    tier_multipliers: Mapping[str, float]
    tier_index: Mapping[str, str]
    term_importance: Mapping[str, float]
    negative_patterns: Tuple[re.Pattern, ...]
    reference_corpus: Tuple[str, ...]
    nlp_vocabulary: Tuple[str, ...]
    technical_vocabulary: FrozenSet[str]
    base_lexicon: Mapping[str, float]

    def sentiment_score(self, word: Optional[str]) -> float:
        return float(self.sentiment.get(word, 0.0)) if word else 0.0

    def intensifier(self, word: Optional[str]) -> float:
        return self.intensifiers.get(word, 1.0) if word else 1.0

    def is_negation(self, word: Optional[str]) -> bool:
        return word in self.negations if word else False

    def negative_tier(self, word: str) -> Optional[str]:
        return self.tier_index.get(word)

    def tier_multiplier(self, word: str) -> Optional[float]:
        tier = self.tier_index.get(word)
        return self.tier_multipliers[tier] if tier else None

    def term_weight(self, word: str) -> float:
        return self.term_importance.get(word, 1.0)

    def base_score(self, tokens: Iterable[str]) -> float:
        """Sum of the general-purpose polarity valences of ``tokens``."""
        return sum(self.base_lexicon.get(token, 0.0) for token in tokens)


def build_tier_index(tiers: Mapping[str, Tuple[float, FrozenSet[str]]]) -> Dict[str, str]:
    """
    Map each tiered word to the name of its tier.

    Raises:
        ValueError: If a word is listed in more than one tier
    """
    index: Dict[str, str] = {}
    for name, (_, words) in tiers.items():
        for word in words:
            if word in index:
                raise ValueError(
                    f"'{word}' is listed in both the {index[word]} and {name} negative tiers"
                )
            index[word] = name
    return index


def _load_base_lexicon() -> Dict[str, float]:
    """
    Load the VADER polarity lexicon bundled with vaderSentiment.

    Raises:
        RuntimeError: If vaderSentiment is not installed
    """
    try:
        from vaderSentiment.vaderSentiment import SentimentIntensityAnalyzer
    except ImportError as e:
        raise RuntimeError(
            "The base sentiment lexicon needs vaderSentiment.\n"
            "Try: pip install vaderSentiment"
        ) from e

    lexicon = dict(SentimentIntensityAnalyzer().lexicon)
    logger.debug("Loaded %d base lexicon entries", len(lexicon))
    return lexicon


@lru_cache(maxsize=1)
def load_tables() -> LexiconTables:
    """
    Build the shared, immutable lookup tables.

    Returns:
        The process-wide LexiconTables instance
    """
    tier_index = build_tier_index(NEGATIVE_TIERS)
    return LexiconTables(
        sentiment=MappingProxyType(dict(SENTIMENT_LEXICON)),
        intensifiers=MappingProxyType(dict(INTENSIFIERS)),
        negations=NEGATIONS,
        tier_multipliers=MappingProxyType(
            {name: multiplier for name, (multiplier, _) in NEGATIVE_TIERS.items()}
        ),
        tier_index=MappingProxyType(tier_index),
        term_importance=MappingProxyType(dict(TERM_IMPORTANCE)),
        negative_patterns=tuple(re.compile(p, re.IGNORECASE) for p in NEGATIVE_PHRASES),
        reference_corpus=REFERENCE_CORPUS,
        nlp_vocabulary=NLP_VOCABULARY,
        technical_vocabulary=TECHNICAL_VOCABULARY,
        base_lexicon=MappingProxyType(_load_base_lexicon()),
    )
