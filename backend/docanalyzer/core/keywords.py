"""
TF-IDF keyword extraction against a fixed reference corpus.

A single document gives a degenerate IDF, so every call seeds a fresh index
with the reference corpus (always in the same order) and adds the target
text last. Scores are then reweighted with domain importance, sentiment
magnitude and frequency boosts, and terms from the negative tiers are pushed
below zero so strongly negative vocabulary ranks high by magnitude.
"""
from __future__ import annotations

import logging
import math
from collections import Counter
from typing import Dict, List, Optional, Sequence

from sklearn.feature_extraction.text import TfidfVectorizer

from docanalyzer.config import (
    FREQUENCY_BOOST_FACTOR,
    MAX_KEYWORDS,
    MIN_KEYWORD_LENGTH,
    SCORE_PRECISION,
    SENTIMENT_BOOST_FACTOR,
)
from docanalyzer.core.lexicon import LexiconTables, load_tables
from docanalyzer.core.tokenizer import remove_stopwords, tokenize
from docanalyzer.schemas import Keyword, TfIdfResult

logger = logging.getLogger(__name__)


def score_against_corpus(text: str, corpus: Sequence[str]) -> Dict[str, float]:
    """
    Raw TF-IDF of every term in ``text`` with ``corpus`` as background.

    Term frequency is the raw count in the target document and IDF is the
    smoothed ln((1 + n) / (1 + df)) + 1 over corpus plus target.

    Args:
        text: Target document, added after the corpus
        corpus: Ordered background documents

    Returns:
        Mapping of term to TF-IDF in the target document
    """
    vectorizer = TfidfVectorizer(
        analyzer=tokenize,
        norm=None,
        use_idf=True,
        smooth_idf=True,
        sublinear_tf=False,
    )
    matrix = vectorizer.fit_transform([*corpus, text])
    target = matrix[matrix.shape[0] - 1].toarray()[0]
    return {
        term: float(target[column])
        for term, column in vectorizer.vocabulary_.items()
        if target[column]
    }


def _candidate_frequencies(text: str) -> Counter:
    # Counter keeps first-encounter order, which breaks ranking ties
    return Counter(
        token for token in remove_stopwords(tokenize(text))
        if len(token) >= MIN_KEYWORD_LENGTH
    )


class KeywordExtractor:
    """Ranks the terms of a document by boosted, polarity-aware TF-IDF."""

    def __init__(self, tables: Optional[LexiconTables] = None):
        self.tables = tables or load_tables()

    def weighted_score(self, term: str, tfidf: float, frequency: int) -> float:
        """
        Combine base TF-IDF with the domain and sentiment boosts.

        Args:
            term: Candidate keyword
            tfidf: Raw TF-IDF against the reference corpus
            frequency: Occurrences of the term in the document

        Returns:
            Final score rounded to four decimals; negative for tiered terms
        """
        score = tfidf * self.tables.term_weight(term)
        score += abs(self.tables.sentiment_score(term)) * SENTIMENT_BOOST_FACTOR
        score += math.log(frequency + 1) * FREQUENCY_BOOST_FACTOR

        multiplier = self.tables.tier_multiplier(term)
        if multiplier is not None:
            score = -abs(score) * multiplier

        return round(score, SCORE_PRECISION)

    def extract(self, text: str, limit: int = MAX_KEYWORDS) -> TfIdfResult:
        """
        Extract the top keywords of a document.

        Args:
            text: Document text
            limit: Maximum number of keywords to return

        Returns:
            TfIdfResult ranked by descending absolute score
        """
        frequencies = _candidate_frequencies(text)
        if not frequencies:
            return TfIdfResult(keywords=[])

        tfidf = score_against_corpus(text, self.tables.reference_corpus)
        keywords = [
            Keyword(
                term=term,
                tfidf=self.weighted_score(term, tfidf.get(term, 0.0), count),
                frequency=count,
            )
            for term, count in frequencies.items()
        ]

        # sorted() is stable, equal magnitudes keep first-encounter order
        ranked = sorted(keywords, key=lambda keyword: abs(keyword.tfidf), reverse=True)
        logger.debug("Ranked %d candidate keywords", len(ranked))
        return TfIdfResult(keywords=ranked[:limit])

    def top_terms(self, text: str, limit: int = MAX_KEYWORDS) -> List[str]:
        """
        Plain TF-IDF ranking used for vocabulary comparison.

        No importance, polarity or frequency adjustments are applied.

        Args:
            text: Document text
            limit: Maximum number of terms to return

        Returns:
            Terms ordered by descending raw TF-IDF
        """
        frequencies = _candidate_frequencies(text)
        if not frequencies:
            return []

        tfidf = score_against_corpus(text, self.tables.reference_corpus)
        ranked = sorted(frequencies, key=lambda term: tfidf.get(term, 0.0), reverse=True)
        return ranked[:limit]


def extract_keywords(text: str) -> TfIdfResult:
    return KeywordExtractor().extract(text)
