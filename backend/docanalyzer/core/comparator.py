"""
Pairwise document comparison: vocabulary overlap and per-document metrics.
"""
from __future__ import annotations

import logging
import re
from typing import List, Optional, Tuple

from docanalyzer.config import (
    COMPARISON_KEYWORD_LIMIT,
    HIGH_SIMILARITY,
    MAX_KEYWORDS,
    MODERATE_SIMILARITY,
    NLP_TERM_WEIGHT,
)
from docanalyzer.core.keywords import KeywordExtractor
from docanalyzer.core.lexicon import LexiconTables, load_tables
from docanalyzer.core.tokenizer import simple_tokenize, tokenize
from docanalyzer.schemas import DocumentComparison, DocumentMetrics, UniqueKeywords
from docanalyzer.utils import clamp_percentage, round_half_up

logger = logging.getLogger(__name__)

_SENTENCE_BREAK = re.compile(r"[.!?]+")

# Heuristic metric bands: (floor, span) so every value lands in [floor, floor + span]
TECHNICAL_BAND = (50, 30)
ACADEMIC_BAND = (40, 40)
COMPLEXITY_BAND = (40, 40)

LONG_WORD_LENGTH = 9
ACADEMIC_WORD_LENGTH = 7
SATURATING_SENTENCE_LENGTH = 30.0


def jaccard_similarity(text_a: str, text_b: str) -> int:
    """
    Token-set Jaccard similarity scaled to an integer percentage.

    Args:
        text_a: First document
        text_b: Second document

    Returns:
        Rounded |A & B| / |A | B| * 100, or 0 when both are empty
    """
    tokens_a = set(tokenize(text_a))
    tokens_b = set(tokenize(text_b))
    union = tokens_a | tokens_b
    if not union:
        return 0
    return round_half_up(len(tokens_a & tokens_b) / len(union) * 100)


def explain_similarity(score: int) -> str:
    if score > HIGH_SIMILARITY:
        return (
            "These documents are highly similar in topic and vocabulary, "
            "with many overlapping key terms."
        )
    if score > MODERATE_SIMILARITY:
        return (
            "These documents share some common themes and several key terms, "
            "but each has a distinct focus."
        )
    return "These documents show little similarity in topic and vocabulary."


def partition_keywords(
    doc1_terms: List[str], doc2_terms: List[str], limit: int = COMPARISON_KEYWORD_LIMIT
) -> Tuple[List[str], UniqueKeywords]:
    """
    Split two ranked term lists into shared and document-specific terms.

    Args:
        doc1_terms: Ranked terms of the first document
        doc2_terms: Ranked terms of the second document
        limit: Maximum entries per output list

    Returns:
        Tuple of (common terms in doc1 order, unique terms per document)
    """
    doc2_set = set(doc2_terms)
    common = [term for term in doc1_terms if term in doc2_set]
    common_set = set(common)
    unique = UniqueKeywords(
        doc1=[term for term in doc1_terms if term not in common_set][:limit],
        doc2=[term for term in doc2_terms if term not in common_set][:limit],
    )
    return common[:limit], unique


def _band(floor_span: Tuple[int, int], ratio: float) -> int:
    floor, span = floor_span
    return floor + round_half_up(span * max(0.0, min(1.0, ratio)))


class DocumentComparator:
    """Compares two documents using the shared lexicon tables."""

    def __init__(self, tables: Optional[LexiconTables] = None):
        self.tables = tables or load_tables()
        self.extractor = KeywordExtractor(self.tables)

    def count_nlp_terms(self, text: str) -> int:
        return sum(
            len(re.findall(rf"\b{re.escape(term)}\b", text, flags=re.IGNORECASE))
            for term in self.tables.nlp_vocabulary
        )

    def technical_content(self, tokens: List[str]) -> int:
        """Share of technical vocabulary and long words, mapped into 50-80."""
        if not tokens:
            return TECHNICAL_BAND[0]
        technical = sum(
            1 for token in tokens
            if token in self.tables.technical_vocabulary or len(token) >= LONG_WORD_LENGTH
        )
        return _band(TECHNICAL_BAND, technical / len(tokens) * 4)

    @staticmethod
    def academic_style(tokens: List[str]) -> int:
        if not tokens:
            return ACADEMIC_BAND[0]
        long_words = sum(1 for token in tokens if len(token) >= ACADEMIC_WORD_LENGTH)
        return _band(ACADEMIC_BAND, long_words / len(tokens) * 2.5)

    @staticmethod
    def complexity(text: str, tokens: List[str]) -> int:
        """Average sentence length in words, saturating at 30 words."""
        sentences = [s for s in _SENTENCE_BREAK.split(text) if tokenize(s)]
        if not sentences:
            return COMPLEXITY_BAND[0]
        average = len(tokens) / len(sentences)
        return _band(COMPLEXITY_BAND, average / SATURATING_SENTENCE_LENGTH)

    def metrics(self, text: str) -> DocumentMetrics:
        """
        Compute the heuristic profile of one document.

        Args:
            text: Document text

        Returns:
            DocumentMetrics with every value in [0, 100]
        """
        tokens = tokenize(text)
        base = self.tables.base_score(simple_tokenize(text))
        return DocumentMetrics(
            nlp_terms=min(self.count_nlp_terms(text) * NLP_TERM_WEIGHT, 100),
            technical_content=self.technical_content(tokens),
            academic_style=self.academic_style(tokens),
            positive_sentiment=clamp_percentage((base + 5) / 10 * 100),
            complexity=self.complexity(text, tokens),
        )

    def compare(self, text_a: str, text_b: str) -> DocumentComparison:
        """
        Compare two documents.

        Args:
            text_a: First document
            text_b: Second document

        Returns:
            DocumentComparison with similarity, keyword partitions and metrics
        """
        doc1_terms = self.extractor.top_terms(text_a, MAX_KEYWORDS)
        doc2_terms = self.extractor.top_terms(text_b, MAX_KEYWORDS)
        common, unique = partition_keywords(doc1_terms, doc2_terms)

        score = jaccard_similarity(text_a, text_b)
        logger.debug("Jaccard similarity %d, %d common keywords", score, len(common))

        return DocumentComparison(
            similarity_score=score,
            similarity_explanation=explain_similarity(score),
            common_keywords=common,
            unique_keywords=unique,
            doc1_metrics=self.metrics(text_a),
            doc2_metrics=self.metrics(text_b),
        )


def compare_documents(text_a: str, text_b: str) -> DocumentComparison:
    return DocumentComparator().compare(text_a, text_b)
