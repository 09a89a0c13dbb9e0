"""
Single-document analysis: preprocessing trace, keywords and sentiment.
"""
from __future__ import annotations

import logging
import time
from typing import Optional

from docanalyzer.config import HIGHLIGHT_LIMIT, PREVIEW_LIMIT, SERVER_LOAD
from docanalyzer.core.keywords import KeywordExtractor
from docanalyzer.core.lemmatizer import lemmatize_all
from docanalyzer.core.lexicon import LexiconTables, load_tables
from docanalyzer.core.sentiment import SentimentScorer
from docanalyzer.core.tokenizer import remove_stopwords, tokenize
from docanalyzer.schemas import AnalysisResult, AnalyzeOptions, PreprocessingSteps
from docanalyzer.utils import highlight_keywords

logger = logging.getLogger(__name__)


class TextAnalyzer:
    """Runs the full single-document pipeline over shared tables."""

    def __init__(self, tables: Optional[LexiconTables] = None):
        self.tables = tables or load_tables()
        self.keywords = KeywordExtractor(self.tables)
        self.sentiment = SentimentScorer(self.tables)

    def analyze(self, text: str, options: Optional[AnalyzeOptions] = None) -> AnalysisResult:
        """
        Analyse a document.

        Args:
            text: Document text
            options: Which optional sections to include (all by default)

        Returns:
            AnalysisResult with documentId 0; storage assigns the real id
        """
        options = options or AnalyzeOptions()
        start_time = time.perf_counter()

        tokens = tokenize(text)
        without_stopwords = remove_stopwords(tokens)
        lemmatized = lemmatize_all(without_stopwords)

        unique_terms = len(set(lemmatized))
        term_density = round(unique_terms / len(lemmatized) * 100, 2) if lemmatized else 0.0

        tfidf = self.keywords.extract(text)
        # Always computed: the sentiment flag does not suppress this field
        sentiment = self.sentiment.analyze(text)

        if options.keywords:
            top_terms = [keyword.term for keyword in tfidf.keywords[:HIGHLIGHT_LIMIT]]
            highlighted_text = highlight_keywords(text, top_terms)
        else:
            highlighted_text = highlight_keywords(text, [])

        preprocessing = None
        if options.preprocessing:
            preprocessing = PreprocessingSteps(
                original_text=text,
                tokenized=tokens[:PREVIEW_LIMIT],
                without_stopwords=without_stopwords[:PREVIEW_LIMIT],
                lemmatized=lemmatized[:PREVIEW_LIMIT],
            )

        processing_time = round(time.perf_counter() - start_time, 4)
        logger.debug("Analysed %d tokens in %.4fs", len(tokens), processing_time)

        return AnalysisResult(
            document_id=0,
            original_text=text,
            word_count=len(tokens),
            preprocessed_word_count=len(lemmatized),
            unique_terms=unique_terms,
            term_density=term_density,
            processing_time=processing_time,
            server_load=SERVER_LOAD,
            highlighted_text=highlighted_text,
            sentiment=sentiment,
            preprocessing=preprocessing,
            tfidf=tfidf if options.tfidf else None,
        )


def analyze_text(text: str, options: Optional[AnalyzeOptions] = None) -> AnalysisResult:
    return TextAnalyzer().analyze(text, options)
