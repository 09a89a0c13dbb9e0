"""
Rule-based sentiment scoring.

This module scores text with a lexicon walk instead of a trained model:
a general-purpose polarity baseline, a custom domain lexicon with
intensifier and negation handling, negative phrase penalties and
punctuation effects are summed and normalised into a [0, 1] score.
"""
from __future__ import annotations

import logging
from typing import List, Optional

from docanalyzer.config import (
    NEGATION_PENALTY,
    NEGATIVE_THRESHOLD,
    PHRASE_PENALTY,
    POSITIVE_THRESHOLD,
    PUNCTUATION_WEIGHT,
    SCORE_PRECISION,
    SENTIMENT_OFFSET,
    SENTIMENT_RANGE,
    STRONG_NEGATIVE_THRESHOLD,
    STRONG_POSITIVE_THRESHOLD,
)
from docanalyzer.core.lexicon import LexiconTables, load_tables
from docanalyzer.core.tokenizer import simple_tokenize
from docanalyzer.schemas import SentimentResult
from docanalyzer.utils import clamp_to_unit_range, normalize_apostrophes

logger = logging.getLogger(__name__)


def label_for_score(score: float) -> str:
    """
    Map a normalised score onto a sentiment label.

    Args:
        score: Sentiment score in [0, 1]

    Returns:
        "Positive" above 0.6, "Negative" below 0.4, "Neutral" otherwise
    """
    if score > POSITIVE_THRESHOLD:
        return "Positive"
    if score < NEGATIVE_THRESHOLD:
        return "Negative"
    return "Neutral"


def explain_sentiment(label: str, score: float) -> str:
    """
    Build a human readable explanation for a sentiment result.

    Args:
        label: Sentiment label
        score: Normalised score in [0, 1]

    Returns:
        Sentence naming the label, its intensity and the percentage
    """
    percentage = f"{score * 100:.1f}%"

    if label == "Positive":
        intensity = "very" if score > STRONG_POSITIVE_THRESHOLD else "moderately"
        return (
            f"Positive sentiment ({percentage}): this text is {intensity} positive, "
            "suggesting an optimistic view of the subject matter."
        )
    if label == "Negative":
        intensity = "very" if score < STRONG_NEGATIVE_THRESHOLD else "moderately"
        return (
            f"Negative sentiment ({percentage}): this text is {intensity} negative, "
            "expressing criticism or concerns about the subject matter."
        )
    return (
        f"Neutral sentiment ({percentage}): this text is balanced, "
        "weighing positive and negative elements evenly."
    )


class SentimentScorer:
    """Scores text against the shared lexicon tables."""

    def __init__(self, tables: Optional[LexiconTables] = None):
        self.tables = tables or load_tables()

    def lexical_score(self, tokens: List[str]) -> float:
        """
        Apply the custom lexicon with a one-token lookback/lookahead window.

        Args:
            tokens: Lowercase tokens, stopwords included

        Returns:
            Signed contribution of the custom lexicon
        """
        tables = self.tables
        total = 0.0

        for i, token in enumerate(tokens):
            prev_token = tokens[i - 1] if i > 0 else None
            next_token = tokens[i + 1] if i < len(tokens) - 1 else None

            if token in tables.sentiment:
                score = tables.sentiment_score(token)
                if tables.is_negation(prev_token) and score > 0:
                    total -= NEGATION_PENALTY * score
                else:
                    total += score * tables.intensifier(prev_token)

            # Applied independently of the branch above, so "not good" is
            # penalised from both sides
            if tables.is_negation(token):
                next_score = tables.sentiment_score(next_token)
                if next_score > 0:
                    total -= NEGATION_PENALTY * next_score

        return total

    def phrase_penalty(self, text: str) -> float:
        """Penalty for each distinct negative phrase found in the text."""
        normalized = normalize_apostrophes(text)
        matches = sum(
            1 for pattern in self.tables.negative_patterns if pattern.search(normalized)
        )
        return PHRASE_PENALTY * matches

    @staticmethod
    def punctuation_adjustment(text: str, running_total: float) -> float:
        """
        Exclamations amplify the existing polarity, questions lean negative.

        Args:
            text: Raw text
            running_total: Score accumulated so far

        Returns:
            Adjustment to add to the running total
        """
        exclamations = text.count("!")
        questions = text.count("?")

        adjustment = 0.0
        if running_total > 0:
            adjustment += PUNCTUATION_WEIGHT * exclamations
        elif running_total < 0:
            adjustment -= PUNCTUATION_WEIGHT * exclamations
        adjustment -= PUNCTUATION_WEIGHT * questions
        return adjustment

    def raw_score(self, text: str) -> float:
        tokens = simple_tokenize(text)
        total = self.tables.base_score(tokens)
        total += self.lexical_score(tokens)
        total -= self.phrase_penalty(text)
        total += self.punctuation_adjustment(text, total)
        return total

    def analyze(self, text: str) -> SentimentResult:
        """
        Score the sentiment of a text.

        Args:
            text: Text to analyse

        Returns:
            SentimentResult with a score in [0, 1], its label and explanation
        """
        total = self.raw_score(text)
        score = round(
            clamp_to_unit_range((total + SENTIMENT_OFFSET) / SENTIMENT_RANGE),
            SCORE_PRECISION,
        )
        label = label_for_score(score)
        logger.debug("Sentiment raw=%.3f normalized=%.4f label=%s", total, score, label)

        return SentimentResult(
            score=score,
            label=label,
            explanation=explain_sentiment(label, score),
        )


def analyze_sentiment(text: str) -> SentimentResult:
    return SentimentScorer().analyze(text)
