"""Rule-based sentiment scoring."""

from __future__ import annotations

import pytest

from docanalyzer.core.sentiment import (
    SentimentScorer,
    analyze_sentiment,
    explain_sentiment,
    label_for_score,
)

TEXTS = [
    "This product is absolutely amazing! Best purchase ever!",
    "It works fine, nothing special about it.",
    "Terrible product, complete waste of money.",
    "While it has some issues, overall it's quite good.",
    "I can't believe how bad this is. Would never recommend.",
    "The quality is outstanding, but customer service needs improvement.",
    "Not bad, but not great either.",
    "Exceeded all my expectations! Fantastic quality!",
    "Don't waste your money on this.",
    "Pretty good product for the price.",
    "Is this really what you call support???",
    "",
]


@pytest.fixture
def scorer(tables) -> SentimentScorer:
    return SentimentScorer(tables)


def test_strong_positive_review() -> None:
    result = analyze_sentiment("This product is absolutely amazing! Best purchase ever!")
    assert result.label == "Positive"
    assert result.score > 0.6


def test_strong_negative_review() -> None:
    result = analyze_sentiment("Terrible product, complete waste of money.")
    assert result.label == "Negative"
    assert result.score < 0.4


def test_factual_text_is_neutral() -> None:
    result = analyze_sentiment("The meeting is scheduled for Tuesday at noon.")
    assert result.label == "Neutral"


def test_empty_text_is_neutral() -> None:
    result = analyze_sentiment("")
    assert result.score == 0.5
    assert result.label == "Neutral"


@pytest.mark.parametrize("text", TEXTS)
def test_score_bounds_and_label_consistency(text: str) -> None:
    result = analyze_sentiment(text)
    assert 0.0 <= result.score <= 1.0
    assert result.label == label_for_score(result.score)
    if result.score > 0.6:
        assert result.label == "Positive"
    elif result.score < 0.4:
        assert result.label == "Negative"
    else:
        assert result.label == "Neutral"


@pytest.mark.parametrize("text", TEXTS)
def test_scoring_is_deterministic(text: str) -> None:
    assert analyze_sentiment(text) == analyze_sentiment(text)


def test_negation_flips_positive_word() -> None:
    plain = analyze_sentiment("The product is good.")
    negated = analyze_sentiment("The product is not good.")
    assert plain.label == "Positive"
    assert negated.label == "Negative"


def test_intensifier_strengthens_score() -> None:
    plain = analyze_sentiment("The product is good.")
    boosted = analyze_sentiment("The product is very good.")
    assert boosted.score > plain.score


def test_exclamations_amplify_existing_polarity() -> None:
    assert analyze_sentiment("The product is good!").score > analyze_sentiment("The product is good.").score
    assert analyze_sentiment("The product is bad!").score < analyze_sentiment("The product is bad.").score


def test_exclamations_do_not_create_polarity() -> None:
    calm = analyze_sentiment("The meeting is on Tuesday.")
    loud = analyze_sentiment("The meeting is on Tuesday!!!")
    assert loud.score == calm.score


def test_questions_lean_negative() -> None:
    assert analyze_sentiment("The product is good?").score < analyze_sentiment("The product is good.").score


def test_lexical_walk(scorer: SentimentScorer) -> None:
    assert scorer.lexical_score(["good"]) == 3.0
    assert scorer.lexical_score(["very", "good"]) == 6.0
    assert scorer.lexical_score(["absolutely", "amazing"]) == 20.0
    # negation is penalised from both sides of the pair
    assert scorer.lexical_score(["not", "good"]) == -12.0
    assert scorer.lexical_score(["doesn't", "works"]) == -8.0
    assert scorer.lexical_score(["not", "terrible"]) == -5.0
    assert scorer.lexical_score([]) == 0.0


def test_phrase_penalty_counts_distinct_patterns(scorer: SentimentScorer) -> None:
    assert scorer.phrase_penalty("It works well.") == 0.0
    assert scorer.phrase_penalty("It stopped working. A waste of money.") == 6.0
    assert scorer.phrase_penalty("No longer useful, no longer supported.") == 3.0
    assert scorer.phrase_penalty("It doesn’t work") == 3.0


def test_punctuation_adjustment() -> None:
    assert SentimentScorer.punctuation_adjustment("Wow!!", 4.0) == 1.0
    assert SentimentScorer.punctuation_adjustment("Ugh!!", -4.0) == -1.0
    assert SentimentScorer.punctuation_adjustment("Hm!!", 0.0) == 0.0
    assert SentimentScorer.punctuation_adjustment("Why? How?", 0.0) == -1.0


def test_extreme_scores_are_clamped() -> None:
    negative = analyze_sentiment("Terrible, awful, horrible, the worst. " * 5)
    positive = analyze_sentiment("Amazing, fantastic, excellent, perfect! " * 5)
    assert negative.score == 0.0
    assert positive.score == 1.0


@pytest.mark.parametrize(
    "score, label",
    [(0.6001, "Positive"), (0.6, "Neutral"), (0.5, "Neutral"), (0.4, "Neutral"), (0.3999, "Negative")],
)
def test_label_thresholds(score: float, label: str) -> None:
    assert label_for_score(score) == label


def test_explanations_name_label_intensity_and_percentage() -> None:
    very_positive = explain_sentiment("Positive", 0.9)
    assert "Positive" in very_positive and "very" in very_positive and "90.0%" in very_positive

    mild_positive = explain_sentiment("Positive", 0.7)
    assert "moderately" in mild_positive and "70.0%" in mild_positive

    very_negative = explain_sentiment("Negative", 0.1)
    assert "Negative" in very_negative and "very" in very_negative and "10.0%" in very_negative

    neutral = explain_sentiment("Neutral", 0.5)
    assert "Neutral" in neutral and "50.0%" in neutral
