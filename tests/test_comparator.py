"""Document comparison: Jaccard similarity, keyword partitions and metrics."""

from __future__ import annotations

import pytest

from docanalyzer.core.comparator import (
    DocumentComparator,
    compare_documents,
    explain_similarity,
    jaccard_similarity,
    partition_keywords,
)
from docanalyzer.core.keywords import KeywordExtractor
from docanalyzer.utils import clamp_percentage

NLP_DOC = (
    "Natural language processing helps computers analyze text. "
    "Language models learn patterns from text data and improve with more examples."
)
REVIEW_DOC = (
    "The customer service was slow, but the product quality is excellent "
    "and the price was fair. I would buy this product again."
)


@pytest.fixture
def comparator(tables) -> DocumentComparator:
    return DocumentComparator(tables)


def test_identical_documents(tables) -> None:
    result = compare_documents(NLP_DOC, NLP_DOC)
    expected = KeywordExtractor(tables).top_terms(NLP_DOC)[:5]

    assert result.similarity_score == 100
    assert result.common_keywords == expected
    assert result.unique_keywords.doc1 == []
    assert result.unique_keywords.doc2 == []
    assert "highly similar" in result.similarity_explanation


def test_disjoint_documents() -> None:
    result = compare_documents("apples oranges bananas", "cars trucks buses")
    assert result.similarity_score == 0
    assert result.common_keywords == []
    assert result.unique_keywords.doc1 == ["apples", "oranges", "bananas"]
    assert result.unique_keywords.doc2 == ["cars", "trucks", "buses"]
    assert "little similarity" in result.similarity_explanation


@pytest.mark.parametrize(
    "first, second",
    [
        (NLP_DOC, REVIEW_DOC),
        ("the cat sat on the mat", "the dog sat on the log"),
        ("", "something here"),
    ],
)
def test_similarity_is_symmetric(first: str, second: str) -> None:
    assert compare_documents(first, second).similarity_score == compare_documents(second, first).similarity_score


def test_jaccard_similarity() -> None:
    assert jaccard_similarity("the cat sat", "the cat ran") == 50
    assert jaccard_similarity("", "") == 0
    assert jaccard_similarity("Same words", "same WORDS") == 100


def test_jaccard_rounds_halves_up() -> None:
    # 1 shared token out of 8 distinct ones is exactly 12.5%
    assert jaccard_similarity("a b c d e", "a f g h") == 13
    # 5 of 8 is 62.5%
    assert jaccard_similarity("a b c d e", "a b c d e f g h") == 63


@pytest.mark.parametrize(
    "value, expected",
    [(12.5, 13), (37.5, 38), (0.5, 1), (-0.5, 0), (12.4, 12), (150.0, 100), (-20.0, 0)],
)
def test_clamp_percentage_rounds_halves_up(value: float, expected: int) -> None:
    assert clamp_percentage(value) == expected


@pytest.mark.parametrize(
    "score, phrase",
    [
        (100, "highly similar"),
        (71, "highly similar"),
        (70, "some common themes"),
        (41, "some common themes"),
        (40, "little similarity"),
        (0, "little similarity"),
    ],
)
def test_similarity_explanation_buckets(score: int, phrase: str) -> None:
    assert phrase in explain_similarity(score)


def test_partition_keywords_preserves_order() -> None:
    common, unique = partition_keywords(["a", "b", "c"], ["d", "b"])
    assert common == ["b"]
    assert unique.doc1 == ["a", "c"]
    assert unique.doc2 == ["d"]


def test_partition_keywords_caps_each_list() -> None:
    shared = [f"t{i}" for i in range(8)]
    common, unique = partition_keywords(shared + ["x1", "x2"], shared + ["y1"])
    assert common == shared[:5]
    assert unique.doc1 == ["x1", "x2"]
    assert unique.doc2 == ["y1"]


def test_nlp_term_metric(comparator: DocumentComparator) -> None:
    metrics = comparator.metrics("Natural language processing and NLP text analysis.")
    assert metrics.nlp_terms == 30
    assert comparator.metrics("data " * 25).nlp_terms == 100


def test_positive_sentiment_metric(comparator: DocumentComparator) -> None:
    assert comparator.metrics("The quokka is on Tuesday.").positive_sentiment == 50
    assert comparator.metrics("good great excellent").positive_sentiment > 50


def test_complexity_grows_with_sentence_length(comparator: DocumentComparator) -> None:
    short = comparator.metrics("Short one. Another here.")
    long = comparator.metrics(" ".join(["word"] * 30) + ".")
    assert long.complexity > short.complexity
    assert long.complexity == 80


@pytest.mark.parametrize("text", [NLP_DOC, REVIEW_DOC, "", "x"])
def test_metric_ranges_and_determinism(comparator: DocumentComparator, text: str) -> None:
    metrics = comparator.metrics(text)
    assert 50 <= metrics.technical_content <= 80
    assert 40 <= metrics.academic_style <= 80
    assert 40 <= metrics.complexity <= 80
    assert 0 <= metrics.positive_sentiment <= 100
    assert 0 <= metrics.nlp_terms <= 100
    assert comparator.metrics(text) == metrics


def test_technical_text_scores_higher_than_casual_text(comparator: DocumentComparator) -> None:
    technical = comparator.metrics("The neural network model uses tokenization and embedding vectors.")
    casual = comparator.metrics("We went to the park and had a nice day.")
    assert technical.technical_content > casual.technical_content


def test_comparison_is_fully_deterministic() -> None:
    assert compare_documents(NLP_DOC, REVIEW_DOC) == compare_documents(NLP_DOC, REVIEW_DOC)


def test_empty_documents_do_not_raise() -> None:
    result = compare_documents("", "")
    assert result.similarity_score == 0
    assert result.common_keywords == []
