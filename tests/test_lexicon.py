"""Static tables: lookup contracts, tier invariants and immutability."""

from __future__ import annotations

import dataclasses
from itertools import combinations

import pytest

from docanalyzer.core.lexicon import (
    NEGATIVE_TIERS,
    REFERENCE_CORPUS,
    build_tier_index,
    load_tables,
)


def test_negative_tiers_are_disjoint() -> None:
    for (_, (_, first)), (_, (_, second)) in combinations(NEGATIVE_TIERS.items(), 2):
        assert not first & second


def test_overlapping_tiers_are_rejected() -> None:
    tiers = {
        "strong": (2.0, frozenset({"awful"})),
        "mild": (1.2, frozenset({"awful", "slow"})),
    }
    with pytest.raises(ValueError, match="awful"):
        build_tier_index(tiers)


def test_tier_multipliers(tables) -> None:
    assert tables.tier_multipliers == {"strong": 2.0, "moderate": 1.5, "mild": 1.2}
    assert tables.negative_tier("terrible") == "strong"
    assert tables.negative_tier("disappointed") == "moderate"
    assert tables.negative_tier("slow") == "mild"
    assert tables.negative_tier("product") is None
    assert tables.tier_multiplier("bad") == 1.5
    assert tables.tier_multiplier("product") is None


def test_lookup_defaults(tables) -> None:
    assert tables.intensifier("very") == 2.0
    assert tables.intensifier("absolutely") == 2.5
    assert tables.intensifier("table") == 1.0
    assert tables.intensifier(None) == 1.0
    assert tables.sentiment_score("amazing") == 8.0
    assert tables.sentiment_score("table") == 0.0
    assert tables.sentiment_score(None) == 0.0
    assert tables.term_weight("quokka") == 1.0
    assert tables.term_weight("product") > 1.0


def test_negation_triggers(tables) -> None:
    for word in ["not", "never", "doesn't", "didn't", "won't"]:
        assert tables.is_negation(word)
    assert not tables.is_negation("good")
    assert not tables.is_negation(None)


def test_tables_are_shared_and_read_only(tables) -> None:
    assert load_tables() is tables
    with pytest.raises(TypeError):
        tables.sentiment["brilliant"] = 9
    with pytest.raises(dataclasses.FrozenInstanceError):
        tables.sentiment = {}


def test_base_lexicon_polarity(tables) -> None:
    assert tables.base_score(["good"]) > 0
    assert tables.base_score(["terrible"]) < 0
    assert tables.base_score([]) == 0
    assert tables.base_score(["quokka", "tuesday"]) == 0


def test_negative_patterns_ignore_case(tables) -> None:
    assert any(p.search("It STOPPED WORKING after a week") for p in tables.negative_patterns)
    assert not any(p.search("It works well") for p in tables.negative_patterns)


def test_reference_corpus_is_fixed(tables) -> None:
    assert tables.reference_corpus == REFERENCE_CORPUS
    assert isinstance(tables.reference_corpus, tuple)
    assert len(tables.nlp_vocabulary) == 10
