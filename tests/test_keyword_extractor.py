"""Tests for keyword selection and extraction."""

import spacy

from nlp_studio.analyzers.nlp.keyword_extractor import KeywordExtractor, clean_candidate, select_keywords


def test_clean_candidate_strips_quotes_and_edge_punctuation():
    assert clean_candidate('“the new app”,') == "the new app"
    assert clean_candidate("(release notes).") == "release notes"
    assert clean_candidate("?!;:") == ""


def test_select_keywords_dedupes_case_insensitively_keeping_first_casing():
    text = "The Dashboard is slow. The dashboard crashes."
    assert select_keywords(["The Dashboard", "the dashboard", "THE DASHBOARD"], text) == ["The Dashboard"]


def test_select_keywords_drops_phrases_not_in_text():
    text = 'She said the "big" launch went well.'
    # quote removal makes "the big launch" absent from the source text
    assert select_keywords(['the "big" launch', "She"], text) == ["She"]


def test_select_keywords_caps_and_keeps_order():
    words = [f"word{i}" for i in range(15)]
    text = " ".join(words)

    keywords = select_keywords(words, text, limit=10)

    assert keywords == words[:10]


def test_select_keywords_skips_empty_candidates():
    assert select_keywords(["", "  ", '""', "apple"], "an apple a day") == ["apple"]


def test_extractor_properties_without_parser():
    extractor = KeywordExtractor(nlp=spacy.blank("en"))
    text = "Customers love the Checkout page, but the checkout PAGE times out on mobile phones."

    keywords = extractor.analyze(text).keywords

    assert keywords
    assert len(keywords) <= 10
    lowered = [k.lower() for k in keywords]
    assert len(lowered) == len(set(lowered))
    assert all(k in text.lower() for k in lowered)


def test_extractor_empty_text():
    extractor = KeywordExtractor(nlp=spacy.blank("en"))
    assert extractor.analyze("   ").keywords == []


def test_clean_candidate_strips_punctuation_inside_single_quotes():
    assert clean_candidate("'release.'") == "release"
    assert clean_candidate("‘Roadmap!’") == "Roadmap"
    assert clean_candidate(".'beta'.") == "beta"


def test_select_keywords_zero_limit_returns_nothing():
    assert select_keywords(["apple"], "an apple a day", limit=0) == []


def test_extractor_keeps_explicit_zero_limit():
    extractor = KeywordExtractor(nlp=spacy.blank("en"), limit=0)

    assert extractor.limit == 0
    assert extractor.analyze("Apples and oranges").keywords == []
