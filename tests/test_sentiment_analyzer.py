"""Tests for the AFINN sentiment analyzer."""

import pytest

from nlp_studio.analyzers.results import SentimentResult
from nlp_studio.analyzers.sentiment_analyzer import SentimentAnalyzer, label_for, tokenize


class StubLexicon:
    """Minimal stand-in exposing Afinn.score for single tokens."""

    def __init__(self, values):
        self.values = values

    def score(self, token):
        return float(self.values.get(token, 0))


@pytest.fixture
def analyzer():
    return SentimentAnalyzer()


def test_love_is_positive(analyzer):
    result = analyzer.analyze("I love this product")

    assert isinstance(result, SentimentResult)
    assert result.label == "positive"
    assert result.score == 3
    assert result.comparative == pytest.approx(3 / 4)
    assert result.positive == ["love"]
    assert result.negative == []


def test_hate_is_negative(analyzer):
    result = analyzer.analyze("I hate waiting in line.")

    assert result.label == "negative"
    assert result.score < -1
    assert "hate" in result.negative


def test_negator_flips_following_word(analyzer):
    result = analyzer.analyze("This is not good")

    assert result.score == -3
    assert result.label == "negative"
    assert result.negative == ["good"]


def test_empty_text_is_neutral_zero(analyzer):
    result = analyzer.analyze("")

    assert result.label == "neutral"
    assert result.score == 0
    assert result.comparative == 0.0
    assert result.positive == [] and result.negative == []


@pytest.mark.parametrize(
    "score, label",
    [(2, "positive"), (1, "neutral"), (0, "neutral"), (-1, "neutral"), (-2, "negative")],
)
def test_label_thresholds(score, label):
    assert label_for(score) == label


def test_comparative_is_score_over_token_count():
    analyzer = SentimentAnalyzer(lexicon=StubLexicon({"nice": 1, "fine": 1}))
    result = analyzer.analyze("nice, fine; and more words here!")

    assert result.score == 2
    assert result.comparative == pytest.approx(2 / 6)
    assert result.label == "positive"


def test_explanation_mentions_values_and_label():
    analyzer = SentimentAnalyzer(lexicon=StubLexicon({"meh": -1}))
    result = analyzer.analyze("meh meh")

    lines = result.explanation.splitlines()
    assert lines[0].startswith("Score: -2 ")
    assert lines[1].startswith("Comparative: -1.000 ")
    assert lines[2] == "This text is classified as negative."


def test_tokenize_strips_punctuation_keeps_apostrophes():
    assert tokenize("Don't STOP! (now)") == ["don't", "stop", "now"]
