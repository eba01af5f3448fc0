"""
Sentiment Analyzer Module
AFINN lexicon scoring with simple negation handling. Runs locally, never fails.
"""

import logging
import re
from functools import lru_cache
from typing import List, Tuple

from afinn import Afinn

from .interface import AnalyzerInterface
from .results import OperationKind, SentimentResult

logger = logging.getLogger("NLPSTUDIO_SENTIMENT")

# Characters removed before whitespace tokenisation (apostrophes and hyphens survive)
_PUNCTUATION = re.compile(r"[.,/#!?$%^&*;:{}=_`\"~()\[\]<>|\\+@]")

NEGATORS = frozenset({
    "not", "no", "non", "never",
    "cant", "can't", "dont", "don't", "doesnt", "doesn't",
    "isnt", "isn't", "wont", "won't", "wasnt", "wasn't",
    "arent", "aren't", "didnt", "didn't", "shouldnt", "shouldn't",
})

POSITIVE_THRESHOLD = 1
NEGATIVE_THRESHOLD = -1


@lru_cache(maxsize=1)
def _lexicon() -> Afinn:
    logger.debug("Loading AFINN lexicon")
    return Afinn(language="en")


def tokenize(text: str) -> List[str]:
    """Lowercase, strip punctuation and split on whitespace."""
    cleaned = _PUNCTUATION.sub(" ", (text or "").lower())
    return cleaned.split()


def label_for(score: int) -> str:
    if score > POSITIVE_THRESHOLD:
        return "positive"
    if score < NEGATIVE_THRESHOLD:
        return "negative"
    return "neutral"


def explain(score: int, comparative: float, label: str) -> str:
    return "\n".join([
        f"Score: {score} (overall sentiment; positive = more positive words, negative = more negative words)",
        f"Comparative: {comparative:.3f} (score divided by text length; helps compare long vs short texts)",
        f"This text is classified as {label}.",
    ])


class SentimentAnalyzer(AnalyzerInterface):
    """Lexicon-based polarity scorer."""

    operation = OperationKind.SENTIMENT

    def __init__(self, lexicon: Afinn | None = None):
        self._lexicon = lexicon

    @property
    def lexicon(self) -> Afinn:
        if self._lexicon is None:
            self._lexicon = _lexicon()
        return self._lexicon

    def score_tokens(self, tokens: List[str]) -> Tuple[int, List[str], List[str]]:
        """
        Score each token against the lexicon.

        A token directly preceded by a negator has its value flipped.

        Returns:
            (total score, positive tokens, negative tokens) in text order
        """
        total = 0
        positive: List[str] = []
        negative: List[str] = []

        for i, token in enumerate(tokens):
            value = int(self.lexicon.score(token))
            if value == 0:
                continue
            if i > 0 and tokens[i - 1] in NEGATORS:
                value = -value

            if value > 0:
                positive.append(token)
            elif value < 0:
                negative.append(token)
            total += value

        return total, positive, negative

    def analyze(self, text: str) -> SentimentResult:
        tokens = tokenize(text)
        score, positive, negative = self.score_tokens(tokens)
        comparative = score / len(tokens) if tokens else 0.0
        label = label_for(score)

        return SentimentResult(
            label=label,
            score=score,
            comparative=comparative,
            positive=positive,
            negative=negative,
            explanation=explain(score, comparative, label),
        )
