"""
Keyword Extractor Module
Picks noun phrases from the text and keeps the ones that really occur in it.
"""

import logging
import re
from typing import Iterable, List

from spacy.language import Language

from nlp_studio import config
from ..interface import AnalyzerInterface
from ..results import KeywordsResult, OperationKind
from .spacy_loader import has_parser, load_pipeline

logger = logging.getLogger("NLPSTUDIO_KEYWORD")

_QUOTES_AND_PARENS = re.compile(r"[“”\"()]")
# Punctuation, single quotes and whitespace trimmed from both ends
_EDGE_CHARS = ".,!?;:'‘’ \t\n"


def clean_candidate(phrase: str) -> str:
    """Drop quotes/parentheses and strip punctuation from both ends."""
    cleaned = _QUOTES_AND_PARENS.sub("", phrase or "")
    return cleaned.strip(_EDGE_CHARS)


def select_keywords(candidates: Iterable[str], text: str, limit: int = 10) -> List[str]:
    """
    Deduplicate and verify keyword candidates.

    Args:
        candidates: Raw phrases in extraction order
        text: Source text every keyword must occur in (case-insensitive)
        limit: Maximum number of keywords returned

    Returns:
        First-seen casing of each unique candidate, in first-seen order
    """
    if limit <= 0:
        return []

    text_lower = (text or "").lower()
    seen = {}

    for phrase in candidates:
        cleaned = clean_candidate(phrase)
        if not cleaned:
            continue

        normalized = cleaned.lower()
        if normalized in seen:
            continue
        if normalized not in text_lower:
            continue

        seen[normalized] = cleaned
        if len(seen) >= limit:
            break

    return list(seen.values())


class KeywordExtractor(AnalyzerInterface):
    """Noun-phrase keyword extraction on top of spaCy."""

    operation = OperationKind.KEYWORDS

    def __init__(self, nlp: Language | None = None, limit: int | None = None):
        self._nlp = nlp
        self.limit = limit if limit is not None else config.KEYWORD_LIMIT

    @property
    def nlp(self) -> Language:
        if self._nlp is None:
            self._nlp = load_pipeline()
        return self._nlp

    def candidates(self, text: str) -> List[str]:
        """Noun chunks, or content words when the pipeline has no parser."""
        doc = self.nlp(text)
        if has_parser(self.nlp):
            return [chunk.text for chunk in doc.noun_chunks]

        logger.debug("No dependency parser loaded; using content words as keyword candidates")
        return [tok.text for tok in doc if tok.is_alpha and not tok.is_stop]

    def analyze(self, text: str) -> KeywordsResult:
        if not text or not text.strip():
            return KeywordsResult(keywords=[])
        keywords = select_keywords(self.candidates(text), text, limit=self.limit)
        logger.debug(f"Selected {len(keywords)} keywords")
        return KeywordsResult(keywords=keywords)
