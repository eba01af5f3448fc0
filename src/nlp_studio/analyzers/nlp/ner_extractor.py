"""
Named Entity Recognition (NER) Extractor Module
Uses spaCy to sort entities into people, places and organizations.
"""

import logging
from typing import Dict, Iterable, List

from spacy.language import Language

from ..interface import AnalyzerInterface
from ..results import EntitiesResult, OperationKind
from .spacy_loader import has_ner, load_pipeline

logger = logging.getLogger("NLPSTUDIO_NER")

# spaCy entity label -> result category
ENTITY_CATEGORIES = {
    "PERSON": "people",
    "GPE": "places",
    "LOC": "places",
    "FAC": "places",
    "ORG": "organizations",
}


def group_entities(entities: Iterable) -> Dict[str, List[str]]:
    """
    Bucket entity spans by category, in tagger order.

    Args:
        entities: Objects exposing ``text`` and ``label_`` (spaCy spans)

    Returns:
        Mapping with ``people``, ``places`` and ``organizations`` lists
    """
    grouped: Dict[str, List[str]] = {"people": [], "places": [], "organizations": []}
    for ent in entities:
        category = ENTITY_CATEGORIES.get(ent.label_)
        if category:
            grouped[category].append(ent.text)
    return grouped


class NERExtractor(AnalyzerInterface):
    """
    Named Entity Recognition using a spaCy pipeline.
    Extracts: PERSON, GPE/LOC/FAC, ORG
    """

    operation = OperationKind.ENTITIES

    def __init__(self, nlp: Language | None = None):
        self._nlp = nlp

    @property
    def nlp(self) -> Language:
        if self._nlp is None:
            self._nlp = load_pipeline()
        return self._nlp

    def validate(self) -> bool:
        if not has_ner(self.nlp):
            logger.warning("Loaded spaCy pipeline has no NER component; entity lists will be empty")
            return False
        return True

    def analyze(self, text: str) -> EntitiesResult:
        if not text or not text.strip():
            return EntitiesResult()

        doc = self.nlp(text)
        grouped = group_entities(doc.ents)
        logger.debug(
            "Extracted %d people, %d places, %d organizations",
            len(grouped["people"]), len(grouped["places"]), len(grouped["organizations"]),
        )
        return EntitiesResult(**grouped)
