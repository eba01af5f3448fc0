"""
spaCy pipeline loader.

One pipeline per model name per process. A missing model falls back to
``spacy.blank("en")`` so keyword/entity extraction degrades instead of failing.
"""

import logging
from functools import lru_cache

import spacy
from spacy.language import Language

from nlp_studio import config

logger = logging.getLogger("NLPSTUDIO_SPACY")


@lru_cache(maxsize=4)
def load_pipeline(model_name: str | None = None) -> Language:
    """Load (and cache) a spaCy pipeline by package name."""
    name = model_name or config.SPACY_MODEL
    try:
        nlp = spacy.load(name)
        logger.info(f"spaCy model loaded: {name}")
    except OSError as exc:
        logger.warning(
            "spaCy model %r not installed (%s); using blank English pipeline. "
            "Install it with: python -m spacy download %s",
            name, exc, name,
        )
        nlp = spacy.blank("en")
    return nlp


def has_parser(nlp: Language) -> bool:
    return nlp.has_pipe("parser")


def has_ner(nlp: Language) -> bool:
    return nlp.has_pipe("ner")
