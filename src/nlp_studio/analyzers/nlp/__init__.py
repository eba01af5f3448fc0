"""
NLP Module for keyword and entity extraction
Both components run on a shared spaCy pipeline.
"""

from .keyword_extractor import KeywordExtractor
from .ner_extractor import NERExtractor

__all__ = ['KeywordExtractor', 'NERExtractor']
