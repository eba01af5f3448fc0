"""NLP Studio — text analysis API with an in-memory history."""

__version__ = "1.0.0"
