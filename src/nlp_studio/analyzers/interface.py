"""
Analyzer Interface Module
Abstract base class defining the contract for all text analysis strategies.
"""

from abc import ABC, abstractmethod

from .results import OperationKind


class AnalyzerInterface(ABC):
    """Abstract base class for all analyzers.

    ``analyze`` may be a plain method or a coroutine function; the
    dispatcher awaits whatever comes back when it is awaitable.
    """

    operation: OperationKind

    @abstractmethod
    def analyze(self, text: str):
        """
        Perform analysis on the given text.

        Args:
            text: Input text to analyze

        Returns:
            The result model registered for ``operation``
        """
        pass

    def validate(self) -> bool:
        """Validate analyzer configuration and dependencies."""
        return True
