"""
Abstract base class for morphological analyzers.

All analyzers must implement this interface to be swappable behind the
stemmer bridge.
"""

from abc import ABC, abstractmethod
from typing import List


class BaseAnalyzer(ABC):
    """
    Read-only stem lookup over a loaded analyzer engine.

    Instances are built once per process and shared; stem() must not mutate
    analyzer state.
    """

    @abstractmethod
    def stem(self, word: str) -> List[str]:
        """
        Candidate base forms of word.

        Args:
            word: Token text

        Returns:
            Candidate stems in the engine's own order, possibly empty
        """
        pass

    @abstractmethod
    def get_info(self) -> dict:
        """
        Get information about the analyzer.

        Returns:
            Dict with keys: name, type, provider
        """
        pass
