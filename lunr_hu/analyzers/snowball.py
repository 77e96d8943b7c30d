"""
Snowball stemmer for Hungarian (via NLTK).

Algorithmic alternative to the dictionary analyzer: needs no resource files
and always produces a stem, so the identity fallback only applies to empty
input.
"""

from typing import List

from nltk.stem.snowball import SnowballStemmer

from .base import BaseAnalyzer


class SnowballAnalyzer(BaseAnalyzer):

    def __init__(self, language: str = "hungarian"):
        self.language = language
        self._stemmer = SnowballStemmer(language)

    def stem(self, word: str) -> List[str]:
        if not word:
            return []
        return [self._stemmer.stem(word)]

    def get_info(self) -> dict:
        return {
            "name": f"snowball-{self.language}",
            "type": "snowball",
            "provider": "nltk",
        }
