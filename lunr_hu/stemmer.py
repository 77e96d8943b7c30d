"""
Hungarian stemmer bridge.

Wraps the shared analyzer handle in the synchronous per-token calling
convention of lunr pipelines: ``stemmer(token, i, tokens)``.

Fallback policy:
- Candidates found: the first candidate, in the analyzer's own order
- No candidates: the original text, unchanged
- Analyzer error on a token: logged, then treated like no candidates

A word the dictionary does not know is a normal outcome, never an error, so
a single token can not abort the pipeline.

Examples:
- "kutyák" → "kutya"
- "xyzxyz" → "xyzxyz"
"""

import logging
from typing import Any, List, Optional

from .analyzers.base import BaseAnalyzer
from .tokens import wrap_token

logger = logging.getLogger(__name__)


class StemmerBridge:
    """Per-token stemming over an analyzer handle, for both token shapes"""

    def __init__(self, analyzer: BaseAnalyzer):
        self.analyzer = analyzer

    def stem_word(self, word: str) -> str:
        """
        Stem a single word.

        Args:
            word: Token text

        Returns:
            First candidate stem, or word itself when there is none

        Examples:
            >>> bridge.stem_word("kutyák")
            'kutya'
            >>> bridge.stem_word("xyzxyz")
            'xyzxyz'
        """
        if not word:
            return word

        try:
            candidates = self.analyzer.stem(word)
        except Exception as e:
            logger.warning(f"Stemming failed for {word!r}, keeping token: {e}")
            return word

        if candidates:
            logger.debug(f"{word} → {' '.join(candidates)}")
            return candidates[0]

        logger.debug(f"NOT STEMMED {word}")
        return word

    def __call__(self, token: Any, i: Optional[int] = None, tokens: Optional[List[Any]] = None) -> Any:
        return wrap_token(token).apply(self.stem_word)
