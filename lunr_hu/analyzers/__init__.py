"""
Morphological analyzers behind the Hungarian stemmer.

Usage:
    from lunr_hu.analyzers import create_analyzer

    analyzer = await create_analyzer(settings)
    analyzer.stem("kutyák")  # ['kutya']
"""

from .base import BaseAnalyzer
from .factory import create_analyzer
from .hunspell import HunspellAnalyzer, HunspellEngine, build_hunspell_analyzer
from .snowball import SnowballAnalyzer

__all__ = [
    'BaseAnalyzer',
    'HunspellAnalyzer',
    'HunspellEngine',
    'SnowballAnalyzer',
    'build_hunspell_analyzer',
    'create_analyzer',
]
