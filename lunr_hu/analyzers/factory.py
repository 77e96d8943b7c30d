"""
Asynchronous analyzer construction based on configuration.
"""

import asyncio
import logging

from ..config import ANALYZER_HUNSPELL, ANALYZER_SNOWBALL, ANALYZERS, Settings
from ..resources import load_dictionary_resources
from .base import BaseAnalyzer
from .hunspell import build_hunspell_analyzer
from .snowball import SnowballAnalyzer

logger = logging.getLogger(__name__)


async def create_analyzer(settings: Settings) -> BaseAnalyzer:
    """
    Build the analyzer named by settings.analyzer.

    Supported types:
        - hunspell: Load the affix table, then the word list, then construct
          the dictionary (default)
        - snowball: NLTK Snowball stemmer, no resources needed

    Blocking work (file reads, dictionary parsing) runs in worker threads.

    Args:
        settings: Runtime settings

    Returns:
        Analyzer handle, shared by every stemming call afterwards

    Raises:
        ResourceNotFoundError: A dictionary resource cannot be read
        ValueError: Unknown analyzer type
    """
    analyzer_type = settings.analyzer.lower()

    try:
        if analyzer_type == ANALYZER_HUNSPELL:
            affix, dictionary = await load_dictionary_resources(settings)
            logger.info(f"Building hunspell analyzer from {affix.path.parent}")
            analyzer = await asyncio.to_thread(
                build_hunspell_analyzer,
                affix.data,
                dictionary.data,
                affix.name,
                dictionary.name,
            )

        elif analyzer_type == ANALYZER_SNOWBALL:
            logger.info("Building Snowball analyzer (nltk)")
            analyzer = await asyncio.to_thread(SnowballAnalyzer, "hungarian")

        else:
            raise ValueError(
                f"Unknown analyzer type: {analyzer_type}. "
                f"Valid options: {', '.join(ANALYZERS)}"
            )

    except Exception as e:
        logger.error(f"Failed to create analyzer ({analyzer_type}): {e}")
        raise

    logger.info(f"{analyzer_type} analyzer loaded: {analyzer.get_info()['name']}")
    return analyzer
