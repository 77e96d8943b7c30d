"""
Host namespace for lunr.py.

The registrar only talks to three host capabilities: the Pipeline class
(function registry plus ``reset``/``add`` pipelines), the stop-word filter
generator, and the language/stemmer support package. ``lunr_namespace``
collects them from an installed lunr.py; any that cannot be imported stay
None, and registration then fails with PreconditionError.
"""

import functools
import logging
from dataclasses import dataclass
from typing import Any, Callable, Optional

logger = logging.getLogger(__name__)


@dataclass
class LunrNamespace:
    pipeline_class: Any = None
    generate_stop_word_filter: Optional[Callable[..., Any]] = None
    stemmer_support: Any = None
    hu: Optional[Callable[[Any], None]] = None  # Set by registration


def lunr_namespace() -> LunrNamespace:
    """Collect host capabilities from the installed lunr package"""
    try:
        from lunr.pipeline import Pipeline
        from lunr.stop_word_filter import generate_stop_word_filter
    except ImportError as e:
        logger.warning(f"lunr is not available: {e}")
        return LunrNamespace()

    try:
        from lunr import languages
    except ImportError as e:
        logger.warning(f"lunr language support is not available: {e}")
        languages = None

    return LunrNamespace(
        pipeline_class=Pipeline,
        generate_stop_word_filter=functools.partial(generate_stop_word_filter, language="hu"),
        stemmer_support=languages,
    )
