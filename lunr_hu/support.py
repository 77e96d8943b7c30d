"""
Initialization of Hungarian language support.

``load()`` is the only way to obtain a registration function: it awaits the
analyzer construction first, so no stemming call can happen before the
analyzer exists.
"""

import logging
from dataclasses import dataclass
from typing import Any, Callable, Optional

from .analyzers import BaseAnalyzer, create_analyzer
from .config import Settings, get_settings
from .registrar import PipelineRegistrar
from .stemmer import StemmerBridge

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class HungarianSupport:
    """Result of a completed initialization: the ready analyzer and its functions"""
    settings: Settings
    analyzer: BaseAnalyzer
    stemmer: StemmerBridge
    registrar: PipelineRegistrar

    def register(self, host: Any) -> Callable[[Any], None]:
        """Register the pipeline functions with host; see PipelineRegistrar.register"""
        return self.registrar.register(host)


async def load(settings: Optional[Settings] = None) -> HungarianSupport:
    """
    Build the analyzer and the pipeline functions around it.

    Call once per process and share the result.

    Args:
        settings: Runtime settings (default: get_settings())

    Returns:
        HungarianSupport whose register(host) installs the pipeline

    Raises:
        ResourceNotFoundError: Dictionary resources cannot be read
    """
    settings = settings or get_settings()
    analyzer = await create_analyzer(settings)
    stemmer = StemmerBridge(analyzer)
    logger.info("Hungarian language support ready")
    return HungarianSupport(
        settings=settings,
        analyzer=analyzer,
        stemmer=stemmer,
        registrar=PipelineRegistrar(stemmer),
    )
