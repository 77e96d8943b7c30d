"""
Registration of the Hungarian pipeline functions with a lunr host.

Registering does three things:
1. Checks the host has the base library and its stemmer support
2. Registers trimmer, stop-word filter and stemmer under fixed labels
3. Installs ``host.hu``, the activation function

Activation is applied per builder (``builder.use(host.hu)``) and replaces the
builder's pipelines:
- pipeline: [trimmer-hu, stopWordFilter-hu, stemmer-hu]
- search_pipeline (if present): [stemmer-hu]
"""

import logging
from typing import Any, Callable, Dict, FrozenSet

from .errors import PreconditionError
from .stopwords import STOP_WORDS
from .trimmer import trimmer as default_trimmer

logger = logging.getLogger(__name__)

TRIMMER_LABEL = "trimmer-hu"
STOP_WORD_FILTER_LABEL = "stopWordFilter-hu"
STEMMER_LABEL = "stemmer-hu"

BASE_LIBRARY = "lunr"
STEMMER_SUPPORT = "lunr.languages (stemmer support)"

PipelineFunction = Callable[..., Any]


def check_host(host: Any) -> None:
    """
    Validate the host namespace before anything is registered.

    Raises:
        PreconditionError: Lists every missing capability
    """
    missing = []
    if (
        getattr(host, "pipeline_class", None) is None
        or getattr(host, "generate_stop_word_filter", None) is None
    ):
        missing.append(BASE_LIBRARY)
    if getattr(host, "stemmer_support", None) is None:
        missing.append(STEMMER_SUPPORT)

    if missing:
        logger.error(f"Host is missing required capabilities: {', '.join(missing)}")
        raise PreconditionError(missing)


def _register_function(pipeline_class: Any, fn: PipelineFunction, label: str) -> None:
    registry = getattr(pipeline_class, "registered_functions", None)
    if registry is not None and registry.get(label) is fn:
        return
    pipeline_class.register_function(fn, label)


class PipelineRegistrar:
    """Registers one stemmer bridge (plus trimmer and stop-word filter) with hosts"""

    def __init__(
        self,
        stemmer: PipelineFunction,
        trimmer: PipelineFunction = default_trimmer,
        stop_words: FrozenSet[str] = STOP_WORDS,
    ):
        self.stemmer = stemmer
        self.trimmer = trimmer
        self.stop_words = stop_words
        # Generated per host Pipeline class, by that host's own generator
        self.stop_word_filters: Dict[Any, PipelineFunction] = {}

    def register(self, host: Any) -> Callable[[Any], None]:
        """
        Register the Hungarian functions with host and install host.hu.

        Args:
            host: Host namespace (see lunr_hu.host.lunr_namespace)

        Returns:
            The activation function, also set as host.hu

        Raises:
            PreconditionError: Host lacks lunr or its stemmer support.
                Nothing is registered in that case.
        """
        check_host(host)

        pipeline_class = host.pipeline_class
        stop_word_filter = self.stop_word_filters.get(pipeline_class)
        if stop_word_filter is None:
            stop_word_filter = host.generate_stop_word_filter(self.stop_words)
            self.stop_word_filters[pipeline_class] = stop_word_filter

        _register_function(pipeline_class, self.trimmer, TRIMMER_LABEL)
        _register_function(pipeline_class, stop_word_filter, STOP_WORD_FILTER_LABEL)
        _register_function(pipeline_class, self.stemmer, STEMMER_LABEL)

        def hu(builder: Any, *args, **kwargs) -> None:
            self.activate(builder, stop_word_filter)

        host.hu = hu
        logger.info("Hungarian pipeline functions registered")
        return hu

    def activate(self, builder: Any, stop_word_filter: PipelineFunction) -> None:
        """Replace builder's pipelines with the Hungarian ones"""
        builder.pipeline.reset()
        builder.pipeline.add(self.trimmer, stop_word_filter, self.stemmer)

        # lunr 2: query terms go through the search pipeline and must be
        # stemmed the same way as indexed terms
        search_pipeline = getattr(builder, "search_pipeline", None)
        if search_pipeline is not None:
            search_pipeline.reset()
            search_pipeline.add(self.stemmer)
