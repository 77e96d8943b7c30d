"""
lunr-hu - Hungarian language support for lunr.py.

Adds a trimmer, a stop-word filter and a dictionary-based (hunspell) stemmer
to lunr pipelines.

The hunspell backend needs the Hungarian affix and dictionary files. None
are bundled: set LUNR_HU_DICTIONARY_DIR to a directory holding index.aff and
index.dic (or copy them into lunr_hu/dictionaries), otherwise load() raises
ResourceNotFoundError. LUNR_HU_ANALYZER=snowball needs no files.

Usage:
    from lunr.builder import Builder
    from lunr_hu import load, lunr_namespace

    support = await load()
    host = lunr_namespace()
    support.register(host)

    builder = Builder()
    builder.use(host.hu)
    builder.ref("id")
    builder.field("body")
    for doc in docs:
        builder.add(doc)
    idx = builder.build()
"""

from .config import Settings, get_settings
from .errors import LunrHuError, PreconditionError, ResourceNotFoundError
from .host import LunrNamespace, lunr_namespace
from .logging_config import setup_logging
from .registrar import STEMMER_LABEL, STOP_WORD_FILTER_LABEL, TRIMMER_LABEL, PipelineRegistrar
from .stemmer import StemmerBridge
from .stopwords import STOP_WORDS
from .support import HungarianSupport, load
from .trimmer import WORD_CHARACTERS, generate_trimmer

__version__ = "0.1.0"

__all__ = [
    "HungarianSupport",
    "LunrHuError",
    "LunrNamespace",
    "PipelineRegistrar",
    "PreconditionError",
    "ResourceNotFoundError",
    "STEMMER_LABEL",
    "STOP_WORDS",
    "STOP_WORD_FILTER_LABEL",
    "Settings",
    "StemmerBridge",
    "TRIMMER_LABEL",
    "WORD_CHARACTERS",
    "generate_trimmer",
    "get_settings",
    "load",
    "lunr_namespace",
    "setup_logging",
    "__version__",
]
