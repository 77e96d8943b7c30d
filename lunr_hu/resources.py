"""
Dictionary resource loading.

The hunspell analyzer needs two binary resources: the affix table
(``index.aff``) and the word list (``index.dic``). They are read once at
startup, either from an explicitly configured directory or from the
directory of an installed package, and never mutated afterwards.
"""

import asyncio
import importlib.resources
import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Tuple, Union

from .config import Settings
from .errors import ResourceNotFoundError

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class DictionaryResource:
    """Raw bytes of one dictionary file"""
    name: str    # File name, e.g. "index.aff"
    path: Path   # Where it was read from
    data: bytes

    def __len__(self) -> int:
        return len(self.data)


def resolve_dictionary_dir(settings: Settings) -> Path:
    """
    Find the directory holding the dictionary files.

    LUNR_HU_DICTIONARY_DIR wins when set; otherwise the directory of the
    installed package named by LUNR_HU_DICTIONARY_PACKAGE is used.

    Raises:
        ResourceNotFoundError: Directory missing or package not importable
    """
    if settings.dictionary_dir is not None:
        base = settings.dictionary_dir
    else:
        try:
            base = Path(str(importlib.resources.files(settings.dictionary_package)))
        except ModuleNotFoundError as e:
            raise ResourceNotFoundError(
                f"Dictionary package not installed: {settings.dictionary_package}"
            ) from e

    if not base.is_dir():
        raise ResourceNotFoundError(f"Dictionary directory not found: {base}", path=base)
    return base


def load_resource(base: Union[str, Path], file_name: str) -> DictionaryResource:
    """
    Read one dictionary resource.

    Args:
        base: Directory holding the resource
        file_name: Resource file name

    Returns:
        DictionaryResource with the file's bytes

    Raises:
        ResourceNotFoundError: File missing or unreadable
    """
    path = Path(base) / file_name
    try:
        with open(path, "rb") as f:
            data = f.read()
    except OSError as e:
        raise ResourceNotFoundError(f"Cannot read dictionary resource {path}: {e}", path=path) from e

    logger.debug(f"Loaded {file_name} ({len(data)} bytes) from {path.parent}")
    return DictionaryResource(name=file_name, path=path, data=data)


async def load_dictionary_resources(settings: Settings) -> Tuple[DictionaryResource, DictionaryResource]:
    """
    Load the affix table, then the word list, off the event loop.

    Returns:
        (affix, dictionary) resources
    """
    base = await asyncio.to_thread(resolve_dictionary_dir, settings)
    affix = await asyncio.to_thread(load_resource, base, settings.affix_file)
    dictionary = await asyncio.to_thread(load_resource, base, settings.dictionary_file)
    return affix, dictionary
