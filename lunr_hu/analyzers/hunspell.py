"""
Hunspell dictionary analyzer using spylls.

spylls reads a dictionary from a ``<base>.aff`` / ``<base>.dic`` pair on
disk. The loaded resources arrive as byte buffers, so HunspellEngine mounts
them as files in a private scratch directory, builds the dictionary from the
mounted pair and removes the directory once the dictionary is in memory.
"""

import logging
import shutil
import tempfile
from pathlib import Path
from typing import List

from spylls.hunspell import Dictionary

from .base import BaseAnalyzer

logger = logging.getLogger(__name__)


class HunspellAnalyzer(BaseAnalyzer):
    """Stem lookup against a loaded hunspell dictionary"""

    def __init__(self, dictionary: Dictionary, name: str = "hunspell"):
        self.dictionary = dictionary
        self.name = name

    def stem(self, word: str) -> List[str]:
        stems = []
        for form in self.dictionary.lookuper.good_forms(word):
            parts = getattr(form, "parts", None)
            if parts:
                # Compound: leading parts as written, last part reduced
                candidate = "".join(part.text for part in parts[:-1]) + parts[-1].stem
            else:
                candidate = form.stem
            if candidate and candidate not in stems:
                stems.append(candidate)
        return stems

    def get_info(self) -> dict:
        return {
            "name": self.name,
            "type": "hunspell",
            "provider": "spylls",
        }


class HunspellEngine:
    """
    Scratch file system for building a HunspellAnalyzer from byte buffers.

    Usage:
        with HunspellEngine() as engine:
            aff = engine.mount_buffer(affix_bytes, "index.aff")
            dic = engine.mount_buffer(dictionary_bytes, "index.dic")
            analyzer = engine.create(aff, dic)
    """

    def __init__(self):
        self.root = Path(tempfile.mkdtemp(prefix="lunr-hu-"))

    def mount_buffer(self, buffer: bytes, file_name: str) -> Path:
        """Write buffer into the scratch directory as file_name"""
        path = self.root / Path(file_name).name
        path.write_bytes(buffer)
        return path

    def create(self, affix_file: Path, dictionary_file: Path) -> HunspellAnalyzer:
        """
        Build an analyzer from a mounted affix/dictionary pair.

        Raises:
            ValueError: The two files do not share a base name
        """
        if affix_file.with_suffix("") != dictionary_file.with_suffix(""):
            raise ValueError(
                f"Affix and dictionary files must share a base name: "
                f"{affix_file.name}, {dictionary_file.name}"
            )
        dictionary = Dictionary.from_files(str(affix_file.with_suffix("")))
        return HunspellAnalyzer(dictionary, name=affix_file.stem)

    def close(self):
        shutil.rmtree(self.root, ignore_errors=True)

    def __enter__(self) -> "HunspellEngine":
        return self

    def __exit__(self, exc_type, exc, tb):
        self.close()


def build_hunspell_analyzer(affix: bytes, dictionary: bytes,
                            affix_name: str = "index.aff",
                            dictionary_name: str = "index.dic") -> HunspellAnalyzer:
    """Mount both buffers and construct the analyzer (blocking)"""
    with HunspellEngine() as engine:
        affix_file = engine.mount_buffer(affix, affix_name)
        dictionary_file = engine.mount_buffer(dictionary, dictionary_name)
        return engine.create(affix_file, dictionary_file)
