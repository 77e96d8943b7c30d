"""Runtime configuration for lunr-hu.

Values come from environment variables. A ``.env.local`` (preferred) or
``.env`` file in the working directory is loaded first, without overriding
variables that are already set.
"""

import logging
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv

logger = logging.getLogger(__name__)

ANALYZER_HUNSPELL = "hunspell"
ANALYZER_SNOWBALL = "snowball"
ANALYZERS = (ANALYZER_HUNSPELL, ANALYZER_SNOWBALL)

DEFAULT_DICTIONARY_PACKAGE = "lunr_hu.dictionaries"
DEFAULT_AFFIX_FILE = "index.aff"
DEFAULT_DICTIONARY_FILE = "index.dic"


@dataclass(frozen=True)
class Settings:
    analyzer: str = ANALYZER_HUNSPELL
    dictionary_dir: Optional[Path] = None
    dictionary_package: str = DEFAULT_DICTIONARY_PACKAGE
    affix_file: str = DEFAULT_AFFIX_FILE
    dictionary_file: str = DEFAULT_DICTIONARY_FILE
    log_level: str = "INFO"


def _load_env_files(directory: Path) -> None:
    env_local = directory / ".env.local"
    env_file = directory / ".env"

    if env_local.exists():
        logger.debug(f"Loading environment from: {env_local}")
        load_dotenv(env_local, override=False)
    elif env_file.exists():
        logger.debug(f"Loading environment from: {env_file}")
        load_dotenv(env_file, override=False)


def get_settings(env_dir: Optional[Path] = None) -> Settings:
    """
    Load settings from environment variables.

    Config (env vars):
        LUNR_HU_ANALYZER: "hunspell" | "snowball" (default: hunspell)
        LUNR_HU_DICTIONARY_DIR: Directory holding the affix and dictionary files
        LUNR_HU_DICTIONARY_PACKAGE: Installed package holding the files
            (used when LUNR_HU_DICTIONARY_DIR is unset)
        LUNR_HU_AFFIX_FILE: Affix file name (default: index.aff)
        LUNR_HU_DICTIONARY_FILE: Dictionary file name (default: index.dic)
        LOG_LEVEL: Console log level for setup_logging (default: INFO)

    Args:
        env_dir: Directory searched for .env.local / .env (default: cwd)

    Returns:
        Settings instance

    Raises:
        ValueError: LUNR_HU_ANALYZER names an unknown backend
    """
    _load_env_files(env_dir or Path.cwd())

    analyzer = os.getenv("LUNR_HU_ANALYZER", ANALYZER_HUNSPELL).strip().lower()
    if analyzer not in ANALYZERS:
        raise ValueError(
            f"Unknown analyzer type: {analyzer}. "
            f"Valid options: {', '.join(ANALYZERS)}"
        )

    dictionary_dir = os.getenv("LUNR_HU_DICTIONARY_DIR")

    return Settings(
        analyzer=analyzer,
        dictionary_dir=Path(dictionary_dir) if dictionary_dir else None,
        dictionary_package=os.getenv("LUNR_HU_DICTIONARY_PACKAGE", DEFAULT_DICTIONARY_PACKAGE),
        affix_file=os.getenv("LUNR_HU_AFFIX_FILE", DEFAULT_AFFIX_FILE),
        dictionary_file=os.getenv("LUNR_HU_DICTIONARY_FILE", DEFAULT_DICTIONARY_FILE),
        log_level=os.getenv("LOG_LEVEL", "INFO").upper(),
    )
