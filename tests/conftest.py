"""Pytest configuration shared by unit and integration tests"""

import logging
import sys
from pathlib import Path

import pytest

# Add project root to path for lunr_hu imports without installation
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

# Minimal hunspell dictionary: "kutya" takes the plural suffix (a → ák),
# "ház" has no affixes
TEST_AFFIX = """SET UTF-8

SFX A Y 1
SFX A a ák a
"""

TEST_DICTIONARY = """2
kutya/A
ház
"""


@pytest.fixture
def dictionary_dir(tmp_path):
    """Directory with index.aff / index.dic holding the test dictionary"""
    (tmp_path / "index.aff").write_text(TEST_AFFIX, encoding="utf-8")
    (tmp_path / "index.dic").write_text(TEST_DICTIONARY, encoding="utf-8")
    return tmp_path


@pytest.fixture
def restore_root_logger():
    """Undo handler changes made by setup_logging"""
    root = logging.getLogger()
    handlers = list(root.handlers)
    level = root.level
    yield root
    for handler in root.handlers:
        if handler not in handlers:
            handler.close()
    root.handlers[:] = handlers
    root.setLevel(level)
