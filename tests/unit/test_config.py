"""
Unit tests for environment-based configuration.
"""

import os
from pathlib import Path
from unittest.mock import patch

import pytest

from lunr_hu.config import (
    ANALYZER_HUNSPELL,
    ANALYZER_SNOWBALL,
    DEFAULT_DICTIONARY_PACKAGE,
    Settings,
    get_settings,
)

pytestmark = pytest.mark.unit

ENV_VARS = (
    "LUNR_HU_ANALYZER",
    "LUNR_HU_DICTIONARY_DIR",
    "LUNR_HU_DICTIONARY_PACKAGE",
    "LUNR_HU_AFFIX_FILE",
    "LUNR_HU_DICTIONARY_FILE",
    "LOG_LEVEL",
)


@pytest.fixture
def clean_env():
    """Environment without lunr-hu variables, restored afterwards"""
    with patch.dict(os.environ):
        for name in ENV_VARS:
            os.environ.pop(name, None)
        yield os.environ


class TestGetSettings:

    def test_defaults(self, clean_env, tmp_path):
        settings = get_settings(env_dir=tmp_path)

        assert settings == Settings()
        assert settings.analyzer == ANALYZER_HUNSPELL
        assert settings.dictionary_dir is None
        assert settings.dictionary_package == DEFAULT_DICTIONARY_PACKAGE
        assert settings.affix_file == "index.aff"
        assert settings.dictionary_file == "index.dic"

    def test_environment_overrides(self, clean_env, tmp_path):
        clean_env["LUNR_HU_ANALYZER"] = " Snowball "
        clean_env["LUNR_HU_DICTIONARY_DIR"] = "/usr/share/hunspell"
        clean_env["LUNR_HU_AFFIX_FILE"] = "hu_HU.aff"
        clean_env["LUNR_HU_DICTIONARY_FILE"] = "hu_HU.dic"
        clean_env["LOG_LEVEL"] = "debug"

        settings = get_settings(env_dir=tmp_path)

        assert settings.analyzer == ANALYZER_SNOWBALL
        assert settings.dictionary_dir == Path("/usr/share/hunspell")
        assert settings.affix_file == "hu_HU.aff"
        assert settings.dictionary_file == "hu_HU.dic"
        assert settings.log_level == "DEBUG"

    def test_unknown_analyzer(self, clean_env, tmp_path):
        clean_env["LUNR_HU_ANALYZER"] = "morfologik"

        with pytest.raises(ValueError, match="Valid options: hunspell, snowball"):
            get_settings(env_dir=tmp_path)

    def test_env_local_file(self, clean_env, tmp_path):
        (tmp_path / ".env.local").write_text("LUNR_HU_AFFIX_FILE=local.aff\n")
        (tmp_path / ".env").write_text("LUNR_HU_AFFIX_FILE=shared.aff\n")

        assert get_settings(env_dir=tmp_path).affix_file == "local.aff"

    def test_env_file_fallback(self, clean_env, tmp_path):
        (tmp_path / ".env").write_text("LUNR_HU_DICTIONARY_FILE=shared.dic\n")

        assert get_settings(env_dir=tmp_path).dictionary_file == "shared.dic"

    def test_env_file_does_not_override_environment(self, clean_env, tmp_path):
        clean_env["LUNR_HU_AFFIX_FILE"] = "real.aff"
        (tmp_path / ".env").write_text("LUNR_HU_AFFIX_FILE=file.aff\n")

        assert get_settings(env_dir=tmp_path).affix_file == "real.aff"
