"""Integration test configuration - real lunr, spylls and nltk"""

import pytest

from lunr_hu.analyzers.base import BaseAnalyzer


class TableAnalyzer(BaseAnalyzer):
    """Analyzer answering from a fixed table, for end-to-end lunr runs"""

    def __init__(self, stems):
        self.stems = stems

    def stem(self, word):
        return list(self.stems.get(word, []))

    def get_info(self):
        return {"name": "table", "type": "table", "provider": "tests"}


@pytest.fixture
def table_analyzer():
    return TableAnalyzer({
        "kutyák": ["kutya"],
        "kutyát": ["kutya"],
        "házak": ["ház"],
    })
