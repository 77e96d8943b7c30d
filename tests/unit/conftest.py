"""Unit test configuration - fake analyzer and fake lunr host"""

from types import SimpleNamespace

import pytest

from lunr_hu.analyzers.base import BaseAnalyzer
from lunr_hu.config import Settings
from lunr_hu.registrar import PipelineRegistrar
from lunr_hu.stemmer import StemmerBridge
from lunr_hu.support import HungarianSupport


class FakeAnalyzer(BaseAnalyzer):
    """Analyzer answering from a word → candidates table, recording queries"""

    def __init__(self, stems=None):
        self.stems = stems or {}
        self.calls = []

    def stem(self, word):
        self.calls.append(word)
        return list(self.stems.get(word, []))

    def get_info(self):
        return {"name": "fake", "type": "fake", "provider": "tests"}


class FakeToken:
    """Updatable token with the lunr.py Token contract"""

    def __init__(self, string, metadata=None):
        self.string = string
        self.metadata = metadata or {}

    def update(self, fn):
        self.string = fn(self.string, self.metadata)
        return self

    def __str__(self):
        return self.string


class FakePipeline:
    """Pipeline with lunr.py's registry, reset/add and run semantics"""

    registered_functions = {}
    register_calls = []

    def __init__(self):
        self._stack = []

    @classmethod
    def register_function(cls, fn, label):
        cls.register_calls.append(label)
        fn.label = label
        cls.registered_functions[label] = fn

    def reset(self):
        self._stack = []

    def add(self, *fns):
        self._stack.extend(fns)

    def run(self, tokens):
        for fn in self._stack:
            results = []
            for i, token in enumerate(tokens):
                result = fn(token, i, tokens)
                if not result:
                    continue
                results.append(result)
            tokens = results
        return tokens


def fake_generate_stop_word_filter(stop_words):
    def stop_word_filter(token, i=None, tokens=None):
        if token and str(token) not in stop_words:
            return token

    return stop_word_filter


class FakeBuilder:
    def __init__(self, pipeline_class, search_pipeline=True):
        self.pipeline = pipeline_class()
        if search_pipeline:
            self.search_pipeline = pipeline_class()

    def use(self, fn, *args):
        fn(self, *args)


@pytest.fixture
def analyzer():
    return FakeAnalyzer({
        "kutyák": ["kutya"],
        "házak": ["ház", "háza"],
    })


@pytest.fixture
def stemmer(analyzer):
    return StemmerBridge(analyzer)


@pytest.fixture
def pipeline_class():
    """Fresh Pipeline subclass so registries don't leak between tests"""
    return type("Pipeline", (FakePipeline,), {
        "registered_functions": {},
        "register_calls": [],
    })


@pytest.fixture
def host(pipeline_class):
    return SimpleNamespace(
        pipeline_class=pipeline_class,
        generate_stop_word_filter=fake_generate_stop_word_filter,
        stemmer_support=SimpleNamespace(),
    )


@pytest.fixture
def support(analyzer, stemmer):
    return HungarianSupport(
        settings=Settings(),
        analyzer=analyzer,
        stemmer=stemmer,
        registrar=PipelineRegistrar(stemmer),
    )


@pytest.fixture
def builder(pipeline_class):
    return FakeBuilder(pipeline_class)


@pytest.fixture
def make_token():
    return FakeToken


@pytest.fixture
def make_analyzer():
    return FakeAnalyzer


@pytest.fixture
def make_builder(pipeline_class):
    return lambda search_pipeline=True: FakeBuilder(pipeline_class, search_pipeline)
