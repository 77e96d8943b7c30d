"""
Token shapes accepted by the pipeline functions.

A host hands pipeline functions one of two token representations:

- a plain ``str`` (lunr <= 1 style)
- an object with ``update(fn)``, where ``fn(text, metadata)`` returns the
  new text and ``update`` returns the token (lunr.py ``Token``)

``wrap_token`` inspects the token once and returns the matching adapter, so
every normalizer applies its text transform the same way for both shapes.
"""

from abc import ABC, abstractmethod
from typing import Any, Callable

TextTransform = Callable[[str], str]


class PipelineToken(ABC):
    """A token whose text can be replaced through a str -> str transform"""

    def __init__(self, token: Any):
        self.token = token

    @abstractmethod
    def apply(self, transform: TextTransform) -> Any:
        """Replace the token text with transform(text) and return the result token"""
        pass


class PlainTextToken(PipelineToken):

    def apply(self, transform: TextTransform) -> str:
        return transform(self.token)


class UpdatableToken(PipelineToken):

    def apply(self, transform: TextTransform) -> Any:
        return self.token.update(lambda text, metadata=None: transform(text))


def wrap_token(token: Any) -> PipelineToken:
    """Pick the adapter for token based on whether it exposes update()"""
    if callable(getattr(token, "update", None)):
        return UpdatableToken(token)
    return PlainTextToken(token)
