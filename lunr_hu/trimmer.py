"""
Trimmer for Hungarian tokens.

Strips leading and trailing characters that fall outside the word character
class. Inner characters are left alone, so "e-mail" stays "e-mail" while
"(kutyák)," becomes "kutyák".
"""

import re
from typing import Any, Callable, Optional

from .tokens import wrap_token

# Latin letter ranges (basic, supplement, extended A-E, phonetic extensions,
# letterlike symbols, Roman numerals, ligatures, fullwidth forms)
WORD_CHARACTERS = (
    "A-Za-z\xAA\xBA\xC0-\xD6\xD8-\xF6\xF8-\u02B8\u02E0-\u02E4"
    "\u1D00-\u1D25\u1D2C-\u1D5C\u1D62-\u1D65\u1D6B-\u1D77\u1D79-\u1DBE"
    "\u1E00-\u1EFF\u2071\u207F\u2090-\u209C\u212A\u212B\u2132\u214E"
    "\u2160-\u2188\u2C60-\u2C7F\uA722-\uA787\uA78B-\uA7AD\uA7B0-\uA7B7"
    "\uA7F7-\uA7FF\uAB30-\uAB5A\uAB5C-\uAB64\uFB00-\uFB06\uFF21-\uFF3A\uFF41-\uFF5A"
)

PipelineFunction = Callable[..., Any]


def generate_trimmer(word_characters: str) -> PipelineFunction:
    """
    Build a pipeline trimmer for a word character class.

    Args:
        word_characters: Body of a regex character class (ranges allowed)

    Returns:
        Pipeline function trimmer(token, i=None, tokens=None)
    """
    start_re = re.compile(f"^[^{word_characters}]+")
    end_re = re.compile(f"[^{word_characters}]+$")

    def trim(text: str) -> str:
        return end_re.sub("", start_re.sub("", text))

    def trimmer(token: Any, i: Optional[int] = None, tokens: Optional[list] = None) -> Any:
        return wrap_token(token).apply(trim)

    return trimmer


trimmer = generate_trimmer(WORD_CHARACTERS)
