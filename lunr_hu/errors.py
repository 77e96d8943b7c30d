"""Exceptions raised by lunr-hu.

Only the two fatal conditions are exceptions. A word the analyzer cannot
stem is a normal outcome and is handled inside the stemmer bridge.
"""

from pathlib import Path
from typing import Iterable, Optional, Union


class LunrHuError(Exception):
    """Base class for lunr-hu errors"""


class ResourceNotFoundError(LunrHuError, FileNotFoundError):
    """A dictionary resource could not be read. Initialization cannot continue."""

    def __init__(self, message: str, path: Optional[Union[str, Path]] = None):
        super().__init__(message)
        self.path = Path(path) if path is not None else None


class PreconditionError(LunrHuError, RuntimeError):
    """The host namespace lacks a capability required for registration"""

    def __init__(self, missing: Iterable[str]):
        self.missing = tuple(missing)
        super().__init__(
            "Cannot register Hungarian pipeline functions, missing: "
            + ", ".join(self.missing)
            + ". Install lunr (pip install lunr) before registering."
        )
