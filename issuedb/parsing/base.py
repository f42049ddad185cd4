# issuedb/parsing/base.py
from typing import Protocol
from .types import RawFields

class Extractor(Protocol):
    def matches(self, text: str) -> bool:
        """Structural probe: does `text` (already trimmed) use this format?"""
        ...

    def extract(self, text: str) -> RawFields:
        """Return the recognized fields found in `text`."""
        ...
