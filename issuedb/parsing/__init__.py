from typing import Any, List

from issuedb.errors import EmptyInputError
from .base import Extractor
from .frontmatter import FrontmatterExtractor
from .normalizer import normalize_fields
from .sections import SectionExtractor
from .types import NormalizedRecord, Operation, RawFields

# Probed in order; the section format accepts anything
EXTRACTORS: List[Extractor] = [FrontmatterExtractor(), SectionExtractor()]


def extract_fields(body: Any) -> RawFields:
    """Pick the body format and pull the raw fields out of it."""
    if not isinstance(body, str) or not body.strip():
        raise EmptyInputError()
    text = body.replace("\r\n", "\n").strip()
    extractor = next(e for e in EXTRACTORS if e.matches(text))
    return extractor.extract(text)


def parse_body(body: Any) -> NormalizedRecord:
    """extract_fields + normalize_fields."""
    return normalize_fields(extract_fields(body))


__all__ = [
    "extract_fields",
    "parse_body",
    "normalize_fields",
    "Extractor",
    "FrontmatterExtractor",
    "SectionExtractor",
    "NormalizedRecord",
    "Operation",
    "RawFields",
]
