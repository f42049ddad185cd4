import re
from typing import Optional

from .base import Extractor
from .types import RawFields

# What GitHub issue forms render for an optional input left blank
NO_RESPONSE = "_No response_"

# `### Title` then the first non-blank line after it, unless that is the next heading
def _heading(title: str) -> re.Pattern:
    return re.compile(r"###\s*" + title + r"\s*\n(?!\s*###)([^\n]+)", flags=re.I)

PATTERNS = {
    "name": _heading("Name"),
    "state": _heading("State"),
    "options": _heading("Options?"),
    "record_id": _heading(r"Record\s*ID"),
    "id": _heading("ID"),
}


class SectionExtractor(Extractor):
    """Markdown rendered by GitHub issue forms: one `###` heading per field."""
    def matches(self, text: str) -> bool:
        return True  # fallback format

    def extract(self, text: str) -> RawFields:
        found = {key: _first_value(pattern, text) for key, pattern in PATTERNS.items()}
        return RawFields(
            name=found["name"],
            state=found["state"],
            options=found["options"],
            record_id=found["record_id"],
            record_id_snake=found["record_id"],
            id=found["id"],
        )


def _first_value(pattern: re.Pattern, text: str) -> Optional[str]:
    m = pattern.search(text)
    if not m:
        return None
    value = m.group(1).strip()
    if value == NO_RESPONSE:
        return None
    return value
