import logging
import re
from dataclasses import replace

from issuedb.errors import MalformedFrontmatterError
from .base import Extractor
from .types import RawFields

log = logging.getLogger(__name__)

DELIMITER = "---"

# ---\n<block>\n---[\n<remainder>]
_DOCUMENT = re.compile(r"^---\s*\n(.*?)\n---[ \t]*(?:\n(.*))?$", flags=re.S)
_LINE = re.compile(r"^(\w+):\s*(.+)$")

# frontmatter key (case-sensitive) -> RawFields attribute
FIELD_KEYS = {
    "name": "name",
    "state": "state",
    "options": "options",
    "recordId": "record_id",
    "record_id": "record_id_snake",
    "id": "id",
}


class FrontmatterExtractor(Extractor):
    """
    Flat `key: value` pairs between two `---` lines.

    Only the single-level subset of YAML is understood: no nesting, lists or
    multi-line scalars. Lines that don't look like `key: value` are skipped.
    """
    def matches(self, text: str) -> bool:
        return text.startswith(DELIMITER)

    def extract(self, text: str) -> RawFields:
        m = _DOCUMENT.match(text)
        if not m:
            raise MalformedFrontmatterError()

        fields = RawFields()
        for line in m.group(1).split("\n"):
            pair = _LINE.match(line)
            if not pair:
                continue
            key, value = pair.group(1), strip_quotes(pair.group(2).strip())
            attr = FIELD_KEYS.get(key)
            if attr is None:
                log.debug("ignoring unknown frontmatter key %r", key)
                continue
            fields = replace(fields, **{attr: value})  # later keys win
        return fields


def strip_quotes(value: str) -> str:
    """Drop one pair of matching surrounding quotes, single or double."""
    if len(value) >= 2 and value[0] == value[-1] and value[0] in ("'", '"'):
        return value[1:-1]
    return value
