import re
from typing import Optional

from issuedb.errors import InvalidRecordIdError
from .types import NormalizedRecord, Operation, RawFields

_INTEGER = re.compile(r"^\s*[+-]?\d+\s*$")


def normalize_fields(raw: RawFields) -> NormalizedRecord:
    """
    Map extracted fields to the canonical record.

    The record is an UPDATE exactly when some identifier field was given;
    missing name/state are left empty for the validator to report.
    """
    raw_id = pick_record_id(raw)
    return NormalizedRecord(
        operation=Operation.UPDATE if raw_id else Operation.CREATE,
        name=raw.name or "",
        state=raw.state or "",
        options=raw.options or "",
        record_id=parse_record_id(raw_id) if raw_id else None,
    )


def pick_record_id(raw: RawFields) -> Optional[str]:
    """recordId, then record_id, then id: first non-empty one wins."""
    return raw.record_id or raw.record_id_snake or raw.id or None


def parse_record_id(value: str) -> int:
    if not _INTEGER.match(value):
        raise InvalidRecordIdError(value)
    return int(value, 10)
