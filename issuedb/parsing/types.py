# issuedb/parsing/types.py
from dataclasses import dataclass
from enum import Enum
from typing import Optional


class Operation(str, Enum):
    CREATE = "create"
    UPDATE = "update"


@dataclass
class RawFields:
    """
    Fields pulled out of a submission body, still as trimmed strings.
    None means the field did not appear in the text.
    """
    name: Optional[str] = None
    state: Optional[str] = None
    options: Optional[str] = None
    record_id: Optional[str] = None        # "recordId" / "### Record ID"
    record_id_snake: Optional[str] = None  # "record_id" / "### Record ID"
    id: Optional[str] = None               # "id" / "### ID"


@dataclass(frozen=True)
class NormalizedRecord:
    operation: Operation
    name: str = ""
    state: str = ""
    options: str = ""
    record_id: Optional[int] = None
