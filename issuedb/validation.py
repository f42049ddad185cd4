import json
import logging
from dataclasses import dataclass, field
from typing import List

from issuedb.parsing.types import NormalizedRecord, Operation

log = logging.getLogger(__name__)

# Stable error codes
TYPE_MISMATCH = "TypeMismatch"
MISSING_NAME = "MissingName"
MISSING_STATE = "MissingState"
MISSING_RECORD_ID = "MissingRecordId"


@dataclass
class ValidationIssue:
    code: str
    message: str


@dataclass
class ValidationResult:
    issues: List[ValidationIssue] = field(default_factory=list)

    @property
    def is_valid(self) -> bool:
        return not self.issues

    @property
    def errors(self) -> List[str]:
        return [i.message for i in self.issues]

    @property
    def codes(self) -> List[str]:
        return [i.code for i in self.issues]


def validate_record(record: NormalizedRecord, expected: Operation) -> ValidationResult:
    """
    Check a parsed record against the operation the submission asked for.

    Every rule runs; the result lists all problems in a fixed order so the
    submitter can fix them in one pass.
    """
    result = ValidationResult()

    if record.operation != expected:
        result.issues.append(ValidationIssue(
            TYPE_MISMATCH,
            f"Issue type mismatch: expected {expected.value}, got {record.operation.value}",
        ))

    if not record.name.strip():
        result.issues.append(ValidationIssue(MISSING_NAME, "Name is required"))

    if not record.state.strip():
        result.issues.append(ValidationIssue(MISSING_STATE, "State is required"))

    if expected is Operation.UPDATE and not isinstance(record.record_id, int):
        result.issues.append(ValidationIssue(MISSING_RECORD_ID, "Record ID is required for updates"))

    # options may be JSON or a plain string; both are fine
    if record.options.strip() and not options_is_json(record.options):
        log.debug("options is not JSON, keeping as plain string: %r", record.options)

    return result


def options_is_json(options: str) -> bool:
    try:
        json.loads(options)
    except ValueError:
        return False
    return True
