"""
Apply one submission (a GitHub issue) to the record store.

The processor runs the classifier and the parser independently, checks the
parsed record against the detected operation, then creates or updates the
record on behalf of the submission's author. It never talks to GitHub: the
returned outcome carries the comment text, and the caller decides where to
post it and whether to close the submission.
"""

import logging
from dataclasses import dataclass, field
from typing import Any, List, Optional

from issuedb.classifier import detect_operation
from issuedb.errors import ParseError, RecordNotFoundError
from issuedb.models import UserRecord
from issuedb.parsing import parse_body
from issuedb.parsing.types import NormalizedRecord, Operation
from issuedb.repositories import RecordStore
from issuedb.validation import validate_record

log = logging.getLogger(__name__)


@dataclass
class Submission:
    title: str
    body: Optional[str]
    author: str
    labels: List[Any] = field(default_factory=list)
    number: Optional[int] = None


@dataclass
class Outcome:
    ok: bool
    action: Operation
    message: str
    record: Optional[UserRecord] = None
    errors: List[str] = field(default_factory=list)

    @property
    def record_id(self) -> Optional[int]:
        return self.record.id if self.record is not None else None


def process_submission(submission: Submission, store: RecordStore) -> Outcome:
    action = detect_operation(submission.title, submission.labels)
    log.info("processing submission #%s by %s as %s",
             submission.number, submission.author, action.value)

    try:
        parsed = parse_body(submission.body)
    except ParseError as e:
        log.warning("parse failed for #%s: %s", submission.number, e)
        return Outcome(False, action, f"❌ Error parsing issue body: {e}", errors=[str(e)])
    log.info("parsed record: %s", parsed)

    validation = validate_record(parsed, action)
    if not validation.is_valid:
        log.warning("validation failed for #%s: %s", submission.number, ", ".join(validation.errors))
        lines = "\n".join(f"- {e}" for e in validation.errors)
        return Outcome(False, action, f"❌ Validation failed:\n{lines}", errors=validation.errors)

    if action is Operation.CREATE:
        return _create(parsed, submission.author, store)
    return _update(parsed, submission.author, store)


def _create(parsed: NormalizedRecord, author: str, store: RecordStore) -> Outcome:
    try:
        row = store.create(parsed.name.strip(), parsed.state.strip(),
                           parsed.options.strip() or None, author)
    except Exception as e:
        return Outcome(False, Operation.CREATE, f"❌ Error creating record: {e}", errors=[str(e)])
    return Outcome(True, Operation.CREATE,
                   success_message(row, "created", "Created", row.created_at), record=row)


def _update(parsed: NormalizedRecord, author: str, store: RecordStore) -> Outcome:
    try:
        row = store.update(parsed.record_id, parsed.name.strip(), parsed.state.strip(),
                           parsed.options.strip() or None, author)
    except RecordNotFoundError as e:
        return Outcome(False, Operation.UPDATE, f"❌ {e}", errors=[str(e)])
    except Exception as e:  # UnauthorizedError and database faults
        return Outcome(False, Operation.UPDATE, f"❌ Error updating record: {e}", errors=[str(e)])
    return Outcome(True, Operation.UPDATE,
                   success_message(row, "updated", "Updated", row.updated_at), record=row)


def success_message(row: UserRecord, verb: str, stamp_label: str, stamp) -> str:
    return (
        f"✅ Successfully {verb} record!\n\n"
        f"**Record ID:** {row.id}\n"
        f"**Name:** {row.name}\n"
        f"**State:** {row.state}\n"
        f"**Options:** {row.options or 'None'}\n"
        f"**{stamp_label}:** {stamp}"
    )
