from typing import Any, Dict, List, Optional, Union

from fastapi import APIRouter, Depends, HTTPException
from pydantic import BaseModel
from sqlalchemy.orm import Session

from issuedb.db import get_db
from issuedb.processor import Submission, process_submission
from issuedb.repositories import RecordStore

# --------------------------------------------------------------------
# Router setup
# --------------------------------------------------------------------
router = APIRouter(prefix="", tags=["submissions"])


class Label(BaseModel):
    name: str


# Request schema: the parts of a GitHub issue the processor needs
class SubmissionRequest(BaseModel):
    number: Optional[int] = None
    title: str = ""
    body: Optional[str] = None
    author: str
    labels: List[Union[str, Label]] = []


@router.post("/submissions")
def submit(req: SubmissionRequest, db: Session = Depends(get_db)) -> Dict[str, Any]:
    """
    Parse, validate and apply one submission.

    A rejected submission (bad body, failed validation, unknown record,
    wrong owner) is a normal outcome and comes back with ok=False and the
    comment text; only unexpected faults are HTTP errors.

    Response JSON:
      {
        "ok": True,
        "action": "create" | "update",
        "record_id": 7,
        "message": "<markdown comment>",
        "errors": [],
        "record": {...} | None
      }
    """
    author = req.author.strip()
    if not author:
        raise HTTPException(400, "Missing 'author'")

    submission = Submission(
        number=req.number,
        title=req.title,
        body=req.body,
        author=author,
        labels=req.labels,
    )
    try:
        outcome = process_submission(submission, RecordStore(db))
    except Exception as e:
        db.rollback()
        raise HTTPException(500, f"Submission failed: {e}")

    return {
        "ok": outcome.ok,
        "action": outcome.action.value,
        "record_id": outcome.record_id,
        "message": outcome.message,
        "errors": outcome.errors,
        "record": outcome.record.to_dict() if outcome.record is not None else None,
    }
