from typing import Any, Dict, List
from fastapi import APIRouter, Depends, HTTPException, Query
from sqlalchemy.orm import Session

from issuedb.db import get_db
from issuedb.repositories import RecordStore

router = APIRouter(prefix="", tags=["read"])

# -------------------------------------------------------------------
# List endpoint
# -------------------------------------------------------------------
@router.get("/records")
def list_records(
    limit: int = Query(100, ge=1, le=2000),
    offset: int = Query(0, ge=0),
    db: Session = Depends(get_db),
) -> List[Dict[str, Any]]:
    """List records, most recently created first."""
    return [r.to_dict() for r in RecordStore(db).list_all(limit=limit, offset=offset)]

# -------------------------------------------------------------------
# Point lookups
# -------------------------------------------------------------------
@router.get("/records/{record_id}")
def get_record(record_id: int, db: Session = Depends(get_db)) -> Dict[str, Any]:
    r = RecordStore(db).get(record_id)
    if not r: raise HTTPException(404, "Record not found")
    return r.to_dict()

@router.get("/owners/{username}/latest")
def get_latest_for_owner(username: str, db: Session = Depends(get_db)) -> Dict[str, Any]:
    """The newest record created by a GitHub user."""
    r = RecordStore(db).get_latest_by_owner(username)
    if not r: raise HTTPException(404, "No records for this owner")
    return r.to_dict()
