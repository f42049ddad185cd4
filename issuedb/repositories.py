import logging
from datetime import datetime, timezone
from typing import Iterator, Optional

from sqlalchemy import select, update
from sqlalchemy.orm import Session

from issuedb.errors import RecordNotFoundError, StoreError, UnauthorizedError
from issuedb.models import UserRecord

log = logging.getLogger(__name__)


def _utcnow() -> datetime:
    """Naive UTC, matching what SQLite's CURRENT_TIMESTAMP stores."""
    return datetime.now(timezone.utc).replace(tzinfo=None)


# ids are stored as signed 64-bit integers; anything outside can never match
MIN_ID, MAX_ID = -2**63, 2**63 - 1


def _id_in_range(record_id: int) -> bool:
    return MIN_ID <= record_id <= MAX_ID


class RecordStore:
    """
    Create/update/read access to the `users` table through one session.

    Writes commit on success and roll back on any failure, so a rejected
    update never leaves anything behind.
    """
    def __init__(self, db: Session):
        self.db = db

    # ------------------------------------------------------------------
    # Writes
    # ------------------------------------------------------------------
    def create(self, name: str, state: str, options: Optional[str], owner: str) -> UserRecord:
        now = _utcnow()
        row = UserRecord(
            name=name,
            state=state,
            options=options or None,
            github_username=owner,
            created_at=now,
            updated_at=now,
        )
        try:
            self.db.add(row)
            self.db.flush()  # assigns row.id
            self.db.commit()
        except Exception:
            self.db.rollback()
            log.exception("record create failed: owner=%s", owner)
            raise
        log.info("created record id=%s owner=%s", row.id, owner)
        return row

    def update(
        self, record_id: int, name: str, state: str, options: Optional[str], owner: str
    ) -> UserRecord:
        """
        Overwrite name/state/options of a record owned by `owner`.

        The existence check, ownership check and write share one transaction;
        the row is locked where the backend supports it (SQLite sessions
        already hold the write lock from BEGIN IMMEDIATE).
        """
        if not _id_in_range(record_id):
            raise RecordNotFoundError(record_id)
        try:
            row = self.db.execute(
                select(UserRecord).where(UserRecord.id == record_id).with_for_update()
            ).scalar_one_or_none()
            if row is None:
                raise RecordNotFoundError(record_id)
            if row.github_username != owner:
                raise UnauthorizedError(record_id, row.github_username, owner)

            result = self.db.execute(
                update(UserRecord)
                .where(UserRecord.id == record_id, UserRecord.github_username == owner)
                .values(name=name, state=state, options=options or None, updated_at=_utcnow())
                .execution_options(synchronize_session=False)
            )
            if result.rowcount != 1:
                raise StoreError("Update failed: Record not found or unauthorized",
                                 {"record_id": record_id})
            self.db.refresh(row)
            self.db.commit()
        except StoreError as e:
            self.db.rollback()
            log.warning("record update rejected: id=%s owner=%s: %s", record_id, owner, e)
            raise
        except Exception:
            self.db.rollback()
            log.exception("record update failed: id=%s owner=%s", record_id, owner)
            raise
        log.info("updated record id=%s owner=%s", row.id, owner)
        return row

    # ------------------------------------------------------------------
    # Reads
    # ------------------------------------------------------------------
    def get(self, record_id: int) -> Optional[UserRecord]:
        if not _id_in_range(record_id):
            return None
        return self.db.get(UserRecord, record_id)

    def get_latest_by_owner(self, owner: str) -> Optional[UserRecord]:
        return self.db.execute(
            select(UserRecord)
            .where(UserRecord.github_username == owner)
            .order_by(UserRecord.created_at.desc(), UserRecord.id.desc())
            .limit(1)
        ).scalar_one_or_none()

    def list_all(self, limit: Optional[int] = None, offset: int = 0) -> Iterator[UserRecord]:
        """Snapshot of all records, newest first. The iterator can be consumed once."""
        q = select(UserRecord).order_by(UserRecord.created_at.desc(), UserRecord.id.desc())
        if offset:
            q = q.offset(offset)
        if limit is not None:
            q = q.limit(limit)
        return iter(self.db.execute(q).scalars().all())
