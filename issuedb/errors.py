"""
Exceptions raised while parsing submissions and applying them to the store.

Parse errors stop processing of a submission immediately. Store errors are
raised only by an update attempt and never leave partial writes behind.
"""

from typing import Any, Optional


class IssueDBError(Exception):
    """Base exception for all issuedb errors."""

    def __init__(self, message: str, details: Optional[dict[str, Any]] = None) -> None:
        super().__init__(message)
        self.message = message
        self.details = details or {}

    def __str__(self) -> str:
        return self.message


# -----------------------------
# Parsing
# -----------------------------
class ParseError(IssueDBError):
    """The submission text could not be turned into a record."""


class EmptyInputError(ParseError):
    def __init__(self) -> None:
        super().__init__("Issue body is empty or invalid")


class MalformedFrontmatterError(ParseError):
    def __init__(self) -> None:
        super().__init__("Invalid YAML frontmatter format")


class InvalidRecordIdError(ParseError):
    def __init__(self, value: str) -> None:
        super().__init__(f"Invalid record ID: {value}", {"value": value})


# -----------------------------
# Store
# -----------------------------
class StoreError(IssueDBError):
    """An update was rejected by the record store."""


class RecordNotFoundError(StoreError):
    def __init__(self, record_id: int) -> None:
        super().__init__(f"Record with ID {record_id} not found", {"record_id": record_id})
        self.record_id = record_id


class UnauthorizedError(StoreError):
    def __init__(self, record_id: int, owner: str, requested_by: str) -> None:
        super().__init__(
            f"Unauthorized: Record belongs to {owner}, not {requested_by}",
            {"record_id": record_id, "owner": owner, "requested_by": requested_by},
        )
        self.record_id = record_id
