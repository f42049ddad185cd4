from typing import Any, Iterable, Optional

from issuedb.parsing.types import Operation

UPDATE_LABELS = {"update", "update-record"}
CREATE_LABELS = {"create", "create-record"}


def _label_name(label: Any) -> str:
    """Labels arrive as plain strings or as GitHub label objects/dicts."""
    if isinstance(label, str):
        name = label
    elif isinstance(label, dict):
        name = label.get("name")
    else:
        name = getattr(label, "name", None)
    return name.lower() if isinstance(name, str) else ""


def detect_operation(title: Optional[str], labels: Optional[Iterable[Any]] = None) -> Operation:
    """
    Decide what a submission wants from its title and labels alone.

    Labels beat the title, update beats create, and anything unrecognized is
    treated as a create.
    """
    t = (title or "").lower()
    names = {_label_name(l) for l in (labels or [])}

    if names & UPDATE_LABELS:
        return Operation.UPDATE
    if names & CREATE_LABELS:
        return Operation.CREATE

    if "[update]" in t or t.startswith("update:"):
        return Operation.UPDATE
    if "[create]" in t or t.startswith("create:"):
        return Operation.CREATE

    return Operation.CREATE
