from types import SimpleNamespace

import pytest

from issuedb.classifier import detect_operation
from issuedb.parsing.types import Operation


@pytest.mark.parametrize("title, labels, expected", [
    ("[Update] fix record", [], Operation.UPDATE),
    ("Create: new user", [], Operation.CREATE),
    ("update: change my state", None, Operation.UPDATE),
    ("Please [CREATE] me", [], Operation.CREATE),
    ("something else", [], Operation.CREATE),
    ("", [], Operation.CREATE),
    (None, None, Operation.CREATE),
    # "update:" only counts at the start of the title
    ("re: update: later", [], Operation.CREATE),
])
def test_title(title, labels, expected):
    assert detect_operation(title, labels) is expected

def test_labels_beat_title():
    assert detect_operation("[create] thing", ["Update"]) is Operation.UPDATE
    assert detect_operation("[update] thing", ["create-record"]) is Operation.CREATE

def test_update_label_beats_create_label():
    assert detect_operation("", ["create", "update-record"]) is Operation.UPDATE

def test_label_objects_and_dicts():
    assert detect_operation("", [{"name": "UPDATE-RECORD"}]) is Operation.UPDATE
    assert detect_operation("", [SimpleNamespace(name="update")]) is Operation.UPDATE

def test_unrelated_or_nameless_labels_fall_through_to_title():
    labels = ["bug", {"color": "red"}, SimpleNamespace(name=None)]
    assert detect_operation("[update] x", labels) is Operation.UPDATE
