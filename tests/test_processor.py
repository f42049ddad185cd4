from issuedb.parsing.types import Operation
from issuedb.processor import Submission, process_submission

CREATE_BODY = "### Name\n\nAlice\n\n### State\n\nCA\n\n### Options\n\nopt1"


def test_create_from_issue_form(store):
    out = process_submission(Submission("Create: new user", CREATE_BODY, "alice"), store)
    assert out.ok
    assert out.action is Operation.CREATE
    assert out.record_id is not None
    assert out.message.startswith("✅ Successfully created record!")
    assert f"**Record ID:** {out.record_id}" in out.message
    assert "**Options:** opt1" in out.message
    assert store.get(out.record_id).github_username == "alice"

def test_create_trims_values_and_reports_no_options(store):
    body = "---\nname: '  Bob  '\nstate: TX \n---\n"
    out = process_submission(Submission("new", body, "bob"), store)
    assert out.ok
    assert (out.record.name, out.record.state, out.record.options) == ("Bob", "TX", None)
    assert "**Options:** None" in out.message

def test_update_by_owner(store):
    rec = store.create("Alice", "CA", None, "alice")
    body = f"---\nrecordId: {rec.id}\nname: Alice\nstate: NV\n---\n"
    out = process_submission(Submission("[update] move", body, "alice", ["update"]), store)
    assert out.ok
    assert out.action is Operation.UPDATE
    assert out.message.startswith("✅ Successfully updated record!")
    assert "**Updated:**" in out.message
    assert store.get(rec.id).state == "NV"

def test_update_by_someone_else(store):
    rec = store.create("Alice", "CA", None, "alice")
    body = f"---\nrecordId: {rec.id}\nname: Mallory\nstate: XX\n---\n"
    out = process_submission(Submission("[update] mine now", body, "mallory"), store)
    assert not out.ok
    assert out.message.startswith("❌ Error updating record: Unauthorized")
    assert store.get(rec.id).name == "Alice"

def test_update_unknown_record(store):
    body = "---\nrecordId: 99999\nname: A\nstate: B\n---\n"
    out = process_submission(Submission("update: x", body, "alice"), store)
    assert not out.ok
    assert out.message == "❌ Record with ID 99999 not found"

def test_parse_error_is_reported(store):
    out = process_submission(Submission("Create: x", None, "alice"), store)
    assert not out.ok
    assert out.message == "❌ Error parsing issue body: Issue body is empty or invalid"
    assert list(store.list_all()) == []

def test_invalid_record_id_is_a_parse_error(store):
    out = process_submission(Submission("[update] x", "### Record ID\nabc", "alice"), store)
    assert not out.ok
    assert out.message == "❌ Error parsing issue body: Invalid record ID: abc"

def test_validation_errors_listed_together(store):
    out = process_submission(Submission("[update] x", "### Options\nred", "alice"), store)
    assert not out.ok
    assert out.message == (
        "❌ Validation failed:\n"
        "- Issue type mismatch: expected update, got create\n"
        "- Name is required\n"
        "- State is required\n"
        "- Record ID is required for updates"
    )
    assert len(out.errors) == 4
    assert list(store.list_all()) == []

def test_record_id_in_body_without_update_marker(store):
    # body says update, title/labels say create: rejected, nothing written
    out = process_submission(Submission("new record", "### Name\nA\n### State\nB\n### ID\n1", "a"), store)
    assert not out.ok
    assert out.errors == ["Issue type mismatch: expected create, got update"]

def test_update_with_id_too_large_for_the_database(store):
    body = "### Name\nA\n### State\nB\n### Record ID\n100000000000000000000"
    out = process_submission(Submission("[update] x", body, "alice"), store)
    assert not out.ok
    assert out.message == "❌ Record with ID 100000000000000000000 not found"
