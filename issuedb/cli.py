"""
Command line entry points.

`process-event` is what the issue workflow runs: it reads the GitHub event
payload, applies the issue to the store, comments the outcome back on the
issue and closes it on success. `init-db` creates the database file.
"""

import json
import logging
from pathlib import Path
from typing import Optional

import typer

from issuedb import settings
from issuedb.db import Database
from issuedb.github_client import GitHubClient
from issuedb.processor import Submission, process_submission
from issuedb.repositories import RecordStore
from issuedb.setup_logging import setup_logging

log = logging.getLogger(__name__)

app = typer.Typer(
    name="issuedb",
    help="Apply GitHub issue submissions to the record database",
    add_completion=False,
)


def submission_from_event(event: dict) -> Submission:
    """Pull the issue out of a GitHub `issues` event payload."""
    issue = event.get("issue")
    if not issue:
        raise ValueError("No issue found in event payload")
    return Submission(
        number=issue["number"],
        title=issue.get("title") or "",
        body=issue.get("body"),
        author=issue["user"]["login"],
        labels=issue.get("labels") or [],
    )


def write_outputs(path: str, **outputs) -> None:
    """Append step outputs in the `key=value` format GitHub Actions reads."""
    with open(path, "a", encoding="utf-8") as f:
        for key, value in outputs.items():
            f.write(f"{key}={value}\n")


@app.command("process-event")
def process_event(
    event_path: Optional[Path] = typer.Option(
        None, "--event-path", help="GitHub event JSON (defaults to $GITHUB_EVENT_PATH)"
    ),
    database_url: str = typer.Option(settings.DATABASE_URL, "--database-url", help="SQLAlchemy URL"),
    token: Optional[str] = typer.Option(settings.GITHUB_TOKEN, "--token", help="GitHub token"),
    repository: Optional[str] = typer.Option(
        settings.GITHUB_REPOSITORY, "--repository", help="owner/repo"
    ),
):
    """Process the issue from a GitHub event and report back on it."""
    setup_logging()

    if not token:
        typer.echo("GitHub token is required. Set --token or GITHUB_TOKEN.", err=True)
        raise typer.Exit(code=1)
    if not repository:
        typer.echo("Repository is required. Set --repository or GITHUB_REPOSITORY.", err=True)
        raise typer.Exit(code=1)

    path = event_path or (Path(settings.GITHUB_EVENT_PATH) if settings.GITHUB_EVENT_PATH else None)
    if path is None:
        typer.echo("No event payload. Set --event-path or GITHUB_EVENT_PATH.", err=True)
        raise typer.Exit(code=1)

    try:
        submission = submission_from_event(json.loads(path.read_text(encoding="utf-8")))
    except (OSError, ValueError, KeyError, TypeError, AttributeError) as e:
        typer.echo(f"Could not read event payload: {e}", err=True)
        raise typer.Exit(code=1)

    github = GitHubClient(token, repository)
    database = Database(database_url)
    try:
        database.create_all()
        with database.session() as db:
            outcome = process_submission(submission, RecordStore(db))
    finally:
        database.dispose()

    github.post_comment(submission.number, outcome.message)
    if not outcome.ok:
        typer.echo(f"Submission #{submission.number} rejected: {'; '.join(outcome.errors)}", err=True)
        raise typer.Exit(code=1)

    github.close_issue(submission.number)
    if settings.GITHUB_OUTPUT:
        write_outputs(settings.GITHUB_OUTPUT, **{"record-id": outcome.record_id,
                                                 "action": outcome.action.value})
    log.info("issue #%s processed successfully", submission.number)
    typer.echo(f"{outcome.action.value} record {outcome.record_id}")


@app.command("init-db")
def init_db(
    database_url: str = typer.Option(settings.DATABASE_URL, "--database-url", help="SQLAlchemy URL"),
):
    """Create the records table and its owner index."""
    setup_logging()
    database = Database(database_url)
    try:
        database.create_all()
    finally:
        database.dispose()
    typer.echo(f"Database initialized: {database_url}")


if __name__ == "__main__":
    app()
