import logging
from typing import Optional

import requests

from issuedb.settings import GITHUB_API_URL

log = logging.getLogger(__name__)


class GitHubClient:
    """The two issue calls the processor's caller needs: comment and close."""

    def __init__(self, token: str, repository: str, api_url: str = GITHUB_API_URL,
                 session: Optional[requests.Session] = None):
        self.repository = repository  # "owner/repo"
        self.api_url = api_url.rstrip("/")
        self.session = session or requests.Session()
        self.session.headers.update({
            "Authorization": f"Bearer {token}",
            "Accept": "application/vnd.github+json",
        })

    def _issue_url(self, number: int) -> str:
        return f"{self.api_url}/repos/{self.repository}/issues/{number}"

    def post_comment(self, number: int, body: str) -> dict:
        r = self.session.post(f"{self._issue_url(number)}/comments", json={"body": body}, timeout=30)
        r.raise_for_status()
        log.info("commented on issue #%s", number)
        return r.json()

    def close_issue(self, number: int) -> dict:
        r = self.session.patch(self._issue_url(number), json={"state": "closed"}, timeout=30)
        r.raise_for_status()
        log.info("closed issue #%s", number)
        return r.json()
