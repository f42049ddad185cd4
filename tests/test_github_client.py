from issuedb.github_client import GitHubClient


class FakeResponse:
    def __init__(self, payload):
        self.payload = payload

    def raise_for_status(self):
        pass

    def json(self):
        return self.payload


class FakeSession:
    def __init__(self):
        self.headers = {}
        self.calls = []

    def post(self, url, json=None, timeout=None):
        self.calls.append(("POST", url, json))
        return FakeResponse({"id": 1})

    def patch(self, url, json=None, timeout=None):
        self.calls.append(("PATCH", url, json))
        return FakeResponse({"state": "closed"})


def test_comment_and_close():
    s = FakeSession()
    gh = GitHubClient("tok", "octo/records", api_url="https://api.example.com/", session=s)
    gh.post_comment(5, "hello")
    gh.close_issue(5)
    assert s.headers["Authorization"] == "Bearer tok"
    assert s.calls == [
        ("POST", "https://api.example.com/repos/octo/records/issues/5/comments", {"body": "hello"}),
        ("PATCH", "https://api.example.com/repos/octo/records/issues/5", {"state": "closed"}),
    ]
