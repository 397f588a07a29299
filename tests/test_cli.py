import pytest

requests = pytest.importorskip("requests")

from election_sim import cli


class FakeResponse:
    def __init__(self, payload):
        self._payload = payload

    def json(self):
        return self._payload


@pytest.fixture
def calls(monkeypatch):
    recorded = []

    def fake_post(url, json=None, timeout=None):
        recorded.append(("POST", url, json))
        return FakeResponse({"status": "ok"})

    def fake_get(url, timeout=None):
        recorded.append(("GET", url, None))
        return FakeResponse({"results": []})

    monkeypatch.setattr(cli.requests, "post", fake_post)
    monkeypatch.setattr(cli.requests, "get", fake_get)
    return recorded


def test_cast_posts_voter_credential_and_candidate(calls, capsys):
    rc = cli.main(
        ["--base", "http://x", "cast", "--voter", "Alice", "--credential", "pw1", "--candidate", "John Doe"]
    )
    assert rc == 0
    assert calls == [
        ("POST", "http://x/cast", {"voter": "Alice", "credential": "pw1", "candidate": "John Doe"})
    ]
    assert "ok" in capsys.readouterr().out


def test_register_and_results(calls):
    cli.main(["--base", "http://x", "register", "--name", "Bob", "--credential", "pw2"])
    cli.main(["--base", "http://x", "add-candidate", "--name", "Jane Smith", "--affiliation", "Party B"])
    cli.main(["--base", "http://x", "results"])
    assert calls == [
        ("POST", "http://x/voters", {"name": "Bob", "credential": "pw2"}),
        ("POST", "http://x/candidates", {"name": "Jane Smith", "affiliation": "Party B"}),
        ("GET", "http://x/results", None),
    ]


def test_no_command_prints_help(calls, capsys):
    assert cli.main([]) == 0
    assert "usage" in capsys.readouterr().out
    assert calls == []


def test_connection_error_returns_nonzero(monkeypatch):
    def refuse(url, timeout=None):
        raise requests.ConnectionError("refused")

    monkeypatch.setattr(cli.requests, "get", refuse)
    assert cli.main(["--base", "http://x", "results"]) == 1
