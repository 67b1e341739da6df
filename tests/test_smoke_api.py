from unittest.mock import MagicMock

import smoke_api


class FakeSession:
    """Answers every request with a canned JSON payload."""

    def __init__(self, failing_path=None):
        self.calls = []
        self.failing_path = failing_path

    def request(self, method, url, timeout=None, **kwargs):
        path = url.split("://", 1)[-1].split("/", 1)[-1]
        path = "/" + path
        self.calls.append((method, path))

        response = MagicMock()
        response.status_code = 200
        if path == self.failing_path:
            payload = {"success": False, "error": "boom"}
        elif path == "/api/roster":
            payload = {"success": True, "players": [{"id": 0, "name": "Smoke A"}]}
        elif path == "/api/state":
            payload = {"success": True, "standings": [
                {"place": 1, "name": "Smoke A", "total_display": "00:01"}
            ]}
        else:
            payload = {"success": True}
        response.json.return_value = payload
        return response


def test_smoke_walks_the_game_flow(capsys):
    session = FakeSession()
    assert smoke_api.run_smoke("http://test", session=session, wait_seconds=0) is True
    assert session.calls == [
        ("POST", "/api/roster"),
        ("POST", "/api/timer/start"),
        ("POST", "/api/players/0/toggle"),
        ("GET", "/api/state"),
        ("POST", "/api/timer/pause"),
    ]
    assert "#1 Smoke A: 00:01" in capsys.readouterr().out


def test_smoke_reports_failures():
    session = FakeSession(failing_path="/api/timer/start")
    assert smoke_api.run_smoke("http://test", session=session, wait_seconds=0) is False
