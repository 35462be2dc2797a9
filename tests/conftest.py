#tests\conftest.py

"""Pytest configuration and fixtures."""

import json

import pytest

from piston_client import PistonClient


class FakeResponse:
    """Minimal stand-in for requests.Response."""

    def __init__(self, status_code=200, payload=None, text=None):
        self.status_code = status_code
        if text is None:
            text = json.dumps(payload) if payload is not None else ""
        self.text = text

    def json(self):
        return json.loads(self.text)


class FakeSession:
    """Records requests and replays queued responses in order."""

    def __init__(self, responses=None):
        self.responses = list(responses or [])
        self.calls = []
        self.closed = False

    def queue(self, *responses):
        self.responses.extend(responses)

    def _respond(self, method, url, **kwargs):
        self.calls.append({"method": method, "url": url, **kwargs})
        response = self.responses.pop(0)
        if isinstance(response, Exception):
            raise response
        return response

    def get(self, url, **kwargs):
        return self._respond("GET", url, **kwargs)

    def post(self, url, **kwargs):
        return self._respond("POST", url, **kwargs)

    def close(self):
        self.closed = True


@pytest.fixture
def session():
    return FakeSession()


@pytest.fixture
def sleeps(monkeypatch):
    """Capture backoff delays instead of sleeping."""
    delays = []
    monkeypatch.setattr("piston_client.client.http.time.sleep", delays.append)
    return delays


@pytest.fixture
def client(session):
    return PistonClient(session=session)


@pytest.fixture
def run_payload():
    return {
        "stdout": "42\n",
        "stderr": "",
        "output": "42\n",
        "code": 0,
        "signal": None,
        "message": None,
        "status": None,
        "cpu_time": 8,
        "wall_time": 57,
        "memory": 8032000,
    }


@pytest.fixture
def execute_payload(run_payload):
    return {
        "language": "ruby",
        "version": "3.0.1",
        "run": run_payload,
    }


@pytest.fixture
def runtimes_payload():
    return [
        {"language": "python", "version": "3.10.0", "aliases": ["py", "py3", "python3"]},
        {"language": "ruby", "version": "3.0.1", "aliases": ["ruby3", "rb"]},
        {
            "language": "javascript",
            "version": "18.15.0",
            "aliases": ["node-javascript", "node-js", "javascript", "js"],
            "runtime": "node",
        },
    ]
