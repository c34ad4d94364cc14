"""Shared fixtures: a fake volume API served through httpx.MockTransport."""
import json
import logging
from unittest.mock import patch

import httpx
import pytest

from volumectl.client import ApiClient
from volumectl.config import Settings

TARGET = "http://volumes.test"


class FakeVolumeAPI:
    """Routes (method, path) to canned responses and records every request."""

    def __init__(self):
        self.routes = {}
        self.requests = []

    def add(self, method, path, status=200, body=None, content=b""):
        if body is not None:
            content = json.dumps(body).encode()
        self.routes[(method, f"/1.4{path}")] = (status, content)

    def handler(self, request):
        self.requests.append(request)
        route = self.routes.get((request.method, request.url.path))
        if route is None:
            return httpx.Response(404, text="route not found")
        status, content = route
        return httpx.Response(status, content=content)

    def client(self, settings=None):
        if settings is None:
            settings = Settings(target=TARGET)
        return ApiClient(settings, transport=httpx.MockTransport(self.handler))

    @property
    def last_request(self):
        return self.requests[-1]


@pytest.fixture(autouse=True)
def isolated_env(monkeypatch, tmp_path):
    """Keep the user's config file and environment out of the tests."""
    monkeypatch.setenv("VOLUMECTL_CONFIG", str(tmp_path / "missing.yaml"))
    for name in ("VOLUMECTL_TARGET", "VOLUMECTL_TOKEN", "VOLUMECTL_TIMEOUT"):
        monkeypatch.delenv(name, raising=False)


@pytest.fixture(autouse=True)
def restore_logging():
    """The CLI reconfigures the root logger on every run; undo it after each test."""
    root = logging.getLogger()
    handlers, level = root.handlers[:], root.level
    yield
    root.handlers[:] = handlers
    root.setLevel(level)


@pytest.fixture
def api():
    return FakeVolumeAPI()


@pytest.fixture
def cli_api(api):
    """The fake API wired into the CLI in place of the real client."""
    with patch("volumectl.cli.make_client", side_effect=api.client):
        yield api


@pytest.fixture
def volumes_payload():
    return [
        {"Name": "data2", "Pool": "p2", "Plan": {"Name": "nfs"}, "TeamOwner": "t2"},
        {"Name": "data1", "Pool": "p1", "Plan": {"Name": "nfs"}, "TeamOwner": "t1"},
    ]
