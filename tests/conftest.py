"""Shared test fixtures and utilities."""

import json
import os

import pytest
import responses

from source_mirror.sender import MessageSender

API_URL = "http://mirror.test/api/sources"


class FakeWatcher:
    """In-memory stand-in for DirectoryWatcher.

    *steps* is a list of ``(action, name)`` pairs: each action runs (to
    change the folder) right before *name* is handed to the loop.
    """

    def __init__(self, steps=()):
        self.steps = list(steps)
        self.started = False
        self.stopped = False

    def start(self):
        self.started = True

    def stop(self):
        self.stopped = True

    def events(self):
        for action, name in self.steps:
            if action:
                action()
            if self.stopped:
                return
            yield name


def sent_payloads(mock):
    """Decoded JSON bodies of every request captured by *mock*."""
    return [json.loads(call.request.body) for call in mock.calls]


@pytest.fixture
def api_url():
    return API_URL


@pytest.fixture
def mocked_api():
    """Activate ``responses`` with the endpoint answering 201."""
    with responses.RequestsMock() as rsps:
        rsps.add(responses.POST, API_URL, status=201)
        yield rsps


@pytest.fixture
def sender():
    with MessageSender(API_URL) as s:
        yield s


@pytest.fixture
def source_dir(tmp_path, monkeypatch):
    """An empty working directory to mirror."""
    monkeypatch.chdir(tmp_path)
    return tmp_path


@pytest.fixture
def write_file(source_dir):
    """Factory fixture to write files in the mirrored directory."""
    def _write(name: str, content: str = "int x;"):
        path = source_dir / name
        path.write_text(content, encoding="utf-8")
        return path
    return _write


@pytest.fixture
def write_raw_name(source_dir):
    """Factory fixture to write a file whose name is raw (possibly non-UTF-8) bytes."""
    def _write(raw_name: bytes, content: bytes = b"int x;"):
        path = os.path.join(os.fsencode(source_dir), raw_name)
        try:
            with open(path, "wb") as fh:
                fh.write(content)
        except OSError:
            pytest.skip("filesystem rejects non-UTF-8 file names")
        return path
    return _write
