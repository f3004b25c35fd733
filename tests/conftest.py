"""
pytest configuration for filefetch tests.

Provides fakes for the HTTP capability, an httpx MockTransport that serves
known downloads, and isolation from FILEFETCH_* environment variables.
"""

import logging
import os
import sys
import tempfile

import httpx
import pytest
from loguru import logger

from filefetch import settings as settings_module
from filefetch.settings import Settings

CONTENTS_OF_DOWNLOAD_SHA256 = "b7d7817b26898ad5f5fada279bd34b9d7b29a04bc5e42d41e6151333a2be8c2b"
UNKNOWN_DOWNLOAD_SHA256 = "48b0c3096c357b5800e09a4420a2b0c20076a12364e1586d4ebc7d954ec04214"


class FakeResponse:
    """Minimal response with a status code, a body and close tracking."""

    def __init__(self, status_code=200, body=b"", read_error=None):
        self.status_code = status_code
        self.body = body
        self.read_error = read_error
        self.closed = False

    def read(self):
        if self.read_error is not None:
            raise self.read_error
        return self.body

    def close(self):
        self.closed = True


class FakeHttpClient:
    """Records every get() call and returns a canned response or raises an error."""

    def __init__(self, response=None, error=None):
        self.response = response
        self.error = error
        self.calls = []

    @property
    def call_count(self):
        return len(self.calls)

    def get(self, url):
        self.calls.append(url)
        if self.error is not None:
            raise self.error
        return self.response


def serve_downloads(request: httpx.Request) -> httpx.Response:
    """Handler for MockTransport: /filename has known contents, anything else is 'unknown'."""
    if request.method != "GET":
        return httpx.Response(404, text="NotFound")

    if request.url.path == "/filename":
        return httpx.Response(200, text="contents of download")
    return httpx.Response(200, text="unknown download")


@pytest.fixture(autouse=True)
def isolated_environment(monkeypatch, tmp_path):
    """Keep tests away from real FILEFETCH_* env vars and the system temp dir."""
    for name in list(os.environ):
        if name.upper().startswith("FILEFETCH_"):
            monkeypatch.delenv(name, raising=False)

    temp_root = tmp_path / "system-tmp"
    temp_root.mkdir()
    monkeypatch.setattr(tempfile, "tempdir", str(temp_root))

    settings_module.reset_settings()
    yield
    settings_module.reset_settings()


@pytest.fixture
def settings():
    """Settings with defaults only (no .env file)."""
    return Settings(_env_file=None)


@pytest.fixture
def mock_httpx_client():
    """httpx.Client wired to the serve_downloads handler."""
    client = httpx.Client(transport=httpx.MockTransport(serve_downloads))
    yield client
    client.close()


@pytest.fixture
def download_dir(tmp_path):
    """Create temporary output directory for downloads."""
    output_dir = tmp_path / "downloads"
    output_dir.mkdir()
    return output_dir


@pytest.fixture
def restore_logging():
    """Put the root logger and loguru back the way they were."""
    root = logging.getLogger()
    handlers = root.handlers[:]
    level = root.level
    noisy_levels = {name: logging.getLogger(name).level for name in ("httpx", "httpcore")}
    yield
    root.handlers[:] = handlers
    root.setLevel(level)
    for name, noisy_level in noisy_levels.items():
        logging.getLogger(name).setLevel(noisy_level)
    logger.remove()
    logger.add(sys.stderr)
