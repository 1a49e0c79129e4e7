"""
Pytest fixtures for docs proxy tests.
"""

import io
import logging
import sys
import tempfile
from pathlib import Path
from typing import Generator
from unittest.mock import MagicMock

import pytest
import requests
from requests.structures import CaseInsensitiveDict

# Add project root to path for docs_proxy imports
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))


class FakeRaw:
    """
    Stand-in for a urllib3 response body.

    Hands out one chunk per read and counts how many were taken, so tests
    can check that the client stopped reading early.
    """

    def __init__(self, chunks: list[bytes], error: Exception | None = None):
        self._chunks = list(chunks)
        self._error = error
        self.chunks_read = 0
        self.closed = False

    def stream(self, amt=None, decode_content=True):
        for chunk in self._chunks:
            self.chunks_read += 1
            yield chunk
        if self._error is not None:
            raise self._error

    def read(self, amt=None, decode_content=True):
        return b"".join(self.stream(amt))

    def close(self):
        self.closed = True


def make_response(
    chunks: list[bytes],
    status_code: int = 200,
    content_type: str = "application/json",
    error: Exception | None = None,
) -> requests.Response:
    """Build a real requests.Response over an in-memory body."""
    response = requests.Response()
    response.status_code = status_code
    response.headers = CaseInsensitiveDict({"Content-Type": content_type})
    response.encoding = "utf-8"
    response.raw = FakeRaw(chunks, error=error)
    response.url = "https://bun.com/docs/mcp"
    return response


def sse_event(data: str, event: str = "message") -> bytes:
    """Frame one SSE event."""
    lines = [f"event: {event}"] + [f"data: {line}" for line in data.split("\n")]
    return ("\n".join(lines) + "\n\n").encode("utf-8")


def make_session(response: requests.Response | None = None, side_effect=None) -> MagicMock:
    """requests.Session double whose post() returns the given response."""
    session = MagicMock(spec=requests.Session)
    if side_effect is not None:
        session.post.side_effect = side_effect
    else:
        session.post.return_value = response
    return session


class FlushRecorder(io.BytesIO):
    """BytesIO that remembers what had been written at each flush."""

    def __init__(self):
        super().__init__()
        self.flushed: list[bytes] = []

    def flush(self):
        super().flush()
        self.flushed.append(self.getvalue())


@pytest.fixture
def temp_dir() -> Generator[Path, None, None]:
    """Create a temporary directory for test files."""
    with tempfile.TemporaryDirectory() as tmpdir:
        yield Path(tmpdir)


@pytest.fixture(autouse=True)
def isolated_data_path(temp_dir: Path, monkeypatch) -> Path:
    """Keep logs and captures out of the real home directory."""
    monkeypatch.setenv("DOCS_PROXY_DATA_PATH", str(temp_dir / "data"))
    for name in (
        "DOCS_PROXY_DEBUG",
        "DOCS_PROXY_LOG_FILE",
        "DOCS_PROXY_CAPTURE",
        "DOCS_PROXY_CAPTURE_FILE",
    ):
        monkeypatch.delenv(name, raising=False)
    return temp_dir / "data"


@pytest.fixture(autouse=True)
def reset_logging() -> Generator[None, None, None]:
    """Drop handlers installed by setup_logging during a test."""
    yield
    logger = logging.getLogger("docs_proxy")
    for handler in list(logger.handlers):
        handler.close()
    logger.handlers.clear()
    logger.setLevel(logging.NOTSET)
