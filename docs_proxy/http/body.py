"""
Deadline-bounded response body reading.

requests only bounds each socket read, so a backend that keeps sending
something (SSE keep-alive comments, whitespace) could hold a request open
forever. Reading the body through iter_body checks the whole-request
deadline after every chunk instead.
"""

import time
from typing import Iterator, Optional

import requests

from docs_proxy.exceptions import BackendTimeoutError


def deadline_passed(deadline: Optional[float]) -> bool:
    return deadline is not None and time.monotonic() >= deadline


def iter_body(response: requests.Response, deadline: Optional[float] = None) -> Iterator[bytes]:
    """
    Yield body chunks as they arrive, until the body ends or the deadline passes.

    chunk_size=None hands over each network chunk as soon as it is read, so a
    small final event is not held back waiting for a full buffer. The check
    runs before the next read, so a consumer that stops after a chunk never
    sees a timeout for it.

    Raises:
        BackendTimeoutError: More of the body was needed after the deadline
    """
    for chunk in response.iter_content(chunk_size=None):
        yield chunk
        if deadline_passed(deadline):
            raise BackendTimeoutError("Timed out reading response body")
