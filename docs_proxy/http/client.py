"""
Docs Backend Client

Forwards one JSON-RPC request to the docs MCP endpoint over HTTP and returns
the JSON-RPC response, whichever encoding the backend picks:

- application/json: the body is the response
- text/event-stream: one SSE event carries the response (see docs_proxy.http.sse)

Usage:
    from docs_proxy.http import DocsApiClient

    client = DocsApiClient()
    response = client.forward_request({"jsonrpc": "2.0", "id": 1, "method": "tools/list"})
"""

import json
import time
from typing import Any, Optional

import requests

from docs_proxy.capture import HTTP_REQ, HTTP_RES, TrafficCapture
from docs_proxy.configs import get_logger
from docs_proxy.configs.constants import (
    ACCEPT_HEADER,
    CONTENT_TYPE_HEADER,
    SSE_CONTENT_TYPE,
)
from docs_proxy.configs.settings import BridgeConfig
from docs_proxy.exceptions import (
    BackendConnectionError,
    BackendDecodeError,
    BackendError,
    BackendStatusError,
    BackendTimeoutError,
)
from docs_proxy.http.body import deadline_passed, iter_body
from docs_proxy.http.sse import iter_events, recover_response

logger = get_logger("client")


class DocsApiClient:
    """
    Synchronous HTTP client for the docs MCP backend.

    One requests.Session is reused across calls for connection pooling; it
    holds no per-request state, so repeating a request repeats the exchange.
    """

    def __init__(
        self,
        config: Optional[BridgeConfig] = None,
        session: Optional[requests.Session] = None,
        capture: Optional[TrafficCapture] = None,
    ):
        self.config = config or BridgeConfig()
        self.session = session or requests.Session()
        self._capture = capture

    def __enter__(self) -> "DocsApiClient":
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()

    def close(self) -> None:
        """Release pooled connections."""
        self.session.close()

    def request_headers(self) -> dict[str, str]:
        """Headers sent with every forwarded request."""
        return {
            "Content-Type": CONTENT_TYPE_HEADER,
            "Accept": ACCEPT_HEADER,
        }

    def forward_request(self, request: Any) -> Any:
        """
        Forward a JSON-RPC request and return the backend's response.

        Args:
            request: Parsed JSON-RPC request, sent unchanged

        Returns:
            Parsed JSON-RPC response

        Raises:
            BackendTimeoutError: Exchange exceeded the request timeout
            BackendConnectionError: Connection failed or dropped
            BackendStatusError: Non-2xx HTTP status
            BackendDecodeError: JSON body could not be parsed
            NoResponseError: SSE stream ended without a response
        """
        url = self.config.backend_url
        timeout = self.config.timeout
        body = json.dumps(request)
        deadline = time.monotonic() + timeout

        logger.debug(f"Forwarding request to {url}")
        if self._capture:
            self._capture.record(HTTP_REQ, body)

        try:
            response = self.session.post(
                url,
                data=body.encode("utf-8"),
                headers=self.request_headers(),
                timeout=timeout,
                stream=True,
            )
        except requests.exceptions.Timeout as e:
            raise BackendTimeoutError(f"Request timed out after {timeout}s: {url}") from e
        except requests.exceptions.ConnectionError as e:
            raise BackendConnectionError(f"Connection failed: {url}") from e
        except requests.exceptions.RequestException as e:
            raise BackendError(f"Failed to send request to {url}: {e}") from e

        # Closing without draining is fine once the response has been found
        with response:
            return self._read_response(response, deadline)

    def _read_response(self, response: requests.Response, deadline: float) -> Any:
        status = response.status_code
        content_type = response.headers.get("Content-Type", "")
        logger.info(f"Docs API response status: {status}")
        if self._capture:
            self._capture.record(HTTP_RES, {"status": status, "content_type": content_type})

        if not 200 <= status < 300:
            try:
                error_text = response.text
            except (requests.exceptions.RequestException, UnicodeDecodeError):
                error_text = "unknown error"
            raise BackendStatusError(
                f"Docs API error: {status} - {error_text}",
                status_code=status,
                response_text=error_text,
            )

        if SSE_CONTENT_TYPE in content_type:
            logger.debug("Parsing SSE stream")
            return recover_response(iter_events(response, deadline), deadline, self._capture)

        logger.debug("Parsing regular JSON response")
        try:
            body = b"".join(iter_body(response, deadline))
        except requests.exceptions.RequestException as e:
            if deadline_passed(deadline):
                raise BackendTimeoutError("Timed out reading response body") from e
            raise BackendConnectionError(f"Failed to read response body: {e}") from e

        try:
            return json.loads(body)
        except (json.JSONDecodeError, UnicodeDecodeError) as e:
            raise BackendDecodeError(f"Failed to parse JSON response: {e}") from e
