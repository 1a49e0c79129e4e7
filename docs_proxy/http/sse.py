"""
SSE Response Recovery

The docs backend may answer a POST with a Server-Sent-Events stream instead
of a JSON body. The stream only serves as a delivery envelope: one of its
events carries the complete JSON-RPC response in its data field. Events are
read lazily until that response shows up; the rest of the stream is never
read.
"""

import json
from typing import Any, Iterator, Optional

import requests
import sseclient

from docs_proxy.capture import SSE_CHUNK, TrafficCapture
from docs_proxy.configs import get_logger
from docs_proxy.configs.constants import LOG_PREVIEW_CHARS
from docs_proxy.exceptions import BackendTimeoutError, NoResponseError
from docs_proxy.http.body import deadline_passed, iter_body

logger = get_logger("sse")


def is_terminal_response(value: Any) -> bool:
    """True if value is a JSON-RPC response object (has `result` or `error`)."""
    return isinstance(value, dict) and ("result" in value or "error" in value)


def iter_events(
    response: requests.Response,
    deadline: Optional[float] = None,
) -> Iterator[sseclient.Event]:
    """
    Parse SSE events from a streaming response as they arrive.

    The body is read through iter_body, so keep-alive comments and empty
    events, which the parser swallows, still count against the deadline.
    """
    client = sseclient.SSEClient(iter_body(response, deadline))
    return client.events()


def recover_response(
    events: Iterator[sseclient.Event],
    deadline: Optional[float] = None,
    capture: Optional[TrafficCapture] = None,
) -> Any:
    """
    Return the first event payload that is a JSON-RPC response.

    Args:
        events: SSE events in arrival order
        deadline: time.monotonic() value after which waiting stops
        capture: Optional traffic recorder

    Returns:
        The parsed JSON-RPC response

    Raises:
        BackendTimeoutError: Deadline passed before a response arrived
        NoResponseError: Stream ended or broke without a response
    """
    while True:
        try:
            event = next(events)
        except StopIteration:
            break
        except (requests.RequestException, UnicodeDecodeError) as e:
            if deadline_passed(deadline):
                raise BackendTimeoutError("Timed out waiting for SSE response") from e
            logger.warning(f"SSE stream error: {e}")
            break

        logger.debug(f"SSE event type: {event.event}")
        data = event.data
        if capture:
            capture.record(SSE_CHUNK, data)

        if data:
            try:
                parsed = json.loads(data)
            except json.JSONDecodeError as e:
                logger.warning(f"Failed to parse SSE data as JSON: {e}")
                logger.debug(f"SSE data: {data[:LOG_PREVIEW_CHARS]}")
            else:
                if is_terminal_response(parsed):
                    logger.debug("Found JSON-RPC response in SSE stream")
                    return parsed

        if deadline_passed(deadline):
            raise BackendTimeoutError("Timed out waiting for SSE response")

    raise NoResponseError("No valid JSON-RPC response in SSE stream")
