"""
MCP Stdio-to-HTTP Relay

Reads JSON-RPC messages from stdin, forwards each one to the docs backend,
and writes the backend's response to stdout. Requests are handled one at a
time, to completion, before the next line is read.
"""

import json
import signal
import sys
from typing import Any, Optional

from docs_proxy import __version__
from docs_proxy.capture import TrafficCapture
from docs_proxy.configs import BridgeConfig, get_logger, setup_logging
from docs_proxy.configs.constants import INTERNAL_ERROR, PARSE_ERROR
from docs_proxy.exceptions import BackendError, TransportError
from docs_proxy.http import DocsApiClient
from docs_proxy.transport import StdioTransport

logger = get_logger("relay")


def encode_message(message: Any) -> str:
    """Serialize a JSON-RPC message as one compact line."""
    return json.dumps(message, ensure_ascii=False, separators=(",", ":"))


def error_response(request_id, code: int, message: str) -> dict:
    """Build a JSON-RPC error response."""
    return {
        "jsonrpc": "2.0",
        "id": request_id,
        "error": {"code": code, "message": message},
    }


def is_notification(request: Any) -> bool:
    """JSON-RPC notifications carry no id and never get a reply."""
    return isinstance(request, dict) and "id" not in request


class Relay:
    """Synchronous stdin -> backend -> stdout loop."""

    def __init__(self, transport: StdioTransport, client: DocsApiClient):
        self.transport = transport
        self.client = client

    def handle_message(self, message: str) -> Optional[str]:
        """
        Relay one input line.

        Returns:
            The line to write back, or None when no reply is due
        """
        try:
            request = json.loads(message)
        except json.JSONDecodeError as e:
            logger.error(f"Invalid JSON: {e}")
            return encode_message(error_response(None, PARSE_ERROR, "Parse error"))

        request_id = request.get("id") if isinstance(request, dict) else None
        method = request.get("method", "") if isinstance(request, dict) else ""
        logger.debug(f"Received: {method} (id={request_id})")

        try:
            response = self.client.forward_request(request)
        except BackendError as e:
            if is_notification(request):
                logger.warning(f"Notification {method} failed: {e}")
                return None
            logger.error(f"Request {method} (id={request_id}) failed: {e}")
            return encode_message(
                error_response(request_id, INTERNAL_ERROR, f"Internal error: {e}")
            )

        if is_notification(request):
            return None
        return encode_message(response)

    def run(self) -> None:
        """
        Relay messages until stdin closes.

        Raises:
            TransportError: Stdio failed; the session cannot continue
        """
        while True:
            message = self.transport.read_message()
            if message is None:
                if self.transport.closed:
                    logger.info("Stdin closed, shutting down")
                    return
                continue

            reply = self.handle_message(message)
            if reply is not None:
                self.transport.write_message(reply)


def _raise_interrupt(signum, frame) -> None:
    raise KeyboardInterrupt


def main() -> None:
    """Process entry point."""
    config = BridgeConfig.from_env()
    setup_logging(debug=config.debug, log_file=config.log_file)
    logger.info(f"Docs MCP proxy {__version__} starting, backend URL: {config.backend_url}")

    # Hosts stop the proxy with SIGTERM; treat it like Ctrl-C
    signal.signal(signal.SIGTERM, _raise_interrupt)

    try:
        capture = TrafficCapture(config.capture_file) if config.capture_file else None
        if capture:
            logger.info(f"Capturing traffic to {capture.path}")
        transport = StdioTransport(capture=capture)
        with DocsApiClient(config, capture=capture) as client:
            Relay(transport, client).run()
    except KeyboardInterrupt:
        logger.info("Proxy interrupted")
        sys.exit(0)
    except TransportError as e:
        logger.error(f"Stdio transport failed: {e}")
        sys.exit(1)
    except Exception as e:
        logger.exception(f"Proxy error: {e}")
        sys.exit(1)
