"""
Stdio Transport

Line-delimited JSON-RPC text over binary stdin/stdout. One message per
line, UTF-8, flushed after every write so the client sees it immediately.
"""

import sys
from typing import BinaryIO, Optional

from docs_proxy.capture import STDIN, STDOUT, TrafficCapture
from docs_proxy.configs import get_logger
from docs_proxy.exceptions import TransportError

logger = get_logger("transport")

_PREVIEW_CHARS = 80


class StdioTransport:
    """
    Blocking, sequential reader/writer for the client side of the relay.

    Usage:
        transport = StdioTransport()
        message = transport.read_message()
        if message is not None:
            transport.write_message(relay(message))
    """

    def __init__(
        self,
        input_stream: Optional[BinaryIO] = None,
        output_stream: Optional[BinaryIO] = None,
        capture: Optional[TrafficCapture] = None,
    ):
        self._input = input_stream if input_stream is not None else sys.stdin.buffer
        self._output = output_stream if output_stream is not None else sys.stdout.buffer
        self._capture = capture
        self._closed = False

    @property
    def closed(self) -> bool:
        """True once end-of-stream has been read from the input."""
        return self._closed

    def read_message(self) -> Optional[str]:
        """
        Read the next line from the input.

        Returns:
            The stripped line, or None at end-of-stream or for a blank line.
            Check `closed` to tell the two apart.

        Raises:
            TransportError: Reading or decoding the input failed
        """
        try:
            raw = self._input.readline()
        except (OSError, ValueError) as e:
            raise TransportError(f"Failed to read from stdin: {e}") from e

        if not raw:
            logger.debug("EOF on stdin")
            self._closed = True
            return None

        try:
            line = raw.decode("utf-8").strip()
        except UnicodeDecodeError as e:
            raise TransportError(f"Stdin is not valid UTF-8: {e}") from e

        if not line:
            return None

        logger.debug(f"Read message: {line[:_PREVIEW_CHARS]}...")
        if self._capture:
            self._capture.record(STDIN, line)
        return line

    def write_message(self, message: str) -> None:
        """
        Write one message followed by a newline, then flush.

        Raises:
            TransportError: Writing or flushing stdout failed
        """
        logger.debug(f"Writing message: {message[:_PREVIEW_CHARS]}...")

        try:
            self._output.write(message.encode("utf-8") + b"\n")
        except (OSError, ValueError) as e:
            raise TransportError(f"Failed to write to stdout: {e}") from e

        try:
            self._output.flush()
        except (OSError, ValueError) as e:
            raise TransportError(f"Failed to flush stdout: {e}") from e

        if self._capture:
            self._capture.record(STDOUT, message)
