"""Stdio side of the relay."""

from docs_proxy.transport.stdio import StdioTransport

__all__ = ["StdioTransport"]
