"""
MCP Stdio-to-HTTP Relay

Reads JSON-RPC messages from stdin, forwards them to the docs backend, and
writes responses to stdout.
"""

from docs_proxy.bridge.relay import Relay, main

__all__ = ["Relay", "main"]
