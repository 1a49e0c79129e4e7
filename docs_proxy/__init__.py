"""
Docs MCP Proxy - a stdio JSON-RPC bridge to the Bun documentation MCP server.

Reads JSON-RPC messages line by line from stdin, POSTs each one to the HTTP
backend and writes the backend's answer to stdout, whether it arrives as a
plain JSON body or inside a Server-Sent-Events stream.
"""

__version__ = "0.3.0"
