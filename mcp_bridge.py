#!/usr/bin/env python3
"""
MCP Stdio-to-HTTP Bridge

Reads MCP JSON-RPC messages from stdin, forwards them to the Bun docs MCP
server over HTTP, and writes responses to stdout.

Point an editor's context server command at this script (or at the
`docs-mcp-proxy` console script installed with the package).
"""

from docs_proxy.bridge import main

if __name__ == "__main__":
    main()
