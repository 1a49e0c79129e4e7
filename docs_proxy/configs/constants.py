"""
Docs Proxy Constants

Static values for the backend exchange: endpoint, headers and timeouts.
"""

# --- Backend Endpoint ---

BACKEND_URL = "https://bun.com/docs/mcp"

CONTENT_TYPE_HEADER = "application/json"
ACCEPT_HEADER = "application/json, text/event-stream"
SSE_CONTENT_TYPE = "text/event-stream"

# --- JSON-RPC Error Codes ---

PARSE_ERROR = -32700
INTERNAL_ERROR = -32603

# --- Timeout Configuration ---
# Centralized timeout values (in seconds)

TIMEOUTS = {
    "backend_request": 5,  # Whole POST round trip, SSE events included
}

# Longest payload preview written to debug logs
LOG_PREVIEW_CHARS = 200


def get_timeout(key: str, default: int | float | None = None) -> int | float:
    """
    Get a timeout value by key.

    Args:
        key: Timeout key from TIMEOUTS dict
        default: Default value if key not found

    Returns:
        Timeout value in seconds
    """
    if default is None:
        default = TIMEOUTS["backend_request"]
    return TIMEOUTS.get(key, default)
