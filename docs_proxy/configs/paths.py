"""
Docs Proxy Data Paths

Location of the directory holding the log file and traffic captures.
"""

import os
from pathlib import Path

DEFAULT_DATA_PATH = Path.home() / ".docs-mcp-proxy"


def get_data_path() -> Path:
    """Get the proxy data directory path."""
    data_path = os.environ.get("DOCS_PROXY_DATA_PATH")
    if data_path:
        return Path(data_path).expanduser()
    return DEFAULT_DATA_PATH
