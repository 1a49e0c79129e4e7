"""
Docs Proxy Runtime Settings

One immutable settings object is built at startup and handed to the relay
and the backend client. Only diagnostics read the environment; the backend
endpoint and timeout are fixed.
"""

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from docs_proxy.configs.constants import BACKEND_URL, get_timeout
from docs_proxy.configs.paths import get_data_path


def _env_flag(name: str) -> bool:
    return os.environ.get(name, "").lower() in ("true", "1", "yes")


@dataclass(frozen=True)
class BridgeConfig:
    """Settings for one stdio relay session."""

    backend_url: str = BACKEND_URL
    timeout: float = get_timeout("backend_request")
    debug: bool = False
    log_file: Optional[str] = None
    capture_file: Optional[Path] = None

    @classmethod
    def from_env(cls) -> "BridgeConfig":
        """
        Build settings from diagnostic environment variables.

        - DOCS_PROXY_DEBUG: debug logging
        - DOCS_PROXY_LOG_FILE: log file path
        - DOCS_PROXY_CAPTURE: record traffic to $DOCS_PROXY_DATA_PATH/traffic.jsonl
        - DOCS_PROXY_CAPTURE_FILE: record traffic to this path (implies capture)
        """
        capture_file = None
        capture_path = os.environ.get("DOCS_PROXY_CAPTURE_FILE")
        if capture_path:
            capture_file = Path(capture_path).expanduser()
        elif _env_flag("DOCS_PROXY_CAPTURE"):
            capture_file = get_data_path() / "traffic.jsonl"

        return cls(
            debug=_env_flag("DOCS_PROXY_DEBUG"),
            log_file=os.environ.get("DOCS_PROXY_LOG_FILE") or None,
            capture_file=capture_file,
        )
