"""
Docs Proxy Configuration Module

Re-exports commonly used functions for cleaner imports across the codebase.
"""

# Logging (most commonly used)
from docs_proxy.configs.logging import get_logger, setup_logging

# Paths
from docs_proxy.configs.paths import get_data_path

# Constants
from docs_proxy.configs.constants import (
    ACCEPT_HEADER,
    BACKEND_URL,
    TIMEOUTS,
    get_timeout,
)

# Settings
from docs_proxy.configs.settings import BridgeConfig

__all__ = [
    "get_logger",
    "setup_logging",
    "get_data_path",
    "ACCEPT_HEADER",
    "BACKEND_URL",
    "TIMEOUTS",
    "get_timeout",
    "BridgeConfig",
]
