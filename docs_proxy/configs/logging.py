"""
Docs Proxy Logging Configuration

Configures logging based on environment variables:
- DOCS_PROXY_DEBUG: Enable debug logging (default: false)
- DOCS_PROXY_LOG_FILE: Log file path (default: $DOCS_PROXY_DATA_PATH/proxy.log)

Stdout carries the JSON-RPC channel, so no handler ever writes to it.
"""

import logging
import os
import sys
from pathlib import Path
from typing import Optional

from docs_proxy.configs.paths import get_data_path


def setup_logging(
    debug: Optional[bool] = None,
    log_file: Optional[str] = None,
) -> logging.Logger:
    """
    Configure logging for the proxy.

    Args:
        debug: Enable debug level. Defaults to DOCS_PROXY_DEBUG env var.
        log_file: Log file path. Defaults to DOCS_PROXY_LOG_FILE env var,
                  or $DOCS_PROXY_DATA_PATH/proxy.log if not set.

    Returns:
        Root logger for docs_proxy
    """
    # Read from env if not provided
    if debug is None:
        debug = os.environ.get("DOCS_PROXY_DEBUG", "").lower() in ("true", "1", "yes")
    if log_file is None:
        log_file = os.environ.get("DOCS_PROXY_LOG_FILE")
        if not log_file:
            log_file = str(get_data_path() / "proxy.log")

    level = logging.DEBUG if debug else logging.INFO

    formatter = logging.Formatter(
        "%(asctime)s %(levelname)-5s [%(name)s] %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )

    logger = logging.getLogger("docs_proxy")
    logger.setLevel(level)

    # Clear existing handlers
    logger.handlers.clear()

    stderr_handler = logging.StreamHandler(sys.stderr)
    stderr_handler.setFormatter(formatter)
    logger.addHandler(stderr_handler)

    try:
        Path(log_file).parent.mkdir(parents=True, exist_ok=True)
        file_handler = logging.FileHandler(log_file, encoding="utf-8")
    except OSError as e:
        # Fall back to stderr at the configured level
        stderr_handler.setLevel(level)
        logger.warning(f"Cannot open log file {log_file}, logging to stderr only: {e}")
        return logger

    # Stderr only shows warnings while a log file is active
    stderr_handler.setLevel(logging.WARNING)
    file_handler.setFormatter(formatter)
    file_handler.setLevel(level)
    logger.addHandler(file_handler)
    logger.debug(f"Logging to file: {log_file}")

    return logger


def get_logger(component: str) -> logging.Logger:
    """
    Get a logger for a specific component.

    Args:
        component: Component name (e.g., "transport", "client", "relay")

    Returns:
        Logger instance for the component
    """
    return logging.getLogger(f"docs_proxy.{component}")
