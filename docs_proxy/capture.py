"""
Traffic Capture

Appends every message crossing the stdio or HTTP boundary to a JSONL file,
one record per line:

    {"timestamp": "...", "direction": "STDIN", "data": "..."}

Used to study what the backend actually sends. Capture is best-effort: a
failed write disables it and relaying carries on.
"""

import json
from datetime import datetime, timezone
from pathlib import Path
from typing import Any

from docs_proxy.configs import get_logger

logger = get_logger("capture")

STDIN = "STDIN"
STDOUT = "STDOUT"
HTTP_REQ = "HTTP_REQ"
HTTP_RES = "HTTP_RES"
SSE_CHUNK = "SSE_CHUNK"


class TrafficCapture:
    """JSONL recorder for proxy traffic."""

    def __init__(self, path: Path):
        self.path = Path(path)
        self.enabled = True
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
        except OSError as e:
            logger.warning(f"Disabling traffic capture, cannot create {self.path.parent}: {e}")
            self.enabled = False

    def record(self, direction: str, data: Any) -> None:
        """Append one record. No-op once a write has failed."""
        if not self.enabled:
            return

        entry = {
            "timestamp": datetime.now(timezone.utc).isoformat(),
            "direction": direction,
            "data": data,
        }
        try:
            with open(self.path, "a", encoding="utf-8") as f:
                f.write(json.dumps(entry, ensure_ascii=False) + "\n")
        except OSError as e:
            logger.warning(f"Disabling traffic capture, write to {self.path} failed: {e}")
            self.enabled = False
