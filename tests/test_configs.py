"""
Tests for settings, logging setup and traffic capture.
"""

import json
import logging
import sys
from pathlib import Path

import pytest

from docs_proxy.capture import TrafficCapture
from docs_proxy.configs import BridgeConfig, get_logger, get_timeout, setup_logging
from docs_proxy.configs.paths import get_data_path
from docs_proxy.exceptions import BackendStatusError, ProxyError


class TestBridgeConfig:
    """Tests for BridgeConfig."""

    def test_defaults(self):
        config = BridgeConfig()

        assert config.backend_url == "https://bun.com/docs/mcp"
        assert config.timeout == 5
        assert config.debug is False
        assert config.capture_file is None

    def test_from_env_defaults(self):
        config = BridgeConfig.from_env()

        assert config == BridgeConfig()

    def test_from_env_reads_diagnostics(self, monkeypatch, temp_dir):
        monkeypatch.setenv("DOCS_PROXY_DEBUG", "yes")
        monkeypatch.setenv("DOCS_PROXY_LOG_FILE", str(temp_dir / "proxy.log"))
        monkeypatch.setenv("DOCS_PROXY_CAPTURE_FILE", str(temp_dir / "capture.jsonl"))

        config = BridgeConfig.from_env()

        assert config.debug is True
        assert config.log_file == str(temp_dir / "proxy.log")
        assert config.capture_file == temp_dir / "capture.jsonl"

    def test_capture_flag_uses_data_path(self, monkeypatch, isolated_data_path):
        monkeypatch.setenv("DOCS_PROXY_CAPTURE", "1")

        assert BridgeConfig.from_env().capture_file == isolated_data_path / "traffic.jsonl"

    def test_backend_url_is_not_read_from_env(self, monkeypatch):
        monkeypatch.setenv("MCP_SERVER_URL", "http://example.invalid/mcp")

        assert BridgeConfig.from_env().backend_url == "https://bun.com/docs/mcp"

    def test_is_immutable(self):
        config = BridgeConfig()

        with pytest.raises(AttributeError):
            config.timeout = 10


class TestTimeouts:
    """Tests for get_timeout."""

    def test_known_key(self):
        assert get_timeout("backend_request") == 5

    def test_unknown_key_uses_default(self):
        assert get_timeout("missing", 2) == 2
        assert get_timeout("missing") == 5


class TestLogging:
    """Tests for setup_logging."""

    def test_writes_to_log_file(self, temp_dir):
        log_file = temp_dir / "logs" / "proxy.log"
        setup_logging(debug=False, log_file=str(log_file))

        get_logger("test").info("hello from test")

        assert "[docs_proxy.test] hello from test" in log_file.read_text()

    def test_debug_level(self, temp_dir):
        logger = setup_logging(debug=True, log_file=str(temp_dir / "proxy.log"))

        assert logger.level == logging.DEBUG

    def test_debug_from_env(self, monkeypatch, temp_dir):
        monkeypatch.setenv("DOCS_PROXY_DEBUG", "true")

        logger = setup_logging(log_file=str(temp_dir / "proxy.log"))

        assert logger.level == logging.DEBUG

    def test_default_log_file_in_data_path(self, isolated_data_path):
        setup_logging(debug=False)

        assert (isolated_data_path / "proxy.log").exists()

    def test_never_logs_to_stdout(self, temp_dir):
        logger = setup_logging(debug=True, log_file=str(temp_dir / "proxy.log"))

        streams = [getattr(h, "stream", None) for h in logger.handlers]
        assert sys.stdout not in streams

    def test_unusable_log_file_falls_back_to_stderr(self, temp_dir):
        blocker = temp_dir / "blocker"
        blocker.write_text("")

        logger = setup_logging(debug=False, log_file=str(blocker / "sub" / "proxy.log"))

        assert len(logger.handlers) == 1
        assert logger.handlers[0].stream is sys.stderr
        assert logger.handlers[0].level == logging.INFO

    def test_repeated_setup_does_not_duplicate_handlers(self, temp_dir):
        setup_logging(log_file=str(temp_dir / "a.log"))
        logger = setup_logging(log_file=str(temp_dir / "b.log"))

        assert len(logger.handlers) == 2


class TestDataPath:
    """Tests for get_data_path."""

    def test_env_override(self, isolated_data_path):
        assert get_data_path() == isolated_data_path

    def test_default(self, monkeypatch):
        monkeypatch.delenv("DOCS_PROXY_DATA_PATH")

        assert get_data_path() == Path.home() / ".docs-mcp-proxy"


class TestTrafficCapture:
    """Tests for TrafficCapture."""

    def test_appends_jsonl_records(self, temp_dir):
        capture = TrafficCapture(temp_dir / "nested" / "traffic.jsonl")

        capture.record("STDIN", '{"id":1}')
        capture.record("HTTP_RES", {"status": 200, "content_type": "application/json"})

        lines = capture.path.read_text().splitlines()
        records = [json.loads(line) for line in lines]
        assert [r["direction"] for r in records] == ["STDIN", "HTTP_RES"]
        assert records[1]["data"]["status"] == 200
        assert all("timestamp" in r for r in records)

    def test_write_failure_disables_capture(self, temp_dir):
        capture = TrafficCapture(temp_dir / "traffic.jsonl")
        capture.path.mkdir()  # a directory cannot be opened for append

        capture.record("STDIN", "x")
        capture.record("STDIN", "y")

        assert capture.enabled is False

    def test_uncreatable_directory_disables_capture(self, temp_dir):
        blocker = temp_dir / "blocker"
        blocker.write_text("")

        capture = TrafficCapture(blocker / "sub" / "traffic.jsonl")
        capture.record("STDIN", "x")

        assert capture.enabled is False
        assert not capture.path.exists()


class TestExceptions:
    """Tests for the exception hierarchy."""

    def test_details_in_str(self):
        error = BackendStatusError("Docs API error: 502 - bad gateway", status_code=502, response_text="bad gateway")

        assert str(error) == (
            "Docs API error: 502 - bad gateway "
            "({'status_code': 502, 'response_text': 'bad gateway'})"
        )
        assert isinstance(error, ProxyError)

    def test_plain_message(self):
        assert str(ProxyError("boom")) == "boom"
