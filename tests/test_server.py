"""Tests for the server entry point."""

import logging

import pytest
from unittest.mock import MagicMock

from code_cleanup import mcp_server
from code_cleanup.core.service_manager import ServiceManager
from code_cleanup.tools import base as tools_base


@pytest.fixture
def server_env(monkeypatch, tmp_path, clear_settings_cache):
    """Run main() with a fresh service manager and a stubbed transport."""
    monkeypatch.chdir(tmp_path)
    monkeypatch.setenv("CODEBASE_PATH", str(tmp_path))
    monkeypatch.setenv("GOOGLE_API_KEY", "test-api-key")

    manager = ServiceManager()
    run = MagicMock()
    monkeypatch.setattr(mcp_server, "service_manager", manager)
    monkeypatch.setattr(mcp_server.mcp, "run", run)
    # basicConfig(force=True) would detach caplog's handler
    monkeypatch.setattr(mcp_server, "setup_logging", MagicMock())

    yield manager, run
    tools_base.reset_service_instances()


class TestMain:
    """Test startup and fatal errors."""

    def test_runs_on_stdio(self, server_env, tmp_path, caplog):
        manager, run = server_env
        caplog.set_level(logging.INFO)

        mcp_server.main()

        run.assert_called_once_with(transport="stdio", show_banner=False)
        assert "Code Cleanup MCP Server running on stdio" in caplog.text
        assert f"CODEBASE_PATH: {tmp_path.resolve()}" in caplog.text
        assert not manager.is_initialized()

    def test_missing_codebase_path_exits(self, server_env, monkeypatch, caplog):
        _, run = server_env
        monkeypatch.delenv("CODEBASE_PATH")

        with pytest.raises(SystemExit) as exc_info:
            mcp_server.main()

        assert exc_info.value.code == 1
        assert "Fatal error in main(): " in caplog.text
        assert "environment variable is not set" in caplog.text
        run.assert_not_called()

    def test_empty_api_key_exits(self, server_env, monkeypatch, caplog):
        _, run = server_env
        monkeypatch.setenv("GOOGLE_API_KEY", "")

        with pytest.raises(SystemExit) as exc_info:
            mcp_server.main()

        assert exc_info.value.code == 1
        assert "Fatal error in main(): " in caplog.text
        assert "GOOGLE_API_KEY environment variable is not set." in caplog.text
        run.assert_not_called()

    def test_transport_failure_exits(self, server_env, caplog):
        _, run = server_env
        run.side_effect = RuntimeError("stdin closed")

        with pytest.raises(SystemExit) as exc_info:
            mcp_server.main()

        assert exc_info.value.code == 1
        assert "Fatal error in main(): stdin closed" in caplog.text
