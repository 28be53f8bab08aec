"""Global pytest configuration and fixtures."""

import os
import sys
import tempfile
from pathlib import Path
from unittest.mock import AsyncMock, MagicMock

import pytest

# Add parent directory to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent))

# Settings are read lazily, but the server module must import cleanly
os.environ.setdefault("CODEBASE_PATH", tempfile.gettempdir())
os.environ.setdefault("GOOGLE_API_KEY", "test-api-key")

from code_cleanup.core.config import get_settings
from code_cleanup.services.cleanup_service import CodeCleanupService
from code_cleanup.services.stash import StashManager
from code_cleanup.tools import base as tools_base


@pytest.fixture
def codebase(tmp_path):
    """Empty codebase root."""
    root = tmp_path / "project"
    root.mkdir()
    return root


@pytest.fixture
def stash(codebase):
    return StashManager(codebase / ".stash")


@pytest.fixture
def fake_generator():
    """Generation client that upper-cases the code it receives."""
    generator = MagicMock()

    async def cleanup_code(code, filename):
        return code.upper()

    generator.cleanup_code = AsyncMock(side_effect=cleanup_code)
    return generator


@pytest.fixture
def cleanup_service(codebase, stash, fake_generator, monkeypatch):
    """Cleanup service running from the codebase root, as an MCP host would launch it."""
    monkeypatch.chdir(codebase)
    return CodeCleanupService(stash=stash, generator=fake_generator)


@pytest.fixture
def tool_services(cleanup_service, stash):
    """Inject services into the MCP tools for the duration of a test."""
    tools_base.reset_service_instances()
    tools_base.set_service_instances(cleanup=cleanup_service, stash=stash)
    yield cleanup_service
    tools_base.reset_service_instances()


@pytest.fixture
def clear_settings_cache():
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()
