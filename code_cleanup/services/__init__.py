"""
Services backing the MCP tools
"""

from .cleanup_service import CodeCleanupService, render_results
from .gemini_client import GeminiCleanupClient
from .stash import StashManager

__all__ = ["CodeCleanupService", "GeminiCleanupClient", "StashManager", "render_results"]
