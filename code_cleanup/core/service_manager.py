"""
Centralized service management for the Code Cleanup MCP Server
"""

from typing import Optional

from .config import Settings, get_settings
from ..services.cleanup_service import CodeCleanupService
from ..services.gemini_client import GeminiCleanupClient
from ..services.stash import StashManager
from ..utils.logging_utils import get_logger

logger = get_logger(__name__)


class ServiceManager:
    """Manages initialization and access to all application services"""

    def __init__(self, settings: Optional[Settings] = None):
        self._settings = settings
        self.stash_manager: Optional[StashManager] = None
        self.generation_client: Optional[GeminiCleanupClient] = None
        self.cleanup_service: Optional[CodeCleanupService] = None
        self._initialized = False

    @property
    def settings(self) -> Settings:
        if self._settings is None:
            self._settings = get_settings()
        return self._settings

    def initialize(self):
        """Initialize all services"""
        if self._initialized:
            logger.debug("Services already initialized")
            return

        try:
            settings = self.settings
            self.stash_manager = StashManager(settings.stash_path)
            self.generation_client = GeminiCleanupClient.from_settings(settings)
            self.cleanup_service = CodeCleanupService(
                stash=self.stash_manager,
                generator=self.generation_client
            )

            self._initialized = True
            logger.info(f"Services initialized (model: {settings.model}, stash: {settings.stash_path})")

        except Exception as e:
            logger.error(f"Failed to initialize services: {e}")
            raise

    def close(self):
        """Drop service references"""
        self.stash_manager = None
        self.generation_client = None
        self.cleanup_service = None
        self._initialized = False

    def is_initialized(self) -> bool:
        """Check if services are initialized"""
        return self._initialized


# Global service manager instance
service_manager = ServiceManager()


def get_service_manager() -> ServiceManager:
    """Get or initialize the global service manager"""
    if not service_manager.is_initialized():
        service_manager.initialize()
    return service_manager
