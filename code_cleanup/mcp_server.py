#!/usr/bin/env python3
"""
Code Cleanup MCP Server

Main entry point for the Code Cleanup MCP Server using FastMCP.
Serves over stdio; every log line goes to stderr.
"""

import os
import sys

from fastmcp import FastMCP

from code_cleanup.core.config import get_settings
from code_cleanup.core.constants import SERVER_NAME, SERVER_VERSION
from code_cleanup.core.service_manager import service_manager
from code_cleanup.tools.base import set_mcp_instance, set_service_instances
from code_cleanup.utils.logging_utils import get_logger, setup_logging

# Configure logging
setup_logging(os.getenv("LOG_LEVEL", "INFO"))
logger = get_logger(__name__)

# Create FastMCP instance
mcp = FastMCP(SERVER_NAME, version=SERVER_VERSION)
set_mcp_instance(mcp)

# Import all tools after MCP instance is set
from code_cleanup.tools.cleanup_tools import cleanup_code_files, restore_code_file  # noqa: E402
from code_cleanup.tools.stash_tools import cleanup_code_stash, list_code_stash  # noqa: E402


def main():
    """Main entry point for the MCP server."""
    try:
        settings = get_settings()
        setup_logging(settings.log_level)

        service_manager.initialize()
        set_service_instances(
            cleanup=service_manager.cleanup_service,
            stash=service_manager.stash_manager
        )

        logger.info("Code Cleanup MCP Server running on stdio")
        logger.info(f"CODEBASE_PATH: {settings.codebase_path}")

        mcp.run(transport="stdio", show_banner=False)

    except Exception as e:
        logger.error(f"Fatal error in main(): {e}")
        sys.exit(1)
    finally:
        service_manager.close()


if __name__ == "__main__":
    main()
