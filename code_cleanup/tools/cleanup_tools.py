"""
Code cleanup tools for the Code Cleanup MCP Server
"""

from typing import Annotated, List, Optional

from pydantic import Field

from .base import mcp_tool, with_error_handling, with_activity_logging, get_or_initialize_services
from ..services.cleanup_service import render_results
from ..utils.logging_utils import get_logger

logger = get_logger(__name__)


@mcp_tool()
@with_error_handling
@with_activity_logging
async def cleanup_code_files(
    file_paths: Annotated[List[str], Field(description="Array of file paths to clean up")]
) -> str:
    """
    Clean up code files and store backups in the .stash directory

    Each file is backed up, sent to the model, and overwritten with the
    cleaned code. Relative paths are taken from the server working directory.
    Returns one result line per file.
    """
    cleanup_service, _ = get_or_initialize_services()

    logger.info(f"Cleaning up {len(file_paths)} file(s)")
    results = await cleanup_service.cleanup_files(file_paths)
    return render_results(results)


@mcp_tool()
@with_error_handling
@with_activity_logging
async def restore_code_file(
    file_path: Annotated[str, Field(description="Path of the file to restore")],
    backup_name: Annotated[
        Optional[str],
        Field(description="Stash filename to restore from; defaults to the latest backup of the file")
    ] = None
) -> str:
    """Restore a file from a backup in the .stash directory"""
    cleanup_service, _ = get_or_initialize_services()
    return cleanup_service.restore_file(file_path, backup_name)
