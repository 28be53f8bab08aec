"""
Stash maintenance tools for the Code Cleanup MCP Server
"""

from .base import mcp_tool, with_error_handling, with_activity_logging, get_or_initialize_services


@mcp_tool()
@with_error_handling
@with_activity_logging
async def cleanup_code_stash() -> str:
    """Remove all backup files from the .stash directory"""
    _, stash_manager = get_or_initialize_services()
    return stash_manager.purge()


@mcp_tool()
@with_error_handling
@with_activity_logging
async def list_code_stash() -> str:
    """List backup files in the .stash directory, newest first"""
    _, stash_manager = get_or_initialize_services()

    if not stash_manager.exists():
        return "No stash directory found."

    backups = stash_manager.list_backups()
    if not backups:
        return "Stash directory is empty."

    return "\n".join(entry.describe() for entry in backups)
