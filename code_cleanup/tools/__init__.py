"""
MCP Tools package for code cleanup
"""

from .base import mcp_tool, with_error_handling, with_activity_logging, set_mcp_instance, set_service_instances

__all__ = [
    "mcp_tool",
    "with_error_handling",
    "with_activity_logging",
    "set_mcp_instance",
    "set_service_instances"
]
