"""
Base functionality for MCP tools including decorators and shared utilities
"""

import functools
import inspect
from typing import Any, Callable, Dict, Optional, Tuple

from ..services.cleanup_service import CodeCleanupService
from ..services.stash import StashManager
from ..utils.datetime_utils import format_duration_ms, utc_now
from ..utils.errors import CodeCleanupError, format_error_for_user
from ..utils.logging_utils import get_logger

logger = get_logger(__name__)

# Global service references
mcp = None
cleanup_service: Optional[CodeCleanupService] = None
stash_manager: Optional[StashManager] = None


def set_mcp_instance(mcp_instance):
    """Set the global MCP instance for tools to use"""
    global mcp
    mcp = mcp_instance


def set_service_instances(cleanup=None, stash=None):
    """Set global service instances for tools to use"""
    global cleanup_service, stash_manager
    if cleanup:
        cleanup_service = cleanup
    if stash:
        stash_manager = stash


def reset_service_instances():
    """Forget injected services so the next tool call initializes them again"""
    global cleanup_service, stash_manager
    cleanup_service = None
    stash_manager = None


def mcp_tool(*args, **kwargs):
    """Wrapper for mcp.tool() decorator that uses the global mcp instance"""
    def decorator(func):
        if mcp is None:
            raise RuntimeError("MCP instance not set. Call set_mcp_instance() first.")
        return mcp.tool(*args, **kwargs)(func)

    if args and callable(args[0]):
        return decorator(args[0])
    return decorator


def with_error_handling(func: Callable) -> Callable:
    """Decorator turning unexpected tool failures into a text result"""
    @functools.wraps(func)
    async def wrapper(*args, **kwargs):
        try:
            return await func(*args, **kwargs)
        except Exception as e:
            error = e if isinstance(e, CodeCleanupError) else CodeCleanupError.from_exception(e)
            logger.error(f"Error in {func.__name__}: {error.to_dict()}")
            return format_error_for_user(e)
    return wrapper


def with_activity_logging(func: Callable) -> Callable:
    """Decorator logging each tool call with its arguments and duration"""
    @functools.wraps(func)
    async def wrapper(*args, **kwargs):
        start_time = utc_now()
        request_data = _bind_arguments(func, args, kwargs)
        logger.info(f"Tool call: {func.__name__} {request_data}")

        try:
            result = await func(*args, **kwargs)
        except Exception as e:
            duration_ms = format_duration_ms(start_time)
            logger.error(f"Tool error: {func.__name__} failed after {duration_ms:.0f}ms: {e}")
            raise

        duration_ms = format_duration_ms(start_time)
        logger.info(f"Tool done: {func.__name__} in {duration_ms:.0f}ms")
        return result

    return wrapper


def _bind_arguments(func: Callable, args: tuple, kwargs: Dict[str, Any]) -> Dict[str, Any]:
    sig = inspect.signature(func)
    bound_args = sig.bind_partial(*args, **kwargs)
    bound_args.apply_defaults()
    return {
        name: value for name, value in bound_args.arguments.items()
        if name not in ['self', 'cls', 'ctx']
    }


def get_or_initialize_services() -> Tuple[CodeCleanupService, StashManager]:
    """Get injected services, initializing them from settings on first use"""
    global cleanup_service, stash_manager
    if cleanup_service is None or stash_manager is None:
        from ..core.service_manager import get_service_manager

        service_mgr = get_service_manager()
        cleanup_service = cleanup_service or service_mgr.cleanup_service
        stash_manager = stash_manager or service_mgr.stash_manager

    return cleanup_service, stash_manager
