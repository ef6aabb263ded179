"""Common error handling utilities."""

from collections.abc import Callable
from functools import wraps
from typing import TypeVar

import structlog
from fastmcp.exceptions import ToolError

from ..exceptions import StarsMCPError

logger = structlog.get_logger(__name__)

T = TypeVar('T')


def handle_stars_api_errors(operation_name: str, error_class: type[Exception] = ToolError):
    """Decorator to turn failures of a handler into MCP error results.

    Known errors keep their message unchanged (for GraphQL errors that is the
    joined remote messages); anything else is reported as a failure of the
    operation. Either way only the current call fails.

    Args:
        operation_name: Name of the operation for logging
        error_class: Exception the MCP runtime reports as an error result
    """
    def decorator(func: Callable[..., T]) -> Callable[..., T]:
        @wraps(func)
        async def wrapper(*args, **kwargs) -> T:
            try:
                return await func(*args, **kwargs)
            except StarsMCPError as e:
                logger.warning(
                    f"Failed to {operation_name}",
                    error=e.message,
                    error_code=e.error_code,
                )
                raise error_class(e.message) from e
            except Exception as e:
                logger.error(
                    f"Unexpected error in {operation_name}",
                    error=str(e),
                    error_type=type(e).__name__
                )
                raise error_class(f"Failed to {operation_name}: {str(e)}") from e
        return wrapper
    return decorator
