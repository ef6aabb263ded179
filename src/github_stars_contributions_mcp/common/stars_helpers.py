"""Common GitHub Stars client utilities."""

from typing import Any

import structlog

from .. import shared
from ..exceptions import ConfigurationError, StarsAPIError, StarsMCPError
from ..operations import Operation, build_variables, format_result
from ..utils.stars_client import StarsClient

logger = structlog.get_logger(__name__)


def ensure_stars_client(stars_client: StarsClient | None) -> StarsClient:
    """Ensure a GitHub Stars client is available and properly configured.

    Args:
        stars_client: Optional GitHub Stars client instance

    Returns:
        Validated GitHub Stars client

    Raises:
        ConfigurationError: If client is not available or not configured
    """
    if stars_client is None:
        raise ConfigurationError("GitHub Stars client not initialized")

    if not getattr(stars_client, 'token', None):
        raise ConfigurationError("GitHub Stars client not properly configured with token")

    return stars_client


async def safe_stars_request(operation: str, request_func, *args, **kwargs):
    """Execute a GitHub Stars API request with consistent error handling.

    Errors of this package propagate unchanged; anything else is wrapped in
    a StarsAPIError.

    Args:
        operation: Description of the operation for logging
        request_func: The client method to call
        *args: Arguments to pass to the request function
        **kwargs: Keyword arguments to pass to the request function
    """
    try:
        logger.debug(f"Executing GitHub Stars API request: {operation}")
        result = await request_func(*args, **kwargs)
        logger.debug(f"GitHub Stars API request successful: {operation}")
        return result
    except StarsMCPError:
        raise
    except Exception as e:
        logger.error(
            f"GitHub Stars API request failed for {operation}",
            error=str(e),
            error_type=type(e).__name__
        )
        raise StarsAPIError(
            f"GitHub Stars API request failed for {operation}: {str(e)}"
        ) from e


async def run_operation(operation: Operation, values: dict[str, Any] | None = None) -> str:
    """Send one operation to the API and format its result.

    Args:
        operation: Entry of the operation table
        values: Validated tool input keyed by GraphQL variable name

    Returns:
        Tool output text
    """
    stars_client = ensure_stars_client(shared.stars_client)
    variables = build_variables(operation, values or {})
    data = await safe_stars_request(
        operation.name, stars_client.execute, operation.document, variables
    )
    return format_result(operation, data)
