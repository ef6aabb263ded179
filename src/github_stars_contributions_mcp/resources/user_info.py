"""User information MCP resource."""

import structlog
from fastmcp.exceptions import ResourceError

from ..common.error_handlers import handle_stars_api_errors
from ..common.logging_helpers import log_function_call
from ..common.stars_helpers import run_operation
from ..operations import GET_LOGGED_USER
from ..shared import mcp

# Get structured logger
logger = structlog.get_logger(__name__)


@handle_stars_api_errors("get current user info", error_class=ResourceError)
@log_function_call("get_current_user_info")
async def _get_current_user_info_impl() -> str:
    """Fetch the logged-in user as pretty-printed JSON.

    Raises:
        ResourceError: If the client is not configured or the request fails
    """
    return await run_operation(GET_LOGGED_USER)


@mcp.resource("stars://user/current", mime_type="application/json")
async def get_current_user_resource() -> str:
    """Get the currently logged-in GitHub Stars user as a resource.

    This resource provides the account the API token belongs to, including
    its nomination record (status, job title, company and so on).

    Returns:
        JSON string containing current user information
    """
    return await _get_current_user_info_impl()
