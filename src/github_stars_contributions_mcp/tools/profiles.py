"""Public profile and user query MCP tools."""

from typing import Annotated

import structlog
from fastmcp import Context
from pydantic import Field

from ..common.error_handlers import handle_stars_api_errors
from ..common.logging_helpers import log_function_call
from ..common.stars_helpers import run_operation
from ..models import StarUsername
from ..operations import GET_LOGGED_USER, GET_PUBLIC_PROFILE, SEARCH_STARS
from ..shared import mcp

logger = structlog.get_logger(__name__)


@handle_stars_api_errors("get public profile")
@log_function_call("get_public_profile_impl")
async def _get_public_profile_impl(ctx: Context, username: str) -> str:
    await ctx.info(f"Fetching public profile for {username}")
    return await run_operation(GET_PUBLIC_PROFILE, {"username": username})


@handle_stars_api_errors("search stars")
@log_function_call("search_stars_impl")
async def _search_stars_impl(ctx: Context, featured: bool | None = None) -> str:
    await ctx.info(f"Searching Stars (featured: {featured})")
    return await run_operation(SEARCH_STARS, {"featured": featured})


@handle_stars_api_errors("get logged user")
@log_function_call("get_logged_user_impl")
async def _get_logged_user_impl(ctx: Context) -> str:
    await ctx.info("Fetching logged-in user")
    return await run_operation(GET_LOGGED_USER)


@mcp.tool
async def get_public_profile(
    ctx: Context,
    username: Annotated[StarUsername, Field(description="GitHub username of the Star")],
) -> str:
    """Get a GitHub Star's public profile by username.

    The profile includes the Star's contributions and profile links.
    """
    return await _get_public_profile_impl(ctx, username)


@mcp.tool
async def search_stars(
    ctx: Context,
    featured: Annotated[
        bool | None, Field(description="Filter to only featured Stars")
    ] = None,
) -> str:
    """Search and list GitHub Stars public data."""
    return await _search_stars_impl(ctx, featured)


@mcp.tool
async def get_logged_user(ctx: Context) -> str:
    """Get information about the currently logged-in user."""
    return await _get_logged_user_impl(ctx)
