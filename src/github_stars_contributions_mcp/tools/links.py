"""Profile link MCP tools."""

from typing import Annotated

import structlog
from fastmcp import Context
from pydantic import Field

from ..common.error_handlers import handle_stars_api_errors
from ..common.logging_helpers import log_function_call
from ..common.stars_helpers import run_operation
from ..models import AbsoluteUrl, NonBlankStr, PlatformType
from ..operations import ADD_LINK, LIST_LINKS, REMOVE_LINK
from ..shared import mcp

logger = structlog.get_logger(__name__)


@handle_stars_api_errors("add link")
@log_function_call("add_link_impl")
async def _add_link_impl(ctx: Context, link: str, platform: PlatformType) -> str:
    await ctx.info(f"Adding {platform.value} link: {link}")
    return await run_operation(ADD_LINK, {"link": link, "platform": platform})


@handle_stars_api_errors("remove link")
@log_function_call("remove_link_impl")
async def _remove_link_impl(ctx: Context, link_id: str) -> str:
    await ctx.info(f"Deleting link {link_id}")
    return await run_operation(REMOVE_LINK, {"id": link_id})


@handle_stars_api_errors("list links")
@log_function_call("list_links_impl")
async def _list_links_impl(ctx: Context) -> str:
    await ctx.info("Listing profile links")
    return await run_operation(LIST_LINKS)


@mcp.tool
async def add_link(
    ctx: Context,
    link: Annotated[AbsoluteUrl, Field(description="URL of the profile link")],
    platform: Annotated[PlatformType, Field(description="Platform type for the link")],
) -> str:
    """Add a profile link to your GitHub Stars profile."""
    return await _add_link_impl(ctx, link, platform)


@mcp.tool
async def remove_link(
    ctx: Context,
    id: Annotated[NonBlankStr, Field(description="ID of the link to delete")],
) -> str:
    """Delete a profile link from your GitHub Stars profile."""
    return await _remove_link_impl(ctx, id)


@mcp.tool
async def list_links(ctx: Context) -> str:
    """Get all profile links from your GitHub Stars profile."""
    return await _list_links_impl(ctx)
