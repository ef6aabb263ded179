"""Contribution management MCP tools."""

from typing import Annotated

import structlog
from fastmcp import Context
from pydantic import Field

from ..common.error_handlers import handle_stars_api_errors
from ..common.logging_helpers import log_function_call
from ..common.stars_helpers import run_operation
from ..models import AbsoluteUrl, ContributionDate, ContributionType, NonBlankStr
from ..operations import (
    ADD_CONTRIBUTION,
    LIST_CONTRIBUTIONS,
    REMOVE_CONTRIBUTION,
    UPDATE_CONTRIBUTION,
    build_pagination,
)
from ..shared import mcp

logger = structlog.get_logger(__name__)


@handle_stars_api_errors("add contribution")
@log_function_call("add_contribution_impl")
async def _add_contribution_impl(
    ctx: Context,
    contribution_type: ContributionType,
    title: str,
    description: str,
    date: str,
    url: str | None = None,
) -> str:
    """Create a contribution. ``date`` must already be normalized."""
    await ctx.info(f"Adding {contribution_type.value} contribution: {title}")
    return await run_operation(
        ADD_CONTRIBUTION,
        {
            "type": contribution_type,
            "title": title,
            "description": description,
            "url": url,
            "date": date,
        },
    )


@handle_stars_api_errors("remove contribution")
@log_function_call("remove_contribution_impl")
async def _remove_contribution_impl(ctx: Context, contribution_id: str) -> str:
    await ctx.info(f"Deleting contribution {contribution_id}")
    return await run_operation(REMOVE_CONTRIBUTION, {"id": contribution_id})


@handle_stars_api_errors("update contribution")
@log_function_call("update_contribution_impl")
async def _update_contribution_impl(
    ctx: Context,
    contribution_id: str,
    contribution_type: ContributionType | None = None,
    title: str | None = None,
    description: str | None = None,
    url: str | None = None,
    date: str | None = None,
) -> str:
    """Update a contribution; absent fields are sent as null."""
    await ctx.info(f"Updating contribution {contribution_id}")
    return await run_operation(
        UPDATE_CONTRIBUTION,
        {
            "id": contribution_id,
            "type": contribution_type,
            "title": title,
            "description": description,
            "url": url,
            "date": date,
        },
    )


@handle_stars_api_errors("list contributions")
@log_function_call("list_contributions_impl")
async def _list_contributions_impl(
    ctx: Context, first: int | None = None, offset: int | None = None
) -> str:
    pagination = build_pagination(first, offset)
    await ctx.info(f"Listing contributions (pagination: {pagination})")
    return await run_operation(LIST_CONTRIBUTIONS, {"pagination": pagination})


@mcp.tool
async def add_contribution(
    ctx: Context,
    type: Annotated[ContributionType, Field(description="Type of contribution")],
    title: Annotated[NonBlankStr, Field(description="Title of the contribution")],
    description: Annotated[NonBlankStr, Field(description="Description of the contribution")],
    date: Annotated[
        ContributionDate,
        Field(description="Date of the contribution (YYYY-MM-DD or ISO format)"),
    ],
    url: Annotated[
        AbsoluteUrl | None, Field(description="URL related to the contribution")
    ] = None,
) -> str:
    """Add a new contribution to your GitHub Stars profile.

    Returns the created contribution as JSON, including its new ID.
    """
    return await _add_contribution_impl(ctx, type, title, description, date, url)


@mcp.tool
async def remove_contribution(
    ctx: Context,
    id: Annotated[NonBlankStr, Field(description="ID of the contribution to delete")],
) -> str:
    """Delete a contribution from your GitHub Stars profile."""
    return await _remove_contribution_impl(ctx, id)


@mcp.tool
async def update_contribution(
    ctx: Context,
    id: Annotated[NonBlankStr, Field(description="ID of the contribution to update")],
    type: Annotated[
        ContributionType | None, Field(description="Type of contribution")
    ] = None,
    title: Annotated[
        NonBlankStr | None, Field(description="Title of the contribution")
    ] = None,
    description: Annotated[
        NonBlankStr | None, Field(description="Description of the contribution")
    ] = None,
    url: Annotated[
        AbsoluteUrl | None, Field(description="URL related to the contribution")
    ] = None,
    date: Annotated[
        ContributionDate | None,
        Field(description="Date of the contribution (YYYY-MM-DD or ISO format)"),
    ] = None,
) -> str:
    """Update an existing contribution on your GitHub Stars profile.

    Only ``id`` is required. Returns the updated contribution as JSON.
    """
    return await _update_contribution_impl(ctx, id, type, title, description, url, date)


@mcp.tool
async def list_contributions(
    ctx: Context,
    first: Annotated[
        int | None, Field(ge=1, description="Number of contributions to fetch")
    ] = None,
    offset: Annotated[
        int | None, Field(ge=0, description="Offset for pagination")
    ] = None,
) -> str:
    """Get all your contributions from your GitHub Stars profile.

    Without ``first`` or ``offset`` every contribution is returned.
    """
    return await _list_contributions_impl(ctx, first, offset)
