"""MCP tools implementation package.

This package contains all MCP tool implementations for the GitHub Stars
Contributions MCP Server: contribution management, profile links and
profile queries.
"""

# Import all MCP tools to register them
from . import contributions, links, profiles

__all__ = ["contributions", "links", "profiles"]
