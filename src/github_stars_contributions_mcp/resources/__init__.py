"""MCP resources implementation package.

This package contains all MCP resource implementations for the GitHub Stars
Contributions MCP Server.
"""

# Import all MCP resources to register them
from . import user_info

__all__ = ["user_info"]
