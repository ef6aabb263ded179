"""GitHub Stars Contributions MCP Server.

A Model Context Protocol (MCP) server for managing GitHub Stars contributions,
profile links, and public profiles through the GitHub Stars GraphQL API.
"""

__version__ = "0.1.0"
__author__ = "GitHub Stars Contributions MCP Team"

__all__ = [
    "__version__",
    "__author__",
]
