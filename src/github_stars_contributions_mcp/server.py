"""MCP server main entry point."""

import sys

import structlog

from .config import load_settings
from .exceptions import ConfigurationError
from .shared import configure_logging, initialize_stars_client, mcp

# Import tools and resources to register them
from . import resources, tools  # noqa: F401

# Get structured logger
logger = structlog.get_logger(__name__)


def main() -> None:
    """Main entry point for the MCP server.

    The token is read once here; without it the process exits with status 1
    before any tool can be called.
    """
    try:
        settings = load_settings()
    except ConfigurationError as e:
        print(f"Error: {e.message}", file=sys.stderr)
        sys.exit(1)

    configure_logging(settings.log_level, settings.log_file)
    initialize_stars_client(settings)

    try:
        logger.info(
            "Starting GitHub Stars Contributions MCP Server",
            log_level=settings.log_level,
            api_url=settings.stars_api_url,
        )

        # Run the MCP server over stdio until the transport closes
        mcp.run()

    except KeyboardInterrupt:
        logger.info("Server stopped by user")
    except Exception as e:
        logger.error("Server failed", error=str(e), error_type=type(e).__name__)
        sys.exit(1)


if __name__ == "__main__":
    main()
