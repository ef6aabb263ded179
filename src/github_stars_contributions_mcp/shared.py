"""Shared instances and resources for GitHub Stars Contributions MCP Server."""

import logging
import sys
from typing import Optional

import structlog
from fastmcp import FastMCP

from . import __version__
from .config import Settings
from .utils.stars_client import StarsClient

SERVER_NAME = "github-stars-contributions-mcp"
SERVER_INSTRUCTIONS = (
    "Use this server to manage GitHub Stars contributions, profile links, "
    "and query public profiles."
)

_LOG_HANDLER_NAME = "github_stars_contributions_mcp"


def configure_logging(log_level: str = "INFO", log_file: Optional[str] = None) -> None:
    """Configure structlog on top of the standard logging module.

    Logs go to ``log_file`` when given and to stderr otherwise; stdout is
    reserved for the MCP stdio transport.
    """
    root_logger = logging.getLogger()

    # Only configure once
    if any(handler.get_name() == _LOG_HANDLER_NAME for handler in root_logger.handlers):
        return

    if log_file:
        handler: logging.Handler = logging.FileHandler(log_file, mode="a", encoding="utf-8")
    else:
        handler = logging.StreamHandler(sys.stderr)
    handler.set_name(_LOG_HANDLER_NAME)
    handler.setFormatter(
        logging.Formatter("[%(asctime)s] %(name)s - %(levelname)s - %(message)s")
    )

    root_logger.addHandler(handler)
    root_logger.setLevel(getattr(logging, log_level.upper()))

    structlog.configure(
        processors=[
            structlog.stdlib.filter_by_level,
            structlog.stdlib.add_logger_name,
            structlog.stdlib.add_log_level,
            structlog.stdlib.PositionalArgumentsFormatter(),
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
            structlog.processors.UnicodeDecoder(),
            structlog.processors.KeyValueRenderer(
                key_order=["timestamp", "level", "event", "logger"]
            ),
        ],
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )

    # Silence noisy loggers
    for logger_name in ("fastmcp.transport", "fastmcp.protocol", "httpx", "httpcore"):
        logging.getLogger(logger_name).setLevel(logging.WARNING)

    logging.getLogger("github_stars_contributions_mcp").info(
        "Logging configured", extra={"log_file": log_file or "<stderr>"}
    )


# FastMCP server instance
mcp = FastMCP(SERVER_NAME, instructions=SERVER_INSTRUCTIONS, version=__version__)

# GitHub Stars client instance, set once at startup
stars_client: Optional[StarsClient] = None


def initialize_stars_client(settings: Settings) -> StarsClient:
    """Initialize the GitHub Stars client from startup settings."""
    global stars_client

    logger = structlog.get_logger(__name__)
    stars_client = StarsClient(
        settings.github_stars_token,
        api_url=settings.stars_api_url,
        timeout=settings.request_timeout,
    )
    logger.info("GitHub Stars client initialized", api_url=settings.stars_api_url)
    return stars_client
