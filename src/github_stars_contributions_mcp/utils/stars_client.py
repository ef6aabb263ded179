"""GitHub Stars API client module."""

from typing import Any, Dict, Optional

import httpx
import structlog

from .. import __version__
from ..common.logging_helpers import log_api_request
from ..config import DEFAULT_API_URL
from ..exceptions import ConfigurationError, RemoteGraphQLError, TransportError

# Configure structured logging
logger = structlog.get_logger(__name__)


def _operation_label(query: str) -> str:
    """Short label for a GraphQL document, e.g. ``mutation AddContribution``."""
    tokens = query.replace("(", " ").replace("{", " ").split()
    return " ".join(tokens[:2]) if tokens else "unknown"


class StarsClient:
    """Async GitHub Stars GraphQL client.

    Each call to :meth:`execute` is exactly one HTTP round trip: no retries,
    no caching. The token is fixed at construction time.
    """

    def __init__(
        self,
        token: str,
        api_url: str = DEFAULT_API_URL,
        timeout: float = 30.0,
    ):
        """Initialize GitHub Stars client.

        Args:
            token: GitHub Stars API token
            api_url: GraphQL endpoint URL
            timeout: Request timeout in seconds
        """
        if not token:
            raise ConfigurationError("GitHub Stars token is required")

        self.token = token
        self.base_url = api_url
        self.timeout = timeout
        self.headers = {
            "Authorization": f"Bearer {self.token}",
            "Content-Type": "application/json",
            "User-Agent": f"github-stars-contributions-mcp/{__version__}",
        }

    async def execute(
        self, query: str, variables: Optional[Dict[str, Any]] = None
    ) -> Dict[str, Any]:
        """Execute a GraphQL document against the GitHub Stars API.

        Args:
            query: GraphQL query or mutation document
            variables: Optional variables mapping

        Returns:
            The ``data`` object of the GraphQL response

        Raises:
            RemoteGraphQLError: If the response carries GraphQL errors
            TransportError: If the request fails or the body is not JSON
        """
        payload = {"query": query, "variables": variables or {}}
        operation = _operation_label(query)

        log_api_request(self.base_url, "POST", operation=operation)

        async with httpx.AsyncClient(timeout=self.timeout) as client:
            try:
                response = await client.post(
                    self.base_url,
                    headers=self.headers,
                    json=payload,
                )
            except httpx.TimeoutException as e:
                logger.error("Request timeout", operation=operation, error=str(e))
                raise TransportError(f"Request timeout: {str(e)}") from e
            except httpx.RequestError as e:
                logger.error("Request error", operation=operation, error=str(e))
                raise TransportError(f"Request failed: {str(e)}") from e

        try:
            data = response.json()
        except ValueError as e:
            logger.error(
                "Invalid JSON response",
                operation=operation,
                status_code=response.status_code,
            )
            raise TransportError(
                f"Invalid JSON response (HTTP {response.status_code})",
                status_code=response.status_code,
            ) from e

        if not isinstance(data, dict):
            raise TransportError(
                f"Unexpected response body (HTTP {response.status_code})",
                status_code=response.status_code,
            )

        # Handle GraphQL errors
        errors = data.get("errors")
        if errors:
            logger.error("GraphQL errors", operation=operation, errors=errors)
            error_messages = [
                error.get("message", "Unknown error") if isinstance(error, dict) else str(error)
                for error in errors
            ]
            raise RemoteGraphQLError(
                ", ".join(error_messages),
                errors=errors,
                status_code=response.status_code,
                response_data=data,
            )

        if response.status_code >= 400:
            logger.error(
                "HTTP error",
                operation=operation,
                status_code=response.status_code,
                response_text=response.text,
            )
            raise TransportError(
                f"HTTP {response.status_code}: {response.text}",
                status_code=response.status_code,
                response_data=data,
            )

        logger.info("GraphQL request successful", operation=operation)
        return data.get("data") or {}
