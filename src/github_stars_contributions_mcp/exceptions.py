"""Custom exception classes for GitHub Stars Contributions MCP Server."""

from typing import Any


class StarsMCPError(Exception):
    """Base exception class for GitHub Stars Contributions MCP Server."""

    def __init__(
        self,
        message: str,
        error_code: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(message)
        self.message = message
        self.error_code = error_code
        self.details = details or {}

    def __str__(self) -> str:
        if self.error_code:
            return f"[{self.error_code}] {self.message}"
        return self.message


class StarsAPIError(StarsMCPError):
    """Base exception class for GitHub Stars API related errors."""

    def __init__(
        self,
        message: str,
        error_code: str | None = None,
        details: dict[str, Any] | None = None,
        status_code: int | None = None,
        response_data: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(message, error_code, details)
        self.status_code = status_code
        self.response_data = response_data or {}


class TransportError(StarsAPIError):
    """Exception raised when the HTTP round trip itself fails.

    Covers connection failures, timeouts, non-JSON bodies and HTTP error
    statuses that do not carry a GraphQL error list.
    """

    def __init__(self, message: str = "Request to GitHub Stars API failed", **kwargs) -> None:
        super().__init__(message, error_code="TRANSPORT_ERROR", **kwargs)


class RemoteGraphQLError(StarsAPIError):
    """Exception raised when the GraphQL response carries an ``errors`` list."""

    def __init__(
        self,
        message: str,
        errors: list[dict[str, Any]] | None = None,
        **kwargs,
    ) -> None:
        super().__init__(message, error_code="GRAPHQL_ERROR", **kwargs)
        self.errors = errors or []


class ValidationError(StarsMCPError, ValueError):
    """Exception raised when tool input fails validation.

    Subclasses ``ValueError`` so pydantic reports it as a field error when it
    is raised from an input validator.
    """

    def __init__(
        self, message: str, field_errors: dict[str, str] | None = None, **kwargs
    ) -> None:
        super().__init__(message, error_code="VALIDATION_ERROR", **kwargs)
        self.field_errors = field_errors or {}


class ConfigurationError(StarsMCPError):
    """Exception raised when there are configuration issues."""

    def __init__(self, message: str = "Configuration error", **kwargs) -> None:
        super().__init__(message, error_code="CONFIGURATION_ERROR", **kwargs)
