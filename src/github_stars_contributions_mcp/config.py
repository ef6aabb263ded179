"""Configuration management module.

This module handles all configuration settings for the GitHub Stars
Contributions MCP Server: the GitHub Stars API token, the API endpoint,
request timeout and logging options.
"""

from pydantic import Field, ValidationError, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from .exceptions import ConfigurationError

DEFAULT_API_URL = "https://api-stars.github.com/"
TOKEN_ENV_VAR = "GITHUB_STARS_TOKEN"


class Settings(BaseSettings):
    """Application settings configuration.

    Settings can be loaded from environment variables or a .env file.

    Attributes:
        github_stars_token: GitHub Stars API token used as bearer credential
        stars_api_url: GitHub Stars GraphQL endpoint
        request_timeout: HTTP request timeout in seconds
        log_level: Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        log_file: Optional log file path; logs go to stderr when unset
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    github_stars_token: str = Field(min_length=1)
    stars_api_url: str = DEFAULT_API_URL
    request_timeout: float = Field(default=30.0, gt=0)
    log_level: str = "INFO"
    log_file: str | None = None

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Validate and normalize log level."""
        valid_levels = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}
        normalized = v.upper()
        if normalized not in valid_levels:
            raise ValueError(f"Invalid log level: {v}. Must be one of {valid_levels}")
        return normalized


def load_settings(**overrides) -> Settings:
    """Load settings once at startup.

    Raises:
        ConfigurationError: If the token is missing or any setting is invalid
    """
    try:
        return Settings(**overrides)
    except ValidationError as e:
        errors = e.errors()
        if any(error["loc"] and error["loc"][0] == "github_stars_token" for error in errors):
            message = f"{TOKEN_ENV_VAR} environment variable is required"
        else:
            message = "Invalid configuration: " + "; ".join(
                f"{'.'.join(str(part) for part in error['loc'])}: {error['msg']}"
                for error in errors
            )
        raise ConfigurationError(message, details={"errors": errors}) from e
