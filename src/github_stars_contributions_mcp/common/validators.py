"""Common validation utilities.

These validators run at the tool boundary (as pydantic ``AfterValidator``
hooks) so invalid input is rejected before any request is sent.
"""

from datetime import datetime, timezone

from pydantic import AnyUrl, TypeAdapter
from pydantic import ValidationError as PydanticValidationError

from ..exceptions import ValidationError

_url_adapter = TypeAdapter(AnyUrl)


def validate_non_blank(value: str) -> str:
    """Reject strings that are empty or only whitespace.

    The original value is returned unchanged.
    """
    if not value or not value.strip():
        raise ValidationError("Value cannot be empty or whitespace")
    return value


def validate_absolute_url(value: str) -> str:
    """Validate that a value is a well-formed absolute URL.

    Args:
        value: URL text to validate

    Returns:
        The URL exactly as given

    Raises:
        ValidationError: If the URL is relative or malformed
    """
    try:
        _url_adapter.validate_python(value)
    except PydanticValidationError as e:
        reason = e.errors()[0]["msg"] if e.errors() else "invalid URL"
        raise ValidationError(f"Invalid URL '{value}': {reason}") from None
    return value


def normalize_date(value: str) -> str:
    """Normalize a date or timestamp to a UTC timestamp string.

    Accepts ``YYYY-MM-DD`` or any ISO 8601 timestamp. Naive values are read
    as UTC. The result always looks like ``2024-01-15T00:00:00.000Z``.

    Raises:
        ValidationError: If the value cannot be parsed
    """
    text = value.strip()
    if not text:
        raise ValidationError("Date cannot be empty")

    try:
        parsed = datetime.fromisoformat(text)
        if parsed.tzinfo is None:
            parsed = parsed.replace(tzinfo=timezone.utc)
        # Offsets near year 1 or 9999 can push the UTC value out of range
        parsed = parsed.astimezone(timezone.utc)
    except (ValueError, OverflowError):
        raise ValidationError(
            f"Invalid date '{value}': expected YYYY-MM-DD or an ISO 8601 timestamp"
        ) from None

    return parsed.isoformat(timespec="milliseconds").replace("+00:00", "Z")
