"""Tests for input validators."""

import pytest

from github_stars_contributions_mcp.common.validators import (
    normalize_date,
    validate_absolute_url,
    validate_non_blank,
)
from github_stars_contributions_mcp.exceptions import ValidationError


class TestNormalizeDate:
    """Test cases for date normalization."""

    @pytest.mark.parametrize(
        "value, expected",
        [
            ("2024-01-15", "2024-01-15T00:00:00.000Z"),
            ("2024-01-15T10:30:00Z", "2024-01-15T10:30:00.000Z"),
            ("2024-01-15T10:30:00.123456Z", "2024-01-15T10:30:00.123Z"),
            ("2024-01-15T10:30:00+02:00", "2024-01-15T08:30:00.000Z"),
            ("2024-01-15T10:30:00", "2024-01-15T10:30:00.000Z"),
            ("  2024-01-15  ", "2024-01-15T00:00:00.000Z"),
        ],
    )
    def test_normalize_valid_dates(self, value, expected):
        """Test that plain dates and timestamps become UTC timestamps."""
        assert normalize_date(value) == expected

    def test_normalize_is_idempotent(self):
        """Test that a normalized value normalizes to itself."""
        normalized = normalize_date("2024-06-01T12:00:00-05:00")
        assert normalize_date(normalized) == normalized

    @pytest.mark.parametrize("value", ["", "   ", "yesterday", "2024-13-01", "15/01/2024"])
    def test_normalize_invalid_dates(self, value):
        """Test that unparseable dates fail validation."""
        with pytest.raises(ValidationError):
            normalize_date(value)

    @pytest.mark.parametrize(
        "value", ["9999-12-31T23:00:00-05:00", "0001-01-01T00:30:00+01:00"]
    )
    def test_normalize_out_of_range_dates(self, value):
        """Test that dates outside the UTC range fail validation."""
        with pytest.raises(ValidationError, match="Invalid date"):
            normalize_date(value)


class TestValidateAbsoluteUrl:
    """Test cases for URL validation."""

    @pytest.mark.parametrize(
        "value",
        [
            "https://example.com",
            "https://dev.to/octocat/my-post?ref=stars",
            "http://localhost:8080/path",
        ],
    )
    def test_valid_urls_are_returned_unchanged(self, value):
        """Test that valid URLs pass through exactly as given."""
        assert validate_absolute_url(value) == value

    @pytest.mark.parametrize("value", ["", "not a url", "/relative/path", "example.com"])
    def test_invalid_urls(self, value):
        """Test that relative or malformed URLs are rejected."""
        with pytest.raises(ValidationError, match="Invalid URL"):
            validate_absolute_url(value)

    def test_validation_error_is_value_error(self):
        """Test that validation errors are reported by pydantic as field errors."""
        with pytest.raises(ValueError):
            validate_absolute_url("nope")


class TestValidateNonBlank:
    """Test cases for non-blank strings."""

    def test_keeps_value(self):
        """Test that surrounding whitespace is preserved."""
        assert validate_non_blank(" Title ") == " Title "

    @pytest.mark.parametrize("value", ["", "   ", "\n\t"])
    def test_rejects_blank(self, value):
        """Test that blank strings are rejected."""
        with pytest.raises(ValidationError):
            validate_non_blank(value)
