"""Data models for GitHub Stars Contributions MCP Server.

Record models mirror the remote GraphQL types; their aliases are the remote
field names and drive the selection sets in ``operations``. The annotated
input types at the bottom are used in tool signatures so that invalid input
is rejected before a handler runs.
"""

from enum import Enum
from typing import Annotated

from pydantic import AfterValidator, BaseModel, ConfigDict, Field

from .common.validators import (
    normalize_date,
    validate_absolute_url,
    validate_non_blank,
)


class ContributionType(str, Enum):
    """Kinds of contribution accepted by GitHub Stars."""

    SPEAKING = "SPEAKING"
    BLOGPOST = "BLOGPOST"
    ARTICLE_PUBLICATION = "ARTICLE_PUBLICATION"
    EVENT_ORGANIZATION = "EVENT_ORGANIZATION"
    HACKATHON = "HACKATHON"
    OPEN_SOURCE_PROJECT = "OPEN_SOURCE_PROJECT"
    VIDEO_PODCAST = "VIDEO_PODCAST"
    FORUM = "FORUM"
    OTHER = "OTHER"


class PlatformType(str, Enum):
    """Platforms a profile link can point to."""

    TWITTER = "TWITTER"
    MEDIUM = "MEDIUM"
    LINKEDIN = "LINKEDIN"
    README = "README"
    STACK_OVERFLOW = "STACK_OVERFLOW"
    DEV_TO = "DEV_TO"
    MASTODON = "MASTODON"
    OTHER = "OTHER"


class Contribution(BaseModel):
    """A contribution on a GitHub Stars profile."""

    model_config = ConfigDict(populate_by_name=True)

    contribution_id: str = Field(alias="id", description="Contribution ID")
    title: str = Field(description="Contribution title")
    contribution_type: ContributionType = Field(
        alias="type", description="Contribution type"
    )
    date: str = Field(description="Contribution date as a UTC timestamp")
    url: str | None = Field(default=None, description="Related URL")
    description: str = Field(description="Contribution description")


class Link(BaseModel):
    """A profile link."""

    model_config = ConfigDict(populate_by_name=True)

    link_id: str = Field(alias="id", description="Link ID")
    link: str = Field(description="Link URL")
    platform: PlatformType = Field(description="Platform of the link")


class StarPublicData(BaseModel):
    """Public data of a GitHub Star."""

    model_config = ConfigDict(populate_by_name=True)

    star_id: str = Field(alias="id", description="Star ID")
    username: str = Field(description="GitHub username")
    name: str | None = Field(default=None, description="Display name")
    bio: str | None = Field(default=None, description="Biography")
    avatar: str | None = Field(default=None, description="Avatar URL")
    status: str | None = Field(default=None, description="Star status")
    featured: bool | None = Field(default=None, description="Whether featured")
    country: str | None = Field(default=None, description="Country")


class PublicProfile(StarPublicData):
    """Public profile of a GitHub Star, with contributions and links."""

    contributions: list[Contribution] = Field(
        default=[], description="Contributions of the Star"
    )
    links: list[Link] = Field(default=[], description="Profile links of the Star")


class Nominee(BaseModel):
    """Nomination metadata of the logged-in user."""

    model_config = ConfigDict(populate_by_name=True)

    status: str | None = Field(default=None, description="Nomination status")
    name: str | None = Field(default=None, description="Nominee name")
    bio: str | None = Field(default=None, description="Nominee biography")
    featured: bool | None = Field(default=None, description="Whether featured")
    country: str | None = Field(default=None, description="Country")
    job_title: str | None = Field(
        default=None, alias="jobTitle", description="Job title"
    )
    company: str | None = Field(default=None, description="Company")


class LoggedUser(BaseModel):
    """The user the API token belongs to."""

    model_config = ConfigDict(populate_by_name=True)

    user_id: str = Field(alias="id", description="User ID")
    username: str = Field(description="GitHub username")
    avatar: str | None = Field(default=None, description="Avatar URL")
    email: str | None = Field(default=None, description="Email address")
    nominee: Nominee | None = Field(default=None, description="Nomination record")


# Tool input types
NonBlankStr = Annotated[str, Field(min_length=1), AfterValidator(validate_non_blank)]
AbsoluteUrl = Annotated[str, AfterValidator(validate_absolute_url)]
ContributionDate = Annotated[str, AfterValidator(normalize_date)]
StarUsername = NonBlankStr
