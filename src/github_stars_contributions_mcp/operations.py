"""GraphQL operations exposed as MCP tools.

Every tool maps to exactly one entry of ``OPERATIONS``: a fixed GraphQL
document, the variables that are sent as explicit ``null`` when absent, the
response field to relay and, for deletions, a confirmation template.
User input only ever reaches the documents through variables.
"""

import json
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, get_args, get_origin

from pydantic import BaseModel

from .exceptions import StarsAPIError
from .models import Contribution, Link, LoggedUser, PublicProfile, StarPublicData


def _nested_model(annotation: Any) -> type[BaseModel] | None:
    """Find the pydantic model inside an annotation such as ``list[Link]``."""
    if (
        get_origin(annotation) is None
        and isinstance(annotation, type)
        and issubclass(annotation, BaseModel)
    ):
        return annotation
    for arg in get_args(annotation):
        model = _nested_model(arg)
        if model is not None:
            return model
    return None


def selection_set(model: type[BaseModel]) -> str:
    """Build a GraphQL selection set from a model's remote field names.

    >>> selection_set(Link)
    '{ id link platform }'
    """
    parts = []
    for name, info in model.model_fields.items():
        remote_name = info.alias or name
        nested = _nested_model(info.annotation)
        if nested is None:
            parts.append(remote_name)
        else:
            parts.append(f"{remote_name} {selection_set(nested)}")
    return "{ " + " ".join(parts) + " }"


CONTRIBUTION_FIELDS = selection_set(Contribution)
LINK_FIELDS = selection_set(Link)


@dataclass(frozen=True)
class Operation:
    """A tool's GraphQL document and how its variables and result are shaped."""

    name: str
    document: str
    result_field: str
    nullable: frozenset[str] = field(default_factory=frozenset)
    confirmation: str | None = None


ADD_CONTRIBUTION = Operation(
    name="add_contribution",
    document=f"""
mutation AddContribution(
  $type: ContributionType!
  $date: GraphQLDateTime!
  $title: String!
  $url: URL
  $description: String!
) {{
  createContribution(
    data: {{ date: $date, url: $url, type: $type, title: $title, description: $description }}
  ) {CONTRIBUTION_FIELDS}
}}
""",
    result_field="createContribution",
    nullable=frozenset({"url"}),
)

REMOVE_CONTRIBUTION = Operation(
    name="remove_contribution",
    document="""
mutation DeleteContribution($id: String!) {
  deleteContribution(id: $id) { id }
}
""",
    result_field="deleteContribution",
    confirmation="Successfully deleted contribution with ID: {id}",
)

UPDATE_CONTRIBUTION = Operation(
    name="update_contribution",
    document=f"""
mutation UpdateContribution(
  $id: String!
  $type: ContributionType
  $date: GraphQLDateTime
  $title: String
  $url: URL
  $description: String
) {{
  updateContribution(
    id: $id
    data: {{ date: $date, url: $url, type: $type, title: $title, description: $description }}
  ) {CONTRIBUTION_FIELDS}
}}
""",
    result_field="updateContribution",
    nullable=frozenset({"type", "title", "description", "url", "date"}),
)

LIST_CONTRIBUTIONS = Operation(
    name="list_contributions",
    document=f"""
query AllContributions($pagination: ContributionOffsetPaginationInput) {{
  allContributions(pagination: $pagination) {CONTRIBUTION_FIELDS}
}}
""",
    result_field="allContributions",
    nullable=frozenset({"pagination"}),
)

ADD_LINK = Operation(
    name="add_link",
    document=f"""
mutation CreateLink($link: URL, $platform: PlatformType) {{
  createLink(data: {{ link: $link, platform: $platform }}) {LINK_FIELDS}
}}
""",
    result_field="createLink",
)

REMOVE_LINK = Operation(
    name="remove_link",
    document="""
mutation DeleteLink($id: String!) {
  deleteLink(id: $id) { id }
}
""",
    result_field="deleteLink",
    confirmation="Successfully deleted link with ID: {id}",
)

LIST_LINKS = Operation(
    name="list_links",
    document=f"""
query Links {{
  links {LINK_FIELDS}
}}
""",
    result_field="links",
)

GET_PUBLIC_PROFILE = Operation(
    name="get_public_profile",
    document=f"""
query PublicProfile($username: String!) {{
  publicProfile(username: $username) {selection_set(PublicProfile)}
}}
""",
    result_field="publicProfile",
)

SEARCH_STARS = Operation(
    name="search_stars",
    document=f"""
query StarsPublicData($featured: Boolean) {{
  starsPublicData(featured: $featured) {selection_set(StarPublicData)}
}}
""",
    result_field="starsPublicData",
    nullable=frozenset({"featured"}),
)

GET_LOGGED_USER = Operation(
    name="get_logged_user",
    document=f"""
query LoggedUser {{
  loggedUser {selection_set(LoggedUser)}
}}
""",
    result_field="loggedUser",
)

OPERATIONS: dict[str, Operation] = {
    operation.name: operation
    for operation in (
        ADD_CONTRIBUTION,
        REMOVE_CONTRIBUTION,
        UPDATE_CONTRIBUTION,
        LIST_CONTRIBUTIONS,
        ADD_LINK,
        REMOVE_LINK,
        LIST_LINKS,
        GET_PUBLIC_PROFILE,
        SEARCH_STARS,
        GET_LOGGED_USER,
    )
}


def build_variables(operation: Operation, values: dict[str, Any]) -> dict[str, Any]:
    """Build the GraphQL variables for an operation from validated input.

    Absent (``None``) values are sent as explicit ``null`` when the operation
    lists them in ``nullable`` and left out otherwise. Enum members are sent
    by value.
    """
    variables: dict[str, Any] = {}
    for key, value in values.items():
        if value is None:
            if key in operation.nullable:
                variables[key] = None
            continue
        variables[key] = value.value if isinstance(value, Enum) else value
    return variables


def build_pagination(first: int | None, offset: int | None) -> dict[str, int] | None:
    """Pagination input for ``allContributions``.

    ``None`` (fetch everything) when neither bound is given; otherwise only
    the given keys, leaving the other to the remote default.
    """
    if first is None and offset is None:
        return None
    pagination = {}
    if first is not None:
        pagination["first"] = first
    if offset is not None:
        pagination["offset"] = offset
    return pagination


def format_result(operation: Operation, data: dict[str, Any]) -> str:
    """Render the relevant field of a GraphQL response as tool output."""
    if operation.result_field not in data:
        raise StarsAPIError(
            f"Response for {operation.name} is missing '{operation.result_field}'",
            response_data=data,
        )

    payload = data[operation.result_field]

    if operation.confirmation is not None:
        if not payload or "id" not in payload:
            raise StarsAPIError(
                f"{operation.result_field} returned no deleted record",
                response_data=data,
            )
        return operation.confirmation.format(id=payload["id"])

    return json.dumps(payload, indent=2, ensure_ascii=False)
