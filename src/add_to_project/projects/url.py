"""Project URL parsing."""

from __future__ import annotations

import re

from add_to_project.projects.exceptions import (
    InvalidProjectUrlError,
    UnsupportedOwnerTypeError,
)
from add_to_project.projects.models import OwnerType, ProjectRef

# https://github.com/orgs|users/<ownerName>/projects/<projectNumber>
PROJECT_URL_PATTERN = re.compile(
    r"^(?:https://)?github\.com/(?P<owner_type>orgs|users)/(?P<owner_name>[^/]+)"
    r"/projects/(?P<number>\d+)",
    re.ASCII,
)

EXPECTED_FORMAT = "https://github.com/<orgs-or-users>/<ownerName>/projects/<projectNumber>"

OWNER_TYPE_TOKENS = {
    "orgs": OwnerType.ORGANIZATION,
    "users": OwnerType.USER,
}


def owner_type_from_token(token: str | None) -> OwnerType:
    """Map the URL's owner segment to the query root.

    Raises:
        UnsupportedOwnerTypeError: If the token is not `orgs` or `users`.
    """
    owner_type = OWNER_TYPE_TOKENS.get(token or "")
    if owner_type is None:
        raise UnsupportedOwnerTypeError(
            f"Unsupported ownerType: {token}. Must be one of 'orgs' or 'users'"
        )
    return owner_type


def parse_project_url(url: str) -> ProjectRef:
    """Parse a project board URL.

    Matching is anchored at the start and case-sensitive; anything after the
    project number (e.g. `/views/1`) is ignored.

    Args:
        url: Project URL, with or without the https:// scheme.

    Returns:
        ProjectRef with owner type, owner name and project number.

    Raises:
        InvalidProjectUrlError: If the URL doesn't match the expected format.
    """
    match = PROJECT_URL_PATTERN.match(url)
    if not match:
        raise InvalidProjectUrlError(
            f"Invalid project URL: {url}. Project URL should match the format {EXPECTED_FORMAT}"
        )

    return ProjectRef(
        owner_type=owner_type_from_token(match.group("owner_type")),
        owner_name=match.group("owner_name"),
        number=int(match.group("number")),
    )
