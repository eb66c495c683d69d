"""Projects - GitHub Projects (ProjectsV2) lookups and mutations."""

from add_to_project.projects.client import STATUS_FIELD_NAME, ProjectsClient
from add_to_project.projects.exceptions import (
    GraphQLError,
    InvalidProjectUrlError,
    InvalidStatusOptionError,
    ProjectNotFoundError,
    ProjectsError,
    StatusFieldNotFoundError,
    UnsupportedOwnerTypeError,
)
from add_to_project.projects.models import FieldOption, OwnerType, ProjectRef, StatusField
from add_to_project.projects.url import owner_type_from_token, parse_project_url

__all__ = [
    "STATUS_FIELD_NAME",
    "FieldOption",
    "GraphQLError",
    "InvalidProjectUrlError",
    "InvalidStatusOptionError",
    "OwnerType",
    "ProjectNotFoundError",
    "ProjectRef",
    "ProjectsClient",
    "ProjectsError",
    "StatusField",
    "StatusFieldNotFoundError",
    "UnsupportedOwnerTypeError",
    "owner_type_from_token",
    "parse_project_url",
]
