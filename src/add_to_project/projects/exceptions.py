"""Custom exceptions for project board operations."""


class ProjectsError(Exception):
    """Base exception for project board errors."""


class InvalidProjectUrlError(ProjectsError):
    """Project URL doesn't match the expected format."""


class UnsupportedOwnerTypeError(ProjectsError):
    """Project URL names an owner type other than orgs or users."""


class ProjectNotFoundError(ProjectsError):
    """GitHub Project ID could not be resolved."""


class StatusFieldNotFoundError(ProjectsError):
    """Project has no "Status" field."""


class InvalidStatusOptionError(ProjectsError):
    """Status override doesn't name an option of the "Status" field."""


class GraphQLError(ProjectsError):
    """GraphQL request failed or returned errors."""
