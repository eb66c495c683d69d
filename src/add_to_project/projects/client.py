"""ProjectsClient - GitHub Projects (ProjectsV2) GraphQL operations."""

from __future__ import annotations

from types import TracebackType
from typing import Any

import httpx

from add_to_project.config import DEFAULT_GRAPHQL_URL
from add_to_project.logging import get_logger, sanitize_for_log, truncate_output
from add_to_project.projects.exceptions import (
    GraphQLError,
    ProjectNotFoundError,
    StatusFieldNotFoundError,
)
from add_to_project.projects.models import FieldOption, ProjectRef, StatusField

logger = get_logger("projects")

STATUS_FIELD_NAME = "Status"


class ProjectsClient:
    """Client for the project board operations used by the action.

    Uses GitHub GraphQL API. One client is created per run and reused for
    every request.
    """

    def __init__(self, token: str, base_url: str = DEFAULT_GRAPHQL_URL) -> None:
        """Initialize the client.

        Args:
            token: GitHub token with project scope
            base_url: GitHub GraphQL API URL (for testing/enterprise)
        """
        self.token = token
        self.base_url = base_url
        self._client: httpx.Client | None = None

    @property
    def client(self) -> httpx.Client:
        """Get or create HTTP client for GraphQL API."""
        if self._client is None:
            self._client = httpx.Client(
                headers={
                    "Authorization": f"Bearer {self.token}",
                    "Content-Type": "application/json",
                },
                timeout=30.0,
            )
        return self._client

    def close(self) -> None:
        """Close the HTTP client."""
        if self._client is not None:
            self._client.close()
            self._client = None

    def __enter__(self) -> ProjectsClient:
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        self.close()

    def _graphql(self, query: str, variables: dict[str, Any] | None = None) -> dict[str, Any]:
        """Execute a GraphQL query.

        Args:
            query: GraphQL query string
            variables: Query variables

        Returns:
            Response data

        Raises:
            GraphQLError: If query fails
        """
        payload: dict[str, Any] = {"query": query}
        if variables:
            payload["variables"] = variables

        response = self.client.post(self.base_url, json=payload)

        if response.status_code != 200:
            body = sanitize_for_log(truncate_output(response.text))
            raise GraphQLError(f"GraphQL request failed: {response.status_code} - {body}")

        try:
            data = response.json()
        except ValueError as e:
            body = sanitize_for_log(truncate_output(response.text))
            raise GraphQLError(f"GraphQL response is not JSON: {body}") from e

        if not isinstance(data, dict):
            raise GraphQLError(f"GraphQL response is not an object: {truncate_output(str(data))}")
        if data.get("errors"):
            raise GraphQLError(f"GraphQL errors: {sanitize_for_log(str(data['errors']))}")

        return dict(data.get("data") or {})

    def get_project_id(self, project: ProjectRef) -> str:
        """Get the node ID of a project.

        Args:
            project: Project parsed from its URL

        Returns:
            Project node ID

        Raises:
            ProjectNotFoundError: If the response has no project ID
        """
        root = project.owner_type.value
        query = f"""
        query getProject($projectOwnerName: String!, $projectNumber: Int!) {{
            {root}(login: $projectOwnerName) {{
                projectV2(number: $projectNumber) {{
                    id
                }}
            }}
        }}
        """

        data = self._graphql(
            query,
            {"projectOwnerName": project.owner_name, "projectNumber": project.number},
        )

        project_v2 = (data.get(root) or {}).get("projectV2") or {}
        project_id = project_v2.get("id")
        if not project_id:
            raise ProjectNotFoundError(
                f"Project ID is undefined for {root} {project.owner_name} "
                f"project #{project.number}: {project_v2 or None}"
            )

        logger.debug("Project node ID: %s", project_id)
        return str(project_id)

    def add_item_by_id(self, project_id: str, content_id: str) -> str:
        """Add an existing issue or pull request to a project.

        Args:
            project_id: Project node ID
            content_id: Node ID of the issue or pull request

        Returns:
            Project item ID
        """
        mutation = """
        mutation addIssueToProject($input: AddProjectV2ItemByIdInput!) {
            addProjectV2ItemById(input: $input) {
                item {
                    id
                }
            }
        }
        """

        data = self._graphql(
            mutation,
            {"input": {"projectId": project_id, "contentId": content_id}},
        )
        return _mutation_id(data, "addProjectV2ItemById", "item")

    def add_draft_issue(self, project_id: str, title: str) -> str:
        """Add a draft issue to a project.

        Args:
            project_id: Project node ID
            title: Draft issue title

        Returns:
            Project item ID
        """
        mutation = """
        mutation addDraftIssueToProject($projectId: ID!, $title: String!) {
            addProjectV2DraftIssue(input: { projectId: $projectId, title: $title }) {
                projectItem {
                    id
                }
            }
        }
        """

        data = self._graphql(mutation, {"projectId": project_id, "title": title})
        return _mutation_id(data, "addProjectV2DraftIssue", "projectItem")

    def get_status_field(self, project: ProjectRef) -> StatusField:
        """Get the project's "Status" field and its single-select options.

        Args:
            project: Project parsed from its URL

        Returns:
            StatusField; options are empty if the field isn't single-select

        Raises:
            StatusFieldNotFoundError: If the project has no "Status" field
        """
        root = project.owner_type.value
        query = f"""
        query getStatusFieldId($projectOwnerName: String!, $projectNumber: Int!) {{
            {root}(login: $projectOwnerName) {{
                projectV2(number: $projectNumber) {{
                    field(name: "{STATUS_FIELD_NAME}") {{
                        ... on ProjectV2FieldCommon {{
                            id
                        }}
                        ... on ProjectV2SingleSelectField {{
                            options {{
                                id
                                name
                            }}
                        }}
                    }}
                }}
            }}
        }}
        """

        data = self._graphql(
            query,
            {"projectOwnerName": project.owner_name, "projectNumber": project.number},
        )

        project_v2 = (data.get(root) or {}).get("projectV2") or {}
        field = project_v2.get("field")
        if not field or not field.get("id"):
            raise StatusFieldNotFoundError(
                f'Field "{STATUS_FIELD_NAME}" not found in project #{project.number}'
            )

        options = tuple(
            FieldOption(id=opt["id"], name=opt["name"]) for opt in field.get("options") or []
        )
        logger.debug('"%s" Field ID: %s', STATUS_FIELD_NAME, field["id"])
        return StatusField(id=field["id"], options=options)

    def update_single_select_value(
        self,
        project_id: str,
        item_id: str,
        field_id: str,
        option_id: str,
    ) -> str:
        """Set a single-select field on a project item.

        Args:
            project_id: Project node ID
            item_id: Project item ID
            field_id: Single-select field ID
            option_id: Option to select

        Returns:
            Item's updatedAt timestamp
        """
        mutation = """
        mutation updateStatusFieldValue(
            $projectId: ID!, $itemId: ID!, $fieldId: ID!, $fieldOptionId: String!
        ) {
            updateProjectV2ItemFieldValue(
                input: {
                    projectId: $projectId
                    itemId: $itemId
                    fieldId: $fieldId
                    value: { singleSelectOptionId: $fieldOptionId }
                }
            ) {
                projectV2Item {
                    updatedAt
                }
            }
        }
        """

        data = self._graphql(
            mutation,
            {
                "projectId": project_id,
                "itemId": item_id,
                "fieldId": field_id,
                "fieldOptionId": option_id,
            },
        )
        return _mutation_id(data, "updateProjectV2ItemFieldValue", "projectV2Item", "updatedAt")


def _mutation_id(data: dict[str, Any], mutation: str, node: str, key: str = "id") -> str:
    """Read `data.<mutation>.<node>.<key>` from a mutation response.

    Raises:
        GraphQLError: If the response doesn't have that shape
    """
    result = data.get(mutation)
    value = result.get(node) if isinstance(result, dict) else None
    if not isinstance(value, dict) or not value.get(key):
        raise GraphQLError(f"Unexpected {mutation} response: {truncate_output(str(data))}")
    return str(value[key])
