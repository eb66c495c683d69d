"""Runner - adds the triggering issue or pull request to a project."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Callable

from add_to_project.event import EventError, TriggerEvent
from add_to_project.labels import matches_label_filter, skip_reason
from add_to_project.logging import get_logger
from add_to_project.outputs import set_output
from add_to_project.projects import (
    STATUS_FIELD_NAME,
    InvalidStatusOptionError,
    ProjectRef,
    parse_project_url,
)

if TYPE_CHECKING:
    from add_to_project.config import ActionConfig
    from add_to_project.projects import ProjectsClient

logger = get_logger("runner")

ITEM_ID_OUTPUT = "itemId"


@dataclass(frozen=True)
class AddResult:
    """Outcome of adding an item to the project.

    Attributes:
        item_id: ID of the project item, published as the `itemId` output.
        project_id: Node ID of the project.
        draft: Whether a draft issue was created instead of linking the item.
    """

    item_id: str
    project_id: str
    draft: bool = False


class ProjectItemRunner:
    """Runs the add-to-project flow for one trigger event.

    Steps run strictly in order, each request finishing before the next:
    label filter, project lookup, item creation, then the optional status
    override. Nothing is rolled back; if the status override fails the item
    stays on the board and the error propagates.
    """

    def __init__(
        self,
        config: ActionConfig,
        client: ProjectsClient,
        output: Callable[[str, str], None] = set_output,
    ) -> None:
        """Initialize the runner.

        Args:
            config: Inputs for this run.
            client: Client used for every request of the run.
            output: Publishes a step output. Defaults to GITHUB_OUTPUT.
        """
        self.config = config
        self.client = client
        self.output = output

    def run(self, event: TriggerEvent) -> AddResult | None:
        """Add the event's issue or pull request to the project.

        Args:
            event: The triggering issue or pull request.

        Returns:
            AddResult, or None if the label filter skipped the event.

        Raises:
            EventError: If the event passes the label filter but has no
                issue or pull request to add.
            ProjectsError: If the URL is invalid, the project can't be
                resolved, or the status override is invalid.
        """
        logger.debug("Issue/PR owner: %s", event.owner_login)

        if not matches_label_filter(
            self.config.labeled, self.config.label_operator, event.labels
        ):
            logger.info(
                skip_reason(event.number, self.config.labeled, self.config.label_operator)
            )
            return None

        if not event.has_item:
            raise EventError("Event payload has neither an issue nor a pull request")

        logger.debug("Project URL: %s", self.config.project_url)
        project = parse_project_url(self.config.project_url)
        logger.debug("Project owner: %s", project.owner_name)
        logger.debug("Project number: %s", project.number)
        logger.debug("Project owner type: %s", project.owner_type.value)

        # Resolved before any mutation is sent
        project_id = self.client.get_project_id(project)
        logger.debug("Content ID: %s", event.node_id)

        result = self._add_item(project, project_id, event)
        # Output is set even if the status override below fails
        self.output(ITEM_ID_OUTPUT, result.item_id)

        if self.config.status_override:
            self.update_status(project, project_id, result.item_id, self.config.status_override)
        else:
            logger.info("Skipping status field update because no status-override input specified.")

        return result

    def _add_item(self, project: ProjectRef, project_id: str, event: TriggerEvent) -> AddResult:
        """Link the item directly, or add a draft issue for other owners.

        Items can only be linked from repositories of the project's owner;
        otherwise a draft issue titled with the item's URL is added.
        """
        if event.owner_login == project.owner_name:
            logger.info("Creating project item")
            item_id = self.client.add_item_by_id(project_id, event.node_id)
            return AddResult(item_id=item_id, project_id=project_id)

        logger.info("Creating draft issue in project")
        item_id = self.client.add_draft_issue(project_id, event.html_url)
        return AddResult(item_id=item_id, project_id=project_id, draft=True)

    def update_status(
        self,
        project: ProjectRef,
        project_id: str,
        item_id: str,
        status: str,
    ) -> None:
        """Set the item's "Status" field to the option named `status`.

        Args:
            project: Project parsed from its URL.
            project_id: Project node ID.
            item_id: Item added to the project.
            status: Exact name of the option to select.

        Raises:
            StatusFieldNotFoundError: If the project has no "Status" field.
            InvalidStatusOptionError: If no option is named `status`.
        """
        logger.debug("Status field override: %s", status)
        logger.info('Overriding "%s" field value on project item', STATUS_FIELD_NAME)

        field = self.client.get_status_field(project)
        option_id = field.option_id(status)
        logger.debug("`status-override` value's Single Select Field Option ID: %s", option_id)

        if option_id is None:
            raise InvalidStatusOptionError(
                f'Invalid "{STATUS_FIELD_NAME}" field option value provided: {status}'
            )

        self.client.update_single_select_value(project_id, item_id, field.id, option_id)
