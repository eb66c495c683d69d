"""CLI entry point for the add-to-project action step.

Inputs are read from the same environment variables a runner sets for
action inputs (INPUT_PROJECT-URL, ...), so the command runs unchanged from
action.yml or locally with explicit options.
"""

from __future__ import annotations

import sys
from pathlib import Path

import click
import httpx

from add_to_project.config import ActionConfig, ConfigError, input_env_name
from add_to_project.event import EventError, load_event
from add_to_project.logging import get_logger, setup_logging
from add_to_project.projects import ProjectsClient, ProjectsError
from add_to_project.runner import ProjectItemRunner

logger = get_logger("cli")


@click.command()
@click.option(
    "--project-url",
    envvar=input_env_name("project-url"),
    help="URL of the project, e.g. https://github.com/orgs/<owner>/projects/<number>",
)
@click.option(
    "--github-token",
    envvar=input_env_name("github-token"),
    help="Token with access to the project",
)
@click.option(
    "--labeled",
    envvar=input_env_name("labeled"),
    help="Comma-separated labels to filter issues by",
)
@click.option(
    "--label-operator",
    envvar=input_env_name("label-operator"),
    help="How labels are matched: and, not, or (default: or)",
)
@click.option(
    "--status-override",
    envvar=input_env_name("status-override"),
    help='Option of the "Status" field to set on the item',
)
@click.option(
    "--event-path",
    envvar="GITHUB_EVENT_PATH",
    type=click.Path(path_type=Path),
    help="Path to the webhook event JSON (default: $GITHUB_EVENT_PATH)",
)
@click.option(
    "--graphql-url",
    envvar="GITHUB_GRAPHQL_URL",
    help="GraphQL endpoint (default: $GITHUB_GRAPHQL_URL or api.github.com)",
)
@click.option(
    "-v",
    "--verbose",
    is_flag=True,
    help="Enable debug output",
)
@click.version_option(package_name="add-to-project")
def main(
    project_url: str | None,
    github_token: str | None,
    labeled: str | None,
    label_operator: str | None,
    status_override: str | None,
    event_path: Path | None,
    graphql_url: str | None,
    verbose: bool,
) -> None:
    """Add the triggering issue or pull request to a GitHub project."""
    setup_logging(level="DEBUG" if verbose else None)

    try:
        config = ActionConfig.from_dict(
            {
                "project-url": project_url,
                "github-token": github_token,
                "labeled": labeled,
                "label-operator": label_operator,
                "status-override": status_override,
                "graphql-url": graphql_url,
            }
        )
        if event_path is None:
            raise ConfigError("No event payload: set GITHUB_EVENT_PATH or pass --event-path")
        event = load_event(event_path)

        with ProjectsClient(config.github_token, base_url=config.graphql_url) as client:
            result = ProjectItemRunner(config, client).run(event)

        if result is not None:
            kind = "draft issue" if result.draft else "item"
            logger.info("Added %s %s to project %s", kind, result.item_id, result.project_id)

    except ConfigError as e:
        logger.error("Configuration error: %s", e)
        sys.exit(1)
    except EventError as e:
        logger.error("Event error: %s", e)
        sys.exit(1)
    except ProjectsError as e:
        logger.error("%s", e)
        sys.exit(1)
    except httpx.HTTPError as e:
        logger.error("GraphQL request failed: %s", e)
        sys.exit(1)
