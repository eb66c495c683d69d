"""Configuration for a single add-to-project run."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Mapping

from add_to_project.labels import LabelOperator, parse_labels

DEFAULT_GRAPHQL_URL = "https://api.github.com/graphql"


class ConfigError(Exception):
    """Raised when a required input is missing or invalid."""


def input_env_name(name: str) -> str:
    """Environment variable a runner uses to pass an action input."""
    return f"INPUT_{name.replace(' ', '_').upper()}"


@dataclass(frozen=True)
class ActionConfig:
    """Inputs for one run, read once and passed to every step.

    Attributes:
        project_url: URL of the project board (`project-url`).
        github_token: Token used as bearer auth (`github-token`).
        labeled: Normalized label filter (`labeled`). Empty means no filter.
        label_operator: How `labeled` is matched (`label-operator`).
            Defaults to OR.
        status_override: Status option to set on the item
            (`status-override`). None leaves the field untouched.
        graphql_url: GraphQL endpoint (`GITHUB_GRAPHQL_URL` on runners).
    """

    project_url: str
    github_token: str
    labeled: tuple[str, ...] = ()
    label_operator: LabelOperator = LabelOperator.OR
    status_override: str | None = None
    graphql_url: str = DEFAULT_GRAPHQL_URL

    @classmethod
    def from_dict(cls, inputs: Mapping[str, str | None]) -> ActionConfig:
        """Create config from action inputs keyed by input name.

        Args:
            inputs: Mapping such as {"project-url": ..., "github-token": ...}.
                An optional "graphql-url" key overrides the endpoint.

        Returns:
            Parsed configuration object.

        Raises:
            ConfigError: If a required input is missing or blank.
        """

        def required(name: str) -> str:
            value = (inputs.get(name) or "").strip()
            if not value:
                raise ConfigError(f"Input required and not supplied: {name}")
            return value

        status_override = (inputs.get("status-override") or "").strip()

        return cls(
            project_url=required("project-url"),
            github_token=required("github-token"),
            labeled=parse_labels(inputs.get("labeled")),
            label_operator=LabelOperator.parse(inputs.get("label-operator")),
            status_override=status_override or None,
            graphql_url=(inputs.get("graphql-url") or "").strip() or DEFAULT_GRAPHQL_URL,
        )
