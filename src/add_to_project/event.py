"""Trigger event payload for issue and pull request workflows."""

from __future__ import annotations

import json
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

from pydantic import BaseModel, ConfigDict, ValidationError


class EventError(Exception):
    """Raised when the trigger payload can't be used."""


# Webhook payload models. Only the fields read by the action are declared.


class LabelPayload(BaseModel):
    model_config = ConfigDict(extra="ignore")

    name: str


class OwnerPayload(BaseModel):
    model_config = ConfigDict(extra="ignore")

    login: str


class RepositoryPayload(BaseModel):
    model_config = ConfigDict(extra="ignore")

    owner: OwnerPayload | None = None


class IssuePayload(BaseModel):
    """Issue or pull request object; both share these fields."""

    model_config = ConfigDict(extra="ignore")

    number: int
    node_id: str
    html_url: str
    labels: list[LabelPayload] = []


class EventPayload(BaseModel):
    model_config = ConfigDict(extra="ignore")

    issue: IssuePayload | None = None
    pull_request: IssuePayload | None = None
    repository: RepositoryPayload | None = None


@dataclass(frozen=True)
class TriggerEvent:
    """The issue or pull request that triggered the run.

    Events without an issue or pull request have no number, node ID or URL
    and no labels.

    Attributes:
        number: Issue or pull request number.
        node_id: GraphQL node ID, used as content ID when adding the item.
        html_url: Web URL, used as the draft issue title for other owners.
        owner_login: Login of the repository owner, if the payload has one.
        labels: Lower-cased label names.
    """

    number: int | None = None
    node_id: str | None = None
    html_url: str | None = None
    owner_login: str | None = None
    labels: frozenset[str] = field(default_factory=frozenset)

    @property
    def has_item(self) -> bool:
        """Whether the payload carried an issue or pull request."""
        return self.node_id is not None

    @classmethod
    def from_payload(cls, payload: dict[str, Any]) -> TriggerEvent:
        """Build the event from a webhook payload.

        Args:
            payload: Decoded webhook JSON.

        Returns:
            TriggerEvent for the issue, or the pull request if there is none.

        Raises:
            EventError: If the payload is invalid.
        """
        try:
            event = EventPayload.model_validate(payload)
        except ValidationError as e:
            raise EventError(f"Invalid event payload: {e}") from e

        owner_login = None
        if event.repository is not None and event.repository.owner is not None:
            owner_login = event.repository.owner.login

        issue = event.issue or event.pull_request
        if issue is None:
            return cls(owner_login=owner_login)

        return cls(
            number=issue.number,
            node_id=issue.node_id,
            html_url=issue.html_url,
            owner_login=owner_login,
            labels=frozenset(label.name.lower() for label in issue.labels),
        )


def load_event(path: str | Path) -> TriggerEvent:
    """Load the trigger event from the runner's event file.

    Args:
        path: Path to the webhook JSON (GITHUB_EVENT_PATH).

    Returns:
        Parsed TriggerEvent.

    Raises:
        EventError: If the file can't be read or parsed.
    """
    try:
        payload = json.loads(Path(path).read_text(encoding="utf-8"))
    except (OSError, json.JSONDecodeError) as e:
        raise EventError(f"Could not read event payload from {path}: {e}") from e

    if not isinstance(payload, dict):
        raise EventError(f"Event payload in {path} is not a JSON object")

    return TriggerEvent.from_payload(payload)
