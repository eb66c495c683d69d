"""Unit tests for trigger event parsing."""

import json
from pathlib import Path
from typing import Any

import pytest

from add_to_project.event import EventError, TriggerEvent, load_event


@pytest.mark.unit
class TestFromPayload:
    """Tests for TriggerEvent.from_payload."""

    def test_issue_event(self, issue_payload: dict[str, Any]) -> None:
        """Fields are read from the issue and repository."""
        event = TriggerEvent.from_payload(issue_payload)

        assert event.number == 42
        assert event.node_id == "I_kwDOABC123"
        assert event.html_url == "https://github.com/acme/widgets/issues/42"
        assert event.owner_login == "acme"

    def test_labels_lowercased(self, issue_payload: dict[str, Any]) -> None:
        event = TriggerEvent.from_payload(issue_payload)

        assert event.labels == frozenset({"bug", "help wanted"})

    def test_pull_request_event(self, issue_payload: dict[str, Any]) -> None:
        """Pull request payloads are used when there is no issue."""
        payload = {
            "pull_request": {
                "number": 9,
                "node_id": "PR_kwDOXYZ",
                "html_url": "https://github.com/acme/widgets/pull/9",
            },
            "repository": issue_payload["repository"],
        }

        event = TriggerEvent.from_payload(payload)

        assert event.number == 9
        assert event.node_id == "PR_kwDOXYZ"
        assert event.labels == frozenset()

    def test_issue_preferred_over_pull_request(self, issue_payload: dict[str, Any]) -> None:
        payload = {
            **issue_payload,
            "pull_request": {
                "number": 9,
                "node_id": "PR_kwDOXYZ",
                "html_url": "https://github.com/acme/widgets/pull/9",
            },
        }

        assert TriggerEvent.from_payload(payload).number == 42

    def test_missing_repository(self, issue_payload: dict[str, Any]) -> None:
        """No repository in the payload leaves the owner unset."""
        del issue_payload["repository"]

        event = TriggerEvent.from_payload(issue_payload)

        assert event.owner_login is None

    def test_neither_issue_nor_pull_request(self) -> None:
        """Other events load with no item and no labels."""
        event = TriggerEvent.from_payload({"repository": {"owner": {"login": "acme"}}})

        assert not event.has_item
        assert event.number is None
        assert event.node_id is None
        assert event.labels == frozenset()
        assert event.owner_login == "acme"

    def test_invalid_issue(self, issue_payload: dict[str, Any]) -> None:
        """Issues missing required fields are rejected."""
        del issue_payload["issue"]["node_id"]

        with pytest.raises(EventError) as exc_info:
            TriggerEvent.from_payload(issue_payload)

        assert "Invalid event payload" in str(exc_info.value)


@pytest.mark.unit
class TestLoadEvent:
    """Tests for load_event."""

    def test_loads_event_file(self, event_file: Path) -> None:
        event = load_event(event_file)

        assert event.number == 42
        assert event.owner_login == "acme"

    def test_missing_file(self, tmp_path: Path) -> None:
        with pytest.raises(EventError) as exc_info:
            load_event(tmp_path / "missing.json")

        assert "Could not read event payload" in str(exc_info.value)

    def test_invalid_json(self, tmp_path: Path) -> None:
        path = tmp_path / "event.json"
        path.write_text("{not json")

        with pytest.raises(EventError):
            load_event(path)

    def test_not_an_object(self, tmp_path: Path) -> None:
        path = tmp_path / "event.json"
        path.write_text(json.dumps([1, 2, 3]))

        with pytest.raises(EventError) as exc_info:
            load_event(path)

        assert "not a JSON object" in str(exc_info.value)
