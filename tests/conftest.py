"""Shared pytest fixtures and configuration."""

import json
import logging
from pathlib import Path
from typing import Any

import pytest


# Register custom markers
def pytest_configure(config: pytest.Config) -> None:
    """Register custom markers for test categorization."""
    config.addinivalue_line("markers", "unit: fast tests with no external dependencies")
    config.addinivalue_line("markers", "integration: component interaction tests")
    config.addinivalue_line("markers", "real: tests against the live GitHub API (local only)")


# Shared fixtures


@pytest.fixture
def issue_payload() -> dict[str, Any]:
    """Webhook payload for an `issues` event in acme/widgets."""
    return {
        "action": "labeled",
        "issue": {
            "number": 42,
            "node_id": "I_kwDOABC123",
            "html_url": "https://github.com/acme/widgets/issues/42",
            "title": "Widget breaks on startup",
            "labels": [{"name": "Bug"}, {"name": "Help Wanted"}],
        },
        "repository": {
            "name": "widgets",
            "owner": {"login": "acme", "type": "Organization"},
        },
    }


@pytest.fixture
def event_file(tmp_path: Path, issue_payload: dict[str, Any]) -> Path:
    """Write the issue payload to a file, like GITHUB_EVENT_PATH."""
    path = tmp_path / "event.json"
    path.write_text(json.dumps(issue_payload))
    return path


@pytest.fixture(autouse=True)
def reset_logging():
    """Drop handlers added by setup_logging so streams don't leak between tests."""
    yield
    logger = logging.getLogger("add_to_project")
    for handler in list(logger.handlers):
        handler.close()
    logger.handlers.clear()
    logger.setLevel(logging.NOTSET)
