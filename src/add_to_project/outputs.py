"""Step outputs for GitHub Actions."""

from __future__ import annotations

import os
from pathlib import Path
from typing import Mapping

import click

from add_to_project.logging import get_logger

logger = get_logger("outputs")


def set_output(name: str, value: str, environ: Mapping[str, str] | None = None) -> None:
    """Publish a step output.

    Appends `name=value` to the file named by GITHUB_OUTPUT. Outside a
    runner the pair is printed to stdout instead.

    Args:
        name: Output name, e.g. "itemId".
        value: Single-line output value.
        environ: Environment to read GITHUB_OUTPUT from. Defaults to os.environ.
    """
    if environ is None:
        environ = os.environ

    output_path = environ.get("GITHUB_OUTPUT")
    if not output_path:
        click.echo(f"{name}={value}")
        return

    with Path(output_path).open("a", encoding="utf-8") as f:
        f.write(f"{name}={value}\n")
    logger.debug("Set output %s=%s", name, value)
