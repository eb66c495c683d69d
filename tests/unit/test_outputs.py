"""Unit tests for step outputs."""

import logging
from pathlib import Path

import pytest

from add_to_project.outputs import set_output


@pytest.mark.unit
class TestSetOutput:
    """Tests for set_output."""

    def test_appends_to_output_file(self, tmp_path: Path) -> None:
        output_file = tmp_path / "output"
        output_file.write_text("previous=1\n")

        set_output("itemId", "PVTI_1", {"GITHUB_OUTPUT": str(output_file)})

        assert output_file.read_text() == "previous=1\nitemId=PVTI_1\n"

    def test_logs_on_package_logger(
        self, tmp_path: Path, caplog: pytest.LogCaptureFixture
    ) -> None:
        output_file = tmp_path / "output"

        with caplog.at_level(logging.DEBUG, logger="add_to_project"):
            set_output("itemId", "PVTI_1", {"GITHUB_OUTPUT": str(output_file)})

        assert [r.name for r in caplog.records] == ["add_to_project.outputs"]
        assert "Set output itemId=PVTI_1" in caplog.text

    def test_prints_without_runner(self, capsys: pytest.CaptureFixture[str]) -> None:
        set_output("itemId", "PVTI_1", {})

        assert capsys.readouterr().out == "itemId=PVTI_1\n"
