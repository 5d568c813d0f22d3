"""Unit tests for SummaryPresenter class."""

from io import StringIO
from pathlib import Path

import pytest
from rich.console import Console

from collada_writer.cli.presenters import SummaryPresenter, SummaryRequest


class TestSummaryPresenter:
    """Test suite for SummaryPresenter class."""

    @pytest.fixture
    def console(self):
        return Console(file=StringIO(), force_terminal=False, width=120)

    @pytest.fixture
    def presenter(self, console):
        return SummaryPresenter(console)

    def _output(self, console):
        return console.file.getvalue()

    def test_counts_table_and_output_path(self, presenter, console):
        presenter.present(
            SummaryRequest(
                scene_file=Path("turntable.toml"),
                element_counts={"cameras": 1, "visual_scenes": 1, "nodes": 3},
                errors=[],
                output_path=Path("out/turntable.dae"),
            )
        )

        output = self._output(console)
        assert "Document Summary: turntable.toml" in output
        assert "visual scenes" in output
        assert "3" in output
        assert "✓ Output: out/turntable.dae" in output

    def test_custom_title(self, presenter, console):
        presenter.present(
            SummaryRequest(
                scene_file=Path("turntable.toml"),
                element_counts={"cameras": 1},
                errors=[],
                title="Validation",
            )
        )

        assert "Validation: turntable.toml" in self._output(console)

    def test_errors_replace_output_line(self, presenter, console):
        presenter.present(
            SummaryRequest(
                scene_file=Path("broken.toml"),
                element_counts={},
                errors=["Node 'orphan' instantiates unknown camera '[ghost]'"],
                output_path=Path("broken.dae"),
            )
        )

        output = self._output(console)
        assert "✗ Node 'orphan' instantiates unknown camera '[ghost]'" in output
        assert "Output:" not in output
        assert "Document Summary" not in output
