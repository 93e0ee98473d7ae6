"""Tests for the command-line interface."""

import json
from pathlib import Path

import pytest
from typer.testing import CliRunner

from asciigrid import __version__
from asciigrid.cli.app import app, demo_shapes
from asciigrid.core import Renderer

runner = CliRunner()


@pytest.fixture
def demo_text() -> str:
    """Expected grid for the built-in scene."""
    return Renderer().render_text(demo_shapes())


class TestCli:
    """Tests for the asciigrid command."""

    def test_no_arguments_renders_demo(self, demo_text):
        """Test the demo scene is drawn when no shapes are given."""
        result = runner.invoke(app, [])
        assert result.exit_code == 0
        assert result.output == demo_text

    def test_shape_specs(self):
        """Test shapes given on the command line."""
        result = runner.invoke(app, ["-s", "rect:0,0,2,1", "-q"])
        assert result.exit_code == 0
        assert result.output == "###\n###\n"

    def test_demo_added_to_shapes(self):
        """Test --demo combines with explicit shapes."""
        result = runner.invoke(app, ["-s", "dot:0,0", "--demo", "-q"])
        assert result.exit_code == 0
        lines = result.output.splitlines()
        assert len(lines) == 11
        assert lines[-1].startswith("#")

    def test_custom_characters(self):
        """Test --fill and --mark."""
        result = runner.invoke(
            app, ["-s", "square:0,0,2", "--fill", " ", "--mark", "o", "-q"]
        )
        assert result.exit_code == 0
        assert result.output == "ooo\no o\nooo\n"

    def test_scene_file(self, tmp_path: Path):
        """Test loading shapes from a scene file."""
        scene = tmp_path / "scene.json"
        scene.write_text(
            json.dumps([{"type": "vline", "start": [0, 0], "end": [0, 1]}]),
            encoding="utf-8",
        )
        result = runner.invoke(app, ["--scene", str(scene), "-q"])
        assert result.exit_code == 0
        assert result.output == "#\n#\n"

    def test_output_file(self, tmp_path: Path):
        """Test writing the grid to a file."""
        target = tmp_path / "grid.txt"
        result = runner.invoke(app, ["-s", "dot:3,3", "-o", str(target), "-q"])
        assert result.exit_code == 0
        assert target.read_text(encoding="utf-8") == "#\n"

    def test_invalid_shape(self):
        """Test invalid geometry exits with status 1."""
        result = runner.invoke(app, ["-s", "square:0,0,-1"])
        assert result.exit_code == 1
        assert "side must be positive" in result.output

    def test_slanted_vertical_line(self):
        """Test traversal errors exit with status 1."""
        result = runner.invoke(app, ["-s", "vline:0,0,1,0", "-q"])
        assert result.exit_code == 1
        assert "x coordinates differ" in result.output

    def test_missing_scene(self, tmp_path: Path):
        """Test a missing scene file is reported."""
        result = runner.invoke(app, ["--scene", str(tmp_path / "none.json")])
        assert result.exit_code == 1
        assert "Failed to load scene" in result.output

    def test_bad_fill(self):
        """Test multi-character fill is rejected."""
        result = runner.invoke(app, ["--fill", "ab"])
        assert result.exit_code == 1
        assert "Invalid settings" in result.output
        assert "fill_char" in result.output

    def test_bad_log_level(self):
        """Test an unknown logging level is reported instead of crashing."""
        result = runner.invoke(app, ["-s", "dot:0,0", "--log-level", "LOUD"])
        assert result.exit_code == 1
        assert not isinstance(result.exception, AttributeError)
        assert "Invalid settings" in result.output
        assert "log_level" in result.output

    def test_log_level_case_insensitive(self):
        """Test logging levels are accepted in lower case."""
        result = runner.invoke(app, ["-s", "dot:0,0", "--log-level", "error"])
        assert result.exit_code == 0
        assert result.output == "#\n"

    def test_bad_policy(self):
        """Test unknown out-of-bounds policy is rejected."""
        result = runner.invoke(app, ["--out-of-bounds", "maybe"])
        assert result.exit_code == 1
        assert "Invalid out-of-bounds policy" in result.output

    def test_verbose_and_quiet(self):
        """Test mutually exclusive output modes."""
        result = runner.invoke(app, ["-v", "-q"])
        assert result.exit_code == 1

    def test_version(self):
        """Test --version prints the version."""
        result = runner.invoke(app, ["--version"])
        assert result.exit_code == 0
        assert __version__ in result.output
