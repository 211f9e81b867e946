"""Tests for CLI commands."""

from pathlib import Path

import pytest
from typer.testing import CliRunner

import tincture
from tincture.cli import app, get_version


@pytest.fixture
def cli_runner():
    """Return a CLI test runner."""
    return CliRunner()


@pytest.fixture
def test_project(tmp_path: Path):
    """Create a temporary project with a brandspec.yaml."""
    brandspec = tmp_path / "brandspec.yaml"
    brandspec.write_text(
        """
brand: master
namespace: o-example
colors:
  brand: "#0d7680"
usecases:
  stripe:
    background: brand
"""
    )
    return tmp_path


def invoke(runner: CliRunner, project: Path, *args: str):
    return runner.invoke(app, [*args, "--project", str(project)])


class TestVersion:
    def test_version(self, cli_runner):
        result = cli_runner.invoke(app, ["--version"])
        assert result.exit_code == 0
        assert result.stdout.startswith("tincture ")

    def test_version_matches_package(self, cli_runner):
        result = cli_runner.invoke(app, ["--version"])
        assert get_version() == tincture.__version__
        assert result.stdout.strip() == f"tincture {tincture.__version__}"


class TestColorCommands:
    """Test mix, tone, text-color, and contrast."""

    def test_mix(self, cli_runner, tmp_path):
        result = invoke(cli_runner, tmp_path, "mix", "black", "white", "-n", "20")
        assert result.exit_code == 0, result.output
        assert result.stdout.strip() == "#cccccc"

    def test_mix_unknown_color(self, cli_runner, tmp_path):
        result = invoke(cli_runner, tmp_path, "mix", "o-example/missing", "white")
        assert result.exit_code == 1
        assert "o-example/missing" in result.output

    def test_tone(self, cli_runner, tmp_path):
        result = invoke(cli_runner, tmp_path, "tone", "black", "80")
        assert result.exit_code == 0, result.output
        assert result.stdout.strip() == "#333333"

    def test_text_color_warns_for_large_text_only(self, cli_runner, tmp_path):
        result = invoke(cli_runner, tmp_path, "text-color", "teal", "-o", "80")
        assert result.exit_code == 0, result.output
        assert "#cfe4e6" in result.stdout
        assert "Warning" in result.stdout

    def test_contrast(self, cli_runner, tmp_path):
        result = invoke(cli_runner, tmp_path, "contrast", "#ffffff", "#000000")
        assert result.exit_code == 0, result.output
        assert result.stdout.strip() == "21.00:1 AAA"

    def test_contrast_failure_exits_nonzero(self, cli_runner, tmp_path):
        result = invoke(cli_runner, tmp_path, "contrast", "white", "white")
        assert result.exit_code == 1
        assert "Error" in result.output


class TestProjectCommands:
    """Test commands that read the project's brandspec.yaml."""

    def test_palette(self, cli_runner, test_project):
        result = invoke(cli_runner, test_project, "palette")
        assert result.exit_code == 0, result.output
        assert "paper" in result.stdout
        assert "o-example/brand" in result.stdout

    def test_palette_other_brand(self, cli_runner, tmp_path):
        result = invoke(cli_runner, tmp_path, "palette", "--brand", "whitelabel")
        assert result.exit_code == 0, result.output
        assert "paper" not in result.stdout

    def test_resolve(self, cli_runner, test_project):
        result = invoke(cli_runner, test_project, "resolve", "o-colors/link")
        assert result.exit_code == 0, result.output
        assert "#0d7680" in result.stdout

    def test_resolve_derives_text(self, cli_runner, test_project):
        result = invoke(
            cli_runner, test_project, "resolve", "o-example/stripe", "--text-opacity", "80"
        )
        assert result.exit_code == 0, result.output
        assert "#cfe4e6" in result.stdout
        assert "derived" in result.stdout

    def test_resolve_nothing_matches(self, cli_runner, test_project):
        result = invoke(cli_runner, test_project, "resolve", "focus", "--property", "text")
        assert result.exit_code == 0, result.output
        assert "No usecase defines" in result.stdout

    def test_resolve_unknown_usecase(self, cli_runner, test_project):
        result = invoke(cli_runner, test_project, "resolve", "o-example/missing")
        assert result.exit_code == 1

    def test_css_to_file(self, cli_runner, test_project):
        output = test_project / "colors.css"
        result = invoke(cli_runner, test_project, "css", "--output", str(output))
        assert result.exit_code == 0, result.output
        css = output.read_text(encoding="utf-8")
        assert "--o-example-brand: #0d7680;" in css
        assert ".o-example-stripe-background" in css

    def test_invalid_brandspec(self, cli_runner, tmp_path):
        (tmp_path / "brandspec.yaml").write_text("colors: [unclosed\n")
        result = invoke(cli_runner, tmp_path, "palette")
        assert result.exit_code == 1
        assert "Invalid YAML" in result.output
