"""Tests for CLI commands."""

from pathlib import Path

import pytest
from typer.testing import CliRunner

from themegen.cli import app


@pytest.fixture
def cli_runner():
    """Return a CLI test runner."""
    return CliRunner()


@pytest.fixture
def config_file(tmp_path: Path) -> Path:
    """Create a themegen.toml with a prefix."""
    path = tmp_path / "themegen.toml"
    path.write_text('[generator]\ncolor_variable_prefix = "app"\n')
    return path


class TestPascalCommand:
    def test_pascal(self, cli_runner):
        result = cli_runner.invoke(app, ["pascal", "HTTPServer"])
        assert result.exit_code == 0
        assert result.output.strip() == "http-server"


class TestColorCommand:
    def test_channels(self, cli_runner, config_file):
        """Test the color command prints name, value and reference."""
        result = cli_runner.invoke(
            app,
            ["color", "primary", "--r", "0", "--g", "102", "--b", "204", "--config", str(config_file)],
        )
        assert result.exit_code == 0
        assert "name:      --app-primary" in result.output
        assert "value:     0,102,204" in result.output
        assert "reference: rgb(var(--app-primary))" in result.output

    def test_hex_override(self, cli_runner, config_file):
        """Test --hex and --prefix override the config file."""
        result = cli_runner.invoke(
            app,
            [
                "color", "primary", "--r", "255", "--alpha", "0.5",
                "--hex", "--prefix", "ds", "--config", str(config_file),
            ],
        )
        assert result.exit_code == 0
        assert "name:      --ds-primary" in result.output
        assert "value:     #ff000080" in result.output
        assert "reference: var(--ds-primary)" in result.output

    def test_invalid_alpha(self, cli_runner, config_file):
        """Test an out-of-range alpha exits with an error."""
        result = cli_runner.invoke(
            app, ["color", "primary", "--alpha", "2", "--config", str(config_file)]
        )
        assert result.exit_code == 1

    def test_bad_config(self, cli_runner, tmp_path):
        """Test a malformed config file exits with an error."""
        path = tmp_path / "themegen.toml"
        path.write_text("[generator\n")
        result = cli_runner.invoke(app, ["color", "primary", "--config", str(path)])
        assert result.exit_code == 1


class TestVariantCommand:
    def test_scoped_translucent_variant(self, cli_runner, config_file):
        """Test a scoped variant embeds alpha in its stored value."""
        result = cli_runner.invoke(
            app,
            [
                "variant", "hover", "--r", "10", "--g", "20", "--b", "30",
                "--alpha", "0.25", "--scope", "primary", "--config", str(config_file),
            ],
        )
        assert result.exit_code == 0
        assert "name:      --color-variant-primary-hover" in result.output
        assert "value:     10,20,30,0.25" in result.output
        assert "reference: rgba(var(--color-variant-primary-hover))" in result.output
